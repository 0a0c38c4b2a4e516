"""Fixtures for HTTP-level tests. The database is never contacted."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from sessionauth.app import App
from sessionauth.web.deps import OptionalPrincipalDep, PrincipalDep, get_principal, get_session_store
from sessionauth.web.server import create_fastapi_app


@pytest.fixture
def app_instance(config, monkeypatch):
    monkeypatch.setattr("sessionauth.core.core.AsyncMongoClient", MagicMock())
    return App(config)


@pytest.fixture
def user_collection(app_instance, monkeypatch):
    collection = AsyncMock()
    monkeypatch.setattr(app_instance._core.services.user, "_collection", collection)
    return collection


@pytest.fixture
def session_collection(app_instance, monkeypatch):
    collection = AsyncMock()
    monkeypatch.setattr(app_instance._core.services.session, "_collection", collection)
    return collection


@pytest.fixture
def downstream_calls():
    """Names of probe handlers that actually ran."""
    return []


@pytest.fixture
def fastapi_app(app_instance, config, downstream_calls):
    api = create_fastapi_app(app_instance, config)

    @api.get("/probe/required")
    async def required_probe(request: Request, principal: PrincipalDep) -> dict[str, Any]:
        downstream_calls.append("required")
        return {"principal": principal.model_dump(mode="json"), "attached": get_principal(request) == principal}

    @api.get("/probe/optional")
    async def optional_probe(request: Request, principal: OptionalPrincipalDep) -> dict[str, Any]:
        downstream_calls.append("optional")
        attached = get_principal(request)
        return {
            "principal": principal.model_dump(mode="json") if principal else None,
            "attached": attached.model_dump(mode="json") if attached else None,
        }

    return api


@pytest.fixture
def use_store(fastapi_app):
    """Route the access gates to the given store."""

    def _use(store):
        fastapi_app.dependency_overrides[get_session_store] = lambda: store
        return store

    return _use


@pytest.fixture
def client(fastapi_app):
    return TestClient(fastapi_app)
