from sessionauth.web.routers.auth import router as auth_router
from sessionauth.web.routers.health import router as health_router

__all__ = [
    "auth_router",
    "health_router",
]
