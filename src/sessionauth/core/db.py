from typing import Annotated
from uuid import uuid4

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# Document ids are opaque: UUIDs, ObjectIds and provider-issued strings are all kept as their string form.
DocumentId = Annotated[str, BeforeValidator(str)]


def new_document_id() -> str:
    return str(uuid4())


class MongoModel(BaseModel):
    """Document model whose id is stored as MongoDB's _id."""

    id: DocumentId = Field(alias="_id", serialization_alias="id", default_factory=new_document_id)

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_serialization_defaults_required=True,
    )
