"""Index management response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class IndexInfo(BaseModel):
    """Index metadata as returned by the index endpoints."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    uid: str
    name: str | None = None
    primary_key: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UpdateReceipt(BaseModel):
    """Acknowledgement of an asynchronous document update."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    update_id: int
