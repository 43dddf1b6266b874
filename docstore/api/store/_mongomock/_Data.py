"""Mock MongoDB-specific configuration data."""

from pydantic import BaseModel, Field


class _Data(BaseModel):
    """MongoMock configuration data.

    MongoMock is in-memory, so the URI is only kept for display purposes.
    """

    uri: str | None = Field(default=None, description="Ignored connection URI")

    model_config = {"extra": "forbid"}
