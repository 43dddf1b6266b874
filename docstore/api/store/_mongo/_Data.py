"""MongoDB-specific configuration data."""

from pydantic import BaseModel, Field, field_validator


class _Data(BaseModel):
    uri: str = Field(..., description="MongoDB connection URI (required).")

    model_config = {"extra": "forbid"}

    @field_validator("uri")
    @classmethod
    def validate_uri(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("store.data.uri is required when store.type is 'mongo'")
        if not v.startswith("mongodb"):
            raise ValueError(f"store.data.uri must start with 'mongodb://' or 'mongodb+srv://' (found: {v!r})")
        return v
