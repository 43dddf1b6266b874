"""Document store configuration with Pydantic validation."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, model_validator

from ._mongo._Data import _Data as _MongoData
from ._mongomock._Data import _Data as _MongomockData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "mongo": _MongoData,
    "mongomock": _MongomockData,
}

DEFAULT_LIVENESS_TIMEOUT_MS = 1000


class StoreConfig(BaseModel):
    type: str = Field(..., description="Store backend type")
    liveness_timeout_ms: int = Field(
        default=DEFAULT_LIVENESS_TIMEOUT_MS,
        gt=0,
        description="Timeout for the liveness ping, in milliseconds",
    )
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"store config must be a dict, got {type(values).__name__}")
        store_type = values.get("type")
        if not store_type:
            raise ValueError("store.type is required")
        config_data_class = _BACKEND_REGISTRY.get(store_type)
        if not config_data_class:
            raise ValueError(f"Unknown backend type: {store_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data")
        if data is None:
            raise ValueError("store.data is required")
        if not isinstance(data, (dict, config_data_class)):
            raise ValueError(f"store.data must be a dict, got {type(data).__name__}")
        if not isinstance(data, config_data_class):
            values["data"] = config_data_class(**data)
        return values

    @property
    def uri(self) -> str | None:
        return getattr(self.data, "uri", None)

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result

    @classmethod
    def from_uri(
        cls,
        uri: str,
        backend: str = "mongo",
        liveness_timeout_ms: int = DEFAULT_LIVENESS_TIMEOUT_MS,
    ) -> "StoreConfig":
        """Build a config from a bare connection string."""
        return cls(type=backend, liveness_timeout_ms=liveness_timeout_ms, data={"uri": uri})

    @classmethod
    def load(cls, path: Path) -> "StoreConfig":
        """Load and validate config from a JSON file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = Path(path).expanduser()
        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
