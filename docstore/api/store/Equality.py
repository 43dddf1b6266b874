"""Single field equality pair used for filters and ``$set`` updates."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from .InvalidArgument import InvalidArgument


@dataclass(frozen=True)
class Equality:
    """One ``field == value`` pair.

    Filters and updates are restricted to exactly one pair. Callers may pass an
    ``Equality``, a ``(field, value)`` tuple, or a mapping with a single entry;
    see ``Equality.coerce``.
    """

    field: str
    value: Any

    def __post_init__(self) -> None:
        if not isinstance(self.field, str) or not self.field.strip():
            raise InvalidArgument(f"Field name can't be empty (found: {self.field!r})")

    def as_filter(self) -> dict[str, Any]:
        # $eq compares mapping values such as {"$gt": 1} literally
        return {self.field: {"$eq": self.value}}

    def as_set(self) -> dict[str, Any]:
        return {"$set": {self.field: self.value}}

    @classmethod
    def coerce(cls, value: "EqualityLike", argument: str = "filter") -> "Equality":
        """Normalize any accepted input form to an ``Equality``.

        Raises:
            InvalidArgument: If a mapping does not hold exactly one entry, or the
                input is of an unsupported type.
        """
        if isinstance(value, Equality):
            return value
        if isinstance(value, Mapping):
            if len(value) != 1:
                raise InvalidArgument(
                    f"{argument} must hold exactly one field/value pair (found {len(value)}: {list(value)!r})"
                )
            ((field, item),) = value.items()
            return cls(field, item)
        if isinstance(value, tuple) and len(value) == 2:
            return cls(value[0], value[1])
        raise InvalidArgument(
            f"{argument} must be an Equality, a (field, value) tuple or a single-entry mapping "
            f"(found: {type(value).__name__})"
        )


EqualityLike = Union[Equality, Mapping[str, Any], tuple[str, Any]]
