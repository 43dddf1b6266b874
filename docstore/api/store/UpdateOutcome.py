"""Result of an equality update."""

from collections.abc import Iterator, Mapping
from typing import Any


class UpdateOutcome(Mapping[str, Any]):
    """The applied ``{field: value}`` plus match and modification counts.

    Behaves as the single-entry mapping that was set, so it compares equal to
    e.g. ``{"age": "31"}``. ``matched`` tells callers whether any document was hit.
    """

    def __init__(self, field: str, value: Any, matched_count: int, modified_count: int):
        self.field = field
        self.value = value
        self.matched_count = matched_count
        self.modified_count = modified_count

    @property
    def matched(self) -> bool:
        return self.matched_count > 0

    def __getitem__(self, key: str) -> Any:
        if key != self.field:
            raise KeyError(key)
        return self.value

    def __iter__(self) -> Iterator[str]:
        return iter((self.field,))

    def __len__(self) -> int:
        return 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "update": {self.field: self.value},
            "matched_count": self.matched_count,
            "modified_count": self.modified_count,
        }

    def __repr__(self) -> str:
        return (
            f"UpdateOutcome({self.field!r}, {self.value!r}, "
            f"matched_count={self.matched_count}, modified_count={self.modified_count})"
        )
