"""Result of an equality delete."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeleteOutcome:
    deleted_count: int

    @property
    def deleted(self) -> bool:
        return self.deleted_count > 0
