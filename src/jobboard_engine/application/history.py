"""Single-slot undo history for application statuses.

Usage example:
    from jobboard_engine.application.history import UndoHistoryTracker
    from jobboard_engine.domain.application import ApplicationStatus

    history = UndoHistoryTracker()
    history.record(" ABC", ApplicationStatus.PENDING)
    assert history.get("abc") is ApplicationStatus.PENDING
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from ..domain.application import ApplicationStatus
from ..exceptions import NotFoundError, ValidationError
from ..normalization import normalize_application_id


@dataclass(frozen=True)
class HistorySnapshot:
    """The state of one history slot before a write, used for rollback."""

    key: str
    previous: ApplicationStatus | None


def _empty_entries() -> dict[str, ApplicationStatus]:
    return {}


@dataclass
class UndoHistoryTracker:
    """Most recently departed-from status per application.

    Holds at most one value per normalized id. Owned by one caller session
    and not safe for concurrent writers.
    """

    _entries: dict[str, ApplicationStatus] = field(default_factory=_empty_entries)

    @staticmethod
    def key_for(application_id: str) -> str:
        key = normalize_application_id(application_id)
        if not key:
            raise ValidationError.blank_application_id()
        return key

    def get(self, application_id: str) -> ApplicationStatus:
        """Return the recorded previous status.

        Raises:
            NotFoundError: If nothing has been recorded for the id.
        """
        key = self.key_for(application_id)
        try:
            return self._entries[key]
        except KeyError as exc:
            raise NotFoundError(key) from exc

    def peek(self, application_id: str) -> ApplicationStatus | None:
        return self._entries.get(self.key_for(application_id))

    def record(self, application_id: str, previous: ApplicationStatus) -> HistorySnapshot:
        """Overwrite the slot for an id and return what it held before."""
        key = self.key_for(application_id)
        snapshot = HistorySnapshot(key=key, previous=self._entries.get(key))
        self._entries[key] = previous
        return snapshot

    def restore(self, snapshot: HistorySnapshot) -> None:
        """Put a slot back exactly as a snapshot saw it."""
        if snapshot.previous is None:
            self._entries.pop(snapshot.key, None)
        else:
            self._entries[snapshot.key] = snapshot.previous

    def __contains__(self, application_id: object) -> bool:
        if not isinstance(application_id, str):
            return False
        return normalize_application_id(application_id) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
