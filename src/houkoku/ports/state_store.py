"""Session state storage interface."""

from typing import Protocol


class StateStore(Protocol):
    """Interface for persisting the single current-session record."""

    def load(self) -> dict | None:
        """Read the stored record. Returns None if absent or unreadable."""
        ...

    def save(self, record: dict) -> None:
        """Overwrite the stored record."""
        ...
