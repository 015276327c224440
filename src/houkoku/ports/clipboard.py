"""Clipboard interface."""

from typing import Protocol


class Clipboard(Protocol):
    """Interface for delivering composed text to the system clipboard."""

    def copy(self, text: str) -> None:
        """Copy text. Raises ClipboardError when the write fails."""
        ...
