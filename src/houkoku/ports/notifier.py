"""User notification interface."""

from enum import Enum
from typing import Protocol


class Severity(Enum):
    INFO = "info"
    ERROR = "error"


class Notifier(Protocol):
    """Interface for short user-facing feedback messages."""

    def notify(self, title: str, description: str, severity: Severity = Severity.INFO) -> None:
        """Show a notification. Nothing is returned to the caller."""
        ...
