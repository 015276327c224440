"""Ports - interfaces/protocols for external dependencies."""

from .clipboard import Clipboard
from .notifier import Notifier, Severity
from .state_store import StateStore

__all__ = [
    "Clipboard",
    "Notifier",
    "Severity",
    "StateStore",
]
