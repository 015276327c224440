"""Adapters - I/O implementations of ports."""

from .click_notifier import ClickNotifier
from .file_state import FileStateStore
from .pyperclip_clipboard import ClipboardError, PyperclipClipboard

__all__ = [
    "ClickNotifier",
    "ClipboardError",
    "FileStateStore",
    "PyperclipClipboard",
]
