"""System clipboard adapter backed by pyperclip."""

import pyperclip


class ClipboardError(Exception):
    """Raised when text could not be written to the clipboard."""


class PyperclipClipboard:
    """Implements Clipboard protocol using pyperclip's platform backends."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(str(e)) from e

