"""Interactive multi-line task editor.

A prompt_toolkit prompt whose Tab and Shift+Tab bindings hand the
buffer to the pure line editor. Binding the keys consumes them, so
focus never moves away from the field.
"""

from prompt_toolkit import PromptSession
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys

from .core.line_editor import on_structural_key

TOOLBAR = " Tab: indent  Shift+Tab: outdent  Esc Enter: save  Ctrl+C: cancel"


def apply_structural_key(buffer: Buffer, shift: bool) -> None:
    """Replace the buffer's document with the line editor's result."""
    result = on_structural_key(buffer.text, buffer.cursor_position, "Tab", shift)
    if result is not None:
        buffer.document = Document(result.text, result.cursor)


def build_key_bindings() -> KeyBindings:
    kb = KeyBindings()

    @kb.add(Keys.Tab)
    def _indent(event):
        apply_structural_key(event.current_buffer, shift=False)

    @kb.add(Keys.BackTab)
    def _outdent(event):
        apply_structural_key(event.current_buffer, shift=True)

    return kb


def edit_task_text(label: str, initial: str = "") -> str | None:
    """
    Open the editor on a task field.

    Returns the edited text, or None if the user cancelled.
    """
    session = PromptSession(
        multiline=True,
        key_bindings=build_key_bindings(),
        bottom_toolbar=TOOLBAR,
    )
    try:
        return session.prompt(f"{label}\n", default=initial)
    except (KeyboardInterrupt, EOFError):
        return None
