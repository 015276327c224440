"""Shared host-shell layer between the CLI and the interactive editor.

Loads and saves the session, applies events through the pure reducer,
and runs the copy-then-transition flow against the clipboard port.
"""

import logging
from dataclasses import replace
from datetime import date, datetime

from .adapters.click_notifier import ClickNotifier
from .adapters.file_state import FileStateStore
from .adapters.pyperclip_clipboard import ClipboardError, PyperclipClipboard
from .config import Config
from .core.compose import ComposedMessage, compose
from .core.session import CopySucceeded, Event, SessionState, from_record, reduce, to_record
from .core.variants import Variant, get_variant
from .ports import Clipboard, Notifier, Severity, StateStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> FileStateStore:
    """Resolve the state file from config."""
    return FileStateStore(config.state_file)


def get_clipboard() -> PyperclipClipboard:
    return PyperclipClipboard()


def get_notifier() -> ClickNotifier:
    return ClickNotifier()


def load_session(store: StateStore, config: Config, now: datetime | None = None) -> SessionState:
    """Rehydrate the saved session, or start a default one."""
    now = now or datetime.now()
    return from_record(store.load(), now, config.default_duration_minutes)


def save_session(store: StateStore, state: SessionState, now: datetime | None = None) -> SessionState:
    """
    Persist the session, best effort.

    A failed write is logged and the in-memory state is returned as-is.
    """
    now = now or datetime.now()
    try:
        store.save(to_record(state, now))
    except OSError as e:
        logger.error(f"Failed to save session: {e}")
        return state
    return replace(state, last_saved=now.isoformat())


def dispatch(
    store: StateStore,
    state: SessionState,
    event: Event,
    now: datetime | None = None,
) -> SessionState:
    """Apply one event and persist the result."""
    new_state = reduce(state, event)
    return save_session(store, new_state, now)


def compose_session(state: SessionState, config: Config, today: date | None = None) -> ComposedMessage:
    """Compose both documents for the configured variant."""
    today = today or date.today()
    return compose(
        state.start_time,
        state.end_time,
        state.tasks,
        get_variant(config.variant),
        today,
        config.date_format,
    )


def deliver(text: str, clipboard: Clipboard, notifier: Notifier, description: str) -> bool:
    """Copy text and report the outcome. Returns True on success."""
    try:
        clipboard.copy(text)
    except ClipboardError as e:
        logger.error(f"Copy failed: {e}")
        notifier.notify("Error", "Copy failed.", Severity.ERROR)
        return False
    notifier.notify("Copied", description)
    return True


def copy_message(
    store: StateStore,
    state: SessionState,
    config: Config,
    clipboard: Clipboard,
    notifier: Notifier,
    today: date | None = None,
) -> tuple[SessionState, bool]:
    """
    Copy the chat message, then rotate/clear the task fields.

    The transition only happens when the copy succeeded; on failure the
    state comes back unchanged.
    """
    variant: Variant = get_variant(config.variant)
    message = compose_session(state, config, today)
    ok = deliver(
        message.chat_message,
        clipboard,
        notifier,
        "Message copied to the clipboard. Tasks were updated.",
    )
    if not ok:
        return state, False
    return dispatch(store, state, CopySucceeded(variant)), True


def copy_todo(
    state: SessionState,
    config: Config,
    clipboard: Clipboard,
    notifier: Notifier,
    today: date | None = None,
) -> bool:
    """Copy the to-do block. Never changes the session."""
    message = compose_session(state, config, today)
    if not message.todo_block:
        notifier.notify("Nothing to copy", f"Variant '{config.variant}' has no to-do block.", Severity.ERROR)
        return False
    return deliver(message.todo_block, clipboard, notifier, "To-do list copied to the clipboard.")
