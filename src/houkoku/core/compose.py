"""Pure message composition - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date

from .bullets import indent_block, is_blank, normalize
from .timeofday import DEFAULT_DATE_FORMAT, format_date
from .variants import Role, Transition, Variant

CLOCK_ICON = "⏰"
CALENDAR_ICON = "📅"
RANGE_SEPARATOR = "〜"
TODO_HEADING = "todo"


@dataclass(frozen=True)
class ComposedMessage:
    """The two output documents."""

    chat_message: str
    todo_block: str = ""


def format_role_section(role: Role, text: str) -> str | None:
    """Label line plus normalized block, or None when the role is omitted."""
    if is_blank(text) and not role.required:
        return None
    return f"{role.label}\n{normalize(text)}"


def compose_chat_message(
    start_time: str,
    end_time: str,
    tasks: dict[str, str],
    roles: tuple[Role, ...],
) -> str:
    """
    Build the chat status message.

    Pure function - no I/O.

    Header first, then one section per role in the given order. Blank
    roles are left out unless the role is required.
    """
    sections = [f"{CLOCK_ICON} {start_time}{RANGE_SEPARATOR}{end_time}"]
    for role in roles:
        section = format_role_section(role, tasks.get(role.key, ""))
        if section is not None:
            sections.append(section)
    return "\n\n".join(sections)


def compose_todo_block(
    tasks: dict[str, str],
    roles: tuple[Role, ...],
    today: date,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> str:
    """
    Build the to-do block: a dated heading then each non-blank role as a
    top-level bullet with its tasks nested two spaces below it.

    Pure function - no I/O.
    """
    lines = [f"{CALENDAR_ICON} {format_date(today, date_format)}", "", TODO_HEADING]
    for role in roles:
        text = tasks.get(role.key, "")
        if is_blank(text):
            continue
        lines.append(f"- {role.label}")
        lines.append(indent_block(normalize(text)))
    return "\n".join(lines)


def compose(
    start_time: str,
    end_time: str,
    tasks: dict[str, str],
    variant: Variant,
    today: date,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> ComposedMessage:
    """
    Compose both documents for a variant.

    Pure function - no I/O. The date is supplied by the caller, so equal
    inputs always give equal output.
    """
    chat = compose_chat_message(start_time, end_time, tasks, variant.message_roles)
    todo = ""
    if variant.todo_roles:
        todo = compose_todo_block(tasks, variant.todo_roles, today, date_format)
    return ComposedMessage(chat_message=chat, todo_block=todo)


def after_copy(tasks: dict[str, str], variant: Variant) -> dict[str, str]:
    """
    Task fields after the chat message was delivered.

    Pure function - no I/O. The rotate transition overwrites whatever
    "completed" held before.
    """
    updated = dict(tasks)
    if variant.transition == Transition.ROTATE:
        updated["completed"] = tasks.get("next", "")
    updated["next"] = ""
    return updated
