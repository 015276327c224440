"""Pure structural key handling for multi-line task fields - no I/O dependencies."""

from dataclasses import dataclass

from .bullets import BulletLine, ensure_bullet_line, parse_bullet_line

INDENT_STEP = 2
STRUCTURAL_KEYS = frozenset({"Tab"})


@dataclass(frozen=True)
class EditResult:
    """Replacement text and cursor offset after a structural keystroke."""

    text: str
    cursor: int


def line_bounds(text: str, cursor: int) -> tuple[int, int]:
    """Return (line_start, line_end) of the line containing the cursor."""
    cursor = max(0, min(cursor, len(text)))
    line_start = text.rfind("\n", 0, cursor) + 1
    line_end = text.find("\n", cursor)
    if line_end == -1:
        line_end = len(text)
    return line_start, line_end


def leading_spaces(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def reindent_line(line: str, shift: bool) -> str:
    """
    Indent (or de-indent with shift) a single line and keep one bullet on it.

    Pure function - no I/O. Indentation never goes below zero.
    """
    step = -INDENT_STEP if shift else INDENT_STEP
    depth = max(0, leading_spaces(line) + step)
    bullet = parse_bullet_line(ensure_bullet_line(line.lstrip()))
    return BulletLine(depth, bullet.has_marker, bullet.content).render()


def on_structural_key(text: str, cursor: int, key: str, shift: bool = False) -> EditResult | None:
    """
    Apply Tab / Shift+Tab to the line under the cursor.

    Pure function - no I/O.

    Only the current line changes. The cursor lands right after the
    bullet marker so typing continues in the content. Returns None for
    keys that are not structural; the host keeps its default behavior
    for those.
    """
    if key not in STRUCTURAL_KEYS:
        return None

    line_start, line_end = line_bounds(text, cursor)
    new_line = reindent_line(text[line_start:line_end], shift)
    new_text = text[:line_start] + new_line + text[line_end:]

    hyphen = new_line.find("-")
    if hyphen >= 0:
        new_cursor = line_start + min(hyphen + 2, len(new_line))
    else:
        new_cursor = line_start + len(new_line)

    return EditResult(text=new_text, cursor=new_cursor)
