"""Pure bullet-list formatting logic - no I/O dependencies."""

from dataclasses import dataclass

BULLET = "- "


@dataclass(frozen=True)
class BulletLine:
    """A single line split into indent, marker and content."""

    indent: int
    has_marker: bool
    content: str

    def render(self) -> str:
        marker = BULLET if self.has_marker else ""
        return f"{' ' * self.indent}{marker}{self.content}"


def _split_indent(line: str) -> tuple[str, str]:
    stripped = line.lstrip()
    return line[: len(line) - len(stripped)], stripped


def parse_bullet_line(line: str) -> BulletLine:
    """Decompose a line. Indent counts leading whitespace characters as-is."""
    indent, stripped = _split_indent(line)
    if stripped.startswith(BULLET):
        return BulletLine(len(indent), True, stripped[len(BULLET):])
    return BulletLine(len(indent), False, stripped)


def ensure_bullet_line(line: str) -> str:
    """
    Make a line start with exactly one bullet marker after its indent.

    Pure function - no I/O.

    "- foo" is kept, "-foo" becomes "- foo", "foo" becomes "- foo",
    and an empty line becomes a bare "- ".
    """
    indent, stripped = _split_indent(line)

    if not stripped:
        return BULLET

    if stripped.startswith(BULLET):
        return f"{indent}{stripped}"

    if stripped.startswith("-"):
        return f"{indent}{BULLET}{stripped[1:].lstrip()}"

    return f"{indent}{BULLET}{stripped}"


def normalize(raw: str) -> str:
    """
    Turn free-form task text into a canonical bulleted block.

    Pure function - no I/O.

    Trailing whitespace is trimmed, blank lines are dropped and every
    remaining line gets a bullet at its original indent. Blank input
    yields a single "- " so there is always something to render.
    """
    rows = [line.rstrip() for line in raw.split("\n")]
    rows = [ensure_bullet_line(line) for line in rows if line.strip()]
    return "\n".join(rows) if rows else BULLET


def indent_block(block: str, width: int = 2) -> str:
    """Indent every line of a block by `width` spaces."""
    pad = " " * width
    return "\n".join(f"{pad}{line}" for line in block.split("\n"))


def is_blank(text: str) -> bool:
    return not text.strip()
