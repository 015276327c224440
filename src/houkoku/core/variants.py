"""Page variants: which task roles exist and how they behave."""

from dataclasses import dataclass
from enum import Enum


class Transition(Enum):
    """What happens to the task fields after the message is copied."""

    CLEAR = "clear"  # "next" is emptied
    ROTATE = "rotate"  # "next" moves into "completed", then is emptied


@dataclass(frozen=True)
class Role:
    """A named task category backed by its own text field."""

    key: str
    label: str
    required: bool = False  # rendered as "- " even when blank


NEXT = Role("next", "【次にやること】", required=True)
COMPLETED = Role("completed", "【やったこと】")
MUST = Role("must", "must")
HAVE_TO = Role("have_to", "have to")


@dataclass(frozen=True)
class Variant:
    """A page layout: message roles, to-do roles, presets and post-copy rule."""

    name: str
    message_roles: tuple[Role, ...]
    todo_roles: tuple[Role, ...] = ()
    presets: tuple[int, ...] = (15, 30, 45, 60)
    transition: Transition = Transition.CLEAR
    adjustments: tuple[int, ...] = (-30, -15, -5, 5, 15, 30)

    @property
    def roles(self) -> tuple[Role, ...]:
        """All roles, message roles first, without duplicates."""
        seen: dict[str, Role] = {}
        for role in self.message_roles + self.todo_roles:
            seen.setdefault(role.key, role)
        return tuple(seen.values())

    def role(self, key: str) -> Role:
        for r in self.roles:
            if r.key == key:
                return r
        raise KeyError(f"Unknown role '{key}' for variant '{self.name}'")


REPORT = Variant(
    name="report",
    message_roles=(NEXT,),
    todo_roles=(MUST, HAVE_TO),
    presets=(5, 10, 15, 20, 25, 30, 45, 60),
    transition=Transition.CLEAR,
)

ROTATE = Variant(
    name="rotate",
    message_roles=(COMPLETED, NEXT),
    presets=(15, 30, 45, 60),
    transition=Transition.ROTATE,
)

VARIANTS = {v.name: v for v in (REPORT, ROTATE)}
DEFAULT_VARIANT = REPORT.name


def get_variant(name: str) -> Variant:
    """Look up a variant by name. Raises KeyError for unknown names."""
    try:
        return VARIANTS[name]
    except KeyError:
        raise KeyError(f"Unknown variant '{name}' (choose from: {', '.join(VARIANTS)})") from None
