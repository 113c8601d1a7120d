"""Fragment model: the atomic pieces a CSS selector is built from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """Kinds of selector fragment, declared in their required render order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this kind in the element → pseudo-element order."""
        return _RANKS[self]

    @property
    def singleton(self) -> bool:
        """True if the kind may occur at most once per selector."""
        return self in _SINGLETONS

    def render(self, value: str) -> str:
        prefix, suffix = _TEMPLATES[self]
        return f"{prefix}{value}{suffix}"


_RANKS: dict[FragmentKind, int] = {kind: i for i, kind in enumerate(FragmentKind)}

_SINGLETONS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_TEMPLATES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class Fragment:
    """A single fragment: its kind plus the raw payload supplied by the caller."""

    kind: FragmentKind
    value: str

    def render(self) -> str:
        return self.kind.render(self.value)

    def __str__(self) -> str:
        return self.render()
