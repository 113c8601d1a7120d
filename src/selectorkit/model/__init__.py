"""selectorkit model layer -- public type re-exports."""

from selectorkit.model.fragment import Fragment, FragmentKind
from selectorkit.model.rectangle import Rectangle
from selectorkit.model.selector import Selector

__all__ = [
    # fragment
    "FragmentKind",
    "Fragment",
    # selector
    "Selector",
    # rectangle
    "Rectangle",
]
