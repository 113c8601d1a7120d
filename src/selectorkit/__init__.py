"""selectorkit -- immutable CSS selector builder and small object helpers."""

from selectorkit.builder import SelectorBuilder, css_selector_builder
from selectorkit.config import SelectorkitConfig
from selectorkit.errors import (
    DuplicateFragmentError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorError,
    SelectorkitError,
    SerializationError,
)
from selectorkit.model import Fragment, FragmentKind, Rectangle, Selector
from selectorkit.serialization import from_json, get_json

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # builder
    "SelectorBuilder",
    "css_selector_builder",
    "SelectorkitConfig",
    # model
    "Fragment",
    "FragmentKind",
    "Selector",
    "Rectangle",
    # serialization
    "get_json",
    "from_json",
    # errors
    "SelectorkitError",
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    "InvalidCombinatorError",
    "SerializationError",
]
