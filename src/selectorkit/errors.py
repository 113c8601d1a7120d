"""Error hierarchy for selectorkit."""

from __future__ import annotations


class SelectorkitError(Exception):
    """Base error for all selectorkit errors."""


class SelectorError(SelectorkitError, ValueError):
    """Raised when a selector fragment cannot be added."""

    def __init__(self, message: str, *, kind: str = "", value: str = "") -> None:
        super().__init__(message)
        self.kind = kind
        self.value = value


class DuplicateFragmentError(SelectorError):
    """Element, id or pseudo-element appended a second time."""

    def __init__(self, message: str = "", **kwargs: str) -> None:
        super().__init__(
            message
            or "Element, id and pseudo-element should not occur more than one time inside the selector",
            **kwargs,
        )


class OrderViolationError(SelectorError):
    """A fragment appended after a fragment that must render later."""

    def __init__(self, message: str = "", **kwargs: str) -> None:
        super().__init__(
            message
            or "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            **kwargs,
        )


class InvalidCombinatorError(SelectorError):
    """The combinator is not one of the configured tokens."""


class SerializationError(SelectorkitError, ValueError):
    """Raised when JSON text cannot be turned back into an object."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
