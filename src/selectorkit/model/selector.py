"""Selector model: an immutable, ordered chain of fragments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from selectorkit.errors import DuplicateFragmentError, OrderViolationError
from selectorkit.model.fragment import Fragment, FragmentKind

logger = logging.getLogger("selectorkit")


@dataclass(frozen=True)
class Selector:
    """A CSS selector value.

    Every append returns a new ``Selector``; the receiver is never modified, so
    a partial selector can be reused as the base of several continuations::

        base = Selector().element("a")
        base.class_("x").stringify()  # 'a.x'
        base.class_("y").stringify()  # 'a.y'

    A selector produced by combining two others carries its rendering in
    ``combined`` and accepts no further fragments.
    """

    fragments: tuple[Fragment, ...] = ()
    combined: str | None = None

    # --- introspection --------------------------------------------------------

    @property
    def is_combined(self) -> bool:
        return self.combined is not None

    @property
    def kinds(self) -> frozenset[FragmentKind]:
        """Fragment kinds already present in this selector."""
        return frozenset(f.kind for f in self.fragments)

    def has(self, kind: FragmentKind) -> bool:
        return kind in self.kinds

    # --- fragment operations --------------------------------------------------

    def element(self, value: str) -> Selector:
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    def append(self, kind: FragmentKind, value: str) -> Selector:
        """Return a copy of this selector extended by one fragment.

        Raises:
            DuplicateFragmentError: *kind* is a singleton already present.
            OrderViolationError: a later-ranked kind is already present, or
                this selector is a combined one.
        """
        if self.is_combined:
            logger.debug("Rejected %s %r: selector is combined", kind.value, value)
            raise OrderViolationError(
                "Combined selectors cannot be extended with further fragments",
                kind=kind.value,
                value=value,
            )
        if kind.singleton and kind in self.kinds:
            logger.debug("Rejected %s %r: duplicate", kind.value, value)
            raise DuplicateFragmentError(kind=kind.value, value=value)
        if any(f.kind.rank > kind.rank for f in self.fragments):
            logger.debug("Rejected %s %r: out of order", kind.value, value)
            raise OrderViolationError(kind=kind.value, value=value)

        fragment = Fragment(kind=kind, value=value)
        logger.debug("Appended %s fragment %r", kind.value, fragment.render())
        return replace(self, fragments=self.fragments + (fragment,))

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        if self.combined is not None:
            return self.combined
        return "".join(f.render() for f in self.fragments)

    def __str__(self) -> str:
        return self.stringify()
