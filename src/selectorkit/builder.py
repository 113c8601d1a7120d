"""Facade for building CSS selectors.

Each complex selector is made of element, id, class, attribute, pseudo-class
and pseudo-element fragments, always in that order::

    element#id.class[attr]:pseudo-class::pseudo-element

Classes, attributes and pseudo-classes may repeat; the other kinds occur at
most once. Finished selectors can be joined with the combinators ``" "``,
``">"``, ``"+"`` and ``"~"``::

    b = SelectorBuilder()
    b.combine(
        b.element("div").id("main"),
        "+",
        b.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'
"""

from __future__ import annotations

import logging

from selectorkit.config import SelectorkitConfig
from selectorkit.errors import InvalidCombinatorError
from selectorkit.model.selector import Selector

__all__ = ["SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger("selectorkit")


class SelectorBuilder:
    """Entry point that starts every selector from an empty one."""

    def __init__(self, config: SelectorkitConfig | None = None) -> None:
        self.config = config or SelectorkitConfig()

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Join two selectors as ``"<left> <combinator> <right>"``.

        The result is terminal: it renders to the joined string and accepts no
        further fragments.
        """
        if combinator not in self.config.combinators:
            raise InvalidCombinatorError(
                f"Unknown combinator {combinator!r}; expected one of "
                f"{', '.join(repr(c) for c in self.config.combinators)}",
                value=combinator,
            )
        combined = f"{left.stringify()} {combinator} {right.stringify()}"
        logger.debug("Combined selector %r", combined)
        return Selector(combined=combined)

    @staticmethod
    def stringify(selector: Selector) -> str:
        return selector.stringify()


css_selector_builder = SelectorBuilder()
