"""SelectorBuilder: accumulates one compound selector under the rank ordering."""

from __future__ import annotations

import logging

from objectkit.selector.errors import DuplicateCategory, OrderViolation
from objectkit.selector.model import START_RANK, Category, SelectorFragment

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Fluent builder for ``element#id.class[attr]:pseudoClass::pseudoElement``.

    Every mutator returns the builder itself so calls can be chained.  Parts
    must be added in rank order (see :class:`Category`); a part of the same
    rank may be repeated only when it is multi-valued.

    Example::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus").render()
        # 'a[href$=".png"]:focus'
    """

    def __init__(self) -> None:
        self.fragment = SelectorFragment()

    # --- ordering ----------------------------------------------------------

    def _accept(self, category: Category) -> None:
        """Raise unless *category* may be added next; then record its rank."""
        last = self.fragment.last_rank
        if category < last:
            previous = Category(last)
            logger.debug(
                "Rejected %s after %s: out of order", category.name, previous.name
            )
            raise OrderViolation(category, previous)
        if category.single_valued and self.fragment.is_set(category):
            logger.debug("Rejected %s: already set", category.name)
            raise DuplicateCategory(category)
        self.fragment.last_rank = int(category)

    # --- mutators ----------------------------------------------------------

    def set_type(self, value: str) -> SelectorBuilder:
        self._accept(Category.TYPE)
        self.fragment.type_name = value
        return self

    def set_id(self, value: str) -> SelectorBuilder:
        self._accept(Category.ID)
        self.fragment.id = value
        return self

    def add_class(self, value: str) -> SelectorBuilder:
        self._accept(Category.CLASS)
        self.fragment.classes.append(value)
        return self

    def add_attribute(self, value: str) -> SelectorBuilder:
        self._accept(Category.ATTRIBUTE)
        self.fragment.attributes.append(value)
        return self

    def add_pseudo_class(self, value: str) -> SelectorBuilder:
        self._accept(Category.PSEUDO_CLASS)
        self.fragment.pseudo_classes.append(value)
        return self

    def set_pseudo_element(self, value: str) -> SelectorBuilder:
        self._accept(Category.PSEUDO_ELEMENT)
        self.fragment.pseudo_element = value
        return self

    # Chain aliases matching the facade vocabulary.
    element = set_type
    id = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    # --- rendering ---------------------------------------------------------

    def render(self) -> str:
        return self.fragment.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.render()!r})"
