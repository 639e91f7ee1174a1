"""Error hierarchy for the selector builder."""

from __future__ import annotations

from objectkit.selector.model import Category


class SelectorError(Exception):
    """Base error for everything raised while building selectors."""


class OrderViolation(SelectorError):
    """A selector part was added after a part of higher rank."""

    def __init__(self, category: Category, previous: Category) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
        self.category = category
        self.previous = previous


class DuplicateCategory(SelectorError):
    """A single-valued part (element, id, pseudo-element) was set twice."""

    def __init__(self, category: Category) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            "time inside the selector"
        )
        self.category = category


class InvalidCombinator(SelectorError):
    """A combinator token outside ' ', '+', '~', '>' in strict mode."""

    def __init__(self, operator: str) -> None:
        super().__init__(f"Invalid combinator: {operator!r}")
        self.operator = operator
