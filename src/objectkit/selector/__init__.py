from objectkit.selector.builder import SelectorBuilder
from objectkit.selector.combinator import Combinator
from objectkit.selector.errors import (
    DuplicateCategory,
    InvalidCombinator,
    OrderViolation,
    SelectorError,
)
from objectkit.selector.facade import CssSelectorBuilder, css_selector_builder
from objectkit.selector.model import (
    COMBINATOR_TOKENS,
    Category,
    SelectorExpression,
    SelectorFragment,
)

__all__ = [
    "SelectorBuilder",
    "Combinator",
    "CssSelectorBuilder",
    "css_selector_builder",
    "Category",
    "COMBINATOR_TOKENS",
    "SelectorExpression",
    "SelectorFragment",
    "SelectorError",
    "OrderViolation",
    "DuplicateCategory",
    "InvalidCombinator",
]
