"""objectkit: a CSS selector builder plus small object helpers."""

from __future__ import annotations

from objectkit.config import SelectorConfig
from objectkit.selector import (
    Combinator,
    CssSelectorBuilder,
    DuplicateCategory,
    OrderViolation,
    SelectorBuilder,
    SelectorError,
    css_selector_builder,
)
from objectkit.serialization import from_json, to_json
from objectkit.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "SelectorConfig",
    "SelectorBuilder",
    "Combinator",
    "CssSelectorBuilder",
    "css_selector_builder",
    "SelectorError",
    "OrderViolation",
    "DuplicateCategory",
    "Rectangle",
    "to_json",
    "from_json",
]
