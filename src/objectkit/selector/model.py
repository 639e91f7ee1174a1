"""Selector model: categories, the expression protocol, and SelectorFragment."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Protocol

__all__ = [
    "Category",
    "START_RANK",
    "COMBINATOR_TOKENS",
    "SelectorExpression",
    "SelectorFragment",
]


class Category(IntEnum):
    """Selector part kinds; the value is the rank a part must respect.

    Parts must be added in non-decreasing rank order:
        element#id.class[attr]:pseudoClass::pseudoElement
    """

    TYPE = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def single_valued(self) -> bool:
        return self in (Category.TYPE, Category.ID, Category.PSEUDO_ELEMENT)


# Rank before anything has been added.
START_RANK = -1

COMBINATOR_TOKENS = frozenset({" ", "+", "~", ">"})


class SelectorExpression(Protocol):
    """Anything that can be rendered to a selector string."""

    def render(self) -> str: ...


@dataclass
class SelectorFragment:
    """Accumulated parts of a single compound selector."""

    type_name: str = ""
    id: str = ""
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element: str = ""
    last_rank: int = START_RANK

    def is_set(self, category: Category) -> bool:
        """True if a single-valued *category* already holds a non-empty value."""
        if category is Category.TYPE:
            return bool(self.type_name)
        if category is Category.ID:
            return bool(self.id)
        if category is Category.PSEUDO_ELEMENT:
            return bool(self.pseudo_element)
        return False

    def render(self) -> str:
        parts = [self.type_name]
        if self.id:
            parts.append(f"#{self.id}")
        parts.extend(f".{name}" for name in self.classes)
        parts.extend(f"[{attr}]" for attr in self.attributes)
        parts.extend(f":{pc}" for pc in self.pseudo_classes)
        if self.pseudo_element:
            parts.append(f"::{self.pseudo_element}")
        return "".join(parts)
