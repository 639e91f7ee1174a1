"""Combinator: joins two selector expressions with a combinator token."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from objectkit.selector.errors import InvalidCombinator
from objectkit.selector.model import COMBINATOR_TOKENS, SelectorExpression

__all__ = ["Combinator"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Combinator:
    """Two selector expressions joined by *operator*.

    The operator is printed verbatim with one space on each side, so the
    descendant combinator ``" "`` renders as three spaces::

        tr:nth-of-type(even)   td:nth-of-type(even)

    No validation is done here; use :meth:`checked` to reject tokens other
    than ``' '``, ``'+'``, ``'~'`` and ``'>'``.
    """

    left: SelectorExpression
    operator: str
    right: SelectorExpression

    @classmethod
    def checked(
        cls, left: SelectorExpression, operator: str, right: SelectorExpression
    ) -> Combinator:
        """Build a combinator, raising :class:`InvalidCombinator` for unknown tokens."""
        if operator not in COMBINATOR_TOKENS:
            logger.debug("Rejected combinator token %r", operator)
            raise InvalidCombinator(operator)
        return cls(left, operator, right)

    def render(self) -> str:
        return f"{self.left.render()} {self.operator} {self.right.render()}"

    def __str__(self) -> str:
        return self.render()
