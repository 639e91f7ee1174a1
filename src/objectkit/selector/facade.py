"""Facade: entry points that start a new selector or combine two."""

from __future__ import annotations

from objectkit.config import SelectorConfig
from objectkit.selector.builder import SelectorBuilder
from objectkit.selector.combinator import Combinator
from objectkit.selector.model import SelectorExpression

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Stateless facade; every call returns a fresh expression.

    Without an explicit *config*, settings are read from the environment
    (``OBJECTKIT_STRICT_COMBINATORS``).

    Example::

        b = css_selector_builder
        b.combine(b.element("div").id("main"), "+", b.element("table").id("data")).render()
        # 'div#main + table#data'
    """

    def __init__(self, config: SelectorConfig | None = None) -> None:
        self.config = config if config is not None else SelectorConfig.from_env()

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().set_type(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().set_id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().add_class(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().add_attribute(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().add_pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().set_pseudo_element(value)

    def combine(
        self, left: SelectorExpression, operator: str, right: SelectorExpression
    ) -> Combinator:
        if self.config.strict_combinators:
            return Combinator.checked(left, operator, right)
        return Combinator(left, operator, right)


css_selector_builder = CssSelectorBuilder()
