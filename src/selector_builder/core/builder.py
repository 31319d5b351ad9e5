"""Fluent facade for building CSS selectors.

Example:
    >>> from selector_builder import css_selector_builder as builder
    >>> builder().id("main").class_("container").class_("editable").stringify()
    '#main.container.editable'
    >>> builder().combine(
    ...     builder().element("div").id("main"),
    ...     "+",
    ...     builder().element("table").id("data"),
    ... ).stringify()
    'div#main + table#data'

Each builder owns one accumulator. Two chains interleaved on the same
builder before either calls stringify() share that accumulator and corrupt
each other, so start every top-level selector from css_selector_builder().
"""

from __future__ import annotations

from selector_builder.core.accumulator import SelectorAccumulator
from selector_builder.utils.exceptions import NotBuiltViolation


class SelectorBuilder:
    """Chainable selector builder.

    Every chain method lazily creates the accumulator, appends to it and
    returns the builder. Violations propagate from the accumulator, which
    has already discarded its state.
    """

    def __init__(self, strict_combinators: bool = True) -> None:
        self.strict_combinators = strict_combinators
        self._accumulator: SelectorAccumulator | None = None

    def _active(self) -> SelectorAccumulator:
        if self._accumulator is None:
            self._accumulator = SelectorAccumulator(self.strict_combinators)
        return self._accumulator

    def element(self, value: str) -> SelectorBuilder:
        self._active().append_element(value)
        return self

    def id(self, value: str) -> SelectorBuilder:
        self._active().append_id(value)
        return self

    def class_(self, value: str) -> SelectorBuilder:
        self._active().append_class(value)
        return self

    def attr(self, value: str) -> SelectorBuilder:
        self._active().append_attribute(value)
        return self

    def pseudo_class(self, value: str) -> SelectorBuilder:
        self._active().append_pseudo_class(value)
        return self

    def pseudo_element(self, value: str) -> SelectorBuilder:
        self._active().append_pseudo_element(value)
        return self

    def combine(
        self,
        selector_a: SelectorBuilder | str,
        combinator: str,
        selector_b: SelectorBuilder | str,
    ) -> SelectorBuilder:
        """Join two selectors with a combinator.

        Builder operands are finalized through their own stringify();
        strings are taken as already rendered.

        Args:
            selector_a: Left-hand selector.
            combinator: One of ' ', '+', '~', '>'.
            selector_b: Right-hand selector.

        Returns:
            This builder, whose next stringify() yields
            ``"{selector_a} {combinator} {selector_b}"``.
        """
        left = _render(selector_a)
        right = _render(selector_b)
        self._active().set_combined(left, combinator, right)
        return self

    def stringify(self) -> str:
        """Render the selector built so far and reset the chain.

        Raises:
            NotBuiltViolation: If no chain method was ever called.
        """
        if self._accumulator is None:
            raise NotBuiltViolation()
        return self._accumulator.finalize()


def _render(selector: SelectorBuilder | str) -> str:
    if isinstance(selector, SelectorBuilder):
        return selector.stringify()
    return selector


def css_selector_builder(strict_combinators: bool = True) -> SelectorBuilder:
    """Start a new, isolated selector chain."""
    return SelectorBuilder(strict_combinators=strict_combinators)
