"""Core module for selector construction.

This module exports the fragment types, the grammar-order state machine,
the accumulator and the builder facade.
"""

from selector_builder.core.accumulator import SelectorAccumulator
from selector_builder.core.builder import SelectorBuilder, css_selector_builder
from selector_builder.core.fragments import Category, Combinator, SelectorState
from selector_builder.core.states import FragmentOrderMachine

__all__ = [
    "Category",
    "Combinator",
    "FragmentOrderMachine",
    "SelectorAccumulator",
    "SelectorBuilder",
    "SelectorState",
    "css_selector_builder",
]
