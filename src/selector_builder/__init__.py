"""Fluent builder for CSS complex selectors."""

from selector_builder.core.builder import SelectorBuilder, css_selector_builder
from selector_builder.utils.exceptions import (
    ConstructionError,
    DuplicateViolation,
    InvalidCombinator,
    NotBuiltViolation,
    OrderViolation,
    SelectorBuilderError,
)

__version__ = "0.1.0"

__all__ = [
    "ConstructionError",
    "DuplicateViolation",
    "InvalidCombinator",
    "NotBuiltViolation",
    "OrderViolation",
    "SelectorBuilder",
    "SelectorBuilderError",
    "__version__",
    "css_selector_builder",
]
