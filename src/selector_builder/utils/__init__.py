"""Utilities module for the selector builder."""

from .config import AppConfig, ConfigLoader
from .exceptions import (
    ConfigurationError,
    ConstructionError,
    DuplicateViolation,
    InvalidCombinator,
    NotBuiltViolation,
    OrderViolation,
    SelectorBuilderError,
)
from .serialization import from_json, to_json

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "ConfigurationError",
    "ConstructionError",
    "DuplicateViolation",
    "InvalidCombinator",
    "NotBuiltViolation",
    "OrderViolation",
    "SelectorBuilderError",
    "from_json",
    "to_json",
]
