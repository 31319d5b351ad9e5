"""Shared pytest fixtures for selector builder tests.

Fixtures include a fresh accumulator, a fresh builder factory, a state
machine, and a clean configuration environment.
"""

from collections.abc import Callable

import pytest

from selector_builder.core.accumulator import SelectorAccumulator
from selector_builder.core.builder import SelectorBuilder, css_selector_builder
from selector_builder.core.states import FragmentOrderMachine

CONFIG_ENV_VARS = (
    "SELECTOR_BUILDER_STRICT_COMBINATORS",
    "SELECTOR_BUILDER_LOG_LEVEL",
)


@pytest.fixture
def accumulator() -> SelectorAccumulator:
    """Fresh accumulator with strict combinator checking."""
    return SelectorAccumulator()


@pytest.fixture
def builder() -> Callable[[], SelectorBuilder]:
    """Factory producing an isolated builder per call.

    Returns:
        The css_selector_builder factory, so tests read like library usage.
    """
    return css_selector_builder


@pytest.fixture
def machine() -> FragmentOrderMachine:
    """Fresh grammar-order state machine."""
    return FragmentOrderMachine()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove selector builder environment variables for the test.

    Also stops ConfigLoader from reading a stray .env file.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("selector_builder.utils.config.load_dotenv", lambda: None)
    return monkeypatch
