"""Unit tests for SelectorAccumulator.

Tests cover:
- Appending each category with its prefix
- Order and duplicate violations and their classification
- State reset after a violation
- Combined selectors and finalize semantics
- Snapshots
"""

import itertools
import logging

import pytest

from selector_builder.core.accumulator import SelectorAccumulator
from selector_builder.core.fragments import SelectorState
from selector_builder.utils.exceptions import (
    DuplicateViolation,
    InvalidCombinator,
    OrderViolation,
)

APPEND_METHODS = [
    "append_element",
    "append_id",
    "append_class",
    "append_attribute",
    "append_pseudo_class",
    "append_pseudo_element",
]

# Every (later, earlier) pair of categories in CSS order
BACKWARD_PAIRS = [
    (APPEND_METHODS[later], APPEND_METHODS[earlier])
    for later, earlier in itertools.product(range(6), repeat=2)
    if earlier < later
]


class TestAppend:
    """Tests for successful appends."""

    def test_all_categories(self, accumulator: SelectorAccumulator) -> None:
        """Every category should render with its prefix in CSS order."""
        accumulator.append_element("a")
        accumulator.append_id("main")
        accumulator.append_class("one")
        accumulator.append_class("two")
        accumulator.append_attribute("href")
        accumulator.append_pseudo_class("hover")
        accumulator.append_pseudo_element("after")
        assert accumulator.finalize() == "a#main.one.two[href]:hover::after"

    def test_repeated_attributes_keep_order(
        self, accumulator: SelectorAccumulator
    ) -> None:
        """Repeatable categories keep insertion order."""
        accumulator.append_attribute('type="text"')
        accumulator.append_attribute("required")
        assert accumulator.finalize() == '[type="text"][required]'

    def test_current_state_tracks_furthest_category(
        self, accumulator: SelectorAccumulator
    ) -> None:
        """current_state should name the furthest category reached."""
        assert accumulator.current_state == "empty"
        accumulator.append_element("p")
        accumulator.append_pseudo_class("first-child")
        assert accumulator.current_state == "at_pseudo_class"


class TestOrderViolation:
    """Tests for appends that break CSS order."""

    @pytest.mark.parametrize(("first", "second"), BACKWARD_PAIRS)
    def test_earlier_after_later_raises(
        self, accumulator: SelectorAccumulator, first: str, second: str
    ) -> None:
        """Appending an earlier category after a later one should fail."""
        getattr(accumulator, first)("x")
        with pytest.raises(OrderViolation) as exc_info:
            getattr(accumulator, second)("y")
        assert type(exc_info.value) is OrderViolation
        assert accumulator.finalize() == ""

    def test_violation_resets_state(self, accumulator: SelectorAccumulator) -> None:
        """State should be discarded before the error is raised."""
        accumulator.append_element("a")
        accumulator.append_class("icon")
        with pytest.raises(OrderViolation):
            accumulator.append_id("x")
        assert accumulator.is_empty()
        assert accumulator.current_state == "empty"
        assert accumulator.finalize() == ""

    def test_error_carries_transition(
        self, accumulator: SelectorAccumulator
    ) -> None:
        """The error should name the category and the source state."""
        accumulator.append_class("icon")
        with pytest.raises(OrderViolation) as exc_info:
            accumulator.append_element("a")
        assert exc_info.value.category == "element"
        assert exc_info.value.transition == ("at_class", "element")

    def test_violation_is_logged(
        self, accumulator: SelectorAccumulator, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Violations should be logged at debug level."""
        caplog.set_level(logging.DEBUG, logger="selector_builder")
        accumulator.append_attribute("x")
        with pytest.raises(OrderViolation):
            accumulator.append_class("y")
        assert "order_violation" in caplog.text


class TestDuplicateViolation:
    """Tests for single-valued categories appended twice."""

    @pytest.mark.parametrize(
        "method", ["append_element", "append_id", "append_pseudo_element"]
    )
    def test_second_token_raises(
        self, accumulator: SelectorAccumulator, method: str
    ) -> None:
        """Element, id and pseudo-element should not repeat."""
        getattr(accumulator, method)("x")
        with pytest.raises(DuplicateViolation):
            getattr(accumulator, method)("y")
        assert accumulator.is_empty()

    def test_duplicate_wins_over_order(
        self, accumulator: SelectorAccumulator
    ) -> None:
        """A repeated id after a class is a duplicate, not an order error."""
        accumulator.append_id("x")
        accumulator.append_class("c")
        with pytest.raises(DuplicateViolation):
            accumulator.append_id("y")

    def test_duplicate_message(self, accumulator: SelectorAccumulator) -> None:
        """The message should explain the multiplicity rule."""
        accumulator.append_element("a")
        with pytest.raises(DuplicateViolation, match="more than one time"):
            accumulator.append_element("b")


class TestCombined:
    """Tests for set_combined and finalize."""

    def test_combined_renders_with_spaces(
        self, accumulator: SelectorAccumulator
    ) -> None:
        """Combined selectors join with single spaces around the combinator."""
        accumulator.set_combined("div#main", "+", "table#data")
        assert accumulator.finalize() == "div#main + table#data"

    def test_descendant_combinator(self, accumulator: SelectorAccumulator) -> None:
        """The descendant combinator renders as three spaces."""
        accumulator.set_combined("tr", " ", "td")
        assert accumulator.finalize() == "tr   td"

    def test_combined_is_cleared_after_finalize(
        self, accumulator: SelectorAccumulator
    ) -> None:
        """A second finalize without appends should yield an empty string."""
        accumulator.set_combined("a", ">", "b")
        accumulator.finalize()
        assert accumulator.finalize() == ""

    def test_combined_leaves_fragments(
        self, accumulator: SelectorAccumulator
    ) -> None:
        """Fragments survive the combined finalize and render next time."""
        accumulator.append_element("p")
        accumulator.set_combined("a", "~", "b")
        assert accumulator.finalize() == "a ~ b"
        assert accumulator.finalize() == "p"

    def test_invalid_combinator_raises_and_resets(
        self, accumulator: SelectorAccumulator
    ) -> None:
        """Strict mode should reject unknown combinators."""
        accumulator.append_element("p")
        with pytest.raises(InvalidCombinator):
            accumulator.set_combined("a", "|", "b")
        assert accumulator.is_empty()

    def test_lenient_mode_accepts_any_combinator(self) -> None:
        """With strict_combinators off the symbol is taken as given."""
        accumulator = SelectorAccumulator(strict_combinators=False)
        accumulator.set_combined("a", "||", "b")
        assert accumulator.finalize() == "a || b"


class TestFinalize:
    """Tests for finalize on fragment selectors."""

    def test_finalize_resets(self, accumulator: SelectorAccumulator) -> None:
        """After finalize a new chain may start from any category."""
        accumulator.append_pseudo_element("before")
        assert accumulator.finalize() == "::before"
        accumulator.append_element("span")
        assert accumulator.finalize() == "span"

    def test_finalize_empty(self, accumulator: SelectorAccumulator) -> None:
        """Finalizing nothing yields an empty string."""
        assert accumulator.finalize() == ""


class TestSnapshot:
    """Tests for snapshot()."""

    def test_snapshot_is_a_copy(self, accumulator: SelectorAccumulator) -> None:
        """Mutating a snapshot must not affect the accumulator."""
        accumulator.append_class("a")
        snapshot = accumulator.snapshot()
        snapshot.class_.append(".b")
        assert accumulator.finalize() == ".a"

    def test_snapshot_contents(self, accumulator: SelectorAccumulator) -> None:
        """snapshot should expose the formatted tokens."""
        accumulator.append_element("a")
        accumulator.append_id("x")
        assert accumulator.snapshot() == SelectorState(element=["a"], id=["#x"])
