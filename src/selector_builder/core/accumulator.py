"""Selector accumulator: the mutable state of one selector under construction.

The accumulator owns a SelectorState record and a FragmentOrderMachine. Every
append is first offered to the state machine; if the machine refuses the
transition the whole state is discarded and a ConstructionError is raised,
so a half-built selector is never observable afterwards.
"""

import copy
import logging

from statemachine.exceptions import TransitionNotAllowed

from selector_builder.core.fragments import Category, Combinator, SelectorState
from selector_builder.core.states import FragmentOrderMachine
from selector_builder.utils.exceptions import (
    ConstructionError,
    DuplicateViolation,
    OrderViolation,
)

logger = logging.getLogger(__name__)


class SelectorAccumulator:
    """Collects selector fragments and enforces CSS ordering rules.

    Attributes:
        strict_combinators: Reject combinators other than ' ', '+', '~', '>'.
    """

    def __init__(self, strict_combinators: bool = True) -> None:
        self.strict_combinators = strict_combinators
        self._state = SelectorState()
        self._machine = FragmentOrderMachine()

    @property
    def current_state(self) -> str:
        """Id of the furthest category state reached, e.g. ``at_class``."""
        return self._machine.current_state.id

    def is_empty(self) -> bool:
        """Return True if no fragment or combined selector is pending."""
        return self._state.is_empty()

    def snapshot(self) -> SelectorState:
        """Return a copy of the working state."""
        return copy.deepcopy(self._state)

    def append_element(self, value: str) -> None:
        """Append a type selector, e.g. ``div``."""
        self._append(Category.ELEMENT, value)

    def append_id(self, value: str) -> None:
        """Append an id selector, rendered as ``#value``."""
        self._append(Category.ID, value)

    def append_class(self, value: str) -> None:
        """Append a class selector, rendered as ``.value``."""
        self._append(Category.CLASS, value)

    def append_attribute(self, value: str) -> None:
        """Append an attribute selector, rendered as ``[value]``."""
        self._append(Category.ATTRIBUTE, value)

    def append_pseudo_class(self, value: str) -> None:
        """Append a pseudo-class, rendered as ``:value``."""
        self._append(Category.PSEUDO_CLASS, value)

    def append_pseudo_element(self, value: str) -> None:
        """Append a pseudo-element, rendered as ``::value``."""
        self._append(Category.PSEUDO_ELEMENT, value)

    def set_combined(self, left: str, combinator: str, right: str) -> None:
        """Store a pre-joined complex selector for the next finalize().

        Args:
            left: Rendered left-hand selector.
            combinator: One of ' ', '+', '~', '>'.
            right: Rendered right-hand selector.

        Raises:
            InvalidCombinator: If strict_combinators is on and the symbol is
                not a CSS combinator. State is discarded first.
        """
        if self.strict_combinators:
            try:
                Combinator.parse(combinator)
            except ConstructionError:
                self._discard()
                raise
        self._state.combined = f"{left} {combinator} {right}"

    def finalize(self) -> str:
        """Render the selector and reset for the next chain.

        A stored combined selector wins over the fragment categories and is
        cleared on its own; the fragments are left as they are.
        """
        if self._state.combined is not None:
            result = self._state.combined
            self._state.combined = None
            logger.debug("finalized combined selector %r", result)
            return result

        result = self._state.render()
        self._discard()
        logger.debug("finalized selector %r", result)
        return result

    def _append(self, category: Category, value: str) -> None:
        source = self.current_state
        try:
            self._machine.send(category.event)
        except TransitionNotAllowed as e:
            error = self._violation(category, source)
            logger.debug(
                "%s: cannot add %s from %s", error.error_code, category.value, source
            )
            self._discard()
            raise error from e
        self._state.tokens(category).append(category.format(value))

    def _violation(self, category: Category, source: str) -> ConstructionError:
        if category.single_valued and self._state.tokens(category):
            return DuplicateViolation(category.value, source)
        return OrderViolation(category.value, source)

    def _discard(self) -> None:
        self._state = SelectorState()
        self._machine.discard()
