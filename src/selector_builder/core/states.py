"""State machine for compound selector construction.

This module defines the FragmentOrderMachine that enforces the CSS grammar
order of selector fragments. It uses python-statemachine to enforce state
transition rules.

Each state records the furthest category reached so far:
- Entry: empty (initial)
- Single-valued: at_element, at_id, at_pseudo_element
- Repeatable: at_class, at_attribute, at_pseudo_class

Transitions only move forward through the CSS order, or stay in place for
repeatable categories. Anything else raises TransitionNotAllowed.
"""

import logging

from statemachine import State as SMState
from statemachine import StateMachine

logger = logging.getLogger(__name__)


class FragmentOrderMachine(StateMachine):
    """State machine for the grammar order of one compound selector.

    Attributes:
        step: Counter that increments on each state transition.

    States:
        empty: Nothing appended yet.
        at_element: An element (type) selector was appended.
        at_id: An id selector was appended.
        at_class: One or more class selectors were appended.
        at_attribute: One or more attribute selectors were appended.
        at_pseudo_class: One or more pseudo-class selectors were appended.
        at_pseudo_element: A pseudo-element selector was appended.
    """

    empty = SMState(initial=True)

    at_element = SMState()
    at_id = SMState()
    at_class = SMState()
    at_attribute = SMState()
    at_pseudo_class = SMState()
    at_pseudo_element = SMState()

    # Transitions

    add_element = empty.to(at_element)

    add_id = empty.to(at_id) | at_element.to(at_id)

    add_class = (
        empty.to(at_class)
        | at_element.to(at_class)
        | at_id.to(at_class)
        | at_class.to(at_class)
    )

    add_attribute = (
        empty.to(at_attribute)
        | at_element.to(at_attribute)
        | at_id.to(at_attribute)
        | at_class.to(at_attribute)
        | at_attribute.to(at_attribute)
    )

    add_pseudo_class = (
        empty.to(at_pseudo_class)
        | at_element.to(at_pseudo_class)
        | at_id.to(at_pseudo_class)
        | at_class.to(at_pseudo_class)
        | at_attribute.to(at_pseudo_class)
        | at_pseudo_class.to(at_pseudo_class)
    )

    add_pseudo_element = (
        empty.to(at_pseudo_element)
        | at_element.to(at_pseudo_element)
        | at_id.to(at_pseudo_element)
        | at_class.to(at_pseudo_element)
        | at_attribute.to(at_pseudo_element)
        | at_pseudo_class.to(at_pseudo_element)
    )

    # discard: any state -> empty, after finalize or a failed append
    discard = (
        empty.to(empty)
        | at_element.to(empty)
        | at_id.to(empty)
        | at_class.to(empty)
        | at_attribute.to(empty)
        | at_pseudo_class.to(empty)
        | at_pseudo_element.to(empty)
    )

    def __init__(self) -> None:
        """Initialize the state machine with a step counter."""
        self.step: int = 0
        super().__init__()

    def after_transition(self, event: str, source: SMState, target: SMState) -> None:
        """Callback invoked after any state transition.

        Args:
            event: The event that triggered this state change.
            source: The state we're transitioning from.
            target: The state we're transitioning to.
        """
        self.step += 1
        logger.debug("%s: %s -> %s", event, source.id, target.id)
