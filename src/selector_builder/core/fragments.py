"""Selector fragment categories and the mutable state record.

A compound selector is made of six categories, always rendered in this
order:

    element#id.class[attr]:pseudo-class::pseudo-element

Element, id and pseudo-element hold at most one token. The other categories
may repeat and keep insertion order.
"""

from dataclasses import dataclass, field
from enum import Enum

from selector_builder.utils.exceptions import InvalidCombinator


class Category(Enum):
    """Selector fragment categories in CSS order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"

    @property
    def single_valued(self) -> bool:
        """True for element, id and pseudo-element."""
        return self in _SINGLE_VALUED

    @property
    def event(self) -> str:
        """Name of the state machine event that appends to this category."""
        return f"add_{self.value}"

    def format(self, value: str) -> str:
        """Apply the category's syntactic prefix (and suffix) to a raw value."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_SINGLE_VALUED = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_AFFIXES = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(Enum):
    """Symbols joining two compound selectors."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"

    @classmethod
    def parse(cls, symbol: str) -> "Combinator":
        """Look up a combinator by its symbol.

        Raises:
            InvalidCombinator: If the symbol is not a CSS combinator.
        """
        try:
            return cls(symbol)
        except ValueError as e:
            raise InvalidCombinator(symbol) from e


@dataclass
class SelectorState:
    """Working state of one selector under construction.

    Attributes:
        element: Tag name, at most one.
        id: ``#id`` token, at most one.
        class_: ``.class`` tokens in insertion order.
        attribute: ``[attr]`` tokens in insertion order.
        pseudo_class: ``:pseudo`` tokens in insertion order.
        pseudo_element: ``::pseudo`` token, at most one.
        combined: Pre-joined complex selector; overrides the categories for
            a single render.
    """

    element: list[str] = field(default_factory=list)
    id: list[str] = field(default_factory=list)
    class_: list[str] = field(default_factory=list)
    attribute: list[str] = field(default_factory=list)
    pseudo_class: list[str] = field(default_factory=list)
    pseudo_element: list[str] = field(default_factory=list)
    combined: str | None = None

    def tokens(self, category: Category) -> list[str]:
        """Return the (mutable) token list backing a category."""
        if category is Category.CLASS:
            return self.class_
        return getattr(self, category.value)

    def is_empty(self) -> bool:
        """Return True if nothing has been appended or combined."""
        return self.combined is None and not any(
            self.tokens(category) for category in Category
        )

    def render(self) -> str:
        """Concatenate all categories in CSS order with no separators."""
        return "".join("".join(self.tokens(category)) for category in Category)
