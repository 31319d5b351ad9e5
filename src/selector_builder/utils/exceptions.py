"""Exception hierarchy for the selector builder.

All library exceptions inherit from SelectorBuilderError. Construction
errors carry the offending category and transition so callers can react
without parsing the message.
"""

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


class SelectorBuilderError(Exception):
    """Base exception for all selector builder errors."""


class ConfigurationError(SelectorBuilderError):
    """Invalid or missing configuration."""


class ConstructionError(SelectorBuilderError):
    """A selector chain could not be extended.

    The chain's state has already been discarded when this is raised; the
    caller must start a new chain.

    Attributes:
        category: Name of the category the caller tried to extend, if any.
        transition: Tuple of (source state id, requested category name).
    """

    error_code: str = "construction_error"

    def __init__(
        self,
        message: str,
        category: str | None = None,
        source: str | None = None,
    ) -> None:
        self.category = category
        self.source = source
        super().__init__(message)

    @property
    def transition(self) -> tuple[str | None, str | None]:
        return (self.source, self.category)


class OrderViolation(ConstructionError):  # noqa: N818
    """An earlier category was extended after a later one."""

    error_code: str = "order_violation"

    def __init__(self, category: str, source: str | None = None) -> None:
        super().__init__(ORDER_MESSAGE, category=category, source=source)


class DuplicateViolation(ConstructionError):  # noqa: N818
    """A single-valued category received a second token."""

    error_code: str = "duplicate_violation"

    def __init__(self, category: str, source: str | None = None) -> None:
        super().__init__(DUPLICATE_MESSAGE, category=category, source=source)


class NotBuiltViolation(ConstructionError):  # noqa: N818
    """stringify() was called before anything was built."""

    error_code: str = "not_built"

    def __init__(self) -> None:
        super().__init__("Nothing to stringify: no selector has been built")


class InvalidCombinator(ConstructionError):  # noqa: N818
    """The combinator symbol is not one of ' ', '+', '~', '>'."""

    error_code: str = "invalid_combinator"

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(
            f"Invalid combinator {symbol!r}: expected one of ' ', '+', '~', '>'"
        )
