"""
Errors raised by the quantity engine and the component catalog.

Both are local and recoverable by the caller. A failed calculation never
returns a partial result.
"""


class CalculationError(ValueError):
    """Base class for every engine failure."""


class ValidationError(CalculationError):
    """An input field is missing, malformed or out of range."""

    def __init__(self, field: str, constraint: str, value=None):
        self.field = field
        self.constraint = constraint
        self.value = value
        super().__init__(f"Invalid {field}: {constraint} (got {value!r})")


class UnknownCatalogKey(CalculationError):
    """A frame size, platform length or system key is not in the catalog."""

    def __init__(self, kind: str, key, available=()):
        self.kind = kind
        self.key = key
        self.available = list(available)
        super().__init__(
            f"Unknown {kind}: {key!r}. Available: {self.available}"
        )

    @property
    def field(self) -> str:
        return self.kind
