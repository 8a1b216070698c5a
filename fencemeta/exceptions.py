class FenceMetaError(Exception):
    """Base exception for code fence metadata handling."""


class UnsupportedPredicateError(FenceMetaError, TypeError):
    """Raised when an include/filter option has an unsupported type."""

    def __init__(self, option: object):
        super().__init__(f"Unsupported predicate option: {option!r} ({type(option).__name__})")
        self.option = option


class UnrepresentableValueError(FenceMetaError, ValueError):
    """Raised when an attribute cannot be written back as info string text."""

    def __init__(self, key: str, value: str, *, message: str | None = None):
        super().__init__(message or f"Attribute {key!r} with value {value!r} cannot be serialized")
        self.key = key
        self.value = value
