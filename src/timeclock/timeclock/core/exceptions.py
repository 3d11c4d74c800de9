class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ParseError(ValidationError):
    """Raised when a timestamp or duration string cannot be parsed."""

    def __init__(self, value: object, expected: str):
        super().__init__(f"Cannot parse {value!r} as {expected}")
        self.value = value
        self.expected = expected
