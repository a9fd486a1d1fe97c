"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidPriceError(ValidationError):
    """A product price was zero, negative or not a number."""


class InvalidQuantityError(ValidationError):
    """A cart quantity was zero or negative where a positive one is required."""
