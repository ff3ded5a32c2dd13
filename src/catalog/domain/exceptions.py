"""Domain-level exceptions.

All catalog errors are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An invariant was violated or input was rejected."""


class EntityNotFoundError(DomainException):
    """A lookup by identifier found no match."""


class StorageError(DomainException):
    """The backing store holds data that cannot be read back."""
