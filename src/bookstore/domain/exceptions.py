"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the storefront can translate them uniformly into client-facing responses.
Anything that is *not* a DomainException is treated as an internal fault.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value or invariant was violated (e.g. a non-positive quantity)."""


class EntityNotFoundError(DomainException):
    """A requested book, cart line or wishlist entry does not exist."""


class PreconditionFailedError(DomainException):
    """The entity exists but its state does not allow the operation."""


class InsufficientStockError(PreconditionFailedError):
    """Requested quantity exceeds the book's available stock."""


class DuplicateEntryError(PreconditionFailedError):
    """The book is already present in the wishlist."""


class EmptyCartError(PreconditionFailedError):
    """Checkout was attempted on a cart without lines."""
