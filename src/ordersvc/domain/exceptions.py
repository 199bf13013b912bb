"""Domain-level exceptions.

All failures the service reports to callers are subclasses of
DomainException so the HTTP and CLI layers can catch them uniformly and
map each subclass to one response.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A required field is missing or a business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """The order store or catalog failed while serving a request."""


class NotificationError(DomainException):
    """The mail relay refused or failed to deliver a message."""
