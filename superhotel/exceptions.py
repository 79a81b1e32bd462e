class SuperHotelError(Exception):
    """Base class of every error raised by the managers."""


class ValidationError(SuperHotelError):
    """A required field or relationship is missing or holds an invalid value."""


class InvalidEntityError(SuperHotelError):
    """
    The entity is structurally unfit for the operation: it carries an id
    on create, or has none on update/delete.
    """


class EntityNotFoundError(InvalidEntityError):
    """The id given for an update or delete does not exist in the store."""


class ServiceFailure(SuperHotelError):
    """The backing store failed. The driver error is chained as __cause__."""
