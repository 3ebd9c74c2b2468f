from eth_utils import (
    ValidationError,
)


class CompoundDurationError(Exception):
    """
    Base class for all compound-duration errors.
    """


class InvalidUnitTable(CompoundDurationError, ValidationError):
    """
    Raised when a unit table cannot be used to split a duration: it is empty,
    holds a malformed entry, repeats a label, or is not ordered from the
    largest unit to the smallest.
    """
