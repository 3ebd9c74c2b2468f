import datetime
from typing import (
    Any,
    Union,
)

from eth_utils import (
    ValidationError,
)

from compound_duration.exceptions import (
    InvalidUnitTable,
)
from compound_duration.typing import (
    UnitTable,
)


def validate_is_integer(value: Union[int, bool], title: str = "Value") -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{title} must be an integer.  Got: {type(value)}")


def validate_gte(value: int, minimum: int, title: str = "Value") -> None:
    validate_is_integer(value, title=title)
    if value < minimum:
        raise ValidationError(
            f"{title} {value} is not greater than or equal to {minimum}"
        )


def validate_duration(value: int, title: str = "Duration") -> None:
    validate_gte(value, 0, title=title)


def validate_timedelta(value: datetime.timedelta, title: str = "Duration") -> None:
    if not isinstance(value, datetime.timedelta):
        raise ValidationError(f"{title} must be a timedelta.  Got: {type(value)}")
    if value < datetime.timedelta(0):
        raise ValidationError(f"{title} {value!r} is negative")


def _validate_unit(unit: Any, position: int) -> None:
    if not isinstance(unit, (tuple, list)) or len(unit) != 2:
        raise InvalidUnitTable(
            f"Unit #{position} must be a (label, length) pair.  Got: {unit!r}"
        )

    label, length = unit
    if not isinstance(label, str) or not label:
        raise InvalidUnitTable(
            f"Unit #{position} label must be a non-empty string.  Got: {label!r}"
        )
    if not isinstance(length, int) or isinstance(length, bool) or length <= 0:
        raise InvalidUnitTable(
            f"Unit #{position} ({label!r}) length must be a positive integer.  "
            f"Got: {length!r}"
        )


def validate_unit_table(units: UnitTable) -> None:
    if not isinstance(units, (tuple, list)):
        raise InvalidUnitTable(
            f"Unit table must be a tuple or list.  Got: {type(units)}"
        )
    if not units:
        raise InvalidUnitTable("Unit table must contain at least one unit")

    for position, unit in enumerate(units):
        _validate_unit(unit, position)

    labels = [label for label, _ in units]
    if len(set(labels)) != len(labels):
        raise InvalidUnitTable(f"Unit table labels must be unique.  Got: {labels}")

    lengths = [length for _, length in units]
    for larger, smaller in zip(lengths, lengths[1:]):
        if larger <= smaller:
            raise InvalidUnitTable(
                "Unit table must be ordered from the largest unit to the smallest.  "
                f"Got lengths: {lengths}"
            )
