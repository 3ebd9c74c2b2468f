from eth_utils import (
    ValidationError,
)
import pytest

from compound_duration import (
    CompoundDurationError,
    InvalidUnitTable,
    WDHMS_UNITS,
    format_dhms,
    format_duration,
    split_duration,
)
from compound_duration.validation import (
    validate_duration,
    validate_gte,
    validate_is_integer,
    validate_unit_table,
)


@pytest.mark.parametrize("value", (0, 1, 2**64))
def test_validate_duration_accepts_unsigned(value):
    validate_duration(value)


@pytest.mark.parametrize("value", (-1, 1.0, 1.5, "60", None, True, False))
def test_validate_duration_rejects(value):
    with pytest.raises(ValidationError):
        validate_duration(value)


@pytest.mark.parametrize("value", (True, 1.0, b"\x01"))
def test_validate_is_integer_rejects(value):
    with pytest.raises(ValidationError, match="must be an integer"):
        validate_is_integer(value, title="Seconds")


def test_validate_gte_names_the_value():
    with pytest.raises(ValidationError, match="Seconds -5 is not greater"):
        validate_gte(-5, 0, title="Seconds")


@pytest.mark.parametrize("formatter", (format_duration, format_dhms, split_duration))
@pytest.mark.parametrize("value", (-1, 60.0, "60"))
def test_formatters_reject_out_of_domain(formatter, value):
    with pytest.raises(ValidationError):
        formatter(value)


def test_validate_unit_table_accepts_builtin():
    validate_unit_table(WDHMS_UNITS)


@pytest.mark.parametrize(
    "units",
    (
        (),
        [],
        "wdhms",
        {"s": 1},
        (("s",),),
        (("s", 1, "extra"),),
        (("", 1),),
        ((1, 1),),
        (("s", 0),),
        (("s", -1),),
        (("s", 1.0),),
        (("s", True),),
        (("m", 60), ("m", 1)),
        (("s", 1), ("m", 60)),
        (("m", 60), ("n", 60)),
    ),
)
def test_validate_unit_table_rejects(units):
    with pytest.raises(InvalidUnitTable):
        validate_unit_table(units)


def test_invalid_unit_table_is_a_validation_error():
    with pytest.raises(ValidationError):
        split_duration(60, (("s", 1), ("m", 60)))
    assert issubclass(InvalidUnitTable, CompoundDurationError)
