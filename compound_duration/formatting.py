import datetime
from typing import (
    List,
)

from eth_utils import (
    get_extended_debug_logger,
)

from compound_duration.constants import (
    DAY,
    DHMS_UNITS,
    WDHMS_UNITS,
)
from compound_duration.typing import (
    SplitDuration,
    UnitTable,
)
from compound_duration.validation import (
    validate_duration,
    validate_timedelta,
    validate_unit_table,
)

logger = get_extended_debug_logger("compound_duration.formatting")


def _split(total_seconds: int, units: UnitTable) -> SplitDuration:
    values: List[int] = []
    remainder = total_seconds
    for _, length in units:
        value, remainder = divmod(remainder, length)
        values.append(value)
    return tuple(values)


def _render(values: SplitDuration, units: UnitTable) -> str:
    compound_duration = "".join(
        f"{value}{label}" for value, (label, _) in zip(values, units) if value != 0
    )
    if not compound_duration:
        # an all-zero split still names the smallest unit
        smallest_label = units[-1][0]
        return f"0{smallest_label}"
    return compound_duration


def split_duration(total_seconds: int, units: UnitTable = WDHMS_UNITS) -> SplitDuration:
    """
    Split ``total_seconds`` into one value per unit of ``units``, by successive
    integer division.  Whatever is left below the smallest unit is dropped.

    >>> split_duration(6000000)
    (9, 6, 10, 40, 0)
    """
    validate_duration(total_seconds)
    validate_unit_table(units)
    return _split(total_seconds, units)


def format_compound(total_seconds: int, units: UnitTable = WDHMS_UNITS) -> str:
    """
    Render ``total_seconds`` as a compound duration over ``units``: the
    non-zero ``<value><label>`` segments concatenated from the largest unit
    down.  A duration with no non-zero segment renders as ``0`` followed by
    the label of the smallest unit, so the result is never empty.
    """
    values = split_duration(total_seconds, units)
    compound_duration = _render(values, units)

    logger.debug2(
        "Split %d seconds into %r -> %s", total_seconds, values, compound_duration
    )

    return compound_duration


def format_duration(total_seconds: int) -> str:
    """
    Convert seconds to a compound duration in weeks, days, hours, minutes and
    seconds.

    >>> format_duration(6000000)
    '9w6d10h40m'
    >>> format_duration(0)
    '0s'
    """
    return format_compound(total_seconds, WDHMS_UNITS)


format_wdhms = format_duration


def format_dhms(total_seconds: int) -> str:
    """
    Convert seconds to a compound duration in days, hours, minutes and seconds.
    Weeks are folded into days.

    >>> format_dhms(6000000)
    '69d10h40m'
    """
    return format_compound(total_seconds, DHMS_UNITS)


def format_timedelta(delta: datetime.timedelta, units: UnitTable = WDHMS_UNITS) -> str:
    """
    Format the whole seconds of a non-negative ``timedelta``.  Microseconds
    are truncated.
    """
    validate_timedelta(delta, title="Elapsed time")
    total_seconds = delta.days * DAY + delta.seconds
    return format_compound(total_seconds, units)
