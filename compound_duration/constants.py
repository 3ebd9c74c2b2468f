from compound_duration.typing import (
    UnitTable,
)

#
# Unit lengths, in seconds
#
SECOND = 1
MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY


#
# Unit tables, largest unit first
#
WDHMS_UNITS: UnitTable = (
    ("w", WEEK),
    ("d", DAY),
    ("h", HOUR),
    ("m", MINUTE),
    ("s", SECOND),
)

DHMS_UNITS: UnitTable = WDHMS_UNITS[1:]
