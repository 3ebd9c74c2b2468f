from importlib.metadata import (
    version as __version,
)

from compound_duration.constants import (
    DAY,
    DHMS_UNITS,
    HOUR,
    MINUTE,
    SECOND,
    WDHMS_UNITS,
    WEEK,
)
from compound_duration.exceptions import (
    CompoundDurationError,
    InvalidUnitTable,
)
from compound_duration.formatting import (
    format_compound,
    format_dhms,
    format_duration,
    format_timedelta,
    format_wdhms,
    split_duration,
)


__version__ = __version("compound-duration")
