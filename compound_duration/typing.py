from typing import (
    Sequence,
    Tuple,
)

# (label, length in seconds), e.g. ("d", 86400)
Unit = Tuple[str, int]

UnitTable = Sequence[Unit]

SplitDuration = Tuple[int, ...]
