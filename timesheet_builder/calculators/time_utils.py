"""Time-slot utilities for the timesheet builder.

Clock times on the entry form are quantized to 15-minute slots. This module
maps a slot's clock string to its ordinal index within the day and back:
- ``"00:00"`` is slot 0, ``"23:45"`` is slot 95
- an unset time maps to the sentinel ``-1``

Durations and overlap checks work on these indices rather than on clock
strings.
"""

from typing import Optional, Tuple

SLOT_MINUTES = 15
SLOTS_PER_DAY = 24 * 60 // SLOT_MINUTES

# Sentinel index for an unset time
UNSET_INDEX = -1


def index_to_time(index: int) -> str:
    """Convert a slot index to its ``HH:MM`` clock string.

    Args:
        index: Slot index (0-95)

    Returns:
        Clock string of the slot

    Raises:
        ValueError: If the index is outside the day

    Example:
        >>> index_to_time(0)
        '00:00'
        >>> index_to_time(37)
        '09:15'
    """
    if not 0 <= index < SLOTS_PER_DAY:
        raise ValueError(
            f"Slot index must be between 0 and {SLOTS_PER_DAY - 1}, got {index}"
        )
    hours, minutes = divmod(index * SLOT_MINUTES, 60)
    return f"{hours:02d}:{minutes:02d}"


# Every selectable clock value, in day order
TIME_OPTIONS: Tuple[str, ...] = tuple(index_to_time(i) for i in range(SLOTS_PER_DAY))

_TIME_OPTION_SET = frozenset(TIME_OPTIONS)


def is_valid_time_option(value: Optional[str]) -> bool:
    """Check whether ``value`` is one of the 96 selectable clock strings."""
    return value in _TIME_OPTION_SET


def time_to_index(time: Optional[str]) -> int:
    """Convert an ``HH:MM`` clock string to its slot index.

    Args:
        time: Clock string, or empty/None when unset

    Returns:
        ``hours * 4 + minutes // 15``, or -1 when the time is unset.
        Callers must treat negative results as "not comparable".

    Example:
        >>> time_to_index("00:00")
        0
        >>> time_to_index("23:45")
        95
        >>> time_to_index("")
        -1
    """
    if not time:
        return UNSET_INDEX
    hours, minutes = time.split(":")
    return int(hours) * (60 // SLOT_MINUTES) + int(minutes) // SLOT_MINUTES
