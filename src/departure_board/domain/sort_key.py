"""Midnight-safe ordering key for departures."""

from datetime import time

MIDDAY_HOUR = 12
MINUTES_PER_DAY = 24 * 60


def compute_sort_key(departure_time: time, reference_hour: int) -> int:
    """Return minutes since the reference day's midnight for ordering.

    All departures are in the future, so when the query is made in the
    afternoon a morning hour means "after midnight". Those departures are
    pushed a day later. This only affects ordering, never displayed times.

    Args:
        departure_time: Wall-clock time of the departure.
        reference_hour: Hour (0-23) of the query's reference time.

    Returns:
        Sort key in minutes.
    """
    key = departure_time.hour * 60 + departure_time.minute
    if reference_hour > MIDDAY_HOUR and departure_time.hour < MIDDAY_HOUR:
        key += MINUTES_PER_DAY
    return key
