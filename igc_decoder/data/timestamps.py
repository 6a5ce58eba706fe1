"""
Timestamp resolution for IGC Decoder.

B records only carry a UTC time of day. The absolute instant is built from
the session date, and a fix that lies further before the previous fix than
the tolerance is taken to belong to the next day.
"""

import datetime
import logging
from typing import Optional

from ..config.constants import DEFAULT_ROLLOVER_TOLERANCE_SECONDS

logger = logging.getLogger("igc_decoder.timestamps")

ONE_DAY = datetime.timedelta(days=1)
DEFAULT_TOLERANCE = datetime.timedelta(seconds=DEFAULT_ROLLOVER_TOLERANCE_SECONDS)


def combine_utc(flight_date: datetime.date, time_of_day: datetime.time) -> datetime.datetime:
    """Build a timezone-aware UTC instant from a date and a time of day"""
    return datetime.datetime.combine(flight_date, time_of_day, tzinfo=datetime.timezone.utc)


def resolve_timestamp(flight_date: datetime.date,
                      time_of_day: datetime.time,
                      previous: Optional[datetime.datetime] = None,
                      tolerance: datetime.timedelta = DEFAULT_TOLERANCE) -> datetime.datetime:
    """
    Resolve the absolute instant of a fix.

    Args:
        flight_date: Date from the most recent date header
        time_of_day: Time decoded from the B record
        previous: Timestamp of the previous fix, if any
        tolerance: How far a fix may lie before the previous one
            before a day rollover is assumed

    Returns:
        datetime.datetime: UTC instant of the fix
    """
    timestamp = combine_utc(flight_date, time_of_day)

    if previous is None:
        return timestamp

    days = 0
    while timestamp < previous - tolerance:
        timestamp += ONE_DAY
        days += 1

    if days:
        logger.debug(f"Fix at {time_of_day.isoformat()} moved {days} day(s) forward past {previous.isoformat()}")

    return timestamp
