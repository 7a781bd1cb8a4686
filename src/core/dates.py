"""HTTP date parsing.

Only the fixed layout sent in `Last-Modified` headers is accepted:
`Thu, 20 Nov 2025 09:17:38 GMT`. Day and month names are English regardless
of the process locale, which is why `time.strptime` (locale dependent for
`%a`/`%b`) is not used.
"""

from __future__ import annotations

import calendar
import re
from datetime import datetime

from core.domain.errors import HttpDateError

_WEEKDAYS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS: dict[str, int] = {
    name: index
    for index, name in enumerate(
        ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
        start=1,
    )
}

_HTTP_DATE = re.compile(
    r"(?P<weekday>[A-Za-z]{3}), "
    r"(?P<day>\d{2}) (?P<month>[A-Za-z]{3}) (?P<year>\d{4}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2}) GMT"
)


def parse_http_date(value: str) -> int:
    """Convert an HTTP date to milliseconds since the epoch (UTC).

    Raises `HttpDateError` on any mismatch; never returns a fallback value.
    """

    match = _HTTP_DATE.fullmatch(value.strip())
    if match is None:
        raise HttpDateError(value, "expected '<Www>, <DD> <Mmm> <YYYY> <hh>:<mm>:<ss> GMT'")

    weekday = match["weekday"]
    month = _MONTHS.get(match["month"])
    if weekday not in _WEEKDAYS:
        raise HttpDateError(value, f"unknown weekday {match['weekday']!r}")
    if month is None:
        raise HttpDateError(value, f"unknown month {match['month']!r}")

    try:
        moment = datetime(
            int(match["year"]),
            month,
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
        )
    except ValueError as exc:
        raise HttpDateError(value, str(exc)) from exc

    if _WEEKDAYS[moment.weekday()] != weekday:
        raise HttpDateError(value, f"{moment.date()} is not a {weekday}")

    seconds = calendar.timegm(moment.timetuple())
    if seconds < 0:
        raise HttpDateError(value, "date is before the epoch")
    return seconds * 1000
