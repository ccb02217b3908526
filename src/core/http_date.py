import calendar
import re
from datetime import datetime

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# Www, DD Mon YYYY H:MM:SS ZONE
_RFC1123 = re.compile(
    r"^(?P<weekday>[A-Z][a-z]{2}), (?P<day>\d{2}) (?P<month>[A-Z][a-z]{2}) "
    r"(?P<year>\d{4}) (?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2}) "
    r"(?P<zone>\S+)$"
)
_GMT_OFFSET = re.compile(r"^GMT(?P<sign>[+-])(?P<hours>\d{1,2})$")


def _zone_offset(zone: str) -> int:
    """
    Offset of a zone abbreviation in seconds east of UTC.

    Accepts three upper-case letters, four or five ending in "T", the
    special cases ChST, MeST and WITA, and GMT with a signed hour offset.
    Named zones other than GMT+N carry no offset.
    """
    gmt = _GMT_OFFSET.match(zone)
    if gmt:
        hours = int(gmt["hours"])
        if hours > 23:
            raise ValueError(f"invalid zone offset {zone!r}")
        return hours * 3600 if gmt["sign"] == "+" else -hours * 3600
    if zone in ("ChST", "MeST", "WITA"):
        return 0
    if zone.isascii() and zone.isalpha() and zone.isupper():
        if len(zone) == 3 or (len(zone) in (4, 5) and zone.endswith("T")):
            return 0
    raise ValueError(f"unknown time zone {zone!r}")


def parse_rfc1123(value: str) -> float:
    """
    Parse an RFC 1123 HTTP date into Unix epoch seconds.

    Only the RFC 1123 form is accepted; RFC 850 and asctime dates are
    rejected. Zone abbreviations are read as UTC offsets of zero, except
    GMT+N and GMT-N.

    Args:
        value (str): Header value, e.g. "Mon, 02 Jan 2006 15:04:05 GMT".

    Returns:
        float: Whole seconds since the epoch.

    Raises:
        ValueError: If the value is empty or not a valid RFC 1123 date.
    """
    if not value:
        raise ValueError("missing date")
    match = _RFC1123.match(value)
    if not match:
        raise ValueError(f"cannot parse {value!r} as RFC 1123 date")
    if match["weekday"] not in WEEKDAYS:
        raise ValueError(f"unknown day name {match['weekday']!r}")
    if match["month"] not in MONTHS:
        raise ValueError(f"unknown month name {match['month']!r}")

    # datetime rejects out-of-range fields such as 31 Feb or hour 24
    parsed = datetime(
        int(match["year"]),
        MONTHS.index(match["month"]) + 1,
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"]),
    )
    offset = _zone_offset(match["zone"])
    return float(calendar.timegm(parsed.timetuple()) - offset)
