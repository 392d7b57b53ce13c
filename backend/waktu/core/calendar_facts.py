"""Calendar Facts — strict date parsing and Gregorian calendar-field derivation.

Invariants:
    - parse_date never raises: invalid input is reported as None
    - Present input must match YYYY-MM-DD exactly and name a real date
      (2024-02-30 is rejected, never rolled forward)
    - Absent or empty input means "now" in the server's local timezone
    - Parsed moments are timezone-aware (local midnight for explicit dates)
    - Month and weekday names are English regardless of process locale

Design Decisions:
    - Regex gate before date(): datetime.fromisoformat accepts compact and
      week-date forms that must be rejected here
    - CalendarFact is a frozen dataclass; to_response() emits the camelCase
      JSON shape clients expect
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone

_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday",
    "Friday", "Saturday", "Sunday",
)


@dataclass(frozen=True)
class CalendarFact:
    """Calendar facts derived from a single validated moment."""
    iso: str
    year: int
    month: int
    month_name: str
    day: int
    weekday: str
    weekday_short: str
    timestamp: str | None = None

    def to_response(self) -> dict:
        """JSON shape used by /calendar and /today."""
        body = {
            "iso": self.iso,
            "year": self.year,
            "month": self.month,
            "monthName": self.month_name,
            "day": self.day,
            "weekday": self.weekday,
            "weekdayShort": self.weekday_short,
        }
        if self.timestamp is not None:
            body["timestamp"] = self.timestamp
        return body


def parse_date(raw: str | None, now: datetime | None = None) -> datetime | None:
    """Parse an optional YYYY-MM-DD string into an aware local datetime.

    Returns `now` (default: the current local time) when raw is missing or
    empty, and None when raw is present but invalid.
    """
    if not raw:
        return now or datetime.now().astimezone()
    match = _DATE_PATTERN.fullmatch(raw)
    if not match:
        return None
    try:
        day = date(*(int(part) for part in match.groups()))
        return datetime(day.year, day.month, day.day).astimezone()
    except (ValueError, OverflowError, OSError):
        return None


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC instant with millisecond precision and a Z suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_calendar_fact(
    moment: datetime, include_timestamp: bool = True,
) -> CalendarFact:
    """Derive calendar fields from a parsed moment (shared by all endpoints)."""
    weekday = WEEKDAY_NAMES[moment.weekday()]
    return CalendarFact(
        iso=moment.strftime("%Y-%m-%d"),
        year=moment.year,
        month=moment.month,
        month_name=MONTH_NAMES[moment.month - 1],
        day=moment.day,
        weekday=weekday,
        weekday_short=weekday[:3],
        timestamp=format_timestamp(moment) if include_timestamp else None,
    )


def month_day(moment: datetime) -> tuple[str, str]:
    """Zero-padded (MM, DD) pair used to key the upstream feed."""
    return f"{moment.month:02d}", f"{moment.day:02d}"
