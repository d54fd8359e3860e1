from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

DEFAULT_TZ_NAME = "Europe/Moscow"


def get_today(tz_name: str = DEFAULT_TZ_NAME) -> date:
    """Current calendar date in the given timezone.

    Meant for callers that need a check date. Validators never call it.
    """
    return datetime.now(tz=ZoneInfo(tz_name)).date()


def to_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def as_date(value: date | None) -> date | None:
    """Reduce datetime to date; None and date.min mean 'unset'."""
    if value is None:
        return None
    value = to_date(value)
    if value == date.min:
        return None
    return value


def add_years(value: date, years: int) -> date:
    """Shift by whole years; 29 Feb lands on 1 Mar in a non-leap year."""
    shifted = value + relativedelta(years=years)
    if (value.month, value.day) == (2, 29) and shifted.day == 28:
        shifted += timedelta(days=1)
    return shifted
