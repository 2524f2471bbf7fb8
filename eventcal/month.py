# eventcal/month.py - month metadata derived from a reference date
import calendar
from dataclasses import dataclass
from datetime import date, datetime, time

from eventcal.errors import InvalidDateError
from eventcal.utils import parse_timestamp

MONTH_NAMES = ('January', 'February', 'March', 'April', 'May', 'June', 'July',
               'August', 'September', 'October', 'November', 'December')
DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_PER_MONTH[month - 1]


def start_weekday(year: int, month: int) -> int:
    """Weekday of the 1st of the month, 0 = Sunday."""
    # calendar.weekday is Monday-based; shift so Sunday lands on 0
    return (calendar.weekday(year, month, 1) + 1) % 7


@dataclass(frozen=True)
class MonthContext:
    month: int
    year: int
    days_in_month: int
    start_weekday: int
    label: str

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.days_in_month)

    def bounds(self):
        """Inclusive (first second, last second) of the month."""
        return datetime.combine(self.first_day, time(0, 0, 0)), datetime.combine(self.last_day, time(23, 59, 59))

    def contains(self, moment) -> bool:
        return moment.year == self.year and moment.month == self.month


def _calendar_fields(reference):
    # datetime is a subclass of date; both expose year/month as given,
    # aware values are read in their own offset, never converted
    if isinstance(reference, date):
        return reference.year, reference.month
    if isinstance(reference, str):
        parsed = parse_timestamp(reference)
        if parsed is None:
            raise InvalidDateError(f'cannot parse reference date {reference!r}')
        return parsed.year, parsed.month
    raise InvalidDateError(f'unsupported reference date type: {type(reference).__name__}')


def month_context_for(year: int, month: int) -> MonthContext:
    if not 1 <= month <= 12 or not 1 <= year <= 9999:
        raise InvalidDateError(f'invalid month {year}-{month}')
    return MonthContext(
        month=month,
        year=year,
        days_in_month=days_in_month(year, month),
        start_weekday=start_weekday(year, month),
        label=f'{MONTH_NAMES[month - 1]} {year}',
    )


def compute_month_context(reference) -> MonthContext:
    """Build the MonthContext for the month containing ``reference``.

    ``reference`` may be a date, a datetime or a 'YYYY-MM-DD[ HH:MM:SS]'
    string. Only the calendar fields are used, so the result never depends
    on the current clock or the local timezone.
    """
    year, month = _calendar_fields(reference)
    return month_context_for(year, month)
