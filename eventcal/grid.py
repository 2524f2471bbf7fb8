# eventcal/grid.py - the renderable month grid
from dataclasses import dataclass

WEEKDAY_LABELS = ('Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat')


@dataclass(frozen=True)
class DaySlot:
    day_of_month: int
    events: tuple = ()


@dataclass(frozen=True)
class CalendarGrid:
    year: int
    month: int
    label: str
    leading_blanks: int
    days: tuple
    weekday_labels: tuple = WEEKDAY_LABELS

    @property
    def days_in_month(self) -> int:
        return len(self.days)

    @property
    def trailing_blanks(self) -> int:
        return (7 - (self.leading_blanks + len(self.days)) % 7) % 7

    def weeks(self):
        """Rows of 7 cells; blank cells are None."""
        cells = [None] * self.leading_blanks + list(self.days) + [None] * self.trailing_blanks
        return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def build_grid(context, grouped) -> CalendarGrid:
    days = tuple(
        DaySlot(day, tuple(grouped.get(day, ())))
        for day in range(1, context.days_in_month + 1)
    )
    return CalendarGrid(
        year=context.year,
        month=context.month,
        label=context.label,
        leading_blanks=context.start_weekday,
        days=days,
    )
