# eventcal/models.py - event entity built from one storage row
from dataclasses import dataclass
from datetime import datetime

from eventcal.errors import MalformedEventError
from eventcal.utils import parse_timestamp


def _timestamp(value, column: str, event_id):
    if isinstance(value, datetime):
        return value
    parsed = parse_timestamp(value) if isinstance(value, str) else None
    if parsed is None:
        raise MalformedEventError(f'event {event_id}: bad or missing {column}: {value!r}', event_id)
    return parsed


@dataclass(frozen=True)
class Event:
    """One calendar event.

    ``end >= start`` is assumed, not checked: rows come from storage we trust.
    """
    id: int
    title: str
    description: str
    start: datetime
    end: datetime

    @property
    def day(self) -> int:
        return self.start.day

    @classmethod
    def from_row(cls, row):
        """Build an Event from a row with event_id/event_title/event_desc/event_start/event_end."""
        event_id = row.get('event_id')
        if event_id is None:
            raise MalformedEventError('row has no event_id')
        try:
            event_id = int(event_id)
        except (TypeError, ValueError):
            raise MalformedEventError(f'bad event_id: {event_id!r}', event_id) from None
        title = row.get('event_title')
        if not isinstance(title, str) or not title.strip():
            raise MalformedEventError(f'event {event_id}: missing title', event_id)
        return cls(
            id=event_id,
            title=title,
            description=row.get('event_desc') or '',
            start=_timestamp(row.get('event_start'), 'event_start', event_id),
            end=_timestamp(row.get('event_end'), 'event_end', event_id),
        )
