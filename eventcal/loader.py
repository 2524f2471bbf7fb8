# eventcal/loader.py - picks the query shape and turns rows into events
import logging
from dataclasses import dataclass

from eventcal.errors import StorageError
from eventcal.models import Event
from eventcal.month import month_context_for

logger = logging.getLogger(__name__)

# event_id is a SERIAL (int4) column
MAX_EVENT_ID = 2**31 - 1


@dataclass(frozen=True)
class ById:
    event_id: int


@dataclass(frozen=True)
class ByMonth:
    month: int
    year: int


def _check_scope(scope):
    if isinstance(scope, ById):
        if isinstance(scope.event_id, bool) or not isinstance(scope.event_id, int) or not 1 <= scope.event_id <= MAX_EVENT_ID:
            raise ValueError(f'event id must be an integer in 1..{MAX_EVENT_ID}, got {scope.event_id!r}')
    elif isinstance(scope, ByMonth):
        if not 1 <= scope.month <= 12:
            raise ValueError(f'month must be 1-12, got {scope.month!r}')
    else:
        raise TypeError(f'unknown load scope: {scope!r}')


async def load_events(store, scope) -> list[Event]:
    """Load events for ``scope`` from ``store``.

    ById returns zero or one event. ByMonth returns every event starting
    between the first second and the last second of the month, inclusive,
    ordered by start. Store failures are raised as StorageError; a malformed
    row aborts the whole load with MalformedEventError.
    """
    _check_scope(scope)
    if isinstance(scope, ById):
        operation = 'find_by_id'
        try:
            row = await store.find_by_id(scope.event_id)
        except Exception as e:
            raise StorageError(operation, scope) from e
        rows = [] if row is None else [row]
    else:
        operation = 'find_by_date_range'
        start, end = month_context_for(scope.year, scope.month).bounds()
        try:
            rows = await store.find_by_date_range(start, end)
        except Exception as e:
            raise StorageError(operation, scope) from e
    events = [Event.from_row(row) for row in rows]
    logger.debug('%s %s -> %d event(s)', operation, scope, len(events))
    return events
