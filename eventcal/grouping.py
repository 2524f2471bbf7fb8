# eventcal/grouping.py - partition events by day of month
import logging

logger = logging.getLogger(__name__)


def group_by_day(events, context) -> dict:
    """Map day-of-month -> events that start that day, ordered by start.

    Events that don't start inside ``context``'s month have no slot to go
    to; they are dropped and a warning is logged for each one.
    """
    grouped = {}
    for event in events:
        if not context.contains(event.start):
            logger.warning('dropping event %s (%s): starts %s, outside %s',
                           event.id, event.title, event.start, context.label)
            continue
        grouped.setdefault(event.day, []).append(event)
    for day, day_events in grouped.items():
        # sorted() is stable, equal starts keep the order they came in
        grouped[day] = sorted(day_events, key=lambda e: e.start)
    return grouped
