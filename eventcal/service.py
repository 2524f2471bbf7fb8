# eventcal/service.py - one calendar request from reference date to grid
import logging

from eventcal.grid import build_grid
from eventcal.grouping import group_by_day
from eventcal.loader import ById, ByMonth, load_events
from eventcal.month import compute_month_context

logger = logging.getLogger(__name__)


async def build_calendar(store, reference):
    context = compute_month_context(reference)
    events = await load_events(store, ByMonth(context.month, context.year))
    grid = build_grid(context, group_by_day(events, context))
    logger.info('built %s with %d event(s)', context.label, len(events))
    return grid


async def load_event(store, event_id: int):
    events = await load_events(store, ById(event_id))
    return events[0] if events else None
