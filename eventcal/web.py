# eventcal/web.py - HTTP pages for the month calendar and single events
import datetime
import logging
from contextlib import asynccontextmanager
from html import escape

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse

from eventcal.db import EventStore, close_pool
from eventcal.errors import InvalidDateError, MalformedEventError, StorageError
from eventcal.loader import MAX_EVENT_ID
from eventcal.render import render_event_html, render_html
from eventcal.service import build_calendar, load_event
from eventcal.settings import APP_HOST, APP_PORT, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

store = EventStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_pool()

app = FastAPI(lifespan=lifespan)


def page(title: str, body: str) -> str:
    return f"<html><head><title>{escape(title)}</title></head><body>{body}</body></html>"


@app.get('/', response_class=HTMLResponse)
async def month_view(date: str | None = None):
    # no date means today; the core always gets an explicit reference
    reference = date or datetime.date.today().isoformat()
    try:
        grid = await build_calendar(store, reference)
    except InvalidDateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError:
        logger.exception('month_view')
        raise HTTPException(status_code=503, detail='Event storage unavailable')
    except MalformedEventError:
        logger.exception('month_view')
        raise HTTPException(status_code=500, detail='Event storage returned a malformed event')
    return HTMLResponse(content=page(grid.label, render_html(grid)))


@app.get('/events/{event_id}', response_class=HTMLResponse)
async def event_view(event_id: int):
    if not 1 <= event_id <= MAX_EVENT_ID:
        raise HTTPException(status_code=404, detail='Event not found')
    try:
        event = await load_event(store, event_id)
    except StorageError:
        logger.exception('event_view')
        raise HTTPException(status_code=503, detail='Event storage unavailable')
    except MalformedEventError:
        logger.exception('event_view')
        raise HTTPException(status_code=500, detail='Event storage returned a malformed event')
    if event is None:
        raise HTTPException(status_code=404, detail='Event not found')
    return HTMLResponse(content=page(event.title, render_event_html(event) + "<p><a href='/'>Back</a></p>"))


if __name__ == '__main__':
    import uvicorn
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
