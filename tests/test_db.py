from datetime import datetime

import pytest

from eventcal import db


class Recorder:
    def __init__(self, result):
        self.result = result
        self.calls = []

    async def __call__(self, query, *args):
        self.calls.append((query, args))
        return self.result


@pytest.mark.asyncio
async def test_find_by_id_binds_id(monkeypatch):
    fetchrow = Recorder(None)
    monkeypatch.setattr(db, 'fetchrow', fetchrow)
    assert await db.EventStore().find_by_id(42) is None
    (query, args), = fetchrow.calls
    assert 'event_id=$1' in query
    assert '42' not in query
    assert args == (42,)

@pytest.mark.asyncio
async def test_find_by_date_range_binds_bounds(monkeypatch):
    fetch = Recorder([])
    monkeypatch.setattr(db, 'fetch', fetch)
    start, end = datetime(2016, 1, 1, 0, 0, 0), datetime(2016, 1, 31, 23, 59, 59)
    assert await db.EventStore().find_by_date_range(start, end) == []
    (query, args), = fetch.calls
    assert 'BETWEEN $1 AND $2' in query
    assert 'ORDER BY event_start' in query
    assert '2016' not in query
    assert args == (start, end)
