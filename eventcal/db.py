# eventcal/db.py - asyncpg pool and the events table queries
import asyncpg

from eventcal.settings import DB_CONFIG, DB_POOL_MIN, DB_POOL_MAX

EVENT_COLUMNS = 'event_id, event_title, event_desc, event_start, event_end'

_pool: asyncpg.pool.Pool | None = None

async def get_pool():
    global _pool
    if _pool is None:
        _pool = await asyncpg.create_pool(**DB_CONFIG, min_size=DB_POOL_MIN, max_size=DB_POOL_MAX)
    return _pool

async def close_pool():
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None

async def fetch(query: str, *args):
    pool = await get_pool()
    async with pool.acquire() as conn:
        return await conn.fetch(query, *args)

async def fetchrow(query: str, *args):
    pool = await get_pool()
    async with pool.acquire() as conn:
        return await conn.fetchrow(query, *args)


class EventStore:
    """Reads rows from the ``events`` table. Every value is a bound parameter."""

    async def find_by_id(self, event_id: int):
        return await fetchrow(f'SELECT {EVENT_COLUMNS} FROM events WHERE event_id=$1 LIMIT 1', event_id)

    async def find_by_date_range(self, start, end):
        return await fetch(
            f'SELECT {EVENT_COLUMNS} FROM events WHERE event_start BETWEEN $1 AND $2 ORDER BY event_start',
            start, end)
