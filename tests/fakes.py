# in-memory stand-ins for the events table
from datetime import datetime


def row(event_id, title, start, end=None, desc=''):
    return {
        'event_id': event_id,
        'event_title': title,
        'event_desc': desc,
        'event_start': start,
        'event_end': end or start,
    }


class FakeStore:
    def __init__(self, rows=()):
        self.rows = list(rows)
        self.calls = []

    async def find_by_id(self, event_id):
        self.calls.append(('find_by_id', event_id))
        for r in self.rows:
            if r['event_id'] == event_id:
                return r
        return None

    async def find_by_date_range(self, start, end):
        self.calls.append(('find_by_date_range', start, end))
        # same semantics as BETWEEN ... ORDER BY event_start
        found = [r for r in self.rows if start <= _ts(r['event_start']) <= end]
        return sorted(found, key=lambda r: _ts(r['event_start']))


class BrokenStore:
    async def find_by_id(self, event_id):
        raise ConnectionError('connection refused')

    async def find_by_date_range(self, start, end):
        raise ConnectionError('connection refused')


def _ts(value):
    if isinstance(value, str):
        return datetime.strptime(value, '%Y-%m-%d %H:%M:%S')
    return value
