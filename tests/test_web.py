import logging

import pytest
from fastapi.testclient import TestClient

from eventcal import web

from fakes import BrokenStore, FakeStore, row


@pytest.fixture
def client():
    return TestClient(web.app)

def use_store(monkeypatch, store):
    monkeypatch.setattr(web, 'store', store)
    return store

def test_month_page(client, monkeypatch):
    use_store(monkeypatch, FakeStore([row(1, 'Kickoff', '2016-01-15 10:00:00', '2016-01-15 11:00:00')]))
    resp = client.get('/', params={'date': '2016-01-01'})
    assert resp.status_code == 200
    assert '<h2>January 2016</h2>' in resp.text
    assert '<a href="/events/1">Kickoff</a>' in resp.text

def test_month_page_defaults_to_today(client, monkeypatch):
    store = use_store(monkeypatch, FakeStore())
    resp = client.get('/')
    assert resp.status_code == 200
    assert store.calls[0][0] == 'find_by_date_range'

def test_bad_date_is_400(client, monkeypatch):
    use_store(monkeypatch, FakeStore())
    resp = client.get('/', params={'date': 'garbage'})
    assert resp.status_code == 400

def test_storage_failure_is_503(client, monkeypatch):
    use_store(monkeypatch, BrokenStore())
    assert client.get('/', params={'date': '2016-01-01'}).status_code == 503
    assert client.get('/events/1').status_code == 503

def test_malformed_row_is_500_and_logged(client, monkeypatch, caplog):
    use_store(monkeypatch, FakeStore([row(1, '', '2016-01-15 10:00:00')]))
    with caplog.at_level(logging.ERROR, logger='eventcal.web'):
        month = client.get('/', params={'date': '2016-01-01'})
        single = client.get('/events/1')
    assert month.status_code == 500
    assert month.json()['detail'] == 'Event storage returned a malformed event'
    assert single.status_code == 500
    logged = [r.getMessage() for r in caplog.records if r.name == 'eventcal.web']
    assert logged == ['month_view', 'event_view']

def test_event_page(client, monkeypatch):
    use_store(monkeypatch, FakeStore([row(1, 'Kickoff', '2016-01-15 10:00:00', '2016-01-15 11:00:00', desc='Year plan')]))
    resp = client.get('/events/1')
    assert resp.status_code == 200
    assert '<h2>Kickoff</h2>' in resp.text
    assert 'Year plan' in resp.text

@pytest.mark.parametrize('event_id', ['2', '0', '-5', '99999999999'])
def test_missing_or_impossible_event_is_404(client, monkeypatch, event_id):
    store = use_store(monkeypatch, FakeStore([row(1, 'Kickoff', '2016-01-15 10:00:00')]))
    resp = client.get(f'/events/{event_id}')
    assert resp.status_code == 404
    if event_id != '2':
        assert store.calls == []
