from eventcal.utils import parse_yyyy_mm_dd, parse_timestamp, shift_month
from datetime import date, datetime

def test_parse_date():
    assert parse_yyyy_mm_dd('2016-01-13') == date(2016,1,13)
    assert parse_yyyy_mm_dd('invalid') is None
    assert parse_yyyy_mm_dd(None) is None

def test_parse_timestamp():
    assert parse_timestamp('2016-01-15 10:00:00') == datetime(2016,1,15,10,0,0)
    assert parse_timestamp('2016-01-15T10:00:00') == datetime(2016,1,15,10,0,0)
    assert parse_timestamp('2016-01-15') == datetime(2016,1,15)
    assert parse_timestamp('2016-02-30') is None
    assert parse_timestamp(20160115) is None

def test_shift_month():
    assert shift_month(2016, 1, -1) == (2015, 12)
    assert shift_month(2016, 12, 1) == (2017, 1)
    assert shift_month(2016, 1, 1) == (2016, 2)
    assert shift_month(2016, 3, 0) == (2016, 3)
    assert shift_month(2016, 1, 14) == (2017, 3)
