# tests/test_host.py

import datetime as dt
from unittest.mock import patch

import pytest

from gregdate import Date, InvalidDateError, NullDateError


def test_from_host_date_and_datetime():
    assert Date.from_host(dt.date(2020, 1, 4)) == Date(1, 4, 2020)
    assert Date.from_host(dt.datetime(2020, 1, 4, 23, 59)) == Date(1, 4, 2020)


def test_from_host_aware_datetime_keeps_wall_date():
    tz = dt.timezone(dt.timedelta(hours=-10))
    value = dt.datetime(2020, 1, 4, 22, 0, tzinfo=tz)
    assert Date.from_host(value) == Date(1, 4, 2020)


def test_from_host_none_is_null():
    assert Date.from_host(None).is_null()


def test_from_host_rejects_other_types():
    with pytest.raises(TypeError):
        Date.from_host("2020-01-04")


def test_from_host_out_of_range():
    with pytest.raises(InvalidDateError):
        Date.from_host(dt.date(1600, 12, 31))
    with pytest.raises(InvalidDateError):
        Date.from_host(dt.date(4000, 1, 1))


def test_to_host():
    d = Date.from_absolute(146462)
    assert d.to_host() == dt.date(2001, 12, 31)
    assert d.to_datetime() == dt.datetime(2001, 12, 31, 0, 0)
    assert d.to_datetime().tzinfo is None
    with pytest.raises(NullDateError):
        Date.null().to_datetime()


def test_host_weekday_agrees():
    for d in (Date(1, 1, 1601), Date(3, 4, 2012), Date(12, 31, 3999)):
        # datetime: Monday == 0 .. Sunday == 6
        assert (d.to_host().weekday() + 1) % 7 == d.day_of_week()
        assert d.to_host().toordinal() - d.to_absolute() == dt.date(1600, 12, 31).toordinal()


def test_today():
    with patch("gregdate.core.host.today_fields", return_value=(7, 4, 2026)):
        assert Date.today() == Date(7, 4, 2026)


def test_today_outside_range():
    with patch("gregdate.core.host.today_fields", return_value=(1, 1, 4000)):
        with pytest.raises(RuntimeError):
            Date.today()
