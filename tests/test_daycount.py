# tests/test_daycount.py

import random

from gregdate.core import daycount as dc


def test_leap_years():
    assert dc.is_leap_year(1900) is False
    assert dc.is_leap_year(2000) is True
    assert dc.is_leap_year(1996) is True
    assert dc.is_leap_year(1997) is False
    assert dc.is_leap_year(1600) is True
    assert dc.is_leap_year(2100) is False


def test_days_in_year():
    assert dc.days_in_year(1900) == 365
    assert dc.days_in_year(2000) == 366


def test_days_in_month():
    assert dc.days_in_month(2, 1900) == 28
    assert dc.days_in_month(2, 2000) == 29
    assert dc.days_in_month(2, 2023) == 28
    assert [dc.days_in_month(m, 2023) for m in range(1, 13)] == [
        31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31
    ]


def test_day_of_year_matches_accumulation():
    """Closed form agrees with summing month lengths, for leap and common years."""
    for year in (1601, 1900, 1996, 2000, 2023, 3999):
        expected = 0
        for month in range(1, 13):
            for day in range(1, dc.days_in_month(month, year) + 1):
                expected += 1
                assert dc.day_of_year(month, day, year) == expected, (month, day, year)


def test_days_before_year():
    assert dc.days_before_year(1600) == 0
    assert dc.days_before_year(1601) == 365
    assert dc.days_before_year(2000) == 146097  # one full 400-year cycle
    assert dc.days_before_year(3999) == 876216

    total = 0
    for year in range(1601, 4000):
        total += dc.days_in_year(year)
        assert dc.days_before_year(year) == total


def test_year_from_absolute_cycle_edges():
    assert dc.year_from_absolute(1) == 1601
    assert dc.year_from_absolute(365) == 1601
    assert dc.year_from_absolute(366) == 1602
    # Dec 31 of a leap year closing a 4-year cycle (n1 == 4)
    assert dc.year_from_absolute(dc.days_before_year(1604)) == 1604
    assert dc.year_from_absolute(dc.days_before_year(1604) + 1) == 1605
    # Dec 31 of the year closing the 400-year cycle (n100 == 4)
    assert dc.year_from_absolute(146097) == 2000
    assert dc.year_from_absolute(146098) == 2001
    assert dc.year_from_absolute(876216) == 3999


def test_year_from_absolute_vs_iterative_sampled():
    random.seed(42)
    for _ in range(500):
        count = random.randint(1, 876216)
        assert dc.year_from_absolute(count) == dc.year_from_absolute_iterative(count)


def test_month_day_from_day_of_year_roundtrip():
    for year in (1700, 2000, 2023):
        for doy in range(1, dc.days_in_year(year) + 1):
            month, day = dc.month_day_from_day_of_year(doy, year)
            assert dc.day_of_year(month, day, year) == doy
    assert dc.month_day_from_day_of_year(60, 2000) == (2, 29)
    assert dc.month_day_from_day_of_year(60, 2001) == (3, 1)
    assert dc.month_day_from_day_of_year(366, 2000) == (12, 31)
