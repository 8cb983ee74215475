from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from randomdata import sampling
from randomdata.sources import LockedUniformSource
from randomdata.utils.errors import RangeInvalidError

SRC = LockedUniformSource(seed=99)


def test_datetime_within_bounds() -> None:
    start = datetime(2020, 1, 1)
    end = datetime(2020, 1, 2)
    for _ in range(300):
        assert start <= sampling.datetime(start, end, source=SRC) <= end


def test_datetime_equal_bounds() -> None:
    moment = datetime(2021, 5, 4, 12, 30)
    assert sampling.datetime(moment, moment, source=SRC) == moment


def test_datetime_inverted() -> None:
    with pytest.raises(RangeInvalidError):
        sampling.datetime(datetime(2021, 1, 2), datetime(2021, 1, 1), source=SRC)


def test_datetime_defaults() -> None:
    value = sampling.datetime(source=SRC)
    assert datetime.min <= value <= datetime.max


def test_datetime_aware_start_only() -> None:
    start = datetime(2030, 1, 1, tzinfo=timezone.utc)
    value = sampling.datetime(start, source=SRC)
    assert value.tzinfo is timezone.utc
    assert value >= start


def test_datetime_aware_end_only() -> None:
    end = datetime(1990, 1, 1, tzinfo=timezone.utc)
    value = sampling.datetime(end=end, source=SRC)
    assert value <= end


def test_duration_within_bounds() -> None:
    lo = timedelta(minutes=5)
    hi = timedelta(hours=2)
    for _ in range(300):
        assert lo <= sampling.duration(lo, hi, source=SRC) <= hi


def test_duration_defaults_non_negative() -> None:
    for _ in range(50):
        value = sampling.duration(source=SRC)
        assert timedelta(0) <= value <= timedelta.max


def test_duration_equal_and_inverted() -> None:
    assert sampling.duration(timedelta(seconds=3), timedelta(seconds=3), source=SRC) == timedelta(
        seconds=3
    )
    with pytest.raises(RangeInvalidError):
        sampling.duration(timedelta(seconds=3), timedelta(seconds=1), source=SRC)


def test_duration_full_type_range() -> None:
    for _ in range(100):
        value = sampling.duration(timedelta.min, timedelta.max, source=SRC)
        assert timedelta.min <= value <= timedelta.max


def test_duration_negative_minimum_with_default_maximum() -> None:
    lo = timedelta(days=-1)
    for _ in range(100):
        assert lo <= sampling.duration(lo, source=SRC) <= timedelta.max
