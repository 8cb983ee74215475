from __future__ import annotations

import pytest

from randomdata.sampling import VERSION_CEILING, VERSION_FLOOR, parse_version, version
from randomdata.sources import LockedUniformSource
from randomdata.utils.errors import RangeInvalidError

SRC = LockedUniformSource(seed=7)


def as_tuple(text: str) -> tuple[int, ...]:
    parts = tuple(int(p) for p in text.split("."))
    assert len(parts) == 4
    return parts


def test_parse_version() -> None:
    assert parse_version("1.2", VERSION_FLOOR) == (1, 2, 0, 0)
    assert parse_version("1.2.3.4", VERSION_FLOOR) == (1, 2, 3, 4)
    assert parse_version(" 3.4.5 ", VERSION_FLOOR) == (3, 4, 5, 0)
    assert parse_version("1", VERSION_FLOOR) == VERSION_FLOOR
    assert parse_version("1.2.3.4.5", VERSION_CEILING) == VERSION_CEILING
    assert parse_version("a.b", VERSION_CEILING) == VERSION_CEILING
    assert parse_version("-1.2", VERSION_FLOOR) == VERSION_FLOOR
    assert parse_version(None, VERSION_FLOOR) == VERSION_FLOOR
    assert parse_version("", VERSION_CEILING) == VERSION_CEILING


def test_equal_bounds() -> None:
    assert version("1.2.3.4", "1.2.3.4", source=SRC) == "1.2.3.4"
    assert version("1.2", "1.2.0.0", source=SRC) == "1.2.0.0"


def test_revision_only_range() -> None:
    for _ in range(300):
        major, minor, build, revision = as_tuple(version("1.0.0.0", "1.0.0.5", source=SRC))
        assert (major, minor, build) == (1, 0, 0)
        assert 0 <= revision <= 5


@pytest.mark.parametrize(
    ("lo", "hi"),
    [
        ("1.5.0.0", "2.3.0.0"),
        ("1.99.9999.9999", "2.0.0.0"),
        ("0.0.0.1", "0.0.1.0"),
        ("3.7.200.15", "3.7.4000.2"),
        ("10.0", "12.1"),
    ],
)
def test_result_within_bounds(lo: str, hi: str) -> None:
    low = parse_version(lo, VERSION_FLOOR)
    high = parse_version(hi, VERSION_CEILING)
    for _ in range(300):
        assert low <= as_tuple(version(lo, hi, source=SRC)) <= high


def test_defaults_and_unparsable() -> None:
    for lo, hi in [(None, None), ("junk", "garbage"), ("", "")]:
        for _ in range(100):
            assert VERSION_FLOOR <= as_tuple(version(lo, hi, source=SRC)) <= VERSION_CEILING


def test_custom_ceiling() -> None:
    ceiling = (2, 3, 4, 5)
    for _ in range(100):
        assert as_tuple(version(source=SRC, ceiling=ceiling)) <= ceiling


def test_inverted_bounds() -> None:
    with pytest.raises(RangeInvalidError):
        version("2.0.0.0", "1.9.9.9", source=SRC)
