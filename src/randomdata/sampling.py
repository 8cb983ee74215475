"""Bounded-range sampling.

Every helper converts draws from a :class:`~randomdata.sources.UniformSource`
into a value inside an inclusive ``[min, max]`` range.  The shared contract:

* equal bounds short-circuit and return the lower bound without touching the
  source;
* a lower bound above the upper bound raises
  :class:`~randomdata.utils.errors.RangeInvalidError`;
* omitted bounds default to the representable extremes of the value type.

The 64-bit path (:func:`wide_integer`) reduces eight raw bytes modulo the
range width.  That reduction is slightly biased whenever the width does not
divide ``2**64`` and never reaches ``max`` itself; callers needing exact
uniformity over narrow ranges should use :func:`integer`.
"""

from __future__ import annotations

import datetime as _dt
import enum
import re
import sys
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Final, Protocol, TypeVar

from .sources import UniformSource
from .utils.errors import RangeInvalidError

__all__ = [
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "VERSION_FLOOR",
    "VERSION_CEILING",
    "integer",
    "wide_integer",
    "real",
    "decimal",
    "boolean",
    "datetime",
    "duration",
    "parse_version",
    "version",
    "enum_value",
]

T = TypeVar("T")


class _Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool:  # pragma: no cover - protocol
        ...


C = TypeVar("C", bound=_Comparable)

INT32_MIN: Final = -(2**31)
INT32_MAX: Final = 2**31 - 1
INT64_MIN: Final = -(2**63)
INT64_MAX: Final = 2**63 - 1

VERSION_FLOOR: Final = (0, 0, 0, 0)
VERSION_CEILING: Final = (25, 100, 9999, 9999)

_VERSION_RE: Final = re.compile(r"^[0-9]+(?:\.[0-9]+){1,3}$")
_ONE_MICROSECOND: Final = _dt.timedelta(microseconds=1)


def _check_order(min_value: C, max_value: C) -> None:
    if max_value < min_value:
        raise RangeInvalidError(f"min {min_value!r} is greater than max {max_value!r}")


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------


def integer(
    min_value: int = INT32_MIN, max_value: int = INT32_MAX, *, source: UniformSource
) -> int:
    """Return an integer uniformly drawn from ``[min_value, max_value]``."""

    if min_value == max_value:
        return min_value
    _check_order(min_value, max_value)
    return min_value + source.randbelow(max_value - min_value + 1)


def wide_integer(
    min_value: int = INT64_MIN, max_value: int = INT64_MAX, *, source: UniformSource
) -> int:
    """Return a 64-bit style integer from raw bytes reduced into the range.

    The result lies in ``[min_value, max_value)``; see the module notes on
    bias.
    """

    if min_value == max_value:
        return min_value
    _check_order(min_value, max_value)
    raw = int.from_bytes(source.randbytes(8), "little", signed=True)
    return raw % (max_value - min_value) + min_value


# ---------------------------------------------------------------------------
# Floating point and decimals
# ---------------------------------------------------------------------------


def real(
    min_value: float | None = None,
    max_value: float | None = None,
    *,
    source: UniformSource,
) -> float:
    """Return a float linearly interpolated between the bounds.

    Omitted bounds default to the largest finite doubles.  The interpolation
    is written as ``u * max + (1 - u) * min`` so that the full default range
    does not overflow to infinity.
    """

    if min_value is not None and max_value is not None and min_value == max_value:
        return min_value
    lo = -sys.float_info.max if min_value is None else min_value
    hi = sys.float_info.max if max_value is None else max_value
    _check_order(lo, hi)
    u = source.random()
    value = u * hi + (1.0 - u) * lo
    return min(max(value, lo), hi)


def decimal(
    min_value: int | None = None,
    max_value: int | None = None,
    *,
    source: UniformSource,
) -> Decimal:
    """Return a :class:`~decimal.Decimal` between two integer bounds.

    The value is sampled as a float and narrowed through its shortest repr,
    so precision is limited to that of a double.  When both bounds are
    omitted they are themselves drawn with :func:`integer` and ordered.
    """

    if min_value is None and max_value is None:
        a = integer(source=source)
        b = integer(source=source)
        min_value, max_value = min(a, b), max(a, b)
    lo = INT32_MIN if min_value is None else min_value
    hi = INT32_MAX if max_value is None else max_value
    return Decimal(repr(real(float(lo), float(hi), source=source)))


def boolean(chance: int = 50, *, source: UniformSource) -> bool:
    """Return ``True`` with roughly ``chance`` percent probability.

    ``chance`` is clamped to ``[0, 100]``; ``0`` never and ``100`` always
    yields ``True``.
    """

    chance = max(0, min(100, chance))
    if chance == 0:
        return False
    if chance == 100:
        return True
    return source.random() > 1.0 - chance / 100.0


# ---------------------------------------------------------------------------
# Temporal values
# ---------------------------------------------------------------------------


def _micros(delta: _dt.timedelta) -> int:
    return delta // _ONE_MICROSECOND


def datetime(
    start: _dt.datetime | None = None,
    end: _dt.datetime | None = None,
    *,
    source: UniformSource,
) -> _dt.datetime:
    """Return a datetime in ``[start, end]`` at microsecond resolution.

    Omitted bounds default to :attr:`datetime.min` / :attr:`datetime.max`,
    borrowing the ``tzinfo`` of the other bound when it is timezone-aware.
    """

    if start is not None and end is not None and start == end:
        return start
    if start is None:
        start = _dt.datetime.min.replace(tzinfo=end.tzinfo if end is not None else None)
    if end is None:
        end = _dt.datetime.max.replace(tzinfo=start.tzinfo)
    _check_order(start, end)
    offset = wide_integer(0, _micros(end - start), source=source)
    return start + _dt.timedelta(microseconds=offset)


def duration(
    min_value: _dt.timedelta | None = None,
    max_value: _dt.timedelta | None = None,
    *,
    source: UniformSource,
) -> _dt.timedelta:
    """Return a :class:`~datetime.timedelta` in ``[min_value, max_value]``."""

    if min_value is not None and max_value is not None and min_value == max_value:
        return min_value
    lo = _dt.timedelta(0) if min_value is None else min_value
    hi = _dt.timedelta.max if max_value is None else max_value
    _check_order(lo, hi)
    low = _micros(lo)
    offset = wide_integer(0, _micros(hi) - low, source=source)
    return _dt.timedelta(microseconds=low + offset)


# ---------------------------------------------------------------------------
# Versions
# ---------------------------------------------------------------------------


def parse_version(
    text: str | None, fallback: tuple[int, int, int, int]
) -> tuple[int, int, int, int]:
    """Parse ``major.minor[.build[.revision]]`` into a four-tuple.

    Missing trailing components become ``0``.  Empty or malformed input
    returns ``fallback`` unchanged.
    """

    if not text or not _VERSION_RE.match(text.strip()):
        return fallback
    parts = [int(p) for p in text.strip().split(".")]
    parts.extend([0] * (4 - len(parts)))
    return parts[0], parts[1], parts[2], parts[3]


def version(
    min_version: str | None = None,
    max_version: str | None = None,
    *,
    source: UniformSource,
    floor: tuple[int, int, int, int] = VERSION_FLOOR,
    ceiling: tuple[int, int, int, int] = VERSION_CEILING,
) -> str:
    """Return a ``a.b.c.d`` version string between two version bounds.

    Components are sampled from most to least significant.  A component is
    held to the lower bound's value only while every earlier component
    matched the lower bound, and likewise for the upper bound; once a
    component leaves a bound the remaining components range freely between
    ``floor`` and ``ceiling``.  The result therefore never leaves
    ``[min_version, max_version]`` and no draws are rejected.
    """

    lo = parse_version(min_version, floor)
    hi = parse_version(max_version, ceiling)
    if lo == hi:
        return ".".join(str(p) for p in lo)
    _check_order(lo, hi)

    on_lo = on_hi = True
    parts: list[int] = []
    for idx in range(4):
        low = lo[idx] if on_lo else floor[idx]
        high = hi[idx] if on_hi else ceiling[idx]
        if not on_lo:
            low = min(low, high)
        if not on_hi:
            high = max(high, low)
        value = integer(low, high, source=source)
        on_lo = on_lo and value == lo[idx]
        on_hi = on_hi and value == hi[idx]
        parts.append(value)
    return ".".join(str(p) for p in parts)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


def enum_value(values: type[enum.Enum] | Sequence[T], *, source: UniformSource) -> T:
    """Return one member of an :class:`enum.Enum` class or a sequence."""

    members = list(values)
    return members[integer(0, len(members) - 1, source=source)]  # type: ignore[return-value]
