"""Uniform choice from arbitrary iterables."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from .sources import UniformSource

__all__ = ["pick"]

T = TypeVar("T")


def pick(items: Iterable[T] | None, default: T | None = None, *, source: UniformSource) -> T | None:
    """Return a random element of ``items`` or ``default`` when there is none.

    ``items`` is materialized exactly once, so generators and other
    single-pass iterables are accepted.
    """

    if items is None:
        return default
    pool = list(items)
    if not pool:
        return default
    return pool[source.randbelow(len(pool))]
