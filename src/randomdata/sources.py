"""Random bit sources consumed by the sampling algorithms.

Two capabilities are distinguished:

* a *uniform source* producing integers in ``[0, n)``, floats in ``[0, 1)`` and
  raw bytes.  Every range, text and collection operation draws from it.
* a *secure byte source* producing cryptographically unpredictable bytes.  It
  is used only by :mod:`randomdata.strings` where the character distribution
  of generated identifiers matters.

Both are plain protocols so callers and tests can substitute deterministic
implementations.  The default implementations are safe for concurrent use and
are exposed as lazily constructed process-wide singletons.
"""

from __future__ import annotations

import random
import secrets
import threading
from typing import Protocol, runtime_checkable

__all__ = [
    "UniformSource",
    "SecureByteSource",
    "LockedUniformSource",
    "SystemByteSource",
    "default_uniform_source",
    "default_secure_source",
]


@runtime_checkable
class UniformSource(Protocol):
    """Uniform integer/float/byte generator."""

    def randbelow(self, n: int) -> int:  # pragma: no cover - protocol
        ...

    def random(self) -> float:  # pragma: no cover - protocol
        ...

    def randbytes(self, n: int) -> bytes:  # pragma: no cover - protocol
        ...


@runtime_checkable
class SecureByteSource(Protocol):
    """Cryptographically strong byte generator."""

    def token_bytes(self, n: int) -> bytes:  # pragma: no cover - protocol
        ...


class LockedUniformSource:
    """Thread-safe :class:`UniformSource` backed by :class:`random.Random`.

    Parameters
    ----------
    seed:
        Optional seed.  When given the stream is reproducible, which is useful
        in tests; otherwise the generator is seeded from the OS.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be positive")
        with self._lock:
            return self._rng.randrange(n)

    def random(self) -> float:
        with self._lock:
            return self._rng.random()

    def randbytes(self, n: int) -> bytes:
        with self._lock:
            return self._rng.randbytes(n)


class SystemByteSource:
    """:class:`SecureByteSource` backed by :func:`secrets.token_bytes`."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


_init_lock = threading.Lock()
_uniform: LockedUniformSource | None = None
_secure: SystemByteSource | None = None


def default_uniform_source() -> UniformSource:
    """Return the process-wide uniform source, creating it on first use."""

    global _uniform
    if _uniform is None:
        with _init_lock:
            if _uniform is None:
                _uniform = LockedUniformSource()
    return _uniform


def default_secure_source() -> SecureByteSource:
    """Return the process-wide secure byte source, creating it on first use."""

    global _secure
    if _secure is None:
        with _init_lock:
            if _secure is None:
                _secure = SystemByteSource()
    return _secure
