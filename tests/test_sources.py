from __future__ import annotations

import threading

import pytest

from randomdata.sources import (
    LockedUniformSource,
    SecureByteSource,
    SystemByteSource,
    UniformSource,
    default_secure_source,
    default_uniform_source,
)


def test_seeded_stream_is_reproducible() -> None:
    a = LockedUniformSource(seed=42)
    b = LockedUniformSource(seed=42)
    assert [a.randbelow(1000) for _ in range(10)] == [b.randbelow(1000) for _ in range(10)]
    assert a.random() == b.random()
    assert a.randbytes(8) == b.randbytes(8)


def test_randbelow_bounds() -> None:
    src = LockedUniformSource()
    assert all(0 <= src.randbelow(3) < 3 for _ in range(200))
    assert src.randbelow(1) == 0
    with pytest.raises(ValueError):
        src.randbelow(0)


def test_byte_lengths() -> None:
    assert len(LockedUniformSource().randbytes(13)) == 13
    assert len(SystemByteSource().token_bytes(64)) == 64


def test_protocol_conformance() -> None:
    assert isinstance(LockedUniformSource(), UniformSource)
    assert isinstance(SystemByteSource(), SecureByteSource)


def test_defaults_are_singletons() -> None:
    assert default_uniform_source() is default_uniform_source()
    assert default_secure_source() is default_secure_source()


def test_concurrent_draws() -> None:
    src = default_uniform_source()
    results: list[int] = []
    lock = threading.Lock()

    def worker() -> None:
        local = [src.randbelow(10) for _ in range(500)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 4000
    assert all(0 <= r < 10 for r in results)
