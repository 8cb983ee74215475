"""Address-like and location-like strings."""

from __future__ import annotations

from .sampling import integer, real
from .sources import UniformSource

__all__ = ["ipv4_address", "coordinate"]


def ipv4_address(*, source: UniformSource) -> str:
    """Return a dotted-quad string with every octet in ``[0, 255]``."""

    return ".".join(str(integer(0, 255, source=source)) for _ in range(4))


def coordinate(*, source: UniformSource) -> str:
    """Return ``"lat,lng"`` with latitude in ``[-90, 90]`` and longitude in ``[-180, 180]``."""

    lat = real(-90.0, 90.0, source=source)
    lng = real(-180.0, 180.0, source=source)
    return f"{lat},{lng}"
