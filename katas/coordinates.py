"""Degree/minute/second coordinates and their JSON form."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any


def _go_float(value: float) -> str:
    """Format a float the shortest way, without a trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer() and abs(value) < 1e21:
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


def _json_ready(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if isinstance(value, dict):
        return {key: _json_ready(item) for key, item in value.items()}
    return value


@dataclass(frozen=True)
class Coordinate:
    """A coordinate in degrees, minutes and seconds in a N/S/E/W hemisphere."""

    degrees: float
    minutes: float
    seconds: float
    hemisphere: str

    def __post_init__(self) -> None:
        if len(self.hemisphere) != 1:
            raise ValueError("hemisphere must be a single character")

    def decimal(self) -> float:
        """The coordinate in decimal degrees; south and west are negative."""
        sign = -1.0 if self.hemisphere in "SWsw" else 1.0
        return sign * (self.degrees + self.minutes / 60 + self.seconds / 3600)

    def __str__(self) -> str:
        return (
            f"{_go_float(float(self.degrees))}\u00ba{_go_float(float(self.minutes))}'"
            f'{self.seconds:.1f}" {self.hemisphere}'
        )

    def to_json_dict(self) -> dict[str, Any]:
        return {
            "decimal": self.decimal(),
            "dms": str(self),
            "degrees": float(self.degrees),
            "minutes": float(self.minutes),
            "seconds": float(self.seconds),
            "hemisphere": self.hemisphere,
        }


@dataclass(frozen=True)
class Location:
    """A named place given by latitude and longitude."""

    name: str
    latitude: Coordinate
    longitude: Coordinate

    def to_json_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "latitude": self.latitude.to_json_dict(),
            "longitude": self.longitude.to_json_dict(),
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Serialise to JSON; whole numbers are written without a fraction."""
        return json.dumps(
            _json_ready(self.to_json_dict()), indent=indent, ensure_ascii=False
        )