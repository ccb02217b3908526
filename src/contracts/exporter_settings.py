import re
from typing import List, Optional

from pydantic import BaseModel, field_validator

# Seconds per unit, as accepted by Go's time.ParseDuration
_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> float:
    """
    Parse a duration string such as "4h", "1h30m" or "1.5s" into seconds.

    Args:
        text (str): Sequence of decimal numbers each followed by a unit, with
            an optional leading sign. "0" is accepted without a unit.

    Returns:
        float: Duration in seconds.

    Raises:
        ValueError: If the string is not a valid duration.
    """
    value = text.strip()
    if not value:
        raise ValueError("empty duration")
    sign = 1.0
    if value[0] in "+-":
        sign = -1.0 if value[0] == "-" else 1.0
        value = value[1:]
    if value == "0":
        return 0.0

    total = 0.0
    pos = 0
    while pos < len(value):
        match = _DURATION_PART.match(value, pos)
        if not match:
            raise ValueError(f"invalid duration {text!r}")
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        pos = match.end()
    if pos == 0:
        raise ValueError(f"invalid duration {text!r}")
    return sign * total


class ExporterSettings(BaseModel):
    """
    Validated runtime settings for the mirror metrics exporter.
    """

    mirror_freshness_url: str
    mirror_availability_url: str
    backends: List[str]
    refresh_interval: float = 4 * 3600.0
    probe_timeout: Optional[float] = None
    metrics_host: str = "0.0.0.0"
    metrics_port: int = 9090

    @field_validator("mirror_freshness_url", "mirror_availability_url")
    @classmethod
    def _require_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("URL must be set")
        return value

    @field_validator("backends", mode="before")
    @classmethod
    def _split_backends(cls, value):
        if isinstance(value, str):
            value = value.split(",")
        backends = [b.strip() for b in value if b and b.strip()]
        if not backends:
            raise ValueError("at least one backend must be configured")
        return backends

    @field_validator("refresh_interval", "probe_timeout", mode="before")
    @classmethod
    def _parse_duration(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            return parse_duration(value)
        return value

    @field_validator("refresh_interval")
    @classmethod
    def _positive_interval(cls, value: Optional[float]) -> float:
        if value is None or value <= 0:
            raise ValueError("refresh interval must be positive")
        return value

    @field_validator("probe_timeout")
    @classmethod
    def _positive_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("probe timeout must be positive")
        return value
