"""Small value helpers shared by domain models."""

from taskapp.domain.primitives.timestamps import parse_timestamp, to_iso, utc_now

__all__: list[str] = ["parse_timestamp", "to_iso", "utc_now"]
