"""Utility functions for medcms"""

import re
from datetime import datetime, timezone
from pathlib import Path

UTC = timezone.utc


def canonicalify(p: Path | str) -> Path:
    return Path(p).expanduser().resolve()


def ensure_path(p: Path | str) -> Path:
    path = canonicalify(p)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_now(tz=UTC) -> datetime:
    return datetime.now(tz)


def to_minute_iso(dt: datetime) -> str:
    """Format a datetime the way a datetime-local input expects it.

    Examples:
        >>> to_minute_iso(datetime(2026, 3, 1, 9, 5, 42))
        '2026-03-01T09:05'
    """
    return dt.strftime("%Y-%m-%dT%H:%M")


def split_camel_case(key: str) -> list[str]:
    """Split a camelCase key before every uppercase letter.

    Examples:
        >>> split_camel_case("longDescriptionEn")
        ['long', 'Description', 'En']
        >>> split_camel_case("URL")
        ['U', 'R', 'L']
    """
    return [part for part in re.split(r"(?=[A-Z])", key) if part]
