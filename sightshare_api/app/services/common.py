"""Helpers shared by the guest and order services."""

from datetime import datetime, timezone
from typing import Any, Iterable, List, Tuple

from sightshare_api.app.core.exceptions import ValidationError


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string, e.g. ``2024-05-01T10:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def require_fields(fields: Iterable[Tuple[str, Any]]) -> None:
    """Raise ``ValidationError`` naming every field that is absent or empty.

    ``fields`` is a sequence of ``(public name, value)`` pairs.  ``None``,
    empty strings and empty lists count as missing.
    """
    missing: List[str] = [name for name, value in fields if value is None or len(value) == 0]
    if missing:
        raise ValidationError(missing)
