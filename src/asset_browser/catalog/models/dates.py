"""
Lenient creation-date normalization.

AvatarExplorer stores creation dates as locale-dependent strings. They are
normalized to epoch milliseconds here; anything that can't be read becomes 0
rather than an error.
"""

import logging
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)

# YYYYMMDDhhmmss once every non-digit is stripped
_COMPACT_TIMESTAMP_DIGITS = 14


def _to_epoch_millis(value: datetime) -> int:
    # Naive datetimes are local wall-clock time, as the source tool wrote them
    return int(value.timestamp() * 1000)


def _parse_iso(text: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None


def _parse_compact_digits(text: str) -> Optional[datetime]:
    digits = "".join(c for c in text if c.isdigit())
    if len(digits) != _COMPACT_TIMESTAMP_DIGITS:
        return None
    try:
        return datetime(
            int(digits[0:4]),
            int(digits[4:6]),
            int(digits[6:8]),
            int(digits[8:10]),
            int(digits[10:12]),
            int(digits[12:14]),
        )
    except ValueError:
        return None


def parse_created_date(text: Optional[str]) -> int:
    """Convert a raw creation date string to epoch milliseconds.

    Accepted forms, tried in order:

    - an all-digit string, taken as epoch milliseconds;
    - ISO-8601 (``2024-05-01T12:00:00``, ``2024-05-01 12:00:00``, trailing ``Z``);
    - any string with exactly 14 digits, read as ``YYYYMMDDhhmmss`` local time
      (``2024/05/01 12:00:00`` and similar locale formats).

    Empty or unreadable input returns 0.
    """
    if not text:
        return 0

    text = text.strip()
    if not text:
        return 0

    if text.isascii() and text.isdigit():
        return int(text)

    parsed = _parse_iso(text) or _parse_compact_digits(text)
    if parsed is None:
        logger.debug(f"Unreadable creation date {text!r}, using epoch 0")
        return 0

    try:
        return _to_epoch_millis(parsed)
    except (OverflowError, OSError, ValueError) as e:
        logger.debug(f"Creation date {text!r} out of range ({e}), using epoch 0")
        return 0
