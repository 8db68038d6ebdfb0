"""
Request parameter validation

Pure helpers shared by every route. They never raise: malformed input either
fails the identifier check or falls back to a default limit.
"""

import re
from typing import Any, Optional
from urllib.parse import unquote

# Version and variant nibbles are left open: legacy rows carry non-RFC UUIDs
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

LIMIT_PATTERN = re.compile(r"^[+-]?[0-9]+$")

# (default, minimum, maximum)
LIST_LIMIT = (25, 1, 200)
CALLS_LIMIT = (50, 1, 200)


def normalize_identifier(value: Any) -> Optional[str]:
    """URL-decode and trim an identifier; None for non-string input"""
    if not isinstance(value, str):
        return None
    return unquote(value).strip()


def is_valid_identifier(value: Any) -> bool:
    """True if the value is a hyphenated 8-4-4-4-12 hex UUID"""
    normalized = normalize_identifier(value)
    if normalized is None:
        return False
    return UUID_PATTERN.match(normalized) is not None


def clamp_limit(raw: Any, default: int, minimum: int, maximum: int) -> int:
    """Parse a base-10 limit, falling back to default, clamped to [minimum, maximum]"""
    value = default
    if isinstance(raw, bool):
        raw = None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and LIMIT_PATTERN.match(raw.strip()):
        negative = raw.strip().startswith("-")
        digits = raw.strip().lstrip("+-").lstrip("0") or "0"
        # Too long to fit the range; int() would also refuse past 4300 digits
        if len(digits) > len(str(maximum)):
            return minimum if negative else maximum
        value = -int(digits) if negative else int(digits)
    return max(minimum, min(maximum, value))
