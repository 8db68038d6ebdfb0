"""Shared request dependencies"""

from typing import Optional
from uuid import UUID

from mybot_api.errors import ClientInputError
from mybot_api.validation import is_valid_identifier, normalize_identifier


def require_identifier(raw: Optional[str], name: str) -> UUID:
    """Parse a required UUID parameter or raise the matching 400"""
    if not normalize_identifier(raw):
        raise ClientInputError(f"{name}_required")
    if not is_valid_identifier(raw):
        raise ClientInputError(f"invalid_{name}")
    return UUID(normalize_identifier(raw))
