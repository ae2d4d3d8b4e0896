"""Domain helpers for email validation."""
from __future__ import annotations

import re

# Local part: dot-separated atoms or a quoted string.
# Domain: bracketed IPv4 literal or labels ending in a 2+ letter TLD.
EMAIL_PATTERN = re.compile(
    r'(?:(?:[^<>()\[\]\\.,;:\s@"]+(?:\.[^<>()\[\]\\.,;:\s@"]+)*)|(?:".+"))'
    r"@"
    r"(?:(?:\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])"
    r"|(?:(?:[a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))"
)


def is_valid_email(value: str | None) -> bool:
    """Return True when the lower-cased value matches EMAIL_PATTERN."""
    if not value:
        return False
    return bool(EMAIL_PATTERN.fullmatch(str(value).lower()))
