from typing import Any


def is_blank(value: Any) -> bool:
    """True for missing, non-string or whitespace-only field values."""
    return not isinstance(value, str) or not value.strip()
