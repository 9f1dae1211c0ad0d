"""Text helpers shared by prompt building and analysis."""

import json
import math


def escape_text_for_prompt(text: str) -> str:
    """JSON-encode text to preserve exact characters, then strip outer quotes.

    This keeps quotes and newlines in user-supplied text from breaking the
    quoted examples they are embedded in.
    """
    encoded = json.dumps(text, ensure_ascii=False)
    return encoded[1:-1]


def clip(text: str, limit: int, suffix: str = "...") -> str:
    """Cut text to `limit` characters, appending `suffix` only when cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + suffix


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))
