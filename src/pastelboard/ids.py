"""Card ID generation."""

import random
import string
import time
import uuid

from pastelboard.constants import SHORT_ID_LENGTH

_BASE36 = string.digits + string.ascii_lowercase


def _base36(n: int) -> str:
    """Encode a non-negative integer in base 36."""
    if n == 0:
        return "0"
    digits = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def fallback_id() -> str:
    """Random + time-derived ID for when the OS random source is unavailable.

    "id-" followed by 8 random base-36 characters and the millisecond
    timestamp in base 36. Unique in practice, not cryptographically.
    """
    rand = "".join(random.choice(_BASE36) for _ in range(8))
    return f"id-{rand}{_base36(int(time.time() * 1000))}"


def new_id() -> str:
    """Generate a fresh card ID, preferring uuid4."""
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        return fallback_id()


def short_id(card_id: str) -> str:
    """First few characters of an ID, for display."""
    return card_id[:SHORT_ID_LENGTH]
