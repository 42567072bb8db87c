"""Short identifier generation for blocks and bookings."""

import random
import string
from collections.abc import Callable

ID_ALPHABET = string.ascii_lowercase + string.digits

BLOCK_PREFIX = "b"
BOOKING_PREFIX = "bk"

# Give up instead of spinning forever on an exhausted id space
MAX_ATTEMPTS = 1000


def random_suffix(length: int = 6) -> str:
    """Random base-36 suffix like 'k3x9qa'."""
    return "".join(random.choices(ID_ALPHABET, k=length))


def generate_id(
    prefix: str = "",
    length: int = 6,
    exists: Callable[[str], bool] | None = None,
) -> str:
    """Generate an identifier unique within one store.

    Args:
        prefix: Entity prefix (e.g. 'b' for blocks, 'bk' for bookings)
        length: Length of the random suffix
        exists: Lookup against the owning store; ids it reports as taken
            are regenerated

    Returns:
        str: Identifier like 'bk3x9qa1'
    """
    for _ in range(MAX_ATTEMPTS):
        candidate = f"{prefix}{random_suffix(length)}"
        if exists is None or not exists(candidate):
            return candidate
    raise RuntimeError(f"Could not generate a free '{prefix}' identifier after {MAX_ATTEMPTS} attempts")
