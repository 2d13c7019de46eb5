import random

from .constants import BYTE_UPPER_BOUND, SEED

__all__ = ["random_bytes", "seedable_rng"]


def seedable_rng() -> random.Random:
    """Return a fresh generator seeded with :data:`SEED`."""

    return random.Random(SEED)  # nosec B311 - deterministic helper


def random_bytes(n: int) -> bytes:
    """Return ``n`` reproducible pseudo-random bytes.

    Every call builds its own generator, so equal ``n`` yields equal output
    and a shorter result is always a prefix of a longer one.

    Args:
        n: Number of bytes to produce.

    Returns:
        bytes: Values drawn from ``0`` to ``254`` inclusive.

    Raises:
        ValueError: If ``n`` is negative.
    """

    if n < 0:
        raise ValueError("n must be a non-negative integer")
    rng = seedable_rng()
    return bytes(rng.randrange(BYTE_UPPER_BOUND) for _ in range(n))
