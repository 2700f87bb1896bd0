"""Commit hash and timestamp generation"""
import random
import string
from datetime import datetime
from typing import Callable, Optional

HASH_ALPHABET = string.digits + string.ascii_lowercase  # base 36
HASH_LENGTH = 6


class HashGenerator:
    """Produces synthetic commit hashes and timestamps.

    Both sources are injectable so tests can pin exact values. Collisions are
    possible and deliberately not checked.
    """

    def __init__(self, rng: Optional[random.Random] = None, clock: Optional[Callable[[], datetime]] = None):
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now

    def new_hash(self) -> str:
        return "".join(self.rng.choice(HASH_ALPHABET) for _ in range(HASH_LENGTH))

    def now(self) -> datetime:
        return self.clock()
