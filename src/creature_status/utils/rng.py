import time
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that can answer a percent roll; injected into tick processing"""

    def roll_percent(self, percent: int) -> bool: ...


class BattleRng:
    """Deterministic 32-bit LCG: seed = (seed * 1664525 + 1013904223) mod 2^32

    One instance per battle. Seeding with the same value replays the same rolls.
    """

    def __init__(self, seed: Optional[int] = None):
        # Allow deterministic seeding for tests; default to time-based if not provided
        self.seed = (seed if seed is not None else int(time.time())) & 0xFFFFFFFF

    def advance(self) -> int:
        """Advance the generator and return the new 32-bit seed."""
        self.seed = (self.seed * 1664525 + 1013904223) & 0xFFFFFFFF
        return self.seed

    def rand16(self) -> int:
        """Advance and return upper 16 bits (0..65535)."""
        self.advance()
        return (self.seed >> 16) & 0xFFFF

    def roll_percent(self, percent: int) -> bool:
        """Return True with the given percent chance (0-100)."""
        roll = self.rand16()
        if percent >= 100:
            return True
        threshold = (percent * 0xFFFF) // 100
        return roll < threshold

