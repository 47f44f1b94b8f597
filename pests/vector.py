# vector.py
import random
from dataclasses import dataclass


@dataclass
class Vector:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def random(cls, low, high, rng=None):
        """Each axis drawn on its own from [low, high)."""
        rng = rng or random
        return cls(
            low + (high - low) * rng.random(),
            low + (high - low) * rng.random(),
        )

    def __add__(self, other):
        return Vector(self.x + other.x, self.y + other.y)

    def __mul__(self, k):
        return Vector(self.x * k, self.y * k)

    __rmul__ = __mul__
