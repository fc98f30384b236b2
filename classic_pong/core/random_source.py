"""
Random sources used to pick the ball direction after a reset
"""

from collections import deque
from collections.abc import Iterable
from typing import Protocol

import numpy as np

from classic_pong.core.entities import Vector2D
from classic_pong.errors import RandomSourceExhausted


class RandomSource(Protocol):
    """Anything able to flip a fair coin"""

    def coin_flip(self) -> bool:
        """Returns True or False with probability 0.5 each"""
        ...


class NumpyRandomSource:
    """Seedable random source backed by a numpy Generator"""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self.generator = np.random.default_rng(seed)

    def coin_flip(self) -> bool:
        return bool(self.generator.random() < 0.5)


class ScriptedRandomSource:
    """Replays a fixed sequence of coin flips, for deterministic games and tests"""

    def __init__(self, values: Iterable[bool]):
        self._values = deque(bool(v) for v in values)

    def coin_flip(self) -> bool:
        if not self._values:
            raise RandomSourceExhausted("No scripted coin flips left")
        return self._values.popleft()

    def remaining(self) -> int:
        return len(self._values)


def random_velocity(rng: RandomSource, speed_x: float, speed_y: float) -> Vector2D:
    """
    Picks a velocity with each axis independently set to +speed or -speed

    The x axis is drawn first, then the y axis.
    """
    vx = speed_x if rng.coin_flip() else -speed_x
    vy = speed_y if rng.coin_flip() else -speed_y
    return Vector2D(vx, vy)
