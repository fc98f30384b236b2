"""
Core module of Classic Pong
"""

from classic_pong.core.entities import Ball
from classic_pong.core.entities import GameSnapshot
from classic_pong.core.entities import InputAction
from classic_pong.core.entities import Paddle
from classic_pong.core.entities import PongState
from classic_pong.core.entities import Vector2D
from classic_pong.core.physics import PhysicsEngine
from classic_pong.core.physics import update
from classic_pong.core.random_source import NumpyRandomSource
from classic_pong.core.random_source import RandomSource
from classic_pong.core.random_source import ScriptedRandomSource

__all__ = [
    "Ball",
    "Paddle",
    "PongState",
    "GameSnapshot",
    "InputAction",
    "Vector2D",
    "PhysicsEngine",
    "update",
    "RandomSource",
    "NumpyRandomSource",
    "ScriptedRandomSource",
]
