"""
Physics system for Classic Pong
"""

import logging
from collections.abc import Mapping

from classic_pong.core.collision import ball_intersects_paddle
from classic_pong.core.collision import check_ball_walls
from classic_pong.core.collision import check_goal
from classic_pong.core.entities import GameSnapshot
from classic_pong.core.entities import InputAction
from classic_pong.core.entities import Paddle
from classic_pong.core.entities import PongState
from classic_pong.core.entities import Vector2D
from classic_pong.core.random_source import NumpyRandomSource
from classic_pong.core.random_source import RandomSource
from classic_pong.core.random_source import random_velocity
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config

logger = logging.getLogger(__name__)

KeyState = Mapping[InputAction, bool]

# (paddle index, up key, down key)
PADDLE_CONTROLS = (
    (0, InputAction.P1_UP, InputAction.P1_DOWN),
    (1, InputAction.P2_UP, InputAction.P2_DOWN),
)


def move_paddle(paddle: Paddle, up: bool, down: bool, dt: float, field_height: float) -> None:
    """Applies the up key then the down key, clamping after each one"""
    if up:
        paddle.move(-1.0, dt, field_height)
    if down:
        paddle.move(1.0, dt, field_height)
    paddle.constrain_position(field_height)


def update(
    state: PongState,
    dt: float,
    keys: KeyState,
    field_width: float,
    field_height: float,
    rng: RandomSource,
    ball_speed: float | None = None,
) -> None:
    """
    Advances the game by dt seconds

    Args:
        state: Game state, mutated in place
        dt: Elapsed time since the previous frame, in seconds
        keys: Pressed state of each logical key (missing keys are not pressed)
        field_width: Current width of the drawing surface
        field_height: Current height of the drawing surface
        rng: Source for the ball direction after a goal
        ball_speed: Speed on each axis given to the ball after a goal
    """
    if dt < 0:
        raise ValueError(f"dt must not be negative, got {dt}")
    if ball_speed is None:
        ball_speed = game_config.BALL_SPEED

    state.game_time += dt

    # Paddles
    for index, up_key, down_key in PADDLE_CONTROLS:
        move_paddle(
            state.paddles[index],
            keys.get(up_key, False),
            keys.get(down_key, False),
            dt,
            field_height,
        )

    ball = state.ball
    ball.update(dt)

    # Goals
    scorer = check_goal(ball, field_width)
    if scorer:
        ball.reset_to_center(field_width, field_height, random_velocity(rng, ball_speed, ball_speed))
        state.score[scorer - 1] += 1
        logger.info(f"Player {scorer} scores! ({state.score[0]} - {state.score[1]})")

    # Top and bottom walls
    wall = check_ball_walls(ball, field_height)
    if wall == "top":
        ball.position.y = ball.half_size
        ball.velocity.y = abs(ball.velocity.y)
    elif wall == "bottom":
        ball.position.y = field_height - ball.size
        ball.velocity.y = -abs(ball.velocity.y)

    # Paddles send the ball back towards the opponent
    if ball_intersects_paddle(ball, state.player1):
        ball.velocity.x = abs(ball.velocity.x)
    if ball_intersects_paddle(ball, state.player2):
        ball.velocity.x = -abs(ball.velocity.x)


class PhysicsEngine:
    """Owns one game state and its random source"""

    def __init__(
        self,
        field_width: float,
        field_height: float,
        rng: RandomSource | None = None,
        config: GameConfig | None = None,
    ):
        self.field_width = field_width
        self.field_height = field_height
        self.config = config or game_config
        self.rng: RandomSource = rng if rng is not None else NumpyRandomSource()

        self.state = PongState.create(
            field_width, field_height, self._new_ball_velocity(), self.config
        )

    def _new_ball_velocity(self) -> Vector2D:
        return random_velocity(self.rng, self.config.BALL_SPEED, self.config.BALL_SPEED)

    @property
    def score(self) -> list[int]:
        return self.state.score

    def update(
        self,
        dt: float,
        keys: KeyState,
        field_width: float | None = None,
        field_height: float | None = None,
    ) -> None:
        """Updates game physics, using the latest surface size when given"""
        if field_width is not None:
            self.field_width = field_width
        if field_height is not None:
            self.field_height = field_height

        update(
            self.state,
            dt,
            keys,
            self.field_width,
            self.field_height,
            self.rng,
            self.config.BALL_SPEED,
        )

    def get_game_state(self) -> GameSnapshot:
        """Returns the render snapshot"""
        return self.state.snapshot()
