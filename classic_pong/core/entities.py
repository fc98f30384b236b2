"""
Classic Pong game entities: ball, paddles, game state
"""

from dataclasses import dataclass
from enum import Enum

from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config


class InputAction(Enum):
    """Logical keys read once per frame"""

    P1_UP = "p1_up"
    P1_DOWN = "p1_down"
    P2_UP = "p2_up"
    P2_DOWN = "p2_down"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


class Ball:
    """Game ball, a square centered on its position"""

    def __init__(self, x: float, y: float, vx: float, vy: float, size: float | None = None):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.size = size if size is not None else game_config.BALL_SIZE

    @property
    def half_size(self) -> float:
        return self.size * 0.5

    def update(self, dt: float) -> None:
        """Updates the ball position"""
        self.position += self.velocity * dt

    def reset_to_center(self, field_width: float, field_height: float, velocity: Vector2D) -> None:
        """Puts the ball back on the exact field center with a new velocity"""
        self.position = Vector2D(field_width * 0.5, field_height * 0.5)
        self.velocity = velocity.copy()

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision box (left, top, right, bottom)"""
        half = self.half_size
        return (
            self.position.x - half,
            self.position.y - half,
            self.position.x + half,
            self.position.y + half,
        )


class Paddle:
    """Player paddle, only moves vertically"""

    def __init__(
        self,
        x: float,
        y: float,
        player_id: int,
        width: float | None = None,
        height: float | None = None,
        speed: float | None = None,
    ):
        self.position = Vector2D(x, y)
        self.player_id = player_id
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT
        self.speed = speed if speed is not None else game_config.PADDLE_SPEED

    def constrain_position(self, field_height: float) -> None:
        """Clamps y into [0, field_height - height]"""
        self.position.y = max(0.0, min(field_height - self.height, self.position.y))

    def move(self, direction: float, dt: float, field_height: float) -> None:
        """Moves the paddle along y (negative direction is up) and clamps it"""
        self.position.y += direction * self.speed * dt
        self.constrain_position(field_height)

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision box (left, top, right, bottom) around the position"""
        half_width = self.width * 0.5
        half_height = self.height * 0.5
        return (
            self.position.x - half_width,
            self.position.y - half_height,
            self.position.x + half_width,
            self.position.y + half_height,
        )


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the game consumed by renderers"""

    player1_position: tuple[float, float]
    player2_position: tuple[float, float]
    ball_position: tuple[float, float]
    score: tuple[int, int]
    paddle_width: float
    paddle_height: float
    ball_size: float

    @property
    def score_text(self) -> str:
        return f"{self.score[0]}        {self.score[1]}"


class PongState:
    """All mutable simulation state: both paddles, the ball and the score"""

    def __init__(self, player1: Paddle, player2: Paddle, ball: Ball):
        self.player1 = player1
        self.player2 = player2
        self.ball = ball
        self.score: list[int] = [0, 0]
        self.game_time = 0.0

    @classmethod
    def create(
        cls,
        field_width: float,
        field_height: float,
        ball_velocity: Vector2D,
        config: GameConfig | None = None,
    ) -> "PongState":
        """Builds the starting layout: paddles vertically centered, ball on the center"""
        config = config or game_config
        paddle_y = field_height * 0.5 - config.PADDLE_HEIGHT * 0.5

        player1 = Paddle(
            config.PADDLE_PADDING,
            paddle_y,
            1,
            config.PADDLE_WIDTH,
            config.PADDLE_HEIGHT,
            config.PADDLE_SPEED,
        )
        player2 = Paddle(
            field_width - config.PADDLE_WIDTH - config.PADDLE_PADDING,
            paddle_y,
            2,
            config.PADDLE_WIDTH,
            config.PADDLE_HEIGHT,
            config.PADDLE_SPEED,
        )
        ball = Ball(
            field_width * 0.5,
            field_height * 0.5,
            ball_velocity.x,
            ball_velocity.y,
            config.BALL_SIZE,
        )
        return cls(player1, player2, ball)

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        return (self.player1, self.player2)

    def snapshot(self) -> GameSnapshot:
        """Returns what a renderer needs to draw the current frame"""
        return GameSnapshot(
            player1_position=self.player1.position.to_tuple(),
            player2_position=self.player2.position.to_tuple(),
            ball_position=self.ball.position.to_tuple(),
            score=(self.score[0], self.score[1]),
            paddle_width=self.player1.width,
            paddle_height=self.player1.height,
            ball_size=self.ball.size,
        )
