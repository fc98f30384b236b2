"""
Classic Pong configuration with Pydantic validation
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator


@dataclass
class KeyboardLayout:
    """Key names used by both players for one keyboard layout"""

    name: str
    left_player_keys: dict[str, str]
    right_player_keys: dict[str, str]
    display_names: dict[str, str]


ARROW_KEYS = {"up": "up", "down": "down"}

KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        left_player_keys={"up": "w", "down": "s"},
        right_player_keys=ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left_player_keys={"up": "z", "down": "s"},  # Z instead of W
        right_player_keys=ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        left_player_keys={"up": "w", "down": "s"},
        right_player_keys=ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Field dimensions (initial window size)
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Window width in pixels")
    FIELD_HEIGHT: int = Field(default=600, gt=0, description="Window height in pixels")

    # Paddles
    PADDLE_PADDING: float = Field(default=40.0, ge=0, description="Paddle distance from side")
    PADDLE_WIDTH: float = Field(default=20.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in pixels")
    PADDLE_SPEED: float = Field(default=600.0, gt=0, description="Paddle speed")

    # Ball
    BALL_SIZE: float = Field(default=30.0, gt=0, description="Ball edge length in pixels")
    BALL_SPEED: float = Field(default=100.0, gt=0, description="Ball speed on each axis")

    # Display
    WINDOW_TITLE: str = Field(default="PONG", min_length=1, description="Window title")
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    MIDDLE_LINE_WIDTH: float = Field(default=2.0, gt=0, description="Center line width")
    SCORE_Y: float = Field(default=40.0, ge=0, description="Vertical center of the score")
    FONT_SIZE: int = Field(default=36, gt=0, description="Score font size")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    FOREGROUND_COLOR: tuple[int, int, int] = Field(
        default=(255, 255, 255), description="RGB color"
    )

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @field_validator("BACKGROUND_COLOR", "FOREGROUND_COLOR")
    @classmethod
    def validate_color(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        """Validate RGB components"""
        if any(c < 0 or c > 255 for c in v):
            raise ValueError(f"Color components must be between 0 and 255, got {v}")
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for game elements"""
        min_width = 2 * (self.PADDLE_PADDING + self.PADDLE_WIDTH) + self.BALL_SIZE
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width} pixels")

        min_height = max(self.PADDLE_HEIGHT, self.BALL_SIZE * 2)
        if self.FIELD_HEIGHT < min_height:
            raise ValueError(f"FIELD_HEIGHT must be at least {min_height} pixels")

        return self

    @property
    def ball_half_size(self) -> float:
        return self.BALL_SIZE * 0.5

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS[self.KEYBOARD_LAYOUT]

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary"""
        return self.model_dump()


# Global configuration instance
game_config = GameConfig()


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values, recording the previous ones in old_values"""
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        for name, value in old_values.items():
            setattr(game_config, name, value)
