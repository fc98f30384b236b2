"""
PyGame renderer for Classic Pong
"""

import logging
from typing import Any

import pygame

from classic_pong.core.entities import GameSnapshot
from classic_pong.errors import DisplayInitError
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class PygameRenderer:
    """PyGame-based renderer for Classic Pong"""

    def __init__(self, config: GameConfig | None = None):
        self.config = config or game_config
        self.screen: pygame.Surface | None = None
        self.clock: pygame.time.Clock | None = None
        self.font: pygame.font.Font | None = None
        self.active = False

        self.background_color: tuple[int, int, int] = self.config.BACKGROUND_COLOR
        self.color: tuple[int, int, int] = self.config.FOREGROUND_COLOR

    def initialize(self, width: int, height: int, title: str) -> None:
        """Open the window; any pygame failure is reported as DisplayInitError"""
        try:
            pygame.init()
            self.screen = pygame.display.set_mode((width, height))
            pygame.display.set_caption(title)
            self.font = pygame.font.Font(None, self.config.FONT_SIZE)
        except pygame.error as e:
            pygame.quit()
            raise DisplayInitError(f"Could not create the game window: {e}") from e

        self.clock = pygame.time.Clock()
        self.active = True
        logger.info(f"Window '{title}' opened ({width}x{height})")

    def _require_screen(self) -> pygame.Surface:
        if self.screen is None:
            raise RuntimeError("Renderer used before initialize()")
        return self.screen

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self._require_screen().fill(self.background_color)

    def draw_paddle(self, position: tuple[float, float], width: float, height: float) -> None:
        """Draw a paddle with its top-left corner at the paddle position"""
        rect = pygame.Rect(int(position[0]), int(position[1]), int(width), int(height))
        pygame.draw.rect(self._require_screen(), self.color, rect)

    def draw_ball(self, position: tuple[float, float], size: float) -> None:
        """Draw the ball square centered on its position"""
        half = size * 0.5
        rect = pygame.Rect(int(position[0] - half), int(position[1] - half), int(size), int(size))
        pygame.draw.rect(self._require_screen(), self.color, rect)

    def draw_middle_line(self) -> None:
        """Draw the vertical center line"""
        screen = self._require_screen()
        width, height = screen.get_size()
        line_width = self.config.MIDDLE_LINE_WIDTH
        rect = pygame.Rect(int(width * 0.5 - line_width * 0.5), 0, int(line_width), height)
        pygame.draw.rect(screen, self.color, rect)

    def draw_score(self, score_text: str) -> None:
        """Draw the score centered horizontally around SCORE_Y"""
        screen = self._require_screen()
        if self.font is None:
            raise RuntimeError("Renderer used before initialize()")
        text_surface = self.font.render(score_text, True, self.color)
        text_rect = text_surface.get_rect()
        text_rect.centerx = screen.get_width() // 2
        text_rect.centery = int(self.config.SCORE_Y)
        screen.blit(text_surface, text_rect)

    def render_frame(self, snapshot: GameSnapshot) -> None:
        """Render a complete frame"""
        self.clear_screen()
        self.draw_paddle(snapshot.player1_position, snapshot.paddle_width, snapshot.paddle_height)
        self.draw_paddle(snapshot.player2_position, snapshot.paddle_width, snapshot.paddle_height)
        self.draw_ball(snapshot.ball_position, snapshot.ball_size)
        self.draw_middle_line()
        self.draw_score(snapshot.score_text)
        pygame.display.flip()

    def tick(self, fps: int) -> float:
        """Limit the frame rate and return the frame duration in seconds"""
        if self.clock is None:
            raise RuntimeError("Renderer used before initialize()")
        return self.clock.tick(fps) / 1000.0

    def handle_events(self) -> dict[str, Any]:
        """Process window events; closing the window or pressing ESC quits"""
        quit_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                quit_requested = True

        if quit_requested:
            self.active = False
        return {"quit": quit_requested}

    def get_size(self) -> tuple[int, int]:
        return self._require_screen().get_size()

    def is_active(self) -> bool:
        return self.active

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        self.active = False
        self.screen = None
        pygame.quit()
