"""
Main game application with PyGame GUI
"""

import argparse
import logging
from collections.abc import Sequence

from pydantic import ValidationError

from classic_pong import __version__
from classic_pong.core.interfaces.input import InputProtocol
from classic_pong.core.interfaces.renderer import RendererProtocol
from classic_pong.core.physics import PhysicsEngine
from classic_pong.core.random_source import NumpyRandomSource
from classic_pong.errors import DisplayInitError
from classic_pong.gui.keyboard_input import KeyboardInput
from classic_pong.gui.pygame_renderer import PygameRenderer
from classic_pong.utils.config import KEYBOARD_LAYOUTS
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config
from classic_pong.utils.keyboard_layout import detect_system_layout
from classic_pong.utils.keyboard_layout import show_layout_help

logger = logging.getLogger(__name__)


class PongApp:
    """Runs the frame loop: events, input, physics update, rendering"""

    def __init__(
        self,
        renderer: RendererProtocol,
        input_source: InputProtocol,
        config: GameConfig | None = None,
        engine: PhysicsEngine | None = None,
    ) -> None:
        self.config = config or game_config
        self.renderer = renderer
        self.input_source = input_source
        self.engine = engine
        self.frames = 0

    def start(self) -> None:
        """Open the window and create the game if none was given"""
        width, height = self.config.FIELD_WIDTH, self.config.FIELD_HEIGHT
        self.renderer.initialize(width, height, self.config.WINDOW_TITLE)
        if self.engine is None:
            self.engine = PhysicsEngine(width, height, config=self.config)

    def step(self) -> bool:
        """
        Run one frame

        Returns:
            False once the window asked to quit
        """
        dt = self.renderer.tick(self.config.FPS)

        events = self.renderer.handle_events()
        if events.get("quit"):
            return False

        if self.engine is None:
            raise RuntimeError("PongApp.step() called before start()")

        keys = self.input_source.poll()
        width, height = self.renderer.get_size()
        self.engine.update(dt, keys, width, height)
        self.renderer.render_frame(self.engine.get_game_state())

        self.frames += 1
        logger.debug(f"Frame {self.frames}: dt={dt:.4f} score={self.engine.score}")
        return True

    def run(self, max_frames: int | None = None) -> None:
        """Main application loop; the renderer is always cleaned up"""
        try:
            self.start()
            while self.renderer.is_active():
                if max_frames is not None and self.frames >= max_frames:
                    break
                if not self.step():
                    break
        finally:
            self.renderer.cleanup()
            logger.info(f"Game closed after {self.frames} frames")


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classic two-player Pong")
    parser.add_argument(
        "--width", type=int, default=game_config.FIELD_WIDTH, help="Window width in pixels"
    )
    parser.add_argument(
        "--height", type=int, default=game_config.FIELD_HEIGHT, help="Window height in pixels"
    )
    parser.add_argument("--fps", type=int, default=game_config.FPS, help="Target frame rate")
    parser.add_argument(
        "--layout",
        choices=sorted(KEYBOARD_LAYOUTS),
        default=None,
        help="Keyboard layout for player 1 (detected from the system locale by default)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the ball direction")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    """Builds a validated configuration from the command line"""
    return GameConfig(
        FIELD_WIDTH=args.width,
        FIELD_HEIGHT=args.height,
        FPS=args.fps,
        KEYBOARD_LAYOUT=args.layout or detect_system_layout(),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point, returns the process exit status"""
    args = parse_args(argv)
    setup_logging(args.debug)

    try:
        config = build_config(args)
    except ValidationError as e:
        logger.error(f"Invalid settings: {e}")
        return 1

    logger.info("=== PONG ===")
    for line in show_layout_help(config.KEYBOARD_LAYOUT).splitlines():
        logger.info(line)

    engine = PhysicsEngine(
        config.FIELD_WIDTH,
        config.FIELD_HEIGHT,
        rng=NumpyRandomSource(args.seed),
        config=config,
    )
    app = PongApp(
        PygameRenderer(config),
        KeyboardInput(config.get_keyboard_layout()),
        config=config,
        engine=engine,
    )

    try:
        app.run()
    except DisplayInitError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0
