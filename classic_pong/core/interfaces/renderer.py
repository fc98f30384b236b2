"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Any, Protocol

from classic_pong.core.entities import GameSnapshot


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The renderer also owns the frame clock and the window events, since both
    come from the windowing library.
    """

    def initialize(self, width: int, height: int, title: str) -> None:
        """
        Create the drawing surface.

        Args:
            width: Initial surface width in pixels
            height: Initial surface height in pixels
            title: Window title
        """
        ...

    def render_frame(self, snapshot: GameSnapshot) -> None:
        """Draw paddles, ball, center line and score for one frame"""
        ...

    def tick(self, fps: int) -> float:
        """Wait for the next frame and return the elapsed time in seconds"""
        ...

    def handle_events(self) -> dict[str, Any]:
        """
        Process window events.

        Returns:
            Dictionary with event data, at least {"quit": bool}
        """
        ...

    def get_size(self) -> tuple[int, int]:
        """Current surface size (width, height)"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...

    def is_active(self) -> bool:
        """Check if renderer is still active (window not closed)"""
        ...
