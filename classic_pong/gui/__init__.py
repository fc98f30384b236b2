"""
GUI module for Classic Pong - PyGame interface
"""

from classic_pong.gui.game_app import PongApp, main
from classic_pong.gui.keyboard_input import KeyboardInput
from classic_pong.gui.pygame_renderer import PygameRenderer

__all__ = [
    "PygameRenderer",
    "KeyboardInput",
    "PongApp",
    "main",
]
