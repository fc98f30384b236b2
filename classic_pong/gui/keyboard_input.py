"""
Keyboard input for the two human players
"""

from collections.abc import Sequence

import pygame

from classic_pong.core.entities import InputAction
from classic_pong.utils.config import KeyboardLayout
from classic_pong.utils.config import game_config

# Key names used by the keyboard layouts
PYGAME_KEYS: dict[str, int] = {
    "w": pygame.K_w,
    "s": pygame.K_s,
    "z": pygame.K_z,
    "up": pygame.K_UP,
    "down": pygame.K_DOWN,
}


class KeyboardInput:
    """Translates pygame key states into logical InputAction states"""

    def __init__(self, layout: KeyboardLayout | None = None):
        """
        Initialize keyboard input

        Args:
            layout: Keyboard layout, the configured one when omitted
        """
        self.layout = layout or game_config.get_keyboard_layout()
        self.key_mapping: dict[InputAction, int] = {
            InputAction.P1_UP: PYGAME_KEYS[self.layout.left_player_keys["up"]],
            InputAction.P1_DOWN: PYGAME_KEYS[self.layout.left_player_keys["down"]],
            InputAction.P2_UP: PYGAME_KEYS[self.layout.right_player_keys["up"]],
            InputAction.P2_DOWN: PYGAME_KEYS[self.layout.right_player_keys["down"]],
        }

    def read(self, pressed: Sequence[bool]) -> dict[InputAction, bool]:
        """Map an indexable of key states (e.g. pygame.key.get_pressed()) to actions"""
        return {action: bool(pressed[key]) for action, key in self.key_mapping.items()}

    def poll(self) -> dict[InputAction, bool]:
        """Read the live keyboard"""
        return self.read(pygame.key.get_pressed())

    def get_control_info(self) -> dict[str, str]:
        """Human readable key names for both players"""
        return {
            "player1_up": self.layout.display_names["up"],
            "player1_down": self.layout.display_names["down"],
            "player2_up": "↑",
            "player2_down": "↓",
        }
