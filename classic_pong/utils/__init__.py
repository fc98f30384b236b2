"""
Utility module of Classic Pong
"""

from classic_pong.utils.config import KEYBOARD_LAYOUTS
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import KeyboardLayout
from classic_pong.utils.config import game_config
from classic_pong.utils.config import game_config_tmp

__all__ = ["game_config", "game_config_tmp", "GameConfig", "KeyboardLayout", "KEYBOARD_LAYOUTS"]
