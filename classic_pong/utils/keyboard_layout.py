"""
Keyboard layout detection for Classic Pong
"""

import locale
import os

from classic_pong.utils.config import KEYBOARD_LAYOUTS


def _layout_for_language(language: str) -> str | None:
    language = language.lower()
    if language.startswith("fr"):
        return "azerty"
    if language.startswith("de"):
        return "qwertz"
    return None


def detect_system_layout() -> str:
    """
    Detect the most likely keyboard layout based on system locale

    Returns:
        Keyboard layout name (default to 'qwerty' if detection fails)
    """
    system_locale = locale.getlocale()[0]
    if system_locale:
        return _layout_for_language(system_locale) or "qwerty"

    # Fallback to environment variables
    lang = os.environ.get("LANG", "")
    return _layout_for_language(lang) or "qwerty"


def list_available_layouts() -> dict[str, str]:
    """Get all available keyboard layouts"""
    return {name: layout.name for name, layout in KEYBOARD_LAYOUTS.items()}


def show_layout_help(layout_name: str) -> str:
    """
    Generate help text showing the key mappings of a layout

    Returns:
        Formatted help text
    """
    layout = KEYBOARD_LAYOUTS[layout_name]

    help_text = f"Keyboard layout: {layout.name}\n"
    help_text += "  Player 1 (left): "
    help_text += f"{layout.display_names['up']} up / {layout.display_names['down']} down\n"
    help_text += "  Player 2 (right): ↑ up / ↓ down\n"
    help_text += "  ESC: quit"
    return help_text
