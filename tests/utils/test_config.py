"""
Unit tests for configuration validation

Tests the configuration system including:
- Default values
- Pydantic validation of fields and field dimensions
- Context manager for temporary config changes
- Keyboard layouts
"""

import pytest
from pydantic import ValidationError

from classic_pong.utils.config import KEYBOARD_LAYOUTS, GameConfig, game_config, game_config_tmp
from classic_pong.utils.keyboard_layout import (
    detect_system_layout,
    list_available_layouts,
    show_layout_help,
)


class TestGameConfigDefaults:
    """Test default configuration"""

    def test_default_values(self):
        """Test the defaults match the classic game"""
        config = GameConfig()

        assert config.FIELD_WIDTH == 800
        assert config.FIELD_HEIGHT == 600
        assert config.PADDLE_PADDING == 40.0
        assert config.PADDLE_WIDTH == 20.0
        assert config.PADDLE_HEIGHT == 100.0
        assert config.PADDLE_SPEED == 600.0
        assert config.BALL_SIZE == 30.0
        assert config.ball_half_size == 15.0
        assert config.BALL_SPEED == 100.0
        assert config.WINDOW_TITLE == "PONG"
        assert config.MIDDLE_LINE_WIDTH == 2.0

    def test_to_dict(self):
        """Test serialization to a dictionary"""
        data = GameConfig().to_dict()
        assert data["FIELD_WIDTH"] == 800
        assert data["KEYBOARD_LAYOUT"] == "qwerty"


class TestGameConfigValidation:
    """Test pydantic validation"""

    @pytest.mark.parametrize(
        "field,value",
        [
            ("FIELD_WIDTH", 0),
            ("FIELD_HEIGHT", -600),
            ("BALL_SPEED", 0),
            ("PADDLE_SPEED", -1),
            ("BALL_SIZE", 0),
            ("FPS", 0),
        ],
    )
    def test_non_positive_values_rejected(self, field, value):
        """Test sizes and speeds must be positive"""
        with pytest.raises(ValidationError):
            GameConfig(**{field: value})

    def test_unknown_keyboard_layout(self):
        """Test unknown layouts are rejected"""
        with pytest.raises(ValidationError, match="Unknown keyboard layout"):
            GameConfig(KEYBOARD_LAYOUT="dvorak")

    def test_invalid_color(self):
        """Test color components must fit in a byte"""
        with pytest.raises(ValidationError):
            GameConfig(BACKGROUND_COLOR=(0, 0, 300))

    def test_field_too_narrow(self):
        """Test the field must fit both paddles and the ball"""
        with pytest.raises(ValidationError, match="FIELD_WIDTH"):
            GameConfig(FIELD_WIDTH=100)

    def test_field_too_short(self):
        """Test the field must be taller than a paddle"""
        with pytest.raises(ValidationError, match="FIELD_HEIGHT"):
            GameConfig(FIELD_HEIGHT=50)

    def test_assignment_is_validated(self):
        """Test invalid assignments are rejected"""
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.BALL_SPEED = -5.0


class TestGameConfigTmp:
    """Test temporary config changes"""

    def test_values_restored(self):
        """Test values come back after the block"""
        original = game_config.BALL_SPEED
        with game_config_tmp(BALL_SPEED=300.0):
            assert game_config.BALL_SPEED == 300.0
        assert game_config.BALL_SPEED == original

    def test_values_restored_on_error(self):
        """Test values come back even when the block raises"""
        original = game_config.PADDLE_SPEED
        with pytest.raises(RuntimeError):
            with game_config_tmp(PADDLE_SPEED=123.0):
                raise RuntimeError("boom")
        assert game_config.PADDLE_SPEED == original

    def test_partial_change_restored(self):
        """Test a valid change is undone when a later one fails validation"""
        original_speed = game_config.BALL_SPEED
        with pytest.raises(ValidationError):
            with game_config_tmp(BALL_SPEED=300.0, FPS=0):
                pass
        assert game_config.BALL_SPEED == original_speed


class TestKeyboardLayouts:
    """Test keyboard layouts"""

    def test_azerty_uses_z(self):
        """Test AZERTY players go up with Z"""
        layout = GameConfig(KEYBOARD_LAYOUT="azerty").get_keyboard_layout()
        assert layout.left_player_keys == {"up": "z", "down": "s"}

    @pytest.mark.parametrize("name", sorted(KEYBOARD_LAYOUTS))
    def test_right_player_uses_arrows(self, name):
        """Test the right player always uses the arrow keys"""
        layout = KEYBOARD_LAYOUTS[name]
        assert layout.right_player_keys == {"up": "up", "down": "down"}

    def test_detect_system_layout_known(self):
        """Test detection always returns a known layout"""
        assert detect_system_layout() in KEYBOARD_LAYOUTS

    @pytest.mark.parametrize(
        "locale_name,expected",
        [("fr_FR", "azerty"), ("de_DE", "qwertz"), ("en_US", "qwerty")],
    )
    def test_detect_from_locale(self, monkeypatch, locale_name, expected):
        """Test locale languages map to layouts"""
        monkeypatch.setattr(
            "classic_pong.utils.keyboard_layout.locale.getlocale",
            lambda: (locale_name, "UTF-8"),
        )
        assert detect_system_layout() == expected

    def test_detect_from_lang_variable(self, monkeypatch):
        """Test LANG is used when the locale is not set"""
        monkeypatch.setattr(
            "classic_pong.utils.keyboard_layout.locale.getlocale", lambda: (None, None)
        )
        monkeypatch.setenv("LANG", "fr_FR.UTF-8")
        assert detect_system_layout() == "azerty"

    def test_list_available_layouts(self):
        """Test display names are listed"""
        assert list_available_layouts() == {
            "qwerty": "QWERTY",
            "azerty": "AZERTY",
            "qwertz": "QWERTZ",
        }

    def test_show_layout_help(self):
        """Test help text names the keys"""
        text = show_layout_help("azerty")
        assert "AZERTY" in text
        assert "Z up / S down" in text
