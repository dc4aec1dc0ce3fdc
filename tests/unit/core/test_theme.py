"""Unit tests for theme module.

Tests for color validation and Rich theme generation.
"""

import pytest
from findr.core.theme import ThemeColors, get_rich_theme
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.warning == "#f5b332"
        assert colors.error == "#f53263"

    def test_valid_hex_colors(self) -> None:
        """ThemeColors accepts #RGB and #RRGGBB codes."""
        colors = ThemeColors(warning="#abc", error=" #AABBCC ")
        assert colors.warning == "#abc"
        assert colors.error == "#AABBCC"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(error="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(error="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects non-hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(error="#gggggg")

    def test_non_string_rejected(self) -> None:
        """ThemeColors rejects non-string values."""
        with pytest.raises(ValueError, match="color must be a string"):
            ThemeColors(error=123)  # type: ignore[arg-type]

    def test_unknown_color_rejected(self) -> None:
        """Unknown color names are rejected."""
        with pytest.raises(ValueError):
            ThemeColors(sparkle="#ffffff")  # type: ignore[call-arg]


class TestGetRichTheme:
    """Tests for get_rich_theme."""

    def test_returns_theme(self) -> None:
        """get_rich_theme builds a Rich Theme with the diagnostic styles."""
        theme = get_rich_theme()

        assert isinstance(theme, Theme)
        assert "warning" in theme.styles
        assert "error" in theme.styles

    def test_error_style_is_bold(self) -> None:
        """The error style is bold in the configured color."""
        theme = get_rich_theme(ThemeColors(error="#ff0000"))

        style = theme.styles["error"]
        assert style.bold is True
        assert style.color is not None
        assert style.color.triplet is not None
        assert style.color.triplet.hex == "#ff0000"
