"""Theme management for findr CLI output.

Colors are validated hex codes, configurable through the ``[colors]``
table of the settings file, and converted into a Rich Theme.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme


class ThemeColors(BaseModel):
    """Color configuration for findr diagnostics.

    All colors must be valid hex codes (#RRGGBB or #RGB).
    """

    model_config = ConfigDict(extra="forbid")

    warning: str = "#f5b332"
    error: str = "#f53263"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are valid hex codes."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#"):
            msg = f"{info.field_name}: color must start with '#'"
            raise ValueError(msg)
        color_part = color[1:]
        if len(color_part) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        try:
            int(color_part, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme.

    Args:
        colors: ThemeColors instance to convert. Defaults are used if None.

    Returns:
        Rich Theme instance configured with the color scheme.
    """
    if colors is None:
        colors = ThemeColors()

    styles: dict[str, str] = {
        "warning": colors.warning,
        "error": f"bold {colors.error}",
    }

    return Theme(styles)
