"""
Color constants for the dashboard.

Tri-color e-paper panels can show black, white and red. Gray shades are
kept for the PNG preview and collapse to black or white when the image is
converted to display channels.
"""


class DashboardColors:
    """Palette shared by every widget painter."""

    WHITE = "#ffffff"
    BLACK = "#000000"
    RED = "#d40000"

    GRAY_MEDIUM = "#666666"
    GRAY_DARK = "#333333"

    BACKGROUND = WHITE
    TEXT_PRIMARY = BLACK
    TEXT_SECONDARY = GRAY_DARK
    TEXT_MUTED = GRAY_MEDIUM
    ACCENT = RED
    RULE = BLACK
    OUTLINE = "#0080ff"  # debug outline


def get_rendering_colors(use_red: bool = True) -> dict[str, str]:
    """Colors for common rendering roles.

    Args:
        use_red: Whether the target panel can show red; black is used otherwise

    Returns:
        Role name -> hex color
    """
    accent = DashboardColors.ACCENT if use_red else DashboardColors.BLACK
    return {
        "background": DashboardColors.BACKGROUND,
        "text_primary": DashboardColors.TEXT_PRIMARY,
        "text_secondary": DashboardColors.TEXT_SECONDARY,
        "text_muted": DashboardColors.TEXT_MUTED,
        "accent": accent,
        "rule": DashboardColors.RULE,
        "outline": DashboardColors.OUTLINE,
    }
