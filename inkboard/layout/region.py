"""Region model for layout placements."""

from typing import Any


class Region:
    """Represents a rectangular pixel region of the dashboard."""

    __slots__ = ("height", "width", "x", "y")

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        """Initialize a region.

        Args:
            x: X-coordinate of top-left corner
            y: Y-coordinate of top-left corner
            width: Width of region in pixels
            height: Height of region in pixels
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return f"Region(x={self.x}, y={self.y}, width={self.width}, height={self.height})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return self.get_coordinates() == other.get_coordinates()

    def __hash__(self) -> int:
        return hash(self.get_coordinates())

    def intersection(self, other: "Region") -> "Region":
        """Part of this region that lies inside ``other``, empty when they do not overlap."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.x + self.width, other.x + other.width)
        bottom = min(self.y + self.height, other.y + other.height)
        return Region(left, top, max(0, right - left), max(0, bottom - top))

    def get_coordinates(self) -> tuple[int, int, int, int]:
        """Get coordinates of the region.

        Returns:
            Tuple of (x, y, width, height)
        """
        return (self.x, self.y, self.width, self.height)

    def is_empty(self) -> bool:
        """True when nothing can be drawn inside the region."""
        return self.width <= 0 or self.height <= 0

    def inset(self, margin: int) -> "Region":
        """Shrink the region by ``margin`` on every side, never below zero size."""
        width = max(0, self.width - 2 * margin)
        height = max(0, self.height - 2 * margin)
        return Region(self.x + margin, self.y + margin, width, height)

    def to_box(self) -> tuple[int, int, int, int]:
        """Inclusive ``(x0, y0, x1, y1)`` box as expected by ``ImageDraw``."""
        return (self.x, self.y, self.x + self.width - 1, self.y + self.height - 1)
