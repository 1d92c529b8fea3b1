"""Proportional space splitting for layout containers.

Each container divides its split axis among its entries in one pass:

1. Pixel-sized entries are reserved first, exactly as declared.
2. Whatever is left (never negative) is shared between unit-sized entries
   in proportion to their weight, truncating each share to whole pixels.
3. Entries are placed back to back in declaration order; the cross axis is
   passed through untouched.

Truncated fractions are not redistributed, and leftover space is dropped
when no entry carries a positive unit weight.
"""

from collections.abc import Sequence

from .nodes import Container, SplitDirection
from .region import Region
from .size import Size, fixed_pixels, is_scaled, unit_weight


def split_span(region: Region, split: SplitDirection) -> int:
    """Length of the split axis of ``region``, clamped to zero."""
    span = region.width if split is SplitDirection.HORIZONTAL else region.height
    return max(0, span)


def split_extents(sizes: Sequence[Size], span: int) -> list[tuple[int, int]]:
    """Compute ``(offset, extent)`` along the split axis for each size.

    Args:
        sizes: Entry sizes in declaration order
        span: Available pixels along the split axis

    Returns:
        One ``(offset, extent)`` pair per size, offsets relative to the
        container origin
    """
    span = max(0, span)
    fixed_sum = sum(fixed_pixels(size) for size in sizes)
    leftover = max(0, span - fixed_sum)
    unit_sum = sum(unit_weight(size) for size in sizes)

    placements: list[tuple[int, int]] = []
    offset = 0
    for size in sizes:
        if not is_scaled(size):
            extent = fixed_pixels(size)
        elif unit_sum <= 0:
            extent = 0
        else:
            extent = max(0, int(leftover * (unit_weight(size) / unit_sum)))

        placements.append((offset, extent))
        offset += extent

    return placements


def solve_container(container: Container, region: Region) -> list[Region]:
    """Resolve the region of every entry of ``container``.

    Args:
        container: Container whose entries are laid out
        region: Space available to the container

    Returns:
        Regions in the same order as ``container.entries``
    """
    sizes = [entry.size for entry in container.entries]
    extents = split_extents(sizes, split_span(region, container.split))

    if container.split is SplitDirection.HORIZONTAL:
        return [
            Region(region.x + offset, region.y, extent, region.height)
            for offset, extent in extents
        ]
    return [
        Region(region.x, region.y + offset, region.width, extent) for offset, extent in extents
    ]
