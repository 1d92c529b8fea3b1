"""Font loading with caching and fallback to Pillow's bundled font."""

import logging
from collections import OrderedDict
from pathlib import Path
from typing import Optional, Union

from PIL import ImageFont
from PIL.ImageFont import FreeTypeFont
from PIL.ImageFont import ImageFont as BuiltinFont

logger = logging.getLogger(__name__)

Font = Union[FreeTypeFont, BuiltinFont]

REGULAR_FONT = "DejaVuSans.ttf"
BOLD_FONT = "DejaVuSans-Bold.ttf"
MAX_FONT_CACHE_SIZE = 24


class FontManager:
    """Load TrueType fonts by weight and size.

    Fonts come from ``font_dir`` when configured, otherwise from the system
    font path. When neither has them, Pillow's default font is used so
    rendering never fails on a missing font.
    """

    def __init__(self, font_dir: Optional[Path] = None) -> None:
        self.font_dir = Path(font_dir) if font_dir else None
        self._font_cache: OrderedDict[tuple[bool, int], Font] = OrderedDict()
        self._warned_fallback = False

    def get(self, size: int, bold: bool = False) -> Font:
        """Get a font of the requested pixel size and weight.

        Args:
            size: Font size in pixels (clamped to at least 6)
            bold: Whether to use the bold face

        Returns:
            Loaded font
        """
        size = max(6, int(size))
        key = (bold, size)

        if key in self._font_cache:
            self._font_cache.move_to_end(key)
            return self._font_cache[key]

        font = self._load(size, bold)
        self._font_cache[key] = font
        if len(self._font_cache) > MAX_FONT_CACHE_SIZE:
            self._font_cache.popitem(last=False)
        return font

    def _load(self, size: int, bold: bool) -> Font:
        file_name = BOLD_FONT if bold else REGULAR_FONT
        font_path = str(self.font_dir / file_name) if self.font_dir else file_name

        try:
            return ImageFont.truetype(font_path, size)
        except OSError as e:
            if not self._warned_fallback:
                logger.warning("Failed to load font %s: %s, using default font", font_path, e)
                self._warned_fallback = True
            return ImageFont.load_default(size=size)
