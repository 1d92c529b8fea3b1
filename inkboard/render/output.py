"""Writing rendered dashboards to disk as PNG previews or e-paper channel files."""

import logging
import struct
import zlib
from pathlib import Path
from typing import NamedTuple, Optional, Union

from PIL import Image, ImageChops

from inkboard.utils.exceptions import OutputError

logger = logging.getLogger(__name__)

CHANNEL_MAGIC = b"INKB"
CHANNEL_HEADER = struct.Struct(">4sHHB")
FLAG_BLACK = 0x01
FLAG_RED = 0x02


class ChannelPlanes(NamedTuple):
    """Decoded contents of a channel file."""

    width: int
    height: int
    black: bytes
    red: Optional[bytes]


def plane_size(width: int, height: int) -> int:
    """Bytes in one packed 1-bit plane; each row is padded to a whole byte."""
    return (width + 7) // 8 * height


def save_png(image: Image.Image, path: Union[str, Path]) -> Path:
    """Save ``image`` as PNG, creating parent directories.

    Raises:
        OutputError: If the file cannot be written
    """
    output_path = Path(path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        image.save(output_path, format="PNG")
    except OSError as e:
        raise OutputError(f"Cannot write PNG {output_path}: {e}", {"path": str(output_path)}) from e

    logger.info("Saved %dx%d preview to %s", image.width, image.height, output_path)
    return output_path


def _band_mask(band: Image.Image, limit: int, above: bool) -> Image.Image:
    if above:
        return band.point(lambda v: 255 if v > limit else 0)
    return band.point(lambda v: 255 if v < limit else 0)


def convert_image_to_channels(
    image: Image.Image, threshold: int = 128, red_threshold: Optional[int] = None
) -> tuple[bytes, bytes]:
    """Convert a rendered image to packed black and red planes.

    A pixel is red when its red component is above ``red_threshold`` and the
    other two are below it; otherwise it is black when all three components
    are below ``threshold``. Everything else is white. In both planes a set
    bit means white.

    Args:
        image: PIL Image to convert
        threshold: Threshold for black/white conversion (0-255)
        red_threshold: Threshold for red conversion (0-255), None to disable red

    Returns:
        ``(black, red)`` planes; ``red`` is all white when red is disabled
    """
    if image.mode != "RGB":
        image = image.convert("RGB")

    r, g, b = image.split()

    black_mask = ImageChops.multiply(
        ImageChops.multiply(_band_mask(r, threshold, False), _band_mask(g, threshold, False)),
        _band_mask(b, threshold, False),
    )

    if red_threshold is not None:
        red_mask = ImageChops.multiply(
            ImageChops.multiply(
                _band_mask(r, red_threshold, True), _band_mask(g, red_threshold, False)
            ),
            _band_mask(b, red_threshold, False),
        )
        black_mask = ImageChops.subtract(black_mask, red_mask)
    else:
        red_mask = Image.new("L", image.size, 0)

    black = ImageChops.invert(black_mask).convert("1", dither=Image.Dither.NONE).tobytes()
    red = ImageChops.invert(red_mask).convert("1", dither=Image.Dither.NONE).tobytes()
    return black, red


def save_channels(
    image: Image.Image,
    path: Union[str, Path],
    threshold: int = 128,
    red_threshold: Optional[int] = None,
) -> Path:
    """Write the channel file for ``image``.

    Layout: ``INKB`` magic, big-endian width and height (uint16), a flags
    byte (``FLAG_BLACK``, ``FLAG_RED``), then the zlib-compressed planes
    black first.

    Raises:
        OutputError: If the image is too large for the header or the file cannot be written
    """
    output_path = Path(path)
    width, height = image.size
    if width > 0xFFFF or height > 0xFFFF:
        raise OutputError(
            f"Image {width}x{height} too large for channel file",
            {"width": width, "height": height},
        )

    black, red = convert_image_to_channels(image, threshold, red_threshold)
    flags = FLAG_BLACK
    payload = black
    if red_threshold is not None:
        flags |= FLAG_RED
        payload += red

    header = CHANNEL_HEADER.pack(CHANNEL_MAGIC, width, height, flags)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(header + zlib.compress(payload, 9))
    except OSError as e:
        raise OutputError(
            f"Cannot write channel file {output_path}: {e}", {"path": str(output_path)}
        ) from e

    logger.info(
        "Saved %s channel file to %s",
        "black/red" if flags & FLAG_RED else "black",
        output_path,
    )
    return output_path


def load_channels(path: Union[str, Path]) -> ChannelPlanes:
    """Read a channel file written by :func:`save_channels`.

    Raises:
        OutputError: If the file is unreadable or not a valid channel file
    """
    input_path = Path(path)
    try:
        raw = input_path.read_bytes()
    except OSError as e:
        raise OutputError(f"Cannot read channel file {input_path}: {e}") from e

    if len(raw) < CHANNEL_HEADER.size:
        raise OutputError(f"Channel file {input_path} is truncated")

    magic, width, height, flags = CHANNEL_HEADER.unpack_from(raw)
    if magic != CHANNEL_MAGIC:
        raise OutputError(f"Not a channel file: {input_path}", {"magic": magic.hex()})

    try:
        payload = zlib.decompress(raw[CHANNEL_HEADER.size :])
    except zlib.error as e:
        raise OutputError(f"Corrupt channel data in {input_path}: {e}") from e

    size = plane_size(width, height)
    expected = size * (2 if flags & FLAG_RED else 1)
    if len(payload) != expected:
        raise OutputError(
            f"Channel data in {input_path} has {len(payload)} bytes, expected {expected}",
            {"width": width, "height": height, "flags": flags},
        )

    red = payload[size:] if flags & FLAG_RED else None
    return ChannelPlanes(width, height, payload[:size], red)
