"""
Rasterize text or an image into a 7-row canvas and flatten it into
calendar order.

A canvas is a list of 7 rows of booleans, [y][x]; True means "draw here".
Rows are weekdays (Sunday first), columns are weeks.
"""

import logging

from PIL import Image, UnidentifiedImageError

from commit_art import font
from commit_art.errors import InputError, InvalidImageShapeError, UnsupportedGlyphError

logger = logging.getLogger(__name__)

HEIGHT = font.HEIGHT
# Widest canvas a one-year contribution graph can show.
MAX_WEEKS = 53
MAX_SPACING = 7
# Grayscale values below this (after compositing onto white) are filled.
THRESHOLD = 128


def from_text(text: str, spacing: int = 1) -> list:
    """
    Draw `text` glyph by glyph, left to right, with `spacing` empty columns
    between consecutive glyphs.
    """
    if isinstance(spacing, bool) or not isinstance(spacing, int):
        raise InputError(f"space between letters must be an integer, got {spacing!r}")
    if not 0 <= spacing <= MAX_SPACING:
        raise InputError(
            f"space between letters must be between 0 and {MAX_SPACING}, got {spacing}"
        )
    if not text:
        raise InputError("text is empty")

    canvas = [[] for _ in range(HEIGHT)]
    for idx, char in enumerate(text):
        try:
            rows = font.glyph(char)
        except KeyError:
            raise UnsupportedGlyphError(char) from None
        for y in range(HEIGHT):
            if idx > 0:
                canvas[y].extend([False] * spacing)
            canvas[y].extend(rows[y])

    width = len(canvas[0])
    if width > MAX_WEEKS:
        logger.warning(
            "Text is %d columns wide; only columns up to the end date will be drawn",
            width,
        )
    return canvas


def convert_image(im):
    """Flatten transparency onto white and reduce to one grayscale channel."""
    im = im.convert("RGBA")
    bg = Image.new("RGBA", im.size, (255, 255, 255, 255))
    bg.paste(im, mask=im.getchannel("A"))
    return bg.convert("L")


def from_image(path) -> list:
    """
    Load an image exactly 7 pixels high. Dark opaque pixels are filled,
    light or transparent ones are empty.
    """
    try:
        with Image.open(path) as im:
            gray = convert_image(im)
    except (OSError, UnidentifiedImageError) as exc:
        raise InputError(f"cannot read image {path}: {exc}") from exc

    width, height = gray.size
    if height != HEIGHT:
        raise InvalidImageShapeError(
            f"image must be {HEIGHT} pixels high, {path} is {width}x{height}"
        )
    if width > MAX_WEEKS:
        logger.warning(
            "Image is %d pixels wide; only columns up to the end date will be drawn",
            width,
        )

    data = gray.load()
    return [[data[x, y] < THRESHOLD for x in range(width)] for y in range(HEIGHT)]


def flatten_by_columns(canvas: list) -> list:
    """
    Read the canvas column by column, top to bottom: index i is the cell
    at row i % 7, column i // 7, which is day i of the calendar walk.
    """
    height = len(canvas)
    width = len(canvas[0]) if canvas else 0
    return [canvas[i % height][i // height] for i in range(height * width)]


def unflatten_by_columns(pixels: list, width: int) -> list:
    """Inverse of flatten_by_columns for a canvas `width` columns wide."""
    if len(pixels) != HEIGHT * width:
        raise ValueError(
            f"expected {HEIGHT * width} pixels for width {width}, got {len(pixels)}"
        )
    return [[pixels[x * HEIGHT + y] for x in range(width)] for y in range(HEIGHT)]


def render_canvas(canvas: list, filled: str = "#", empty: str = " ") -> str:
    return "\n".join("".join(filled if cell else empty for cell in row) for row in canvas)
