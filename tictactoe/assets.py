"""
Asset loading for TicTacToe.
The window needs a TrueType font to draw the marks.
"""

import logging
import os

from PIL import Image, ImageDraw, ImageFont

from tictactoe.logic.errors import AssetUnavailable

logger = logging.getLogger(__name__)


def load_font(path: str, size: int) -> ImageFont.FreeTypeFont:
    """
    Load a TrueType font.

    Args:
        path: Path to a .ttf file.
        size: Font size in pixels.

    Returns:
        The loaded font.

    Raises:
        AssetUnavailable: If the file is missing or not a readable font.
    """
    if not os.path.isfile(path):
        raise AssetUnavailable(f"Could not load font {path}: file not found", path)

    try:
        font = ImageFont.truetype(path, size)
    except OSError as exc:
        raise AssetUnavailable(f"Could not load font {path}: {exc}", path) from exc

    logger.info("Loaded font %s (%dpx)", path, size)
    return font


def render_mark(symbol: str, font: ImageFont.FreeTypeFont, color: str) -> Image.Image:
    """
    Draw a single mark onto a transparent image sized to fit the glyph.

    Args:
        symbol: Text to draw ("X" or "O").
        font: Font from load_font().
        color: Fill color.

    Returns:
        An RGBA image.
    """
    _, _, right, bottom = font.getbbox(symbol)
    # Keep the glyph's own top bearing so it sits where the offset says
    image = Image.new("RGBA", (max(right, 1), max(bottom, 1)), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    draw.text((0, 0), symbol, font=font, fill=color)
    return image
