"""Draw detected labels onto an image.

Each label gets a red rectangle outline from its normalized bounding box,
scaled by the size of the image actually decoded, and its name written at the
box's top-left corner. Labels are drawn in detection order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Tuple

from PIL import Image, ImageDraw, ImageFont

from custom_labels.errors import FontLoadError
from custom_labels.logging import get_logger
from custom_labels.schemas import DetectedLabel

logger = get_logger(__name__)

__all__ = ["BOX_COLOR", "annotate_image", "load_font", "pixel_rectangle"]

BOX_COLOR: Tuple[int, int, int] = (255, 0, 0)


def load_font(path: Path | str | None = None, size: int = 100) -> ImageFont.FreeTypeFont:
    """Load the label font.

    Without ``path`` the font shipped inside Pillow is used, so rendering does
    not depend on fonts installed on the host.
    """
    try:
        if path is None:
            font = ImageFont.load_default(size=size)
        else:
            font = ImageFont.truetype(str(path), size=size)
    except (OSError, ValueError) as e:
        raise FontLoadError(f"unable to load font {path or '(bundled)'}: {e}", cause=e) from e
    if not isinstance(font, ImageFont.FreeTypeFont):
        # bitmap fallback: Pillow was built without FreeType
        raise FontLoadError("unable to load font: FreeType text rendering is unavailable")
    return font


def pixel_rectangle(
    label: DetectedLabel, image_size: Tuple[int, int]
) -> Tuple[float, float, float, float] | None:
    """Return (x, y, w, h) in pixels, or None for labels without geometry."""
    if label.bounding_box is None:
        return None
    width, height = image_size
    return label.bounding_box.to_pixels(width, height)


def annotate_image(
    image: Image.Image,
    labels: Iterable[DetectedLabel],
    font: ImageFont.FreeTypeFont,
    stroke_width: int = 10,
    color: Tuple[int, int, int] = BOX_COLOR,
) -> int:
    """Draw every label onto ``image`` in place. Returns the number of boxes drawn."""
    draw = ImageDraw.Draw(image)
    drawn = 0
    for i, label in enumerate(labels):
        rect = pixel_rectangle(label, image.size)
        if rect is None:
            logger.warning(f"label #{i} '{label.name}' has no bounding box; skipping")
            continue
        x, y, w, h = rect
        logger.debug(f"label #{i}: {label.name}")
        logger.debug(f"\tleft: {x}")
        logger.debug(f"\ttop: {y}")
        logger.debug(f"\twidth: {w}")
        logger.debug(f"\theight: {h}")
        draw.rectangle((x, y, x + w, y + h), outline=color, width=stroke_width)
        draw.text((x, y), label.name, fill=color, font=font, anchor="ls")
        drawn += 1
    return drawn
