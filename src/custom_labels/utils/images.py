from __future__ import annotations

from io import BytesIO

from PIL import Image, UnidentifiedImageError

from custom_labels.errors import DecodeError

__all__ = [
    "SUPPORTED_FORMATS",
    "decode_image",
]

SUPPORTED_FORMATS = ("JPEG", "PNG")


def _has_alpha(im: Image.Image) -> bool:
    return im.mode in ("RGBA", "LA", "PA") or "transparency" in im.info


def decode_image(data: bytes) -> Image.Image:
    """Decode JPEG/PNG bytes into an RGB image, or RGBA when the source has alpha.

    The container is identified from the content itself, so an object key's
    extension is never trusted.
    """
    if not data:
        raise DecodeError("can't decode image: empty object body")
    try:
        with Image.open(BytesIO(data), formats=SUPPORTED_FORMATS) as im:
            im.load()
            mode = "RGBA" if _has_alpha(im) else "RGB"
            return im.convert(mode)
    except UnidentifiedImageError as e:
        raise DecodeError(
            f"can't decode image: not a {' or '.join(SUPPORTED_FORMATS)} file", cause=e
        ) from e
    except (OSError, SyntaxError, EOFError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f"can't decode image: {e}", cause=e) from e
