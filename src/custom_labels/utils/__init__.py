from __future__ import annotations

from .clients import AWSClients
from .images import SUPPORTED_FORMATS, decode_image

__all__ = ["AWSClients", "SUPPORTED_FORMATS", "decode_image"]
