"""Failure kinds raised by the pipeline stages.

Every kind is fatal: stages raise, ``cli.main`` logs one line and exits non-zero.
"""
from __future__ import annotations


class CustomLabelsError(Exception):
    """Base class; ``stage`` names the pipeline step that failed."""

    stage = "run"

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.stage}: {self.message}"


class ConfigLoadError(CustomLabelsError):
    stage = "config"


class DetectionAPIError(CustomLabelsError):
    stage = "detect"


class StorageAPIError(CustomLabelsError):
    stage = "fetch"


class DecodeError(CustomLabelsError):
    stage = "decode"


class FontLoadError(CustomLabelsError):
    stage = "font"


class SaveError(CustomLabelsError):
    stage = "save"
