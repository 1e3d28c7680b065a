"""Pydantic models for detected labels & run configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, validator

from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_MIN_CONFIDENCE = 70.0
DEFAULT_OUTPUT = "output.png"


class BoundingBox(BaseModel):
    """Box normalized to image size (0.0-1.0), as returned by Rekognition.

    Left/top may fall slightly outside the image for objects cut by the border,
    so only the extents are constrained.
    """

    left: float
    top: float
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)

    def to_pixels(self, image_width: int, image_height: int) -> tuple[float, float, float, float]:
        """Scale to pixel (x, y, w, h) using the decoded image's dimensions."""
        return (
            self.left * image_width,
            self.top * image_height,
            self.width * image_width,
            self.height * image_height,
        )


class DetectedLabel(BaseModel):
    name: str
    confidence: float = Field(..., ge=0, le=100)
    bounding_box: BoundingBox | None = None


class RunConfig(BaseModel):
    bucket: str
    key: str
    model_arn: str
    min_confidence: float = Field(DEFAULT_MIN_CONFIDENCE, ge=0, le=100)
    output: Path = Path(DEFAULT_OUTPUT)
    region: str | None = None
    profile: str | None = None
    font_path: Path | None = None
    font_size: int = 100
    stroke_width: int = 10
    timeout: float = 60.0
    max_attempts: int = 3

    @validator("bucket", "key", "model_arn")
    def _required(cls, v: str) -> str:  # noqa: D401
        v = (v or "").strip()
        if not v:
            raise ValueError("value is required and must not be blank")
        return v

    @validator("font_size", "stroke_width", "max_attempts")
    def _positive(cls, v: int) -> int:  # noqa: D401
        if v <= 0:
            raise ValueError("must be > 0")
        return v

    @validator("timeout")
    def _timeout_positive(cls, v: float) -> float:  # noqa: D401
        if v <= 0:
            raise ValueError("timeout must be > 0")
        return v


class RunResult(BaseModel):
    output: Path
    labels: list[DetectedLabel] = []  # noqa: RUF012
    image_size: tuple[int, int]


# Parsing helpers


def labels_from_response(resp: dict[str, Any]) -> list[DetectedLabel]:
    """Convert a DetectCustomLabels response into DetectedLabel, keeping response order."""
    labels: list[DetectedLabel] = []
    for item in resp.get("CustomLabels") or []:
        box = None
        geometry = item.get("Geometry") or {}
        raw_box = geometry.get("BoundingBox")
        if raw_box:
            box = BoundingBox(
                left=float(raw_box.get("Left", 0.0)),
                top=float(raw_box.get("Top", 0.0)),
                width=float(raw_box.get("Width", 0.0)),
                height=float(raw_box.get("Height", 0.0)),
            )
        labels.append(
            DetectedLabel(
                name=str(item.get("Name", "")),
                confidence=float(item.get("Confidence", 0.0)),
                bounding_box=box,
            )
        )
    return labels
