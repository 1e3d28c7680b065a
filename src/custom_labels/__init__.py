"""custom_labels package

Annotate one S3 image with the detections of an Amazon Rekognition Custom
Labels model: boxes and label names are drawn onto the image and written as PNG.

Most users interact through the CLI (`custom-labels`).
"""
from .schemas import BoundingBox, DetectedLabel, RunConfig, RunResult  # re-export core models

__all__ = [
    "BoundingBox",
    "DetectedLabel",
    "RunConfig",
    "RunResult",
]
