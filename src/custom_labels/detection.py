"""Rekognition Custom Labels detection.

One ``DetectCustomLabels`` call per run. The confidence floor is passed to the
service unchanged and the service enforces it; results keep response order.
"""

from __future__ import annotations

from typing import Any, List

from botocore.exceptions import BotoCoreError, ClientError

from custom_labels.errors import DetectionAPIError
from custom_labels.logging import get_logger
from custom_labels.schemas import DetectedLabel, RunConfig, labels_from_response

logger = get_logger(__name__)

__all__ = ["build_request", "detect_custom_labels"]


def build_request(cfg: RunConfig) -> dict[str, Any]:
    return {
        "Image": {"S3Object": {"Bucket": cfg.bucket, "Name": cfg.key}},
        "ProjectVersionArn": cfg.model_arn,
        "MinConfidence": cfg.min_confidence,
    }


def detect_custom_labels(client: Any, cfg: RunConfig) -> List[DetectedLabel]:
    """Run the model on ``s3://bucket/key`` and return labels in detection order."""
    try:
        resp = client.detect_custom_labels(**build_request(cfg))
    except (ClientError, BotoCoreError) as e:
        raise DetectionAPIError(f"unable to detect custom labels, {e}", cause=e) from e

    try:
        labels = labels_from_response(resp)
    except (ValueError, TypeError) as e:
        # pydantic ValidationError is a ValueError
        raise DetectionAPIError(f"unexpected detect custom labels response, {e}", cause=e) from e
    logger.info(f"detected {len(labels)} labels")
    for label in labels:
        logger.info(f"{label.name}: {label.confidence:.2f}")
    return labels
