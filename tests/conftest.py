"""Shared test fixtures for custom-labels tests."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest
from botocore.exceptions import ClientError
from PIL import Image

from custom_labels.schemas import RunConfig


def make_image_bytes(
    size: tuple[int, int] = (1000, 500),
    color: tuple[int, int, int] = (255, 255, 255),
    fmt: str = "PNG",
) -> bytes:
    buf = BytesIO()
    Image.new("RGB", size, color=color).save(buf, format=fmt)
    return buf.getvalue()


def custom_label(name: str, confidence: float, box: tuple[float, float, float, float] | None) -> dict[str, Any]:
    """Build one CustomLabels entry as Rekognition returns it; box is (left, top, width, height)."""
    item: dict[str, Any] = {"Name": name, "Confidence": confidence}
    if box is not None:
        left, top, width, height = box
        item["Geometry"] = {
            "BoundingBox": {"Width": width, "Height": height, "Left": left, "Top": top}
        }
    return item


def client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised"}}, operation)


class FakeRekognition:
    """Stand-in for the boto3 rekognition client; records every request."""

    def __init__(self, labels: list[dict[str, Any]] | None = None, error: Exception | None = None) -> None:
        self.labels = labels or []
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def detect_custom_labels(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return {"CustomLabels": list(self.labels)}


class FakeS3:
    """Stand-in for the boto3 s3 client serving one object body."""

    def __init__(self, data: bytes = b"", error: Exception | None = None) -> None:
        self.data = data
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.bodies: list[BytesIO] = []

    def get_object(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        body = BytesIO(self.data)
        self.bodies.append(body)
        return {"Body": body, "ContentLength": len(self.data)}


@pytest.fixture
def run_config(tmp_path: Path) -> RunConfig:
    """Return a RunConfig writing into tmp_path."""
    return RunConfig(
        bucket="photos",
        key="cat.jpg",
        model_arn="arn:model/v1",
        output=tmp_path / "output.png",
    )


@pytest.fixture
def cat_label() -> dict[str, Any]:
    return custom_label("Cat", 92.5, (0.1, 0.2, 0.3, 0.4))


@pytest.fixture
def fake_clients():
    """Factory returning an object shaped like AWSClients around fake clients."""

    def _make(rekognition: FakeRekognition, s3: FakeS3) -> SimpleNamespace:
        return SimpleNamespace(rekognition=rekognition, s3=s3)

    return _make
