"""Single-image pipeline: detect, fetch, decode, annotate, save."""
from __future__ import annotations

import time

from .annotate import annotate_image, load_font
from .detection import detect_custom_labels
from .logging import get_logger
from .schemas import RunConfig, RunResult
from .storage import fetch_object_bytes
from .utils.clients import AWSClients
from .utils.images import decode_image
from .writer import PNGWriter

logger = get_logger(__name__)


def run(cfg: RunConfig, clients: AWSClients | None = None) -> RunResult:
    """Annotate ``s3://bucket/key`` with the model's labels and write ``cfg.output``.

    Stages raise ``CustomLabelsError`` subclasses; nothing is written unless
    every stage before the save succeeded.
    """
    t0 = time.time()
    logger.info("🚀 Start run model=%s image=s3://%s/%s", cfg.model_arn, cfg.bucket, cfg.key)
    if clients is None:
        clients = AWSClients.from_config(cfg)

    labels = detect_custom_labels(clients.rekognition, cfg)
    data = fetch_object_bytes(clients.s3, cfg.bucket, cfg.key)
    image = decode_image(data)
    logger.info("decoded image %dx%d", image.width, image.height)

    font = load_font(cfg.font_path, cfg.font_size)
    drawn = annotate_image(image, labels, font, stroke_width=cfg.stroke_width)

    out = PNGWriter(cfg.output).write(image)
    logger.info("📊 Wrote %s with %d boxes in %.2fs", out, drawn, time.time() - t0)
    return RunResult(output=out, labels=labels, image_size=image.size)
