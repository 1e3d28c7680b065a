from __future__ import annotations

import argparse
import os
from typing import Iterable, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from custom_labels.errors import ConfigLoadError, CustomLabelsError
from custom_labels.logging import get_logger, set_level
from custom_labels.pipeline import run
from custom_labels.schemas import DEFAULT_MIN_CONFIDENCE, DEFAULT_OUTPUT, RunConfig

logger = get_logger(__name__)

load_dotenv()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="custom-labels",
        description=(
            "Detect objects in an S3 image with a Rekognition Custom Labels model "
            "and save the image with boxes and label names drawn on it."
        ),
    )
    p.add_argument(
        "--bucket",
        default=os.getenv("CUSTOM_LABELS_BUCKET", ""),
        help="The name of the bucket to get the object",
    )
    p.add_argument(
        "--key",
        default=os.getenv("CUSTOM_LABELS_KEY", ""),
        help="The s3 object key to the image file (JPEG, JPG, PNG)",
    )
    p.add_argument(
        "--model-arn",
        default=os.getenv("CUSTOM_LABELS_MODEL_ARN", ""),
        help="The rekognition custom labels model (project version) arn",
    )
    p.add_argument(
        "--min-confidence",
        type=float,
        default=os.getenv("CUSTOM_LABELS_MIN_CONFIDENCE", str(DEFAULT_MIN_CONFIDENCE)),
        help="The minimum confidence value (0-100) passed to the service",
    )
    p.add_argument(
        "--output",
        default=os.getenv("CUSTOM_LABELS_OUTPUT", DEFAULT_OUTPUT),
        help="Where to write the annotated PNG",
    )
    p.add_argument("--region", default=None, help="AWS region (default: ambient config)")
    p.add_argument("--profile", default=None, help="AWS shared-config profile")
    p.add_argument(
        "--font",
        default=None,
        help="Optional TrueType font file; the font bundled with Pillow is used otherwise",
    )
    p.add_argument("--font-size", type=int, default=100)
    p.add_argument("--stroke-width", type=int, default=10, help="Box outline width in pixels")
    p.add_argument(
        "--timeout",
        type=float,
        default=60.0,
        help="Connect/read timeout in seconds for each AWS call",
    )
    p.add_argument(
        "--max-attempts",
        type=int,
        default=3,
        help="Total attempts per AWS call, including retries",
    )
    p.add_argument(
        "--log-level",
        default=os.getenv("CUSTOM_LABELS_LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return p


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(list(argv) if argv is not None else None)


def config_from_args(args: argparse.Namespace) -> RunConfig:
    """Build the run configuration from fully parsed arguments."""
    try:
        return RunConfig(
            bucket=args.bucket,
            key=args.key,
            model_arn=args.model_arn,
            min_confidence=args.min_confidence,
            output=args.output,
            region=args.region,
            profile=args.profile,
            font_path=args.font,
            font_size=args.font_size,
            stroke_width=args.stroke_width,
            timeout=args.timeout,
            max_attempts=args.max_attempts,
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigLoadError(f"invalid arguments: {problems}", cause=e) from e


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    set_level(args.log_level)
    try:
        cfg = config_from_args(args)
        run(cfg)
    except CustomLabelsError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
