from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError
from dotenv import load_dotenv

from custom_labels.errors import ConfigLoadError
from custom_labels.logging import get_logger

logger = get_logger(__name__)
load_dotenv()

__all__ = ["AWSClients"]


@dataclass
class AWSClients:
    """Rekognition and S3 clients sharing one boto3 session.

    Region and credentials come from the ambient AWS configuration (env vars,
    shared config/credentials files, instance role) unless overridden.
    Both clients get the same timeouts and standard-mode retries.
    """

    region: str | None = None
    profile: str | None = None
    timeout: float = 60.0
    max_attempts: int = 3
    rekognition: Any = field(init=False, repr=False)
    s3: Any = field(init=False, repr=False)

    def __post_init__(self) -> None:
        config = Config(
            connect_timeout=self.timeout,
            read_timeout=self.timeout,
            retries={"total_max_attempts": self.max_attempts, "mode": "standard"},
        )
        try:
            session = boto3.session.Session(
                profile_name=self.profile, region_name=self.region
            )
            if session.get_credentials() is None:
                raise ConfigLoadError("unable to load SDK config: no AWS credentials found")
            self.rekognition = session.client("rekognition", config=config)
            self.s3 = session.client("s3", config=config)
        except BotoCoreError as e:
            raise ConfigLoadError(f"unable to load SDK config: {e}", cause=e) from e
        self.region = session.region_name
        logger.debug("aws clients ready region=%s profile=%s", self.region, self.profile)

    @classmethod
    def from_config(cls, cfg) -> "AWSClients":
        return cls(
            region=cfg.region,
            profile=cfg.profile,
            timeout=cfg.timeout,
            max_attempts=cfg.max_attempts,
        )
