import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import boto3
from botocore.config import Config
from botocore.utils import InstanceMetadataRegionFetcher

logger = logging.getLogger(__name__)

# Placeholder credentials accepted by LocalStack.
LOCAL_CREDENTIALS = ("test", "test")

def _log_level(value: Optional[str]) -> str:
    # unknown names fall back instead of failing in Logger.setLevel
    level = (value or "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level

@dataclass(frozen=True)
class Settings:
    base_path: str = ""
    region: Optional[str] = None
    endpoint_url: Optional[str] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            base_path=env.get("SSMPS_BASE_PATH", ""),
            region=env.get("AWS_REGION") or None,
            endpoint_url=env.get("LOCALSTACK_ENDPOINT") or None,
            log_level=_log_level(env.get("LOG_LEVEL")),
        )

def _instance_region() -> Optional[str]:
    region = InstanceMetadataRegionFetcher().retrieve_region()
    if region:
        logger.debug("region from instance metadata: %s", region)
    return region

def build_client(settings: Settings) -> Any:
    """
    Create the SSM client.

    Region order: AWS_REGION, then the boto3 session's own discovery
    (environment, shared config), then the EC2 instance metadata service.
    With LOCALSTACK_ENDPOINT set the client talks to that endpoint with
    placeholder credentials and path-style addressing.
    """
    session = boto3.session.Session(region_name=settings.region)
    region = session.region_name or _instance_region()

    kwargs = {}
    if settings.endpoint_url:
        access_key, secret_key = LOCAL_CREDENTIALS
        kwargs.update(
            endpoint_url=settings.endpoint_url,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            config=Config(s3={"addressing_style": "path"}),
        )
    return session.client("ssm", region_name=region, **kwargs)
