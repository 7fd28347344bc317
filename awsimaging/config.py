"""
Configuration module for environment variable validation and type-safe config.

Values are validated when the configuration is first loaded so that a bad
environment fails before any AWS client is built.
"""
import os
from dataclasses import dataclass
from typing import Optional

from botocore.config import Config as BotoConfig

from awsimaging.utils.exceptions import ConfigurationError

DEFAULT_REGION = "us-east-1"
DEFAULT_MAX_LABELS = 10
# Objects uploaded with this ACL are world readable.
DEFAULT_UPLOAD_ACL = "public-read"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_UPLOAD_ACLS = {
    "private",
    "public-read",
    "public-read-write",
    "authenticated-read",
    "aws-exec-read",
    "bucket-owner-read",
    "bucket-owner-full-control",
}


def _optional_float(name: str) -> Optional[float]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(
            f"{name} must be a number, got: {raw}", field=name
        )


@dataclass(frozen=True)
class Config:
    """Type-safe configuration object with validated environment variables."""

    aws_region: str = DEFAULT_REGION
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    session_token: Optional[str] = None
    min_confidence: Optional[float] = None
    max_labels: int = DEFAULT_MAX_LABELS
    upload_acl: Optional[str] = DEFAULT_UPLOAD_ACL
    connect_timeout: Optional[float] = None
    read_timeout: Optional[float] = None
    log_level: str = "INFO"

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks
        return (
            f"Config(aws_region={self.aws_region!r}, "
            f"static_credentials={self.access_key_id is not None}, "
            f"min_confidence={self.min_confidence!r}, "
            f"max_labels={self.max_labels!r}, "
            f"upload_acl={self.upload_acl!r}, "
            f"log_level={self.log_level!r})"
        )

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Raises:
            ConfigurationError: If environment variables are invalid.
        """
        aws_region = (
            os.environ.get("AWS_REGION")
            or os.environ.get("AWS_DEFAULT_REGION")
            or DEFAULT_REGION
        )

        access_key_id = os.environ.get("AWS_ACCESS_KEY_ID") or None
        secret_access_key = os.environ.get("AWS_SECRET_ACCESS_KEY") or None
        session_token = os.environ.get("AWS_SESSION_TOKEN") or None

        min_confidence = _optional_float("MIN_CONFIDENCE")
        if min_confidence is not None and not 0 <= min_confidence <= 100:
            raise ConfigurationError(
                f"MIN_CONFIDENCE must be between 0 and 100, got: {min_confidence}",
                field="MIN_CONFIDENCE"
            )

        raw_max_labels = os.environ.get("MAX_LABELS", str(DEFAULT_MAX_LABELS))
        try:
            max_labels = int(raw_max_labels)
        except ValueError:
            raise ConfigurationError(
                f"MAX_LABELS must be an integer, got: {raw_max_labels}",
                field="MAX_LABELS"
            )
        if max_labels < 1:
            raise ConfigurationError(
                f"MAX_LABELS must be at least 1, got: {max_labels}",
                field="MAX_LABELS"
            )

        upload_acl = os.environ.get("UPLOAD_ACL", DEFAULT_UPLOAD_ACL).strip().lower()
        if upload_acl == "none":
            upload_acl = None
        elif upload_acl not in VALID_UPLOAD_ACLS:
            raise ConfigurationError(
                f"UPLOAD_ACL must be one of {sorted(VALID_UPLOAD_ACLS)} or 'none', "
                f"got: {upload_acl}",
                field="UPLOAD_ACL"
            )

        connect_timeout = _optional_float("AWS_CONNECT_TIMEOUT")
        read_timeout = _optional_float("AWS_READ_TIMEOUT")

        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {log_level}",
                field="LOG_LEVEL"
            )

        return cls(
            aws_region=aws_region,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            min_confidence=min_confidence,
            max_labels=max_labels,
            upload_acl=upload_acl,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            log_level=log_level,
        )

    def client_config(self) -> Optional[BotoConfig]:
        """
        Build the botocore client config carrying the configured timeouts.

        Returns:
            botocore Config, or None when no timeout is configured
        """
        timeouts = {}
        if self.connect_timeout is not None:
            timeouts["connect_timeout"] = self.connect_timeout
        if self.read_timeout is not None:
            timeouts["read_timeout"] = self.read_timeout
        if not timeouts:
            return None
        return BotoConfig(**timeouts)


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the process-wide configuration instance.

    Returns:
        Config: The validated configuration object

    Raises:
        ConfigurationError: If environment variables are invalid.
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config
