"""
Client factory: one boto3 client per service, all bound to one SessionContext.
"""
from dataclasses import dataclass
from typing import Any, Optional, TYPE_CHECKING

from botocore.config import Config as BotoConfig

from awsimaging.logger_config import get_logger
from awsimaging.session import SessionContext, resolve_session
from awsimaging.utils.exceptions import ConfigurationError

if TYPE_CHECKING:
    from mypy_boto3_rekognition import RekognitionClient
    from mypy_boto3_s3 import S3Client
    from mypy_boto3_textract import TextractClient
else:
    RekognitionClient = Any
    S3Client = Any
    TextractClient = Any

logger = get_logger(__name__)


@dataclass(frozen=True)
class AWSClients:
    """Rekognition, S3 and Textract clients sharing one session context."""

    context: SessionContext
    rekognition: RekognitionClient
    s3: S3Client
    textract: TextractClient

    @property
    def region(self) -> str:
        return self.context.region


def build_clients(context: SessionContext) -> AWSClients:
    """
    Build one client per service from a resolved session context.

    Args:
        context: Resolved session context

    Returns:
        AWSClients

    Raises:
        ConfigurationError: If context is not a SessionContext
    """
    if not isinstance(context, SessionContext):
        raise ConfigurationError(
            f'Expected a SessionContext, got {type(context).__name__}',
            field='context'
        )

    clients = AWSClients(
        context=context,
        rekognition=context.client('rekognition'),
        s3=context.client('s3'),
        textract=context.client('textract'),
    )
    logger.debug(f'Built Rekognition, S3 and Textract clients in {context.region}')
    return clients


def create_clients(
    region: str,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    session_token: Optional[str] = None,
    client_config: Optional[BotoConfig] = None
) -> AWSClients:
    """
    Resolve credentials for a region and build all service clients.

    No client is constructed if credential resolution fails.

    Args:
        region: AWS region
        access_key_id: Optional static access key id
        secret_access_key: Optional static secret access key
        session_token: Optional session token
        client_config: Optional botocore config (timeouts)

    Returns:
        AWSClients

    Raises:
        ConfigurationError: If the region or credentials cannot be resolved
    """
    context = resolve_session(
        region,
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        session_token=session_token,
        client_config=client_config
    )
    return build_clients(context)
