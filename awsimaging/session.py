"""
Credential resolution.

A SessionContext pairs a region with a boto3 session holding either static
keys or the ambient credential chain. It is immutable: switching region
produces a new context and leaves the original untouched.
"""
import re
from dataclasses import dataclass, replace
from typing import Any, Optional

import boto3
from botocore.config import Config as BotoConfig

from awsimaging.logger_config import get_logger
from awsimaging.utils.exceptions import ConfigurationError

logger = get_logger(__name__)

# e.g. us-east-1, eu-central-2, us-gov-west-1, cn-north-1, eusc-de-east-1
REGION_PATTERN = re.compile(r'^[a-z]{2,4}(-[a-z]+)+-\d+$')


def validate_region(region: Optional[str]) -> str:
    """
    Check that a region name is non-empty and shaped like an AWS region.

    Args:
        region: Region name

    Returns:
        The region name

    Raises:
        ConfigurationError: If the region is empty or malformed
    """
    if not region or not region.strip():
        raise ConfigurationError('AWS region is required', field='region')
    if not REGION_PATTERN.match(region):
        raise ConfigurationError(f'Invalid AWS region: {region}', field='region')
    return region


@dataclass(frozen=True)
class SessionContext:
    """Resolved region and credential capability shared by service clients."""

    region: str
    session: boto3.session.Session
    client_config: Optional[BotoConfig] = None

    def __repr__(self) -> str:
        return f'SessionContext(region={self.region!r})'

    def with_region(self, region: str) -> "SessionContext":
        """
        Return a new context with the same credentials scoped to another region.

        The region usually comes from AWS itself (e.g. a bucket location), so
        only emptiness is checked, not the name format.

        Args:
            region: Target region

        Returns:
            New SessionContext; self is not modified

        Raises:
            ConfigurationError: If the region is empty
        """
        if not region or not region.strip():
            raise ConfigurationError('AWS region is required', field='region')
        return replace(self, region=region)

    def client(self, service_name: str) -> Any:
        """
        Build a boto3 client for a service in this context's region.

        Args:
            service_name: boto3 service name (e.g. 's3')

        Returns:
            boto3 client
        """
        kwargs = {'region_name': self.region}
        if self.client_config is not None:
            kwargs['config'] = self.client_config
        return self.session.client(service_name, **kwargs)


def resolve_session(
    region: str,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    session_token: Optional[str] = None,
    client_config: Optional[BotoConfig] = None
) -> SessionContext:
    """
    Resolve credentials for a region.

    Static keys are used when given; otherwise boto3's default credential
    chain (environment, shared config files, container/instance metadata)
    is consulted.

    Args:
        region: AWS region
        access_key_id: Optional static access key id
        secret_access_key: Optional static secret access key
        session_token: Optional session token for temporary static keys
        client_config: Optional botocore config (timeouts) for every client

    Returns:
        SessionContext

    Raises:
        ConfigurationError: If the region is invalid, only half of the key
            pair is given, or no credentials can be resolved
    """
    validate_region(region)

    if bool(access_key_id) != bool(secret_access_key):
        raise ConfigurationError(
            'access_key_id and secret_access_key must be provided together',
            field='access_key_id' if not access_key_id else 'secret_access_key'
        )

    if access_key_id:
        session = boto3.session.Session(
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
            aws_session_token=session_token,
            region_name=region
        )
    else:
        session = boto3.session.Session(region_name=region)

    credentials = session.get_credentials()
    if credentials is None:
        raise ConfigurationError(
            'No AWS credentials found: pass explicit keys or configure the '
            'default credential chain',
            field='credentials'
        )

    logger.info(
        f'Resolved AWS session for region {region} '
        f'using {getattr(credentials, "method", "unknown")} credentials'
    )
    return SessionContext(region=region, session=session, client_config=client_config)
