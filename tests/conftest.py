"""
Shared fixtures for awsimaging tests.
"""
import os
from unittest.mock import patch

import pytest

import awsimaging.config
from awsimaging.session import resolve_session

TEST_ACCESS_KEY_ID = 'AKIATESTKEY'
TEST_SECRET_ACCESS_KEY = 'test-secret-access-key'


@pytest.fixture(autouse=True)
def reset_config():
    """Reset the process-wide config between tests."""
    awsimaging.config._config = None
    yield
    awsimaging.config._config = None


@pytest.fixture
def aws_credentials():
    """Mocked AWS credentials for moto."""
    with patch.dict(os.environ, {
        'AWS_ACCESS_KEY_ID': 'testing',
        'AWS_SECRET_ACCESS_KEY': 'testing',
        'AWS_SECURITY_TOKEN': 'testing',
        'AWS_SESSION_TOKEN': 'testing',
        'AWS_DEFAULT_REGION': 'us-east-1',
    }):
        yield


@pytest.fixture
def session_context():
    """Session context in us-east-1 with static test keys."""
    return resolve_session(
        'us-east-1',
        access_key_id=TEST_ACCESS_KEY_ID,
        secret_access_key=TEST_SECRET_ACCESS_KEY
    )
