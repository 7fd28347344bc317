"""
Unit tests for configuration module.
"""
import os
from unittest.mock import patch

import pytest

from awsimaging.config import Config, get_config
from awsimaging.utils.exceptions import ConfigurationError


class TestConfig:
    """Tests for Config class."""

    @patch.dict(os.environ, {}, clear=True)
    def test_from_env_defaults(self):
        """Test Config.from_env with nothing set."""
        config = Config.from_env()
        assert config.aws_region == 'us-east-1'
        assert config.access_key_id is None
        assert config.secret_access_key is None
        assert config.min_confidence is None
        assert config.max_labels == 10
        assert config.upload_acl == 'public-read'
        assert config.log_level == 'INFO'
        assert config.client_config() is None

    @patch.dict(os.environ, {
        'AWS_REGION': 'eu-west-2',
        'AWS_ACCESS_KEY_ID': 'AKIAEXAMPLE',
        'AWS_SECRET_ACCESS_KEY': 'super-secret',
        'MIN_CONFIDENCE': '75',
        'MAX_LABELS': '5',
        'UPLOAD_ACL': 'private',
        'AWS_CONNECT_TIMEOUT': '2',
        'AWS_READ_TIMEOUT': '10.5',
        'LOG_LEVEL': 'debug',
    }, clear=True)
    def test_from_env_all_variables(self):
        """Test Config.from_env with all variables set."""
        config = Config.from_env()
        assert config.aws_region == 'eu-west-2'
        assert config.access_key_id == 'AKIAEXAMPLE'
        assert config.secret_access_key == 'super-secret'
        assert config.min_confidence == 75.0
        assert config.max_labels == 5
        assert config.upload_acl == 'private'
        assert config.log_level == 'DEBUG'

        boto_config = config.client_config()
        assert boto_config.connect_timeout == 2.0
        assert boto_config.read_timeout == 10.5

    @patch.dict(os.environ, {'AWS_DEFAULT_REGION': 'ap-southeast-2'}, clear=True)
    def test_from_env_default_region_fallback(self):
        """Test AWS_DEFAULT_REGION is used when AWS_REGION is unset."""
        assert Config.from_env().aws_region == 'ap-southeast-2'

    @patch.dict(os.environ, {'UPLOAD_ACL': 'none'}, clear=True)
    def test_from_env_acl_disabled(self):
        """Test UPLOAD_ACL=none disables the ACL."""
        assert Config.from_env().upload_acl is None

    @patch.dict(os.environ, {'UPLOAD_ACL': 'everyone'}, clear=True)
    def test_from_env_invalid_acl(self):
        """Test Config.from_env rejects unknown ACLs."""
        with pytest.raises(ConfigurationError, match="UPLOAD_ACL"):
            Config.from_env()

    @patch.dict(os.environ, {'MIN_CONFIDENCE': 'high'}, clear=True)
    def test_from_env_invalid_min_confidence(self):
        """Test Config.from_env rejects non-numeric thresholds."""
        with pytest.raises(ConfigurationError, match="MIN_CONFIDENCE"):
            Config.from_env()

    @patch.dict(os.environ, {'MIN_CONFIDENCE': '150'}, clear=True)
    def test_from_env_out_of_range_min_confidence(self):
        """Test Config.from_env rejects thresholds above 100."""
        with pytest.raises(ConfigurationError, match="MIN_CONFIDENCE"):
            Config.from_env()

    @patch.dict(os.environ, {'MAX_LABELS': '0'}, clear=True)
    def test_from_env_invalid_max_labels(self):
        """Test Config.from_env rejects MAX_LABELS below 1."""
        with pytest.raises(ConfigurationError, match="MAX_LABELS"):
            Config.from_env()

    @patch.dict(os.environ, {'LOG_LEVEL': 'INVALID'}, clear=True)
    def test_from_env_invalid_log_level(self):
        """Test Config.from_env raises error for invalid log level."""
        with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
            Config.from_env()

    @patch.dict(os.environ, {
        'AWS_ACCESS_KEY_ID': 'AKIAEXAMPLE',
        'AWS_SECRET_ACCESS_KEY': 'super-secret',
    }, clear=True)
    def test_repr_hides_secrets(self):
        """Test secrets never show up in the config repr."""
        text = repr(Config.from_env())
        assert 'super-secret' not in text
        assert 'AKIAEXAMPLE' not in text

    @patch.dict(os.environ, {}, clear=True)
    def test_get_config_singleton(self):
        """Test get_config returns singleton instance."""
        config1 = get_config()
        config2 = get_config()

        assert config1 is config2
