"""
Test suite for ConfigLoader component
Following TDD approach with AAA pattern and descriptive naming
"""

import pytest
import tempfile
import os
from pathlib import Path
from unittest.mock import patch

from onesky_adapter.authenticator import Credentials
from onesky_adapter.config_loader import ConfigLoader, APIConfig, ConfigurationError, EnvironmentError


VALID_TOML = """
[api]
name = "onesky"
base_url = "https://api.oneskyapp.com/2/"
timeout_seconds = 15

[authentication]
public_key_env = "ONESKY_PUBLIC_KEY"
private_key_env = "ONESKY_PRIVATE_KEY"

[logging]
log_file_name = "onesky_api.log"
level = "DEBUG"
"""


def write_config(content: str) -> Path:
    with tempfile.NamedTemporaryFile(mode='w', suffix='.toml', delete=False) as f:
        f.write(content)
        return Path(f.name)


class TestConfigLoader:
    """Test suite for ConfigLoader TOML configuration loading functionality"""

    def test_load_toml_config_with_valid_file_returns_api_config(self):
        """
        Test that loading a valid TOML file returns properly populated APIConfig
        """
        # Arrange
        config_path = write_config(VALID_TOML)

        try:
            # Act
            result = ConfigLoader.load_toml_config(config_path)

            # Assert
            assert isinstance(result, APIConfig)
            assert result.name == "onesky"
            assert result.base_url == "https://api.oneskyapp.com/2/"
            assert result.timeout_seconds == 15
            assert result.authentication['public_key_env'] == "ONESKY_PUBLIC_KEY"
            assert result.logging['level'] == "DEBUG"
        finally:
            os.unlink(config_path)

    def test_load_toml_config_with_missing_required_fields_raises_configuration_error(self):
        """
        Test that missing required TOML sections raise ConfigurationError
        """
        # Arrange
        config_path = write_config("""
        [api]
        name = "onesky"
        """)

        try:
            # Act & Assert
            with pytest.raises(ConfigurationError) as exc_info:
                ConfigLoader.load_toml_config(config_path)

            message = str(exc_info.value)
            assert "Missing required configuration" in message
            assert "Key 'base_url' in section [api]" in message
            assert "Section [authentication]" in message
        finally:
            os.unlink(config_path)

    def test_load_toml_config_without_logging_section_defaults_to_empty_table(self):
        """
        Test that the optional [logging] section may be omitted entirely
        """
        # Arrange
        config_path = write_config(VALID_TOML.split('[logging]')[0])

        try:
            # Act
            result = ConfigLoader.load_toml_config(config_path)

            # Assert
            assert result.logging == {}
        finally:
            os.unlink(config_path)

    def test_load_toml_config_with_non_table_logging_raises_configuration_error(self):
        """
        Test that an optional section given as a plain value is rejected up front
        """
        # Arrange
        config_path = write_config('logging = "verbose"\n' + VALID_TOML.split('[logging]')[0])

        try:
            # Act & Assert
            with pytest.raises(ConfigurationError) as exc_info:
                ConfigLoader.load_toml_config(config_path)

            assert "Section [logging] must be a table, got str" in str(exc_info.value)
        finally:
            os.unlink(config_path)

    def test_load_toml_config_with_invalid_syntax_raises_configuration_error(self):
        """
        Test that malformed TOML is reported as a configuration problem
        """
        # Arrange
        config_path = write_config("[api\nname = ")

        try:
            # Act & Assert
            with pytest.raises(ConfigurationError) as exc_info:
                ConfigLoader.load_toml_config(config_path)

            assert "Invalid TOML syntax" in str(exc_info.value)
        finally:
            os.unlink(config_path)

    def test_load_toml_config_with_nonexistent_file_raises_file_not_found(self):
        """
        Test that a missing config file raises FileNotFoundError
        """
        # Act & Assert
        with pytest.raises(FileNotFoundError):
            ConfigLoader.load_toml_config(Path("/nonexistent/onesky.toml"))

    def test_validate_environment_variables_with_missing_vars_raises_environment_error(self):
        """
        Test that unset credential variables are all reported together
        """
        # Arrange
        config = APIConfig(
            name="onesky",
            base_url="https://api.oneskyapp.com/2/",
            authentication={'public_key_env': 'TEST_PUB', 'private_key_env': 'TEST_PRIV'}
        )

        # Act & Assert
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(EnvironmentError) as exc_info:
                ConfigLoader.validate_environment_variables(config)

        assert "TEST_PUB" in str(exc_info.value)
        assert "TEST_PRIV" in str(exc_info.value)

    def test_load_credentials_with_env_vars_set_returns_credentials(self):
        """
        Test that the key pair is read from the configured environment variables
        """
        # Arrange
        config = APIConfig(
            name="onesky",
            base_url="https://api.oneskyapp.com/2/",
            authentication={'public_key_env': 'TEST_PUB', 'private_key_env': 'TEST_PRIV'}
        )

        # Act
        with patch.dict(os.environ, {'TEST_PUB': 'pub', 'TEST_PRIV': 'priv'}):
            credentials = ConfigLoader.load_credentials(config)

        # Assert
        assert credentials == Credentials(public_key='pub', private_key='priv')

    def test_get_environment_value_with_unset_var_raises_environment_error(self):
        """
        Test that reading an unset variable raises EnvironmentError
        """
        # Act & Assert
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(EnvironmentError) as exc_info:
                ConfigLoader.get_environment_value('ONESKY_PRIVATE_KEY')

        assert "'ONESKY_PRIVATE_KEY' is not set" in str(exc_info.value)
