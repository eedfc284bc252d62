"""
ConfigLoader module for loading and validating OneSky TOML configuration files
"""

import os
import tomllib
from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Any

from .authenticator import Credentials
from .request_builder import DEFAULT_BASE_URL


class ConfigurationError(Exception):
    """Raised when configuration is invalid or incomplete"""
    pass


class EnvironmentError(Exception):
    """Raised when required environment variables are missing"""
    pass


@dataclass
class APIConfig:
    """Configuration data class for the OneSky client from TOML file"""
    name: str
    base_url: str
    authentication: Dict[str, Any]
    timeout_seconds: float = 30.0
    logging: Dict[str, Any] = field(default_factory=dict)


class ConfigLoader:
    """Loads and validates TOML configuration files"""

    # Required configuration sections and their mandatory keys
    REQUIRED_SECTIONS = {
        'api': ['name', 'base_url'],
        'authentication': ['public_key_env', 'private_key_env']
    }

    OPTIONAL_SECTIONS = [
        'logging'
    ]

    @staticmethod
    def load_toml_config(config_path: Path) -> APIConfig:
        """
        Load API configuration from TOML file

        Args:
            config_path: Path to the TOML configuration file

        Returns:
            APIConfig object with all configuration data

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If required configuration is missing or TOML is invalid
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'rb') as f:
                config_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML syntax in {config_path}: {e}") from e

        ConfigLoader._validate_required_sections(config_data)
        ConfigLoader._validate_optional_sections(config_data)

        api_section = config_data['api']
        return APIConfig(
            name=api_section['name'],
            base_url=api_section.get('base_url') or DEFAULT_BASE_URL,
            authentication=config_data['authentication'],
            timeout_seconds=api_section.get('timeout_seconds', 30.0),
            logging=config_data.get('logging') or {}
        )

    @staticmethod
    def _validate_required_sections(config_data: Dict[str, Any]) -> None:
        """
        Validate that all required configuration sections and keys are present

        Raises:
            ConfigurationError: If any required section or key is missing
        """
        missing_items = []

        for section_name, required_keys in ConfigLoader.REQUIRED_SECTIONS.items():
            if section_name not in config_data:
                missing_items.append(f"Section [{section_name}]")
            else:
                section_data = config_data[section_name]
                for key in required_keys:
                    if key not in section_data:
                        missing_items.append(f"Key '{key}' in section [{section_name}]")

        if missing_items:
            raise ConfigurationError(
                f"Missing required configuration items: {', '.join(missing_items)}"
            )

    @staticmethod
    def _validate_optional_sections(config_data: Dict[str, Any]) -> None:
        """
        Validate that optional sections, when present, are tables

        Raises:
            ConfigurationError: If an optional section is not a table
        """
        for section_name in ConfigLoader.OPTIONAL_SECTIONS:
            section_data = config_data.get(section_name)
            if section_data is not None and not isinstance(section_data, dict):
                raise ConfigurationError(
                    f"Section [{section_name}] must be a table, got {type(section_data).__name__}"
                )

    @staticmethod
    def validate_environment_variables(config: APIConfig) -> bool:
        """
        Validate that all required environment variables are set

        Args:
            config: APIConfig object to validate

        Returns:
            True if all environment variables are present

        Raises:
            EnvironmentError: If any required environment variables are missing
        """
        missing_vars = []

        for key, value in config.authentication.items():
            if key.endswith('_env') and isinstance(value, str):
                if not os.getenv(value):
                    missing_vars.append(value)

        if missing_vars:
            raise EnvironmentError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )

        return True

    @staticmethod
    def get_environment_value(env_var_name: str) -> str:
        """
        Get environment variable value with proper error handling

        Raises:
            EnvironmentError: If environment variable is not set
        """
        value = os.getenv(env_var_name)
        if value is None:
            raise EnvironmentError(f"Environment variable '{env_var_name}' is not set")
        return value

    @staticmethod
    def load_credentials(config: APIConfig) -> Credentials:
        """Read the key pair named by the [authentication] section"""
        ConfigLoader.validate_environment_variables(config)
        return Credentials(
            public_key=ConfigLoader.get_environment_value(config.authentication['public_key_env']),
            private_key=ConfigLoader.get_environment_value(config.authentication['private_key_env'])
        )
