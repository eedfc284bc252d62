"""
OneSky API Adapter package
Authenticated client for the OneSky translation-management REST API
"""

from .authenticator import Authenticator, AuthToken, Credentials, compute_dev_hash
from .client import OneSkyClient
from .config_loader import ConfigLoader, APIConfig, ConfigurationError, EnvironmentError
from .http_client import HTTPClient
from .request_builder import APIRequest, RequestBuilder, DEFAULT_BASE_URL
from .response_normalizer import (
    APIResult,
    ResponseNormalizer,
    OneSkyAPIError,
    APIConnectionError,
    HTTPStatusError,
    ResponseParseError,
    RemoteAPIError,
)
from .field_mapper import FieldAlias, normalize_fields

__version__ = "1.0.0"
__all__ = [
    'OneSkyClient',
    'Authenticator',
    'AuthToken',
    'Credentials',
    'compute_dev_hash',
    'ConfigLoader',
    'APIConfig',
    'ConfigurationError',
    'EnvironmentError',
    'HTTPClient',
    'APIRequest',
    'RequestBuilder',
    'DEFAULT_BASE_URL',
    'APIResult',
    'ResponseNormalizer',
    'OneSkyAPIError',
    'APIConnectionError',
    'HTTPStatusError',
    'ResponseParseError',
    'RemoteAPIError',
    'FieldAlias',
    'normalize_fields'
]
