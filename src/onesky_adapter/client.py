"""
OneSkyClient module wiring authentication, request building and dispatch
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .authenticator import Authenticator, Credentials
from .config_loader import ConfigLoader
from .endpoints import (
    Callback,
    ProjectEndpoints,
    StringEndpoints,
    TranslateEndpoints,
    StringAccessEndpoints,
    PlatformEndpoints,
    TranslatorEndpoints,
    SSOEndpoints,
)
from .http_client import HTTPClient
from .logging_config import configure_logging
from .request_builder import APIRequest, RequestBuilder, DEFAULT_BASE_URL
from .response_normalizer import APIResult


class OneSkyClient:
    """
    Client for the OneSky platform API

    Operations are grouped the way the remote API groups them:
    project, string, translate, string_access, platform, translator and sso,
    plus the flat projects(), locales() and platform_types() calls.
    """

    def __init__(
        self,
        public_key: str,
        private_key: str,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[HTTPClient] = None,
        authenticator: Optional[Authenticator] = None
    ):
        """
        Initialise OneSkyClient with dependency injection

        Args:
            public_key: OneSky API public key
            private_key: OneSky API secret used for the dev hash
            base_url: API root, including the version segment
            http_client: Transport component, a default HTTPClient if omitted
            authenticator: Token derivation component, clock and hash injectable
        """
        self.credentials = Credentials(public_key=public_key, private_key=private_key)
        self.request_builder = RequestBuilder(base_url, public_key)
        self.http_client = http_client or HTTPClient()
        self.authenticator = authenticator or Authenticator()
        self.logger = logging.getLogger(__name__)

        self.project = ProjectEndpoints(self)
        self.string = StringEndpoints(self)
        self.translate = TranslateEndpoints(self)
        self.string_access = StringAccessEndpoints(self)
        self.platform = PlatformEndpoints(self)
        self.translator = TranslatorEndpoints(self)
        self.sso = SSOEndpoints(self)

    @classmethod
    def from_config(cls, config_path: Union[str, Path],
                    setup_logging: bool = True) -> 'OneSkyClient':
        """
        Build a client from a TOML configuration file

        Args:
            config_path: Path to the TOML configuration
            setup_logging: Apply the [logging] section to the root logger

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ConfigurationError: If required configuration is missing
            EnvironmentError: If the credential environment variables are unset
        """
        config = ConfigLoader.load_toml_config(Path(config_path))
        credentials = ConfigLoader.load_credentials(config)

        if setup_logging:
            configure_logging(config.logging)

        return cls(
            credentials.public_key,
            credentials.private_key,
            base_url=config.base_url,
            http_client=HTTPClient(timeout_seconds=config.timeout_seconds)
        )

    def get(self, path: str, data: Optional[Dict[str, Any]] = None,
            callback: Callback = None) -> APIResult:
        token = self.authenticator.derive_token(self.credentials.private_key)
        return self._dispatch(self.request_builder.build('GET', path, token, data), callback)

    def post(self, path: str, data: Optional[Dict[str, Any]] = None,
             callback: Callback = None) -> APIResult:
        token = self.authenticator.derive_token(self.credentials.private_key)
        return self._dispatch(self.request_builder.build('POST', path, token, data), callback)

    def upload(self, path: str, fields: Dict[str, Any],
               file_fields: Dict[str, Union[str, Path]],
               callback: Callback = None) -> APIResult:
        token = self.authenticator.derive_token(self.credentials.private_key)
        request = self.request_builder.build_upload(path, token, fields, file_fields)
        return self._dispatch(request, callback)

    def _dispatch(self, request: APIRequest, callback: Callback) -> APIResult:
        result = self.http_client.make_request(request)
        if callback is not None:
            callback(result.error, result.data)
        return result

    # Flat utility calls

    def projects(self, callback: Callback = None) -> APIResult:
        return self.get('projects', {}, callback)

    def locales(self, callback: Callback = None) -> APIResult:
        return self.get('locales', {}, callback)

    def platform_types(self, callback: Callback = None) -> APIResult:
        return self.get('platform-types', {}, callback)

    def close(self) -> None:
        self.http_client.close_connection()
