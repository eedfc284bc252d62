"""
RequestBuilder module for assembling authenticated OneSky API requests
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional, Union

from .authenticator import AuthToken


DEFAULT_BASE_URL = "https://api.oneskyapp.com/2/"

# Query parameters owned by authentication, never overridable by callers
RESERVED_PARAMETERS = ('api-key', 'dev-hash', 'timestamp')


@dataclass
class APIRequest:
    """Represents a single API request"""
    url: str
    parameters: Dict[str, Any]
    method: str = "GET"
    json_body: Optional[Dict[str, Any]] = None
    form_fields: Optional[Dict[str, Any]] = None
    file_fields: Optional[Dict[str, Path]] = None

    @property
    def is_upload(self) -> bool:
        return bool(self.file_fields)


class RequestBuilder:
    """Builds GET, POST and multipart upload requests carrying the auth triple"""

    def __init__(self, base_url: str, public_key: str):
        self.base_url = base_url if base_url.endswith('/') else base_url + '/'
        self.public_key = public_key

    def build_url(self, path: str) -> str:
        return self.base_url + path.lstrip('/')

    def auth_parameters(self, token: AuthToken) -> Dict[str, Any]:
        return {
            'api-key': self.public_key,
            'dev-hash': token.dev_hash,
            'timestamp': token.timestamp
        }

    def build(self, method: str, path: str, token: AuthToken,
              data: Optional[Dict[str, Any]] = None) -> APIRequest:
        """
        Build a GET or POST request

        Args:
            method: HTTP method, GET or POST
            path: Endpoint path relative to the API root
            token: Freshly derived AuthToken
            data: Caller payload, merged into the query for GET and sent
                as the JSON body for POST

        Returns:
            APIRequest ready for dispatch

        Raises:
            ValueError: If the method is not GET or POST
        """
        method = method.upper()
        if method not in ('GET', 'POST'):
            raise ValueError(f"Unsupported HTTP method: {method}")

        if method == 'GET':
            # Auth triple applied last so reserved names always win
            parameters = {**(data or {}), **self.auth_parameters(token)}
            return APIRequest(url=self.build_url(path), parameters=parameters, method=method)

        # An absent body and an empty body are treated differently remotely
        return APIRequest(
            url=self.build_url(path),
            parameters=self.auth_parameters(token),
            method=method,
            json_body=dict(data) if data else None
        )

    def build_upload(self, path: str, token: AuthToken,
                     fields: Dict[str, Any],
                     file_fields: Dict[str, Union[str, Path]]) -> APIRequest:
        """
        Build a multipart POST request

        Args:
            path: Endpoint path relative to the API root
            token: Freshly derived AuthToken
            fields: Plain form fields
            file_fields: Form field name to local file path

        Returns:
            APIRequest with form and file parts and no JSON body
        """
        return APIRequest(
            url=self.build_url(path),
            parameters=self.auth_parameters(token),
            method='POST',
            form_fields=dict(fields),
            file_fields={name: Path(file_path) for name, file_path in file_fields.items()}
        )
