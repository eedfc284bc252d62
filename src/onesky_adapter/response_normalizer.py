"""
ResponseNormalizer module for classifying raw OneSky responses
"""

import errno
import json
import logging
from dataclasses import dataclass
from typing import Any, Optional


class OneSkyAPIError(Exception):
    """Base class for every classified call failure"""
    pass


class APIConnectionError(OneSkyAPIError):
    """Raised when no response was received from the transport"""

    def __init__(self, code: Optional[str] = None):
        self.code = code
        message = "Error connecting to OneSky"
        if code:
            message += f": {code}"
        super().__init__(message)


class HTTPStatusError(OneSkyAPIError):
    """Raised when the server responds with anything other than 200"""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Something went wrong. Server responded with a {status_code}")


class ResponseParseError(OneSkyAPIError):
    """Raised when the response body is not valid JSON"""

    def __init__(self, raw_body: Any):
        self.raw_body = raw_body
        super().__init__(f"Could not parse response from OneSky: {raw_body!r}")


class RemoteAPIError(OneSkyAPIError):
    """Raised when a well-formed response is flagged as an error by OneSky"""

    def __init__(self, remote_message: Optional[str] = None):
        self.remote_message = remote_message
        message = "Error from OneSky"
        if remote_message:
            message += f": {remote_message}"
        super().__init__(message)


@dataclass
class APIResult:
    """Outcome of one call: either an error or the parsed body, never both"""
    error: Optional[OneSkyAPIError] = None
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.error is None


def transport_error_code(error: BaseException) -> str:
    """
    Best available identifier for a transport failure

    requests wraps socket errors several levels deep (ConnectionError ->
    MaxRetryError.reason -> NewConnectionError -> ConnectionRefusedError),
    so the whole chain is searched for the first integer errno.

    Args:
        error: Exception raised by the transport

    Returns:
        Symbolic errno name such as ECONNREFUSED, else the exception class name
    """
    pending = [error]
    visited = set()
    while pending:
        candidate = pending.pop(0)
        if id(candidate) in visited:
            continue
        visited.add(id(candidate))

        number = getattr(candidate, 'errno', None)
        if isinstance(number, int):
            return errno.errorcode.get(number, str(number))

        linked = [candidate.__cause__, candidate.__context__, getattr(candidate, 'reason', None)]
        linked.extend(candidate.args[:1])
        pending.extend(item for item in linked if isinstance(item, BaseException))
    return type(error).__name__


class ResponseNormalizer:
    """Turns transport output into a single APIResult"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def normalize(self, transport_error: Optional[BaseException],
                  status_code: Optional[int], raw_body: Any) -> APIResult:
        """
        Classify a raw HTTP outcome, stopping at the first failure

        Args:
            transport_error: Exception raised by the transport, if any
            status_code: HTTP status, or None when no response arrived
            raw_body: Response body as text, bytes or already-parsed JSON

        Returns:
            APIResult carrying either a OneSkyAPIError or the parsed body
        """
        if transport_error is not None or status_code is None:
            code = transport_error_code(transport_error) if transport_error is not None else None
            return self._fail(APIConnectionError(code), transport_error)

        if status_code != 200:
            return self._fail(HTTPStatusError(status_code))

        body = raw_body
        if not isinstance(body, (dict, list)):
            try:
                body = json.loads(body)
            except (TypeError, ValueError) as e:
                return self._fail(ResponseParseError(raw_body), e)

        if isinstance(body, dict) and (body.get('error') or body.get('response') == 'error'):
            remote_message = body.get('error')
            return self._fail(RemoteAPIError(str(remote_message) if remote_message else None))

        return APIResult(data=body)

    def _fail(self, error: OneSkyAPIError, cause: Optional[BaseException] = None) -> APIResult:
        if cause is not None:
            error.__cause__ = cause
        self.logger.warning(f"OneSky call failed: {error}")
        return APIResult(error=error)
