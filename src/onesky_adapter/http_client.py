"""
HTTPClient module for dispatching OneSky API requests
"""

import logging
import threading
from contextlib import ExitStack
from typing import Optional

import requests

from .request_builder import APIRequest
from .response_normalizer import APIResult, ResponseNormalizer


class HTTPClient:
    """Sends a single APIRequest and normalises whatever comes back; no retries"""

    def __init__(self, timeout_seconds: Optional[float] = 30.0,
                 session: Optional[requests.Session] = None,
                 normalizer: Optional[ResponseNormalizer] = None):
        self.timeout_seconds = timeout_seconds
        self.session = session
        self._session_lock = threading.Lock()
        self.normalizer = normalizer or ResponseNormalizer()
        self.logger = logging.getLogger(__name__)

    def make_request(self, request: APIRequest) -> APIResult:
        """
        Dispatch the request and classify the outcome

        Args:
            request: APIRequest produced by RequestBuilder

        Returns:
            APIResult with either a classified error or the parsed body
        """
        session = self._get_session()
        self.logger.debug(f"{request.method} {request.url}")

        try:
            response = self._send(session, request)
        except (requests.exceptions.RequestException, OSError) as e:
            return self.normalizer.normalize(e, None, None)

        if response is None:
            return self.normalizer.normalize(None, None, None)
        return self.normalizer.normalize(None, response.status_code, response.text)

    def _get_session(self) -> requests.Session:
        # Concurrent first calls must share a single session
        session = self.session
        if session is None:
            with self._session_lock:
                if self.session is None:
                    self.session = requests.Session()
                session = self.session
        return session

    def _send(self, session: requests.Session, request: APIRequest) -> Optional[requests.Response]:
        if request.method == 'GET':
            return session.get(
                request.url,
                params=request.parameters,
                timeout=self.timeout_seconds
            )

        if request.is_upload:
            # File handles are released whether or not the transfer succeeds
            with ExitStack() as stack:
                files = {
                    name: (path.name, stack.enter_context(open(path, 'rb')))
                    for name, path in request.file_fields.items()
                }
                return session.post(
                    request.url,
                    params=request.parameters,
                    data=request.form_fields,
                    files=files,
                    timeout=self.timeout_seconds
                )

        if request.json_body is None:
            return session.post(
                request.url,
                params=request.parameters,
                timeout=self.timeout_seconds
            )
        return session.post(
            request.url,
            params=request.parameters,
            json=request.json_body,
            timeout=self.timeout_seconds
        )

    def close_connection(self) -> None:
        """
        Close HTTP session and release resources
        """
        with self._session_lock:
            if self.session:
                self.session.close()
                self.session = None
