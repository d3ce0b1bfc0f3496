"""
TC3 client.

Builds the request headers for an action, signs them with TC3-HMAC-SHA256
and sends the call over a ``requests`` session.
"""

import datetime
import json
import logging
from typing import Any, Callable, Dict, Optional

import requests

from .actions import Action
from .config import ClientConfig
from .constants import (
    CONTENT_TYPE_JSON,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_HOST,
    HEADER_TC_ACTION,
    HEADER_TC_LANGUAGE,
    HEADER_TC_REGION,
    HEADER_TC_REQUEST_CLIENT,
    HEADER_TC_TIMESTAMP,
    HEADER_TC_VERSION,
    HTTP_METHOD,
    HTTP_QUERY,
    HTTP_URI,
    SCHEME,
)
from .exceptions import HTTPError, SerializationError, TencentCloudSDKError
from .response import classify
from .signer import sign_request, unix_timestamp

logger = logging.getLogger(__name__)


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class TC3Client:
    """
    Client for JSON APIs authenticated with TC3-HMAC-SHA256.

    Each call is signed from scratch with its own timestamp, so one client
    can be shared by several threads.
    """

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        """
        Initialize TC3 client.

        Args:
            config: Credentials and request options
            session: HTTP session to send requests with (a new one by default)
        """
        self._config = config
        self.session = session if session is not None else requests.Session()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @classmethod
    def from_secret(cls, secret_id: str, secret_key: str, **config) -> "TC3Client":
        """Create a client from a credential pair and keyword options."""
        return cls(ClientConfig.from_options(secret_id, secret_key, **config))

    def _prepare_request_body(self, request=None) -> bytes:
        """Prepare request body for signing."""
        if request is None:
            return b'{}'
        if isinstance(request, bytes):
            return request
        if isinstance(request, str):
            return request.encode('utf-8')
        try:
            return json.dumps(request, separators=(',', ':'), ensure_ascii=False).encode('utf-8')
        except (TypeError, ValueError) as e:
            raise SerializationError(f"cannot encode request: {e}") from e

    def build_headers(self, action: Action, body: bytes, now: datetime.datetime) -> Dict[str, str]:
        """
        Build the signed headers of a call.

        ``now`` is read once by the caller; the X-TC-Timestamp header and the
        signing date both come from it.
        """
        host = action.host(self._config.domain)
        headers = {
            HEADER_HOST: host,
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
            HEADER_TC_ACTION: action.action,
            HEADER_TC_VERSION: action.version,
            HEADER_TC_TIMESTAMP: unix_timestamp(now),
            HEADER_TC_REQUEST_CLIENT: self._config.request_client,
            HEADER_TC_LANGUAGE: self._config.language,
            HEADER_TC_REGION: self._config.region,
        }
        headers[HEADER_AUTHORIZATION] = sign_request(
            self._config.secret_id,
            self._config.secret_key,
            action.service,
            headers,
            body,
            now,
        )
        return headers

    def send(
        self,
        action: Action,
        request: Any = None,
        response_type: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        """
        Call ``action`` with ``request`` as JSON payload.

        Args:
            action: Remote operation to call
            request: JSON-serialisable payload, or pre-encoded str/bytes
            response_type: Optional callable building the result from the
                decoded response document

        Returns:
            The decoded response document, or ``response_type(document)``

        Raises:
            SerializationError: If the request or response can not be (de)serialised
            HTTPError: If the HTTP request fails
            TencentCloudSDKError: If the service returns an error envelope
        """
        body = self._prepare_request_body(request)
        now = _utcnow()
        headers = self.build_headers(action, body, now)
        url = f"{SCHEME}://{headers[HEADER_HOST]}{HTTP_URI}"
        if HTTP_QUERY:
            url = f"{url}?{HTTP_QUERY}"

        logger.debug(
            "sending %s.%s (version %s) to %s in %s",
            action.service, action.action, action.version, headers[HEADER_HOST], self._config.region,
        )

        try:
            response = self.session.request(
                HTTP_METHOD, url, headers=headers, data=body, timeout=self._config.timeout
            )
        except requests.RequestException as e:
            raise HTTPError(f"HTTP request failed: {e}") from e

        logger.debug("%s.%s answered with HTTP %s", action.service, action.action, response.status_code)

        try:
            return classify(response.content, response_type)
        except SerializationError:
            logger.warning(
                "%s.%s response could not be decoded (HTTP %s)",
                action.service, action.action, response.status_code,
            )
            raise
        except TencentCloudSDKError as e:
            logger.warning(
                "%s.%s failed: %s (request id %s)",
                action.service, action.action, e.code, e.request_id,
            )
            raise

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
