"""
HTTP transport for signed requests

The signing pipeline treats the transport as an opaque capability: it hands
over a PreparedOAuthRequest and receives an HttpResponse. The default
implementation uses a requests.Session.
"""

import codecs
import logging
from typing import Optional, Protocol, runtime_checkable
from dataclasses import dataclass

import requests

from ..exceptions import TransportError, ValidationError
from .request_builder import PreparedOAuthRequest
from .response import DEFAULT_CHARSET, HttpResponse, adapt_response

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "signedrequest-python/1.0.0"


@dataclass
class HttpClientConfig:
    """Configuration for the HTTP transport."""
    timeout: float = 30.0
    verify_ssl: bool = True
    allow_redirects: bool = True
    default_charset: str = DEFAULT_CHARSET
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        """Validate transport configuration."""
        if self.timeout <= 0:
            raise ValidationError("Timeout must be positive")

        try:
            codecs.lookup(self.default_charset)
        except LookupError:
            raise ValidationError(f"Unknown charset: {self.default_charset}")


@runtime_checkable
class Transport(Protocol):
    """Executes a prepared request and returns the normalized response."""

    def send(self, request: PreparedOAuthRequest) -> HttpResponse:
        ...

    def close(self) -> None:
        ...


class RequestsTransport:
    """
    Transport backed by requests.Session.

    Network and I/O failures surface as TransportError with the requests
    exception chained as the cause. No retries are attempted.
    """

    def __init__(self, config: Optional[HttpClientConfig] = None, session: Optional[requests.Session] = None):
        """
        Initialize the transport.

        Args:
            config: Transport configuration
            session: Optional existing requests session to use
        """
        self.config = config or HttpClientConfig()
        if session is None:
            session = requests.Session()
            session.headers['User-Agent'] = self.config.user_agent
        self.session = session

    def send(self, request: PreparedOAuthRequest) -> HttpResponse:
        """
        Send a prepared request.

        Args:
            request: Signed request descriptor

        Returns:
            HttpResponse: Normalized response

        Raises:
            TransportError: On timeout, connection or other request errors
        """
        logger.debug(f"Sending {request.method.value} request to {_loggable_url(request.url)}")

        try:
            raw = self.session.request(
                request.method.value,
                request.url,
                headers=request.header_dict(),
                data=request.body,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
                allow_redirects=self.config.allow_redirects,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Request to {_loggable_url(request.url)} timed out after {self.config.timeout} seconds")
            raise TransportError(
                f"Request timeout after {self.config.timeout} seconds",
                details={"url": _loggable_url(request.url)}
            ) from e
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error for {_loggable_url(request.url)}: {e}")
            raise TransportError(
                f"Connection error: {e}",
                details={"url": _loggable_url(request.url)}
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {_loggable_url(request.url)} failed: {e}")
            raise TransportError(
                f"Request failed: {e}",
                details={"url": _loggable_url(request.url)}
            ) from e

        response = adapt_response(raw, request.charset)
        logger.debug(f"Received HTTP {response.status_code} from {_loggable_url(request.url)}")
        return response

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()
        logger.debug("HTTP session closed")


def _loggable_url(url: str) -> str:
    # the query string may carry oauth_signature in query placement
    return url.split("?", 1)[0]
