"""
Signed request client

This module provides the public entry point: a client that signs each
request with OAuth 1.0 (2-legged or 3-legged), sends it through a transport
and returns a normalized HttpResponse.
"""

import logging
from typing import Mapping, Optional, Union

from .signing.types import HttpMethod, RequestParameters
from .signing.oauth_signer import OAuthSigner
from .signing.signing_config import SignerConfig
from .http.request_builder import PreparedOAuthRequest, build_request
from .http.response import HttpResponse
from .http.transport import HttpClientConfig, RequestsTransport, Transport

logger = logging.getLogger(__name__)


class SignedRequestClient:
    """
    HTTP client that signs every outgoing request.

    Each call runs normalize -> base string -> sign -> build -> send -> adapt
    with a fresh nonce and timestamp. The client itself holds only immutable
    configuration, the signer and the transport.
    """

    def __init__(
        self,
        signer_config: SignerConfig,
        transport: Optional[Transport] = None,
        http_config: Optional[HttpClientConfig] = None
    ):
        """
        Initialize the client.

        Args:
            signer_config: Signer configuration
            transport: Optional transport; a RequestsTransport by default
            http_config: Transport configuration for the default transport

        Raises:
            ValidationError: If configuration is invalid
            InvalidKeyError: If the configured RSA key cannot be parsed
        """
        self.signer = OAuthSigner(signer_config)
        self.http_config = http_config or HttpClientConfig()
        self.transport = transport or RequestsTransport(self.http_config)

        mode = "3-legged" if signer_config.credentials.is_three_legged else "2-legged"
        logger.info(
            f"Initialized signed request client for consumer {signer_config.credentials.consumer_key} "
            f"({mode}, {signer_config.signature_method.value})"
        )

    @property
    def config(self) -> SignerConfig:
        return self.signer.config

    def signature_base_string(
        self,
        url: str,
        method: Union[HttpMethod, str],
        nonce: str,
        timestamp: int,
        parameters: Optional[RequestParameters] = None
    ) -> str:
        """
        Return the OAuth signature base string.

        Args:
            url: Request URL
            method: HTTP method
            nonce: OAuth nonce value
            timestamp: OAuth timestamp value
            parameters: Optional request parameters

        Returns:
            str: Signature base string
        """
        return self.signer.signature_base_string(url, method, nonce, timestamp, parameters)

    def signature(
        self,
        url: str,
        method: Union[HttpMethod, str],
        nonce: str,
        timestamp: int,
        parameters: Optional[RequestParameters] = None
    ) -> str:
        """
        Return the OAuth signature.

        Args:
            url: Request URL
            method: HTTP method
            nonce: OAuth nonce value
            timestamp: OAuth timestamp value
            parameters: Optional request parameters

        Returns:
            str: OAuth signature
        """
        return self.signer.signature(url, method, nonce, timestamp, parameters)

    def prepare_request(
        self,
        url: str,
        method: Union[HttpMethod, str],
        parameters: Optional[RequestParameters] = None,
        charset: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> PreparedOAuthRequest:
        """
        Sign a request and return the transport-ready descriptor without sending it.

        Args:
            url: Request URL
            method: HTTP method
            parameters: Request parameters (OPTIONAL)
            charset: Charset, the configured default when omitted
            headers: Extra headers

        Returns:
            PreparedOAuthRequest: Signed request

        Raises:
            MalformedURLError: If the URL cannot be parsed
            ValidationError: If the HTTP method is not supported
        """
        http_method = HttpMethod.parse(method)
        result = self.signer.sign_request(url, http_method, parameters)

        return build_request(
            http_method,
            url,
            result.oauth_parameters,
            parameters=parameters,
            charset=charset or self.http_config.default_charset,
            placement=self.config.placement,
            realm=self.config.realm,
            headers=headers,
        )

    def do_request(
        self,
        url: str,
        method: Union[HttpMethod, str],
        parameters: Optional[RequestParameters] = None,
        charset: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> HttpResponse:
        """
        Do a signed HTTP request and return the HTTP response.

        Args:
            url: Request URL
            method: HTTP method
            parameters: Request parameters (OPTIONAL)
            charset: Charset
            headers: Extra headers

        Returns:
            HttpResponse: HTTP response

        Raises:
            MalformedURLError: If the URL cannot be parsed
            TransportError: If the transport fails
        """
        request = self.prepare_request(url, method, parameters, charset, headers)
        logger.debug(f"Signed {request.method.value} request to {url.split('?', 1)[0]}")
        return self.transport.send(request)

    def get(self, url: str, parameters: Optional[RequestParameters] = None,
            charset: Optional[str] = None) -> HttpResponse:
        """Do GET request."""
        return self.do_request(url, HttpMethod.GET, parameters, charset)

    def post(self, url: str, parameters: Optional[RequestParameters] = None,
             charset: Optional[str] = None) -> HttpResponse:
        """Do POST request with form-encoded parameters."""
        return self.do_request(url, HttpMethod.POST, parameters, charset)

    def put(self, url: str, parameters: Optional[RequestParameters] = None,
            charset: Optional[str] = None) -> HttpResponse:
        """Do PUT request."""
        return self.do_request(url, HttpMethod.PUT, parameters, charset)

    def delete(self, url: str, parameters: Optional[RequestParameters] = None,
               charset: Optional[str] = None) -> HttpResponse:
        """Do DELETE request."""
        return self.do_request(url, HttpMethod.DELETE, parameters, charset)

    def head(self, url: str, parameters: Optional[RequestParameters] = None,
             charset: Optional[str] = None) -> HttpResponse:
        """Do HEAD request."""
        return self.do_request(url, HttpMethod.HEAD, parameters, charset)

    def options(self, url: str, parameters: Optional[RequestParameters] = None,
                charset: Optional[str] = None) -> HttpResponse:
        """Do OPTIONS request."""
        return self.do_request(url, HttpMethod.OPTIONS, parameters, charset)

    def trace(self, url: str, parameters: Optional[RequestParameters] = None,
              charset: Optional[str] = None) -> HttpResponse:
        """Do TRACE request."""
        return self.do_request(url, HttpMethod.TRACE, parameters, charset)

    def patch(self, url: str, parameters: Optional[RequestParameters] = None,
              charset: Optional[str] = None) -> HttpResponse:
        """Do PATCH request."""
        return self.do_request(url, HttpMethod.PATCH, parameters, charset)

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, *args):
        """Context manager exit."""
        self.close()


def create_signed_request_client(
    signer_config: SignerConfig,
    transport: Optional[Transport] = None,
    timeout: float = 30.0,
    verify_ssl: bool = True
) -> SignedRequestClient:
    """
    Create a signed request client with default transport configuration.

    Args:
        signer_config: Signer configuration
        transport: Optional transport to use instead of requests
        timeout: Request timeout in seconds
        verify_ssl: Whether to verify SSL certificates

    Returns:
        SignedRequestClient: Configured client
    """
    http_config = HttpClientConfig(timeout=timeout, verify_ssl=verify_ssl)
    return SignedRequestClient(signer_config, transport=transport, http_config=http_config)
