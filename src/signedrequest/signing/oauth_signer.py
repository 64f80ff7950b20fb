"""
OAuth 1.0 signer implementation

This module provides the signature step (HMAC-SHA1, RSA-SHA1 and PLAINTEXT)
and the OAuthSigner that runs the normalize -> base string -> sign pipeline
for a configured set of credentials.
"""

import base64
import hashlib
import hmac
from typing import Optional, Union

from ..crypto.rsa import RsaPrivateKey, load_rsa_private_key
from ..exceptions import UnsupportedSignatureMethodError
from .types import (
    Credentials,
    HttpMethod,
    OAuthParameters,
    OAuthSignatureResult,
    RequestParameters,
    SignatureMethod,
)
from .utils import percent_encode, split_url_query
from .normalizer import normalize_parameters
from .base_string import build_signature_base_string
from .signing_config import SignerConfig, validate_signer_config


def signing_key(credentials: Credentials) -> str:
    """
    Build the shared-secret key: enc(consumer_secret)&enc(token_secret).

    Args:
        credentials: Credentials holding the secrets

    Returns:
        str: Key used by HMAC-SHA1 and returned verbatim by PLAINTEXT
    """
    return f"{percent_encode(credentials.consumer_secret)}&{percent_encode(credentials.token_secret or '')}"


def sign(
    base_string: str,
    credentials: Credentials,
    method: SignatureMethod,
    rsa_key: Optional[RsaPrivateKey] = None
) -> str:
    """
    Compute the signature over a base string.

    Args:
        base_string: Signature base string
        credentials: Credentials for the key material
        method: Signature method
        rsa_key: Pre-parsed RSA key; parsed from credentials when omitted

    Returns:
        str: Base64 signature, or the plain key for PLAINTEXT

    Raises:
        InvalidKeyError: If RSA-SHA1 has no usable key
        UnsupportedSignatureMethodError: If the method is not recognized
    """
    method = SignatureMethod.from_wire_name(method)

    if method is SignatureMethod.HMAC_SHA1:
        digest = hmac.new(
            signing_key(credentials).encode("ascii"),
            base_string.encode("utf-8"),
            hashlib.sha1
        ).digest()
        return base64.b64encode(digest).decode("ascii")

    elif method is SignatureMethod.RSA_SHA1:
        if rsa_key is None:
            rsa_key = load_rsa_private_key(credentials.rsa_private_key)
        return base64.b64encode(rsa_key.sign_sha1(base_string)).decode("ascii")

    elif method is SignatureMethod.PLAINTEXT:
        return signing_key(credentials)

    raise UnsupportedSignatureMethodError(
        f"Unsupported signature method: {method}",
        details={"signature_method": str(method)}
    )


class OAuthSigner:
    """
    OAuth 1.0 request signer

    Holds an immutable SignerConfig and the RSA key parsed from it. Every
    signing call generates its own nonce and timestamp unless given, so one
    signer may be shared by concurrent callers.
    """

    def __init__(self, config: SignerConfig):
        """
        Initialize the signer with configuration.

        Args:
            config: Signer configuration

        Raises:
            ValidationError: If configuration is invalid
            InvalidKeyError: If the configured RSA key cannot be parsed
        """
        validate_signer_config(config)
        self.config = config
        self._rsa_key: Optional[RsaPrivateKey] = None
        if config.signature_method is SignatureMethod.RSA_SHA1:
            self._rsa_key = load_rsa_private_key(config.credentials.rsa_private_key)

    @property
    def credentials(self) -> Credentials:
        return self.config.credentials

    @property
    def signature_method(self) -> SignatureMethod:
        return self.config.signature_method

    def create_oauth_parameters(
        self,
        nonce: Optional[str] = None,
        timestamp: Optional[int] = None
    ) -> OAuthParameters:
        """
        Create the unsigned protocol parameters for one request.

        Args:
            nonce: Fixed nonce, generated when omitted
            timestamp: Fixed Unix timestamp, generated when omitted

        Returns:
            OAuthParameters: Fresh protocol parameters
        """
        if nonce is None:
            nonce = self.config.nonce_generator()
        if timestamp is None:
            timestamp = self.config.timestamp_generator()

        return OAuthParameters(
            consumer_key=self.credentials.consumer_key,
            nonce=nonce,
            timestamp=timestamp,
            signature_method=self.signature_method,
            token=self.credentials.token or None,
        )

    def signature_base_string(
        self,
        url: str,
        method: Union[HttpMethod, str],
        nonce: str,
        timestamp: int,
        parameters: Optional[RequestParameters] = None
    ) -> str:
        """
        Return the signature base string for a request.

        Args:
            url: Request URL, query parameters included in the signature
            method: HTTP method
            nonce: OAuth nonce
            timestamp: OAuth timestamp
            parameters: Optional body or extra query parameters

        Returns:
            str: Signature base string

        Raises:
            MalformedURLError: If the URL cannot be parsed
        """
        oauth_parameters = self.create_oauth_parameters(nonce, timestamp)
        return self._base_string(url, method, oauth_parameters, parameters)

    def signature(
        self,
        url: str,
        method: Union[HttpMethod, str],
        nonce: str,
        timestamp: int,
        parameters: Optional[RequestParameters] = None
    ) -> str:
        """
        Return the OAuth signature for a request.

        Args:
            url: Request URL
            method: HTTP method
            nonce: OAuth nonce
            timestamp: OAuth timestamp
            parameters: Optional body or extra query parameters

        Returns:
            str: OAuth signature
        """
        base_string = self.signature_base_string(url, method, nonce, timestamp, parameters)
        return sign(base_string, self.credentials, self.signature_method, self._rsa_key)

    def sign_request(
        self,
        url: str,
        method: Union[HttpMethod, str],
        parameters: Optional[RequestParameters] = None,
        nonce: Optional[str] = None,
        timestamp: Optional[int] = None
    ) -> OAuthSignatureResult:
        """
        Sign a request with freshly generated protocol parameters.

        Args:
            url: Request URL
            method: HTTP method
            parameters: Optional body or extra query parameters
            nonce: Fixed nonce (tests and replays of known vectors)
            timestamp: Fixed timestamp

        Returns:
            OAuthSignatureResult: Signed protocol parameters and base string

        Raises:
            MalformedURLError: If the URL cannot be parsed
            InvalidKeyError: If the RSA key cannot be used
        """
        oauth_parameters = self.create_oauth_parameters(nonce, timestamp)
        base_string = self._base_string(url, method, oauth_parameters, parameters)
        signature = sign(base_string, self.credentials, self.signature_method, self._rsa_key)

        return OAuthSignatureResult(
            oauth_parameters=oauth_parameters.with_signature(signature),
            base_string=base_string,
            signature=signature,
        )

    def _base_string(
        self,
        url: str,
        method: Union[HttpMethod, str],
        oauth_parameters: OAuthParameters,
        parameters: Optional[RequestParameters]
    ) -> str:
        _, query_pairs = split_url_query(url)
        normalized = normalize_parameters(
            query_pairs,
            parameters or {},
            oauth_parameters.as_pairs(include_signature=False),
        )
        return build_signature_base_string(method, url, normalized)


def create_signer(config: SignerConfig) -> OAuthSigner:
    """
    Create a new OAuth signer.

    Args:
        config: Signer configuration

    Returns:
        OAuthSigner: Configured signer instance
    """
    return OAuthSigner(config)
