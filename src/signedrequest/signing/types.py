"""
Type definitions for OAuth 1.0 request signing

This module provides the enumerations and data classes shared by the
normalizer, base string builder and signer.
"""

from typing import Callable, Iterator, Mapping, Optional, Sequence, Tuple, Union
from dataclasses import dataclass, replace
from enum import Enum

from ..exceptions import UnsupportedSignatureMethodError, ValidationError


OAUTH_VERSION = "1.0"


class HttpMethod(str, Enum):
    """HTTP methods supported for signing"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    def __str__(self) -> str:
        return self.value

    @property
    def has_body(self) -> bool:
        """Whether request parameters travel in a form-encoded body"""
        return self in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)

    @classmethod
    def parse(cls, value: Union["HttpMethod", str]) -> "HttpMethod":
        """
        Resolve an HTTP method from a member or a verb string.

        Args:
            value: HttpMethod member or verb in any case

        Returns:
            HttpMethod: Matching member

        Raises:
            ValidationError: If the verb is not supported
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValidationError(
                f"Unsupported HTTP method: {value}",
                details={"method": value, "supported": [m.value for m in cls]}
            )


class SignatureMethod(str, Enum):
    """OAuth signature methods, valued by their wire names"""
    HMAC_SHA1 = "HMAC-SHA1"
    RSA_SHA1 = "RSA-SHA1"
    PLAINTEXT = "PLAINTEXT"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_wire_name(cls, name: Union["SignatureMethod", str]) -> "SignatureMethod":
        """
        Resolve a signature method from its wire name.

        Raises:
            UnsupportedSignatureMethodError: If the name is not recognized
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedSignatureMethodError(
                f"Unsupported signature method: {name}",
                details={"signature_method": name, "supported": [m.value for m in cls]}
            )


class ParameterPlacement(str, Enum):
    """Where the OAuth protocol parameters are carried on the wire"""
    HEADER = "header"
    QUERY_STRING = "query"


@dataclass(frozen=True)
class Credentials:
    """
    OAuth credentials supplied by the caller

    Attributes:
        consumer_key: Consumer key issued by the service provider
        consumer_secret: Consumer secret (HMAC-SHA1 and PLAINTEXT)
        rsa_private_key: PEM encoded RSA private key (RSA-SHA1)
        token: Access token for 3-legged requests
        token_secret: Access token secret for 3-legged requests
    """
    consumer_key: str
    consumer_secret: str = ""
    rsa_private_key: Optional[str] = None
    token: Optional[str] = None
    token_secret: Optional[str] = None

    def __post_init__(self):
        if not self.consumer_key or not isinstance(self.consumer_key, str):
            raise ValidationError("Consumer key must be a non-empty string")

        if self.consumer_secret is None:
            object.__setattr__(self, "consumer_secret", "")

    @property
    def is_three_legged(self) -> bool:
        return bool(self.token)

    def __repr__(self) -> str:
        # secrets stay out of reprs and tracebacks
        return (f"Credentials(consumer_key={self.consumer_key!r}, token={self.token!r}, "
                f"rsa_private_key={'<set>' if self.rsa_private_key else None})")


@dataclass(frozen=True)
class OAuthParameters:
    """
    OAuth protocol parameters generated for a single request

    Attributes:
        consumer_key: oauth_consumer_key
        nonce: oauth_nonce, unique per request
        timestamp: oauth_timestamp, Unix seconds
        signature_method: oauth_signature_method
        version: oauth_version
        token: oauth_token, present only for 3-legged requests
        signature: oauth_signature, present only after signing
    """
    consumer_key: str
    nonce: str
    timestamp: int
    signature_method: SignatureMethod
    version: str = OAUTH_VERSION
    token: Optional[str] = None
    signature: Optional[str] = None

    def __post_init__(self):
        if not self.nonce:
            raise ValidationError("Nonce cannot be empty")

        if not isinstance(self.timestamp, int) or isinstance(self.timestamp, bool) or self.timestamp <= 0:
            raise ValidationError(
                "Timestamp must be a positive integer",
                details={"timestamp": self.timestamp}
            )

    def as_pairs(self, include_signature: bool = True) -> Iterator[Tuple[str, str]]:
        """Yield the oauth_* wire pairs in protocol order"""
        yield "oauth_consumer_key", self.consumer_key
        if self.token:
            yield "oauth_token", self.token
        yield "oauth_signature_method", self.signature_method.value
        yield "oauth_timestamp", str(self.timestamp)
        yield "oauth_nonce", self.nonce
        yield "oauth_version", self.version
        if include_signature and self.signature is not None:
            yield "oauth_signature", self.signature

    def with_signature(self, signature: str) -> "OAuthParameters":
        return replace(self, signature=signature)


@dataclass(frozen=True)
class OAuthSignatureResult:
    """
    Result of signing a request

    Attributes:
        oauth_parameters: Protocol parameters including oauth_signature
        base_string: Signature base string that was signed
        signature: Base64 (or PLAINTEXT) signature value
    """
    oauth_parameters: OAuthParameters
    base_string: str
    signature: str


# Type aliases for convenience
ParameterValue = Union[str, Sequence[str], None]
RequestParameters = Mapping[str, ParameterValue]
ParameterPairs = Sequence[Tuple[str, str]]
NonceGenerator = Callable[[], str]
TimestampGenerator = Callable[[], int]
