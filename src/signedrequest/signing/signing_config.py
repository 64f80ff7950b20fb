"""
Configuration management for OAuth request signing

This module provides the immutable signer configuration, a fluent builder
that produces it, and configuration validation.
"""

from typing import Optional
from dataclasses import dataclass

from ..exceptions import InvalidKeyError, ValidationError
from .types import (
    Credentials,
    SignatureMethod,
    ParameterPlacement,
    NonceGenerator,
    TimestampGenerator,
)
from .utils import generate_nonce, generate_timestamp


@dataclass(frozen=True)
class SignerConfig:
    """
    Configuration for an OAuth signer

    Attributes:
        credentials: Consumer (and optional token) credentials
        signature_method: Signature method to use
        realm: Optional realm for the Authorization header
        placement: Where OAuth parameters are carried
        nonce_generator: Function returning a fresh nonce per call
        timestamp_generator: Function returning the current Unix time
    """
    credentials: Credentials
    signature_method: SignatureMethod = SignatureMethod.HMAC_SHA1
    realm: Optional[str] = None
    placement: ParameterPlacement = ParameterPlacement.HEADER
    nonce_generator: NonceGenerator = generate_nonce
    timestamp_generator: TimestampGenerator = generate_timestamp

    def __post_init__(self):
        """Resolve wire names to enum members"""
        object.__setattr__(self, "signature_method", SignatureMethod.from_wire_name(self.signature_method))
        try:
            object.__setattr__(self, "placement", ParameterPlacement(self.placement))
        except ValueError:
            raise ValidationError(
                f"Unsupported parameter placement: {self.placement}",
                details={"supported": [p.value for p in ParameterPlacement]}
            )


class SignerConfigBuilder:
    """
    Builder for creating signer configurations with fluent API

    The builder is a construction aid only; build() returns a frozen
    SignerConfig that never changes afterwards.
    """

    def __init__(self):
        self._consumer_key: Optional[str] = None
        self._consumer_secret: str = ""
        self._rsa_private_key: Optional[str] = None
        self._token: Optional[str] = None
        self._token_secret: Optional[str] = None
        self._signature_method: SignatureMethod = SignatureMethod.HMAC_SHA1
        self._realm: Optional[str] = None
        self._placement: ParameterPlacement = ParameterPlacement.HEADER
        self._nonce_generator: Optional[NonceGenerator] = None
        self._timestamp_generator: Optional[TimestampGenerator] = None

    def consumer(self, key: str, secret: str = "") -> 'SignerConfigBuilder':
        """
        Set consumer credentials.

        Args:
            key: Consumer key
            secret: Consumer secret (unused for RSA-SHA1)

        Returns:
            SignerConfigBuilder: Self for method chaining
        """
        self._consumer_key = key
        self._consumer_secret = secret or ""
        return self

    def token(self, token: str, secret: str = "") -> 'SignerConfigBuilder':
        """
        Set access token credentials for 3-legged requests.

        Returns:
            SignerConfigBuilder: Self for method chaining
        """
        self._token = token
        self._token_secret = secret or ""
        return self

    def rsa_private_key(self, pem: str) -> 'SignerConfigBuilder':
        """
        Set the RSA private key and switch to RSA-SHA1.

        Args:
            pem: PEM encoded PKCS#1 or PKCS#8 private key

        Returns:
            SignerConfigBuilder: Self for method chaining
        """
        self._rsa_private_key = pem
        self._signature_method = SignatureMethod.RSA_SHA1
        return self

    def signature_method(self, method) -> 'SignerConfigBuilder':
        """
        Set signature method by member or wire name.

        Raises:
            UnsupportedSignatureMethodError: If the method is unknown
        """
        self._signature_method = SignatureMethod.from_wire_name(method)
        return self

    def realm(self, realm: str) -> 'SignerConfigBuilder':
        self._realm = realm
        return self

    def placement(self, placement: ParameterPlacement) -> 'SignerConfigBuilder':
        self._placement = placement
        return self

    def nonce_generator(self, generator: NonceGenerator) -> 'SignerConfigBuilder':
        """
        Set custom nonce generator.

        Args:
            generator: Function that returns nonce strings

        Returns:
            SignerConfigBuilder: Self for method chaining
        """
        self._nonce_generator = generator
        return self

    def timestamp_generator(self, generator: TimestampGenerator) -> 'SignerConfigBuilder':
        """
        Set custom timestamp generator.

        Args:
            generator: Function that returns Unix timestamps

        Returns:
            SignerConfigBuilder: Self for method chaining
        """
        self._timestamp_generator = generator
        return self

    def build(self) -> SignerConfig:
        """
        Build the signer configuration.

        Returns:
            SignerConfig: Complete, immutable configuration

        Raises:
            ValidationError: If required values are missing
            InvalidKeyError: If RSA-SHA1 is selected without a key
        """
        if self._consumer_key is None:
            raise ValidationError("Consumer key is required")

        credentials = Credentials(
            consumer_key=self._consumer_key,
            consumer_secret=self._consumer_secret,
            rsa_private_key=self._rsa_private_key,
            token=self._token,
            token_secret=self._token_secret,
        )

        config = SignerConfig(
            credentials=credentials,
            signature_method=self._signature_method,
            realm=self._realm,
            placement=self._placement,
            nonce_generator=self._nonce_generator or generate_nonce,
            timestamp_generator=self._timestamp_generator or generate_timestamp,
        )
        validate_signer_config(config)
        return config


def create_signer_config() -> SignerConfigBuilder:
    """
    Create a new signer configuration builder.

    Returns:
        SignerConfigBuilder: New configuration builder
    """
    return SignerConfigBuilder()


def validate_signer_config(config: SignerConfig) -> None:
    """
    Validate signer configuration.

    Args:
        config: Signer configuration to validate

    Raises:
        ValidationError: If configuration is invalid
        InvalidKeyError: If RSA-SHA1 is configured without a key
        UnsupportedSignatureMethodError: If the signature method is unknown
    """
    if not isinstance(config, SignerConfig):
        raise ValidationError("Configuration must be SignerConfig instance")

    if not isinstance(config.credentials, Credentials):
        raise ValidationError("Credentials must be Credentials instance")

    if config.signature_method is SignatureMethod.RSA_SHA1 and not config.credentials.rsa_private_key:
        raise InvalidKeyError("RSA-SHA1 signing requires an RSA private key")

    if config.credentials.token_secret and not config.credentials.token:
        raise ValidationError("Token secret supplied without a token")

    if not callable(config.nonce_generator):
        raise ValidationError("Nonce generator must be callable")

    if not callable(config.timestamp_generator):
        raise ValidationError("Timestamp generator must be callable")
