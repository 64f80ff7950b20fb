"""
signedrequest - Request Signing Module

OAuth 1.0 (RFC 5849) signatures with HMAC-SHA1, RSA-SHA1 and PLAINTEXT.
This module normalizes request parameters, builds the signature base string
and signs it for 2-legged and 3-legged requests.
"""

from .types import (
    HttpMethod,
    SignatureMethod,
    ParameterPlacement,
    Credentials,
    OAuthParameters,
    OAuthSignatureResult,
    OAUTH_VERSION,
)

from .oauth_signer import (
    OAuthSigner,
    create_signer,
    sign,
    signing_key,
)

from .signing_config import (
    SignerConfig,
    SignerConfigBuilder,
    create_signer_config,
    validate_signer_config,
)

from .normalizer import (
    collect_parameters,
    normalize_parameters,
    parse_normalized_parameters,
)

from .base_string import (
    build_signature_base_string,
    normalize_base_url,
)

from .utils import (
    percent_encode,
    percent_decode,
    generate_nonce,
    generate_timestamp,
    validate_nonce,
    validate_timestamp,
    parse_url,
)

from .integration import (
    OAuth1Auth,
    sign_prepared_request,
)

# Public API exports
__all__ = [
    # Core signing functionality
    'OAuthSigner',
    'create_signer',
    'sign',
    'signing_key',
    # Types
    'HttpMethod',
    'SignatureMethod',
    'ParameterPlacement',
    'Credentials',
    'OAuthParameters',
    'OAuthSignatureResult',
    'OAUTH_VERSION',
    # Configuration
    'SignerConfig',
    'SignerConfigBuilder',
    'create_signer_config',
    'validate_signer_config',
    # Normalization and base string
    'collect_parameters',
    'normalize_parameters',
    'parse_normalized_parameters',
    'build_signature_base_string',
    'normalize_base_url',
    # Utilities
    'percent_encode',
    'percent_decode',
    'generate_nonce',
    'generate_timestamp',
    'validate_nonce',
    'validate_timestamp',
    'parse_url',
    # requests integration
    'OAuth1Auth',
    'sign_prepared_request',
]
