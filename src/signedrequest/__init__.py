"""
signedrequest
OAuth 1.0 signed HTTP requests for Python
"""

from .version import __version__
from .exceptions import (
    SignedRequestError,
    ValidationError,
    MalformedURLError,
    InvalidKeyError,
    UnsupportedSignatureMethodError,
    ConfigurationError,
    TransportError,
)
from .signing import (
    HttpMethod,
    SignatureMethod,
    ParameterPlacement,
    Credentials,
    OAuthParameters,
    OAuthSignatureResult,
    OAuthSigner,
    create_signer,
    SignerConfig,
    SignerConfigBuilder,
    create_signer_config,
    normalize_parameters,
    build_signature_base_string,
    percent_encode,
    OAuth1Auth,
    sign_prepared_request,
)
from .http import (
    HttpResponse,
    PreparedOAuthRequest,
    HttpClientConfig,
    RequestsTransport,
    Transport,
)
from .client import (
    SignedRequestClient,
    create_signed_request_client,
)
from .config import (
    ClientSettings,
    load_config_from_dict,
    load_config_from_json,
    load_config_from_file,
    load_config_from_env,
)

__all__ = [
    '__version__',
    # Exceptions
    'SignedRequestError',
    'ValidationError',
    'MalformedURLError',
    'InvalidKeyError',
    'UnsupportedSignatureMethodError',
    'ConfigurationError',
    'TransportError',
    # Signing
    'HttpMethod',
    'SignatureMethod',
    'ParameterPlacement',
    'Credentials',
    'OAuthParameters',
    'OAuthSignatureResult',
    'OAuthSigner',
    'create_signer',
    'SignerConfig',
    'SignerConfigBuilder',
    'create_signer_config',
    'normalize_parameters',
    'build_signature_base_string',
    'percent_encode',
    'OAuth1Auth',
    'sign_prepared_request',
    # HTTP
    'HttpResponse',
    'PreparedOAuthRequest',
    'HttpClientConfig',
    'RequestsTransport',
    'Transport',
    # Client
    'SignedRequestClient',
    'create_signed_request_client',
    # Configuration
    'ClientSettings',
    'load_config_from_dict',
    'load_config_from_json',
    'load_config_from_file',
    'load_config_from_env',
]
