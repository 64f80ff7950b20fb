"""
HTTP request assembly, transport and response adaptation for signed requests
"""

from .response import (
    HttpResponse,
    adapt_response,
    DEFAULT_CHARSET,
)
from .request_builder import (
    PreparedOAuthRequest,
    build_authorization_header,
    build_request,
    FORM_CONTENT_TYPE,
)
from .transport import (
    Transport,
    RequestsTransport,
    HttpClientConfig,
)

__all__ = [
    'HttpResponse',
    'adapt_response',
    'DEFAULT_CHARSET',
    'PreparedOAuthRequest',
    'build_authorization_header',
    'build_request',
    'FORM_CONTENT_TYPE',
    'Transport',
    'RequestsTransport',
    'HttpClientConfig',
]
