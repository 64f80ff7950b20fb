"""
requests integration for OAuth 1.0 signing

This module lets an OAuthSigner sign requests made with plain requests
calls, as an auth handler or on an already prepared request.
"""

import logging
from typing import Dict, List, Optional, Tuple
from urllib.parse import parse_qsl

from requests.auth import AuthBase
from requests.models import PreparedRequest

from .types import ParameterPlacement
from .oauth_signer import OAuthSigner
from .signing_config import SignerConfig
from .utils import append_query
from ..http.request_builder import FORM_CONTENT_TYPE, build_authorization_header

logger = logging.getLogger(__name__)


def _form_body_pairs(prepared: PreparedRequest) -> List[Tuple[str, str]]:
    content_type = prepared.headers.get('Content-Type', '') if prepared.headers else ''
    if not content_type.lower().startswith(FORM_CONTENT_TYPE):
        return []

    body = prepared.body
    if not body:
        return []
    if isinstance(body, bytes):
        body = body.decode('utf-8')
    if not isinstance(body, str):
        # streamed bodies are not covered by the signature
        return []

    return parse_qsl(body, keep_blank_values=True)


def _group_pairs(pairs: List[Tuple[str, str]]) -> Dict[str, List[str]]:
    grouped: Dict[str, List[str]] = {}
    for key, value in pairs:
        grouped.setdefault(key, []).append(value)
    return grouped


def sign_prepared_request(
    prepared: PreparedRequest,
    signer: OAuthSigner,
    placement: Optional[ParameterPlacement] = None,
    realm: Optional[str] = None
) -> PreparedRequest:
    """
    Sign a prepared request in place.

    Query-string parameters and form-encoded body parameters are covered by
    the signature; other bodies are not.

    Args:
        prepared: Prepared request to sign
        signer: Signer to use
        placement: Override of the configured parameter placement
        realm: Override of the configured realm

    Returns:
        PreparedRequest: The same request with OAuth parameters attached

    Raises:
        MalformedURLError: If the request URL cannot be parsed
    """
    placement = ParameterPlacement(placement or signer.config.placement)
    realm = realm if realm is not None else signer.config.realm

    body_parameters = _group_pairs(_form_body_pairs(prepared))
    result = signer.sign_request(prepared.url, prepared.method, body_parameters)

    if placement is ParameterPlacement.HEADER:
        prepared.headers['Authorization'] = build_authorization_header(result.oauth_parameters, realm)
    else:
        signed_url = append_query(prepared.url, list(result.oauth_parameters.as_pairs(include_signature=True)))
        prepared.prepare_url(signed_url, None)

    logger.debug(f"Signed {prepared.method} request to {prepared.url.split('?', 1)[0]}")
    return prepared


class OAuth1Auth(AuthBase):
    """
    requests auth handler that signs each request with OAuth 1.0.

    Usage:
        requests.get(url, auth=OAuth1Auth(signer))
    """

    def __init__(
        self,
        signer: OAuthSigner,
        placement: Optional[ParameterPlacement] = None,
        realm: Optional[str] = None
    ):
        self.signer = signer
        self.placement = placement
        self.realm = realm

    @classmethod
    def from_config(cls, config: SignerConfig) -> 'OAuth1Auth':
        """Create an auth handler from signer configuration."""
        return cls(OAuthSigner(config))

    def __call__(self, prepared: PreparedRequest) -> PreparedRequest:
        return sign_prepared_request(prepared, self.signer, self.placement, self.realm)
