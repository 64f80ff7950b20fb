"""
Assembly of transport-ready signed requests

Turns signed OAuth parameters plus the caller's method, URL and request
parameters into a PreparedOAuthRequest. No I/O happens here.
"""

from typing import Dict, List, Mapping, Optional, Tuple, Union
from dataclasses import dataclass

from ..signing.types import (
    HttpMethod,
    OAuthParameters,
    ParameterPlacement,
    RequestParameters,
)
from ..signing.utils import append_query, expand_parameter_value, form_encode, percent_encode
from ..exceptions import ValidationError
from .response import DEFAULT_CHARSET


FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class PreparedOAuthRequest:
    """
    Signed request ready to hand to a transport

    Attributes:
        method: HTTP method
        url: Final URL, including any query parameters
        headers: Header pairs, Authorization included in header mode
        body: Encoded request body, None when there is none
        charset: Charset used for the body and expected for the response
    """
    method: HttpMethod
    url: str
    headers: Tuple[Tuple[str, str], ...]
    body: Optional[bytes] = None
    charset: str = DEFAULT_CHARSET

    def header_dict(self) -> Dict[str, str]:
        return dict(self.headers)


def _quoted_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def build_authorization_header(oauth_parameters: OAuthParameters, realm: Optional[str] = None) -> str:
    """
    Build the value of an 'Authorization: OAuth ...' header.

    Args:
        oauth_parameters: Signed protocol parameters
        realm: Optional realm, sent first as a quoted-string and never signed

    Returns:
        str: Header value with each value percent-encoded and quoted

    Raises:
        ValidationError: If the parameters carry no signature
    """
    if oauth_parameters.signature is None:
        raise ValidationError("OAuth parameters must be signed before building the Authorization header")

    fields = []
    if realm is not None:
        fields.append(f'realm="{_quoted_string(realm)}"')
    fields.extend(
        f'{percent_encode(key)}="{percent_encode(value)}"'
        for key, value in oauth_parameters.as_pairs(include_signature=True)
    )
    return "OAuth " + ", ".join(fields)


def _expand_parameters(parameters: Optional[RequestParameters]) -> List[Tuple[str, str]]:
    return [
        (key, text)
        for key, value in (parameters or {}).items()
        for text in expand_parameter_value(value)
    ]


def build_request(
    method: Union[HttpMethod, str],
    url: str,
    oauth_parameters: OAuthParameters,
    parameters: Optional[RequestParameters] = None,
    charset: str = DEFAULT_CHARSET,
    placement: ParameterPlacement = ParameterPlacement.HEADER,
    realm: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None
) -> PreparedOAuthRequest:
    """
    Build a transport-ready request from signed OAuth parameters.

    Request parameters become a form-encoded body for POST, PUT and PATCH
    and are appended to the query string for every other method. They must
    be the same parameters that were signed.

    Args:
        method: HTTP method
        url: Request URL as signed
        oauth_parameters: Signed protocol parameters
        parameters: Request parameters covered by the signature
        charset: Body charset
        placement: Authorization header or query string
        realm: Optional realm for the Authorization header
        headers: Extra headers to send

    Returns:
        PreparedOAuthRequest: Request descriptor

    Raises:
        ValidationError: If a parameter cannot be encoded in charset
    """
    http_method = HttpMethod.parse(method)
    placement = ParameterPlacement(placement)
    pairs = _expand_parameters(parameters)

    final_headers: List[Tuple[str, str]] = list((headers or {}).items())
    final_url = url
    body = None

    if http_method.has_body and pairs:
        body = form_encode(pairs, charset).encode("ascii")
        final_headers.append(("Content-Type", f"{FORM_CONTENT_TYPE}; charset={charset}"))
    else:
        final_url = append_query(final_url, pairs, charset)

    if placement is ParameterPlacement.HEADER:
        final_headers.append(("Authorization", build_authorization_header(oauth_parameters, realm)))
    else:
        if oauth_parameters.signature is None:
            raise ValidationError("OAuth parameters must be signed before building the request")
        final_url = append_query(final_url, list(oauth_parameters.as_pairs(include_signature=True)))

    return PreparedOAuthRequest(
        method=http_method,
        url=final_url,
        headers=tuple(final_headers),
        body=body,
        charset=charset,
    )
