"""
Signature base string construction for OAuth 1.0

The base string is METHOD&ENCODED_URL&ENCODED_PARAMS where the URL is the
normalized base URL (no query, no fragment, no default port) and the
parameter string comes from the normalizer.
"""

from typing import Union

from .types import HttpMethod
from .utils import parse_url, percent_encode


def normalize_base_url(url: str) -> str:
    """
    Normalize a request URL for the base string.

    Args:
        url: Absolute request URL

    Returns:
        str: Lowercased scheme://host[:port]/path without query or fragment

    Raises:
        MalformedURLError: If the URL cannot be parsed
    """
    return parse_url(url)["base_url"]


def build_signature_base_string(
    method: Union[HttpMethod, str],
    url: str,
    normalized_params: str
) -> str:
    """
    Build the OAuth signature base string.

    Args:
        method: HTTP method
        url: Request URL; any query string is ignored here and must already
            be part of normalized_params
        normalized_params: Output of normalize_parameters

    Returns:
        str: Signature base string

    Raises:
        MalformedURLError: If the URL cannot be parsed
    """
    method_name = str(HttpMethod.parse(method))

    return "&".join((
        percent_encode(method_name),
        percent_encode(normalize_base_url(url)),
        percent_encode(normalized_params),
    ))
