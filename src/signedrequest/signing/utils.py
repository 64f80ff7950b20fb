"""
Utility functions for OAuth 1.0 request signing

This module provides RFC 3986 percent-encoding, nonce and timestamp
generation, and URL decomposition used by the signing pipeline.
"""

import re
import time
import secrets
from typing import Dict, List, Optional, Tuple, Union
from urllib.parse import quote, unquote, urlsplit, parse_qsl

from requests.exceptions import RequestException
from requests.models import PreparedRequest

from ..exceptions import MalformedURLError, ValidationError


# Number of random bytes behind each nonce
NONCE_BYTES = 16

DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
}

_NONCE_PATTERN = re.compile(r'^[0-9a-f]{32,}$')


def percent_encode(value: Union[str, bytes, int, None], encoding: str = "utf-8") -> str:
    """
    Percent-encode a value using RFC 3986 unreserved characters.

    Letters, digits, '-', '.', '_' and '~' are kept; every other byte is
    encoded as %XX with uppercase hex digits.

    Args:
        value: Text, bytes or scalar to encode (None encodes as empty)
        encoding: Character encoding applied to text before escaping

    Returns:
        str: Encoded value
    """
    if value is None:
        return ""
    if isinstance(value, bytes):
        return quote(value, safe="~")
    return quote(str(value).encode(encoding), safe="~")


def percent_decode(value: str) -> str:
    """Reverse percent_encode for UTF-8 text."""
    return unquote(value, encoding="utf-8", errors="strict")


def _parameter_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValidationError(
                "Byte parameter values must be UTF-8",
                details={"original_error": str(e)}
            ) from e
    return str(value)


def expand_parameter_value(value) -> List[str]:
    """
    Expand one request parameter value into the texts that are signed and sent.

    The normalizer and the request builder both go through this function, so
    the signed values always equal the transmitted ones.

    Args:
        value: Text, UTF-8 bytes, scalar, None, or a list/tuple of those

    Returns:
        list: One text per transmitted value; None becomes ''

    Raises:
        ValidationError: If a bytes value is not valid UTF-8
    """
    if isinstance(value, (list, tuple)):
        return [_parameter_text(element) for element in value]
    return [_parameter_text(value)]


def generate_nonce() -> str:
    """
    Generate a cryptographically random one-time nonce.

    Returns:
        str: 32 lowercase hex characters (16 random bytes)
    """
    return secrets.token_hex(NONCE_BYTES)


def generate_timestamp() -> int:
    """
    Generate current Unix timestamp.

    Returns:
        int: Current Unix timestamp (seconds since epoch)
    """
    return int(time.time())


def validate_nonce(nonce: str) -> bool:
    """
    Validate nonce format produced by generate_nonce.

    Args:
        nonce: Nonce string to validate

    Returns:
        bool: True if nonce is at least 32 lowercase hex characters
    """
    if not isinstance(nonce, str):
        return False

    return bool(_NONCE_PATTERN.match(nonce))


def validate_timestamp(timestamp: int) -> bool:
    """
    Validate timestamp (should be a positive integer Unix timestamp).

    Args:
        timestamp: Unix timestamp to validate

    Returns:
        bool: True if timestamp is valid
    """
    if not isinstance(timestamp, int) or isinstance(timestamp, bool):
        return False

    return timestamp > 0


def _wire_path(url: str) -> str:
    # requests normalizes and requotes the URL before sending; sign that path
    prepared = PreparedRequest()
    try:
        prepared.prepare_url(url, None)
    except RequestException as e:
        raise MalformedURLError(
            f"Failed to parse URL: {e}",
            details={"url": url, "original_error": str(e)}
        ) from e
    return urlsplit(prepared.url).path or "/"


def parse_url(url: str) -> Dict[str, Optional[str]]:
    """
    Decompose a URL into the parts needed for signing.

    Args:
        url: Absolute http or https URL

    Returns:
        dict: Dictionary with parsed URL components:
            - scheme: lowercased scheme
            - host: lowercased host name
            - port: explicit non-default port as text, or None
            - path: path component ('/' when empty)
            - query: raw query string without '?'
            - base_url: scheme://host[:port]/path, no query or fragment

    Raises:
        MalformedURLError: If the URL has no scheme or host, uses an
            unsupported scheme, or carries an invalid port
    """
    if not isinstance(url, str) or not url.strip():
        raise MalformedURLError("URL cannot be empty", details={"url": url})

    try:
        parsed = urlsplit(url.strip())
        port = parsed.port
    except ValueError as e:
        raise MalformedURLError(
            f"Failed to parse URL: {e}",
            details={"url": url, "original_error": str(e)}
        ) from e

    if not parsed.scheme or not parsed.hostname:
        raise MalformedURLError(
            f"Invalid URL format: {url}",
            details={"url": url}
        )

    scheme = parsed.scheme.lower()
    if scheme not in DEFAULT_PORTS:
        raise MalformedURLError(
            f"Unsupported URL scheme: {parsed.scheme}",
            details={"url": url, "scheme": parsed.scheme}
        )

    host = parsed.hostname.lower()
    if ":" in host:
        # IPv6 literal
        host = f"[{host}]"

    netloc = host
    port_text = None
    if port is not None and port != DEFAULT_PORTS[scheme]:
        port_text = str(port)
        netloc = f"{host}:{port_text}"

    path = _wire_path(url.strip())

    return {
        "scheme": scheme,
        "host": host,
        "port": port_text,
        "path": path,
        "query": parsed.query,
        "base_url": f"{scheme}://{netloc}{path}",
    }


def split_url_query(url: str) -> Tuple[str, List[Tuple[str, str]]]:
    """
    Split a URL into its query-less form and decoded query pairs.

    Blank values are kept so that 'a=&b' contributes 'a=' and 'b='.

    Returns:
        tuple: (url without query or fragment, list of (key, value) pairs)
    """
    try:
        parsed = urlsplit(url)
    except ValueError as e:
        raise MalformedURLError(
            f"Failed to parse URL: {e}",
            details={"url": url, "original_error": str(e)}
        ) from e

    pairs = parse_qsl(parsed.query, keep_blank_values=True)
    without_query = parsed._replace(query="", fragment="").geturl()
    return without_query, pairs


def append_query(url: str, pairs: List[Tuple[str, str]], encoding: str = "utf-8") -> str:
    """
    Append percent-encoded pairs to the query string of a URL.

    Args:
        url: URL that may already carry a query string
        pairs: (key, value) pairs to append
        encoding: Character encoding for the values

    Returns:
        str: URL with the pairs appended and the fragment dropped
    """
    if not pairs:
        return url

    parsed = urlsplit(url)
    extra = form_encode(pairs, encoding)
    query = f"{parsed.query}&{extra}" if parsed.query else extra
    return parsed._replace(query=query, fragment="").geturl()


def form_encode(pairs: List[Tuple[str, str]], encoding: str = "utf-8") -> str:
    """
    Encode pairs as key=value joined by '&' with OAuth percent-encoding.

    Raises:
        ValidationError: If a key or value cannot be represented in encoding
    """
    try:
        return "&".join(
            f"{percent_encode(key, encoding)}={percent_encode(value, encoding)}"
            for key, value in pairs
        )
    except UnicodeEncodeError as e:
        raise ValidationError(
            f"Request parameters cannot be encoded as {encoding}",
            details={"charset": encoding, "original_error": str(e)}
        ) from e
