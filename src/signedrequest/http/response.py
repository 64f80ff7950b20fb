"""
Normalized HTTP response returned by signed requests
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass


DEFAULT_CHARSET = "UTF-8"


@dataclass(frozen=True)
class HttpResponse:
    """
    Immutable snapshot of a transport result

    Attributes:
        status_code: HTTP status code
        headers: Header lines in received order; repeated names are kept
        body: Body decoded with charset
        charset: Charset used to decode the body
    """
    status_code: int
    headers: Tuple[Tuple[str, str], ...]
    body: str
    charset: str = DEFAULT_CHARSET

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def header(self, name: str) -> Optional[str]:
        """Return the first value of a header (case-insensitive), or None."""
        values = self.header_values(name)
        return values[0] if values else None

    def header_values(self, name: str) -> List[str]:
        """Return every value received for a header (case-insensitive)."""
        wanted = name.lower()
        return [value for key, value in self.headers if key.lower() == wanted]


def _header_items(raw) -> List[Tuple[str, str]]:
    # urllib3 keeps one entry per header line; requests' own mapping joins them
    raw_headers = getattr(getattr(raw, "raw", None), "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "iteritems"):
        return [(str(k), str(v)) for k, v in raw_headers.iteritems()]
    return [(str(k), str(v)) for k, v in raw.headers.items()]


def adapt_response(raw, charset: Optional[str] = None) -> HttpResponse:
    """
    Map a requests.Response into an HttpResponse.

    Args:
        raw: requests.Response returned by the transport
        charset: Charset forced by the caller; otherwise the response
            encoding, falling back to UTF-8

    Returns:
        HttpResponse: Normalized response
    """
    effective_charset = charset or raw.encoding or DEFAULT_CHARSET
    content = raw.content or b""

    try:
        body = content.decode(effective_charset, errors="replace")
    except LookupError:
        # unknown charset label from the server
        effective_charset = DEFAULT_CHARSET
        body = content.decode(effective_charset, errors="replace")

    return HttpResponse(
        status_code=int(raw.status_code),
        headers=tuple(_header_items(raw)),
        body=body,
        charset=effective_charset,
    )
