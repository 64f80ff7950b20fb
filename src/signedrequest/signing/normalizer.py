"""
Parameter normalization for OAuth 1.0 signatures

Merges query-string, body and protocol parameters into the single
percent-encoded, sorted parameter string that the base string covers.
"""

from collections import abc
from typing import Iterable, List, Mapping, Tuple, Union

from .types import ParameterValue
from .utils import expand_parameter_value, percent_encode, percent_decode


ParameterSource = Union[Mapping[str, ParameterValue], Iterable[Tuple[str, ParameterValue]]]

# Never part of its own signature
EXCLUDED_PARAMETERS = frozenset({"oauth_signature"})


def _iter_source(source: ParameterSource) -> Iterable[Tuple[str, ParameterValue]]:
    if source is None:
        return ()
    if isinstance(source, abc.Mapping):
        return source.items()
    return source


def collect_parameters(*sources: ParameterSource) -> List[Tuple[str, str]]:
    """
    Encode and sort the parameters of every source.

    Args:
        *sources: Mappings or iterables of (key, value) pairs. List values
            expand to one entry per element, None becomes an empty value
            and bytes are decoded as UTF-8.

    Returns:
        list: Sorted (encoded key, encoded value) pairs; duplicates kept
    """
    encoded = []
    for source in sources:
        for key, value in _iter_source(source):
            if key in EXCLUDED_PARAMETERS:
                continue
            encoded_key = percent_encode(key)
            for element in expand_parameter_value(value):
                encoded.append((encoded_key, percent_encode(element)))

    # encoded text is pure ASCII, so code point order is byte order
    encoded.sort()
    return encoded


def normalize_parameters(*sources: ParameterSource) -> str:
    """
    Build the normalized request parameter string.

    Args:
        *sources: Query pairs, body parameters and OAuth protocol parameters

    Returns:
        str: 'key=value' pairs joined with '&'
    """
    return "&".join(f"{key}={value}" for key, value in collect_parameters(*sources))


def parse_normalized_parameters(normalized: str) -> List[Tuple[str, str]]:
    """
    Parse a normalized parameter string back into decoded pairs.

    Args:
        normalized: Output of normalize_parameters

    Returns:
        list: Decoded (key, value) pairs in string order
    """
    pairs = []
    if not normalized:
        return pairs

    for item in normalized.split("&"):
        key, _, value = item.partition("=")
        pairs.append((percent_decode(key), percent_decode(value)))
    return pairs
