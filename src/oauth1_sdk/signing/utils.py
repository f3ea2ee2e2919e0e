"""
Utility functions for request signing

This module provides the encoding helpers used by OAuth 1.0a signing:
RFC 3986 percent-encoding, base URI normalization, parameter collection and
Authorization header formatting/parsing.
"""

import re
import time
from typing import Dict, List, Tuple, Union
from urllib.parse import quote, unquote, urlsplit, parse_qsl

from ..exceptions import SigningError
from .types import (
    AUTHORIZATION_PREFIX,
    SignableRequest,
)


# Default ports dropped from the base URI
DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
}

_AUTH_PARAM_PATTERN = re.compile(r'\s*([^=\s,]+)\s*=\s*"([^"]*)"\s*')

ParamList = List[Tuple[str, str]]


def percent_encode(value: Union[str, bytes]) -> str:
    """
    Percent-encode a value per RFC 3986.

    Letters, digits and ``-._~`` are left as is; every other byte of the
    UTF-8 encoding becomes ``%XX`` with uppercase hex digits.

    Args:
        value: String or bytes to encode

    Returns:
        str: Encoded value
    """
    return quote(value, safe='~')


def base_uri(url: str) -> str:
    """
    Normalize a request URL into the base string URI.

    Scheme and host are lowercased, userinfo, query and fragment are
    dropped, and the port is dropped when it is the scheme default.

    Args:
        url: Absolute request URL

    Returns:
        str: scheme://host[:port]/path

    Raises:
        SigningError: If the URL is not absolute
    """
    parsed = urlsplit(url)
    if not parsed.scheme or not parsed.netloc:
        raise SigningError(
            f"Invalid URL format: {url}",
            "INVALID_URL",
            {"url": url}
        )

    scheme = parsed.scheme.lower()
    host = parsed.netloc.rpartition('@')[2].lower()
    try:
        port = parsed.port
    except ValueError as e:
        raise SigningError(
            f"Invalid URL port: {url}",
            "INVALID_URL",
            {"url": url, "original_error": str(e)}
        )

    if port is not None and DEFAULT_PORTS.get(scheme) == port:
        host = host.rsplit(':', 1)[0]

    path = parsed.path or '/'
    return f"{scheme}://{host}{path}"


def collect_parameters(request: SignableRequest) -> ParamList:
    """
    Collect the request parameters that take part in the signature.

    Query parameters always participate. Body parameters participate only
    when the body is form-encoded. Blank values are kept.

    Args:
        request: Request being signed

    Returns:
        list: Decoded (name, value) pairs in request order
    """
    params = parse_qsl(urlsplit(request.url).query, keep_blank_values=True)

    if request.is_form_encoded and request.body:
        body = request.body
        if isinstance(body, bytes):
            body = body.decode('utf-8')
        params.extend(parse_qsl(body, keep_blank_values=True))

    return params


def normalize_parameters(params: ParamList) -> str:
    """
    Build the normalized parameter string.

    Each name and value is encoded, pairs are sorted by encoded name then
    encoded value, and joined as ``name=value`` with ``&``.

    Args:
        params: Decoded (name, value) pairs

    Returns:
        str: Normalized parameter string
    """
    encoded = sorted((percent_encode(k), percent_encode(v)) for k, v in params)
    return '&'.join(f"{k}={v}" for k, v in encoded)


def format_authorization_header(params: Dict[str, str]) -> str:
    """
    Format an OAuth Authorization header value.

    Args:
        params: Header parameters (oauth_* fields and optional realm)

    Returns:
        str: ``OAuth k1="v1", k2="v2"`` with keys in lexicographic order
    """
    pairs = [f'{key}="{percent_encode(params[key])}"' for key in sorted(params)]
    return AUTHORIZATION_PREFIX + ', '.join(pairs)


def parse_authorization_header(value: str) -> Dict[str, str]:
    """
    Parse an OAuth Authorization header value back into its parameters.

    Args:
        value: Header value starting with ``OAuth``

    Returns:
        dict: Decoded parameter mapping

    Raises:
        ValueError: If the value is not an OAuth header
    """
    if not value or not value.startswith(AUTHORIZATION_PREFIX.strip()):
        raise ValueError("Authorization header is not an OAuth header")

    params = {}
    for part in value[len(AUTHORIZATION_PREFIX.strip()):].split(','):
        if not part.strip():
            continue
        match = _AUTH_PARAM_PATTERN.fullmatch(part)
        if not match:
            raise ValueError(f"Malformed Authorization header parameter: {part.strip()}")
        params[unquote(match.group(1))] = unquote(match.group(2))

    return params


class PerformanceTimer:
    """Simple performance timer for monitoring signing operations."""

    def __init__(self):
        self.start_time = time.perf_counter()

    def elapsed_ms(self) -> float:
        """Get elapsed time in milliseconds."""
        return (time.perf_counter() - self.start_time) * 1000
