"""
Signature base string construction for OAuth 1.0a

The base string is the canonical form of a request that both the signer
and the server's verifier compute independently:

    METHOD&encoded(base URI)&encoded(normalized parameters)
"""

from typing import Dict, Optional

from .types import SignableRequest
from .utils import (
    base_uri,
    collect_parameters,
    normalize_parameters,
    percent_encode,
)


def build_signature_base_string(request: SignableRequest, oauth_params: Dict[str, str]) -> str:
    """
    Build the signature base string for a request.

    Args:
        request: Request being signed
        oauth_params: oauth_* parameters, without oauth_signature

    Returns:
        str: Signature base string
    """
    params = collect_parameters(request)
    params.extend(oauth_params.items())

    return '&'.join([
        request.method.upper(),
        percent_encode(base_uri(request.url)),
        percent_encode(normalize_parameters(params)),
    ])


def build_signing_key(consumer_secret: str, token_secret: Optional[str]) -> str:
    """
    Build the HMAC/PLAINTEXT signing key.

    The token segment stays present but empty when there is no token secret.
    """
    return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret or '')}"
