"""
OAuth1 Python SDK - Request Signing Module

OAuth 1.0a request signing: parameter collection, signature base string
construction, signature methods and Authorization header assembly.
"""

from .types import (
    Config,
    Token,
    SignableRequest,
    SignatureResult,
    SignatureMethod,
    DEFAULT_SIGNATURE_METHOD,
    OAUTH_VERSION,
)

from .clock import (
    Clock,
    NonceGenerator,
    SystemClock,
    FixedClock,
    RandomNonceGenerator,
    FixedNonceGenerator,
)

from .signer import (
    OAuth1Signer,
    create_signer,
    to_signable_request,
)

from .methods import (
    SignatureMethodSigner,
    HMACSignatureMethod,
    RSASignatureMethod,
    PlaintextSignatureMethod,
    get_signature_method,
)

from .base_string import (
    build_signature_base_string,
    build_signing_key,
)

from .utils import (
    percent_encode,
    base_uri,
    collect_parameters,
    normalize_parameters,
    format_authorization_header,
    parse_authorization_header,
)

# Public API exports
__all__ = [
    # Core signing functionality
    'OAuth1Signer',
    'create_signer',
    'to_signable_request',
    # Types
    'Config',
    'Token',
    'SignableRequest',
    'SignatureResult',
    'SignatureMethod',
    'DEFAULT_SIGNATURE_METHOD',
    'OAUTH_VERSION',
    # Time and nonce sources
    'Clock',
    'NonceGenerator',
    'SystemClock',
    'FixedClock',
    'RandomNonceGenerator',
    'FixedNonceGenerator',
    # Signature methods
    'SignatureMethodSigner',
    'HMACSignatureMethod',
    'RSASignatureMethod',
    'PlaintextSignatureMethod',
    'get_signature_method',
    # Base string
    'build_signature_base_string',
    'build_signing_key',
    # Utilities
    'percent_encode',
    'base_uri',
    'collect_parameters',
    'normalize_parameters',
    'format_authorization_header',
    'parse_authorization_header',
]
