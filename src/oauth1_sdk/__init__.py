"""
OAuth1 Python SDK
OAuth 1.0a request signing for requests and httpx
"""

from .version import __version__
from .exceptions import (
    OAuth1SDKError,
    ConfigurationError,
    MissingTokenSourceError,
    MissingSignerError,
    TokenError,
    TokenUnavailableError,
    EmptyTokenError,
    SigningError,
    UnsupportedSignatureMethodError,
)
from .signing import (
    # Core signing functionality
    OAuth1Signer,
    create_signer,
    # Types
    Config,
    Token,
    SignableRequest,
    SignatureResult,
    SignatureMethod,
    # Time and nonce sources
    Clock,
    NonceGenerator,
    SystemClock,
    FixedClock,
    RandomNonceGenerator,
    FixedNonceGenerator,
    # Utilities
    percent_encode,
    parse_authorization_header,
)
from .tokens import (
    TokenSource,
    StaticTokenSource,
)
from .transport import (
    OAuth1Transport,
    OAuth1HTTPXTransport,
    create_transport,
    clone_request,
)
from .client import (
    create_session,
    create_httpx_client,
)
from .config import (
    load_config_from_dict,
    load_config_from_json,
    load_config_from_file,
    load_config_from_env,
)

__all__ = [
    '__version__',
    # Exceptions
    'OAuth1SDKError',
    'ConfigurationError',
    'MissingTokenSourceError',
    'MissingSignerError',
    'TokenError',
    'TokenUnavailableError',
    'EmptyTokenError',
    'SigningError',
    'UnsupportedSignatureMethodError',
    # Signing
    'OAuth1Signer',
    'create_signer',
    'Config',
    'Token',
    'SignableRequest',
    'SignatureResult',
    'SignatureMethod',
    'Clock',
    'NonceGenerator',
    'SystemClock',
    'FixedClock',
    'RandomNonceGenerator',
    'FixedNonceGenerator',
    'percent_encode',
    'parse_authorization_header',
    # Token sources
    'TokenSource',
    'StaticTokenSource',
    # Transports
    'OAuth1Transport',
    'OAuth1HTTPXTransport',
    'create_transport',
    'clone_request',
    # Clients
    'create_session',
    'create_httpx_client',
    # Configuration
    'load_config_from_dict',
    'load_config_from_json',
    'load_config_from_file',
    'load_config_from_env',
]
