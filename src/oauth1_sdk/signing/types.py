"""
Type definitions for request signing functionality

This module provides the value types shared by the OAuth 1.0a signer, the
token sources and the transports.
"""

from typing import Dict, Optional, Union
from dataclasses import dataclass, field
from enum import Enum

from ..exceptions import ConfigurationError
from .clock import Clock, NonceGenerator, SystemClock, RandomNonceGenerator


# OAuth protocol parameter names
OAUTH_CONSUMER_KEY_PARAM = "oauth_consumer_key"
OAUTH_NONCE_PARAM = "oauth_nonce"
OAUTH_SIGNATURE_PARAM = "oauth_signature"
OAUTH_SIGNATURE_METHOD_PARAM = "oauth_signature_method"
OAUTH_TIMESTAMP_PARAM = "oauth_timestamp"
OAUTH_TOKEN_PARAM = "oauth_token"
OAUTH_VERSION_PARAM = "oauth_version"
REALM_PARAM = "realm"

OAUTH_VERSION = "1.0"

AUTHORIZATION_HEADER = "Authorization"
AUTHORIZATION_PREFIX = "OAuth "
CONTENT_TYPE_HEADER = "Content-Type"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class SignatureMethod(str, Enum):
    """OAuth 1.0a signature methods"""
    HMAC_SHA1 = "HMAC-SHA1"
    HMAC_SHA256 = "HMAC-SHA256"
    RSA_SHA1 = "RSA-SHA1"
    RSA_SHA256 = "RSA-SHA256"
    PLAINTEXT = "PLAINTEXT"


DEFAULT_SIGNATURE_METHOD = SignatureMethod.HMAC_SHA1


@dataclass(frozen=True)
class Token:
    """
    User-specific credentials authorizing access to a protected resource

    Attributes:
        identifier: Token identifier sent as oauth_token
        secret: Token secret, second half of the signing key
    """
    identifier: str
    secret: str = field(default="", repr=False)

    @property
    def is_empty(self) -> bool:
        return not self.identifier


@dataclass(frozen=True)
class Config:
    """
    Consumer configuration shared by every signing operation

    Attributes:
        consumer_key: Key identifying the calling application
        consumer_secret: Secret paired with the consumer key
        signature_method: Signature method name (HMAC-SHA1 by default)
        nonce_generator: Source of oauth_nonce values
        clock: Source of oauth_timestamp values
        realm: Optional realm advertised in the Authorization header
        rsa_private_key: PEM private key, only used by the RSA methods
    """
    consumer_key: str
    consumer_secret: str = field(default="", repr=False)
    signature_method: Union[SignatureMethod, str] = DEFAULT_SIGNATURE_METHOD
    nonce_generator: NonceGenerator = field(default_factory=RandomNonceGenerator)
    clock: Clock = field(default_factory=SystemClock)
    realm: Optional[str] = None
    rsa_private_key: Optional[Union[bytes, str]] = field(default=None, repr=False)

    def __post_init__(self):
        """Validate configuration after initialization"""
        if not isinstance(self.consumer_key, str):
            raise ConfigurationError("Consumer key must be a string", details={"field": "consumer_key"})

        if not isinstance(self.consumer_secret, str):
            raise ConfigurationError("Consumer secret must be a string", details={"field": "consumer_secret"})

        if not isinstance(self.nonce_generator, NonceGenerator):
            raise ConfigurationError("Nonce generator must provide nonce()", details={"field": "nonce_generator"})

        if not isinstance(self.clock, Clock):
            raise ConfigurationError("Clock must provide now()", details={"field": "clock"})

        # Known names become enum members; unknown names are rejected at signing time
        if not isinstance(self.signature_method, SignatureMethod):
            try:
                object.__setattr__(self, 'signature_method', SignatureMethod(str(self.signature_method).upper()))
            except ValueError:
                pass

    @property
    def signature_method_name(self) -> str:
        if isinstance(self.signature_method, SignatureMethod):
            return self.signature_method.value
        return str(self.signature_method)


@dataclass
class SignableRequest:
    """
    Description of an outgoing request as seen by the signer

    Attributes:
        method: HTTP method (GET, POST, etc.)
        url: Complete request URL including the query string
        headers: Request headers as key-value pairs
        body: Optional request body (string or bytes)
    """
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Union[str, bytes]] = None

    def __post_init__(self):
        """Validate request after initialization"""
        if not self.url:
            raise ValueError("Request URL cannot be empty")

        if not self.method:
            raise ValueError("Request method cannot be empty")

        # Normalize headers to lowercase for consistent processing
        self.headers = {k.lower(): v for k, v in self.headers.items()}

    @property
    def is_form_encoded(self) -> bool:
        content_type = self.headers.get(CONTENT_TYPE_HEADER.lower(), "")
        return content_type.split(';', 1)[0].strip().lower() == FORM_CONTENT_TYPE


@dataclass
class SignatureResult:
    """
    Outcome of signing one request

    Attributes:
        oauth_params: The oauth_* parameters written into the header
        base_string: Signature base string that was signed
        signature: Encoded signature value
        authorization_header: Complete Authorization header value
    """
    oauth_params: Dict[str, str]
    base_string: str
    signature: str
    authorization_header: str
