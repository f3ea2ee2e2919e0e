"""
OAuth 1.0a signature methods

Each method turns a signature base string into the oauth_signature value.
HMAC and RSA primitives come from the ``cryptography`` package.
"""

import base64
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, hmac, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..exceptions import SigningError, UnsupportedSignatureMethodError
from .base_string import build_signing_key
from .types import Config, SignatureMethod


class SignatureMethodSigner(ABC):
    """Computes oauth_signature values for one signature method."""

    name: str

    @abstractmethod
    def sign(self, base_string: str, consumer_secret: str, token_secret: Optional[str]) -> str:
        """
        Sign a base string.

        Args:
            base_string: Signature base string
            consumer_secret: Consumer secret from the configuration
            token_secret: Token secret, may be empty

        Returns:
            str: Signature value (not yet percent-encoded)
        """


class HMACSignatureMethod(SignatureMethodSigner):
    """HMAC over the base string keyed with consumer and token secrets."""

    def __init__(self, name: str, algorithm: hashes.HashAlgorithm):
        self.name = name
        self.algorithm = algorithm

    def sign(self, base_string: str, consumer_secret: str, token_secret: Optional[str]) -> str:
        key = build_signing_key(consumer_secret, token_secret).encode('utf-8')
        try:
            mac = hmac.HMAC(key, self.algorithm)
            mac.update(base_string.encode('utf-8'))
            digest = mac.finalize()
        except (UnsupportedAlgorithm, ValueError, TypeError) as e:
            raise SigningError(
                f"{self.name} signing failed: {e}",
                "CRYPTO_ERROR",
                {"signature_method": self.name, "original_error": str(e)}
            ) from e
        return base64.b64encode(digest).decode('ascii')


class RSASignatureMethod(SignatureMethodSigner):
    """RSASSA-PKCS1-v1_5 over the base string with the consumer's private key."""

    def __init__(self, name: str, algorithm: hashes.HashAlgorithm, private_key: rsa.RSAPrivateKey):
        self.name = name
        self.algorithm = algorithm
        self.private_key = private_key

    def sign(self, base_string: str, consumer_secret: str, token_secret: Optional[str]) -> str:
        try:
            signature = self.private_key.sign(
                base_string.encode('utf-8'),
                padding.PKCS1v15(),
                self.algorithm,
            )
        except (UnsupportedAlgorithm, ValueError, TypeError) as e:
            raise SigningError(
                f"{self.name} signing failed: {e}",
                "CRYPTO_ERROR",
                {"signature_method": self.name, "original_error": str(e)}
            ) from e
        return base64.b64encode(signature).decode('ascii')


class PlaintextSignatureMethod(SignatureMethodSigner):
    """The signing key itself is the signature; only safe over TLS."""

    name = SignatureMethod.PLAINTEXT.value

    def sign(self, base_string: str, consumer_secret: str, token_secret: Optional[str]) -> str:
        return build_signing_key(consumer_secret, token_secret)


@lru_cache(maxsize=16)
def load_rsa_private_key(pem: bytes) -> rsa.RSAPrivateKey:
    """
    Load an unencrypted PEM RSA private key.

    Raises:
        SigningError: If the PEM data is not an RSA private key
    """
    try:
        key = serialization.load_pem_private_key(pem, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise SigningError(
            f"Invalid RSA private key: {e}",
            "INVALID_PRIVATE_KEY",
            {"original_error": str(e)}
        ) from e

    if not isinstance(key, rsa.RSAPrivateKey):
        raise SigningError(
            f"Private key must be an RSA key, got {type(key).__name__}",
            "INVALID_PRIVATE_KEY"
        )
    return key


def _rsa_method(name: str, algorithm: hashes.HashAlgorithm,
                private_key: Optional[Union[bytes, str]]) -> RSASignatureMethod:
    if not private_key:
        raise SigningError(
            f"{name} requires an RSA private key",
            "MISSING_PRIVATE_KEY",
            {"signature_method": name}
        )
    if isinstance(private_key, str):
        private_key = private_key.encode('utf-8')
    return RSASignatureMethod(name, algorithm, load_rsa_private_key(private_key))


def get_signature_method(config: Config) -> SignatureMethodSigner:
    """
    Resolve the signature method configured for a consumer.

    Args:
        config: Consumer configuration

    Returns:
        SignatureMethodSigner: Implementation for config.signature_method

    Raises:
        UnsupportedSignatureMethodError: If the method name is unknown
        SigningError: If an RSA method has no usable private key
    """
    method = config.signature_method

    if method == SignatureMethod.HMAC_SHA1:
        return HMACSignatureMethod(SignatureMethod.HMAC_SHA1.value, hashes.SHA1())
    if method == SignatureMethod.HMAC_SHA256:
        return HMACSignatureMethod(SignatureMethod.HMAC_SHA256.value, hashes.SHA256())
    if method == SignatureMethod.RSA_SHA1:
        return _rsa_method(SignatureMethod.RSA_SHA1.value, hashes.SHA1(), config.rsa_private_key)
    if method == SignatureMethod.RSA_SHA256:
        return _rsa_method(SignatureMethod.RSA_SHA256.value, hashes.SHA256(), config.rsa_private_key)
    if method == SignatureMethod.PLAINTEXT:
        return PlaintextSignatureMethod()

    raise UnsupportedSignatureMethodError(
        f"Unsupported signature method: {config.signature_method_name}",
        details={"signature_method": config.signature_method_name}
    )
