"""
Exception classes for OAuth1 Python SDK
"""

from typing import Optional, Dict, Any


class OAuth1SDKError(Exception):
    """Base exception for all OAuth1 SDK errors"""

    default_error_code = "UNKNOWN_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}


class ConfigurationError(OAuth1SDKError):
    """Exception raised for invalid or incomplete configuration"""
    default_error_code = "INVALID_CONFIG"


class MissingTokenSourceError(ConfigurationError):
    """Exception raised when a transport has no token source"""
    default_error_code = "MISSING_TOKEN_SOURCE"


class MissingSignerError(ConfigurationError):
    """Exception raised when a transport has no signer"""
    default_error_code = "MISSING_SIGNER"


class TokenError(OAuth1SDKError):
    """Exception raised when a token source cannot supply a usable token"""
    default_error_code = "TOKEN_ERROR"


class TokenUnavailableError(TokenError):
    """Exception raised when no token can be produced"""
    default_error_code = "TOKEN_UNAVAILABLE"


class EmptyTokenError(TokenError):
    """Exception raised when a token has an empty identifier"""
    default_error_code = "EMPTY_TOKEN"


class SigningError(OAuth1SDKError):
    """Exception raised when a request cannot be signed"""
    default_error_code = "SIGNING_FAILED"


class UnsupportedSignatureMethodError(SigningError):
    """Exception raised for signature methods the signer does not implement"""
    default_error_code = "UNSUPPORTED_SIGNATURE_METHOD"
