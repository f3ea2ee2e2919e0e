"""
OAuth 1.0a request signer

This module provides the signer that computes the OAuth parameter set for a
request, signs its base string and writes the resulting Authorization header.
"""

import logging
from typing import Any, Dict

from ..exceptions import EmptyTokenError, OAuth1SDKError, SigningError
from .base_string import build_signature_base_string
from .methods import get_signature_method
from .types import (
    AUTHORIZATION_HEADER,
    OAUTH_CONSUMER_KEY_PARAM,
    OAUTH_NONCE_PARAM,
    OAUTH_SIGNATURE_METHOD_PARAM,
    OAUTH_SIGNATURE_PARAM,
    OAUTH_TIMESTAMP_PARAM,
    OAUTH_TOKEN_PARAM,
    OAUTH_VERSION,
    OAUTH_VERSION_PARAM,
    REALM_PARAM,
    Config,
    SignableRequest,
    SignatureResult,
    Token,
)
from .utils import PerformanceTimer, base_uri, format_authorization_header

logger = logging.getLogger(__name__)


class OAuth1Signer:
    """
    OAuth 1.0a signer

    The signer only reads its configuration, so one instance can sign
    requests from many threads at once.
    """

    def __init__(self, config: Config):
        """
        Initialize the signer with configuration.

        Args:
            config: Consumer configuration
        """
        self.config = config

    def sign(self, request: SignableRequest, token: Token) -> SignatureResult:
        """
        Sign a request description.

        Args:
            request: Request to sign
            token: Token to sign with

        Returns:
            SignatureResult: OAuth parameters, base string and header value

        Raises:
            EmptyTokenError: If the token has no identifier
            UnsupportedSignatureMethodError: If the configured method is unknown
            SigningError: If the signature cannot be computed
        """
        if token is None or token.is_empty:
            raise EmptyTokenError("Token identifier is empty")

        timer = PerformanceTimer()

        try:
            oauth_params = self._oauth_params(token)
            method = get_signature_method(self.config)
            base_string = build_signature_base_string(request, oauth_params)
            signature = method.sign(base_string, self.config.consumer_secret, token.secret)
        except OAuth1SDKError:
            raise
        except ValueError as e:
            raise SigningError(
                f"Request signing failed: {e}",
                details={"url": request.url, "original_error": str(e)}
            ) from e

        oauth_params[OAUTH_SIGNATURE_PARAM] = signature

        header_params = dict(oauth_params)
        if self.config.realm:
            header_params[REALM_PARAM] = self.config.realm

        logger.debug(f"Signed {request.method.upper()} request to {base_uri(request.url)} in {timer.elapsed_ms():.2f}ms")

        return SignatureResult(
            oauth_params=oauth_params,
            base_string=base_string,
            signature=signature,
            authorization_header=format_authorization_header(header_params),
        )

    def authorization_header(self, request: SignableRequest, token: Token) -> str:
        """Return the Authorization header value for a request description."""
        return self.sign(request, token).authorization_header

    def set_auth_header(self, request: Any, token: Token) -> None:
        """
        Sign an outgoing request in place.

        Only the Authorization header of ``request`` is changed, replacing
        any previous value. Callers pass a private copy of the request.

        Args:
            request: ``requests.PreparedRequest`` or ``httpx.Request``
            token: Token to sign with
        """
        header = self.authorization_header(to_signable_request(request), token)
        request.headers[AUTHORIZATION_HEADER] = header

    def _oauth_params(self, token: Token) -> Dict[str, str]:
        return {
            OAUTH_CONSUMER_KEY_PARAM: self.config.consumer_key,
            OAUTH_TOKEN_PARAM: token.identifier,
            OAUTH_SIGNATURE_METHOD_PARAM: self.config.signature_method_name,
            OAUTH_TIMESTAMP_PARAM: self.config.clock.now(),
            OAUTH_NONCE_PARAM: self.config.nonce_generator.nonce(),
            OAUTH_VERSION_PARAM: OAUTH_VERSION,
        }


def to_signable_request(request: Any) -> SignableRequest:
    """
    Describe a ``requests`` or ``httpx`` request for signing.

    The body is only read when it is form-encoded, since no other body
    takes part in the signature.

    Args:
        request: ``requests.PreparedRequest`` or ``httpx.Request``

    Returns:
        SignableRequest: Method, URL, headers and form body
    """
    signable = SignableRequest(
        method=str(request.method),
        url=str(request.url),
        headers=dict(request.headers),
    )

    if signable.is_form_encoded:
        if hasattr(request, 'body'):
            body = request.body
        else:
            body = request.read()
        if isinstance(body, (str, bytes)):
            signable.body = body

    return signable


def create_signer(config: Config) -> OAuth1Signer:
    """
    Create a new OAuth 1.0a signer.

    Args:
        config: Consumer configuration

    Returns:
        OAuth1Signer: Configured signer instance
    """
    return OAuth1Signer(config)
