"""
Token sources supplying the credentials a transport signs with.

Obtaining tokens (the three-legged handshake) and storing them happen
elsewhere; a token source only hands the current token to the transport.
"""

from typing import Optional, Protocol, runtime_checkable

from .exceptions import EmptyTokenError, TokenUnavailableError
from .signing.types import Token


@runtime_checkable
class TokenSource(Protocol):
    """
    Protocol for token source implementations.

    ``token()`` returns the current token or raises ``TokenUnavailableError``
    when there is none, and ``EmptyTokenError`` when the token it has carries
    no identifier. Implementations that refresh tokens may block or lock
    internally.
    """

    def token(self) -> Token:
        ...


class StaticTokenSource:
    """
    Token source that always returns the same token.

    Args:
        token: Token to hand out, or None when the caller never authenticated
    """

    def __init__(self, token: Optional[Token]):
        self._token = token

    def token(self) -> Token:
        if self._token is None:
            raise TokenUnavailableError("Token is not available")
        if self._token.is_empty:
            raise EmptyTokenError("Token identifier is empty")
        return self._token

    def __repr__(self) -> str:
        return f"StaticTokenSource({self._token!r})"
