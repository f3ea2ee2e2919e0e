"""
HTTP clients that sign every request with OAuth 1.0a
"""

import logging
from typing import Any, Optional

import httpx
import requests

from .signing.signer import OAuth1Signer
from .signing.types import Config, Token
from .tokens import StaticTokenSource
from .transport import OAuth1HTTPXTransport, OAuth1Transport

logger = logging.getLogger(__name__)


def create_session(
    config: Config,
    token: Optional[Token],
    base: Optional[Any] = None,
) -> requests.Session:
    """
    Create a ``requests.Session`` that signs requests with ``token``.

    Args:
        config: Consumer configuration
        token: Access token to sign with
        base: Optional base adapter for the signing transport

    Returns:
        requests.Session: Session with the signing transport mounted for
            ``http://`` and ``https://``
    """
    transport = OAuth1Transport(
        source=StaticTokenSource(token),
        signer=OAuth1Signer(config),
        base=base,
    )

    session = requests.Session()
    session.mount('https://', transport)
    session.mount('http://', transport)

    logger.debug("Created OAuth1 session")
    return session


def create_httpx_client(
    config: Config,
    token: Optional[Token],
    base: Optional[httpx.BaseTransport] = None,
    **client_kwargs
) -> httpx.Client:
    """
    Create an ``httpx.Client`` that signs requests with ``token``.

    Args:
        config: Consumer configuration
        token: Access token to sign with
        base: Optional base transport for the signing transport
        **client_kwargs: Additional arguments for httpx.Client

    Returns:
        httpx.Client: Client using the signing transport
    """
    transport = OAuth1HTTPXTransport(
        source=StaticTokenSource(token),
        signer=OAuth1Signer(config),
        base=base,
    )

    logger.debug("Created OAuth1 httpx client")
    return httpx.Client(transport=transport, **client_kwargs)
