"""
Transports that sign outgoing requests with OAuth 1.0a

``OAuth1Transport`` is a ``requests`` adapter and ``OAuth1HTTPXTransport`` an
``httpx`` transport. Both wrap a base sender: for every request they fetch a
token, sign a private copy of the request and hand the copy to the base
sender, returning its response untouched.
"""

import logging
from typing import Any, Optional

import httpx
from requests.adapters import BaseAdapter, HTTPAdapter
from requests.models import PreparedRequest, Response
from requests.structures import CaseInsensitiveDict

from .exceptions import MissingSignerError, MissingTokenSourceError
from .signing.signer import OAuth1Signer
from .signing.types import CONTENT_TYPE_HEADER, FORM_CONTENT_TYPE
from .tokens import TokenSource

logger = logging.getLogger(__name__)


def check_transport_config(source: Optional[TokenSource], signer: Optional[OAuth1Signer]) -> None:
    """
    Validate a transport's collaborators.

    The token source is asked for a token once, so a source that cannot
    produce one fails here before any request is sent.

    Raises:
        MissingTokenSourceError: If there is no token source
        MissingSignerError: If there is no signer
        TokenError: If the token source fails
    """
    if source is None:
        raise MissingTokenSourceError("Transport's token source is not set")
    if signer is None:
        raise MissingSignerError("Transport's signer is not set")
    source.token()


def clone_request(request: PreparedRequest) -> PreparedRequest:
    """
    Copy a prepared request.

    Fields are copied shallowly; the header mapping is a new mapping, so
    setting headers on the copy never shows up on the original.
    """
    clone = request.copy()
    clone.headers = CaseInsensitiveDict(request.headers or {})
    return clone


def clone_httpx_request(request: httpx.Request) -> httpx.Request:
    """
    Copy an ``httpx.Request`` with an independent header mapping.

    Form-encoded bodies are buffered on the original first. Signing reads
    the body of the copy, and a shared one-shot stream would otherwise be
    left drained for the caller.
    """
    content_type = request.headers.get(CONTENT_TYPE_HEADER, "")
    if content_type.split(";", 1)[0].strip().lower() == FORM_CONTENT_TYPE:
        request.read()

    return httpx.Request(
        request.method,
        request.url,
        headers=request.headers.copy(),
        stream=request.stream,
        extensions=dict(request.extensions),
    )


class OAuth1Transport(BaseAdapter):
    """
    ``requests`` adapter which makes OAuth 1.0a signed requests.

    Mount it on a ``requests.Session`` for the URL prefixes that need
    signing. Safe to share between threads as long as the token source and
    the base adapter are.
    """

    def __init__(
        self,
        source: Optional[TokenSource] = None,
        signer: Optional[OAuth1Signer] = None,
        base: Optional[Any] = None
    ):
        """
        Initialize the transport.

        Args:
            source: Supplies the token used to sign each request
            signer: Adds the Authorization header to each request
            base: Sender the signed request is passed to; any object with
                ``send(request, **kwargs)``. A new ``HTTPAdapter`` when omitted.
        """
        super().__init__()
        self.source = source
        self.signer = signer
        self.base = base if base is not None else HTTPAdapter()
        logger.debug(f"OAuth1 transport created over {type(self.base).__name__}")

    def send(self, request: PreparedRequest, stream=False, timeout=None, verify=True,
             cert=None, proxies=None) -> Response:
        """
        Sign a copy of ``request`` and send it through the base sender.

        The caller's request is never modified. Errors from the token source,
        the signer and the base sender propagate unchanged.
        """
        check_transport_config(self.source, self.signer)
        token = self.source.token()

        signed = clone_request(request)
        self.signer.set_auth_header(signed, token)

        return self.base.send(
            signed,
            stream=stream,
            timeout=timeout,
            verify=verify,
            cert=cert,
            proxies=proxies,
        )

    def close(self) -> None:
        """Close the base sender."""
        self.base.close()


class OAuth1HTTPXTransport(httpx.BaseTransport):
    """``httpx`` transport which makes OAuth 1.0a signed requests."""

    def __init__(
        self,
        source: Optional[TokenSource] = None,
        signer: Optional[OAuth1Signer] = None,
        base: Optional[httpx.BaseTransport] = None
    ):
        self.source = source
        self.signer = signer
        self.base = base if base is not None else httpx.HTTPTransport()
        logger.debug(f"OAuth1 httpx transport created over {type(self.base).__name__}")

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        check_transport_config(self.source, self.signer)
        token = self.source.token()

        signed = clone_httpx_request(request)
        self.signer.set_auth_header(signed, token)

        return self.base.handle_request(signed)

    def close(self) -> None:
        self.base.close()


def create_transport(
    source: TokenSource,
    signer: OAuth1Signer,
    base: Optional[Any] = None
) -> OAuth1Transport:
    """
    Create a ``requests`` transport, validating its configuration first.

    Raises:
        MissingTokenSourceError: If there is no token source
        MissingSignerError: If there is no signer
        TokenError: If the token source cannot produce a token
    """
    check_transport_config(source, signer)
    return OAuth1Transport(source=source, signer=signer, base=base)
