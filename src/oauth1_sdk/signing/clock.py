"""
Time and nonce sources for request signing

Signing depends on the current time and on a fresh nonce for every request.
Both are injected through ``Config`` so tests can pin them to fixed values.
"""

import base64
import secrets
import time
from typing import Protocol, runtime_checkable


# Number of random bytes behind each default nonce
DEFAULT_NONCE_BYTES = 32


@runtime_checkable
class Clock(Protocol):
    """Protocol for sources of the oauth_timestamp value"""

    def now(self) -> str:
        """Return seconds since the Unix epoch as a decimal string."""
        ...


@runtime_checkable
class NonceGenerator(Protocol):
    """Protocol for sources of the oauth_nonce value"""

    def nonce(self) -> str:
        """Return a fresh, unpredictable nonce."""
        ...


class SystemClock:
    """Wall-clock time source."""

    def now(self) -> str:
        return str(int(time.time()))


class FixedClock:
    """
    Clock that always reports the same instant.

    Args:
        timestamp: Unix timestamp in seconds (int or numeric string)
    """

    def __init__(self, timestamp):
        self._timestamp = str(int(timestamp))

    def now(self) -> str:
        return self._timestamp

    def __repr__(self) -> str:
        return f"FixedClock({self._timestamp})"


class RandomNonceGenerator:
    """
    Nonce generator backed by the operating system CSPRNG.

    ``secrets.token_bytes`` reads from ``os.urandom`` which is safe to call
    from several threads at once, so instances can be shared freely.

    Args:
        num_bytes: Amount of randomness per nonce
    """

    def __init__(self, num_bytes: int = DEFAULT_NONCE_BYTES):
        if num_bytes <= 0:
            raise ValueError("Nonce length must be positive")
        self.num_bytes = num_bytes

    def nonce(self) -> str:
        return base64.b64encode(secrets.token_bytes(self.num_bytes)).decode('ascii')


class FixedNonceGenerator:
    """Nonce generator that always returns the same value."""

    def __init__(self, value: str):
        self._value = value

    def nonce(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"FixedNonceGenerator({self._value!r})"
