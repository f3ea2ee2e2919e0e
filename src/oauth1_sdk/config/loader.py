"""
Consumer configuration loading for Python SDK

Builds ``Config`` objects from dictionaries, JSON documents, JSON files or
environment variables.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..exceptions import ConfigurationError
from ..signing.types import Config, DEFAULT_SIGNATURE_METHOD


DEFAULT_ENV_PREFIX = "OAUTH1_"

_KNOWN_KEYS = {
    'consumer_key',
    'consumer_secret',
    'signature_method',
    'realm',
    'rsa_private_key',
    'rsa_private_key_file',
}


def load_config_from_dict(data: Mapping[str, Any]) -> Config:
    """
    Build a consumer configuration from a mapping.

    Recognized keys: ``consumer_key`` (required), ``consumer_secret``,
    ``signature_method``, ``realm``, ``rsa_private_key`` and
    ``rsa_private_key_file``.

    Raises:
        ConfigurationError: If a value is missing or malformed
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError("Configuration must be a mapping", "INVALID_FORMAT")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            "INVALID_FORMAT",
            {"keys": unknown}
        )

    consumer_key = data.get('consumer_key')
    if not consumer_key:
        raise ConfigurationError("Consumer key is required", "MISSING_VALUE", {"field": "consumer_key"})

    rsa_private_key = data.get('rsa_private_key')
    key_file = data.get('rsa_private_key_file')
    if key_file and not rsa_private_key:
        rsa_private_key = _read_key_file(key_file)

    return Config(
        consumer_key=consumer_key,
        consumer_secret=data.get('consumer_secret') or "",
        signature_method=data.get('signature_method') or DEFAULT_SIGNATURE_METHOD,
        realm=data.get('realm') or None,
        rsa_private_key=rsa_private_key or None,
    )


def load_config_from_json(json_string: str) -> Config:
    """Build a consumer configuration from a JSON document."""
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Failed to parse configuration JSON: {e}", "PARSE_ERROR")
    return load_config_from_dict(data)


def load_config_from_file(file_path: Union[str, Path]) -> Config:
    """Build a consumer configuration from a JSON file."""
    try:
        with open(Path(file_path), 'r', encoding='utf-8') as f:
            json_string = f.read()
    except OSError as e:
        raise ConfigurationError(f"Failed to read configuration file: {e}", "FILE_ERROR")
    return load_config_from_json(json_string)


def load_config_from_env(
    prefix: str = DEFAULT_ENV_PREFIX,
    environ: Optional[Mapping[str, str]] = None
) -> Config:
    """
    Build a consumer configuration from environment variables.

    Reads ``<prefix>CONSUMER_KEY``, ``<prefix>CONSUMER_SECRET``,
    ``<prefix>SIGNATURE_METHOD``, ``<prefix>REALM`` and
    ``<prefix>RSA_PRIVATE_KEY_FILE``.

    Args:
        prefix: Variable name prefix
        environ: Mapping to read instead of ``os.environ``
    """
    env = os.environ if environ is None else environ
    data: Dict[str, Any] = {}
    for key in ('consumer_key', 'consumer_secret', 'signature_method', 'realm', 'rsa_private_key_file'):
        value = env.get(prefix + key.upper())
        if value:
            data[key] = value
    return load_config_from_dict(data)


def _read_key_file(path: Union[str, Path]) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read RSA private key file: {e}",
            "FILE_ERROR",
            {"path": str(path)}
        )
