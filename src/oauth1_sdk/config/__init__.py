"""
Configuration loading for OAuth1 Python SDK
"""

from .loader import (
    DEFAULT_ENV_PREFIX,
    load_config_from_dict,
    load_config_from_json,
    load_config_from_file,
    load_config_from_env,
)

__all__ = [
    'DEFAULT_ENV_PREFIX',
    'load_config_from_dict',
    'load_config_from_json',
    'load_config_from_file',
    'load_config_from_env',
]
