"""
Configuration management for signedrequest

Loads signer and transport settings from JSON documents, JSON files and
environment variables.
"""

from .settings import (
    ClientSettings,
    DEFAULT_ENV_PREFIX,
    load_config_from_dict,
    load_config_from_json,
    load_config_from_file,
    load_config_from_env,
)

__all__ = [
    'ClientSettings',
    'DEFAULT_ENV_PREFIX',
    'load_config_from_dict',
    'load_config_from_json',
    'load_config_from_file',
    'load_config_from_env',
]
