"""Storage modules for configuration and credentials."""

from .config import AppConfig, get_config
from .credentials import CredentialResolver, resolve_credentials, API_KEY_ENV_VAR

__all__ = [
    "AppConfig",
    "get_config",
    "CredentialResolver",
    "resolve_credentials",
    "API_KEY_ENV_VAR",
]
