"""API key lookup across the supported credential sources."""

import os
from pathlib import Path
from typing import Optional, Mapping

from ..utils.exceptions import ConfigurationError
from ..utils.logger import get_logger

logger = get_logger(__name__)

API_KEY_ENV_VAR = "INSTAGRAM_API_KEY"


class CredentialResolver:
    """
    Resolve the RapidAPI key used to authenticate every request.

    Sources, in priority order:
    - explicit override (the ``--key`` option)
    - the ``INSTAGRAM_API_KEY`` environment variable
    - the key file (``~/.config/instagram/api_key`` by default)

    Blank values fall through to the next source.
    """

    def __init__(self, key_file: Path, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize credential resolver.

        Args:
            key_file: Path of the API key file
            environ: Environment mapping (defaults to os.environ)
        """
        self.key_file = Path(key_file)
        self.environ = os.environ if environ is None else environ

    def resolve(self, override: Optional[str] = None) -> str:
        """
        Resolve the API key.

        Args:
            override: Key passed explicitly on the command line

        Returns:
            The API key

        Raises:
            ConfigurationError: If no source yields a non-empty key
        """
        if override and override.strip():
            logger.debug("Using API key from command line")
            return override.strip()

        env_value = self.environ.get(API_KEY_ENV_VAR, "")
        if env_value.strip():
            logger.debug(f"Using API key from {API_KEY_ENV_VAR}")
            return env_value.strip()

        file_value = self._read_key_file()
        if file_value:
            logger.debug(f"Using API key from {self.key_file}")
            return file_value

        logger.error("No Instagram API key found")
        raise ConfigurationError(
            "No Instagram API key found.\n"
            "Either:\n"
            "  1. Pass it with --key\n"
            f"  2. Set {API_KEY_ENV_VAR} environment variable\n"
            f"  3. Save it to {self.key_file}"
        )

    def _read_key_file(self) -> Optional[str]:
        """Read and strip the key file, or None if it is missing or empty."""
        if not self.key_file.is_file():
            return None

        try:
            value = self.key_file.read_text(encoding="utf-8").strip()
        except OSError as e:
            raise ConfigurationError(f"Failed to read API key file {self.key_file}: {e}") from e

        return value or None


def resolve_credentials(
    override: Optional[str] = None,
    key_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Resolve the API key using the configured key file.

    Args:
        override: Key passed explicitly on the command line
        key_file: Key file path. If None, uses the configured api_key_file
        environ: Environment mapping (defaults to os.environ)

    Returns:
        The API key
    """
    if key_file is None:
        from .config import get_config
        key_file = get_config().api_key_file

    return CredentialResolver(key_file, environ).resolve(override)
