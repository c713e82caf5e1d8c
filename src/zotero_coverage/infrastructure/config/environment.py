"""Environment variable loading from .env files with precedence support.

Recognised variables (all optional):
    ZOTERO_COVERAGE_CONFIG: configuration file path (defaults to zotero-coverage.toml)
    ZOTERO_COVERAGE_BIBLIOGRAPHY: default bibliography when the document header names none
    ZOTERO_COVERAGE_ENCODING: text encoding of documents and bibliographies
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "zotero-coverage.toml"


def load_environment_variables(dotenv_path: Path | str | None = None) -> None:
    """
    Load environment variables from .env file with automatic detection.

    Environment variables from the system environment take precedence over
    .env file values (load_dotenv is called with override=False).

    Args:
        dotenv_path: Optional path to .env file. If None, searches for .env file in:
                     - Current working directory
                     - Parent directories (up to 3 levels)
    """
    if dotenv_path is None:
        current = Path.cwd()
        search_paths = [
            current / ".env",
            current.parent / ".env",
            current.parent.parent / ".env",
            current.parent.parent.parent / ".env",
        ]

        for path in search_paths:
            if path.exists():
                dotenv_path = path
                logger.debug(f"Loading .env file from: {path}")
                break

        if dotenv_path is None:
            load_dotenv(override=False)
            return

    dotenv_path = Path(dotenv_path)
    if dotenv_path.exists():
        load_dotenv(dotenv_path, override=False)
        logger.debug(f"Loaded .env file from: {dotenv_path}")
    else:
        logger.debug(f".env file not found at: {dotenv_path}")


def get_env(key: str, default: str | None = None) -> str | None:
    """
    Get environment variable value.

    Args:
        key: Environment variable name
        default: Default value if not found

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_config_path(explicit: str | None = None) -> Path:
    """Configuration file path: explicit argument > ZOTERO_COVERAGE_CONFIG > default."""
    if explicit:
        return Path(explicit)
    return Path(get_env("ZOTERO_COVERAGE_CONFIG") or DEFAULT_CONFIG_FILE)
