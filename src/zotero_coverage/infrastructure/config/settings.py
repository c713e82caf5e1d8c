"""Pydantic settings for zotero-coverage.toml configuration."""

import codecs
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from .environment import DEFAULT_CONFIG_FILE, get_env, load_environment_variables

_section_adapter = TypeAdapter(dict[str, Any])


class CheckSettings(BaseModel):
    """Coverage check configuration settings."""

    bibliography: str | None = None  # Fallback when neither CLI nor header names one
    metadata_key: str = "bibliography"
    encoding: str = "utf-8"
    tab_replacement: str = "  "  # YAML forbids tab indentation

    def __init__(self, **data: Any) -> None:
        """Initialize with environment variable precedence."""
        load_environment_variables()

        # Environment variables take precedence over TOML values
        env_bibliography = get_env("ZOTERO_COVERAGE_BIBLIOGRAPHY")
        if env_bibliography:
            data["bibliography"] = env_bibliography

        env_encoding = get_env("ZOTERO_COVERAGE_ENCODING")
        if env_encoding:
            data["encoding"] = env_encoding

        super().__init__(**data)

    @field_validator("metadata_key")
    @classmethod
    def validate_metadata_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("metadata_key must be non-empty")
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding '{v}'") from e
        return v


class Settings(BaseModel):
    """Main settings loaded from zotero-coverage.toml."""

    check: CheckSettings = Field(default_factory=CheckSettings)

    @classmethod
    def from_toml(cls, toml_path: Path | str = DEFAULT_CONFIG_FILE) -> "Settings":
        """
        Load settings from zotero-coverage.toml with environment variable precedence.

        Environment variables (system env > .env file) override TOML values.

        Args:
            toml_path: Path to zotero-coverage.toml file

        Returns:
            Settings instance (defaults if the file doesn't exist)

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML
            pydantic.ValidationError: If [check] is not a table or a value is invalid
        """
        load_environment_variables()

        toml_path = Path(toml_path)

        if not toml_path.exists():
            return cls()

        with toml_path.open("rb") as f:
            data = tomllib.load(f)

        check_data = _section_adapter.validate_python(data.get("check", {}))
        return cls(check=CheckSettings(**check_data))
