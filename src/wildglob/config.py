"""Configuration loading and validation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from wildglob.errors import ConfigError, ConfigNotFoundError
from wildglob.matcher import WILDCARD, GlobMatcher

__all__ = ["Config"]

logger = logging.getLogger(__name__)


class Config(BaseModel):
    """Dictionary filter settings.

    Keys may be given by field name or by their camelCase spelling
    (``posFilter``, ``useAffixes``) so existing JSON config files load as-is.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    language: str = "eng"
    pos_filter: str = Field(default="all", alias="posFilter")
    use_affixes: bool = Field(default=False, alias="useAffixes")
    wildcard: str = WILDCARD

    @field_validator("wildcard")
    @classmethod
    def _wildcard_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("wildcard must be a non-empty string")
        return v

    @classmethod
    def load(cls, path: str | Path) -> Config:
        """Load configuration from a YAML (or JSON) file.

        An empty file yields the default settings.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not valid YAML, is not a mapping,
                or fails validation.
        """
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigNotFoundError(config_path=str(config_path))

        content = config_path.read_text(encoding="utf-8")
        try:
            parsed = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in config file: {config_path}", cause=e) from e

        if parsed is None:
            parsed = {}
        if not isinstance(parsed, dict):
            raise ConfigError(
                message=f"Config file must be a mapping, got {type(parsed).__name__}: {config_path}"
            )

        try:
            config = cls.model_validate(parsed)
        except ValidationError as e:
            raise ConfigError(
                message=f"Invalid config in {config_path}: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False, include_context=False)},
                cause=e,
            ) from e

        logger.debug("Loaded config from %s: %r", config_path, config)
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key.

        Keys may be field names or their camelCase aliases.
        """
        current: Any = {**self.model_dump(), **self.model_dump(by_alias=True)}
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def matcher(self) -> GlobMatcher:
        return GlobMatcher(wildcard=self.wildcard)

    def __str__(self) -> str:
        use_affixes = "true" if self.use_affixes else "false"
        return (
            f"Language: {self.language}\n"
            f"PosFilter: {self.pos_filter}\n"
            f"UseAffixes: {use_affixes}\n"
            f"Wildcard: {self.wildcard}\n"
        )
