"""
linterlog - Configuration.

Two layers:
- RuleConfig: the four rule toggles, loaded from a YAML document
- LintConfig: runtime settings derived from the CLI
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

# Looked up relative to the working directory when no --config is given
DEFAULT_CONFIG_PATH = Path("config") / "config.yml"


class ConfigError(Exception):
    """Raised when a rules document cannot be loaded."""


@dataclass(frozen=True)
class RuleConfig:
    """On/off toggles for the four message rules."""
    capital_letter: bool = True
    only_english: bool = True
    special_symbols: bool = True
    sensitive_data: bool = True

    @classmethod
    def disabled(cls) -> "RuleConfig":
        return cls(
            capital_letter=False,
            only_english=False,
            special_symbols=False,
            sensitive_data=False,
        )


class RulesSection(BaseModel):
    """
    The `rules:` block of the config document.

    A key that is absent from a present document loads as false.
    """
    capital_letter: bool = False
    only_english: bool = False
    special_symbols: bool = False
    sensitive_data: bool = False


class ConfigDocument(BaseModel):
    rules: RulesSection = RulesSection()


def load_config(path: Path | str) -> RuleConfig:
    """
    Load rule toggles from a YAML document.

    Args:
        path: Path to the YAML file.

    Returns:
        The resolved RuleConfig.

    Raises:
        ConfigError: If the file is missing, unreadable, not YAML, or has
            values of the wrong type.
    """
    path = Path(path)

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read config from {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a YAML mapping, got {type(data).__name__}")

    try:
        doc = ConfigDocument.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e

    rules = doc.rules
    logger.debug("loaded rule config from %s: %s", path, rules)
    return RuleConfig(
        capital_letter=rules.capital_letter,
        only_english=rules.only_english,
        special_symbols=rules.special_symbols,
        sensitive_data=rules.sensitive_data,
    )


def resolve_config(explicit: Optional[Path | str] = None, cwd: Optional[Path] = None) -> RuleConfig:
    """
    Pick the rule config for a run.

    An explicit path must load. Otherwise config/config.yml under cwd is used
    when present, and all rules are enabled when it is not.
    """
    if explicit is not None:
        return load_config(explicit)

    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_PATH
    if candidate.is_file():
        return load_config(candidate)

    logger.debug("no config document at %s, enabling all rules", candidate)
    return RuleConfig()


@dataclass
class LintConfig:
    """Runtime configuration for a lint run."""

    paths: tuple[Path, ...] = (Path("."),)
    rules: RuleConfig = field(default_factory=RuleConfig)

    python_exts: tuple[str, ...] = (".py",)

    # Directory exclusions
    exclude_dirs: tuple[str, ...] = (
        ".git",
        ".venv",
        "venv",
        "__pycache__",
        ".mypy_cache",
        ".pytest_cache",
        ".tox",
        "node_modules",
        "dist",
        "build",
    )

    # Output settings
    json_output: bool = False

    # Worker threads for linting files; 1 lints serially
    jobs: int = 1


def should_exclude_path(cfg: LintConfig, path: Path) -> bool:
    """Check if path should be excluded from scanning."""
    return any(d in path.parts for d in cfg.exclude_dirs)
