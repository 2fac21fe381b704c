"""
linterlog - Static checker for log message style and safety.

Finds logging calls in Python source and validates the literal message text:
- Messages must start with a lowercase letter
- Messages must be written in English only
- Messages must not contain special symbols or emojis
- Messages must not contain sensitive data

Usage:
    linterlog [paths...]
    linterlog --json
    linterlog --config config/config.yml
    linterlog --watch
    flake8 --select LOG
"""

__version__ = "1.0.0"

from .analyzer import ANALYZER, Analyzer, Pass, check_source, check_tree
from .config import ConfigError, RuleConfig, load_config, resolve_config
from .extractor import Concatenation, Literal, extract
from .rules import RuleKind, evaluate

__all__ = [
    "ANALYZER",
    "Analyzer",
    "Pass",
    "check_source",
    "check_tree",
    "ConfigError",
    "RuleConfig",
    "load_config",
    "resolve_config",
    "Concatenation",
    "Literal",
    "extract",
    "RuleKind",
    "evaluate",
]
