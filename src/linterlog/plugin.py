"""
flake8 integration.

Registered under the `flake8.extension` entry point group with code prefix
LOG, so `flake8 --select LOG` runs the same analyzer as the CLI. Rule toggles
come from config/config.yml in the working directory when present.
"""

from __future__ import annotations

import ast
from functools import lru_cache
from typing import Iterator, Optional, Sequence, Tuple, Type

from . import __version__
from .analyzer import ANALYZER, check_tree
from .config import RuleConfig, resolve_config


@lru_cache(maxsize=1)
def _rules() -> RuleConfig:
    return resolve_config()


class LinterLogChecker:
    name = ANALYZER.name
    version = __version__

    def __init__(
        self,
        tree: ast.AST,
        filename: str = "<unknown>",
        lines: Optional[Sequence[str]] = None,
    ) -> None:
        self.tree = tree
        self.filename = filename
        self.lines = lines

    def run(self) -> Iterator[Tuple[int, int, str, Type["LinterLogChecker"]]]:
        for diag in check_tree(self.tree, self.filename, _rules(), self.lines):
            pos = diag.position
            # flake8 columns are 0-based
            yield pos.line, pos.col - 1, f"{diag.code} {diag.message}", type(self)
