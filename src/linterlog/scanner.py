"""
linterlog - File scanning and source loading.

Handles:
- Directory walking with exclusions
- Source file loading
- Parsing into Python syntax trees
"""

from __future__ import annotations

import ast
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from .config import LintConfig, should_exclude_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceFile:
    """A loaded source file with content."""
    path: Path
    text: str


def load_source(path: Path) -> SourceFile:
    """Load a single source file."""
    text = path.read_text(encoding="utf-8")
    return SourceFile(path=path, text=text)


def iter_files(cfg: LintConfig) -> Iterator[Path]:
    """
    Iterate over Python files named by cfg.paths.

    Files are yielded as given; directories are walked in sorted order.
    """
    seen: set[Path] = set()
    for root in cfg.paths:
        if root.is_file():
            candidates = [root]
        elif root.is_dir():
            candidates = sorted(p for p in root.rglob("*") if p.is_file())
        else:
            logger.warning("path does not exist: %s", root)
            continue

        for path in candidates:
            if path in seen:
                continue
            if path is not root and should_exclude_path(cfg, path.relative_to(root)):
                continue
            if path.suffix not in cfg.python_exts:
                continue
            seen.add(path)
            yield path


def parse_source(src: SourceFile) -> Optional[ast.Module]:
    """Parse a source file, or None if it is not valid Python."""
    try:
        return ast.parse(src.text, filename=str(src.path))
    except SyntaxError as e:
        logger.warning("skipping %s: syntax error at line %s: %s", src.path, e.lineno, e.msg)
        return None
    except ValueError as e:
        # Null bytes in the source
        logger.warning("skipping %s: %s", src.path, e)
        return None
