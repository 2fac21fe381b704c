"""
Pytest configuration and shared fixtures.
"""

import ast
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def fixtures_dir():
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def parse_call():
    """Parse a single call expression such as `log.Print("x")`."""
    def _parse(expr: str) -> ast.Call:
        node = ast.parse(expr, mode="eval").body
        assert isinstance(node, ast.Call)
        return node
    return _parse
