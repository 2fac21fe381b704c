"""
Message extraction from a log call's first argument.

Handles:
- A single string literal -> Literal
- A `+` chain of operands -> Concatenation of its string-literal leaves
- An f-string -> Concatenation of its literal parts

Non-literal operands inside a chain are dropped, not rejected. Every other
argument shape yields None and is not checked.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Literal:
    """A message given as one string literal."""
    text: str


@dataclass(frozen=True)
class Concatenation:
    """A message built from a chain; only the literal pieces are kept."""
    fragments: tuple[str, ...]
    joined: str

    @classmethod
    def of(cls, fragments: list[str] | tuple[str, ...]) -> "Concatenation":
        parts = tuple(fragments)
        return cls(fragments=parts, joined="".join(parts))


MessageExpression = Union[Literal, Concatenation]


def message_node(call: ast.Call) -> Optional[ast.expr]:
    """The argument node carrying the message, if any."""
    if not call.args:
        return None
    return call.args[0]


def _is_str_constant(node: ast.AST) -> bool:
    return isinstance(node, ast.Constant) and isinstance(node.value, str)


def _collect_literals(node: ast.expr, out: list[str]) -> None:
    """Left-to-right fold over an add chain, keeping string-literal leaves."""
    if isinstance(node, ast.BinOp):
        if isinstance(node.op, ast.Add):
            _collect_literals(node.left, out)
            _collect_literals(node.right, out)
    elif isinstance(node, ast.JoinedStr):
        for part in node.values:
            if _is_str_constant(part):
                out.append(part.value)
    elif _is_str_constant(node):
        out.append(node.value)


def extract(call: ast.Call) -> Optional[MessageExpression]:
    """
    Build the checkable message for a log call.

    Returns None when there is no argument or the argument is not a string
    literal, an add chain, or an f-string.
    """
    arg = message_node(call)
    if arg is None:
        return None

    if isinstance(arg, ast.Constant):
        if isinstance(arg.value, str):
            return Literal(arg.value)
        return None

    if isinstance(arg, ast.JoinedStr) and all(_is_str_constant(part) for part in arg.values):
        # no placeholders: the f-string is plain text
        return Literal("".join(part.value for part in arg.values))

    if (isinstance(arg, ast.BinOp) and isinstance(arg.op, ast.Add)) or isinstance(arg, ast.JoinedStr):
        fragments: list[str] = []
        _collect_literals(arg, fragments)
        return Concatenation.of(fragments)

    return None
