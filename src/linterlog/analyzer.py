"""
linterlog - Analyzer entry point.

Walks parsed trees, classifies calls, extracts messages, evaluates rules and
reports violations. The same Analyzer drives the CLI, the watch daemon and
the flake8 plugin.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from .classifier import is_log_call, method_name
from .config import RuleConfig
from .extractor import Literal, extract, message_node
from .reporting import Diagnostic, LogCallSite, Position, Sink, report
from .rules import evaluate

DOC = """linterlog - static checker for log messages

Rules:
    - log messages must start with a lowercase letter
    - log messages must be in English only
    - log messages must not contain special symbols or emojis
    - log messages must not contain sensitive data
"""


@dataclass(frozen=True)
class ParsedFile:
    path: str
    tree: ast.AST
    # Source lines, used to turn byte offsets into character columns
    lines: Optional[Sequence[str]] = None


@dataclass
class Pass:
    """Trees to analyze, the rule toggles, and where to send diagnostics."""
    files: list[ParsedFile]
    rules: RuleConfig
    report: Sink


def _position(path: str, node: ast.AST, lines: Optional[Sequence[str]] = None) -> Position:
    col = node.col_offset
    if lines is not None and 0 < node.lineno <= len(lines):
        # col_offset counts UTF-8 bytes
        prefix = lines[node.lineno - 1].encode("utf-8")[:col]
        col = len(prefix.decode("utf-8", errors="ignore"))
    return Position(path=path, line=node.lineno, col=col + 1)


class _LogCallVisitor(ast.NodeVisitor):
    """Depth-first visitor checking every log call in one tree."""

    def __init__(
        self,
        path: str,
        rules: RuleConfig,
        sink: Sink,
        lines: Optional[Sequence[str]] = None,
    ) -> None:
        self.path = path
        self.lines = lines
        self.rules = rules
        self.sink = sink

    def visit_Call(self, node: ast.Call) -> None:
        if is_log_call(node):
            site = LogCallSite(
                position=_position(self.path, node, self.lines),
                method=method_name(node) or "",
            )
            self._check(site, node)
        self.generic_visit(node)

    def _check(self, site: LogCallSite, call: ast.Call) -> None:
        msg = extract(call)
        if msg is None:
            return

        kinds = evaluate(msg, self.rules)
        if not kinds:
            return

        # Single literals are reported where the literal sits, chains at the call
        position = site.position
        if isinstance(msg, Literal):
            arg = message_node(call)
            if arg is not None:
                position = _position(self.path, arg, self.lines)
        report(position, kinds, self.sink)


def run(pass_: Pass) -> None:
    for parsed in pass_.files:
        _LogCallVisitor(parsed.path, pass_.rules, pass_.report, parsed.lines).visit(parsed.tree)


@dataclass(frozen=True)
class Analyzer:
    """A named analysis unit as registered with lint runners."""
    name: str
    doc: str
    run: Callable[[Pass], None] = field(repr=False)


ANALYZER = Analyzer(name="linterlog", doc=DOC, run=run)


def check_tree(
    tree: ast.AST,
    path: str = "<unknown>",
    rules: Optional[RuleConfig] = None,
    lines: Optional[Sequence[str]] = None,
) -> list[Diagnostic]:
    """
    Run the analyzer over one tree and return its diagnostics.

    Without the source lines, columns are the parser's UTF-8 byte offsets.
    """
    diagnostics: list[Diagnostic] = []
    pass_ = Pass(
        files=[ParsedFile(path=path, tree=tree, lines=lines)],
        rules=rules if rules is not None else RuleConfig(),
        report=diagnostics.append,
    )
    ANALYZER.run(pass_)
    return diagnostics


def check_source(text: str, path: str = "<unknown>", rules: Optional[RuleConfig] = None) -> list[Diagnostic]:
    """Parse source text and check it. Raises SyntaxError on invalid source."""
    tree = ast.parse(text, filename=path)
    return check_tree(tree, path, rules, text.split("\n"))
