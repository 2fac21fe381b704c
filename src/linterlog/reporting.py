"""
linterlog - Reporting and output formatting.

Handles:
- Diagnostic and call-site records
- Forwarding rule violations to a sink
- Human-readable and JSON output
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from typing import Callable, Iterable

from .rules import RuleKind


@dataclass(frozen=True)
class Position:
    path: str
    line: int
    col: int

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.col}"


@dataclass(frozen=True)
class LogCallSite:
    """A log call found while walking a tree."""
    position: Position
    method: str


@dataclass(frozen=True)
class Diagnostic:
    """A single rule violation at a source position."""
    position: Position
    kind: RuleKind

    @property
    def code(self) -> str:
        return self.kind.code

    @property
    def message(self) -> str:
        return self.kind.message

    def __str__(self) -> str:
        return f"{self.position}: {self.code} {self.message}"


Sink = Callable[[Diagnostic], None]


def report(position: Position, kinds: Iterable[RuleKind], sink: Sink) -> None:
    """Forward each violation, in order, to the sink at the given position."""
    for kind in kinds:
        sink(Diagnostic(position=position, kind=kind))


@dataclass
class Finding:
    """A lint finding as printed or serialized."""
    code: str
    path: str
    line: int
    col: int
    message: str

    @classmethod
    def from_diagnostic(cls, diag: Diagnostic) -> "Finding":
        return cls(
            code=diag.code,
            path=diag.position.path,
            line=diag.position.line,
            col=diag.position.col,
            message=diag.message,
        )

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.col}: {self.code} {self.message}"


class Reporter:
    """Collects and formats findings."""

    def __init__(self) -> None:
        self.findings: list[Finding] = []
        self.files_scanned = 0

    def add(self, finding: Finding) -> None:
        self.findings.append(finding)

    def extend(self, findings: Iterable[Finding]) -> None:
        self.findings.extend(findings)

    def sink(self, diag: Diagnostic) -> None:
        """Diagnostic sink usable as a Pass report callback."""
        self.add(Finding.from_diagnostic(diag))

    def render_human(self) -> str:
        """Render findings as human-readable text."""
        if not self.findings:
            return f"linterlog: OK, {self.files_scanned} files, no findings"

        lines = [str(f) for f in self.findings]
        lines.append("")
        lines.append(f"linterlog: {len(self.findings)} findings in {self.files_scanned} files")
        return "\n".join(lines)

    def render_json(self) -> str:
        """Render findings as JSON."""
        return json.dumps(
            [asdict(f) for f in self.findings],
            indent=2,
            ensure_ascii=False,
        )
