"""
Log call classification.

A call is a log call when its callee is an attribute access whose name is in
a fixed table. The receiver is never inspected, so any object exposing one of
these names matches.
"""

from __future__ import annotations

import ast
from typing import Optional

LOG_METHODS = frozenset({
    "Print", "Println", "Printf",
    "Fatal", "Fatalf", "Fatalln",
    "Panic", "Panicf", "Panicln",
    "Error", "Errorf", "Errorln",
    "Warn", "Warnf", "Warnln",
    "Warning",
    "Info", "Infof", "Infoln",
    "Debug", "Debugf", "Debugln",
    "Log", "Logf",
})

# logging.Logger API
PYTHON_LOG_METHODS = frozenset({
    "debug",
    "info",
    "warning",
    "warn",
    "error",
    "exception",
    "critical",
    "fatal",
    "log",
})

ALL_LOG_METHODS = LOG_METHODS | PYTHON_LOG_METHODS


def method_name(call: ast.Call) -> Optional[str]:
    """Name of the invoked member for `receiver.name(...)`, else None."""
    fn = call.func
    if isinstance(fn, ast.Attribute):
        return fn.attr
    return None


def is_log_call(call: ast.Call) -> bool:
    return method_name(call) in ALL_LOG_METHODS
