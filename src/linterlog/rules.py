"""
linterlog - Rule implementations.

Rules run in a fixed order against the message text:
1. capital letter     (never stops evaluation)
2. special symbols    (a hit skips rules 3 and 4)
3. english only       (a hit skips rule 4)
4. sensitive data     (policy depends on how the message was built)

Evaluation is a pure function of the message and the RuleConfig.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .config import RuleConfig
from .extractor import Concatenation, Literal, MessageExpression


class RuleKind(Enum):
    """A rule violation kind with its report code and message."""
    CAPITAL_LETTER = ("LOG001", "log message should not start with a capital letter")
    SPECIAL_SYMBOLS = ("LOG002", "log message should not contain special symbols or emojis")
    ENGLISH_ONLY = ("LOG003", "log message should contain only english symbols")
    SENSITIVE_DATA = ("LOG004", "log message should not contain sensitive data")

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message


# =============================================================================
# Text predicates
# =============================================================================

SPECIAL_CHARS = frozenset("!:;")
ELLIPSIS = "..."


def starts_with_capital(text: str) -> bool:
    """First code point is an upper-case letter. Empty text never matches."""
    if not text:
        return False
    first = text[0]
    return first.isalpha() and first.isupper()


def has_special_symbols(text: str) -> bool:
    """
    Detect `!`, `:`, `;`, an ellipsis, or a non-ASCII code point that is not
    a letter (emoji, symbols, non-ASCII punctuation).
    """
    if ELLIPSIS in text:
        return True
    for ch in text:
        if ch in SPECIAL_CHARS:
            return True
        if ord(ch) > 127 and not ch.isalpha():
            return True
    return False


def _is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


# str.isspace also accepts the ASCII information separators
INFO_SEPARATORS = "\x1c\x1d\x1e\x1f"


def _is_space(ch: str) -> bool:
    return ch.isspace() and ch not in INFO_SEPARATORS


def is_english_only(text: str) -> bool:
    """Only ASCII letters, decimal digits and whitespace."""
    return all(_is_ascii_letter(ch) or ch.isdecimal() or _is_space(ch) for ch in text)


# =============================================================================
# Sensitive data policies
# =============================================================================

@dataclass(frozen=True)
class SensitivePolicy:
    """A named blocklist matched case-insensitively as substrings."""
    name: str
    words: tuple[str, ...]

    def matches(self, text: str) -> bool:
        lower = text.lower()
        return any(w in lower for w in self.words)


# "token" alone is common in harmless phrases like "token validated"
LITERAL_POLICY = SensitivePolicy(
    name="literal",
    words=("password", "api_key", "apikey", "secret", "credential"),
)

# A literal glued to a runtime value with "token" in it usually leaks the value
CONCAT_POLICY = SensitivePolicy(
    name="concat",
    words=("password", "token", "api_key", "apikey", "secret", "credential"),
)


def has_sensitive_data(msg: MessageExpression) -> bool:
    if isinstance(msg, Concatenation):
        if any(CONCAT_POLICY.matches(part) for part in msg.fragments):
            return True
        return CONCAT_POLICY.matches(msg.joined)
    return LITERAL_POLICY.matches(msg.text)


# =============================================================================
# Evaluation
# =============================================================================

def message_text(msg: MessageExpression) -> str:
    if isinstance(msg, Literal):
        return msg.text
    return msg.joined


def evaluate(msg: MessageExpression, cfg: RuleConfig) -> list[RuleKind]:
    """
    Run the enabled rules over a message.

    Returns the violated rule kinds in evaluation order. A disabled rule is
    skipped as if it passed, so it never stops later rules.
    """
    text = message_text(msg)
    violations: list[RuleKind] = []

    if cfg.capital_letter and starts_with_capital(text):
        violations.append(RuleKind.CAPITAL_LETTER)

    if cfg.special_symbols and has_special_symbols(text):
        violations.append(RuleKind.SPECIAL_SYMBOLS)
        return violations

    if cfg.only_english and not is_english_only(text):
        violations.append(RuleKind.ENGLISH_ONLY)
        return violations

    if cfg.sensitive_data and has_sensitive_data(msg):
        violations.append(RuleKind.SENSITIVE_DATA)

    return violations
