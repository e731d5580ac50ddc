"""Fixed cleanup rules applied to bundler output."""

from __future__ import annotations

import re
from dataclasses import dataclass

TARGET_EXTENSION = ".js"


@dataclass(frozen=True)
class ReplacementRule:
    """One regex whose every match is replaced by `replacement`."""

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""


# Order matters: the empty export is removed before the interop flag.
# Python's Unicode \s differs from JavaScript's: it lacks \ufeff and adds \x1c-\x1f and \x85.
CLEANUP_RULES: tuple[ReplacementRule, ...] = (
    ReplacementRule(
        name="export-empty",
        pattern=re.compile(r"export\s*\{\s*\}\s*;?\s*"),
    ),
    ReplacementRule(
        name="esmodule-flag",
        pattern=re.compile(
            r"Object\.defineProperty\s*\(\s*exports\s*,\s*[\"']__esModule[\"']\s*,"
            r"\s*\{\s*value\s*:\s*(!0|true)\s*\}\s*\)\s*;?\s*"
        ),
    ),
)


def sanitize_text(
    text: str,
    rules: tuple[ReplacementRule, ...] = CLEANUP_RULES,
) -> tuple[str, int]:
    """Apply rules in order, returning the new text and total match count."""

    match_count = 0
    for rule in rules:
        text, count = rule.pattern.subn(rule.replacement, text)
        match_count += count
    return text, match_count
