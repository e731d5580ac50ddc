from __future__ import annotations

from pathlib import Path

from bundle_sanitizer.integrations.filesystem_adapter import read_text, write_text
from bundle_sanitizer.models.results import SanitizeResult
from bundle_sanitizer.rules import CLEANUP_RULES, ReplacementRule, sanitize_text


async def sanitize_file(
    path: Path,
    rules: tuple[ReplacementRule, ...] = CLEANUP_RULES,
) -> SanitizeResult:
    """Strip rule matches from one file in place.

    The file is only rewritten when at least one rule matched, so untouched
    files keep their mtime. Raises `OSError` or `UnicodeError` on I/O failure.
    """

    original = await read_text(path)
    cleaned, match_count = sanitize_text(original, rules)
    if match_count == 0:
        return SanitizeResult(path=path, modified=False)

    await write_text(path, cleaned)
    return SanitizeResult(
        path=path,
        modified=True,
        match_count=match_count,
        chars_removed=len(original) - len(cleaned),
    )
