from __future__ import annotations

import os
import re


def split_pattern(pattern: str) -> tuple[str, str]:
    """Split `dir/name*pattern` into its directory and filename parts."""

    separators = os.sep + (os.altsep or "")
    # "build/*/" names the same entries as "build/*".
    trimmed = pattern.rstrip(separators) or pattern
    directory, name_pattern = os.path.split(trimmed)
    return directory or ".", name_pattern


def compile_name_pattern(name_pattern: str) -> re.Pattern[str]:
    """Build a filename matcher where each `*` means any run of characters.

    Only `*` is translated. Every other character reaches the regex engine
    as-is, so `.` matches any character and `+`, `?`, `[` keep their regex
    meaning. Existing invocations rely on this, so it is not escaped.
    Use `fullmatch` against the compiled pattern; it carries no anchors.

    Raises `re.error` when the remaining text is not a valid expression.
    """

    return re.compile(name_pattern.replace("*", ".*"))
