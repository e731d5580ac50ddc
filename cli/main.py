"""Run `bundle-sanitize` from a checkout: `python cli/main.py build/`."""

from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

from bundle_sanitizer.cli import app


if __name__ == "__main__":
    app(prog_name="bundle-sanitize")
