"""Public model exports."""

from bundle_sanitizer.models.common import StrictModel
from bundle_sanitizer.models.enums import FileOutcome
from bundle_sanitizer.models.results import RunSummary, SanitizeResult

__all__ = [
    "FileOutcome",
    "RunSummary",
    "SanitizeResult",
    "StrictModel",
]
