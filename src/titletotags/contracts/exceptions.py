"""Custom exception hierarchy for titletotags.

All titletotags exceptions inherit from :class:`TitleToTagsError`, making it easy
to catch any library error with a single ``except`` clause while still allowing
callers to handle specific failure modes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from titletotags.contracts.harness import VerificationResult


class TitleToTagsError(Exception):
    """Base exception for all titletotags errors."""


class ConfigError(TitleToTagsError):
    """Raised when the config file cannot be read or fails validation."""


class AuthenticationError(TitleToTagsError):
    """Raised when a personal access token cannot be resolved or is rejected."""


class ProviderError(TitleToTagsError):
    """Raised when a work-tracking API call fails unexpectedly.

    Attributes:
        status_code: HTTP status of the failed response, when there was one.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class HarnessError(TitleToTagsError):
    """Raised when the test-data harness cannot seed, verify, or tear down."""


class VerificationError(HarnessError):
    """Raised when seeded work items do not match their expected patterns.

    Attributes:
        result: The full verification result, including passing checks.
    """

    def __init__(self, result: VerificationResult) -> None:
        self.result = result
        failed = [check for check in result.checks if not check.passed]
        joined = "\n".join(f"  - {check.pattern}: {check.describe()}" for check in failed)
        super().__init__(f"{len(failed)} of {len(result.checks)} pattern(s) failed:\n{joined}")
