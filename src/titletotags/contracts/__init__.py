"""Public contracts for titletotags."""

from titletotags.contracts.cleanup import CleanupEntry, CleanupResult
from titletotags.contracts.config import AUTH_MODES, TitleToTagsConfig
from titletotags.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    HarnessError,
    ProviderError,
    TitleToTagsError,
    VerificationError,
)
from titletotags.contracts.harness import (
    HarnessItem,
    HarnessMetadata,
    HarnessReport,
    PatternCheck,
    TitlePattern,
    VerificationResult,
)
from titletotags.contracts.item import ParsedTitle, WorkItem, WorkItemUpdate
from titletotags.contracts.progress import NullSyncProgress, SyncProgress
from titletotags.contracts.provider import Provider

__all__ = [
    "AUTH_MODES",
    "AuthenticationError",
    "CleanupEntry",
    "CleanupResult",
    "ConfigError",
    "HarnessError",
    "HarnessItem",
    "HarnessMetadata",
    "HarnessReport",
    "NullSyncProgress",
    "ParsedTitle",
    "PatternCheck",
    "Provider",
    "ProviderError",
    "SyncProgress",
    "TitlePattern",
    "TitleToTagsConfig",
    "TitleToTagsError",
    "VerificationError",
    "VerificationResult",
    "WorkItem",
    "WorkItemUpdate",
]
