"""Public API surface for titletotags."""

__version__ = "1.0.0"

from titletotags.auth import basic_auth_header, create_token_resolver
from titletotags.config import load_config, scaffold_config, write_config
from titletotags.contracts.cleanup import CleanupEntry, CleanupResult
from titletotags.contracts.config import TitleToTagsConfig
from titletotags.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    HarnessError,
    ProviderError,
    TitleToTagsError,
    VerificationError,
)
from titletotags.contracts.harness import HarnessMetadata, HarnessReport, TitlePattern, VerificationResult
from titletotags.contracts.item import ParsedTitle, WorkItem, WorkItemUpdate
from titletotags.contracts.progress import SyncProgress
from titletotags.contracts.provider import Provider
from titletotags.providers import create_provider
from titletotags.sdk import TitleToTags
from titletotags.tags import format_tags, merge_tags, split_tags
from titletotags.tokenizer import UNTITLED, normalize_title, parse_title

__all__ = [
    "UNTITLED",
    "AuthenticationError",
    "CleanupEntry",
    "CleanupResult",
    "ConfigError",
    "HarnessError",
    "HarnessMetadata",
    "HarnessReport",
    "ParsedTitle",
    "Provider",
    "ProviderError",
    "SyncProgress",
    "TitlePattern",
    "TitleToTags",
    "TitleToTagsConfig",
    "TitleToTagsError",
    "VerificationError",
    "VerificationResult",
    "WorkItem",
    "WorkItemUpdate",
    "__version__",
    "basic_auth_header",
    "create_provider",
    "create_token_resolver",
    "format_tags",
    "load_config",
    "merge_tags",
    "normalize_title",
    "parse_title",
    "scaffold_config",
    "split_tags",
    "write_config",
]
