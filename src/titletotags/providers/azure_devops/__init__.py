"""Azure DevOps provider."""

from titletotags.providers.azure_devops.provider import AzureDevOpsProvider
from titletotags.providers.azure_devops.wiql import build_work_item_query, quote_literal

__all__ = ["AzureDevOpsProvider", "build_work_item_query", "quote_literal"]
