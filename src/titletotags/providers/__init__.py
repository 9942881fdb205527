"""Provider implementations and factory."""

from titletotags.providers.azure_devops import AzureDevOpsProvider, build_work_item_query
from titletotags.providers.factory import create_provider

__all__ = ["AzureDevOpsProvider", "build_work_item_query", "create_provider"]
