"""Provider factory."""

from __future__ import annotations

import httpx

from titletotags.contracts.config import TitleToTagsConfig
from titletotags.contracts.provider import Provider
from titletotags.providers.azure_devops import AzureDevOpsProvider


def create_provider(
    config: TitleToTagsConfig,
    *,
    token: str,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Provider:
    return AzureDevOpsProvider(
        organization=config.organization,
        project=config.project,
        token=token,
        base_url=config.base_url,
        api_version=config.api_version,
        batch_size=config.batch_size,
        max_retries=config.max_retries,
        transport=transport,
    )
