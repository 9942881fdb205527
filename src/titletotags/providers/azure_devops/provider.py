"""Azure DevOps work item tracking adapter."""

from __future__ import annotations

import json
import logging
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from titletotags.auth.base import basic_auth_header
from titletotags.contracts.exceptions import AuthenticationError, ProviderError
from titletotags.contracts.item import WorkItem, WorkItemUpdate
from titletotags.contracts.provider import Provider
from titletotags.providers.azure_devops._retrying_transport import RetryingTransport

_LOG = logging.getLogger(__name__)

_JSON_PATCH = "application/json-patch+json"
_BATCH_FIELDS = ["System.Id", "System.Title", "System.Tags", "System.WorkItemType"]
MAX_BATCH_SIZE = 200


class AzureDevOpsProvider(Provider):
    def __init__(
        self,
        *,
        organization: str,
        project: str,
        token: str,
        base_url: str = "https://dev.azure.com",
        api_version: str = "7.1",
        batch_size: int = MAX_BATCH_SIZE,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._organization = organization
        self._project = project
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._api_version = api_version
        self._batch_size = max(1, min(batch_size, MAX_BATCH_SIZE))
        self._max_retries = max_retries
        self._transport = transport

        self._client: httpx.AsyncClient | None = None

    @property
    def api_root(self) -> str:
        return f"{self._base_url}/{quote(self._organization, safe='')}/{quote(self._project, safe='')}/_apis/wit/"

    async def __aenter__(self) -> AzureDevOpsProvider:
        self._client = httpx.AsyncClient(
            base_url=self.api_root,
            headers={"Authorization": basic_auth_header(self._token), "Accept": "application/json"},
            params={"api-version": self._api_version},
            timeout=httpx.Timeout(30.0),
            transport=RetryingTransport(transport=self._transport, max_retries=self._max_retries),
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def query_ids(self, wiql: str) -> list[int]:
        _LOG.debug("Running WIQL: %s", wiql)
        data = self._require_dict(await self._request("POST", "wiql", "query_work_items", body={"query": wiql}))
        refs = data.get("workItems", [])
        if not isinstance(refs, list):
            raise ProviderError("Missing/invalid list at key 'workItems'")
        return [self._require_int(ref, "id") for ref in refs if isinstance(ref, dict)]

    async def get_work_items(self, ids: list[int]) -> list[WorkItem]:
        items: list[WorkItem] = []
        for start in range(0, len(ids), self._batch_size):
            chunk = ids[start : start + self._batch_size]
            data = self._require_dict(
                await self._request(
                    "POST",
                    "workitemsbatch",
                    "get_work_items",
                    body={"ids": chunk, "fields": _BATCH_FIELDS, "errorPolicy": "omit"},
                )
            )
            values = data.get("value", [])
            if not isinstance(values, list):
                raise ProviderError("Missing/invalid list at key 'value'")
            # With errorPolicy=omit, deleted or inaccessible ids come back as null.
            by_id = {item.id: item for item in (self._item_from_payload(v) for v in values if v is not None)}
            items.extend(by_id[item_id] for item_id in chunk if item_id in by_id)
            _LOG.debug("Fetched %d of %d work item(s) in batch", len(by_id), len(chunk))
        return items

    async def update_work_item(self, item_id: int, update: WorkItemUpdate) -> WorkItem:
        operations = self._patch_operations(title=update.title, tags=update.tags)
        if not operations:
            items = await self.get_work_items([item_id])
            if not items:
                raise ProviderError(f"Work item not found: {item_id}", status_code=404)
            return items[0]
        data = await self._request("PATCH", f"workitems/{item_id}", "update_work_item", patch=operations)
        return self._item_from_payload(data)

    async def create_work_item(self, work_item_type: str, title: str, tags: str = "") -> WorkItem:
        operations = self._patch_operations(title=title, tags=tags or None)
        data = await self._request(
            "POST",
            f"workitems/${quote(work_item_type, safe='')}",
            "create_work_item",
            patch=operations,
        )
        return self._item_from_payload(data)

    async def delete_work_item(self, item_id: int) -> None:
        await self._request("DELETE", f"workitems/{item_id}", "delete_work_item")

    @staticmethod
    def _patch_operations(*, title: str | None, tags: str | None) -> list[dict[str, Any]]:
        operations: list[dict[str, Any]] = []
        if title is not None:
            operations.append({"op": "add", "path": "/fields/System.Title", "value": title})
        if tags is not None:
            operations.append({"op": "add", "path": "/fields/System.Tags", "value": tags})
        return operations

    async def _request(
        self,
        method: str,
        url: str,
        operation: str,
        *,
        body: dict[str, Any] | None = None,
        patch: list[dict[str, Any]] | None = None,
    ) -> Any:
        if self._client is None:
            raise ProviderError("Provider is not initialized. Use 'async with'.")

        kwargs: dict[str, Any] = {}
        if patch is not None:
            kwargs["content"] = json.dumps(patch)
            kwargs["headers"] = {"Content-Type": _JSON_PATCH}
        elif body is not None:
            kwargs["json"] = body

        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise ProviderError(f"{operation} failed: {exc}") from exc

        self._raise_for_status(response, operation)
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise ProviderError(f"{operation} returned a non-JSON response") from exc

    @staticmethod
    def _raise_for_status(response: httpx.Response, operation: str) -> None:
        status = response.status_code
        if status in (401, 403):
            raise AuthenticationError(f"Azure DevOps rejected the credentials (HTTP {status}) during {operation}")
        # A bad PAT is answered with the HTML sign-in page and a 203.
        if status == 203:
            raise AuthenticationError("Azure DevOps returned a sign-in page; the token is invalid or expired")
        if response.is_success:
            return

        message = ""
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and isinstance(payload.get("message"), str):
            message = payload["message"]
        detail = f": {message}" if message else ""
        raise ProviderError(f"{operation} failed with HTTP {status}{detail}", status_code=status)

    def _item_from_payload(self, payload: Any) -> WorkItem:
        data = self._require_dict(payload)
        fields = data.get("fields")
        if not isinstance(fields, dict):
            raise ProviderError("Missing/invalid object at key 'fields'")
        title = fields.get("System.Title")
        if not isinstance(title, str):
            raise ProviderError("Missing/invalid string at key 'System.Title'")
        tags = fields.get("System.Tags") or ""
        work_item_type = fields.get("System.WorkItemType")
        url = data.get("url")
        return WorkItem(
            id=self._require_int(data, "id"),
            title=title,
            tags=str(tags),
            work_item_type=work_item_type if isinstance(work_item_type, str) else None,
            url=url if isinstance(url, str) else None,
        )

    @staticmethod
    def _require_dict(value: Any) -> dict[str, Any]:
        if not isinstance(value, dict):
            raise ProviderError("Azure DevOps response is not a JSON object")
        return value

    @staticmethod
    def _require_int(data: dict[str, Any], key: str) -> int:
        value = data.get(key)
        if not isinstance(value, int) or isinstance(value, bool):
            raise ProviderError(f"Missing/invalid int at key '{key}'")
        return value
