"""Auth resolver interfaces."""

from __future__ import annotations

import base64
from abc import ABC, abstractmethod


class TokenResolver(ABC):
    @abstractmethod
    async def resolve(self) -> str:
        """Resolve and return a personal access token."""


def basic_auth_header(token: str) -> str:
    """Azure DevOps accepts a PAT as the password of an empty Basic-auth user."""
    encoded = base64.b64encode(f":{token}".encode()).decode("ascii")
    return f"Basic {encoded}"
