"""Environment token resolver."""

from __future__ import annotations

import os

from titletotags.auth.base import TokenResolver
from titletotags.contracts.exceptions import AuthenticationError

PAT_ENV_VAR = "AZURE_DEVOPS_PAT"


class EnvTokenResolver(TokenResolver):
    async def resolve(self) -> str:
        token = (os.getenv(PAT_ENV_VAR) or "").strip()
        if not token:
            raise AuthenticationError(f"{PAT_ENV_VAR} is not set or empty")
        return token
