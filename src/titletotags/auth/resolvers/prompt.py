"""Interactive token resolver."""

from __future__ import annotations

from dataclasses import dataclass

from titletotags.auth.base import TokenResolver
from titletotags.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class PromptTokenResolver(TokenResolver):
    organization: str = ""
    attempts: int = 3

    async def resolve(self) -> str:
        try:
            import questionary
        except ImportError as exc:
            raise AuthenticationError(
                "questionary is required for prompt auth (pip install questionary, or use auth 'env')"
            ) from exc

        suffix = f" for {self.organization}" if self.organization else ""
        for _ in range(self.attempts):
            answer = await questionary.password(f"Azure DevOps personal access token{suffix}:").ask_async()
            if answer is None:
                raise AuthenticationError("Token prompt was cancelled")
            token = answer.strip()
            if token:
                return token
            questionary.print("A token is required.", style="fg:ansired")
        raise AuthenticationError(f"No token entered after {self.attempts} attempt(s)")
