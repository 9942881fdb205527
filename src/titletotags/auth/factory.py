"""Token resolver factory."""

from __future__ import annotations

from titletotags.auth.base import TokenResolver
from titletotags.auth.resolvers import EnvTokenResolver, PromptTokenResolver, StaticTokenResolver
from titletotags.contracts.config import TitleToTagsConfig
from titletotags.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
    "prompt": PromptTokenResolver,
}


def create_token_resolver(config: TitleToTagsConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "env":
        return EnvTokenResolver()
    if auth_mode == "prompt":
        return PromptTokenResolver(organization=config.organization)
    return StaticTokenResolver(token=config.token or "")
