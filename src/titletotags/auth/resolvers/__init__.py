"""Concrete token resolvers."""

from titletotags.auth.resolvers.env import PAT_ENV_VAR, EnvTokenResolver
from titletotags.auth.resolvers.prompt import PromptTokenResolver
from titletotags.auth.resolvers.static import StaticTokenResolver

__all__ = ["PAT_ENV_VAR", "EnvTokenResolver", "PromptTokenResolver", "StaticTokenResolver"]
