"""Auth module public exports."""

from titletotags.auth.base import TokenResolver, basic_auth_header
from titletotags.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "basic_auth_header", "create_token_resolver"]
