import base64

from titletotags.auth.base import basic_auth_header
from titletotags.auth.factory import create_token_resolver
from titletotags.auth.resolvers.env import EnvTokenResolver
from titletotags.auth.resolvers.prompt import PromptTokenResolver
from titletotags.auth.resolvers.static import StaticTokenResolver
from titletotags.contracts.config import TitleToTagsConfig


def _make_config(*, auth: str, token: str | None = None) -> TitleToTagsConfig:
    return TitleToTagsConfig(organization="contoso", project="Fabrikam", auth=auth, token=token)


def test_factory_creates_env_resolver() -> None:
    resolver = create_token_resolver(_make_config(auth="env"))

    assert isinstance(resolver, EnvTokenResolver)


def test_factory_creates_static_resolver() -> None:
    resolver = create_token_resolver(_make_config(auth="token", token="tok_123"))

    assert isinstance(resolver, StaticTokenResolver)
    assert resolver.token == "tok_123"


def test_factory_creates_prompt_resolver_for_organization() -> None:
    resolver = create_token_resolver(_make_config(auth="prompt"))

    assert isinstance(resolver, PromptTokenResolver)
    assert resolver.organization == "contoso"


def test_basic_auth_header_encodes_pat_as_password() -> None:
    header = basic_auth_header("pat123")

    assert header.startswith("Basic ")
    assert base64.b64decode(header.removeprefix("Basic ")).decode() == ":pat123"
