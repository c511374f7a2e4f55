"""Tests for invitation token generation and hashing."""

import re

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st
from pydantic import SecretStr

from src.workspace_authority.core.config import Settings
from src.workspace_authority.core.security import TokenCodec

pytestmark = pytest.mark.unit

HEX64 = re.compile(r"^[0-9a-f]{64}$")


def test_generate_token_is_64_lowercase_hex():
    assert HEX64.match(TokenCodec.generate_token())


def test_generated_tokens_are_distinct():
    tokens = {TokenCodec.generate_token() for _ in range(1000)}
    assert len(tokens) == 1000


@given(a=st.text(min_size=1, max_size=80), b=st.text(min_size=1, max_size=80))
@settings(max_examples=200)
def test_distinct_tokens_hash_distinctly(a: str, b: str):
    assume(a != b)
    codec = TokenCodec("property-test-secret")
    assert codec.hash(a) != codec.hash(b)


@given(token=st.text(min_size=1, max_size=80))
def test_hash_is_deterministic_per_key(token: str):
    assert TokenCodec("key-one").hash(token) == TokenCodec("key-one").hash(token)


def test_different_keys_give_different_hashes():
    token = TokenCodec.generate_token()
    assert TokenCodec("key-one").hash(token) != TokenCodec("key-two").hash(token)


def test_hash_is_hex_and_not_the_token():
    codec = TokenCodec("some-secret")
    token = codec.generate_token()
    digest = codec.hash(token)
    assert HEX64.match(digest)
    assert digest != token


def test_empty_secret_rejected():
    with pytest.raises(ValueError):
        TokenCodec("")


def _settings(**overrides) -> Settings:
    values = {
        "database_url": "postgresql+asyncpg://localhost/test",
        "identity_jwt_secret": "identity-secret",
        "app_env": "development",
        "invitation_secret": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_from_settings_uses_configured_secret():
    secret = "a" * 40
    codec = TokenCodec.from_settings(_settings(invitation_secret=SecretStr(secret)))
    assert codec.hash("token") == TokenCodec(secret).hash("token")


def test_from_settings_without_secret_uses_ephemeral_key():
    first = TokenCodec.from_settings(_settings())
    second = TokenCodec.from_settings(_settings())
    # Each process-level codec gets its own random key
    assert first.hash("token") != second.hash("token")
