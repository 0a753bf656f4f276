"""
Unit tests for request signing.
"""

import uuid

import pytest

from letterboxd import ApiKeyPair, ConfigurationError
from letterboxd import signer

BASE_URL = "https://api.letterboxd.com/api/v0/"
NONCE = "9d54386f-118e-4876-b8e8-92ba37d451e7"
TIMESTAMP = 1499803866


class TestSigner:
    """Test signature construction."""

    @pytest.fixture
    def key_pair(self):
        """Create test credentials."""
        return ApiKeyPair("test-api-key", "test-secret")

    def test_hmac_sha256_known_vector(self):
        """Test HMAC-SHA256 against a published test vector."""
        signature = signer.hmac_sha256("key", "The quick brown fox jumps over the lazy dog")

        assert signature == "f7bc83f430538424b13298e6aa6fb143ef4d59a14946175997479dbc2d1a3cd8"

    def test_canonical_url_with_query(self):
        """Test that the query is appended after the auth parameters."""
        url = signer.canonical_url(BASE_URL, "film/2a9q", "test-api-key", NONCE, TIMESTAMP, "foo=bar")

        assert url == (
            "https://api.letterboxd.com/api/v0/film/2a9q"
            "?apikey=test-api-key"
            "&nonce=9d54386f-118e-4876-b8e8-92ba37d451e7"
            "&timestamp=1499803866"
            "&foo=bar"
        )

    def test_canonical_url_without_query(self):
        """Test that no trailing separator is added for an empty query."""
        url = signer.canonical_url(BASE_URL, "films", "k", NONCE, TIMESTAMP)

        assert url.endswith("&timestamp=1499803866")

    def test_canonical_message(self):
        """Test that method, URL and body are NUL separated."""
        message = signer.canonical_message("post", "https://x/y", '{"a":1}')

        assert message == 'POST\0https://x/y\0{"a":1}'

    @pytest.mark.parametrize("url,body", [
        ("https://x/y", ""),
        ("https://x/y?a=1", ""),
        ("https://x/y", "body"),
        ("https://x/y", b"bytes body"),
        ("https://x/y", None),
    ])
    def test_canonical_message_has_two_separators(self, url, body):
        """Test that the message always holds exactly two NUL bytes."""
        message = signer.canonical_message("GET", url, body)

        assert message.count("\0") == 2

    def test_signed_url_fixed_inputs(self, key_pair):
        """Test the signed URL for fixed nonce and timestamp."""
        url = signer.signed_url("GET", BASE_URL, "film/2a9q", "foo=bar", "", key_pair, NONCE, TIMESTAMP)

        assert url == (
            "https://api.letterboxd.com/api/v0/film/2a9q"
            "?apikey=test-api-key&nonce=9d54386f-118e-4876-b8e8-92ba37d451e7"
            "&timestamp=1499803866&foo=bar"
            "&signature=e8c31e49b502d04937ba06be0948a7ac0e0fca30cd233a37ea7772bb49c30a0f"
        )

    def test_sign_is_deterministic(self, key_pair):
        """Test that fixed inputs always give the same signature."""
        args = ("GET", BASE_URL, "film/2a9q", "foo=bar", "", key_pair, NONCE, TIMESTAMP)

        assert signer.sign(*args) == signer.sign(*args)
        assert signer.signed_url(*args).endswith("&signature=" + signer.sign(*args))

    def test_sign_depends_on_every_input(self, key_pair):
        """Test that changing any signed part changes the signature."""
        base = signer.sign("GET", BASE_URL, "film/2a9q", "foo=bar", "", key_pair, NONCE, TIMESTAMP)

        variants = [
            signer.sign("POST", BASE_URL, "film/2a9q", "foo=bar", "", key_pair, NONCE, TIMESTAMP),
            signer.sign("GET", BASE_URL, "film/2a9r", "foo=bar", "", key_pair, NONCE, TIMESTAMP),
            signer.sign("GET", BASE_URL, "film/2a9q", "foo=baz", "", key_pair, NONCE, TIMESTAMP),
            signer.sign("GET", BASE_URL, "film/2a9q", "foo=bar", "x", key_pair, NONCE, TIMESTAMP),
            signer.sign("GET", BASE_URL, "film/2a9q", "foo=bar", "", ApiKeyPair("test-api-key", "other"),
                        NONCE, TIMESTAMP),
            signer.sign("GET", BASE_URL, "film/2a9q", "foo=bar", "", key_pair, str(uuid.uuid4()), TIMESTAMP),
            signer.sign("GET", BASE_URL, "film/2a9q", "foo=bar", "", key_pair, NONCE, TIMESTAMP + 1),
        ]

        assert base not in variants

    def test_signer_does_not_escape_query(self, key_pair):
        """Test that the query string is used verbatim."""
        url = signer.signed_url("GET", BASE_URL, "search", "input=Fight+Club", "", key_pair, NONCE, TIMESTAMP)

        assert "&input=Fight+Club&signature=" in url

    def test_nonce_format(self):
        """Test that nonces are lowercase UUID4 strings."""
        value = signer.nonce()

        assert value == value.lower()
        assert uuid.UUID(value).version == 4

    def test_nonces_are_unique(self):
        """Test that successive nonces do not collide."""
        nonces = {signer.nonce() for _ in range(10000)}

        assert len(nonces) == 10000

    def test_now_is_integer_seconds(self):
        """Test that the timestamp is whole seconds."""
        assert isinstance(signer.now(), int)
        assert signer.now() > TIMESTAMP

    def test_generate_signed_url_uses_fresh_nonce(self, key_pair):
        """Test that two signed URLs for the same request differ."""
        first = signer.generate_signed_url("GET", BASE_URL, "films", "", "", key_pair)
        second = signer.generate_signed_url("GET", BASE_URL, "films", "", "", key_pair)

        assert first != second


class TestApiKeyPair:
    """Test credential construction."""

    def test_secret_not_in_repr(self):
        """Test that the secret stays out of repr()."""
        pair = ApiKeyPair("public", "very-secret")

        assert "very-secret" not in repr(pair)
        assert "public" in repr(pair)

    def test_immutable(self):
        """Test that the pair cannot be changed."""
        pair = ApiKeyPair("public", "secret")

        with pytest.raises(AttributeError):
            pair.api_key = "other"

    def test_empty_values(self):
        """Test that empty key or secret are rejected."""
        with pytest.raises(ConfigurationError):
            ApiKeyPair("", "secret")

        with pytest.raises(ConfigurationError):
            ApiKeyPair("key", "")

    def test_from_env(self, monkeypatch):
        """Test construction from the default environment variables."""
        monkeypatch.setenv("LETTERBOXD_API_KEY", "env-key")
        monkeypatch.setenv("LETTERBOXD_API_SECRET", "env-secret")

        pair = ApiKeyPair.from_env()

        assert pair.api_key == "env-key"
        assert pair.api_secret == "env-secret"

    def test_from_env_custom_names(self, monkeypatch):
        """Test construction from custom environment variable names."""
        monkeypatch.setenv("MY_KEY", "k")
        monkeypatch.setenv("MY_SECRET", "s")

        pair = ApiKeyPair.from_env("MY_KEY", "MY_SECRET")

        assert pair == ApiKeyPair("k", "s")

    def test_from_env_missing(self, monkeypatch):
        """Test that missing variables are reported by name."""
        monkeypatch.delenv("LETTERBOXD_API_KEY", raising=False)
        monkeypatch.setenv("LETTERBOXD_API_SECRET", "s")

        with pytest.raises(ConfigurationError, match="LETTERBOXD_API_KEY"):
            ApiKeyPair.from_env()
