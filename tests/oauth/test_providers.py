"""Tests for providers and federated credentials."""

import pytest

from identity_toolkit.oauth.exceptions import UnknownProviderError
from identity_toolkit.oauth.providers import AuthorizationCode, BearerCredential, Provider


class TestProvider:
    """Tests for Provider wire identifier resolution."""

    @pytest.mark.parametrize(
        "wire_id, provider",
        [
            ("google.com", Provider.GOOGLE),
            ("facebook.com", Provider.FACEBOOK),
            ("apple.com", Provider.APPLE),
        ],
    )
    def test_from_wire_id(self, wire_id, provider):
        assert Provider.from_wire_id(wire_id) is provider

    @pytest.mark.parametrize("provider", list(Provider))
    def test_wire_id_round_trip(self, provider):
        assert Provider.from_wire_id(provider.wire_id) is provider

    @pytest.mark.parametrize("wire_id", ["github.com", "Google.com", "google", ""])
    def test_unknown_wire_id_raises(self, wire_id):
        with pytest.raises(UnknownProviderError, match="Unknown provider") as exc_info:
            Provider.from_wire_id(wire_id)

        assert exc_info.value.wire_id == wire_id

    def test_unknown_provider_error_is_value_error(self):
        with pytest.raises(ValueError):
            Provider.from_wire_id("twitter.com")

    def test_str_is_wire_id(self):
        assert str(Provider.APPLE) == "apple.com"


class TestBearerCredential:
    """Tests for the signInWithIdp postBody encoding."""

    def test_google_uses_id_token(self):
        credential = BearerCredential(token="T", provider=Provider.GOOGLE)

        assert credential.to_post_body() == "id_token=T&providerId=google.com"

    def test_empty_provider_id_override_falls_back_to_wire_id(self):
        credential = BearerCredential(token="T", provider=Provider.GOOGLE)

        assert credential.to_post_body("") == "id_token=T&providerId=google.com"

    def test_provider_id_override(self):
        credential = BearerCredential(token="T", provider=Provider.GOOGLE)

        assert credential.to_post_body("oidc.example") == "id_token=T&providerId=oidc.example"

    def test_facebook_uses_access_token(self):
        credential = BearerCredential(token="T", provider=Provider.FACEBOOK)

        assert credential.to_post_body() == "access_token=T&providerId=facebook.com"

    def test_apple_appends_nonce(self):
        credential = BearerCredential(token="T", provider=Provider.APPLE, nonce="N")

        assert credential.to_post_body() == "id_token=T&providerId=apple.com&nonce=N"

    def test_apple_without_nonce_appends_empty_nonce(self):
        credential = BearerCredential(token="T", provider=Provider.APPLE)

        assert credential.to_post_body() == "id_token=T&providerId=apple.com&nonce="

    def test_google_ignores_nonce(self):
        credential = BearerCredential(token="T", provider=Provider.GOOGLE, nonce="N")

        assert credential.to_post_body() == "id_token=T&providerId=google.com"

    def test_str_is_post_body(self):
        credential = BearerCredential(token="T", provider=Provider.FACEBOOK)

        assert str(credential) == "access_token=T&providerId=facebook.com"

    def test_from_dict(self):
        credential = BearerCredential.from_dict(
            {"token": "T", "provider": "apple.com", "nonce": "N"}
        )

        assert credential == BearerCredential(token="T", provider=Provider.APPLE, nonce="N")

    def test_from_dict_rejects_unknown_provider(self):
        with pytest.raises(UnknownProviderError):
            BearerCredential.from_dict({"token": "T", "provider": "myspace.com"})


class TestAuthorizationCode:
    """Tests for AuthorizationCode."""

    def test_from_dict(self):
        code = AuthorizationCode.from_dict({"code": "abc", "provider": "facebook.com"})

        assert code.code == "abc"
        assert code.provider is Provider.FACEBOOK

    def test_from_dict_rejects_unknown_provider(self):
        with pytest.raises(UnknownProviderError):
            AuthorizationCode.from_dict({"code": "abc", "provider": "linkedin.com"})
