"""Tests for authorization code exchangers."""

from unittest import mock

import pytest
import requests

from identity_toolkit.oauth.exceptions import (
    CodeExchangeError,
    ExchangeDecodeError,
    ExchangeTransportError,
    MissingParameterError,
    UnsupportedProviderError,
)
from identity_toolkit.oauth.exchanger import (
    EXCHANGERS,
    FACEBOOK_TOKEN_URL,
    GOOGLE_TOKEN_URL,
    FacebookCodeExchanger,
    GoogleCodeExchanger,
    OAuthCodeExchanger,
)
from identity_toolkit.oauth.providers import AuthorizationCode, BearerCredential, Provider

GOOGLE_PARAMS = {"client_id": "google-client", "redirect_uri": "https://app.example.com/cb"}
FACEBOOK_PARAMS = {
    "client_id": "fb-client",
    "client_secret": "fb-secret",
    "redirect_uri": "https://app.example.com/cb",
}


def make_response(status_code, payload):
    response = mock.Mock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return mock.Mock()


class TestGoogleCodeExchanger:
    """Tests for GoogleCodeExchanger."""

    def test_exchange_success(self, session):
        session.post.return_value = make_response(
            200, {"access_token": "ya29", "id_token": "google-id-token", "expires_in": 3599}
        )

        credential = GoogleCodeExchanger.exchange(session, "auth-code", GOOGLE_PARAMS)

        assert credential == BearerCredential(token="google-id-token", provider=Provider.GOOGLE)
        session.post.assert_called_once_with(
            GOOGLE_TOKEN_URL,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            data={
                "code": "auth-code",
                "client_id": "google-client",
                "redirect_uri": "https://app.example.com/cb",
                "grant_type": "authorization_code",
            },
            timeout=30,
        )

    def test_body_field_order(self):
        body = GoogleCodeExchanger.build_body("auth-code", GOOGLE_PARAMS)

        assert list(body) == ["code", "client_id", "redirect_uri", "grant_type"]

    def test_client_secret_is_sent_when_configured(self):
        body = GoogleCodeExchanger.build_body(
            "auth-code", dict(GOOGLE_PARAMS, client_secret="google-secret")
        )

        assert body["client_secret"] == "google-secret"

    def test_missing_client_id(self, session):
        with pytest.raises(MissingParameterError, match="client_id") as exc_info:
            GoogleCodeExchanger.exchange(
                session, "auth-code", {"redirect_uri": "https://app.example.com/cb"}
            )

        assert exc_info.value.key == "client_id"
        session.post.assert_not_called()

    def test_missing_redirect_uri(self, session):
        with pytest.raises(MissingParameterError) as exc_info:
            GoogleCodeExchanger.exchange(session, "auth-code", {"client_id": "google-client"})

        assert exc_info.value.key == "redirect_uri"

    def test_first_missing_key_is_reported(self, session):
        with pytest.raises(MissingParameterError) as exc_info:
            GoogleCodeExchanger.exchange(session, "auth-code", {})

        assert exc_info.value.key == "client_id"

    def test_network_error(self, session):
        session.post.side_effect = requests.ConnectionError("dns failure")

        with pytest.raises(ExchangeTransportError, match="Network error") as exc_info:
            GoogleCodeExchanger.exchange(session, "auth-code", GOOGLE_PARAMS)

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_error_response_is_decode_error(self, session):
        session.post.return_value = make_response(
            400, {"error": "invalid_grant", "error_description": "Bad Request"}
        )

        with pytest.raises(ExchangeDecodeError, match="id_token"):
            GoogleCodeExchanger.exchange(session, "spent-code", GOOGLE_PARAMS)

    def test_non_json_response_is_decode_error(self, session):
        response = mock.Mock()
        response.status_code = 200
        response.json.side_effect = ValueError("Expecting value")
        session.post.return_value = response

        with pytest.raises(ExchangeDecodeError):
            GoogleCodeExchanger.exchange(session, "auth-code", GOOGLE_PARAMS)

    def test_deeply_nested_response_is_decode_error(self, session):
        response = mock.Mock()
        response.status_code = 200
        response.json.side_effect = RecursionError("maximum recursion depth exceeded")
        session.post.return_value = response

        with pytest.raises(ExchangeDecodeError) as exc_info:
            GoogleCodeExchanger.exchange(session, "auth-code", GOOGLE_PARAMS)

        assert isinstance(exc_info.value.__cause__, RecursionError)


class TestFacebookCodeExchanger:
    """Tests for FacebookCodeExchanger."""

    def test_exchange_success(self, session):
        session.get.return_value = make_response(
            200, {"access_token": "fb-token", "token_type": "bearer", "expires_in": 5183944}
        )

        credential = FacebookCodeExchanger.exchange(session, "auth-code", FACEBOOK_PARAMS)

        assert credential == BearerCredential(token="fb-token", provider=Provider.FACEBOOK)
        session.get.assert_called_once_with(
            FACEBOOK_TOKEN_URL,
            params={
                "client_secret": "fb-secret",
                "code": "auth-code",
                "client_id": "fb-client",
                "redirect_uri": "https://app.example.com/cb",
            },
            timeout=30,
        )

    def test_missing_client_id(self, session):
        params = {"client_secret": "fb-secret", "redirect_uri": "https://app.example.com/cb"}

        with pytest.raises(MissingParameterError) as exc_info:
            FacebookCodeExchanger.exchange(session, "auth-code", params)

        assert exc_info.value.key == "client_id"
        session.get.assert_not_called()

    def test_missing_client_secret(self, session):
        params = {"client_id": "fb-client", "redirect_uri": "https://app.example.com/cb"}

        with pytest.raises(MissingParameterError) as exc_info:
            FacebookCodeExchanger.exchange(session, "auth-code", params)

        assert exc_info.value.key == "client_secret"

    def test_empty_value_counts_as_missing(self, session):
        params = dict(FACEBOOK_PARAMS, redirect_uri="")

        with pytest.raises(MissingParameterError) as exc_info:
            FacebookCodeExchanger.exchange(session, "auth-code", params)

        assert exc_info.value.key == "redirect_uri"

    def test_timeout(self, session):
        session.get.side_effect = requests.Timeout("read timeout")

        with pytest.raises(ExchangeTransportError):
            FacebookCodeExchanger.exchange(session, "auth-code", FACEBOOK_PARAMS)

    def test_error_response_is_decode_error(self, session):
        session.get.return_value = make_response(
            400,
            {"error": {"message": "This authorization code has been used.", "code": 100}},
        )

        with pytest.raises(ExchangeDecodeError, match="access_token"):
            FacebookCodeExchanger.exchange(session, "spent-code", FACEBOOK_PARAMS)


class TestOAuthCodeExchanger:
    """Tests for provider dispatch."""

    def test_registered_providers(self):
        assert set(EXCHANGERS) == {Provider.GOOGLE, Provider.FACEBOOK}

    def test_dispatches_google(self, session):
        session.post.return_value = make_response(200, {"id_token": "google-id-token"})
        code = AuthorizationCode(code="auth-code", provider=Provider.GOOGLE)

        credential = OAuthCodeExchanger(code).exchange_for_credential(GOOGLE_PARAMS, session)

        assert credential.provider is Provider.GOOGLE
        session.get.assert_not_called()

    def test_dispatches_facebook(self, session):
        session.get.return_value = make_response(200, {"access_token": "fb-token"})
        code = AuthorizationCode(code="auth-code", provider=Provider.FACEBOOK)

        credential = OAuthCodeExchanger(code).exchange_for_credential(FACEBOOK_PARAMS, session)

        assert credential.provider is Provider.FACEBOOK
        session.post.assert_not_called()

    def test_passes_timeout(self, session):
        session.get.return_value = make_response(200, {"access_token": "fb-token"})
        code = AuthorizationCode(code="auth-code", provider=Provider.FACEBOOK)

        OAuthCodeExchanger(code).exchange_for_credential(FACEBOOK_PARAMS, session, timeout=3)

        assert session.get.call_args.kwargs["timeout"] == 3

    def test_apple_is_unsupported(self, session):
        code = AuthorizationCode(code="auth-code", provider=Provider.APPLE)

        with pytest.raises(UnsupportedProviderError, match="apple.com") as exc_info:
            OAuthCodeExchanger(code).exchange_for_credential(
                {"client_id": "x", "client_secret": "y", "redirect_uri": "z"}, session
            )

        assert exc_info.value.provider is Provider.APPLE
        session.post.assert_not_called()
        session.get.assert_not_called()

    @pytest.mark.parametrize("provider", [Provider.GOOGLE, Provider.FACEBOOK])
    def test_missing_client_id_is_named(self, session, provider):
        code = AuthorizationCode(code="auth-code", provider=provider)

        with pytest.raises(MissingParameterError) as exc_info:
            OAuthCodeExchanger(code).exchange_for_credential(
                {"client_secret": "y", "redirect_uri": "z"}, session
            )

        assert exc_info.value.key == "client_id"

    def test_all_failures_are_code_exchange_errors(self, session):
        session.post.side_effect = requests.ConnectionError("down")
        code = AuthorizationCode(code="auth-code", provider=Provider.GOOGLE)

        with pytest.raises(CodeExchangeError):
            OAuthCodeExchanger(code).exchange_for_credential(GOOGLE_PARAMS, session)
