"""
Authorization code exchangers.

Each supported provider family has one exchanger that turns an
authorization code into a BearerCredential:

- Google: form-encoded POST to the OAuth token endpoint, returns id_token
- Facebook: GET to the Graph API access token endpoint, returns access_token

Exchangers are looked up through EXCHANGERS. A provider without an entry
(Apple) is rejected before any network call is made.
"""

import logging
from typing import Callable, Dict, Mapping, Tuple

import requests

from .exceptions import (
    ExchangeDecodeError,
    ExchangeTransportError,
    MissingParameterError,
    UnsupportedProviderError,
)
from .providers import AuthorizationCode, BearerCredential, Provider

logger = logging.getLogger(__name__)

GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
FACEBOOK_TOKEN_URL = "https://graph.facebook.com/v14.0/oauth/access_token"

AUTHORIZATION_CODE_GRANT = "authorization_code"

DEFAULT_TIMEOUT = 30


def _require(params: Mapping[str, str], *keys: str) -> Tuple[str, ...]:
    """
    Fetch required parameters in order.

    Raises:
        MissingParameterError: For the first key that is absent or empty
    """
    values = []
    for key in keys:
        value = params.get(key)
        if not value:
            logger.error(f"'{key}' key is not found in exchange parameters")
            raise MissingParameterError(key)
        values.append(value)
    return tuple(values)


def _decode_token(response: requests.Response, field_name: str) -> str:
    try:
        data = response.json()
        token = data[field_name]
    except (ValueError, KeyError, TypeError, RecursionError) as e:
        logger.error(
            f"Invalid response from token endpoint ({response.status_code}): "
            f"missing or unreadable {field_name}"
        )
        raise ExchangeDecodeError(
            f"Error while decoding {field_name} (status {response.status_code}): {e}"
        ) from e

    if not isinstance(token, str) or not token:
        raise ExchangeDecodeError(
            f"Error while decoding {field_name} (status {response.status_code}): "
            f"expected a non-empty string"
        )
    return token


class GoogleCodeExchanger:
    """
    Exchanges a Google authorization code for an ID token.

    Required parameters: client_id, redirect_uri.
    Optional parameters: client_secret (sent when present).
    """

    provider = Provider.GOOGLE

    @classmethod
    def exchange(
        cls,
        session: requests.Session,
        code: str,
        params: Mapping[str, str],
        timeout: int = DEFAULT_TIMEOUT,
    ) -> BearerCredential:
        body = cls.build_body(code, params)

        logger.info("Exchanging Google authorization code")
        try:
            response = session.post(
                GOOGLE_TOKEN_URL,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                data=body,
                timeout=timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Network error during Google code exchange: {e}")
            raise ExchangeTransportError(f"Network error during code exchange: {e}") from e

        token = _decode_token(response, "id_token")
        return BearerCredential(token=token, provider=cls.provider)

    @staticmethod
    def build_body(code: str, params: Mapping[str, str]) -> Dict[str, str]:
        client_id, redirect_uri = _require(params, "client_id", "redirect_uri")
        body = {
            "code": code,
            "client_id": client_id,
            "redirect_uri": redirect_uri,
            "grant_type": AUTHORIZATION_CODE_GRANT,
        }
        if params.get("client_secret"):
            body["client_secret"] = params["client_secret"]
        return body


class FacebookCodeExchanger:
    """
    Exchanges a Facebook authorization code for an access token.

    Required parameters: client_id, client_secret, redirect_uri.
    """

    provider = Provider.FACEBOOK

    @classmethod
    def exchange(
        cls,
        session: requests.Session,
        code: str,
        params: Mapping[str, str],
        timeout: int = DEFAULT_TIMEOUT,
    ) -> BearerCredential:
        query = cls.build_query(code, params)

        logger.info("Exchanging Facebook authorization code")
        try:
            response = session.get(FACEBOOK_TOKEN_URL, params=query, timeout=timeout)
        except requests.RequestException as e:
            logger.error(f"Network error during Facebook code exchange: {e}")
            raise ExchangeTransportError(f"Network error during code exchange: {e}") from e

        token = _decode_token(response, "access_token")
        return BearerCredential(token=token, provider=cls.provider)

    @staticmethod
    def build_query(code: str, params: Mapping[str, str]) -> Dict[str, str]:
        client_id, client_secret, redirect_uri = _require(
            params, "client_id", "client_secret", "redirect_uri"
        )
        return {
            "client_secret": client_secret,
            "code": code,
            "client_id": client_id,
            "redirect_uri": redirect_uri,
        }


ExchangeFunc = Callable[..., BearerCredential]

EXCHANGERS: Dict[Provider, ExchangeFunc] = {
    Provider.GOOGLE: GoogleCodeExchanger.exchange,
    Provider.FACEBOOK: FacebookCodeExchanger.exchange,
}


class OAuthCodeExchanger:
    """
    Dispatches an AuthorizationCode to its provider's exchanger.

    Example:
        code = AuthorizationCode(code="4/0Ad...", provider=Provider.GOOGLE)
        credential = OAuthCodeExchanger(code).exchange_for_credential(
            {"client_id": "...", "redirect_uri": "https://app.example.com/cb"},
            session,
        )
    """

    def __init__(self, code: AuthorizationCode):
        self.code = code

    def exchange_for_credential(
        self,
        params: Mapping[str, str],
        session: requests.Session,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> BearerCredential:
        """
        Exchange the authorization code for a bearer credential.

        Args:
            params: Provider-specific parameters (client_id, redirect_uri, ...)
            session: HTTP session used to reach the provider
            timeout: Request timeout in seconds

        Returns:
            BearerCredential tagged with the code's provider

        Raises:
            UnsupportedProviderError: If the provider has no exchanger
            MissingParameterError: If a required parameter is missing
            ExchangeTransportError: If the provider could not be reached
            ExchangeDecodeError: If the provider's response is unreadable
        """
        exchange = EXCHANGERS.get(self.code.provider)
        if exchange is None:
            logger.error(f"No code exchanger for provider {self.code.provider.wire_id}")
            raise UnsupportedProviderError(self.code.provider)

        return exchange(session, self.code.code, params, timeout=timeout)
