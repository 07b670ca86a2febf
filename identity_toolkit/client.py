"""
Identity Toolkit REST client.

This module provides the single entry point for password authentication,
federated sign-in and account management against the Identity Toolkit
accounts API. It handles:

- Request construction for each accounts:* endpoint
- Dispatch through an injected (or default) requests.Session
- Status code branching and success payload decoding
- Translation of the backend's error envelope into per-operation exceptions

Each call is a single, independent request. Nothing is cached or retried:
network failures and unreadable responses surface immediately as the
operation's UNKNOWN reason.
"""

import logging
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Type

import requests

from . import endpoints
from .config import IdentityToolkitConfig
from .errors import (
    AccountErrorReason,
    ErrorEnvelope,
    LoginErrorReason,
    RefreshTokenErrorReason,
    RegisterErrorReason,
    parse_error_envelope,
)
from .exceptions import (
    AccountError,
    IdentityToolkitError,
    LoginError,
    RefreshTokenError,
    RegisterError,
)
from .models import (
    LoginBody,
    LoginResponse,
    OobRequest,
    RefreshTokenResponse,
    RegisterResponse,
    SignInWithIdpBody,
    SignInWithIdpResponse,
)
from .oauth.exchanger import OAuthCodeExchanger
from .oauth.providers import AuthorizationCode, BearerCredential

logger = logging.getLogger(__name__)


class _Taxonomy(NamedTuple):
    """Exception type, catch-all reason and envelope mapping for one operation family."""

    error: Type[IdentityToolkitError]
    unknown: Any
    map_envelope: Callable[[ErrorEnvelope], Any]


LOGIN = _Taxonomy(LoginError, LoginErrorReason.UNKNOWN, ErrorEnvelope.login_error)
REGISTER = _Taxonomy(RegisterError, RegisterErrorReason.UNKNOWN, ErrorEnvelope.register_error)
ACCOUNT = _Taxonomy(AccountError, AccountErrorReason.UNKNOWN, ErrorEnvelope.account_error)
REFRESH_TOKEN = _Taxonomy(
    RefreshTokenError, RefreshTokenErrorReason.UNKNOWN, ErrorEnvelope.refresh_token_error
)


class IdentityToolkitClient:
    """
    Client for the Identity Toolkit accounts API.

    Example:
        from identity_toolkit import IdentityToolkitClient, IdentityToolkitConfig

        client = IdentityToolkitClient(IdentityToolkitConfig(api_key="AIza..."))

        try:
            session = client.login("user@example.com", "hunter2")
        except LoginError as e:
            if e.reason is LoginErrorReason.INVALID_PASSWORD:
                ...
    """

    def __init__(
        self,
        config: Optional[IdentityToolkitConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Client configuration (loads from environment if not provided)
            session: HTTP session used for every request (creates one if not provided).
                     A caller-provided session is used as-is and never closed here.
        """
        self.config = config or IdentityToolkitConfig.from_env()
        self._owns_session = session is None
        self.session = requests.Session() if session is None else session
        if self._owns_session:
            self.session.headers.update(
                {
                    "Accept": "application/json",
                    "User-Agent": f"{self.__class__.__name__}/1.0",
                }
            )

        logger.info("IdentityToolkitClient initialized")

    def _url(self, endpoint: str) -> str:
        return f"{self.config.base_url}{endpoint}?key={self.config.api_key}"

    def _send(
        self,
        operation: str,
        url: str,
        taxonomy: _Taxonomy,
        **kwargs: Any,
    ) -> requests.Response:
        """
        POST a request and branch on the response status.

        Args:
            operation: Operation name used in log messages
            url: Full request URL (contains the API key, never logged)
            taxonomy: Error family of the operation
            **kwargs: Body arguments passed to session.post (json= or data=)

        Returns:
            Response with status 200

        Raises:
            IdentityToolkitError: The taxonomy's exception type, with UNKNOWN for
                                  network failures and undecodable error bodies
        """
        logger.info(f"Sending {operation} request")

        try:
            response = self.session.post(url, timeout=self.config.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Network error during {operation}: {e}")
            raise taxonomy.error(taxonomy.unknown) from e

        if response.status_code == 200:
            logger.debug(f"{operation} succeeded")
            return response

        envelope = parse_error_envelope(response.text)
        if envelope is None:
            logger.error(f"{operation} failed ({response.status_code}) with undecodable body")
            raise taxonomy.error(taxonomy.unknown)

        reason = taxonomy.map_envelope(envelope)
        logger.warning(f"{operation} rejected ({response.status_code}): {envelope.message}")
        raise taxonomy.error(reason)

    def _decode(
        self, operation: str, response: requests.Response, model: Any, taxonomy: _Taxonomy
    ) -> Any:
        try:
            return model.from_dict(response.json())
        except (ValueError, KeyError, TypeError, AttributeError, RecursionError) as e:
            logger.error(f"Invalid {operation} response: {e}")
            raise taxonomy.error(taxonomy.unknown) from e

    def login(self, email: str, password: str) -> LoginResponse:
        """
        Sign in with email and password.

        Returns:
            LoginResponse with the user's ID and refresh tokens

        Raises:
            LoginError: If the backend rejects the credentials or the call fails
        """
        body = LoginBody(email=email, password=password)
        response = self._send(
            "signInWithPassword",
            self._url(endpoints.SIGN_IN_WITH_PASSWORD),
            LOGIN,
            json=body.to_dict(),
        )
        return self._decode("signInWithPassword", response, LoginResponse, LOGIN)

    def register(self, email: str, password: str) -> RegisterResponse:
        """
        Create an account with email and password.

        Raises:
            RegisterError: If registration is rejected or the call fails
        """
        body = LoginBody(email=email, password=password)
        response = self._send(
            "signUp", self._url(endpoints.SIGN_UP), REGISTER, json=body.to_dict()
        )
        return self._decode("signUp", response, RegisterResponse, REGISTER)

    def sign_in_with_federated_identity(
        self, request_uri: str, credential: BearerCredential
    ) -> SignInWithIdpResponse:
        """
        Sign in with a credential obtained from a federated provider.

        The backend reports failures of this endpoint with the login
        vocabulary, so they are raised as LoginError.

        Args:
            request_uri: URI the provider redirected back to
            credential: Provider credential (see OAuthCodeExchanger)

        Returns:
            SignInWithIdpResponse for the linked account

        Raises:
            LoginError: If sign-in is rejected or the call fails
        """
        body = SignInWithIdpBody(request_uri=request_uri, post_body=credential.to_post_body())
        response = self._send(
            "signInWithIdp", self._url(endpoints.SIGN_IN_WITH_IDP), LOGIN, json=body.to_dict()
        )
        return self._decode("signInWithIdp", response, SignInWithIdpResponse, LOGIN)

    def sign_in_with_authorization_code(
        self,
        request_uri: str,
        authorization_code: AuthorizationCode,
        params: Mapping[str, str],
    ) -> SignInWithIdpResponse:
        """
        Exchange a provider authorization code and sign in with the result.

        The code is exchanged through the client's own session before the
        identity backend is contacted.

        Args:
            request_uri: URI the provider redirected back to
            authorization_code: Code from the provider's OAuth redirect
            params: Provider parameters (client_id, redirect_uri, ...)

        Raises:
            CodeExchangeError: If the code cannot be exchanged
            LoginError: If the backend rejects the resulting credential
        """
        credential = OAuthCodeExchanger(authorization_code).exchange_for_credential(
            params, self.session, timeout=self.config.timeout
        )
        return self.sign_in_with_federated_identity(request_uri, credential)

    def send_verification_email(self, id_token: str) -> None:
        """
        Send an email verification link to the account owning id_token.

        Raises:
            AccountError: If the request is rejected or the call fails
        """
        body = OobRequest(request_type=endpoints.REQUEST_TYPE_VERIFY_EMAIL, id_token=id_token)
        self._send("sendOobCode", self._url(endpoints.SEND_OOB_CODE), ACCOUNT, json=body.to_dict())

    def delete_account(self, id_token: str) -> None:
        """
        Delete the account owning id_token.

        Raises:
            AccountError: If the request is rejected or the call fails
        """
        body = OobRequest(request_type=endpoints.REQUEST_TYPE_DELETE_ACCOUNT, id_token=id_token)
        self._send("delete", self._url(endpoints.DELETE_ACCOUNT), ACCOUNT, json=body.to_dict())

    def refresh_id_token(self, refresh_token: str) -> RefreshTokenResponse:
        """
        Exchange a refresh token for a fresh ID token.

        This is a single explicit call; the client never schedules refreshes.

        Raises:
            RefreshTokenError: If the refresh is rejected or the call fails
        """
        url = f"{self.config.token_url}?key={self.config.api_key}"
        form: Dict[str, str] = {"grant_type": "refresh_token", "refresh_token": refresh_token}
        response = self._send(
            "refreshToken",
            url,
            REFRESH_TOKEN,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            data=form,
        )
        return self._decode("refreshToken", response, RefreshTokenResponse, REFRESH_TOKEN)

    def close(self) -> None:
        """Close the HTTP session if the client created it."""
        if self._owns_session:
            self.session.close()
        logger.info("IdentityToolkitClient closed")

    def __enter__(self) -> "IdentityToolkitClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
