"""
Request and response payloads for the Identity Toolkit accounts API.

Request bodies serialize to the camelCase keys the backend expects.
Response models are built with ``from_dict`` from decoded JSON and raise
KeyError when a required field is missing, which the client reports as
an UNKNOWN failure.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class LoginBody:
    """Body shared by signInWithPassword and signUp."""

    email: str
    password: str
    return_secure_token: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "email": self.email,
            "password": self.password,
            "returnSecureToken": self.return_secure_token,
        }


@dataclass
class SignInWithIdpBody:
    """
    Body for signInWithIdp.

    Attributes:
        request_uri: URI the IdP redirected back to
        post_body: Encoded bearer credential (see BearerCredential.to_post_body)
    """

    request_uri: str
    post_body: str
    return_secure_token: bool = True
    return_idp_credential: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "requestUri": self.request_uri,
            "postBody": self.post_body,
            "returnSecureToken": self.return_secure_token,
            "returnIdpCredential": self.return_idp_credential,
        }


@dataclass
class OobRequest:
    """Minimal ``{requestType, idToken}`` body for account management calls."""

    request_type: str
    id_token: str

    def to_dict(self) -> Dict[str, Any]:
        return {"requestType": self.request_type, "idToken": self.id_token}


@dataclass
class LoginResponse:
    """
    Successful signInWithPassword response.

    Attributes:
        kind: Response kind tag
        local_id: UID of the signed-in user
        email: Email of the signed-in user
        display_name: Display name (empty if the account has none)
        id_token: ID token for the user
        refresh_token: Refresh token for the ID token
        expires_in: ID token lifetime in seconds (as sent by the backend)
        registered: Whether the email is for an existing account
    """

    kind: str
    local_id: str
    email: str
    display_name: str
    id_token: str
    refresh_token: str
    expires_in: str
    registered: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoginResponse":
        return cls(
            kind=data.get("kind", ""),
            local_id=data["localId"],
            email=data["email"],
            display_name=data.get("displayName", ""),
            id_token=data["idToken"],
            refresh_token=data["refreshToken"],
            expires_in=data["expiresIn"],
            registered=data.get("registered", True),
        )


@dataclass
class RegisterResponse:
    """Successful signUp response."""

    kind: str
    local_id: str
    email: str
    id_token: str
    refresh_token: str
    expires_in: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RegisterResponse":
        return cls(
            kind=data.get("kind", ""),
            local_id=data["localId"],
            email=data["email"],
            id_token=data["idToken"],
            refresh_token=data["refreshToken"],
            expires_in=data["expiresIn"],
        )


@dataclass
class SignInWithIdpResponse:
    """
    Successful signInWithIdp response.

    Only the fields needed to continue a session are kept; the backend
    returns many more IdP-specific attributes.
    """

    email: str
    local_id: str
    refresh_token: str
    full_name: Optional[str] = None
    id_token: Optional[str] = None
    provider_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SignInWithIdpResponse":
        return cls(
            email=data["email"],
            local_id=data["localId"],
            refresh_token=data["refreshToken"],
            full_name=data.get("fullName"),
            id_token=data.get("idToken"),
            provider_id=data.get("providerId"),
        )


@dataclass
class RefreshTokenResponse:
    """Successful secure token response (snake_case on the wire)."""

    id_token: str
    refresh_token: str
    expires_in: str
    token_type: str
    user_id: str
    project_id: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RefreshTokenResponse":
        return cls(
            id_token=data["id_token"],
            refresh_token=data["refresh_token"],
            expires_in=data["expires_in"],
            token_type=data.get("token_type", "Bearer"),
            user_id=data["user_id"],
            project_id=data.get("project_id", ""),
        )
