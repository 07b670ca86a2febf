"""
Supported identity providers and federated credentials.

Provider values are the wire identifiers the identity backend uses
("google.com", "facebook.com", "apple.com"). Resolution from a wire string
is strict: an unrecognised identifier raises UnknownProviderError instead
of falling back to a default.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .exceptions import UnknownProviderError


class Provider(Enum):
    """Federated identity providers accepted by signInWithIdp."""

    GOOGLE = "google.com"
    FACEBOOK = "facebook.com"
    APPLE = "apple.com"

    @property
    def wire_id(self) -> str:
        return self.value

    @classmethod
    def from_wire_id(cls, wire_id: str) -> "Provider":
        """
        Resolve a provider from its wire identifier.

        Raises:
            UnknownProviderError: If no provider uses this identifier
        """
        for provider in cls:
            if provider.value == wire_id:
                return provider
        raise UnknownProviderError(wire_id)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AuthorizationCode:
    """
    One-time code issued by a provider's authorization endpoint.

    Attributes:
        code: Opaque code from the OAuth redirect
        provider: Provider that issued the code
    """

    code: str
    provider: Provider

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthorizationCode":
        return cls(code=data["code"], provider=Provider.from_wire_id(data["provider"]))


@dataclass(frozen=True)
class BearerCredential:
    """
    Provider credential ready to be handed to signInWithIdp.

    Attributes:
        token: ID token (Google, Apple) or access token (Facebook)
        provider: Provider that issued the token
        nonce: Raw nonce for Apple sign-in, unused by other providers
    """

    token: str
    provider: Provider
    nonce: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BearerCredential":
        return cls(
            token=data["token"],
            provider=Provider.from_wire_id(data["provider"]),
            nonce=data.get("nonce"),
        )

    def to_post_body(self, provider_id: Optional[str] = None) -> str:
        """
        Encode the credential as the signInWithIdp ``postBody`` string.

        Facebook credentials are sent as ``access_token``, the others as
        ``id_token``. Apple additionally carries its nonce, empty if unset.

        Args:
            provider_id: Override for the providerId field; falls back to
                         the provider's wire identifier when empty

        Returns:
            Form-style credential string
        """
        provider_id = provider_id or self.provider.wire_id

        if self.provider is Provider.FACEBOOK:
            return f"access_token={self.token}&providerId={provider_id}"
        if self.provider is Provider.APPLE:
            return f"id_token={self.token}&providerId={provider_id}&nonce={self.nonce or ''}"
        return f"id_token={self.token}&providerId={provider_id}"

    def __str__(self) -> str:
        return self.to_post_body()
