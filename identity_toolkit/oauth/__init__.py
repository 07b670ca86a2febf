"""
Federated sign-in support.

This module turns provider authorization codes into bearer credentials
that the identity backend accepts through signInWithIdp.

Public API:
    Provider: Supported identity providers and their wire identifiers
    AuthorizationCode: Code issued by a provider's authorization endpoint
    BearerCredential: Provider token encoded for signInWithIdp
    OAuthCodeExchanger: Dispatches a code to its provider's exchanger
    GoogleCodeExchanger, FacebookCodeExchanger: Provider exchangers
    load_provider_params: Exchanger parameters from environment variables

Exceptions:
    UnknownProviderError: Unrecognised provider wire identifier
    CodeExchangeError: Base exchange exception
    UnsupportedProviderError: Provider has no exchanger
    MissingParameterError: Required exchanger parameter is missing
    ExchangeTransportError: Provider could not be reached
    ExchangeDecodeError: Provider response could not be decoded
"""

from .config import load_provider_params
from .exceptions import (
    CodeExchangeError,
    ExchangeDecodeError,
    ExchangeTransportError,
    MissingParameterError,
    UnknownProviderError,
    UnsupportedProviderError,
)
from .exchanger import (
    EXCHANGERS,
    FacebookCodeExchanger,
    GoogleCodeExchanger,
    OAuthCodeExchanger,
)
from .providers import AuthorizationCode, BearerCredential, Provider

__all__ = [
    # Providers
    "Provider",
    "AuthorizationCode",
    "BearerCredential",
    # Exchangers
    "EXCHANGERS",
    "OAuthCodeExchanger",
    "GoogleCodeExchanger",
    "FacebookCodeExchanger",
    # Configuration
    "load_provider_params",
    # Exceptions
    "UnknownProviderError",
    "CodeExchangeError",
    "UnsupportedProviderError",
    "MissingParameterError",
    "ExchangeTransportError",
    "ExchangeDecodeError",
]
