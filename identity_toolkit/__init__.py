"""
Identity Toolkit client.

Password login and registration, federated sign-in and account management
against the Identity Toolkit REST API, with failures translated into
per-operation exception types.

Public API:
    IdentityToolkitClient: Client for the accounts API
    IdentityToolkitConfig: Client configuration
    ErrorEnvelope, parse_error_envelope: Error response decoding

Exceptions:
    IdentityToolkitError: Base exception
    ConfigurationError: Configuration error
    LoginError, RegisterError, AccountError, RefreshTokenError:
        Operation failures, each carrying a ``reason``
"""

from .client import IdentityToolkitClient
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
    ConfigurationError,
    IdentityToolkitError,
    LoginError,
    RefreshTokenError,
    RegisterError,
)
from .models import (
    LoginResponse,
    RefreshTokenResponse,
    RegisterResponse,
    SignInWithIdpResponse,
)

__all__ = [
    # Client
    "IdentityToolkitClient",
    "IdentityToolkitConfig",
    # Responses
    "LoginResponse",
    "RegisterResponse",
    "SignInWithIdpResponse",
    "RefreshTokenResponse",
    # Error decoding
    "ErrorEnvelope",
    "parse_error_envelope",
    "LoginErrorReason",
    "RegisterErrorReason",
    "AccountErrorReason",
    "RefreshTokenErrorReason",
    # Exceptions
    "IdentityToolkitError",
    "ConfigurationError",
    "LoginError",
    "RegisterError",
    "AccountError",
    "RefreshTokenError",
]
