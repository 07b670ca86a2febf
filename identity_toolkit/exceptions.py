"""
Exception classes for the Identity Toolkit client.

Every facade operation fails with exactly one exception type, and that
exception always carries a reason from the operation's own taxonomy
(see errors.py). Transport failures and malformed response bodies are
reported with the taxonomy's UNKNOWN reason rather than leaking the
underlying requests/JSON error.
"""

from .errors import (
    AccountErrorReason,
    LoginErrorReason,
    RefreshTokenErrorReason,
    RegisterErrorReason,
)


class IdentityToolkitError(Exception):
    """Base exception for all Identity Toolkit client errors."""

    pass


class ConfigurationError(IdentityToolkitError):
    """Client configuration error (missing or invalid configuration)."""

    pass


class LoginError(IdentityToolkitError):
    """
    Password or federated sign-in was rejected.

    Attributes:
        reason: LoginErrorReason describing the failure
    """

    def __init__(self, reason: LoginErrorReason):
        super().__init__(reason.value)
        self.reason = reason


class RegisterError(IdentityToolkitError):
    """Account registration was rejected."""

    def __init__(self, reason: RegisterErrorReason):
        super().__init__(reason.value)
        self.reason = reason


class AccountError(IdentityToolkitError):
    """Account management call (verification email, deletion) was rejected."""

    def __init__(self, reason: AccountErrorReason):
        super().__init__(reason.value)
        self.reason = reason


class RefreshTokenError(IdentityToolkitError):
    """Exchanging a refresh token for a new ID token was rejected."""

    def __init__(self, reason: RefreshTokenErrorReason):
        super().__init__(reason.value)
        self.reason = reason
