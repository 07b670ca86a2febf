"""
Error taxonomy and error envelope decoding.

The identity backend answers every failed request with the same envelope:

    {"error": {"errors": [{"domain": ..., "reason": ..., "message": ...}],
               "code": 400,
               "message": "EMAIL_NOT_FOUND"}}

Only the top-level ``message`` is interpreted. It is looked up in one of
four independent tables, one per operation family, because the same
reason string can mean different things depending on which call failed.
Any reason string missing from a table maps to that table's UNKNOWN member.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class LoginErrorReason(Enum):
    """Failure reasons for password and federated sign-in."""

    EMAIL_NOT_FOUND = "Email not found"
    INVALID_PASSWORD = "Invalid password"
    USER_DISABLED = "User disabled"
    OPERATION_NOT_ALLOWED = "Operation not allowed"
    TOO_MANY_ATTEMPTS = "Too many attempts"
    UNKNOWN = "Unknown"


class RegisterErrorReason(Enum):
    """Failure reasons for account registration."""

    EMAIL_EXISTS = "Email exists"
    OPERATION_NOT_ALLOWED = "Operation not allowed"
    TOO_MANY_ATTEMPTS = "Too many attempts"
    UNKNOWN = "Unknown"


class AccountErrorReason(Enum):
    """Failure reasons for account management calls."""

    INVALID_ID_TOKEN = "Invalid Id token"
    USER_NOT_FOUND = "User not found"
    UNKNOWN = "Unknown error"


class RefreshTokenErrorReason(Enum):
    """Failure reasons for refresh token exchange."""

    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    USER_DISABLED = "USER_DISABLED"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_REFRESH_TOKEN = "INVALID_REFRESH_TOKEN"
    INVALID_GRANT_TYPE = "INVALID_GRANT_TYPE"
    UNKNOWN = "Unknown error"


LOGIN_REASONS: Dict[str, LoginErrorReason] = {
    "EMAIL_NOT_FOUND": LoginErrorReason.EMAIL_NOT_FOUND,
    "INVALID_PASSWORD": LoginErrorReason.INVALID_PASSWORD,
    "USER_DISABLED": LoginErrorReason.USER_DISABLED,
    "OPERATION_NOT_ALLOWED": LoginErrorReason.OPERATION_NOT_ALLOWED,
    "TOO_MANY_ATTEMPTS_TRY_LATER": LoginErrorReason.TOO_MANY_ATTEMPTS,
}

REGISTER_REASONS: Dict[str, RegisterErrorReason] = {
    "EMAIL_EXISTS": RegisterErrorReason.EMAIL_EXISTS,
    "OPERATION_NOT_ALLOWED": RegisterErrorReason.OPERATION_NOT_ALLOWED,
    "TOO_MANY_ATTEMPTS_TRY_LATER": RegisterErrorReason.TOO_MANY_ATTEMPTS,
}

ACCOUNT_REASONS: Dict[str, AccountErrorReason] = {
    "INVALID_ID_TOKEN": AccountErrorReason.INVALID_ID_TOKEN,
    "USER_NOT_FOUND": AccountErrorReason.USER_NOT_FOUND,
}

REFRESH_TOKEN_REASONS: Dict[str, RefreshTokenErrorReason] = {
    "TOKEN_EXPIRED": RefreshTokenErrorReason.TOKEN_EXPIRED,
    "USER_DISABLED": RefreshTokenErrorReason.USER_DISABLED,
    "USER_NOT_FOUND": RefreshTokenErrorReason.USER_NOT_FOUND,
    "INVALID_REFRESH_TOKEN": RefreshTokenErrorReason.INVALID_REFRESH_TOKEN,
    "INVALID_GRANT_TYPE": RefreshTokenErrorReason.INVALID_GRANT_TYPE,
}


@dataclass
class ErrorDetail:
    """One informational entry of the envelope's ``errors`` list."""

    domain: str = ""
    reason: str = ""
    message: str = ""


@dataclass
class ErrorEnvelope:
    """
    Decoded failure response from the identity backend.

    Attributes:
        code: HTTP-like status code echoed by the backend
        message: Reason string (e.g. "EMAIL_NOT_FOUND"), the only field
                 used for mapping
        errors: Informational sub-errors, never interpreted
    """

    code: int
    message: str
    errors: List[ErrorDetail] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ErrorEnvelope":
        """
        Build an envelope from the decoded ``{"error": {...}}`` document.

        Raises:
            KeyError: If the error object or a required field is missing
            TypeError: If a field has the wrong type
        """
        error = data["error"]
        message = error["message"]
        code = error["code"]
        if not isinstance(message, str):
            raise TypeError(f"error.message must be a string, got {type(message).__name__}")
        if not isinstance(code, int) or isinstance(code, bool):
            raise TypeError(f"error.code must be an integer, got {type(code).__name__}")

        details = []
        for entry in error.get("errors", []):
            details.append(
                ErrorDetail(
                    domain=entry.get("domain", ""),
                    reason=entry.get("reason", ""),
                    message=entry.get("message", ""),
                )
            )

        return cls(code=code, message=message, errors=details)

    def login_error(self) -> LoginErrorReason:
        return LOGIN_REASONS.get(self.message, LoginErrorReason.UNKNOWN)

    def register_error(self) -> RegisterErrorReason:
        return REGISTER_REASONS.get(self.message, RegisterErrorReason.UNKNOWN)

    def account_error(self) -> AccountErrorReason:
        return ACCOUNT_REASONS.get(self.message, AccountErrorReason.UNKNOWN)

    def refresh_token_error(self) -> RefreshTokenErrorReason:
        return REFRESH_TOKEN_REASONS.get(self.message, RefreshTokenErrorReason.UNKNOWN)


def parse_error_envelope(body: Optional[str]) -> Optional[ErrorEnvelope]:
    """
    Parse a failure response body into an ErrorEnvelope.

    This never raises: a body that is not a well-formed envelope returns
    None, and the caller substitutes its operation's UNKNOWN reason.

    Args:
        body: Raw response text

    Returns:
        ErrorEnvelope, or None if the body cannot be decoded
    """
    if not body:
        return None

    try:
        data = json.loads(body)
        return ErrorEnvelope.from_dict(data)
    except (ValueError, KeyError, TypeError, AttributeError, RecursionError) as e:
        logger.debug(f"Could not decode error envelope: {e}")
        return None
