"""
Configuration for the Identity Toolkit client.

Configuration can be loaded from environment variables or provided
programmatically.
"""

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://identitytoolkit.googleapis.com/v1"
DEFAULT_TOKEN_URL = "https://securetoken.googleapis.com/v1/token"


@dataclass
class IdentityToolkitConfig:
    """
    Configuration for IdentityToolkitClient.

    Attributes:
        api_key: Web API key of the identity project
        base_url: Base URL of the accounts API
        token_url: Secure token endpoint used to refresh ID tokens
        timeout: Request timeout in seconds
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    token_url: str = DEFAULT_TOKEN_URL
    timeout: int = 30

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.api_key:
            raise ConfigurationError("api_key cannot be empty")

        for name in ("base_url", "token_url"):
            value = getattr(self, name)
            if not value or not value.startswith(("http://", "https://")):
                raise ConfigurationError(f"{name} must be an http(s) URL, got {value!r}")

        if not isinstance(self.timeout, int) or isinstance(self.timeout, bool):
            raise ConfigurationError(
                f"timeout must be an integer, got {type(self.timeout).__name__}"
            )

        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

        self.base_url = self.base_url.rstrip("/")

    @classmethod
    def from_env(cls) -> "IdentityToolkitConfig":
        """
        Load configuration from environment variables.

        Required environment variables:
            IDENTITY_TOOLKIT_API_KEY: Web API key

        Optional environment variables:
            IDENTITY_TOOLKIT_BASE_URL: Accounts API base URL
            IDENTITY_TOOLKIT_TOKEN_URL: Secure token endpoint
            IDENTITY_TOOLKIT_TIMEOUT: Request timeout in seconds (default: 30)

        Returns:
            IdentityToolkitConfig instance

        Raises:
            ConfigurationError: If the API key is missing or a value is invalid
        """
        api_key = os.environ.get("IDENTITY_TOOLKIT_API_KEY")
        if not api_key:
            raise ConfigurationError(
                "Missing Identity Toolkit API key. Set environment variable:\n"
                "  IDENTITY_TOOLKIT_API_KEY=your_web_api_key"
            )

        timeout = os.environ.get("IDENTITY_TOOLKIT_TIMEOUT", "30")
        try:
            timeout_seconds = int(timeout)
        except ValueError as e:
            raise ConfigurationError(
                f"IDENTITY_TOOLKIT_TIMEOUT must be an integer, got {timeout!r}"
            ) from e

        return cls(
            api_key=api_key,
            base_url=os.environ.get("IDENTITY_TOOLKIT_BASE_URL", DEFAULT_BASE_URL),
            token_url=os.environ.get("IDENTITY_TOOLKIT_TOKEN_URL", DEFAULT_TOKEN_URL),
            timeout=timeout_seconds,
        )
