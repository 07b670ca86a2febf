"""
OAuth exception classes for federated sign-in.

Code exchange failures are terminal for the call that raised them; nothing
is retried. MissingParameterError names the missing key so configuration
can be fixed precisely.
"""


class UnknownProviderError(ValueError):
    """A wire identifier did not match any supported provider."""

    def __init__(self, wire_id: str):
        super().__init__(f"Unknown provider: {wire_id}")
        self.wire_id = wire_id


class CodeExchangeError(Exception):
    """Base exception for authorization code exchange errors."""

    pass


class UnsupportedProviderError(CodeExchangeError):
    """The provider has no registered code exchanger."""

    def __init__(self, provider):
        super().__init__(f"No code exchanger registered for provider {provider.wire_id}")
        self.provider = provider


class MissingParameterError(CodeExchangeError):
    """A parameter required by the provider's exchanger is missing."""

    def __init__(self, key: str):
        super().__init__(f"URL param error: {key} key is not found in info")
        self.key = key


class ExchangeTransportError(CodeExchangeError):
    """The token request could not be sent or no response was received."""

    pass


class ExchangeDecodeError(CodeExchangeError):
    """The provider's token response could not be decoded."""

    pass
