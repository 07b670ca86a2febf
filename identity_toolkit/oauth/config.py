"""
Provider parameters for code exchange, loaded from environment variables.

For a provider named GOOGLE the variables are GOOGLE_CLIENT_ID,
GOOGLE_CLIENT_SECRET and GOOGLE_REDIRECT_URI. Only variables that are set
end up in the returned mapping; the exchanger reports which required key
is missing.
"""

import os
from typing import Dict, Mapping, Optional

from .providers import Provider

PARAMETER_KEYS = ("client_id", "client_secret", "redirect_uri")


def load_provider_params(
    provider: Provider, environ: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """
    Build the exchanger parameter mapping for a provider.

    Args:
        provider: Provider whose parameters to load
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Dictionary with the subset of client_id, client_secret and
        redirect_uri that is configured
    """
    environ = os.environ if environ is None else environ
    prefix = provider.name

    params = {}
    for key in PARAMETER_KEYS:
        value = environ.get(f"{prefix}_{key.upper()}")
        if value:
            params[key] = value
    return params
