"""
Identity Toolkit endpoint definitions.

Paths are relative to IdentityToolkitConfig.base_url. Every call carries
the project's API key as the ``key`` query parameter.
"""

# Password authentication
SIGN_IN_WITH_PASSWORD = "/accounts:signInWithPassword"
SIGN_UP = "/accounts:signUp"

# Federated authentication
SIGN_IN_WITH_IDP = "/accounts:signInWithIdp"

# Account management
SEND_OOB_CODE = "/accounts:sendOobCode"
DELETE_ACCOUNT = "/accounts:delete"

# Out-of-band request types
REQUEST_TYPE_VERIFY_EMAIL = "VERIFY_EMAIL"
REQUEST_TYPE_DELETE_ACCOUNT = "DELETE_ACCOUNT"
