"""
Yodlee REST API Client.

Provides:
- Cobrand and end-user authentication
- Site account listing
- Transaction search
- User registration
- Detection of the error envelopes Yodlee returns with HTTP 200

Every failure is raised as a YodleeError subclass.
"""

from .client import DEFAULT_BASE_URL, YodleeClient
from .envelopes import (
    ERROR_CANDIDATES,
    Classification,
    ErrorEnvelope,
    ErrorInfo,
    ErrorOccurredMessage,
    MultipleErrorInfo,
    classify,
)
from .errors import (
    NoSessionTokenError,
    YodleeAPIError,
    YodleeConnectionError,
    YodleeDecodeError,
    YodleeError,
    YodleeHTTPError,
)
from .models import (
    Credentials,
    Money,
    RegisterResult,
    SiteAccount,
    Transaction,
    TransactionSearchParams,
    TransactionSearchResult,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "YodleeClient",
    "ERROR_CANDIDATES",
    "Classification",
    "ErrorEnvelope",
    "ErrorInfo",
    "ErrorOccurredMessage",
    "MultipleErrorInfo",
    "classify",
    "NoSessionTokenError",
    "YodleeAPIError",
    "YodleeConnectionError",
    "YodleeDecodeError",
    "YodleeError",
    "YodleeHTTPError",
    "Credentials",
    "Money",
    "RegisterResult",
    "SiteAccount",
    "Transaction",
    "TransactionSearchParams",
    "TransactionSearchResult",
]
