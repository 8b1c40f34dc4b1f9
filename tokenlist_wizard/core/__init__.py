"""Core module - data models, types, validation and exceptions."""

from .models import (
    AuditEntry,
    IconUrls,
    InterchainTokenConfig,
    InterchainTokenDetails,
    InterchainTokenInfo,
    InterchainTokenSearchResult,
    RemoteInterchainToken,
    RemoteTokenConfig,
    TokenDetailsUrl,
)
from .types import DataSource, Environment
from .validation import parse_address, parse_hash
from .exceptions import (
    TokenListingError,
    DataSourceError,
    ValidationError,
    ConfigurationError,
    InvalidTokenUrlError,
    TokenListNotFoundError,
    TokenListFormatError,
    DuplicateTokenError,
    PublishError,
    IconWriteError,
)

__all__ = [
    # Models
    "AuditEntry",
    "IconUrls",
    "InterchainTokenConfig",
    "InterchainTokenDetails",
    "InterchainTokenInfo",
    "InterchainTokenSearchResult",
    "RemoteInterchainToken",
    "RemoteTokenConfig",
    "TokenDetailsUrl",
    # Types
    "DataSource",
    "Environment",
    # Validation
    "parse_address",
    "parse_hash",
    # Exceptions
    "TokenListingError",
    "DataSourceError",
    "ValidationError",
    "ConfigurationError",
    "InvalidTokenUrlError",
    "TokenListNotFoundError",
    "TokenListFormatError",
    "DuplicateTokenError",
    "PublishError",
    "IconWriteError",
]
