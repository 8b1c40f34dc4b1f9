"""Custom exceptions for the token listing wizard."""

from pathlib import Path


class TokenListingError(Exception):
    """Base exception for all token listing wizard errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DataSourceError(TokenListingError):
    """Raised when the interchain API fails or returns invalid data."""

    def __init__(
        self,
        source: str,
        message: str,
        endpoint: str | None = None,
        status_code: int | None = None,
    ):
        full_message = f"[{source}] {message}"
        super().__init__(
            full_message,
            {
                "source": source,
                "endpoint": endpoint,
                "status_code": status_code,
            },
        )
        self.source = source
        self.endpoint = endpoint
        self.status_code = status_code


class ValidationError(TokenListingError):
    """Raised when a hash or address fails format validation."""

    def __init__(self, field: str, value: object, reason: str):
        message = f"Validation failed for {field}={value!r}: {reason}"
        super().__init__(message, {"field": field, "value": value, "reason": reason})
        self.field = field
        self.value = value
        self.reason = reason


class ConfigurationError(TokenListingError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, message: str):
        full_message = f"Configuration error [{config_key}]: {message}"
        super().__init__(full_message, {"config_key": config_key})
        self.config_key = config_key


class InvalidTokenUrlError(TokenListingError):
    """Raised when a token details URL does not have the expected shape."""

    def __init__(self, url: str, reason: str):
        message = f"Invalid token details URL '{url}': {reason}"
        super().__init__(message, {"url": url, "reason": reason})
        self.url = url
        self.reason = reason


class TokenListNotFoundError(TokenListingError):
    """Raised when the token list file for an environment does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Token list not found: {path}", {"path": str(path)})
        self.path = path


class TokenListFormatError(TokenListingError):
    """Raised when a token list file cannot be parsed as a token list."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Malformed token list {path}: {reason}",
            {"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class DuplicateTokenError(TokenListingError):
    """Raised when a token id or address is already present in a token list."""

    def __init__(self, token_id: str, token_address: str, path: Path):
        message = (
            f"Token already exists in {path} "
            f"(tokenId={token_id}, tokenAddress={token_address})"
        )
        super().__init__(
            message,
            {"token_id": token_id, "token_address": token_address, "path": str(path)},
        )
        self.token_id = token_id
        self.token_address = token_address
        self.path = path


class PublishError(TokenListingError):
    """Raised when a version-control command fails during publishing."""

    def __init__(self, command: list[str], returncode: int, stderr: str = ""):
        message = f"Command failed ({returncode}): {' '.join(command)}"
        if stderr:
            message += f"\n{stderr.strip()}"
        super().__init__(
            message,
            {"command": command, "returncode": returncode, "stderr": stderr},
        )
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class IconWriteError(TokenListingError):
    """Raised when a token icon cannot be created."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot write token icon {path}: {reason}",
            {"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason
