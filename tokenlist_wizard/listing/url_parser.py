"""Parsing of ITS portal token details URLs.

A details URL looks like https://interchain.axelar.dev/avalanche/0x1234...
The trailing path segment is the token address; the scheme and host select
both the API to query and the environment of the token list.
"""

import logging
import re

from ..core.config import DEFAULT_MAINNET_ORIGIN
from ..core.exceptions import InvalidTokenUrlError
from ..core.models import TokenDetailsUrl
from ..core.types import Environment

logger = logging.getLogger(__name__)

TOKEN_ADDRESS_PATTERN = re.compile(r"/(0x[0-9a-f]+)$", re.IGNORECASE)
BASE_URL_PATTERN = re.compile(r"^(https?://[^/]+)", re.IGNORECASE)


def extract_token_address(url: str) -> str | None:
    """Return the trailing 0x-prefixed hex segment, keeping its original case."""
    match = TOKEN_ADDRESS_PATTERN.search(url)
    return match.group(1) if match else None


def extract_base_url(url: str) -> str | None:
    """Return the scheme and host prefix of a URL."""
    match = BASE_URL_PATTERN.match(url)
    return match.group(1) if match else None


def get_environment_from_url(
    url: str,
    mainnet_origin: str = DEFAULT_MAINNET_ORIGIN,
) -> Environment:
    """Classify a URL as mainnet when its origin is the production portal."""
    base_url = extract_base_url(url)
    if base_url and base_url.lower() == mainnet_origin.rstrip("/").lower():
        return Environment.MAINNET
    return Environment.TESTNET


def parse_token_details_url(
    url: str,
    mainnet_origin: str = DEFAULT_MAINNET_ORIGIN,
) -> TokenDetailsUrl:
    """
    Parse a token details URL into its components.

    Args:
        url: URL as typed by the user (surrounding whitespace is ignored)
        mainnet_origin: Origin of the production portal

    Returns:
        TokenDetailsUrl with environment, API base URL and token address

    Raises:
        InvalidTokenUrlError: If the base URL or token address is missing
    """
    url = url.strip()
    if not url:
        raise InvalidTokenUrlError(url, "URL is empty")

    base_url = extract_base_url(url)
    if base_url is None:
        raise InvalidTokenUrlError(url, "expected an http(s) URL")

    token_address = extract_token_address(url)
    if token_address is None:
        raise InvalidTokenUrlError(
            url, "expected the path to end with a 0x-prefixed token address"
        )

    environment = get_environment_from_url(url, mainnet_origin)
    logger.debug(f"Parsed {url}: {environment.value} {base_url} {token_address}")

    return TokenDetailsUrl(
        url=url,
        environment=environment,
        base_url=base_url,
        token_address=token_address,
    )
