"""Listing logic: URL parsing and record construction."""

from .transform import parse_as_interchain_token_config, icon_url_for_symbol
from .url_parser import (
    extract_base_url,
    extract_token_address,
    get_environment_from_url,
    parse_token_details_url,
)

__all__ = [
    "parse_as_interchain_token_config",
    "icon_url_for_symbol",
    "extract_base_url",
    "extract_token_address",
    "get_environment_from_url",
    "parse_token_details_url",
]
