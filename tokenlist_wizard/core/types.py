"""Type definitions and enums for the token listing wizard."""

from enum import Enum


class Environment(str, Enum):
    """Target network of a token list."""

    MAINNET = "mainnet"
    TESTNET = "testnet"


class DataSource(str, Enum):
    """Data source identifiers used in audit entries."""

    INTERCHAIN_API = "interchain_api"
    UNKNOWN = "unknown"
