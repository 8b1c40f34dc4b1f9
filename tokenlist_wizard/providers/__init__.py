"""Data providers for the token listing wizard."""

from .base import BaseProvider
from .interchain_api import InterchainTokenAPI

__all__ = ["BaseProvider", "InterchainTokenAPI"]
