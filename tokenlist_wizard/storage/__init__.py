"""Storage module for the squid token lists."""

from .tokenlist_store import TokenListStore, find_existing_token, token_list_relative_path

__all__ = ["TokenListStore", "find_existing_token", "token_list_relative_path"]
