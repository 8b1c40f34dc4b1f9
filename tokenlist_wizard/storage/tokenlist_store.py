"""
JSON storage for the squid token lists.

Token lists live in the chain-configs checkout at
registry/{environment}/interchain/squid.tokenlist.json and icons at
images/tokens/{symbol}.svg. Files are read and rewritten in place.
"""

import json
import logging
import re
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.exceptions import (
    DuplicateTokenError,
    IconWriteError,
    TokenListFormatError,
    TokenListNotFoundError,
)
from ..core.models import InterchainTokenConfig
from ..core.types import Environment

logger = logging.getLogger(__name__)

TOKEN_LIST_FILENAME = "squid.tokenlist.json"
ICON_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._+-]*$")


def token_list_relative_path(environment: Environment) -> Path:
    """Path of an environment's token list relative to the registry root."""
    return Path("registry") / environment.value / "interchain" / TOKEN_LIST_FILENAME


def find_existing_token(
    tokens: List[Dict[str, Any]],
    record: InterchainTokenConfig,
) -> Optional[Dict[str, Any]]:
    """Return the first entry sharing the record's token id or token address.

    Hex identifiers are compared case-insensitively.
    """
    token_id = record.token_id.lower()
    token_address = record.token_address.lower()
    for token in tokens:
        if (
            str(token.get("tokenAddress", "")).lower() == token_address
            or str(token.get("tokenId", "")).lower() == token_id
        ):
            return token
    return None


class TokenListStore:
    """
    Read-modify-write access to the squid token lists.

    Usage:
        store = TokenListStore(Path("public-chain-configs"))

        # Append a record, raising DuplicateTokenError if it is already listed
        path = store.append(Environment.MAINNET, record)

        # Create the placeholder icon for it
        store.write_placeholder_icon(record.symbol)
    """

    def __init__(self, root: Optional[Path] = None, placeholder_icon: str = "axl.svg"):
        """Initialize store with the registry checkout root."""
        self.root = Path(root) if root is not None else Path.cwd()
        self.placeholder_icon = placeholder_icon

    @property
    def icons_dir(self) -> Path:
        return self.root / "images" / "tokens"

    def get_path(self, environment: Environment) -> Path:
        """Get the token list path for an environment."""
        return self.root / token_list_relative_path(environment)

    def load(self, environment: Environment) -> Dict[str, Any]:
        """
        Load an environment's token list document.

        Raises TokenListNotFoundError if the file is missing and
        TokenListFormatError if it is not a JSON object with a tokens list.
        """
        path = self.get_path(environment)

        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError:
            raise TokenListNotFoundError(path)
        except json.JSONDecodeError as e:
            raise TokenListFormatError(path, f"invalid JSON: {e}")

        if not isinstance(document, dict) or not isinstance(document.get("tokens"), list):
            raise TokenListFormatError(path, "expected an object with a 'tokens' array")

        return document

    def find_existing(
        self,
        environment: Environment,
        record: InterchainTokenConfig,
    ) -> Optional[Dict[str, Any]]:
        """Return the listed token clashing with record, if any."""
        return find_existing_token(self.load(environment)["tokens"], record)

    def exists(self, environment: Environment, record: InterchainTokenConfig) -> bool:
        """Check if the record's token id or address is already listed."""
        return self.find_existing(environment, record) is not None

    def append(self, environment: Environment, record: InterchainTokenConfig) -> Path:
        """
        Append a record to an environment's token list.

        Other top-level keys and the order of existing tokens are kept.
        Nothing is written when the token is already listed.

        Returns the path to the saved file.
        """
        path = self.get_path(environment)
        document = self.load(environment)

        if find_existing_token(document["tokens"], record) is not None:
            raise DuplicateTokenError(record.token_id, record.token_address, path)

        updated = {**document, "tokens": [*document["tokens"], record.to_dict()]}

        with open(path, "w", encoding="utf-8") as f:
            f.write(json.dumps(updated, indent=2, ensure_ascii=False))

        logger.info(f"Added {record.symbol} to {path} ({len(updated['tokens'])} tokens)")
        return path

    def icon_path(self, symbol: str) -> Path:
        """Get the icon path for a token symbol.

        Raises IconWriteError if the symbol is not usable as a file name.
        """
        path = self.icons_dir / f"{symbol.lower()}.svg"
        if not ICON_NAME_PATTERN.match(symbol):
            raise IconWriteError(path, f"symbol {symbol!r} is not a valid file name")
        return path

    def check_icon(self, symbol: str) -> Path:
        """Ensure the icon for symbol can be created; returns its path."""
        target = self.icon_path(symbol)
        source = self.icons_dir / self.placeholder_icon
        if not source.is_file():
            raise IconWriteError(target, f"placeholder icon {source} not found")
        return target

    def write_placeholder_icon(self, symbol: str) -> Path:
        """Copy the placeholder icon to the symbol's icon path."""
        target = self.check_icon(symbol)
        source = self.icons_dir / self.placeholder_icon
        if target == source:
            return target
        try:
            shutil.copyfile(source, target)
        except OSError as e:
            raise IconWriteError(target, e.strerror or str(e))
        logger.info(f"Created placeholder icon {target}")
        return target
