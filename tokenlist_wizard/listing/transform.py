"""Conversion of interchain API token details into token list records."""

from ..core.config import DEFAULT_ICON_BASE_URL
from ..core.models import (
    IconUrls,
    InterchainTokenConfig,
    InterchainTokenDetails,
    RemoteTokenConfig,
)
from ..core.validation import parse_address, parse_hash


def icon_url_for_symbol(symbol: str, icon_base_url: str = DEFAULT_ICON_BASE_URL) -> str:
    """Icon location for a symbol; the file is not required to exist yet."""
    return f"{icon_base_url.rstrip('/')}/images/tokens/{symbol.lower()}.svg"


def parse_as_interchain_token_config(
    data: InterchainTokenDetails,
    icon_base_url: str = DEFAULT_ICON_BASE_URL,
) -> InterchainTokenConfig:
    """
    Build the token list record for a registered interchain token.

    The token id, token address and every remote token address are format
    checked; the first malformed value raises ValidationError.

    Args:
        data: Details endpoint response
        icon_base_url: Base URL for the iconUrls.svg entry

    Returns:
        InterchainTokenConfig ready to append to a token list
    """
    return InterchainTokenConfig(
        token_id=parse_hash(data.token_id, "tokenId"),
        token_address=parse_address(data.token_address, "tokenAddress"),
        symbol=data.token_symbol,
        pretty_symbol=data.token_symbol,
        decimals=data.token_decimals,
        name=data.token_name,
        origin_chain_id=str(data.chain_id),
        origin_axelar_chain_id=data.axelar_chain_id,
        transfer_type=data.kind,
        icon_urls=IconUrls(svg=icon_url_for_symbol(data.token_symbol, icon_base_url)),
        remote_tokens=[
            RemoteTokenConfig(
                axelar_chain_id=token.axelar_chain_id,
                chain_id=str(token.chain_id),
                token_address=parse_address(
                    token.address, f"remoteTokens[{index}].address"
                ),
            )
            for index, token in enumerate(data.remote_tokens)
        ],
    )
