"""Pydantic data models for the token listing wizard.

Remote models mirror the interchain API payloads (camelCase on the wire).
InterchainTokenConfig is the record persisted in squid.tokenlist.json;
its field order is the key order written to disk.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from .types import DataSource, Environment


class InterchainTokenInfo(BaseModel):
    """A token entry as returned by the search endpoint."""

    token_id: str | None = Field(default=None, alias="tokenId")
    token_address: str | None = Field(default=None, alias="tokenAddress")
    is_origin_token: bool | None = Field(default=None, alias="isOriginToken")
    is_registered: bool | None = Field(default=None, alias="isRegistered")
    chain_id: int | None = Field(default=None, alias="chainId")
    axelar_chain_id: str | None = Field(default=None, alias="axelarChainId")
    chain_name: str | None = Field(default=None, alias="chainName")
    was_deployed_by_account: bool | None = Field(default=None, alias="wasDeployedByAccount")
    kind: str | None = None

    model_config = {"frozen": True, "populate_by_name": True}


class InterchainTokenSearchResult(InterchainTokenInfo):
    """Search endpoint response: the best match plus all matching tokens."""

    chain_id: int = Field(alias="chainId")
    matching_tokens: list[InterchainTokenInfo] = Field(
        default_factory=list, alias="matchingTokens"
    )


class RemoteInterchainToken(BaseModel):
    """A deployment of the token on a remote chain."""

    chain_id: int = Field(alias="chainId")
    axelar_chain_id: str = Field(alias="axelarChainId")
    address: str
    deployment_status: str | None = Field(default=None, alias="deploymentStatus")
    deployment_tx_hash: str | None = Field(default=None, alias="deploymentTxHash")

    model_config = {"frozen": True, "populate_by_name": True}


class InterchainTokenDetails(BaseModel):
    """Details endpoint response for a registered interchain token."""

    kind: str
    salt: str | None = None
    token_name: str = Field(alias="tokenName")
    token_symbol: str = Field(alias="tokenSymbol")
    token_decimals: int = Field(alias="tokenDecimals")
    token_address: str = Field(alias="tokenAddress")
    chain_id: int = Field(alias="chainId")
    axelar_chain_id: str = Field(alias="axelarChainId")
    token_id: str = Field(alias="tokenId")
    deployment_tx_hash: str | None = Field(default=None, alias="deploymentTxHash")
    deployer_address: str | None = Field(default=None, alias="deployerAddress")
    remote_tokens: list[RemoteInterchainToken] = Field(
        default_factory=list, alias="remoteTokens"
    )

    model_config = {"frozen": True, "populate_by_name": True}


class IconUrls(BaseModel):
    """Icon locations for a listed token."""

    svg: str

    model_config = {"frozen": True}


class RemoteTokenConfig(BaseModel):
    """Remote chain entry inside a token list record."""

    axelar_chain_id: str = Field(alias="axelarChainId")
    chain_id: str = Field(alias="chainId")
    token_address: str = Field(alias="tokenAddress")

    model_config = {"frozen": True, "populate_by_name": True}


class InterchainTokenConfig(BaseModel):
    """A token record as stored in the squid token list."""

    token_id: str = Field(alias="tokenId")
    token_address: str = Field(alias="tokenAddress")
    symbol: str
    pretty_symbol: str = Field(alias="prettySymbol")
    decimals: int
    name: str
    origin_chain_id: str = Field(alias="originChainId")
    origin_axelar_chain_id: str = Field(alias="originAxelarChainId")
    transfer_type: str = Field(alias="transferType")
    icon_urls: IconUrls = Field(alias="iconUrls")
    remote_tokens: list[RemoteTokenConfig] = Field(
        default_factory=list, alias="remoteTokens"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def to_dict(self) -> dict:
        """Serialize with the on-disk (camelCase) keys."""
        return self.model_dump(by_alias=True, mode="json")


class AuditEntry(BaseModel):
    """Audit trail entry for a remote call or file operation."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    source: DataSource
    action: str  # "search", "details", "append", "publish"
    endpoint: str | None = None
    success: bool = True
    error_message: str | None = None
    duration_ms: int | None = None
    notes: str | None = None

    model_config = {"frozen": True}


class TokenDetailsUrl(BaseModel):
    """Components parsed out of a token details page URL."""

    url: str
    environment: Environment
    base_url: str
    token_address: str

    model_config = {"frozen": True}
