"""Orchestrator for the token listing flow.

Coordinates URL parsing, the interchain API, record construction, the
token list store and the publisher. It never prompts; the CLI decides
which steps run.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .core.config import WizardConfig
from .core.exceptions import DuplicateTokenError
from .core.models import (
    AuditEntry,
    InterchainTokenConfig,
    InterchainTokenDetails,
    InterchainTokenSearchResult,
    TokenDetailsUrl,
)
from .listing.transform import parse_as_interchain_token_config
from .listing.url_parser import parse_token_details_url
from .providers.interchain_api import InterchainTokenAPI
from .publish.base import BasePublisher
from .publish.git_publisher import GitPublisher, branch_name_for, commit_message_for
from .storage.tokenlist_store import TokenListStore, token_list_relative_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingDraft:
    """Everything learned about a token before anything is written."""

    source: TokenDetailsUrl
    search_result: InterchainTokenSearchResult
    details: InterchainTokenDetails
    record: InterchainTokenConfig

    @property
    def token_list_relative_path(self) -> Path:
        return token_list_relative_path(self.source.environment)


@dataclass(frozen=True)
class SavedListing:
    """A record that has been written to a token list."""

    draft: ListingDraft
    token_list_path: Path
    icon_path: Path


class TokenListingWizard:
    """Runs the steps of listing an interchain token."""

    def __init__(
        self,
        config: WizardConfig | None = None,
        store: TokenListStore | None = None,
        publisher: BasePublisher | None = None,
        api_factory: Callable[[str], InterchainTokenAPI] | None = None,
    ):
        """
        Initialize the wizard.

        Args:
            config: Settings (defaults to WizardConfig())
            store: Token list store (defaults to one rooted at config.registry_root)
            publisher: Change publisher (defaults to git in config.registry_root)
            api_factory: Builds an API client for a portal base URL
        """
        self.config = config or WizardConfig()
        self.store = store or TokenListStore(
            self.config.registry_root,
            placeholder_icon=self.config.placeholder_icon,
        )
        self.publisher = publisher or GitPublisher(
            self.config.registry_root,
            remote=self.config.git_remote,
        )
        self._api_factory = api_factory or (
            lambda base_url: InterchainTokenAPI(base_url, timeout=self.config.request_timeout)
        )
        self._apis: dict[str, InterchainTokenAPI] = {}

    def _api(self, base_url: str) -> InterchainTokenAPI:
        if base_url not in self._apis:
            self._apis[base_url] = self._api_factory(base_url)
        return self._apis[base_url]

    def get_audit_trail(self) -> list[AuditEntry]:
        """Audit entries from every API client used so far."""
        entries: list[AuditEntry] = []
        for api in self._apis.values():
            entries.extend(api.get_audit_trail())
        return sorted(entries, key=lambda entry: entry.timestamp)

    # Steps

    def parse_url(self, url: str) -> TokenDetailsUrl:
        return parse_token_details_url(url, self.config.mainnet_host)

    def search(self, source: TokenDetailsUrl) -> InterchainTokenSearchResult:
        return self._api(source.base_url).search_token(source.token_address)

    def fetch_details(
        self,
        source: TokenDetailsUrl,
        search_result: InterchainTokenSearchResult,
    ) -> InterchainTokenDetails:
        return self._api(source.base_url).get_token_details(
            source.token_address, search_result.chain_id
        )

    def build_record(self, details: InterchainTokenDetails) -> InterchainTokenConfig:
        return parse_as_interchain_token_config(details, self.config.icon_base_url)

    # Flow

    def resolve(self, url: str) -> ListingDraft:
        """
        Turn a token details URL into a token list record.

        Raises:
            InvalidTokenUrlError: URL lacks a base URL or token address
            DataSourceError: Either API call failed
            ValidationError: The token id or an address is malformed
        """
        source = self.parse_url(url)
        search_result = self.search(source)
        details = self.fetch_details(source, search_result)
        record = self.build_record(details)
        logger.info(
            f"Resolved {record.symbol} ({source.environment.value}) "
            f"with {len(record.remote_tokens)} remote tokens"
        )
        return ListingDraft(
            source=source,
            search_result=search_result,
            details=details,
            record=record,
        )

    def save(self, draft: ListingDraft) -> SavedListing:
        """
        Append the record to its token list and create its placeholder icon.

        Raises:
            DuplicateTokenError: Token id or address already listed (nothing written)
            IconWriteError: The icon cannot be created (checked before writing)
        """
        environment = draft.source.environment
        if self.store.exists(environment, draft.record):
            raise DuplicateTokenError(
                draft.record.token_id,
                draft.record.token_address,
                self.store.get_path(environment),
            )
        self.store.check_icon(draft.record.symbol)
        path = self.store.append(draft.source.environment, draft.record)
        icon_path = self.store.write_placeholder_icon(draft.record.symbol)
        return SavedListing(draft=draft, token_list_path=path, icon_path=icon_path)

    def publish(self, saved: SavedListing) -> str:
        """
        Publish the token list change; returns the branch name.

        Raises:
            PublishError: A version-control step failed
        """
        symbol = saved.draft.record.symbol
        branch = branch_name_for(symbol)
        self.publisher.publish(
            branch=branch,
            files=[saved.token_list_path],
            message=commit_message_for(symbol),
        )
        return branch
