"""Client for the ITS portal interchain token API.

Two endpoints are used, always in this order:
- /api/interchain-token/search   resolves the origin chain of an address
- /api/interchain-token/details  returns the full token registration

Failures are reported as DataSourceError; nothing is retried.
"""

import logging
import time
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import DataSourceError
from ..core.models import InterchainTokenDetails, InterchainTokenSearchResult
from ..core.types import DataSource
from .base import BaseProvider

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

SEARCH_ENDPOINT = "/api/interchain-token/search"
DETAILS_ENDPOINT = "/api/interchain-token/details"


class InterchainTokenAPI(BaseProvider):
    """Fetches interchain token search results and details."""

    SOURCE = DataSource.INTERCHAIN_API

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Scheme and host of the portal, e.g. https://interchain.axelar.dev
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        super().__init__()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _make_request(
        self,
        action: str,
        endpoint: str,
        params: dict[str, Any],
    ) -> Any:
        """Make a GET request and return the decoded JSON body."""
        start_time = time.time()
        url = f"{self.base_url}{endpoint}"

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(url, params=params)
            response.raise_for_status()
            payload = response.json()

        except httpx.HTTPStatusError as e:
            self._record_audit(
                action=action,
                endpoint=endpoint,
                success=False,
                error_message=f"HTTP {e.response.status_code}",
                duration_ms=int((time.time() - start_time) * 1000),
            )
            raise DataSourceError(
                source=self.SOURCE.value,
                message=f"HTTP {e.response.status_code} from {url}",
                endpoint=endpoint,
                status_code=e.response.status_code,
            )
        except httpx.RequestError as e:
            self._record_audit(
                action=action,
                endpoint=endpoint,
                success=False,
                error_message=str(e),
                duration_ms=int((time.time() - start_time) * 1000),
            )
            raise DataSourceError(
                source=self.SOURCE.value,
                message=f"Could not reach {url}: {e}",
                endpoint=endpoint,
            )
        except ValueError:
            self._record_audit(
                action=action,
                endpoint=endpoint,
                success=False,
                error_message="Response is not JSON",
                duration_ms=int((time.time() - start_time) * 1000),
            )
            raise DataSourceError(
                source=self.SOURCE.value,
                message=f"Response from {url} is not valid JSON",
                endpoint=endpoint,
                status_code=response.status_code,
            )

        self._record_audit(
            action=action,
            endpoint=endpoint,
            success=True,
            duration_ms=int((time.time() - start_time) * 1000),
        )
        return payload

    def _parse(self, model: type[ModelT], payload: Any, endpoint: str) -> ModelT:
        """Validate a payload against the expected response model."""
        if not isinstance(payload, dict) or not payload:
            raise DataSourceError(
                source=self.SOURCE.value,
                message=f"Empty or unexpected response from {endpoint}",
                endpoint=endpoint,
            )
        try:
            return model.model_validate(payload)
        except PydanticValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in error["loc"]) for error in e.errors()
            )
            raise DataSourceError(
                source=self.SOURCE.value,
                message=f"Unexpected response shape from {endpoint} (fields: {fields})",
                endpoint=endpoint,
            )

    def search_token(self, token_address: str) -> InterchainTokenSearchResult:
        """
        Look up a token address across all chains.

        Args:
            token_address: 0x-prefixed token contract address

        Returns:
            Search result; its chain_id is the chain the token was found on
        """
        logger.info(f"Searching {self.base_url} for {token_address}")
        payload = self._make_request(
            "search",
            SEARCH_ENDPOINT,
            params={"tokenAddress": token_address},
        )
        return self._parse(InterchainTokenSearchResult, payload, SEARCH_ENDPOINT)

    def get_token_details(
        self,
        token_address: str,
        chain_id: int,
    ) -> InterchainTokenDetails:
        """
        Fetch the registration details of a token on a given chain.

        Args:
            token_address: 0x-prefixed token contract address
            chain_id: Numeric chain id from the search result

        Returns:
            InterchainTokenDetails including remote deployments
        """
        logger.info(f"Fetching details for {token_address} on chain {chain_id}")
        payload = self._make_request(
            "details",
            DETAILS_ENDPOINT,
            params={"tokenAddress": token_address, "chainId": chain_id},
        )
        return self._parse(InterchainTokenDetails, payload, DETAILS_ENDPOINT)
