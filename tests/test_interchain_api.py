"""Tests for the interchain API client."""

import httpx
import pytest

from tokenlist_wizard.core.exceptions import DataSourceError
from tokenlist_wizard.providers.interchain_api import InterchainTokenAPI

from conftest import TOKEN_ADDRESS

BASE_URL = "https://interchain.axelar.dev"


class TestInterchainTokenAPI:
    """Tests for InterchainTokenAPI against a mock transport."""

    def test_search_token(self, api_transport):
        api = InterchainTokenAPI(BASE_URL, transport=api_transport)

        result = api.search_token(TOKEN_ADDRESS)

        assert result.chain_id == 43114
        assert result.axelar_chain_id == "avalanche"
        assert len(result.matching_tokens) == 1

    def test_get_token_details(self, api_transport):
        api = InterchainTokenAPI(BASE_URL, transport=api_transport)

        details = api.get_token_details(TOKEN_ADDRESS, 43114)

        assert details.token_symbol == "WIZ"
        assert details.chain_id == 43114
        assert [t.axelar_chain_id for t in details.remote_tokens] == ["ethereum", "arbitrum"]

    def test_query_parameters(self, search_payload, details_payload):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if request.url.path.endswith("/search"):
                return httpx.Response(200, json=search_payload)
            return httpx.Response(200, json=details_payload)

        api = InterchainTokenAPI(BASE_URL + "/", transport=httpx.MockTransport(handler))
        api.search_token(TOKEN_ADDRESS)
        api.get_token_details(TOKEN_ADDRESS, 43114)

        assert requests[0].url.host == "interchain.axelar.dev"
        assert requests[0].url.path == "/api/interchain-token/search"
        assert requests[0].url.params["tokenAddress"] == TOKEN_ADDRESS
        assert requests[1].url.path == "/api/interchain-token/details"
        assert requests[1].url.params["tokenAddress"] == TOKEN_ADDRESS
        assert requests[1].url.params["chainId"] == "43114"

    def test_http_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(500, text="boom"))
        api = InterchainTokenAPI(BASE_URL, transport=transport)

        with pytest.raises(DataSourceError) as exc_info:
            api.search_token(TOKEN_ADDRESS)

        assert exc_info.value.status_code == 500
        assert exc_info.value.endpoint == "/api/interchain-token/search"

    def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        api = InterchainTokenAPI(BASE_URL, transport=httpx.MockTransport(handler))

        with pytest.raises(DataSourceError, match="Could not reach"):
            api.search_token(TOKEN_ADDRESS)

        trail = api.get_audit_trail()
        assert len(trail) == 1
        assert not trail[0].success

    def test_non_json_body(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))
        api = InterchainTokenAPI(BASE_URL, transport=transport)

        with pytest.raises(DataSourceError, match="not valid JSON"):
            api.get_token_details(TOKEN_ADDRESS, 1)

    def test_empty_body(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
        api = InterchainTokenAPI(BASE_URL, transport=transport)

        with pytest.raises(DataSourceError, match="Empty or unexpected"):
            api.search_token(TOKEN_ADDRESS)

    def test_unexpected_shape(self, details_payload):
        del details_payload["tokenSymbol"]
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json=details_payload)
        )
        api = InterchainTokenAPI(BASE_URL, transport=transport)

        with pytest.raises(DataSourceError, match="tokenSymbol"):
            api.get_token_details(TOKEN_ADDRESS, 43114)

    def test_audit_trail(self, api_transport):
        api = InterchainTokenAPI(BASE_URL, transport=api_transport)
        api.search_token(TOKEN_ADDRESS)
        api.get_token_details(TOKEN_ADDRESS, 43114)

        trail = api.get_audit_trail()
        assert [entry.action for entry in trail] == ["search", "details"]
        assert all(entry.success for entry in trail)

        api.clear_audit_trail()
        assert api.get_audit_trail() == []
