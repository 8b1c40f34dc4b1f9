"""Pytest configuration and fixtures for token listing wizard tests."""

import json
from pathlib import Path
from typing import Any, Sequence

import httpx
import pytest

from tokenlist_wizard.core.config import WizardConfig
from tokenlist_wizard.core.models import InterchainTokenDetails
from tokenlist_wizard.core.types import Environment
from tokenlist_wizard.publish.base import BasePublisher

TOKEN_ADDRESS = "0xABCDEF1234567890abcdef1234567890abcdef12"
TOKEN_ID = "0x" + "1f" * 32
REMOTE_ADDRESS = "0x9876543210fedcba9876543210fedcba98765432"
PLACEHOLDER_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><circle r="8"/></svg>\n'
MAINNET_URL = f"https://interchain.axelar.dev/avalanche/{TOKEN_ADDRESS}"
TESTNET_URL = f"https://testnet.interchain.axelar.dev/avalanche/{TOKEN_ADDRESS}"


class FakePublisher(BasePublisher):
    """Publisher that records what it was asked to publish."""

    def __init__(self) -> None:
        self.published: list[tuple[str, list[Path], str]] = []

    def publish(self, branch: str, files: Sequence[Path], message: str) -> None:
        self.published.append((branch, list(files), message))


@pytest.fixture
def search_payload() -> dict[str, Any]:
    """Search endpoint response for the sample token on Avalanche."""
    return {
        "tokenId": TOKEN_ID,
        "tokenAddress": TOKEN_ADDRESS,
        "isOriginToken": True,
        "isRegistered": True,
        "chainId": 43114,
        "axelarChainId": "avalanche",
        "chainName": "Avalanche",
        "kind": "canonical",
        "matchingTokens": [
            {
                "tokenId": TOKEN_ID,
                "tokenAddress": TOKEN_ADDRESS,
                "isOriginToken": True,
                "isRegistered": True,
                "chainId": 43114,
                "axelarChainId": "avalanche",
                "chainName": "Avalanche",
                "kind": "canonical",
            }
        ],
    }


@pytest.fixture
def details_payload() -> dict[str, Any]:
    """Details endpoint response for the sample token."""
    return {
        "kind": "canonical",
        "salt": "0x" + "00" * 32,
        "tokenName": "Wizard Token",
        "tokenSymbol": "WIZ",
        "tokenDecimals": 18,
        "tokenAddress": TOKEN_ADDRESS,
        "chainId": 43114,
        "axelarChainId": "avalanche",
        "tokenId": TOKEN_ID,
        "deploymentTxHash": "0x" + "ab" * 32,
        "deployerAddress": "0x1111111111111111111111111111111111111111",
        "remoteTokens": [
            {
                "chainId": 1,
                "axelarChainId": "ethereum",
                "address": REMOTE_ADDRESS,
                "deploymentStatus": "confirmed",
                "deploymentTxHash": "0x" + "cd" * 32,
            },
            {
                "chainId": 42161,
                "axelarChainId": "arbitrum",
                "address": TOKEN_ADDRESS,
                "deploymentStatus": "confirmed",
                "deploymentTxHash": "0x" + "ef" * 32,
            },
        ],
    }


@pytest.fixture
def token_details(details_payload: dict[str, Any]) -> InterchainTokenDetails:
    return InterchainTokenDetails.model_validate(details_payload)


@pytest.fixture
def registry_root(tmp_path: Path) -> Path:
    """A chain configs checkout with empty token lists and the placeholder icon."""
    for environment in Environment:
        directory = tmp_path / "registry" / environment.value / "interchain"
        directory.mkdir(parents=True)
        (directory / "squid.tokenlist.json").write_text(
            json.dumps({"name": "Squid interchain tokens", "tokens": []}, indent=2),
            encoding="utf-8",
        )

    icons = tmp_path / "images" / "tokens"
    icons.mkdir(parents=True)
    (icons / "axl.svg").write_text(PLACEHOLDER_SVG, encoding="utf-8")
    return tmp_path


@pytest.fixture
def wizard_config(registry_root: Path) -> WizardConfig:
    return WizardConfig(registry_root=registry_root)


@pytest.fixture
def api_transport(
    search_payload: dict[str, Any],
    details_payload: dict[str, Any],
) -> httpx.MockTransport:
    """Mock portal answering the search and details endpoints."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/interchain-token/search":
            return httpx.Response(200, json=search_payload)
        if request.url.path == "/api/interchain-token/details":
            return httpx.Response(200, json=details_payload)
        return httpx.Response(404, json={"error": "not found"})

    return httpx.MockTransport(handler)


@pytest.fixture
def publisher() -> FakePublisher:
    return FakePublisher()
