"""Pytest configuration and fixtures for assets manager tests."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest

from assets_manager.core.chains import COINS, Chain
from assets_manager.core.config import ManagerConfig
from assets_manager.manager.token_list import TokenListManager
from assets_manager.storage.paths import RegistryPaths

USDT = "0xdAC17F958D2ee523a2206206994597C13D831ec7"
LINK = "0x514910771AF9Ca656af840dff83E8264EcF986CA"
UNI = "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984"


def dump(path: Path, data: Any) -> Path:
    """Write a JSON fixture file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=4), encoding="utf-8")
    return path


@pytest.fixture
def ethereum() -> Chain:
    return COINS[60]


@pytest.fixture
def registry_root(tmp_path: Path) -> Path:
    """Empty registry root."""
    root = tmp_path / "registry"
    root.mkdir()
    return root


@pytest.fixture
def paths(registry_root: Path) -> RegistryPaths:
    return RegistryPaths(registry_root)


@pytest.fixture
def config() -> ManagerConfig:
    return ManagerConfig(
        org_name="Trust Wallet",
        assets_app_url="https://assets.example.com",
        logo_url="https://example.com/favicon.png",
        time_format="%Y-%m-%dT%H:%M:%S.%f",
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)


@pytest.fixture
def manager(paths: RegistryPaths, config: ManagerConfig, fixed_now: datetime) -> TokenListManager:
    return TokenListManager(paths, config, clock=lambda: fixed_now)


@pytest.fixture
def default_list_data() -> dict[str, Any]:
    """Default ethereum list with two entries, one carrying trading pairs."""
    return {
        "name": "Trust Wallet: Ethereum",
        "logoURI": "https://example.com/favicon.png",
        "timestamp": "2024-01-01T00:00:00.000000",
        "tokens": [
            {
                "asset": f"c60_t{USDT}",
                "type": "ERC20",
                "address": USDT,
                "name": "Tether",
                "symbol": "USDT",
                "decimals": 6,
                "logoURI": f"https://assets.example.com/blockchains/ethereum/assets/{USDT}/logo.png",
                "pairs": [{"base": "c60"}],
            },
            {
                "asset": f"c60_t{LINK}",
                "type": "ERC20",
                "address": LINK,
                "name": "Chainlink",
                "symbol": "LINK",
                "decimals": 18,
                "logoURI": f"https://assets.example.com/blockchains/ethereum/assets/{LINK}/logo.png",
            },
        ],
        "version": {"major": 7, "minor": 0, "patch": 0},
    }


@pytest.fixture
def extended_list_data() -> dict[str, Any]:
    """Extended ethereum list with a single entry."""
    return {
        "name": "Trust Wallet: Ethereum",
        "logoURI": "https://example.com/favicon.png",
        "timestamp": "2024-01-01T00:00:00.000000",
        "tokens": [
            {
                "asset": f"c60_t{UNI}",
                "type": "ERC20",
                "address": UNI,
                "name": "Uniswap",
                "symbol": "UNI",
                "decimals": 18,
                "logoURI": f"https://assets.example.com/blockchains/ethereum/assets/{UNI}/logo.png",
            },
        ],
        "version": {"major": 3},
    }


@pytest.fixture
def token_info_data() -> dict[str, Any]:
    """Filled-in info record of the token used in list scenarios."""
    return {
        "name": "Foo",
        "symbol": "FOO",
        "type": "ERC20",
        "decimals": 18,
        "description": "Foo token",
        "website": "https://foo.example.com",
        "explorer": "https://etherscan.io/token/0xTOKEN",
        "status": "active",
        "id": "0xTOKEN",
        "links": [{"name": "github", "url": "https://github.com/foo"}],
        "tags": ["defi"],
    }


@pytest.fixture
def ethereum_registry(
    paths: RegistryPaths,
    default_list_data: dict[str, Any],
    extended_list_data: dict[str, Any],
    token_info_data: dict[str, Any],
) -> RegistryPaths:
    """Registry with both ethereum lists and the info record of 0xTOKEN."""
    dump(paths.root / "blockchains" / "ethereum" / "tokenlist.json", default_list_data)
    dump(paths.root / "blockchains" / "ethereum" / "tokenlist-extended.json", extended_list_data)
    dump(paths.root / "blockchains" / "ethereum" / "assets" / "0xTOKEN" / "info.json", token_info_data)
    return paths


@pytest.fixture
def dump_json():
    """Helper writing JSON fixture files."""
    return dump
