"""Static chain registry and asset identifier parsing.

Asset identifiers come in two forms:
- canonical: ``c<chain id>_t<token id>``, e.g. ``c60_t0xdAC17F958D2ee523a2206206994597C13D831ec7``
- handle: ``<chain handle>_<token id>``, e.g. ``ethereum_0xdAC17F958D2ee523a2206206994597C13D831ec7``
"""

import re
from dataclasses import dataclass

from .exceptions import InvalidIdentifierError, UnsupportedChainError
from .types import AssetID, ChainHandle, TokenID

_CANONICAL_ID = re.compile(r"^c(?P<chain>\d+)(?:_t(?P<token>.+))?$")
_HANDLE_ID = re.compile(r"^(?!c\d+(?:_|$))(?P<handle>[a-z][a-z0-9]*)_(?P<token>.+)$", re.IGNORECASE)


@dataclass(frozen=True)
class Chain:
    """A blockchain network tracked by the registry."""

    id: int
    handle: ChainHandle
    name: str
    symbol: str


# Keyed by SLIP-44 style coin id
COINS: dict[int, Chain] = {
    chain.id: chain for chain in [
        Chain(id=0, handle="bitcoin", name="Bitcoin", symbol="BTC"),
        Chain(id=2, handle="litecoin", name="Litecoin", symbol="LTC"),
        Chain(id=3, handle="doge", name="Dogecoin", symbol="DOGE"),
        Chain(id=60, handle="ethereum", name="Ethereum", symbol="ETH"),
        Chain(id=61, handle="classic", name="Ethereum Classic", symbol="ETC"),
        Chain(id=118, handle="cosmos", name="Cosmos Hub", symbol="ATOM"),
        Chain(id=195, handle="tron", name="Tron", symbol="TRX"),
        Chain(id=501, handle="solana", name="Solana", symbol="SOL"),
        Chain(id=607, handle="ton", name="TON", symbol="TON"),
        Chain(id=714, handle="binance", name="BNB Beacon Chain", symbol="BNB"),
        Chain(id=966, handle="polygon", name="Polygon", symbol="POL"),
        Chain(id=8453, handle="base", name="Base", symbol="ETH"),
        Chain(id=10000070, handle="optimism", name="Optimism Ethereum", symbol="ETH"),
        Chain(id=10009000, handle="avalanchec", name="Avalanche C-Chain", symbol="AVAX"),
        Chain(id=10042221, handle="arbitrum", name="Arbitrum", symbol="ETH"),
        Chain(id=20000714, handle="smartchain", name="Smart Chain", symbol="BNB"),
    ]
}

_BY_HANDLE: dict[ChainHandle, Chain] = {chain.handle: chain for chain in COINS.values()}


def get_chain(chain_id: int) -> Chain:
    """Look up a chain by numeric id."""
    try:
        return COINS[chain_id]
    except KeyError:
        raise UnsupportedChainError(chain_id) from None


def get_chain_by_handle(handle: ChainHandle) -> Chain:
    """Look up a chain by its path handle (case-insensitive)."""
    try:
        return _BY_HANDLE[handle.lower()]
    except KeyError:
        raise UnsupportedChainError(handle) from None


def build_asset_id(chain: Chain, token_id: TokenID) -> AssetID:
    """Build the canonical asset identifier for a token."""
    return f"c{chain.id}_t{token_id}"


def parse_asset_id(asset_id: AssetID) -> tuple[Chain, TokenID]:
    """
    Split an asset identifier into its chain and token id.

    Args:
        asset_id: Canonical (``c60_t0x...``) or handle (``ethereum_0x...``) form

    Returns:
        Tuple of (chain, token_id)

    Raises:
        InvalidIdentifierError: If the identifier has no recognizable
            chain part or no token part
        UnsupportedChainError: If the chain part names an unknown chain
    """
    value = asset_id.strip()

    match = _CANONICAL_ID.match(value)
    if match:
        if not match.group("token"):
            raise InvalidIdentifierError(asset_id, "missing token id")
        token_id = _check_token_id(asset_id, match.group("token"))
        return get_chain(int(match.group("chain"))), token_id

    match = _HANDLE_ID.match(value)
    if match:
        token_id = _check_token_id(asset_id, match.group("token"))
        return get_chain_by_handle(match.group("handle")), token_id

    raise InvalidIdentifierError(asset_id)


def _check_token_id(asset_id: AssetID, token_id: TokenID) -> TokenID:
    """Token ids name a directory, so they must stay a single path segment."""
    if token_id in (".", "..") or "/" in token_id or "\\" in token_id:
        raise InvalidIdentifierError(asset_id, "token id must be a single path segment")
    return token_id
