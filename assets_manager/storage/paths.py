"""Canonical locations of records inside the registry tree.

Layout under the registry root:
    blockchains/<chain>/tokenlist.json
    blockchains/<chain>/tokenlist-extended.json
    blockchains/<chain>/assets/<token id>/info.json
    blockchains/<chain>/assets/<token id>/logo.png
    blockchains/<chain>/assets/<token id>/<documents>
"""

from pathlib import Path
from typing import Optional

from ..core.types import ChainHandle, TokenID, TokenListKind

BLOCKCHAINS_DIR = "blockchains"
ASSETS_DIR = "assets"
INFO_FILENAME = "info.json"
LOGO_FILENAME = "logo.png"


def asset_logo_url(base_url: str, chain: ChainHandle, token_id: TokenID) -> str:
    """Public URL of an asset logo, relative to the assets app base URL."""
    return f"{base_url.rstrip('/')}/{BLOCKCHAINS_DIR}/{chain}/{ASSETS_DIR}/{token_id}/{LOGO_FILENAME}"


class RegistryPaths:
    """Resolves chain and token identifiers to paths under a registry root."""

    def __init__(self, root: Optional[Path] = None):
        self.root = Path(root) if root is not None else Path.cwd()

    def chain_dir(self, chain: ChainHandle) -> Path:
        return self.root / BLOCKCHAINS_DIR / chain

    def asset_dir(self, chain: ChainHandle, token_id: TokenID) -> Path:
        return self.chain_dir(chain) / ASSETS_DIR / token_id

    def asset_info_path(self, chain: ChainHandle, token_id: TokenID) -> Path:
        return self.asset_dir(chain, token_id) / INFO_FILENAME

    def asset_logo_path(self, chain: ChainHandle, token_id: TokenID) -> Path:
        return self.asset_dir(chain, token_id) / LOGO_FILENAME

    def token_list_path(self, chain: ChainHandle, kind: TokenListKind) -> Path:
        return self.chain_dir(chain) / TokenListKind(kind).filename

    asset_logo_url = staticmethod(asset_logo_url)
