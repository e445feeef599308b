"""Token list management.

Adding an asset reads every list kind of the chain, rejects the asset if
any of them already holds it, then rewrites only the target list with the
new entry appended and the major version bumped by one.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from ..core.chains import Chain, parse_asset_id
from ..core.config import ManagerConfig
from ..core.exceptions import DuplicateAssetError, MissingAssetInfoError, ReadFailureError
from ..core.models import AssetInfo, TokenList, TokenListEntry, TokenListVersion
from ..core.types import AssetID, TokenID, TokenListKind
from ..storage.json_store import read_json, write_json
from ..storage.paths import RegistryPaths
from .asset_info import get_asset_info

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_entry(
    asset_id: AssetID,
    token_id: TokenID,
    info: AssetInfo,
    logo_uri: str,
) -> TokenListEntry:
    """
    Project an info record into a token list entry.

    Fields are copied as they are; absent ones become empty values and an
    absent ``id`` falls back to the token id.
    """
    return TokenListEntry(
        asset=asset_id,
        type=info.type or "",
        address=info.id if info.id is not None else token_id,
        name=info.name or "",
        symbol=info.symbol or "",
        decimals=info.decimals or 0,
        logo_uri=logo_uri,
    )


class TokenListManager:
    """Adds assets to the token lists of a registry."""

    def __init__(
        self,
        paths: RegistryPaths,
        config: Optional[ManagerConfig] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """
        Initialize the manager.

        Args:
            paths: Registry path resolver
            config: Naming, URL and timestamp settings
            clock: Source of the list timestamp
        """
        self.paths = paths
        self.config = config or ManagerConfig()
        self.clock = clock

    def load(self, chain: Chain, kind: TokenListKind) -> TokenList:
        """Load one token list of a chain. Raises ReadFailureError."""
        return read_json(self.paths.token_list_path(chain.handle, kind), TokenList)

    def load_all(self, chain: Chain) -> dict[TokenListKind, TokenList]:
        """Load every token list kind of a chain."""
        return {kind: self.load(chain, kind) for kind in TokenListKind}

    def add_token(
        self,
        chain: Chain,
        asset_id: AssetID,
        token_id: TokenID,
        kind: TokenListKind,
    ) -> TokenList:
        """
        Append an asset to one of the chain's token lists.

        Nothing is written unless every check passes; on success exactly
        the target list file is rewritten.

        Args:
            chain: Chain the asset lives on
            asset_id: Identifier stored in the entry's ``asset`` field
            token_id: Chain-scoped token id, used for the info record and logo
            kind: Target list

        Returns:
            The persisted list

        Raises:
            ReadFailureError: If any list of the chain is missing or malformed
            DuplicateAssetError: If the asset is already in any list of the chain
            MissingAssetInfoError: If the asset has no readable info record
            WriteFailureError: If the list cannot be written
        """
        kind = TokenListKind(kind)

        lists = self.load_all(chain)
        for list_kind, token_list in lists.items():
            if token_list.contains(asset_id):
                raise DuplicateAssetError(
                    asset_id, str(self.paths.token_list_path(chain.handle, list_kind))
                )

        current = lists[kind]

        try:
            info = get_asset_info(self.paths, chain, token_id)
        except ReadFailureError as e:
            raise MissingAssetInfoError(e.path, f"failed to get token info: {e.reason}") from e

        entry = build_entry(
            asset_id,
            token_id,
            info,
            self.paths.asset_logo_url(self.config.assets_app_url, chain.handle, token_id),
        )

        updated = TokenList(
            name=f"{self.config.org_name}: {chain.name}",
            logo_uri=self.config.logo_url,
            timestamp=self.clock().strftime(self.config.time_format),
            tokens=[*current.tokens, entry],
            version=TokenListVersion(major=current.version.major + 1),
        )

        list_path = self.paths.token_list_path(chain.handle, kind)
        write_json(list_path, updated)
        logger.info(
            f"Added {asset_id} to {list_path} "
            f"(version {current.version.major} -> {updated.version.major})"
        )
        return updated

    def add_asset(self, asset_id: AssetID, kind: TokenListKind) -> TokenList:
        """Parse a composite asset id and add it to the given list."""
        chain, token_id = parse_asset_id(asset_id)
        return self.add_token(chain, asset_id, token_id, kind)
