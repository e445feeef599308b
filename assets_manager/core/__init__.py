"""Core module - data models, chain registry, config, and exceptions."""

from .chains import (
    COINS,
    Chain,
    build_asset_id,
    get_chain,
    get_chain_by_handle,
    parse_asset_id,
)
from .config import ManagerConfig
from .models import (
    AssetInfo,
    Link,
    TokenList,
    TokenListEntry,
    TokenListVersion,
)
from .types import DOCUMENT_EXTENSIONS, TokenListKind
from .exceptions import (
    AssetsManagerError,
    InvalidIdentifierError,
    UnsupportedChainError,
    ReadFailureError,
    MissingAssetInfoError,
    DuplicateAssetError,
    WriteFailureError,
    CopyFailureError,
    AssetNotProvisionedError,
    UnsupportedExtensionError,
    SourceNotFoundError,
    AlreadyExistsError,
    ConfigurationError,
)

__all__ = [
    # Chains
    "COINS",
    "Chain",
    "build_asset_id",
    "get_chain",
    "get_chain_by_handle",
    "parse_asset_id",
    # Config
    "ManagerConfig",
    # Models
    "AssetInfo",
    "Link",
    "TokenList",
    "TokenListEntry",
    "TokenListVersion",
    # Types
    "DOCUMENT_EXTENSIONS",
    "TokenListKind",
    # Exceptions
    "AssetsManagerError",
    "InvalidIdentifierError",
    "UnsupportedChainError",
    "ReadFailureError",
    "MissingAssetInfoError",
    "DuplicateAssetError",
    "WriteFailureError",
    "CopyFailureError",
    "AssetNotProvisionedError",
    "UnsupportedExtensionError",
    "SourceNotFoundError",
    "AlreadyExistsError",
    "ConfigurationError",
]
