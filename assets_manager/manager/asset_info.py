"""Asset info records: reading and template creation."""

import logging
from pathlib import Path

from ..core.chains import Chain, parse_asset_id
from ..core.exceptions import AlreadyExistsError
from ..core.models import AssetInfo
from ..core.types import AssetID, TokenID
from ..storage.json_store import read_json, write_json
from ..storage.paths import RegistryPaths

logger = logging.getLogger(__name__)


def get_asset_info(paths: RegistryPaths, chain: Chain, token_id: TokenID) -> AssetInfo:
    """
    Load the info record of one asset.

    Raises:
        ReadFailureError: If the record is absent or malformed
    """
    info_path = paths.asset_info_path(chain.handle, token_id)
    logger.debug(f"Reading asset info from {info_path}")
    return read_json(info_path, AssetInfo)


def create_asset_info_template(
    paths: RegistryPaths,
    asset_id: AssetID,
    overwrite: bool = True,
) -> Path:
    """
    Write an info record template for a new asset.

    Every field is present with an empty placeholder so the person filling
    it in sees exactly which keys need values.

    Args:
        paths: Registry path resolver
        asset_id: Composite asset identifier, e.g. ``c60_t0x...``
        overwrite: Replace an existing record. When False an existing
            record raises AlreadyExistsError.

    Returns:
        Path of the written info.json

    Raises:
        InvalidIdentifierError: If the identifier cannot be parsed
        UnsupportedChainError: If the chain is unknown
        AlreadyExistsError: If the record exists and overwrite is False
        WriteFailureError: If the directory or file cannot be written
    """
    chain, token_id = parse_asset_id(asset_id)
    info_path = paths.asset_info_path(chain.handle, token_id)

    if info_path.exists():
        if not overwrite:
            raise AlreadyExistsError(str(info_path))
        logger.warning(f"Overwriting existing asset info at {info_path}")

    write_json(info_path, AssetInfo.template(token_id), create_dirs=True, exclude_none=True)
    logger.info(f"Created asset info template at {info_path}")
    return info_path
