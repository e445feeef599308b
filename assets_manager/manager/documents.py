"""Supporting documents attached to an asset directory."""

import logging
import shutil
from pathlib import Path

from ..core.chains import parse_asset_id
from ..core.exceptions import (
    AlreadyExistsError,
    AssetNotProvisionedError,
    CopyFailureError,
    SourceNotFoundError,
    UnsupportedExtensionError,
)
from ..core.types import DOCUMENT_EXTENSIONS, AssetID
from ..storage.paths import RegistryPaths

logger = logging.getLogger(__name__)


def upload_document(paths: RegistryPaths, asset_id: AssetID, document_path: Path) -> Path:
    """
    Copy a document into an existing asset directory.

    Checks run in a fixed order and the first failing one aborts the
    upload without touching the filesystem. An existing file is never
    overwritten.

    Args:
        paths: Registry path resolver
        asset_id: Composite asset identifier
        document_path: File to copy

    Returns:
        Path of the copied document

    Raises:
        InvalidIdentifierError: If the identifier cannot be parsed
        UnsupportedChainError: If the chain is unknown
        SourceNotFoundError: If the document does not exist
        AssetNotProvisionedError: If the asset directory does not exist
        UnsupportedExtensionError: If the extension is not whitelisted
        AlreadyExistsError: If a file of the same name is already there
        CopyFailureError: If copying fails; the partial copy is removed
    """
    chain, token_id = parse_asset_id(asset_id)

    document_path = Path(document_path)
    if not document_path.is_file():
        raise SourceNotFoundError(str(document_path))

    asset_dir = paths.asset_dir(chain.handle, token_id)
    if not asset_dir.is_dir():
        raise AssetNotProvisionedError(str(asset_dir))

    extension = document_extension(document_path)
    if extension not in DOCUMENT_EXTENSIONS:
        raise UnsupportedExtensionError(extension, list(DOCUMENT_EXTENSIONS))

    dest_path = asset_dir / document_path.name
    if dest_path.exists():
        raise AlreadyExistsError(str(dest_path))

    try:
        with open(document_path, "rb") as source, open(dest_path, "xb") as destination:
            shutil.copyfileobj(source, destination)
    except FileExistsError:
        raise AlreadyExistsError(str(dest_path)) from None
    except OSError as e:
        _remove_partial(dest_path)
        raise CopyFailureError(str(dest_path), f"failed to copy file: {e}") from e

    logger.info(f"Successfully uploaded document to: {dest_path}")
    return dest_path


def _remove_partial(path: Path) -> None:
    """Delete an incomplete copy."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.error(f"Failed to remove incomplete copy {path}: {e}")


def document_extension(path: Path) -> str:
    """
    Lower-cased extension of a file name, from its last dot on.

    Unlike ``Path.suffix`` a leading dot counts, so ``.md`` has the
    extension ``.md``. A name without a dot has none.
    """
    name = Path(path).name
    dot = name.rfind(".")
    return name[dot:].lower() if dot != -1 else ""
