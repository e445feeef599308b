"""
JSON read/write helpers for registry records.

Files are always rewritten whole. Output is indented with four spaces,
keeps model field order and ends with a newline, so diffs of the
version-controlled registry stay minimal.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from ..core.exceptions import ReadFailureError, WriteFailureError

logger = logging.getLogger(__name__)

JSON_INDENT = 4


def read_json(path: Path, model: Optional[type[BaseModel]] = None) -> Any:
    """
    Load a JSON document, optionally validating it into a model.

    Raises:
        ReadFailureError: If the file is missing, unreadable, not JSON,
            or does not match the model
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ReadFailureError(str(path), "file does not exist") from None
    except json.JSONDecodeError as e:
        raise ReadFailureError(str(path), f"invalid JSON: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ReadFailureError(str(path), str(e)) from e

    if model is None:
        return data

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ReadFailureError(str(path), f"unexpected shape: {e}") from e


def prepare_json_data(data: Any, exclude_none: bool = False) -> str:
    """Serialize a model or plain JSON value to the on-disk text form."""
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True, exclude_none=exclude_none)
    return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False) + "\n"


def create_file_with_path(path: Path) -> Path:
    """Create the parent directories of a file path."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteFailureError(str(path), f"failed to create directory: {e}") from e
    return path


def write_json(
    path: Path, data: Any, create_dirs: bool = False, exclude_none: bool = False
) -> Path:
    """
    Overwrite a file with the formatted JSON form of ``data``.

    Args:
        path: Destination file
        data: Pydantic model or JSON-serializable value
        create_dirs: Create missing parent directories first
        exclude_none: Omit model fields that are None instead of writing null

    Returns:
        The path written

    Raises:
        WriteFailureError: If serialization or the write fails
    """
    path = Path(path)
    try:
        text = prepare_json_data(data, exclude_none)
    except (TypeError, ValueError) as e:
        raise WriteFailureError(str(path), f"failed to marshal json: {e}") from e

    if create_dirs:
        create_file_with_path(path)

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise WriteFailureError(str(path), str(e)) from e

    logger.debug(f"Wrote {path}")
    return path
