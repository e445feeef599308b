"""Storage module - path resolution and JSON records."""

from .json_store import create_file_with_path, prepare_json_data, read_json, write_json
from .paths import RegistryPaths, asset_logo_url

__all__ = [
    "RegistryPaths",
    "asset_logo_url",
    "create_file_with_path",
    "prepare_json_data",
    "read_json",
    "write_json",
]
