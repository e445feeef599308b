"""Manager module - operations that mutate the registry."""

from .asset_info import create_asset_info_template, get_asset_info
from .documents import upload_document
from .token_list import TokenListManager, build_entry

__all__ = [
    "TokenListManager",
    "build_entry",
    "create_asset_info_template",
    "get_asset_info",
    "upload_document",
]
