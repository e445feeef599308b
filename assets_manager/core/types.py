"""Type definitions and enums for the assets manager."""

from enum import Enum


class TokenListKind(str, Enum):
    """Trust tier of a chain's token list."""

    DEFAULT = "default"
    EXTENDED = "extended"

    @property
    def filename(self) -> str:
        """File name of the list inside the chain directory."""
        names = {
            self.DEFAULT: "tokenlist.json",
            self.EXTENDED: "tokenlist-extended.json",
        }
        return names[self]


# Allowed document extensions, lowercase
DOCUMENT_EXTENSIONS: tuple[str, ...] = (".pdf", ".doc", ".docx", ".txt", ".md")

# Type aliases for common patterns
ChainHandle = str  # e.g. "ethereum", "smartchain"
TokenID = str      # contract address or native symbol
AssetID = str      # composite identifier, e.g. "c60_t0x..."
