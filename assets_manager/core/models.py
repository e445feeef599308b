"""Pydantic data models for the assets manager.

Info record fields use ``None`` for "absent" (the key is omitted on disk).
A template record instead carries type-correct placeholders, so the key is
present but the value still needs manual completion. Token list entries
keep a null exactly as read.
"""

from pydantic import BaseModel, Field

from .chains import parse_asset_id
from .exceptions import InvalidIdentifierError, UnsupportedChainError
from .types import AssetID, TokenID

# Fields every template record carries, in on-disk order
TEMPLATE_FIELDS: tuple[str, ...] = (
    "name",
    "symbol",
    "type",
    "decimals",
    "description",
    "website",
    "explorer",
    "status",
    "id",
    "links",
    "tags",
)


class Link(BaseModel):
    """Named external link of an asset (social, source code, whitepaper)."""

    name: str | None = None
    url: str | None = None

    model_config = {"extra": "allow"}

    @property
    def is_blank(self) -> bool:
        return not (self.name or "").strip() or not (self.url or "").strip()


class AssetInfo(BaseModel):
    """Canonical, hand-curated metadata record of one asset (info.json)."""

    name: str | None = None
    symbol: str | None = None
    type: str | None = None
    decimals: int | None = None
    description: str | None = None
    website: str | None = None
    explorer: str | None = None
    status: str | None = None
    id: str | None = None
    links: list[Link] | None = None
    tags: list[str] | None = None

    # Hand-edited records carry more keys (research, coingecko, ...)
    model_config = {"extra": "allow"}

    @classmethod
    def template(cls, token_id: TokenID) -> "AssetInfo":
        """Record with every field present and an empty placeholder value."""
        return cls(
            name="",
            symbol="",
            type="",
            decimals=0,
            description="",
            website="",
            explorer="",
            status="",
            id=token_id,
            links=[Link(name="", url="")],
            tags=[""],
        )

    def pending_fields(self) -> list[str]:
        """
        List the fields that are absent or still hold template placeholders.

        ``decimals`` only counts as pending when absent, since zero is a
        valid number of decimals.
        """
        pending = []
        for field_name in TEMPLATE_FIELDS:
            value = getattr(self, field_name)
            if value is None:
                pending.append(field_name)
            elif field_name == "links":
                if any(link.is_blank for link in value):
                    pending.append(field_name)
            elif field_name == "tags":
                if any(not tag.strip() for tag in value):
                    pending.append(field_name)
            elif isinstance(value, str) and not value.strip():
                pending.append(field_name)
        return pending

    @property
    def is_complete(self) -> bool:
        """Check if no field still needs manual completion."""
        return not self.pending_fields()


class TokenListEntry(BaseModel):
    """Frozen projection of an info record into a token list."""

    asset: AssetID
    type: str | None = ""
    address: str | None = ""
    name: str | None = ""
    symbol: str | None = ""
    decimals: int | None = 0
    logo_uri: str | None = Field(default="", alias="logoURI")

    # Existing entries may carry nulls or keys such as "pairs"; keep them untouched
    model_config = {"frozen": True, "extra": "allow", "populate_by_name": True}


class TokenListVersion(BaseModel):
    """Version of a token list. Only the major number is tracked."""

    major: int = 0

    model_config = {"frozen": True}


class TokenList(BaseModel):
    """Versioned list of assets of one trust tier for one chain."""

    name: str = ""
    logo_uri: str = Field(default="", alias="logoURI")
    timestamp: str = ""
    tokens: list[TokenListEntry] = Field(default_factory=list)
    version: TokenListVersion = Field(default_factory=TokenListVersion)

    model_config = {"frozen": True, "populate_by_name": True}

    def contains(self, asset_id: AssetID) -> bool:
        """Check if an asset is already listed, under either identifier form."""
        key = _asset_key(asset_id)
        return any(
            entry.asset == asset_id or (key is not None and _asset_key(entry.asset) == key)
            for entry in self.tokens
        )


def _asset_key(asset_id: AssetID) -> tuple[int, TokenID] | None:
    """Chain id and token id of an identifier, or None if it does not parse."""
    try:
        chain, token_id = parse_asset_id(asset_id)
    except (InvalidIdentifierError, UnsupportedChainError):
        return None
    return chain.id, token_id
