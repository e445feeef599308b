"""Custom exceptions for the assets manager."""


class AssetsManagerError(Exception):
    """Base exception for all assets manager errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidIdentifierError(AssetsManagerError):
    """Raised when an asset identifier cannot be parsed."""

    def __init__(self, identifier: str, reason: str = "bad ID"):
        super().__init__(
            f"Failed to parse asset id '{identifier}': {reason}",
            {"identifier": identifier, "reason": reason},
        )
        self.identifier = identifier


class UnsupportedChainError(AssetsManagerError):
    """Raised when a chain is not in the registry."""

    def __init__(self, chain: int | str):
        super().__init__(f"Unsupported blockchain: {chain}", {"chain": chain})
        self.chain = chain


class ReadFailureError(AssetsManagerError):
    """Raised when a record is missing or cannot be parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to read data from {path}: {reason}", {"path": path})
        self.path = path
        self.reason = reason


class MissingAssetInfoError(ReadFailureError):
    """Raised when the info record of an asset is absent or unreadable."""


class DuplicateAssetError(AssetsManagerError):
    """Raised when an asset is already listed in one of the chain's token lists."""

    def __init__(self, asset_id: str, path: str):
        super().__init__(
            f"Duplicate asset {asset_id}, already exists in {path}",
            {"asset": asset_id, "path": path},
        )
        self.asset_id = asset_id
        self.path = path


class WriteFailureError(AssetsManagerError):
    """Raised when a file cannot be created or written."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to write {path}: {reason}", {"path": path})
        self.path = path
        self.reason = reason


class CopyFailureError(WriteFailureError):
    """Raised when copying a document fails partway."""


class AssetNotProvisionedError(AssetsManagerError):
    """Raised when the asset directory does not exist yet."""

    def __init__(self, asset_dir: str):
        super().__init__(
            f"Asset directory does not exist: {asset_dir}. "
            "Create the asset first using the add-token command",
            {"path": asset_dir},
        )
        self.path = asset_dir


class UnsupportedExtensionError(AssetsManagerError):
    """Raised when a document has an extension outside the whitelist."""

    def __init__(self, extension: str, allowed: list[str]):
        super().__init__(
            f"Unsupported file extension: {extension or '<none>'}. "
            f"Supported extensions: {', '.join(allowed)}",
            {"extension": extension, "allowed": allowed},
        )
        self.extension = extension


class SourceNotFoundError(AssetsManagerError):
    """Raised when the document to upload does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Document file does not exist: {path}", {"path": path})
        self.path = path


class AlreadyExistsError(AssetsManagerError):
    """Raised when an operation would overwrite an existing file."""

    def __init__(self, path: str):
        super().__init__(f"File already exists: {path}", {"path": path})
        self.path = path


class ConfigurationError(AssetsManagerError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, message: str):
        full_message = f"Configuration error [{config_key}]: {message}"
        super().__init__(full_message, {"config_key": config_key})
        self.config_key = config_key
