"""Assets Manager.

File-based tooling for a registry of blockchain asset metadata: per-asset
info records, per-chain token lists, and supporting documents.
"""

__version__ = "0.1.0"
