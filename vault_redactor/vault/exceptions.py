class VaultError(Exception):
    """Base exception for all vault-related errors."""


class MissingRecordError(VaultError):
    """Raised when no vault record identifier was supplied."""


class MissingDownloadUrlError(VaultError):
    """Raised when a vault record carries no download URL for its file."""


class TokenizationError(VaultError):
    """Raised when the vault rejects a tokenized insert."""
