from vault_redactor.vault.client import VaultClient
from vault_redactor.vault.file_format import infer_file_format

__all__ = ["VaultClient", "infer_file_format"]
