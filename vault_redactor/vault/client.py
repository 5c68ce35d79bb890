import base64
from typing import Any

import httpx

from vault_redactor.config.settings import Settings
from vault_redactor.logging.logger import Log
from vault_redactor.vault.exceptions import (
    MissingDownloadUrlError,
    MissingRecordError,
    TokenizationError,
    VaultError,
)


class VaultClient:
    """Vault REST adapter: record download URLs, file attachments, tokenized inserts."""

    def __init__(
        self,
        *,
        http_client: httpx.Client,
        settings: Settings,
        auth_token: str,
    ) -> None:
        self._http = http_client
        self._settings = settings
        self._auth_token = auth_token

    def get_download_url(self, skyflow_id: str | None) -> str:
        """Return the signed download URL stored on the record's file column.

        Raises:
            MissingRecordError: if no record identifier is given.
            MissingDownloadUrlError: if the record has no download URL.
            VaultError: on transport or HTTP errors.
        """
        if not skyflow_id:
            raise MissingRecordError("Missing skyflow_id")
        response = self._request(
            "GET",
            self._record_url(skyflow_id),
            params={"downloadURL": "true"},
            headers=self._auth_headers(),
        )
        try:
            body = response.json()
        except ValueError as exc:
            raise VaultError("Vault API error: record response is not JSON") from exc
        fields = body.get("fields") if isinstance(body, dict) else None
        fields = fields if isinstance(fields, dict) else {}
        download_url = fields.get(self._settings.vault_file_column)
        if not download_url:
            raise MissingDownloadUrlError("No downloadURL")
        return download_url

    def download_file(self, download_url: str) -> bytes:
        # Signed URLs carry their own credentials.
        response = self._request("GET", download_url)
        return response.content

    def upload_file(
        self,
        skyflow_id: str,
        file_base64: str,
        data_format: str | None,
    ) -> bytes:
        """Attach the redacted file to the record as a multipart upload.

        Returns the raw acknowledgement body; it is not always JSON.
        """
        if not data_format:
            raise VaultError("Cannot upload redacted file without a file format")
        ext = data_format.lower()
        files = {
            self._settings.vault_upload_field: (
                f"redacted.{ext}",
                base64.b64decode(file_base64),
                f"application/{ext}",
            )
        }
        response = self._request(
            "POST",
            f"{self._record_url(skyflow_id)}/files",
            files=files,
            headers=self._auth_headers(),
        )
        return response.content

    def tokenize(self, skyflow_id: str, fields: dict[str, str] | None) -> Any:
        """Insert ``fields`` into the record with tokenization and return the tokens.

        Raises:
            TokenizationError: on any vault or transport failure.
        """
        payload = {"record": {"fields": fields}, "tokenization": True}
        try:
            response = self._http.put(
                self._record_url(skyflow_id),
                json=payload,
                headers=self._auth_headers(),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            Log.error(
                f"Vault insert failed with status {exc.response.status_code}: "
                f"{exc.response.text}"
            )
            raise TokenizationError("Insert failed") from exc
        except httpx.HTTPError as exc:
            Log.error(f"Vault insert failed: {exc}")
            raise TokenizationError("Insert failed") from exc

        try:
            body = response.json()
        except ValueError as exc:
            Log.error(f"Vault insert returned a non-JSON body: {response.text[:200]}")
            raise TokenizationError("Insert failed") from exc
        if not isinstance(body, dict):
            Log.error("Vault insert returned an unexpected body")
            raise TokenizationError("Insert failed")
        return body.get("tokens")

    def _record_url(self, skyflow_id: str) -> str:
        s = self._settings
        return f"{s.account_url}/v1/vaults/{s.vault_id}/{s.vault_table}/{skyflow_id}"

    def _auth_headers(self) -> dict[str, str]:
        return {
            "X-SKYFLOW-ACCOUNT-ID": self._settings.account_id,
            "Authorization": f"Bearer {self._auth_token}",
        }

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._http.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise VaultError(
                f"Vault API error: {method} returned status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise VaultError(f"Vault network error: {exc}") from exc
        return response
