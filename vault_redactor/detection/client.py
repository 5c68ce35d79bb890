from typing import Any

import httpx

from vault_redactor.config.settings import Settings
from vault_redactor.detection.exceptions import DetectionError


class DetectionClient:
    """Detection API adapter: submit files for deidentification and read runs."""

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

    def deidentify_file(self, file_base64: str, data_format: str | None) -> dict[str, Any]:
        """Submit a file for asynchronous deidentification; returns the raw response."""
        payload = {
            "file": {"base64": file_base64, "data_format": data_format},
            "vault_id": self._settings.vault_id,
        }
        return self._request(
            "POST",
            f"{self._settings.account_url}/v1/detect/deidentify/file",
            json=payload,
        )

    def get_run(self, run_id: str) -> dict[str, Any]:
        return self._request(
            "GET",
            f"{self._settings.account_url}/v1/detect/runs/{run_id}",
            params={"vault_id": self._settings.vault_id},
        )

    def _headers(self) -> dict[str, str]:
        return {
            "X-SKYFLOW-ACCOUNT-ID": self._settings.account_id,
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._auth_token}",
        }

    def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = self._http.request(method, url, headers=self._headers(), **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise DetectionError(
                f"Detection API error: {method} returned status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise DetectionError(f"Detection network error: {exc}") from exc
        return response.json()
