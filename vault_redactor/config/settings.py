from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    account_url: str = ""
    account_id: str = ""
    vault_id: str = ""

    vault_table: str = "evidence"
    vault_file_column: str = "original_file"
    vault_upload_field: str = "processed_file"

    auth_header_key: str = "X-Skyflow-Authorization"
    http_timeout_seconds: int = 30

    run_poll_interval_seconds: float = 1.0
    run_poll_max_attempts: int = 300
