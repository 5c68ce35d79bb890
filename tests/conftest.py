import pytest

from vault_redactor.config.settings import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        account_url="https://acct.example.com",
        account_id="acc-1",
        vault_id="v1",
    )


@pytest.fixture()
def card_entities() -> list[dict[str, str]]:
    return [
        {"best_label": "EMAIL", "text": "a@b.com"},
        {"best_label": "CREDIT_CARD", "text": "4111-1111 1111 1111"},
    ]
