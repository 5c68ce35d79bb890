import base64
import json

import pytest

from vault_redactor.processor.entities import decode_entities, extract_credit_card
from vault_redactor.processor.exceptions import EntitiesDecodeError


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _b64_json(value: object) -> str:
    return _b64(json.dumps(value).encode("utf-8"))


class TestDecodeEntities:
    def test_decodes_base64_json_list(self, card_entities: list[dict[str, str]]) -> None:
        assert decode_entities(_b64_json(card_entities)) == card_entities

    def test_rejects_invalid_json(self) -> None:
        with pytest.raises(EntitiesDecodeError, match="Invalid entities output"):
            decode_entities(_b64(b"{not json"))

    def test_rejects_non_list(self) -> None:
        with pytest.raises(EntitiesDecodeError, match="array"):
            decode_entities(_b64_json({"best_label": "CREDIT_CARD"}))


class TestExtractCreditCard:
    def test_strips_non_digits(self, card_entities: list[dict[str, str]]) -> None:
        assert extract_credit_card(card_entities) == {"card_number": "4111111111111111"}

    def test_truncates_to_sixteen_digits(self) -> None:
        entities = [{"best_label": "CREDIT_CARD", "text": "4111 1111 1111 1111 999"}]

        assert extract_credit_card(entities) == {"card_number": "4111111111111111"}

    def test_uses_first_credit_card(self) -> None:
        entities = [
            {"best_label": "CREDIT_CARD", "text": "5500 0000 0000 0004"},
            {"best_label": "CREDIT_CARD", "text": "4111 1111 1111 1111"},
        ]

        assert extract_credit_card(entities) == {"card_number": "5500000000000004"}

    def test_returns_none_without_credit_card(self) -> None:
        entities = [{"best_label": "EMAIL", "text": "a@b.com"}]

        assert extract_credit_card(entities) is None

    def test_returns_none_for_empty_text(self) -> None:
        assert extract_credit_card([{"best_label": "CREDIT_CARD", "text": ""}]) is None

    def test_returns_none_for_no_entities(self) -> None:
        assert extract_credit_card([]) is None
