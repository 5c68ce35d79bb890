import base64
import binascii
import json
import re
from typing import Any

from vault_redactor.detection.models import DetectedEntity
from vault_redactor.processor.exceptions import EntitiesDecodeError

CREDIT_CARD_LABEL = "CREDIT_CARD"
CARD_NUMBER_LENGTH = 16
_NON_DIGITS = re.compile(r"\D")


def decode_entities(entities_blob: str) -> list[dict[str, Any]]:
    """Decode a base64 entities artifact into its list of entity records."""
    try:
        parsed = json.loads(base64.b64decode(entities_blob).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise EntitiesDecodeError(f"Invalid entities output: {exc}") from exc
    if not isinstance(parsed, list):
        raise EntitiesDecodeError("Entities output must be a JSON array")
    return parsed


def find_credit_card(entities: list[dict[str, Any]]) -> DetectedEntity | None:
    for item in entities:
        if isinstance(item, dict) and item.get("best_label") == CREDIT_CARD_LABEL:
            return DetectedEntity(best_label=CREDIT_CARD_LABEL, text=item.get("text") or "")
    return None


def extract_credit_card(entities: list[dict[str, Any]]) -> dict[str, str] | None:
    """Return ``{"card_number": ...}`` for the first credit card entity, if any.

    Non-digits are stripped and the number is cut to 16 characters.
    """
    entity = find_credit_card(entities)
    if entity is None or not entity.text:
        return None
    card_number = _NON_DIGITS.sub("", entity.text)[:CARD_NUMBER_LENGTH]
    return {"card_number": card_number}
