"""Decoding of the serverless invocation envelope.

The envelope carries a base64-encoded JSON body under ``BodyContent`` and the
connection headers under ``Headers``. Header values arrive either as a list of
strings or as a single string.
"""

import base64
import binascii
import json
from typing import Any

from vault_redactor.config.settings import Settings
from vault_redactor.invocation.exceptions import InputError
from vault_redactor.invocation.models import InvocationRequest


def decode_input(event: dict[str, Any]) -> dict[str, Any]:
    """Decode ``BodyContent`` into a JSON object.

    Raises:
        InputError: if the body is missing, not base64, not JSON, or not an object.
    """
    if not isinstance(event, dict):
        raise InputError("Invocation event must be an object")
    body = event.get("BodyContent")
    if not body:
        raise InputError("BodyContent missing")
    if not isinstance(body, str):
        raise InputError("BodyContent must be a base64 string")
    try:
        text = base64.b64decode(body, validate=True).decode("utf-8")
    except (binascii.Error, ValueError) as exc:
        raise InputError(f"BodyContent is not valid base64 text: {exc}") from exc
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputError(f"BodyContent is not valid JSON: {exc}") from exc

    if not isinstance(parsed, dict):
        raise InputError("BodyContent must decode to a JSON object")
    return parsed


def extract_auth_token(event: dict[str, Any], header_key: str) -> str:
    """Return the bearer token passed under ``header_key``."""
    headers = event.get("Headers") or {}
    if not isinstance(headers, dict):
        raise InputError("Headers must be an object")
    value = headers.get(header_key)
    if isinstance(value, list):
        value = value[0] if value else None
    if not value:
        raise InputError(f"Header '{header_key}' missing")
    return str(value)


def parse_invocation(event: dict[str, Any], settings: Settings) -> InvocationRequest:
    body = decode_input(event)
    auth_token = extract_auth_token(event, settings.auth_header_key)
    return InvocationRequest(skyflow_id=body.get("skyflow_id"), auth_token=auth_token)
