from vault_redactor.invocation.envelope import decode_input, extract_auth_token, parse_invocation
from vault_redactor.invocation.exceptions import InputError
from vault_redactor.invocation.models import InvocationRequest

__all__ = [
    "InputError",
    "InvocationRequest",
    "decode_input",
    "extract_auth_token",
    "parse_invocation",
]
