from dataclasses import dataclass


@dataclass(frozen=True)
class InvocationRequest:
    """Decoded invocation: the vault record to redact and the caller's token."""

    skyflow_id: str | None
    auth_token: str
