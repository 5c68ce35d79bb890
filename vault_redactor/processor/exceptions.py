class OutputError(Exception):
    """Base exception for errors in the outputs of a completed run."""


class MissingRedactedOutputError(OutputError):
    """Raised when a completed run has no redacted file artifact."""


class EntitiesDecodeError(OutputError):
    """Raised when the entities artifact cannot be decoded into a list."""
