class InputError(Exception):
    """Raised when the invocation envelope is malformed or incomplete."""
