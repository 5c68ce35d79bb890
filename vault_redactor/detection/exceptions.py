import json


class DetectionError(Exception):
    """Base exception for all detection-service errors."""


class MissingRunIdError(DetectionError):
    """Raised when the deidentify call does not return a run id."""


class RunFailedError(DetectionError):
    """Raised when the detection service reports the run as FAILED."""

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(f"Run failed: {json.dumps(error or {})}")


class PollTimeoutError(DetectionError):
    """Raised when the run does not finish within the polling budget."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__("Polling timed out")
