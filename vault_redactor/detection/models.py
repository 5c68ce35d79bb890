from dataclasses import dataclass
from enum import Enum


class RunStatus(str, Enum):
    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"

    @classmethod
    def from_remote(cls, value: object) -> "RunStatus":
        """Map a remote status value; anything non-terminal is pending."""
        if value == cls.SUCCESS.value:
            return cls.SUCCESS
        if value == cls.FAILED.value:
            return cls.FAILED
        return cls.PENDING


class PollDecision(str, Enum):
    CONTINUE = "continue"
    SUCCEED = "succeed"
    FAIL = "fail"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class OutputArtifact:
    """One typed output of a completed run."""

    processed_file_type: str  # e.g. "redacted_pdf", "entities"
    processed_file: str  # base64 payload

    @property
    def is_redacted_file(self) -> bool:
        return self.processed_file_type.startswith("redacted_")

    @property
    def is_entities(self) -> bool:
        return self.processed_file_type == "entities"


@dataclass(frozen=True)
class DetectedEntity:
    best_label: str
    text: str
