from dataclasses import dataclass
from typing import Any


@dataclass
class StepTracker:
    """Completion flags for the externally visible pipeline stages.

    Flags are only ever set to True, and only after the stage's effect succeeded.
    """

    file_read: bool = False
    file_deidentified: bool = False
    file_write: bool = False
    data_tokenize: bool = False

    def to_dict(self) -> dict[str, bool]:
        return {
            "fileRead": self.file_read,
            "fileDeidentified": self.file_deidentified,
            "fileWrite": self.file_write,
            "dataTokenize": self.data_tokenize,
        }


@dataclass(frozen=True)
class FetchedFile:
    file_base64: str
    data_format: str | None


@dataclass
class PipelineResult:
    """Outcome returned to the invoker, on success and on failure."""

    success: bool
    steps: StepTracker
    detected_entity_count: int = 0
    tokens: Any = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {
                "success": True,
                "steps": self.steps.to_dict(),
                "detectedEntityCount": self.detected_entity_count,
                "tokens": self.tokens,
            }
        return {
            "success": False,
            "steps": self.steps.to_dict(),
            "error": self.error,
        }
