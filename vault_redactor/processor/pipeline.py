from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from vault_redactor.invocation.models import InvocationRequest
from vault_redactor.processor.models import FetchedFile, StepTracker


@dataclass(slots=True)
class PipelineContext:
    request: InvocationRequest
    steps: StepTracker = field(default_factory=StepTracker)
    fetched_file: FetchedFile | None = None
    run_id: str = ""
    run_response: dict[str, Any] = field(default_factory=dict)
    redacted_file: str | None = None
    entities_blob: str | None = None
    detected_entity_count: int = 0
    card_data: dict[str, str] | None = None
    tokens: Any = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
