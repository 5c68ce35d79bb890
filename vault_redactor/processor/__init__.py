from vault_redactor.processor.models import PipelineResult, StepTracker
from vault_redactor.processor.processor import Processor, build_processor

__all__ = ["PipelineResult", "Processor", "StepTracker", "build_processor"]
