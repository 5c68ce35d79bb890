import httpx

from vault_redactor.config.settings import Settings
from vault_redactor.detection.client import DetectionClient
from vault_redactor.detection.poller import RunPoller
from vault_redactor.invocation.models import InvocationRequest
from vault_redactor.logging.logger import Log
from vault_redactor.processor.models import PipelineResult
from vault_redactor.processor.pipeline import PipelineContext, PipelineStep
from vault_redactor.processor.steps import (
    ClassifyOutputsStep,
    DeidentifyStep,
    FetchFileStep,
    TokenizeStep,
    WriteBackStep,
)
from vault_redactor.vault.client import VaultClient


class Processor:
    """Orchestrates the redaction pipeline for one invocation.

    Pipeline: fetch -> deidentify (submit + poll) -> classify outputs ->
    write back -> tokenize. The first failing step aborts the rest; completed
    steps are never undone.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, request: InvocationRequest) -> PipelineResult:
        """Run all steps and return a result. Never raises."""
        Log.info(f"Processing record {request.skyflow_id}")
        context = PipelineContext(request=request)
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                Log.error(
                    f"Record {request.skyflow_id} failed at {type(step).__name__}: {exc}"
                )
                return PipelineResult(success=False, steps=context.steps, error=str(exc))

        Log.info(f"Record {request.skyflow_id} processed successfully")
        return PipelineResult(
            success=True,
            steps=context.steps,
            detected_entity_count=context.detected_entity_count,
            tokens=context.tokens,
        )


def build_processor(
    settings: Settings,
    http_client: httpx.Client,
    auth_token: str,
    poller: RunPoller | None = None,
) -> Processor:
    """Build a Processor wired to the vault and detection APIs."""
    vault = VaultClient(http_client=http_client, settings=settings, auth_token=auth_token)
    detection = DetectionClient(
        http_client=http_client, settings=settings, auth_token=auth_token
    )
    if poller is None:
        poller = RunPoller(
            detection,
            interval_seconds=settings.run_poll_interval_seconds,
            max_attempts=settings.run_poll_max_attempts,
        )
    steps: list[PipelineStep] = [
        FetchFileStep(vault),
        DeidentifyStep(detection, poller),
        ClassifyOutputsStep(),
        WriteBackStep(vault),
        TokenizeStep(vault),
    ]
    return Processor(steps=steps)
