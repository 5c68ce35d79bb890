import base64

from vault_redactor.detection.client import DetectionClient
from vault_redactor.detection.exceptions import MissingRunIdError
from vault_redactor.detection.poller import RunPoller
from vault_redactor.logging.logger import Log
from vault_redactor.processor.entities import decode_entities, extract_credit_card
from vault_redactor.processor.exceptions import MissingRedactedOutputError
from vault_redactor.processor.models import FetchedFile
from vault_redactor.processor.outputs import classify_outputs, parse_artifacts
from vault_redactor.processor.pipeline import PipelineContext, PipelineStep
from vault_redactor.vault.client import VaultClient
from vault_redactor.vault.file_format import infer_file_format


class FetchFileStep(PipelineStep):
    def __init__(self, vault: VaultClient) -> None:
        self._vault = vault

    def run(self, context: PipelineContext) -> PipelineContext:
        skyflow_id = context.request.skyflow_id
        download_url = self._vault.get_download_url(skyflow_id)
        raw_bytes = self._vault.download_file(download_url)
        context.fetched_file = FetchedFile(
            file_base64=base64.b64encode(raw_bytes).decode("ascii"),
            data_format=infer_file_format(download_url),
        )
        context.steps.file_read = True
        Log.info(
            f"Fetched {len(raw_bytes)} bytes for record {skyflow_id} "
            f"(format: {context.fetched_file.data_format})"
        )
        return context


class DeidentifyStep(PipelineStep):
    """Submit the file to the detection service and wait for the run to finish."""

    def __init__(self, detection: DetectionClient, poller: RunPoller) -> None:
        self._detection = detection
        self._poller = poller

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.fetched_file is None:
            raise ValueError("PipelineContext.fetched_file must be set before deidentification")
        response = self._detection.deidentify_file(
            context.fetched_file.file_base64,
            context.fetched_file.data_format,
        )
        run_id = response.get("run_id")
        if not run_id:
            raise MissingRunIdError("No run_id")
        context.run_id = run_id
        Log.info(f"Submitted record {context.request.skyflow_id} as run {run_id}")

        context.run_response = self._poller.poll(run_id)
        return context


class ClassifyOutputsStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        artifacts = parse_artifacts(context.run_response.get("output"))
        outputs = classify_outputs(artifacts)
        if not outputs.redacted_file:
            raise MissingRedactedOutputError("No redacted output")
        context.redacted_file = outputs.redacted_file
        context.entities_blob = outputs.entities
        context.steps.file_deidentified = True
        Log.info(
            f"Run {context.run_id} produced {len(artifacts)} artifacts "
            f"(entities: {'yes' if outputs.entities else 'no'})"
        )
        return context


class WriteBackStep(PipelineStep):
    def __init__(self, vault: VaultClient) -> None:
        self._vault = vault

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.redacted_file is None or context.fetched_file is None:
            raise ValueError(
                "PipelineContext.redacted_file and fetched_file must be set before write back"
            )
        self._vault.upload_file(
            context.request.skyflow_id,
            context.redacted_file,
            context.fetched_file.data_format,
        )
        context.steps.file_write = True
        Log.info(f"Uploaded redacted file for record {context.request.skyflow_id}")
        return context


class TokenizeStep(PipelineStep):
    """Tokenize the first detected credit card number into the record.

    The vault insert is issued even when no card was detected; the vault then
    decides what to do with empty fields.
    """

    def __init__(self, vault: VaultClient) -> None:
        self._vault = vault

    def run(self, context: PipelineContext) -> PipelineContext:
        entities = decode_entities(context.entities_blob) if context.entities_blob else []
        context.detected_entity_count = len(entities)
        context.card_data = extract_credit_card(entities)
        if context.card_data is None:
            Log.warning(
                f"No credit card entity among {len(entities)} entities "
                f"for record {context.request.skyflow_id}"
            )

        context.tokens = self._vault.tokenize(context.request.skyflow_id, context.card_data)
        context.steps.data_tokenize = True
        Log.info(f"Tokenized card data for record {context.request.skyflow_id}")
        return context
