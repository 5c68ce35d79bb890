from dataclasses import dataclass
from typing import Any

from vault_redactor.detection.models import OutputArtifact


@dataclass(frozen=True)
class ClassifiedOutputs:
    redacted_file: str | None
    entities: str | None


def parse_artifacts(output: list[dict[str, Any]] | None) -> list[OutputArtifact]:
    """Build artifacts from a run's raw ``output``, skipping untyped items."""
    artifacts: list[OutputArtifact] = []
    for item in output or []:
        file_type = item.get("processed_file_type") if isinstance(item, dict) else None
        if not isinstance(file_type, str):
            continue
        artifacts.append(
            OutputArtifact(processed_file_type=file_type, processed_file=item.get("processed_file"))
        )
    return artifacts


def classify_outputs(artifacts: list[OutputArtifact]) -> ClassifiedOutputs:
    """Pick the redacted file and the entities blob.

    The first artifact of each kind wins; later duplicates are ignored.
    """
    redacted_file: str | None = None
    entities: str | None = None
    found_redacted = found_entities = False
    for artifact in artifacts:
        if artifact.is_redacted_file:
            if not found_redacted:
                redacted_file = artifact.processed_file
                found_redacted = True
        elif artifact.is_entities and not found_entities:
            entities = artifact.processed_file
            found_entities = True
    return ClassifiedOutputs(redacted_file=redacted_file, entities=entities)
