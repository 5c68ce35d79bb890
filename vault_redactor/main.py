import json
import sys
from typing import Any

import httpx

from vault_redactor.config.settings import Settings
from vault_redactor.invocation.envelope import parse_invocation
from vault_redactor.invocation.exceptions import InputError
from vault_redactor.logging.logger import Log
from vault_redactor.processor.models import PipelineResult, StepTracker
from vault_redactor.processor.processor import build_processor


def handler(event: dict[str, Any], context: object = None) -> dict[str, Any]:
    """Serverless entry point: decode input -> build dependencies -> run pipeline."""
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        request = parse_invocation(event, settings)
    except InputError as exc:
        Log.error(f"Rejected invocation: {exc}")
        return PipelineResult(success=False, steps=StepTracker(), error=str(exc)).to_dict()

    with httpx.Client(timeout=settings.http_timeout_seconds) as http_client:
        processor = build_processor(settings, http_client, request.auth_token)
        result = processor.process(request)
    return result.to_dict()


def main() -> None:
    """Run the handler locally on an event read from a file argument or stdin."""
    if len(sys.argv) > 1:
        with open(sys.argv[1], encoding="utf-8") as fh:
            event = json.load(fh)
    else:
        event = json.load(sys.stdin)
    print(json.dumps(handler(event), indent=2))


if __name__ == "__main__":
    main()
