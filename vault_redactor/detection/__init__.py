from vault_redactor.detection.client import DetectionClient
from vault_redactor.detection.poller import RunPoller, next_poll_decision

__all__ = ["DetectionClient", "RunPoller", "next_poll_decision"]
