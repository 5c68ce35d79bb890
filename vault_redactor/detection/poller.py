"""Bounded polling of an asynchronous detection run.

Each attempt sleeps a fixed interval and then reads the run status. There is
no backoff and no cancellation: the loop ends on SUCCESS, FAILED, or when the
attempt budget is spent.
"""

import time
from collections.abc import Callable
from typing import Any

from vault_redactor.detection.client import DetectionClient
from vault_redactor.detection.exceptions import PollTimeoutError, RunFailedError
from vault_redactor.detection.models import PollDecision, RunStatus
from vault_redactor.logging.logger import Log

DEFAULT_INTERVAL_SECONDS = 1.0
DEFAULT_MAX_ATTEMPTS = 300


def next_poll_decision(status: RunStatus, attempts: int, max_attempts: int) -> PollDecision:
    """Decide what to do after ``attempts`` checks, the last of which saw ``status``."""
    if status is RunStatus.FAILED:
        return PollDecision.FAIL
    if status is RunStatus.SUCCESS:
        return PollDecision.SUCCEED
    if attempts >= max_attempts:
        return PollDecision.TIMEOUT
    return PollDecision.CONTINUE


class RunPoller:
    """Polls a detection run until it reaches a terminal state."""

    def __init__(
        self,
        client: DetectionClient,
        *,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._client = client
        self._interval_seconds = interval_seconds
        self._max_attempts = max_attempts
        self._sleep = sleep

    def poll(self, run_id: str) -> dict[str, Any]:
        """Return the run body once its status is SUCCESS.

        Raises:
            RunFailedError: as soon as the run reports FAILED.
            PollTimeoutError: after max_attempts checks without a terminal state.
        """
        attempts = 0
        while True:
            self._sleep(self._interval_seconds)
            attempts += 1
            response = self._client.get_run(run_id)
            status = RunStatus.from_remote(response.get("status"))
            Log.debug(f"Run {run_id} attempt {attempts}: status {response.get('status')}")

            decision = next_poll_decision(status, attempts, self._max_attempts)
            if decision is PollDecision.SUCCEED:
                Log.info(f"Run {run_id} succeeded after {attempts} checks")
                return response
            if decision is PollDecision.FAIL:
                Log.error(f"Run {run_id} failed after {attempts} checks")
                raise RunFailedError(response.get("error"))
            if decision is PollDecision.TIMEOUT:
                Log.error(f"Run {run_id} did not finish within {attempts} checks")
                raise PollTimeoutError(attempts)
