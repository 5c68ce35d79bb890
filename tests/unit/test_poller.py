from typing import Any
from unittest.mock import MagicMock

import pytest

from vault_redactor.detection.client import DetectionClient
from vault_redactor.detection.exceptions import PollTimeoutError, RunFailedError
from vault_redactor.detection.models import PollDecision, RunStatus
from vault_redactor.detection.poller import RunPoller, next_poll_decision

PENDING = {"status": "PENDING"}


def _make_poller(
    responses: list[dict[str, Any]] | None = None,
    max_attempts: int = 300,
) -> tuple[RunPoller, MagicMock, MagicMock]:
    """Create a RunPoller with a mocked client and a no-op sleep."""
    client = MagicMock(spec=DetectionClient)
    if responses is not None:
        client.get_run.side_effect = responses
    sleep = MagicMock()
    poller = RunPoller(client, interval_seconds=1.0, max_attempts=max_attempts, sleep=sleep)
    return poller, client, sleep


class TestNextPollDecision:
    def test_failed_fails_even_on_last_attempt(self) -> None:
        assert next_poll_decision(RunStatus.FAILED, 300, 300) is PollDecision.FAIL

    def test_success_on_last_attempt_succeeds(self) -> None:
        assert next_poll_decision(RunStatus.SUCCESS, 300, 300) is PollDecision.SUCCEED

    def test_pending_below_budget_continues(self) -> None:
        assert next_poll_decision(RunStatus.PENDING, 299, 300) is PollDecision.CONTINUE

    def test_pending_at_budget_times_out(self) -> None:
        assert next_poll_decision(RunStatus.PENDING, 300, 300) is PollDecision.TIMEOUT


class TestRunStatus:
    @pytest.mark.parametrize("value", ["PENDING", "IN_PROGRESS", None, "success"])
    def test_non_terminal_values_collapse_to_pending(self, value: object) -> None:
        assert RunStatus.from_remote(value) is RunStatus.PENDING


class TestPollSuccess:
    @pytest.mark.parametrize("n", [1, 3, 300])
    def test_returns_nth_response_after_n_checks(self, n: int) -> None:
        final = {"status": "SUCCESS", "output": [{"processed_file_type": "entities"}]}
        poller, client, sleep = _make_poller([PENDING] * (n - 1) + [final])

        result = poller.poll("r1")

        assert result is final
        assert client.get_run.call_count == n
        assert sleep.call_count == n
        client.get_run.assert_called_with("r1")
        sleep.assert_called_with(1.0)

    def test_sleeps_before_every_check(self) -> None:
        calls: list[str] = []
        poller, client, sleep = _make_poller()
        sleep.side_effect = lambda _: calls.append("sleep")
        client.get_run.side_effect = lambda _: (
            calls.append("check"),
            {"status": "SUCCESS"} if calls.count("check") == 2 else PENDING,
        )[1]

        poller.poll("r1")

        assert calls == ["sleep", "check", "sleep", "check"]


class TestPollFailure:
    def test_fails_immediately_with_remote_error(self) -> None:
        failed = {"status": "FAILED", "error": {"message": "unsupported file"}}
        poller, client, _sleep = _make_poller([PENDING, failed, {"status": "SUCCESS"}])

        with pytest.raises(RunFailedError, match="unsupported file") as exc_info:
            poller.poll("r1")

        assert exc_info.value.error == {"message": "unsupported file"}
        assert client.get_run.call_count == 2

    def test_failure_without_error_detail(self) -> None:
        poller, _client, _sleep = _make_poller([{"status": "FAILED"}])

        with pytest.raises(RunFailedError, match=r"Run failed: \{\}"):
            poller.poll("r1")


class TestPollTimeout:
    def test_times_out_after_max_attempts(self) -> None:
        poller, client, sleep = _make_poller()
        client.get_run.return_value = {"status": "IN_PROGRESS"}

        with pytest.raises(PollTimeoutError, match="Polling timed out") as exc_info:
            poller.poll("r1")

        assert exc_info.value.attempts == 300
        assert client.get_run.call_count == 300
        assert sleep.call_count == 300

    def test_honours_custom_budget(self) -> None:
        poller, client, _sleep = _make_poller(max_attempts=5)
        client.get_run.return_value = PENDING

        with pytest.raises(PollTimeoutError):
            poller.poll("r1")

        assert client.get_run.call_count == 5

    def test_rejects_empty_budget(self) -> None:
        with pytest.raises(ValueError, match="max_attempts"):
            _make_poller(max_attempts=0)
