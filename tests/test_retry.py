import pytest

from jobscan.retry import call_with_retry, exponential_backoff


class Flaky:
    def __init__(self, failures, exc=RuntimeError):
        self.failures = failures
        self.exc = exc
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise self.exc(f"boom {self.calls}")
        return "ok"


class TestCallWithRetry:
    def test_first_attempt_does_not_wait(self, sleeps):
        fn = Flaky(0)
        assert call_with_retry(fn, sleep=sleeps.append) == "ok"
        assert fn.calls == 1
        assert sleeps == []

    def test_delay_before_attempt_k_is_two_to_the_k(self, sleeps):
        fn = Flaky(3)
        assert call_with_retry(fn, max_attempts=5, sleep=sleeps.append) == "ok"
        assert fn.calls == 4
        assert sleeps == [2.0, 4.0, 8.0]

    def test_budget_exhausted_reraises_last_error(self, sleeps):
        fn = Flaky(10)
        with pytest.raises(RuntimeError, match="boom 5"):
            call_with_retry(fn, max_attempts=5, sleep=sleeps.append)
        assert fn.calls == 5
        assert sleeps == [2.0, 4.0, 8.0, 16.0]

    def test_terminal_error_short_circuits(self, sleeps):
        fn = Flaky(10, exc=PermissionError)
        with pytest.raises(PermissionError):
            call_with_retry(
                fn,
                sleep=sleeps.append,
                is_terminal=lambda exc: isinstance(exc, PermissionError),
            )
        assert fn.calls == 1
        assert sleeps == []

    def test_non_retryable_type_propagates(self, sleeps):
        fn = Flaky(10, exc=KeyError)
        with pytest.raises(KeyError):
            call_with_retry(fn, retryable=(ValueError,), sleep=sleeps.append)
        assert fn.calls == 1

    def test_custom_backoff(self, sleeps):
        fn = Flaky(2)
        call_with_retry(fn, backoff=lambda k: 0.1 * k, sleep=sleeps.append)
        assert sleeps == [0.1, 0.2]

    def test_rejects_zero_attempts(self):
        with pytest.raises(ValueError):
            call_with_retry(Flaky(0), max_attempts=0)

    def test_exponential_backoff(self):
        assert [exponential_backoff(k) for k in range(5)] == [1.0, 2.0, 4.0, 8.0, 16.0]
