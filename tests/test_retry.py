import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jobmatch.ai.retry import exponential_backoff, retry_async  # noqa: E402


class Transient(Exception):
    pass


class Fatal(Exception):
    pass


class Exhausted(Exception):
    pass


class RetryAsyncTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.delays: list[float] = []
        self.calls = 0

    async def _sleep(self, delay: float) -> None:
        self.delays.append(delay)

    async def _run(self, outcomes, attempts=3):
        async def operation():
            self.calls += 1
            outcome = outcomes.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        return await retry_async(
            operation,
            is_retryable=lambda exc: isinstance(exc, Transient),
            attempts=attempts,
            backoff=exponential_backoff(1000),
            on_exhausted=lambda n, last: Exhausted(f"failed after {n} attempts: {last}"),
            sleep=self._sleep,
        )

    def test_exponential_backoff_schedule(self):
        schedule = exponential_backoff(1000)
        self.assertEqual([schedule(0), schedule(1), schedule(2)], [1.0, 2.0, 4.0])

    async def test_returns_first_success_without_sleeping(self):
        self.assertEqual(await self._run(["ok"]), "ok")
        self.assertEqual(self.calls, 1)
        self.assertEqual(self.delays, [])

    async def test_retries_transient_failures_with_backoff(self):
        result = await self._run([Transient("busy"), Transient("busy"), "ok"])
        self.assertEqual(result, "ok")
        self.assertEqual(self.calls, 3)
        self.assertEqual(self.delays, [1.0, 2.0])

    async def test_non_retryable_error_propagates_immediately(self):
        with self.assertRaises(Fatal):
            await self._run([Fatal("nope"), "ok"])
        self.assertEqual(self.calls, 1)
        self.assertEqual(self.delays, [])

    async def test_zero_attempt_budget_is_rejected(self):
        with self.assertRaises(ValueError):
            await self._run(["ok"], attempts=0)
        self.assertEqual(self.calls, 0)

    async def test_exhaustion_raises_aggregate_with_last_error(self):
        with self.assertRaises(Exhausted) as ctx:
            await self._run([Transient("one"), Transient("two"), Transient("three")])
        self.assertIn("3 attempts", str(ctx.exception))
        self.assertIn("three", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, Transient)
        self.assertEqual(self.delays, [1.0, 2.0])


if __name__ == "__main__":
    unittest.main()
