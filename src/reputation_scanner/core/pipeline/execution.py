"""
Pipeline stage: run checks concurrently and collect results in declared order.

Each check runs on its own daemon thread, gated by a semaphore sized to
max_concurrent_checks. A check that is still running after check_timeout is
reported as timed out and left behind; being a daemon, its thread does not
keep the interpreter alive once the scan has returned.
"""

import logging
import threading
import time
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import List, Sequence

from ...checks import Check, degraded_result
from ..models import CheckResult

logger = logging.getLogger(__name__)


class ScannerExecutionMixin:
    def _run_check(self, check: Check, address: str, network: str) -> CheckResult:
        """Invoke one check and verify it returned a result under its own name."""
        result = check.run(address, network)
        if not isinstance(result, CheckResult):
            raise TypeError(f"returned {type(result).__name__} instead of CheckResult")
        if result.name != check.name:
            raise ValueError(f"returned result named '{result.name}'")
        return result

    def _submit_check(
        self, check: Check, address: str, network: str, slots: threading.Semaphore
    ) -> Future:
        """Start a check on a daemon thread and return a future for its result."""
        future: Future = Future()

        def work():
            with slots:
                # Skipped when the scan gave up on it before a slot freed up
                if not future.set_running_or_notify_cancel():
                    return
                try:
                    future.set_result(self._run_check(check, address, network))
                except BaseException as e:
                    future.set_exception(e)

        threading.Thread(target=work, name=f"check-{check.name}", daemon=True).start()
        return future

    def _run_checks(self, checks: Sequence[Check], address: str, network: str) -> List[CheckResult]:
        """
        Run checks concurrently and return their results in declared order.

        A check that raises or exceeds check_timeout is replaced by a neutral
        warning so the remaining checks and the scan itself complete.
        """
        if not checks:
            return []

        max_workers = min(self.max_concurrent_checks or len(checks), len(checks))
        slots = threading.Semaphore(max_workers)
        t_start = time.time()
        results: List[CheckResult] = []

        futures = [self._submit_check(check, address, network, slots) for check in checks]

        # Join in submission order; completion order does not matter.
        for check, future in zip(checks, futures):
            try:
                result = future.result(timeout=self.check_timeout)
            except FutureTimeoutError:
                future.cancel()
                logger.warning(f"Check '{check.name}' timed out after {self.check_timeout}s for {address}")
                result = degraded_result(check.name, f"Check timed out after {self.check_timeout:g}s")
            except Exception as e:
                logger.error(f"Check '{check.name}' failed for {address}: {type(e).__name__}: {e}")
                result = degraded_result(check.name, f"Check could not complete: {e}")

            logger.debug(f"  {result.name}: {result.status} ({result.score})")
            results.append(result)

        logger.info(f"Ran {len(results)} check(s) for {address} in {time.time() - t_start:.2f}s")
        return results
