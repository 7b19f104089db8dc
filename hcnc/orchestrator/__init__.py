"""
Task Orchestrator — Parallel per-file work for the scanner

The classification engine is pure and stateless, so per-file work can
be fanned out freely. Results come back in input order.

Usage:
    from hcnc.orchestrator import get_orchestrator

    reports = get_orchestrator().map_parallel(scan_file, paths)

Configuration via environment variables:
    HCNC_PARALLEL_ENABLED=true    # Disable to run sequentially
    HCNC_IO_WORKERS=4             # Thread pool size
    HCNC_TASK_TIMEOUT=60          # Per-task result wait (seconds)
    HCNC_SHUTDOWN_TIMEOUT=10      # Pool shutdown timeout (seconds)
"""

import logging
import threading
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Any, Callable, Dict, List, Optional

from .config import OrchestratorConfig
from .pools import IOPool, PoolStats
from .task import Task, TaskResult, TaskStatus, io_task, run_task


logger = logging.getLogger(__name__)


class TaskFailedError(RuntimeError):
    """A task inside map_parallel raised or timed out; carries the failed TaskResult."""

    def __init__(self, task: Task, result: TaskResult):
        self.task = task
        self.result = result
        super().__init__(f"Task {task.name or task.id} failed: {result.error}")


class TaskOrchestrator:
    """
    Coordinator for parallel task execution.

    The pool is created lazily on first use. With parallelism disabled,
    tasks run inline and return completed futures, so callers see the
    same API either way.

    Thread Safety:
    - All public methods are thread-safe
    """

    def __init__(self, config: Optional[OrchestratorConfig] = None):
        """
        Initialize the orchestrator.

        Args:
            config: Configuration. If None, loads from environment.
        """
        self._config = config or OrchestratorConfig.from_env()
        self._config.validate()

        self._lock = threading.Lock()
        self._io_pool: Optional[IOPool] = None
        self._shutdown = False

    def _ensure_started(self) -> None:
        if self._io_pool is not None or not self._config.enabled:
            return
        with self._lock:
            if self._io_pool is None:
                self._io_pool = IOPool(self._config)

    @property
    def enabled(self) -> bool:
        """Check if parallelization is enabled."""
        return self._config.enabled

    @property
    def config(self) -> OrchestratorConfig:
        """Get current configuration."""
        return self._config

    def submit(self, task: Task) -> Future:
        """
        Submit a task for execution.

        Returns:
            Future that resolves to TaskResult

        Raises:
            RuntimeError: If orchestrator is shut down
        """
        if self._shutdown:
            raise RuntimeError("Orchestrator is shut down")

        if not self._config.enabled:
            return self._execute_sequential(task)

        self._ensure_started()
        return self._io_pool.submit(task)

    def map_parallel(
        self,
        fn: Callable,
        items: List[Any],
        on_failure: Optional[Callable[[Any, TaskResult], Any]] = None,
    ) -> List[Any]:
        """
        Parallel map operation.

        Applies fn to each item, returning results in the same order as
        items. A task that raises, or whose result is not ready within
        task_timeout, yields on_failure(item, result) in its slot. Without
        on_failure the first such task fails the whole map.

        Args:
            fn: Function to apply
            items: Items to process
            on_failure: Builds the placeholder result for a failed item

        Returns:
            List of results in same order as items

        Raises:
            RuntimeError: If orchestrator is shut down
            TaskFailedError: If a task failed and no on_failure was given
        """
        if not items:
            return []

        tasks = [io_task(fn=fn, args=(item,), name=str(item)) for item in items]
        futures = [self.submit(task) for task in tasks]

        results = []
        for item, task, future in zip(items, tasks, futures):
            result = self._wait(task, future)
            if result.success:
                results.append(result.result)
                continue

            logger.debug("Task %s failed: %s", task.name or task.id, result.to_json())
            if on_failure is None:
                raise TaskFailedError(task, result)
            results.append(on_failure(item, result))
        return results

    def _wait(self, task: Task, future: Future) -> TaskResult:
        """Result of a submitted task, or a TIMED_OUT result after task_timeout."""
        timeout = self._config.task_timeout
        try:
            return future.result(timeout=timeout)
        except FuturesTimeoutError:
            # A task that already started keeps its worker until it returns
            future.cancel()
            return TaskResult(
                task_id=task.id,
                status=TaskStatus.TIMED_OUT,
                error=f"timed out after {timeout:g}s",
            )

    def stats(self) -> Dict[str, Any]:
        """Pool statistics plus configuration."""
        summary: Dict[str, Any] = {"config": self._config.to_dict()}
        summary["io_pool"] = (self._io_pool.stats() if self._io_pool else PoolStats()).to_dict()
        return summary

    def shutdown(self, wait: bool = True) -> None:
        """Shutdown the orchestrator. Further submits raise RuntimeError."""
        with self._lock:
            if self._shutdown:
                return
            self._shutdown = True
            if self._io_pool:
                self._io_pool.shutdown(wait=wait)

    def _execute_sequential(self, task: Task) -> Future:
        """Run the task inline and return an already-completed Future."""
        future: Future = Future()
        future.set_result(run_task(task))
        return future


# Global orchestrator instance (singleton pattern)
_orchestrator: Optional[TaskOrchestrator] = None
_orchestrator_lock = threading.Lock()


def get_orchestrator() -> TaskOrchestrator:
    """
    Get the global orchestrator instance.

    Creates one if it doesn't exist, using environment configuration.
    """
    global _orchestrator

    if _orchestrator is None:
        with _orchestrator_lock:
            if _orchestrator is None:
                _orchestrator = TaskOrchestrator()

    return _orchestrator


def reset_orchestrator() -> None:
    """Shut down and drop the global orchestrator (tests, reconfiguration)."""
    global _orchestrator

    with _orchestrator_lock:
        if _orchestrator is not None:
            _orchestrator.shutdown(wait=True)
            _orchestrator = None


__all__ = [
    "TaskOrchestrator",
    "TaskFailedError",
    "Task",
    "TaskStatus",
    "TaskResult",
    "io_task",
    "OrchestratorConfig",
    "IOPool",
    "PoolStats",
    "get_orchestrator",
    "reset_orchestrator",
]
