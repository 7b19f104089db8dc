"""
Task — Unit of work submitted to the pool

- Task: a callable plus its arguments and a short id
- TaskStatus: lifecycle states
- TaskResult: outcome of running a task (value or error text)

Tasks are immutable after creation. Results are plain data so they can
be logged or dumped as JSON.
"""

import itertools
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Optional

import orjson
import xxhash


class TaskStatus(Enum):
    """Task lifecycle states."""
    COMPLETED = "completed"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


_task_counter = itertools.count()


def _generate_task_id() -> str:
    """Short unique id: xxhash of a timestamp plus a process-wide counter."""
    seed = f"{datetime.now(timezone.utc).isoformat()}:{next(_task_counter)}"
    return xxhash.xxh64(seed.encode()).hexdigest()[:12]


@dataclass(frozen=True)
class Task:
    """
    Unit of work for the I/O pool.

    Equality and hashing go by id only.
    """
    fn: Callable
    args: tuple = field(default_factory=tuple)
    kwargs: Dict[str, Any] = field(default_factory=dict)
    name: str = ""
    id: str = field(default_factory=_generate_task_id)

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Task):
            return self.id == other.id
        return False


@dataclass
class TaskResult:
    """Outcome of task execution."""
    task_id: str
    status: TaskStatus
    result: Any = None
    error: Optional[str] = None

    # Timing
    started_at: Optional[str] = None
    completed_at: Optional[str] = None
    duration_ms: Optional[float] = None

    @property
    def success(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    @property
    def failed(self) -> bool:
        return self.status in (TaskStatus.FAILED, TaskStatus.TIMED_OUT)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for logging; non-JSON results are stringified."""
        return {
            "task_id": self.task_id,
            "status": self.status.value,
            "result": self.result if _is_serializable(self.result) else str(self.result),
            "error": self.error,
            "started_at": self.started_at,
            "completed_at": self.completed_at,
            "duration_ms": self.duration_ms,
        }

    def to_json(self) -> str:
        """One-line JSON form for log records."""
        return orjson.dumps(self.to_dict()).decode()


def _is_serializable(obj: Any) -> bool:
    """Check if object can be dumped as JSON."""
    try:
        orjson.dumps(obj)
        return True
    except TypeError:
        # orjson.JSONEncodeError subclasses TypeError
        return False


def io_task(
    fn: Callable,
    args: tuple = (),
    kwargs: Dict[str, Any] = None,
    name: str = "",
) -> Task:
    """
    Create an I/O-bound task (file reads).

    Example:
        task = io_task(fn=scan_file, args=(path,), name=str(path))
    """
    return Task(fn=fn, args=args, kwargs=kwargs or {}, name=name)


def run_task(task: Task) -> TaskResult:
    """
    Execute a task inline, converting any exception into a FAILED result.

    Shared by the pool workers and the sequential fallback.
    """
    started_at = datetime.now(timezone.utc)
    try:
        value = task.fn(*task.args, **task.kwargs)
    except Exception as e:
        completed_at = datetime.now(timezone.utc)
        return TaskResult(
            task_id=task.id,
            status=TaskStatus.FAILED,
            error=f"{type(e).__name__}: {e}",
            started_at=started_at.isoformat(),
            completed_at=completed_at.isoformat(),
            duration_ms=(completed_at - started_at).total_seconds() * 1000,
        )

    completed_at = datetime.now(timezone.utc)
    return TaskResult(
        task_id=task.id,
        status=TaskStatus.COMPLETED,
        result=value,
        started_at=started_at.isoformat(),
        completed_at=completed_at.isoformat(),
        duration_ms=(completed_at - started_at).total_seconds() * 1000,
    )
