"""Round-robin producer feeding per-worker queues, with idle workers stealing work."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from collections import deque
from dataclasses import dataclass, field

NUM_WORKERS = 4
NUM_TASKS = 20
WORK_SECONDS = 0.1
PRODUCE_DELAY = 0.03
IDLE_DELAY = 0.01


@dataclass(frozen=True)
class Task:
    """A unit of simulated work."""

    id: int
    duration: float = WORK_SECONDS

    def run(self) -> None:
        """Report the running thread and sleep for the task's duration."""
        print(f"Task {self.id} run by thread {threading.get_ident()}")
        time.sleep(self.duration)


class TaskQueue:
    """A thread-safe FIFO of tasks."""

    def __init__(self) -> None:
        self._items: deque[Task] = deque()
        self._lock = threading.Lock()

    def push(self, task: Task) -> None:
        """Append ``task``."""
        with self._lock:
            self._items.append(task)

    def try_pop(self) -> Task | None:
        """Remove and return the oldest task, or ``None`` when empty."""
        with self._lock:
            return self._items.popleft() if self._items else None

    def empty(self) -> bool:
        """Whether no tasks are waiting."""
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


@dataclass(frozen=True)
class Execution:
    """One task run: which worker ran it and which queue it was stolen from, if any."""

    task_id: int
    worker: int
    stolen_from: int | None = None


@dataclass
class RunReport:
    """Outcome of a :meth:`WorkStealingPool.run`."""

    executions: list[Execution] = field(default_factory=list)
    elapsed_ms: float = 0.0


class WorkStealingPool:
    """One producer and ``num_workers`` consumers, each with its own queue."""

    def __init__(
        self,
        num_workers: int = NUM_WORKERS,
        num_tasks: int = NUM_TASKS,
        work_seconds: float = WORK_SECONDS,
        produce_delay: float = PRODUCE_DELAY,
    ) -> None:
        if num_workers < 1:
            raise ValueError("num_workers must be at least 1")
        if num_tasks < 0:
            raise ValueError("num_tasks must not be negative")
        self.num_workers = num_workers
        self.num_tasks = num_tasks
        self.work_seconds = work_seconds
        self.produce_delay = produce_delay
        self.queues: list[TaskQueue] = []
        self._done_producing = threading.Event()
        self._record_lock = threading.Lock()
        self._executions: list[Execution] = []

    def _produce(self) -> None:
        for task_id in range(self.num_tasks):
            target = task_id % self.num_workers
            self.queues[target].push(Task(task_id, self.work_seconds))
            print(f"[Producer] Task {task_id} added to queue {target}")
            time.sleep(self.produce_delay)
        self._done_producing.set()

    def _execute(self, task: Task, worker: int, stolen_from: int | None) -> None:
        task.run()
        with self._record_lock:
            self._executions.append(Execution(task.id, worker, stolen_from))

    def _steal(self, worker: int) -> bool:
        for victim, queue in enumerate(self.queues):
            if victim == worker:
                continue
            task = queue.try_pop()
            if task is not None:
                print(f"[Thread {worker}] Stole task from queue {victim}")
                self._execute(task, worker, victim)
                return True
        return False

    def _consume(self, worker: int) -> None:
        own = self.queues[worker]
        while not self._done_producing.is_set() or not own.empty():
            task = own.try_pop()
            if task is not None:
                self._execute(task, worker, None)
            else:
                self._steal(worker)
                time.sleep(IDLE_DELAY)

    def run(self) -> RunReport:
        """Produce every task, let the workers drain the queues and report."""
        self.queues = [TaskQueue() for _ in range(self.num_workers)]
        self._done_producing.clear()
        self._executions = []
        start = time.monotonic()
        producer = threading.Thread(target=self._produce, name="producer")
        consumers = [
            threading.Thread(target=self._consume, args=(i,), name=f"worker-{i}")
            for i in range(self.num_workers)
        ]
        producer.start()
        for consumer in consumers:
            consumer.start()
        producer.join()
        for consumer in consumers:
            consumer.join()
        elapsed_ms = (time.monotonic() - start) * 1000.0
        return RunReport(list(self._executions), elapsed_ms)


def main(argv: list[str] | None = None) -> int:
    """Run the work-stealing demonstration."""
    parser = argparse.ArgumentParser(description="Work-stealing queue demonstration.")
    parser.add_argument("--workers", type=int, default=NUM_WORKERS)
    parser.add_argument("--tasks", type=int, default=NUM_TASKS)
    args = parser.parse_args(argv)
    report = WorkStealingPool(args.workers, args.tasks).run()
    print(f"\n✅ All tasks done in {int(report.elapsed_ms)} ms.")
    return 0


if __name__ == "__main__":
    sys.exit(main())