"""A fixed-size thread pool that runs higher-priority tasks first."""

from __future__ import annotations

import argparse
import heapq
import itertools
import sys
import threading
from concurrent.futures import Future
from typing import Any, Callable


class ThreadPool:
    """Worker threads fed from a priority queue; larger priorities run first.

    Every submitted call gets a :class:`concurrent.futures.Future` that holds its
    result or the exception it raised. On shutdown the workers finish whatever
    is still queued and then exit.
    """

    def __init__(self, num_threads: int) -> None:
        if num_threads < 1:
            raise ValueError("num_threads must be at least 1")
        self._tasks: list[tuple[int, int, Callable[[], None]]] = []
        self._sequence = itertools.count()
        self._cv = threading.Condition()
        self._stopping = False
        self._workers = [
            threading.Thread(target=self._work, name=f"pool-worker-{i}", daemon=True)
            for i in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    def submit(self, priority: int, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``func(*args, **kwargs)`` with ``priority`` and return its future."""
        future: Future = Future()

        def job() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = func(*args, **kwargs)
            except BaseException as error:  # handed to whoever waits on the future
                future.set_exception(error)
            else:
                future.set_result(result)

        with self._cv:
            if self._stopping:
                raise RuntimeError("cannot submit to a pool that has been shut down")
            heapq.heappush(self._tasks, (-priority, next(self._sequence), job))
            self._cv.notify()
        return future

    def shutdown(self) -> None:
        """Stop accepting work, let queued tasks finish and join the workers."""
        with self._cv:
            self._stopping = True
            self._cv.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def _work(self) -> None:
        while True:
            with self._cv:
                self._cv.wait_for(lambda: self._stopping or self._tasks)
                if not self._tasks:
                    return
                _, _, job = heapq.heappop(self._tasks)
            job()


def _demo_task(message: str, outcome: Any) -> Any:
    """Announce the task, then return ``outcome`` or raise it if it is an exception."""
    print(message)
    if isinstance(outcome, BaseException):
        raise outcome
    return outcome


def main(argv: list[str] | None = None) -> int:
    """Run a few prioritised, dependent and failing tasks."""
    argparse.ArgumentParser(description="Priority thread pool demonstration.").parse_args(argv)
    with ThreadPool(3) as pool:
        future_a = pool.submit(10, _demo_task, "Task A running (high priority)", 100)
        future_b = pool.submit(5, _demo_task, "Task B running (low priority)", 200)

        def task_c() -> int:
            result = future_a.result() + future_b.result()
            print(f"Task C running (depends on A & B), result = {result}")
            return result

        future_c = pool.submit(8, task_c)
        future_d = pool.submit(
            7,
            _demo_task,
            "Task D running (will throw)",
            RuntimeError("Oops! Task D failed."),
        )

        try:
            future_d.result()
        except RuntimeError as error:
            print(f"Caught exception from Task D: {error}")
        future_c.result()
    return 0


if __name__ == "__main__":
    sys.exit(main())