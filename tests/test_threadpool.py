import threading

import pytest

from labkit.threadpool import ThreadPool, main


def test_higher_priority_runs_first():
    gate = threading.Event()
    order = []
    with ThreadPool(1) as pool:
        blocker = pool.submit(100, gate.wait, 5)
        futures = [pool.submit(p, order.append, p) for p in (1, 5, 3)]
        gate.set()
        for future in futures:
            future.result(timeout=5)
        assert blocker.result(timeout=5) is True
    assert order == [5, 3, 1]


def test_result_and_arguments_are_passed():
    with ThreadPool(2) as pool:
        future = pool.submit(0, lambda a, b, scale=1: (a + b) * scale, 2, 3, scale=4)
        assert future.result(timeout=5) == (2 + 3) * 4


def test_exception_reaches_future():
    def fail():
        raise RuntimeError("Oops! Task D failed.")

    with ThreadPool(2) as pool:
        future = pool.submit(7, fail)
        with pytest.raises(RuntimeError, match="Task D failed"):
            future.result(timeout=5)


def test_dependent_task_sees_other_results():
    with ThreadPool(3) as pool:
        a = pool.submit(10, lambda: 100)
        b = pool.submit(5, lambda: 200)
        c = pool.submit(8, lambda: a.result() + b.result())
        assert c.result(timeout=5) == 300


def test_shutdown_finishes_queued_tasks():
    gate = threading.Event()
    pool = ThreadPool(1)
    pool.submit(10, gate.wait, 5)
    futures = [pool.submit(i, lambda i=i: i * i) for i in range(5)]
    gate.set()
    pool.shutdown()
    assert all(f.done() for f in futures)
    assert [f.result() for f in futures] == [i * i for i in range(5)]


def test_submit_after_shutdown_raises():
    pool = ThreadPool(1)
    pool.shutdown()
    with pytest.raises(RuntimeError):
        pool.submit(1, lambda: None)


def test_zero_threads_rejected():
    with pytest.raises(ValueError):
        ThreadPool(0)


def test_main_reports_failure(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Caught exception from Task D: Oops! Task D failed." in out
    assert "result = 300" in out