# labkit

A small collection of numerical and concurrency building blocks written in
plain Python, using only the standard library.

## What is inside

| Module                | What it offers                                                              |
|-----------------------|-----------------------------------------------------------------------------|
| `labkit.matrix`       | `Matrix`: `+`, `-`, `*` (matrix product), indexing by row, aligned `str()`  |
| `labkit.polynomial`   | `Polynomial`: evaluation, derivative, `+ - *`, Newton–Raphson `find_root`   |
| `labkit.vector3`      | `Vector3`: addition, scaling, `dot`, `cross`, `normalize`                   |
| `labkit.integration`  | `trapezoidal` and `simpsons` rules for any callable                         |
| `labkit.stats`        | `mean`, `median`, `variance`, `standard_deviation`                          |
| `labkit.montecarlo`   | `estimate_pi`: Monte Carlo estimate of π                                    |
| `labkit.expression`   | `evaluate` / `ExpressionEvaluator`: `+ - * /`, parentheses, unary minus     |
| `labkit.threadpool`   | `ThreadPool`: priority task pool returning `concurrent.futures.Future`s     |
| `labkit.mergesort`    | `sequential_merge_sort`, `concurrent_merge_sort`, `merge`, `benchmark`      |
| `labkit.workstealing` | `WorkStealingPool`, `TaskQueue`, `Task`: per-worker queues with stealing    |

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Matrices

Built from a non-empty list of equally long rows; a ragged or empty input
raises `ValueError`, as does adding, subtracting or multiplying matrices of
unsuitable shapes.

```python
from labkit.matrix import Matrix

a = Matrix([[1, 2], [3, 4]])
b = Matrix([[5, 6], [7, 8]])
print(a + b)
print(a * b)
print(a.rows, a.cols, a[1][0])
zeros = Matrix.filled(2, 3, 0)
```

### Polynomials

Coefficients are given lowest degree first:

```python
from labkit.polynomial import Polynomial

p = Polynomial([-10, 0, 4, 1])   # x^3 + 4x^2 - 10
print(p)
print(p(2.0))                    # same as p.evaluate(2.0)
print(p.derivative())
print(p * Polynomial([2, 0, 1]))
root = p.find_root(1.5)
```

`find_root` runs at most 100 Newton–Raphson steps with tolerance `1e-6`. If
the derivative becomes too small it issues a `RuntimeWarning` and returns the
current guess.

### Vectors

```python
from labkit.vector3 import Vector3

a = Vector3(1.0, 5.0, 3.0)
b = Vector3(7.0, 4.0, 8.0)
print(a + b, a * 2, a.dot(b), a.cross(b), a.normalize())
```

`Vector3` is immutable; normalising a zero vector raises `ValueError`.

### Arithmetic expressions

```python
from labkit.expression import evaluate, ExpressionError

evaluate("100 * (2 + 12) / 14")   # 100.0
try:
    evaluate("1 / 0")
except ExpressionError as err:
    print(err)                    # Division by zero
```

`ExpressionError` is a subclass of `ValueError`.

### Numerical integration

```python
from labkit.integration import trapezoidal, simpsons

trapezoidal(lambda x: x * x, 0.0, 3.0, 10)
simpsons(lambda x: x * x, 0.0, 3.0, 10)
```

A non-positive number of intervals raises `ValueError`. `simpsons` given an
odd number of intervals issues a `RuntimeWarning` and uses one more.

### Statistics and Monte Carlo

```python
import random
from labkit.stats import mean, median, variance, standard_deviation
from labkit.montecarlo import estimate_pi

data = [16, 24, 22, 3, 43, 14, 43, 5, 22]
m = mean(data)
print(m, median(data), standard_deviation(variance(data, m)))
print(estimate_pi(10_000, random.Random(1)))
```

Empty data, or a non-positive number of points, raises `ValueError`.

### Thread pool

Higher priorities run first; tasks of equal priority run in submission order.
Exceptions raised by a task are stored in its future.

```python
from labkit.threadpool import ThreadPool

with ThreadPool(3) as pool:
    future = pool.submit(10, pow, 2, 10)
    print(future.result())
```

Leaving the `with` block (or calling `shutdown()`) lets queued tasks finish
and joins the workers; submitting afterwards raises `RuntimeError`.

### Merge sort

```python
from labkit.mergesort import sequential_merge_sort, concurrent_merge_sort

data = [5, 3, 9, 1]
concurrent_merge_sort(data)   # sorts in place
```

### Work stealing

```python
from labkit.workstealing import WorkStealingPool

report = WorkStealingPool(num_workers=2, num_tasks=6, work_seconds=0.01).run()
for execution in report.executions:
    print(execution.task_id, execution.worker, execution.stolen_from)
print(report.elapsed_ms)
```

## Command-line demos

Each module has a small demonstration command:

```
labkit-matrix
labkit-pi [--seed N]
labkit-stats
labkit-expr [EXPRESSION ...]
labkit-poly
labkit-integrate
labkit-vector
labkit-threadpool
labkit-mergesort [--size N] [--seed N]
labkit-workstealing [--workers N] [--tasks N]
```

`labkit-expr` evaluates the expressions given on the command line, or a
built-in set when none are given.

## Limitations

The commands are fixed demonstrations: apart from the options listed above
they take no input, so matrices, polynomials, vectors, integrals and data
sets cannot be supplied from the command line, only through the Python API.
`labkit-integrate` always integrates x² over [0, 3].