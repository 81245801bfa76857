"""Numerical and concurrency building blocks: matrices, polynomials, vectors, integration, statistics, expression evaluation, thread pools, merge sort and work stealing."""

__version__ = "0.1.0"