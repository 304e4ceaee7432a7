"""Helpers for timing data-structure operations over random input."""

from __future__ import annotations

import random
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

_CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
_STRING_LENGTH = 10


@dataclass(frozen=True)
class Operation:
    """A named operation applied to each generated item."""

    name: str
    function: Callable[[Any], Any]


@dataclass
class BenchmarkConfig:
    """How much data to generate, how many threads to use, and the seed."""

    size: int = 10000
    concurrency: int = 4
    seed: int = field(default_factory=time.time_ns)


@dataclass(frozen=True)
class BenchmarkResult:
    """Timing of one operation; ``duration`` is in seconds."""

    operation: str
    iterations: int
    duration: float
    operations_per_second: float


def default_config() -> BenchmarkConfig:
    """Return the default configuration, seeded from the current time."""
    return BenchmarkConfig()


def generate_random_data(kind: type, size: int, seed: int) -> list:
    """Return ``size`` reproducible random values of type int, float or str."""
    rng = random.Random(seed)
    if kind is int:
        return [rng.getrandbits(63) for _ in range(size)]
    if kind is float:
        return [rng.random() for _ in range(size)]
    if kind is str:
        return ["".join(rng.choices(_CHARSET, k=_STRING_LENGTH)) for _ in range(size)]
    raise TypeError(f"unsupported type for random data generation: {kind!r}")


def _check_iterations(iterations: int) -> None:
    if iterations < 1:
        raise ValueError("iterations must be at least 1")


def _result(name: str, iterations: int, duration: float) -> BenchmarkResult:
    rate = iterations / duration if duration > 0 else float("inf")
    return BenchmarkResult(name, iterations, duration, rate)


def run_benchmark(
    config: BenchmarkConfig,
    setup: Callable[[], Any],
    operation: Operation,
    iterations: int = 1,
    kind: type = int,
) -> BenchmarkResult:
    """Apply ``operation`` to every generated item, ``iterations`` times."""
    _check_iterations(iterations)
    data = generate_random_data(kind, config.size, config.seed)
    start = time.perf_counter()
    for _ in range(iterations):
        setup()
        for item in data:
            operation.function(item)
    return _result(operation.name, iterations, time.perf_counter() - start)


def run_concurrent_benchmark(
    config: BenchmarkConfig,
    setup: Callable[[], Any],
    operation: Operation,
    iterations: int = 1,
    kind: type = int,
) -> BenchmarkResult:
    """Like run_benchmark, but each pass runs ``config.concurrency`` threads over the data."""
    _check_iterations(iterations)
    data = generate_random_data(kind, config.size, config.seed)

    def worker() -> None:
        for item in data:
            operation.function(item)

    start = time.perf_counter()
    for _ in range(iterations):
        setup()
        threads = [threading.Thread(target=worker) for _ in range(config.concurrency)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
    return _result(operation.name, iterations, time.perf_counter() - start)


def run_benchmark_suite(
    config: BenchmarkConfig,
    setup: Callable[[], Any],
    operations: Sequence[Operation],
    iterations: int = 1,
    kind: type = int,
) -> list[BenchmarkResult]:
    """Run each operation in turn and return their results in order."""
    return [
        run_benchmark(config, setup, operation, iterations, kind)
        for operation in operations
    ]