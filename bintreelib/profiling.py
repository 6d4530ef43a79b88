"""Time and memory profiling of code sections.

Example:
    >>> with profile_section() as result:
    ...     tree = generate_tree(1000)
    >>> print(f"{result.elapsed_us} us, {result.allocated_bytes} bytes")
"""

import time
import tracemalloc
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator


@dataclass
class ProfileResult:
    """Measurements for one profiled section, filled in when it exits."""
    elapsed_us: int = 0         # Wall time in microseconds
    allocated_bytes: int = 0    # Traced memory still held at exit, above the start
    peak_bytes: int = 0         # Highest traced memory during the section, above the start


@contextmanager
def profile_section() -> Iterator[ProfileResult]:
    """Measure elapsed time and traced memory of the enclosed block.

    If tracemalloc is already tracing it is left running, but its peak is
    reset.
    """
    result = ProfileResult()
    was_tracing = tracemalloc.is_tracing()
    if not was_tracing:
        tracemalloc.start()

    tracemalloc.reset_peak()
    start_memory, _ = tracemalloc.get_traced_memory()
    started = time.perf_counter()
    try:
        yield result
    finally:
        elapsed = time.perf_counter() - started
        end_memory, peak_memory = tracemalloc.get_traced_memory()
        if not was_tracing:
            tracemalloc.stop()

        result.elapsed_us = int(elapsed * 1_000_000)
        result.allocated_bytes = max(0, end_memory - start_memory)
        result.peak_bytes = max(0, peak_memory - start_memory)
