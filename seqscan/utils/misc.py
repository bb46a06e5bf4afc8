import logging
import mmap
import os
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, List, Optional, Sequence, Tuple

import numpy as np


def open_mapped_file(file_path):
    """Map a file read-only. Empty files give b'' since they cannot be mapped."""
    with open(file_path, "rb") as handle:
        if os.fstat(handle.fileno()).st_size == 0:
            return b""
        return mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ)


def as_buffer(source):
    """Return source as a buffer, mapping it first when it is a path."""
    if isinstance(source, (str, os.PathLike)):
        return open_mapped_file(source)
    return source


def resolve_workers(n_workers: Optional[int] = None) -> int:
    """Default the worker count to the number of CPUs."""
    if n_workers is None:
        return os.cpu_count() or 1
    if n_workers < 1:
        raise ValueError(f"n_workers must be at least 1, got {n_workers}")
    return n_workers


def partition(n_items: int, n_parts: int) -> List[Tuple[int, int]]:
    """
    Split range(n_items) into at most n_parts contiguous, non-empty slices.
    Returns (start, stop) pairs covering every index exactly once.
    """
    if n_items == 0:
        return []
    n_parts = max(1, min(n_parts, n_items))
    chunks = np.array_split(np.arange(n_items), n_parts)
    return [(int(chunk[0]), int(chunk[-1]) + 1) for chunk in chunks]


def run_partitioned(func: Callable[[Sequence[Any]], Any], items: Sequence[Any], n_workers: int) -> List[Any]:
    """
    Apply func to static slices of items in a fixed-size thread pool.
    Each slice result lands in its own slot; results are returned in slice order
    once every worker has finished.
    """
    bounds = partition(len(items), n_workers)
    if len(bounds) <= 1:
        return [func(items[start:stop]) for start, stop in bounds]

    results: List[Any] = [None] * len(bounds)
    with ThreadPoolExecutor(max_workers=len(bounds)) as executor:
        futures = {
            executor.submit(func, items[start:stop]): slot
            for slot, (start, stop) in enumerate(bounds)
        }
        for future in as_completed(futures):
            results[futures[future]] = future.result()
    return results


def setup_logging(log_file=None, log_level=logging.INFO):
    """Setup logging configuration for the seqscan package."""
    logger = logging.getLogger("seqscan")
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s',
                                  datefmt='%Y-%m-%d %H:%M:%S')

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Console handler, stderr keeps stdout free for results
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
