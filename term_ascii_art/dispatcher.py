#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter - Thread Dispatcher
=====================================================
Splits the output rows into contiguous chunks and computes them on a pool
of worker threads (fork-join).

Workers share only read-only inputs and each one returns its own list of
rows, so no locking is needed. Rows are reassembled by chunk position, never
by completion order, which keeps the output independent of the thread count.
"""

import logging
import math
from concurrent.futures import ALL_COMPLETED, ThreadPoolExecutor, wait
from typing import Callable, List, Optional, TypeVar

from term_ascii_art.exceptions import ConversionError

logger = logging.getLogger(__name__)

Row = TypeVar('Row')


def partition_rows(height: int, thread_count: int) -> List[range]:
    """
    Partition ``height`` rows into at most ``thread_count`` contiguous chunks.

    Every chunk but the last holds ``ceil(height / thread_count)`` rows; the
    last one may be smaller. Empty chunks are never produced.
    """
    if height <= 0:
        return []
    chunk_size = math.ceil(height / max(1, thread_count))
    return [range(start, min(start + chunk_size, height))
            for start in range(0, height, chunk_size)]


def _compute_chunk(rows: range, compute_row: Callable[[int], Row]) -> List[Row]:
    return [compute_row(row) for row in rows]


def dispatch_rows(height: int, thread_count: int,
                  compute_row: Callable[[int], Row],
                  log: Optional[logging.Logger] = None) -> List[Row]:
    """
    Compute every row of the output grid.

    Args:
        height: Number of output rows
        thread_count: Number of worker threads; 1 runs in the calling thread
        compute_row: Function computing a single row from its index
        log: Logger for diagnostics (defaults to this module's logger)

    Returns:
        All rows in index order

    Raises:
        ConversionError: if computing any row failed
    """
    log = log or logger
    chunks = partition_rows(height, thread_count)
    log.debug("Computing %d rows in %d chunk(s)", height, len(chunks))

    if thread_count == 1 or len(chunks) <= 1:
        try:
            results = [_compute_chunk(chunk, compute_row) for chunk in chunks]
        except Exception as e:
            raise ConversionError(f"Conversion failed: {e}", [e]) from e
    else:
        with ThreadPoolExecutor(max_workers=thread_count) as executor:
            futures = [executor.submit(_compute_chunk, chunk, compute_row) for chunk in chunks]
            wait(futures, return_when=ALL_COMPLETED)

        errors = [future.exception() for future in futures if future.exception() is not None]
        if errors:
            for error in errors:
                log.debug("Worker failed: %r", error)
            raise ConversionError(
                f"Conversion failed in {len(errors)} of {len(chunks)} worker(s): {errors[0]}",
                errors,
            ) from errors[0]
        results = [future.result() for future in futures]

    return [row for chunk_rows in results for row in chunk_rows]
