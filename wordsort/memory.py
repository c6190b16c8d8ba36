import gc
import logging
import struct
import sys
import typing

import psutil

logger = logging.getLogger(__name__)

FALLBACK_FREE_MEMORY = 64 * 1024 * 1024

# Empty str object plus the list slot that references it.
DEFAULT_TOKEN_OVERHEAD = sys.getsizeof('') + struct.calcsize('P')


class CapacityError(Exception):
    pass


def estimate_free_memory(max_memory: typing.Optional[int] = None) -> int:
    """Estimate how many bytes this process may still allocate.

    Unreachable objects are collected first so they are not counted as used.
    Without an explicit ``max_memory`` cap the ceiling is the memory already
    held by the process plus what the system reports as available.
    """
    gc.collect()
    try:
        used = psutil.Process().memory_info().rss
        if max_memory is None:
            max_memory = used + psutil.virtual_memory().available
    except psutil.Error as error:
        fallback = FALLBACK_FREE_MEMORY if max_memory is None else max_memory // 2
        logger.warning(
            'Unable to read memory usage (%s), assuming %d free bytes',
            error, fallback,
        )
        return fallback
    return max(max_memory - used, 0)


def estimate_block_size(file_size: int, max_runs: int, free_memory: int) -> int:
    if max_runs < 1:
        raise ValueError(f'max_runs must be positive, got {max_runs}')

    block_size = -(-file_size // max_runs)
    if block_size > free_memory:
        raise CapacityError(
            'Cannot create enough temporary files to fit a sort file. '
            'Please check max_temp_files'
        )

    # Avoid spilling lots of tiny runs when memory is plentiful.
    return max(block_size, free_memory // 2)


def estimate_token_size(
        token: str, overhead: int = DEFAULT_TOKEN_OVERHEAD,
) -> int:
    return 2 * len(token) + overhead
