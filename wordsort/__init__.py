from wordsort.chunks import Run, read_tokens, sort_and_save_run, split_into_runs
from wordsort.config import ConfigurationError, Settings
from wordsort.memory import (
    CapacityError,
    estimate_block_size,
    estimate_free_memory,
    estimate_token_size,
)
from wordsort.merge import RunCursor, merge_runs
from wordsort.ordering import ASCENDING, DESCENDING, Comparator, comparator_for

__all__ = [
    'ASCENDING',
    'DESCENDING',
    'CapacityError',
    'Comparator',
    'ConfigurationError',
    'Run',
    'RunCursor',
    'Settings',
    'comparator_for',
    'estimate_block_size',
    'estimate_free_memory',
    'estimate_token_size',
    'merge_runs',
    'read_tokens',
    'sort_and_save_run',
    'split_into_runs',
]
