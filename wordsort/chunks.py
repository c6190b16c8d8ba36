import atexit
import contextlib
import io
import logging
import os
import tempfile
import typing

from wordsort.memory import DEFAULT_TOKEN_OVERHEAD, estimate_block_size, estimate_token_size
from wordsort.ordering import Comparator

logger = logging.getLogger(__name__)

# Run files not yet drained by the merge; removed at interpreter exit.
_pending_runs: typing.Set[str] = set()


class Run(typing.NamedTuple):
    path: str
    count: int


@atexit.register
def _remove_pending_runs() -> None:
    for path in list(_pending_runs):
        discard_run(path)


def discard_run(path: str) -> None:
    _pending_runs.discard(path)
    with contextlib.suppress(FileNotFoundError):
        os.remove(path)


def read_tokens(
        path: typing.Union[str, os.PathLike],
        block_size: int = io.DEFAULT_BUFFER_SIZE,
) -> typing.Iterator[str]:
    """Yield whitespace separated tokens from ``path`` without loading it whole.

    The file stays open until the generator is exhausted or closed.
    """
    with open(path, encoding='utf-8') as source:
        tail = ''
        while True:
            block = source.read(block_size)
            if not block:
                break
            tokens = (tail + block).split()
            if tokens and not block[-1].isspace():
                tail = tokens.pop()
            else:
                tail = ''
            yield from tokens
        if tail:
            yield tail


def sort_and_save_run(
        tokens: typing.List[str],
        comparator: Comparator,
        work_dir: typing.Union[str, os.PathLike, None] = None,
) -> Run:
    """Sort ``tokens`` in place and write them to a new run file."""
    comparator.sort(tokens)
    fd, path = tempfile.mkstemp(prefix='sorted', suffix='.txt', dir=work_dir)
    _pending_runs.add(path)
    with open(fd, 'w', encoding='utf-8', newline='\n') as run_file:
        for token in tokens:
            run_file.write(token)
            run_file.write('\n')
    return Run(path, len(tokens))


def _take_chunk(
        source: typing.Iterator[str], block_size: int, token_overhead: int,
) -> typing.List[str]:
    chunk = []
    chunk_size = 0
    for token in source:
        chunk.append(token)
        chunk_size += estimate_token_size(token, token_overhead)
        if chunk_size >= block_size:
            break
    return chunk


def split_into_runs(
        source: typing.Iterator[str],
        file_size: int,
        max_runs: int,
        free_memory: int,
        comparator: Comparator,
        work_dir: typing.Union[str, os.PathLike, None] = None,
        distinct: bool = False,
        token_overhead: int = DEFAULT_TOKEN_OVERHEAD,
) -> typing.List[Run]:
    """Split ``source`` into sorted runs that each fit the block budget.

    ``source`` is closed when this returns or raises. With ``distinct`` set,
    repeated tokens inside one chunk are written once; repeats spread over
    different chunks are kept.
    """
    runs = []
    with contextlib.closing(source):
        block_size = estimate_block_size(file_size, max_runs, free_memory)
        logger.debug('Block size is %d bytes', block_size)
        while True:
            chunk = _take_chunk(source, block_size, token_overhead)
            if not chunk:
                break
            if distinct:
                chunk = list(dict.fromkeys(chunk))
            run = sort_and_save_run(chunk, comparator, work_dir)
            runs.append(run)
            logger.info('Temp file : %s created successfully.', run.path)
    return runs
