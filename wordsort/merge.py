import heapq
import itertools
import logging
import os
import typing

from wordsort.chunks import Run, discard_run
from wordsort.ordering import Comparator

logger = logging.getLogger(__name__)


class RunCursor:
    """Reads a run one token at a time, keeping the next token cached."""

    def __init__(self, path: typing.Union[str, os.PathLike]) -> None:
        self.path = path
        self._file = open(path, encoding='utf-8')
        self._next: typing.Optional[str] = None
        try:
            self._advance()
        except BaseException:
            self._file.close()
            raise

    def __enter__(self) -> 'RunCursor':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _advance(self) -> None:
        self._next = None
        for line in self._file:
            token = line.strip()
            if token:
                self._next = token
                break

    def peek(self) -> typing.Optional[str]:
        return self._next

    def pop(self) -> str:
        if self._next is None:
            raise IndexError(f'pop from drained run {self.path}')
        token = self._next
        self._advance()
        return token

    def is_empty(self) -> bool:
        return self._next is None

    def close(self) -> None:
        self._file.close()


class FrontierEntry(typing.NamedTuple):
    key: typing.Any
    sequence: int
    cursor: RunCursor


def _retire(cursor: RunCursor) -> None:
    cursor.close()
    discard_run(cursor.path)


def merge_runs(
        comparator: Comparator,
        runs: typing.Iterable[Run],
        sink: typing.TextIO,
        word_wrap: int,
) -> None:
    """Merge sorted ``runs`` into ``sink``, wrapping lines every ``word_wrap`` tokens.

    Drained runs are deleted as the merge proceeds. ``sink`` and every cursor
    still open are closed on exit, including when an error interrupts the merge.
    """
    key = comparator.key
    sequence = itertools.count()
    frontier: typing.List[FrontierEntry] = []
    current: typing.Optional[RunCursor] = None
    total = 0
    try:
        for run in runs:
            total += run.count
            cursor = RunCursor(run.path)
            if cursor.is_empty():
                _retire(cursor)
                continue
            frontier.append(
                FrontierEntry(key(cursor.peek()), next(sequence), cursor),
            )
        heapq.heapify(frontier)
        logger.info('Merging %d tokens from %d runs', total, len(frontier))

        counter = 0
        while frontier:
            current = cursor = heapq.heappop(frontier).cursor
            sink.write(cursor.pop())
            sink.write(' ')
            counter += 1
            if counter >= word_wrap:
                sink.write('\n')
                counter = 0
            current = None
            if cursor.is_empty():
                _retire(cursor)
                continue
            heapq.heappush(
                frontier,
                FrontierEntry(key(cursor.peek()), next(sequence), cursor),
            )
    finally:
        sink.close()
        if current is not None:
            current.close()
        for entry in frontier:
            entry.cursor.close()
