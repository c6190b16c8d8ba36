import argparse
import contextlib
import logging
import os
import sys
import time
import typing

from wordsort.chunks import read_tokens, split_into_runs
from wordsort.config import (
    DEFAULT_CONFIG_PATH,
    ConfigurationError,
    Settings,
    load_config,
    missing_parameters,
    required_parameters_message,
    resolve_settings,
)
from wordsort.memory import estimate_free_memory
from wordsort.merge import merge_runs
from wordsort.ordering import Comparator, comparator_for

logger = logging.getLogger(__name__)


def external_sort(
        source: typing.Iterator[str],
        output_file: typing.Union[str, os.PathLike],
        comparator: Comparator,
        file_size: int,
        max_runs: int,
        word_wrap: int,
        work_dir: typing.Union[str, os.PathLike, None] = None,
        max_memory: typing.Optional[int] = None,
        distinct: bool = False,
) -> None:
    """Sort the tokens of ``source`` into ``output_file`` using runs under ``work_dir``.

    ``source`` is closed once this returns or raises. The output is opened for
    appending only after every run has been written.
    """
    with contextlib.closing(source):
        free_memory = estimate_free_memory(max_memory)
        logger.debug('Estimated free memory is %d bytes', free_memory)

        logger.info('Begin splitting large file into temporary sorted smaller files.')
        runs = split_into_runs(
            source, file_size, max_runs, free_memory, comparator, work_dir,
            distinct=distinct,
        )

    logger.info(
        'Begin merging %d temporary sorted files to sorted output file - %s',
        len(runs), output_file,
    )
    sink = open(output_file, 'a', encoding='utf-8')
    merge_runs(comparator, runs, sink, word_wrap)


def sort_file(settings: Settings) -> None:
    missing = missing_parameters(settings)
    if missing:
        raise ConfigurationError(required_parameters_message(missing))

    started = time.monotonic()
    file_size = os.path.getsize(settings.input_file)
    external_sort(
        read_tokens(settings.input_file),
        settings.output_file,
        comparator_for(settings.order),
        file_size,
        settings.max_temp_files,
        settings.word_wrap,
        settings.tmp_files_directory,
        max_memory=settings.max_memory,
        distinct=settings.distinct,
    )
    logger.info(
        'Sorted output file created successfully - %s',
        settings.output_file,
    )
    logger.info(
        'Total processing time(ms) - %d', (time.monotonic() - started) * 1000,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Sort the words of a file too large to fit in memory',
    )
    parser.add_argument(
        '--config', default=DEFAULT_CONFIG_PATH, metavar='PATH',
        help=f'YAML configuration file (default: {DEFAULT_CONFIG_PATH})',
    )
    parser.add_argument('--inputfile', dest='input_file')
    parser.add_argument('--outputfile', dest='output_file')
    parser.add_argument('--tmpfilesdirectory', dest='tmp_files_directory')
    parser.add_argument('--order', choices=('asc', 'desc'))
    parser.add_argument('--wordwrap', dest='word_wrap', type=int)
    parser.add_argument('--maxtmpfiles', dest='max_temp_files', type=int)
    parser.add_argument(
        '--maxmemory', dest='max_memory', type=int, metavar='BYTES',
        help='Cap on the memory the sort may use',
    )
    parser.add_argument(
        '--distinct', action='store_true', default=None,
        help='Write repeated words of one chunk only once',
    )
    parser.add_argument(
        '-v', '--debug', action='store_true', help='Enable debug logging',
    )
    return parser


def main(argv: typing.Optional[typing.List[str]] = None) -> int:
    args = vars(build_parser().parse_args(argv))
    config_path = args.pop('config')
    if args.pop('debug'):
        logging.getLogger('wordsort').setLevel(logging.DEBUG)

    logger.info('Loading Configuration from File.')
    settings = resolve_settings(load_config(config_path), args)

    missing = missing_parameters(settings)
    if missing:
        logger.error(required_parameters_message(missing))
        return 2

    sort_file(settings)
    return 0


def run() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s  %(levelname)-8s  %(name)s  %(message)s',
        datefmt='%Y/%m/%d %H:%M:%S',
    )
    sys.exit(main())


if __name__ == '__main__':
    run()
