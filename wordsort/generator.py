import argparse
import itertools
import random
import string
import typing


def generate_words(
        words_count: int, word_max_size: int,
        rng: typing.Optional[random.Random] = None,
) -> typing.Iterator[str]:
    rng = rng or random.Random()
    for _ in range(words_count):
        yield ''.join(
            rng.choices(string.ascii_letters, k=rng.randint(1, word_max_size)),
        )


def write_words(
        path: str, words_count: int, word_max_size: int, words_per_line: int = 100,
        rng: typing.Optional[random.Random] = None,
) -> None:
    words = generate_words(words_count, word_max_size, rng)
    words_per_line = max(words_per_line, 1)
    with open(path, 'w', encoding='utf-8') as output:
        while True:
            line = list(itertools.islice(words, words_per_line))
            if not line:
                break
            output.write(' '.join(line) + '\n')


def main(argv: typing.Optional[typing.List[str]] = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument('--output', default='words')
    parser.add_argument('--words_count', type=int, required=True)
    parser.add_argument('--word_max_size', type=int, required=True)
    parser.add_argument('--words_per_line', type=int, default=100)
    parser.add_argument('--seed', type=int)
    args = parser.parse_args(argv)

    write_words(
        args.output, args.words_count, args.word_max_size, args.words_per_line,
        random.Random(args.seed),
    )


if __name__ == '__main__':
    main()
