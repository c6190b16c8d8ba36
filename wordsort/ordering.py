import functools
import typing

ORDERS = ('asc', 'desc')


def _fold(token: str) -> str:
    # Reuse the token itself when it is already lower case.
    folded = token.lower()
    return token if folded == token else folded


class Comparator(typing.NamedTuple):
    """Case-insensitive token ordering, ascending unless ``descending``."""

    descending: bool = False

    def compare(self, first: str, second: str) -> int:
        a, b = first.lower(), second.lower()
        if self.descending:
            a, b = b, a
        return (a > b) - (a < b)

    @property
    def key(self) -> typing.Callable[[str], typing.Any]:
        return functools.cmp_to_key(self.compare)

    @property
    def sort_key(self) -> typing.Callable[[str], str]:
        """Plain key for ``list.sort``, to be paired with ``reverse=descending``."""
        return _fold

    def sort(self, tokens: typing.List[str]) -> None:
        tokens.sort(key=self.sort_key, reverse=self.descending)


ASCENDING = Comparator()
DESCENDING = Comparator(descending=True)


def comparator_for(order: str) -> Comparator:
    if order not in ORDERS:
        raise ValueError(f'order must be one of {ORDERS}, got {order!r}')
    return DESCENDING if order == 'desc' else ASCENDING
