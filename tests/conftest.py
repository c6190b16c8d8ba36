import pytest

SAMPLE_DATA = [
    'Lorem', 'ipsum', 'dolor', 'sit', 'amet', 'consectetur', 'adipiscing', 'elit',
    'sed', 'do', 'eiusmod', 'tempor', 'incididunt', 'ut', 'labore', 'et', 'dolore',
    'magna', 'aliqua', 'Ut', 'enim', 'ad', 'minim', 'veniam',
]
SAMPLE_MERGE_DATA = [
    'quis', 'nostrud', 'exercitation', 'ullamco', 'laboris', 'nisi', 'ut',
    'aliquip', 'ex', 'ea', 'commodo', 'consequat',
]
EXPECTED_SORTED_ASC = [
    'ad', 'adipiscing', 'aliqua', 'amet', 'consectetur', 'do', 'dolor', 'dolore',
    'eiusmod', 'elit', 'enim', 'et', 'incididunt', 'ipsum', 'labore', 'Lorem',
    'magna', 'minim', 'sed', 'sit', 'tempor', 'ut', 'Ut', 'veniam',
]
EXPECTED_SORTED_DESC = [
    'veniam', 'ut', 'Ut', 'tempor', 'sit', 'sed', 'minim', 'magna', 'Lorem',
    'labore', 'ipsum', 'incididunt', 'et', 'enim', 'elit', 'eiusmod', 'dolore',
    'dolor', 'do', 'consectetur', 'amet', 'aliqua', 'adipiscing', 'ad',
]
EXPECTED_MERGED = (
    'ad adipiscing aliqua aliquip amet commodo consectetur consequat do dolor '
    'dolore ea eiusmod elit enim et ex exercitation incididunt ipsum labore '
    'laboris Lorem magna minim nisi nostrud quis sed sit tempor ullamco ut ut '
    'Ut veniam '
)


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / 'input.txt'
    path.write_text(' '.join(SAMPLE_DATA), encoding='utf-8')
    return path


@pytest.fixture
def work_dir(tmp_path):
    path = tmp_path / 'runs'
    path.mkdir()
    return path
