import pytest

from coursekit.searching import Searcher, main

DATA = [index * 2 for index in range(5000)]
TARGETS = [-1, 1, 4, 41, 440, 8800, 9990, 1000000]


@pytest.mark.parametrize("target", TARGETS)
def test_binary_search_agrees_with_membership(target):
    searcher = Searcher()
    result = searcher.binary_search(DATA, target)
    if target in DATA:
        assert result == target
    else:
        assert result is None
    assert 1 <= searcher.comparisons <= len(DATA).bit_length()


def test_binary_search_finds_every_element():
    searcher = Searcher()
    data = list(range(0, 300, 3))
    for value in data:
        assert searcher.binary_search(data, value) == value


def test_binary_search_empty_resets_counter():
    searcher = Searcher()
    searcher.binary_search(DATA, 4)
    assert searcher.comparisons > 0
    assert searcher.binary_search([], 4) is None
    assert searcher.comparisons == 0


def test_linear_search_counts_each_probe():
    searcher = Searcher()
    assert searcher.linear_search(DATA, 8800) == 8800
    assert searcher.comparisons == DATA.index(8800) + 1


def test_linear_search_missing_checks_everything():
    searcher = Searcher()
    assert searcher.linear_search(DATA, 41) is None
    assert searcher.comparisons == len(DATA)


def test_linear_search_respects_range():
    searcher = Searcher()
    assert searcher.linear_search(DATA, 4, low=3) is None
    assert searcher.comparisons == len(DATA) - 3
    assert searcher.linear_search(DATA, 20, low=5, high=10) == 20
    assert searcher.comparisons == DATA.index(20) - 5 + 1


def test_linear_search_empty_range():
    searcher = Searcher(comparisons=7)
    assert searcher.linear_search(DATA, 0, low=10, high=5) is None
    assert searcher.comparisons == 0


def test_main_output(capsys):
    assert main(["--seed", "2"]) == 0
    out = capsys.readouterr().out
    assert "UNIFORM DISTRIBUTION" in out
    assert "NON-UNIFORM DISTRIBUTION" in out
    assert out.count("Searching for (") == 16
    assert "  Searching for (4):  binary: 4 in " in out
    assert "  Searching for (41):  binary: null in " in out