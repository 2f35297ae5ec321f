import pytest

from algokit.star import is_star


def _star(n, centre=0):
    m = [[0] * n for _ in range(n)]
    for i in range(n):
        if i != centre:
            m[centre][i] = m[i][centre] = 1
    return m


def test_source_example_is_star():
    matrix = [
        [0, 1, 1, 1],
        [1, 0, 0, 0],
        [1, 0, 0, 0],
        [1, 0, 0, 0],
    ]
    assert is_star(matrix) is True


@pytest.mark.parametrize("n", [3, 5, 8])
@pytest.mark.parametrize("offset", [0, 1, 2])
def test_generated_stars(n, offset):
    assert is_star(_star(n, centre=offset % n)) is True


def test_single_vertex():
    assert is_star([[0]]) is True
    assert is_star([[1]]) is False


def test_two_vertices():
    assert is_star([[0, 1], [1, 0]]) is True
    assert is_star([[0, 0], [0, 0]]) is False


def test_path_is_not_star():
    path = [
        [0, 1, 0, 0],
        [1, 0, 1, 0],
        [0, 1, 0, 1],
        [0, 0, 1, 0],
    ]
    assert is_star(path) is False


def test_extra_edge_breaks_star():
    m = _star(5)
    m[1][2] = m[2][1] = 1
    assert is_star(m) is False


def test_non_square_rejected():
    with pytest.raises(ValueError):
        is_star([[0, 1], [1, 0, 0]])