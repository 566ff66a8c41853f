import pytest


def make_board(filled=(), fill_all=False):
    """8x8 nested lists with the given (x, y) cells set"""
    value = 1 if fill_all else 0
    rows = [[value] * 8 for _ in range(8)]
    for x, y in filled:
        rows[y][x] = 1 - value if fill_all else 1
    return rows


@pytest.fixture
def row0_missing_last():
    """Row 0 filled except (7, 0)"""
    return make_board(filled=[(x, 0) for x in range(7)])


@pytest.fixture
def row0_missing_two():
    """Row 0 filled except (6, 0) and (7, 0)"""
    return make_board(filled=[(x, 0) for x in range(6)])


@pytest.fixture
def full_but_corner():
    """Every cell filled except (0, 0)"""
    return make_board(filled=[(0, 0)], fill_all=True)
