"""
扫描游标测试。
"""

import pytest

from gridstats.core.errors import InvalidCoordinateError
from gridstats.models.cursor import NOT_RELATED, ScanCursor, steps_between
from gridstats.models.geometry import (
    FIRST_CELL,
    LAST_CELL,
    N_CELLS,
    N_LON,
    GridCoordinate,
)


def _coord(lat, lon):
    return GridCoordinate.from_degrees(lat, lon)


def test_closed_traversal_cycle():
    """测试从起点前进 N 次恰好遍历每个格点一次并回绕。"""
    cursor = ScanCursor()
    visited = []
    wraps = []
    for _ in range(N_CELLS):
        visited.append(cursor.coordinate)
        wraps.append(cursor.advance())

    assert len(set(visited)) == N_CELLS
    assert [c.index for c in visited] == list(range(N_CELLS))
    assert not any(wraps[:-1])
    assert wraps[-1] is True
    assert cursor.coordinate == FIRST_CELL


def test_advance_row_end():
    """测试行尾换行。"""
    cursor = ScanCursor(_coord(80.0, 0.0))
    assert cursor.advance() is False
    assert cursor.coordinate == _coord(79.5, -90.0)
    assert cursor.index == N_LON


def test_advance_wraps_at_last_cell():
    """测试最后一格回绕到第一格。"""
    cursor = ScanCursor(LAST_CELL)
    assert cursor.advance() is True
    assert cursor.coordinate == FIRST_CELL


@pytest.mark.parametrize(
    "lat, lon",
    [(80.0, -90.0), (40.0, -45.5), (0.0, 0.0), (79.5, 0.0)],
)
def test_steps_to_self_is_zero(lat, lon):
    """测试同一坐标步数为 0。"""
    coord = _coord(lat, lon)
    assert steps_between(coord, coord) == 0


def test_steps_same_row():
    """测试同一行内的步数。"""
    assert steps_between(_coord(80.0, -90.0), _coord(80.0, -89.0)) == 2
    assert steps_between(_coord(10.0, -50.0), _coord(10.0, 0.0)) == 100


def test_steps_to_next_row():
    """测试跨行的步数。"""
    assert steps_between(_coord(80.0, -1.0), _coord(79.5, -90.0)) == 3
    assert steps_between(_coord(80.0, -90.0), _coord(79.5, -90.0)) == N_LON
    assert steps_between(_coord(80.0, -90.0), _coord(79.5, -89.5)) == N_LON + 1


def test_steps_across_grid_end():
    """测试跨越网格末尾（回绕）的步数。"""
    assert steps_between(LAST_CELL, FIRST_CELL) == 1
    assert steps_between(_coord(0.0, -0.5), _coord(80.0, -89.5)) == 3


@pytest.mark.parametrize(
    "start, end",
    [
        ((80.0, -89.5), (80.0, -90.0)),  # 行内倒退
        ((80.0, -90.0), (79.0, -90.0)),  # 跳过一整行
        ((79.5, -90.0), (80.0, -90.0)),  # 回到上一行
        ((40.0, -10.0), (0.0, 0.0)),
    ],
)
def test_steps_not_related(start, end):
    """测试乱序输入返回哨兵值。"""
    assert steps_between(_coord(*start), _coord(*end)) == NOT_RELATED


@pytest.mark.parametrize("start_col", [0, 1, 90, 179, 180])
@pytest.mark.parametrize("end_col", [0, 1, 90, 180])
def test_steps_match_advances(start_col, end_col):
    """测试步数与实际 advance() 次数一致。"""
    start = GridCoordinate.from_row_col(160, start_col)
    end = GridCoordinate.from_row_col(0, end_col)

    cursor = ScanCursor(start)
    expected = cursor.steps_to(end)
    for _ in range(expected):
        cursor.advance()
    assert cursor.coordinate == end


def test_cursor_rejects_out_of_grid_start():
    """测试游标起点必须在网格内。"""
    with pytest.raises(InvalidCoordinateError):
        ScanCursor(GridCoordinate(lat_half=200, lon_half=0))
