from gridpath.core.bfs_bidirectional import BidirectionalBFS
from gridpath.core.board import Board
from gridpath.core.types import CellKind


def _open_board(size):
    board = Board(size, size)
    board.set_kind(size - 1, size - 1, CellKind.GOAL)
    return board


def test_meets_near_the_midpoint(solve, check_path):
    board = _open_board(8)
    pf = BidirectionalBFS()
    result = solve(pf, board)
    assert result.status == "done"
    assert len(pf.path_cells) == 14
    check_path(board, (0, 0), pf.path_cells)
    meeting = pf.meeting_cell
    assert abs(pf.start_depth[meeting.id] - 7) <= 1
    assert abs(pf.end_depth[meeting.id] - 7) <= 1


def test_pops_from_both_sides_each_step():
    board = _open_board(5)
    pf = BidirectionalBFS()
    pf.initialize(board.cell(0, 0), board.goal())
    result = pf.advance(board)
    assert pf.popped_count == 2
    assert set(result.closed) == {(0, 0), (4, 4)}
    assert set(result.opened) == {(0, 1), (1, 0), (4, 3), (3, 4)}


def test_adjacent_start_and_goal(solve):
    board = Board.from_rows([".G"])
    pf = BidirectionalBFS()
    solve(pf, board)
    assert [c.position for c in pf.path_cells] == [(1, 0)]


def test_finds_the_gap_in_a_wall(solve, check_path):
    board = Board.from_rows([
        ".....",
        ".###.",
        ".#G..",
        ".#...",
        ".....",
    ])
    pf = BidirectionalBFS()
    solve(pf, board)
    check_path(board, (0, 0), pf.path_cells)
    # (0,0) -> (2,0) -> up the gap at column 2
    assert len(pf.path_cells) == 4
