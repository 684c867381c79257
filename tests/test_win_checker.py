import pytest

from tictactoe.logic import GameState, GameStatus, Mark, WinChecker


checker = WinChecker()


@pytest.mark.parametrize("rows, winner, line", [
    (["XXX", "OO.", "..."], Mark.X, ((0, 0), (0, 1), (0, 2))),
    (["OO.", "XXX", "..."], Mark.X, ((1, 0), (1, 1), (1, 2))),
    (["X.X", "X..", "OOO"], Mark.O, ((2, 0), (2, 1), (2, 2))),
    (["OX.", "OX.", "X.."], None, None),
    (["OX.", "OX.", "OXX"], Mark.O, ((0, 0), (1, 0), (2, 0))),
    (["OX.", "OXO", ".X."], Mark.X, ((0, 1), (1, 1), (2, 1))),
    (["OOX", ".OX", "X.X"], Mark.X, ((0, 2), (1, 2), (2, 2))),
    (["XO.", "OX.", "..X"], Mark.X, ((0, 0), (1, 1), (2, 2))),
    (["XXO", "XO.", "O.."], Mark.O, ((0, 2), (1, 1), (2, 0))),
])
def test_lines(rows, winner, line):
    board = GameState.from_rows(rows).board
    assert checker.check_winner(board) == winner
    assert checker.get_winning_line(board) == line


def test_top_row_win_for_x():
    state = GameState.from_rows([["X", "X", "X"], ["O", "O", " "], [" ", " ", " "]])
    result = state.is_terminal()
    assert result.status == GameStatus.WIN
    assert result.winner == Mark.X
    assert result.line == ((0, 0), (0, 1), (0, 2))


def test_full_board_without_line_is_draw():
    state = GameState.from_rows([["X", "O", "X"], ["X", "O", "O"], ["O", "X", "X"]])
    result = state.is_terminal()
    assert result.status == GameStatus.DRAW
    assert result.winner is None
    assert checker.check_draw(state.board)


def test_win_on_last_cell_is_not_draw():
    state = GameState.from_rows(["XOX", "OXO", "OXX"])
    assert state.is_terminal().winner == Mark.X
    assert not checker.check_draw(state.board)


def test_empty_board_in_progress():
    result = GameState().is_terminal()
    assert result.status == GameStatus.IN_PROGRESS
    assert not result.is_over


def test_is_terminal_is_idempotent():
    state = GameState.from_rows(["XO.", ".X.", "O.."])
    before = state.rows()
    results = [state.is_terminal() for _ in range(5)]
    assert all(r == results[0] for r in results)
    assert state.rows() == before


def _reachable_states():
    """Every board reachable by alternating play from the empty board."""
    seen = {}
    stack = [GameState()]
    while stack:
        state = stack.pop()
        key = tuple(state.rows())
        if key in seen:
            continue
        seen[key] = state
        if state.is_terminal().is_over:
            continue
        for row, col in state.get_empty_cells():
            child = state.copy()
            child.make_move(row, col)
            stack.append(child)
    return list(seen.values())


def test_win_iff_full_line_on_every_reachable_board():
    states = _reachable_states()
    assert len(states) == 5478

    for state in states:
        board = state.board
        has_line = any(
            board[r][0] is not None and board[r][0] == board[r][1] == board[r][2]
            for r in range(3)
        ) or any(
            board[0][c] is not None and board[0][c] == board[1][c] == board[2][c]
            for c in range(3)
        ) or (
            board[1][1] is not None and (
                board[0][0] == board[1][1] == board[2][2]
                or board[0][2] == board[1][1] == board[2][0]
            )
        )
        result = state.is_terminal()
        assert result.is_win == has_line
        if not has_line:
            full = all(cell is not None for row in board for cell in row)
            assert result.is_draw == full
