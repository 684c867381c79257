import pytest

from tictactoe.config import GameConfig
from tictactoe.logic import (
    AIPlayer,
    CellOccupied,
    GameOver,
    GameStatus,
    InvalidCoordinate,
    Mark,
    OutOfTurn,
)
from tictactoe.session import GameSession, cell_at


def first_empty(session):
    return session.game_state.get_empty_cells()[0]


def test_cell_at_divides_by_cell_size():
    assert cell_at(0, 0, 100) == (0, 0)
    assert cell_at(150, 50, 100) == (0, 1)
    assert cell_at(299, 299, 100) == (2, 2)
    assert cell_at(300, 10, 100) == (0, 3)


def test_human_move_gets_ai_reply():
    session = GameSession()
    assert session.start() == []

    human, ai = session.handle_move(0, 0)
    assert (human.mark, human.cell) == (Mark.X, (0, 0))
    # the only reply to a corner opening that doesn't lose
    assert (ai.mark, ai.cell) == (Mark.O, (1, 1))
    assert session.is_human_turn
    assert session.status_text() == "Your turn (X)"


def test_click_is_translated_to_cell():
    session = GameSession(config=GameConfig(CELL_SIZE=100))
    moves = session.handle_click(250, 30)
    assert moves[0].cell == (0, 2)


def test_click_outside_board_rejected():
    session = GameSession()
    with pytest.raises(InvalidCoordinate):
        session.handle_click(305, 10)
    assert session.game_state.moves == []
    assert "Invalid position (0, 3)" in session.status_text()


def test_occupied_cell_rejected_without_ai_reply():
    session = GameSession()
    session.handle_move(1, 1)
    before = session.game_state.rows()
    with pytest.raises(CellOccupied):
        session.handle_move(1, 1)
    assert session.game_state.rows() == before
    assert len(session.game_state.moves) == 2
    assert isinstance(session.last_error, CellOccupied)

    # next good move clears the diagnostic
    session.handle_move(*first_empty(session))
    assert session.last_error is None


def test_human_cannot_move_on_ai_turn():
    session = GameSession(human_player=Mark.O)
    with pytest.raises(OutOfTurn):
        session.handle_move(0, 0)
    assert session.game_state.moves == []


def test_ai_mark_must_be_the_other_mark():
    with pytest.raises(ValueError):
        GameSession(human_player=Mark.X, ai=AIPlayer(Mark.X))


def test_game_ends_and_rejects_further_moves():
    session = GameSession()
    while not session.is_over:
        session.handle_move(*first_empty(session))

    assert session.result.status == GameStatus.WIN
    assert session.result.winner == Mark.O
    assert session.game_state.rows() == ["XXO", "XO.", "O.."]
    assert session.status_text() == "Computer wins as O!"

    before = session.game_state.rows()
    with pytest.raises(GameOver):
        session.handle_move(2, 2)
    assert session.game_state.rows() == before


def test_optimal_human_draws():
    session = GameSession(human_player=Mark.X)
    helper = AIPlayer(Mark.X)
    session.handle_move(0, 0)
    while not session.is_over:
        session.handle_move(*helper.get_best_move(session.game_state))

    assert session.result.status == GameStatus.DRAW
    assert session.game_state.get_empty_cells() == []
    assert session.status_text() == "It's a draw!"


def test_computer_first_opens_the_game():
    session = GameSession(human_player=Mark.O)
    (opening,) = session.start()
    assert opening.mark == Mark.X
    assert session.game_state.board[opening.row][opening.col] == Mark.X
    assert session.is_human_turn


def test_on_change_called_after_every_state_change():
    calls = []
    session = GameSession(on_change=lambda s: calls.append(s.game_state.rows()))
    session.start()
    session.handle_move(0, 0)
    assert calls == [
        ["...", "...", "..."],
        ["X..", "...", "..."],
        ["X..", ".O.", "..."],
    ]

    with pytest.raises(CellOccupied):
        session.handle_move(0, 0)
    # rejection redraws so the diagnostic is shown
    assert len(calls) == 4


def test_reset_starts_a_new_game():
    session = GameSession()
    session.handle_move(0, 0)
    assert session.reset() == []
    assert session.game_state.rows() == ["...", "...", "..."]
    assert not session.is_over
    assert session.last_error is None
