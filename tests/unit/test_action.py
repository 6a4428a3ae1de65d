"""
単体テスト: 行動と手番の表現のテスト
"""

from passtally.engine import Action, ActionType, BoardPosition, Piece, PositionedPiece, Turn


class TestAction:
    """行動のテストクラス"""

    def test_place_piece_factory(self):
        piece = PositionedPiece(Piece.CYAN, BoardPosition(1, 2), 0)
        action = Action.place_piece(piece)
        assert action.action_type == ActionType.PLACE_PIECE
        assert action.piece is piece
        assert action.to_dict() == {
            "type": "PLACE_PIECE",
            "piece": {"piece": "CYAN", "position": (1, 2), "rotation": 0},
            "from": None,
            "to": None,
        }

    def test_move_player_marker_factory(self):
        action = Action.move_player_marker(3, 5)
        assert action.action_type == ActionType.MOVE_PLAYER_MARKER
        assert (action.from_slot, action.to_slot) == (3, 5)
        assert str(action) == "MOVE 3 -> 5"

    def test_turn_keeps_order(self):
        first = Action.move_player_marker(0, 1)
        second = Action.move_player_marker(1, 2)
        assert Turn(first, second).actions == (first, second)
