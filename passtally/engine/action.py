"""
パスタリーの行動（Action）と手番（Turn）を表現するモジュール
"""

from enum import Enum, auto
from typing import Optional, Tuple

from .piece import PositionedPiece


class ActionType(Enum):
    """行動の種類"""
    PLACE_PIECE = auto()         # 駒を置く
    MOVE_PLAYER_MARKER = auto()  # プレイヤーマーカーを動かす


class Action:
    """1つの行動を表すクラス"""

    def __init__(
        self,
        action_type: ActionType,
        piece: Optional[PositionedPiece] = None,
        from_slot: Optional[int] = None,
        to_slot: Optional[int] = None
    ):
        self.action_type = action_type
        self.piece = piece          # PLACE_PIECE の場合
        self.from_slot = from_slot  # MOVE_PLAYER_MARKER の場合（0～23）
        self.to_slot = to_slot

    def __str__(self):
        if self.action_type == ActionType.PLACE_PIECE:
            return f"PLACE {self.piece}"
        return f"MOVE {self.from_slot} -> {self.to_slot}"

    def __repr__(self):
        return (
            f"Action(type={self.action_type.name}, piece={self.piece!r}, "
            f"from={self.from_slot}, to={self.to_slot})"
        )

    def to_dict(self) -> dict:
        return {
            "type": self.action_type.name,
            "piece": self.piece.to_dict() if self.piece else None,
            "from": self.from_slot,
            "to": self.to_slot,
        }

    @staticmethod
    def place_piece(piece: PositionedPiece) -> 'Action':
        """駒を置く行動を作成"""
        return Action(action_type=ActionType.PLACE_PIECE, piece=piece)

    @staticmethod
    def move_player_marker(from_slot: int, to_slot: int) -> 'Action':
        """マーカーを動かす行動を作成"""
        return Action(
            action_type=ActionType.MOVE_PLAYER_MARKER,
            from_slot=from_slot,
            to_slot=to_slot
        )


class Turn:
    """1手番。2つの行動をまとめて適用する（片方でも失敗したら両方取り消す）"""

    def __init__(self, first: Action, second: Action):
        self.first = first
        self.second = second

    @property
    def actions(self) -> Tuple[Action, Action]:
        return (self.first, self.second)

    def __repr__(self):
        return f"Turn({self.first!r}, {self.second!r})"
