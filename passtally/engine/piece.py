"""
パスタリーの駒（ドミノ）とパイプの向きを定義するモジュール
"""

from enum import Enum
from typing import Tuple

from .position import BoardPosition


class Side(Enum):
    """マスの辺（時計回りの順）"""
    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3

    def opposite(self) -> 'Side':
        """反対側の辺を返す"""
        return self.rotate(2)

    def rotate(self, n: int) -> 'Side':
        """
        時計回りに n 回（90度ずつ）回転した辺を返す
        逆回転は rotate(4 - n) で表す
        """
        return Side((self.value + n) % 4)

    @property
    def delta(self) -> Tuple[int, int]:
        """この辺から出たときの移動量 (dx, dy)"""
        return SIDE_DELTAS[self]


SIDE_DELTAS = {
    Side.TOP: (0, -1),
    Side.RIGHT: (1, 0),
    Side.BOTTOM: (0, 1),
    Side.LEFT: (-1, 0),
}


class PartialPiece(Enum):
    """1マス分のパイプの形（回転なし）"""
    TOP_BOTTOM_LEFT_RIGHT = 'A'  # 上下・左右にまっすぐ
    TOP_LEFT_BOTTOM_RIGHT = 'B'  # 上と左、下と右をつなぐ
    TOP_RIGHT_BOTTOM_LEFT = 'C'  # 上と右、下と左をつなぐ

    def pass_through(self, side: Side) -> Side:
        """
        side から入ったとき、どの辺から出るかを返す
        pass_through(pass_through(side)) == side が常に成り立つ
        """
        if self == PartialPiece.TOP_BOTTOM_LEFT_RIGHT:
            return side.opposite()
        return PIPE_ROUTES[self][side]


PIPE_ROUTES = {
    PartialPiece.TOP_LEFT_BOTTOM_RIGHT: {
        Side.TOP: Side.LEFT,
        Side.LEFT: Side.TOP,
        Side.BOTTOM: Side.RIGHT,
        Side.RIGHT: Side.BOTTOM,
    },
    PartialPiece.TOP_RIGHT_BOTTOM_LEFT: {
        Side.TOP: Side.RIGHT,
        Side.RIGHT: Side.TOP,
        Side.BOTTOM: Side.LEFT,
        Side.LEFT: Side.BOTTOM,
    },
}


class RotatedPartialPiece:
    """回転を含めた1マス分のパイプ"""

    __slots__ = ('partial_piece', 'rotation')

    def __init__(self, partial_piece: PartialPiece, rotation: int = 0):
        self.partial_piece = partial_piece
        self.rotation = rotation % 4

    def pass_through(self, side: Side) -> Side:
        # ローカルの向きに戻してから通し、盤面の向きに戻す
        local_side = side.rotate(4 - self.rotation)
        exit_side = self.partial_piece.pass_through(local_side)
        return exit_side.rotate(self.rotation)

    def __eq__(self, other):
        if not isinstance(other, RotatedPartialPiece):
            return NotImplemented
        return (self.partial_piece, self.rotation) == (other.partial_piece, other.rotation)

    def __hash__(self):
        return hash((self.partial_piece, self.rotation))

    def __repr__(self):
        return f"RotatedPartialPiece({self.partial_piece.name}, {self.rotation})"

    def to_dict(self) -> dict:
        return {"shape": self.partial_piece.name, "rotation": self.rotation}


A = PartialPiece.TOP_BOTTOM_LEFT_RIGHT
B = PartialPiece.TOP_LEFT_BOTTOM_RIGHT
C = PartialPiece.TOP_RIGHT_BOTTOM_LEFT


class Piece(Enum):
    """駒の色と、2マスそれぞれのパイプの形"""
    RED = (A, A)
    GREEN = (B, B)
    YELLOW = (C, C)
    BLUE = (A, B)
    CYAN = (A, C)
    PINK = (C, B)

    @property
    def partial_pieces(self) -> Tuple[PartialPiece, PartialPiece]:
        return self.value


# 回転ごとの2マス目のずれ（回転0は横向きで2マス目が右）
SECOND_CELL_OFFSETS = {
    0: BoardPosition(1, 0),
    1: BoardPosition(0, 1),
    2: BoardPosition(-1, 0),
    3: BoardPosition(0, -1),
}


class PositionedPiece:
    """盤面上の位置と回転が決まった駒"""

    def __init__(self, piece: Piece, position: BoardPosition, rotation: int = 0):
        if rotation not in SECOND_CELL_OFFSETS:
            raise ValueError(f"Rotation should only be 0-3, got {rotation}")
        self.piece = piece
        self.position = position
        self.rotation = rotation

    def positions(self) -> Tuple[BoardPosition, BoardPosition]:
        """駒が占める2マスを返す（1マス目, 2マス目）"""
        return self.position, self.position + SECOND_CELL_OFFSETS[self.rotation]

    def rotated_partial_pieces(self) -> Tuple[RotatedPartialPiece, RotatedPartialPiece]:
        first, second = self.piece.partial_pieces
        return (
            RotatedPartialPiece(first, self.rotation),
            RotatedPartialPiece(second, self.rotation),
        )

    def __repr__(self):
        return (
            f"PositionedPiece({self.piece.name}, "
            f"position={self.position}, rotation={self.rotation})"
        )

    def to_dict(self) -> dict:
        return {
            "piece": self.piece.name,
            "position": self.position.to_tuple(),
            "rotation": self.rotation,
        }
