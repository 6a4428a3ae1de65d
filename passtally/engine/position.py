"""
盤面上の座標
"""

from typing import Tuple

# 盤面サイズ
BOARD_SIZE = 6


class BoardPosition:
    """
    盤面上の位置。盤内では x, y ともに 0～5
    (0, 0) が左上で、x は右方向、y は下方向に増える
    """

    __slots__ = ('x', 'y')

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def is_valid(self) -> bool:
        """位置が盤面内か確認"""
        return 0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE

    def on_edge(self) -> bool:
        """盤面の外周のマスか確認"""
        return self.x in (0, BOARD_SIZE - 1) or self.y in (0, BOARD_SIZE - 1)

    def to_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __add__(self, other: 'BoardPosition') -> 'BoardPosition':
        return BoardPosition(self.x + other.x, self.y + other.y)

    def __eq__(self, other):
        if not isinstance(other, BoardPosition):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"BoardPosition({self.x}, {self.y})"
