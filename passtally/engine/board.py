"""
パスタリーの盤面を管理するモジュール
"""

import logging
from typing import List

from .errors import (
    DuplicatePieceError,
    HeightMismatchError,
    InvalidPositionError,
    TraversalError,
)
from .piece import PartialPiece, PositionedPiece, RotatedPartialPiece, Side
from .position import BOARD_SIZE, BoardPosition

logger = logging.getLogger(__name__)

# 経路追跡の上限（全マス × 全辺）
MAX_TRAVERSAL_STEPS = BOARD_SIZE * BOARD_SIZE * 4

# 何も置かれていないマスは縦横まっすぐのパイプとして扱う
DEFAULT_TOP_PIECE = RotatedPartialPiece(PartialPiece.TOP_BOTTOM_LEFT_RIGHT, 0)


class Board:
    """
    パスタリーのゲームボードを表すクラス
    各配列は [x][y] でアクセスする
    """

    def __init__(self):
        # 各マスで一番上に見えているパイプ（線の向きを決める）
        self.top_pieces: List[List[RotatedPartialPiece]] = [
            [DEFAULT_TOP_PIECE for _ in range(BOARD_SIZE)]
            for _ in range(BOARD_SIZE)
        ]
        # 各マスを覆っている駒のID（0は盤面そのもの）
        self.tile_ids: List[List[int]] = [
            [0 for _ in range(BOARD_SIZE)]
            for _ in range(BOARD_SIZE)
        ]
        # 各マスに積まれた駒の数
        self.height_map: List[List[int]] = [
            [0 for _ in range(BOARD_SIZE)]
            for _ in range(BOARD_SIZE)
        ]
        # 次に置く駒のID（必ず一意）
        self.next_id = 1

    def get_top_piece(self, position: BoardPosition) -> RotatedPartialPiece:
        """指定位置の一番上のパイプを取得"""
        return self.top_pieces[position.x][position.y]

    def get_tile_id(self, position: BoardPosition) -> int:
        return self.tile_ids[position.x][position.y]

    def get_height(self, position: BoardPosition) -> int:
        """指定位置のスタック高さを取得"""
        return self.height_map[position.x][position.y]

    def heights(self) -> List[List[int]]:
        """高さの配列のコピーを返す（[x][y]）"""
        return [list(column) for column in self.height_map]

    def place_piece(self, piece: PositionedPiece) -> None:
        """
        駒を置く
        チェックはすべて盤面を変更する前に行う（失敗時は何も変わらない）
        """
        pos1, pos2 = piece.positions()

        # 盤内か確認
        for position in (pos1, pos2):
            if not position.is_valid():
                raise InvalidPositionError(position)

        # 2マスの高さが同じか確認
        height1 = self.get_height(pos1)
        height2 = self.get_height(pos2)
        if height1 != height2:
            raise HeightMismatchError(height1, height2)

        # 同じ駒の真上にぴったり重ねることはできない（盤面そのものは除く）
        tile1 = self.get_tile_id(pos1)
        tile2 = self.get_tile_id(pos2)
        if tile1 != 0 and tile1 == tile2:
            raise DuplicatePieceError(tile1)

        self.height_map[pos1.x][pos1.y] += 1
        self.height_map[pos2.x][pos2.y] += 1

        self.tile_ids[pos1.x][pos1.y] = self.next_id
        self.tile_ids[pos2.x][pos2.y] = self.next_id
        self.next_id += 1

        first, second = piece.rotated_partial_pieces()
        self.top_pieces[pos1.x][pos1.y] = first
        self.top_pieces[pos2.x][pos2.y] = second

        logger.debug("placed %r as tile %d", piece, self.next_id - 1)

    def enter(self, entry: BoardPosition, side: Side) -> BoardPosition:
        """
        entry のマスに side から入った線をたどり、出口となる外周のマスを返す
        開始マスは外周でも到着とみなさない（最低1マスは進む）
        """
        if not entry.is_valid():
            raise InvalidPositionError(entry)

        position = entry
        for _ in range(MAX_TRAVERSAL_STEPS):
            exit_side = self.get_top_piece(position).pass_through(side)
            dx, dy = exit_side.delta
            next_position = BoardPosition(position.x + dx, position.y + dy)
            logger.debug("trace %r exits %s", position, exit_side.name)

            if not next_position.is_valid():
                raise TraversalError(
                    f"Line entering {entry} from {side.name} left the board at {position}"
                )

            position = next_position
            # 次のマスには出た辺の反対側から入る
            side = exit_side.opposite()

            if position != entry and position.on_edge():
                return position

        raise TraversalError(f"Line entering {entry} from {side.name} never reached an edge")

    def copy(self) -> 'Board':
        """盤面のコピーを作成（パイプは不変なので列だけ複製する）"""
        new_board = Board()
        new_board.top_pieces = [list(column) for column in self.top_pieces]
        new_board.tile_ids = [list(column) for column in self.tile_ids]
        new_board.height_map = self.heights()
        new_board.next_id = self.next_id
        return new_board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.top_pieces == other.top_pieces
            and self.tile_ids == other.tile_ids
            and self.height_map == other.height_map
            and self.next_id == other.next_id
        )

    def __str__(self):
        """高さの文字列表現を返す（行が y、列が x）"""
        result = ["   " + " ".join(str(x) for x in range(BOARD_SIZE))]
        result.append("  " + "-" * (BOARD_SIZE * 2 + 1))
        for y in range(BOARD_SIZE):
            row = " ".join(str(self.height_map[x][y]) for x in range(BOARD_SIZE))
            result.append(f"{y} |{row}|")
        return "\n".join(result)

    def to_dict(self) -> dict:
        """盤面を辞書形式に変換（描画用）"""
        return {
            "top_pieces": [
                [piece.to_dict() for piece in column] for column in self.top_pieces
            ],
            "tile_ids": [list(column) for column in self.tile_ids],
            "heights": self.heights(),
            "next_id": self.next_id,
        }
