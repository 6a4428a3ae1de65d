"""
パスタリーのマーカートラックのルール判定を行うモジュール
"""

from typing import Optional, Sequence, Tuple

from .errors import InvalidMarkerSlotError
from .piece import Side
from .position import BOARD_SIZE, BoardPosition

# 盤面の外周を一周するマーカーのマス数
MARKER_SLOT_COUNT = 24
# 1辺あたりのマス数
SLOTS_PER_SIDE = BOARD_SIZE
# 1つの弧で飛び越せる空きマスの数
MAX_EMPTY_SLOTS_PASSED = 1


class Rules:
    """マーカートラックのルールを管理するクラス"""

    @staticmethod
    def check_slot(slot: int) -> None:
        if not 0 <= slot < MARKER_SLOT_COUNT:
            raise InvalidMarkerSlotError(slot)

    @staticmethod
    def empty_slots_between(markers: Sequence[Optional[int]], start: int, end: int) -> int:
        """
        start から時計回り（番号が増える向き）に end まで進むとき、
        間にある空きマスの数を返す（start と end は含まない）
        """
        count = 0
        slot = (start + 1) % MARKER_SLOT_COUNT
        while slot != end % MARKER_SLOT_COUNT:
            if markers[slot] is None:
                count += 1
            slot = (slot + 1) % MARKER_SLOT_COUNT
        return count

    @staticmethod
    def is_marker_move_in_range(markers: Sequence[Optional[int]], from_slot: int, to_slot: int) -> bool:
        """
        from と to の間の2つの弧のうち、どちらか一方でも空きマスが1つ以下なら移動できる

        近い側だけを見ると遠すぎるように見えても、反対回りには
        マーカーが詰まっていて空きが1つしかないことがある
        """
        clockwise = Rules.empty_slots_between(markers, from_slot, to_slot)
        if clockwise <= MAX_EMPTY_SLOTS_PASSED:
            return True
        counter_clockwise = Rules.empty_slots_between(markers, to_slot, from_slot)
        return counter_clockwise <= MAX_EMPTY_SLOTS_PASSED

    @staticmethod
    def marker_entry(slot: int) -> Tuple[BoardPosition, Side]:
        """
        マーカーのマスが面している外周のマスと、そこから線が入る辺を返す
        0～5: 上辺を左から右、6～11: 右辺を上から下、
        12～17: 下辺を右から左、18～23: 左辺を下から上
        """
        Rules.check_slot(slot)
        side = Side(slot // SLOTS_PER_SIDE)
        offset = slot % SLOTS_PER_SIDE
        last = BOARD_SIZE - 1

        if side == Side.TOP:
            position = BoardPosition(offset, 0)
        elif side == Side.RIGHT:
            position = BoardPosition(last, offset)
        elif side == Side.BOTTOM:
            position = BoardPosition(last - offset, last)
        else:
            position = BoardPosition(0, last - offset)
        return position, side

    @staticmethod
    def marker_position(slot: int) -> BoardPosition:
        """マーカーの盤外の座標（面しているマスの1つ外側）"""
        edge_position, side = Rules.marker_entry(slot)
        dx, dy = side.delta
        return BoardPosition(edge_position.x + dx, edge_position.y + dy)
