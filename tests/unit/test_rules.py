"""
単体テスト: マーカートラックのルールのテスト
"""

import pytest
from passtally.engine import BoardPosition, InvalidMarkerSlotError, Rules, Side


def markers_with_gaps(*empty_slots):
    return [None if slot in empty_slots else 0 for slot in range(24)]


class TestEmptySlotsBetween:
    """弧の空きマスの数え方のテストクラス"""

    def test_endpoints_are_excluded(self):
        markers = markers_with_gaps(0, 4)
        assert Rules.empty_slots_between(markers, 0, 4) == 0

    def test_clockwise(self):
        markers = markers_with_gaps(5, 17)
        assert Rules.empty_slots_between(markers, 0, 10) == 1
        assert Rules.empty_slots_between(markers, 10, 0) == 1

    def test_wraps_around(self):
        markers = markers_with_gaps(23, 1)
        assert Rules.empty_slots_between(markers, 22, 2) == 2
        assert Rules.empty_slots_between(markers, 2, 22) == 0

    def test_adjacent_slots(self):
        assert Rules.empty_slots_between(markers_with_gaps(*range(24)), 3, 4) == 0


class TestMarkerMoveInRange:
    """マーカーの移動距離の判定のテストクラス"""

    def test_short_arc_without_gaps(self):
        markers = markers_with_gaps(4, 5, 17)
        assert Rules.is_marker_move_in_range(markers, 0, 4)

    def test_single_gap_passed(self):
        markers = markers_with_gaps(5, 10, 17)
        assert Rules.is_marker_move_in_range(markers, 0, 10)

    def test_long_arc_counts(self):
        """近い側に空きが2つあっても、反対回りに空きが1つなら動ける"""
        markers = markers_with_gaps(3, 5, 10, 17)
        assert Rules.is_marker_move_in_range(markers, 0, 10)

    def test_both_arcs_too_sparse(self):
        markers = markers_with_gaps(3, 5, 10, 15, 17)
        assert not Rules.is_marker_move_in_range(markers, 0, 10)

    def test_counter_clockwise_move(self):
        markers = markers_with_gaps(20, 22)
        assert Rules.is_marker_move_in_range(markers, 2, 20)

    def test_empty_track(self):
        """空きばかりの外周では隣か1つ飛ばしにしか動けない"""
        markers = [None] * 24
        markers[0] = 0
        assert Rules.is_marker_move_in_range(markers, 0, 1)
        assert Rules.is_marker_move_in_range(markers, 0, 2)
        assert Rules.is_marker_move_in_range(markers, 0, 22)
        assert not Rules.is_marker_move_in_range(markers, 0, 3)
        assert not Rules.is_marker_move_in_range(markers, 0, 12)


class TestMarkerPerimeter:
    """マーカーの盤外の位置のテストクラス"""

    @pytest.mark.parametrize("slot,position,side", [
        (0, (0, 0), Side.TOP),
        (5, (5, 0), Side.TOP),
        (6, (5, 0), Side.RIGHT),
        (11, (5, 5), Side.RIGHT),
        (12, (5, 5), Side.BOTTOM),
        (17, (0, 5), Side.BOTTOM),
        (18, (0, 5), Side.LEFT),
        (23, (0, 0), Side.LEFT),
    ])
    def test_marker_entry(self, slot, position, side):
        assert Rules.marker_entry(slot) == (BoardPosition(*position), side)

    @pytest.mark.parametrize("slot,position", [
        (0, (0, -1)),
        (3, (3, -1)),
        (6, (6, 0)),
        (12, (5, 6)),
        (18, (-1, 5)),
        (23, (-1, 0)),
    ])
    def test_marker_position(self, slot, position):
        assert Rules.marker_position(slot) == BoardPosition(*position)

    def test_every_slot_is_off_board(self):
        positions = {Rules.marker_position(slot) for slot in range(24)}
        assert len(positions) == 24
        assert not any(position.is_valid() for position in positions)

    @pytest.mark.parametrize("slot", [-1, 24, 100])
    def test_invalid_slot(self, slot):
        with pytest.raises(InvalidMarkerSlotError):
            Rules.marker_entry(slot)
