"""
パスタリーのルール違反を表す例外
"""


class PasstallyError(Exception):
    """ルールエンジンが送出する例外の基底クラス"""


class InvalidPositionError(PasstallyError):
    """盤外の位置が指定された"""

    def __init__(self, position):
        self.position = position
        super().__init__(f"The position {position} is outside of the board.")


class HeightMismatchError(PasstallyError):
    def __init__(self, first_height: int, second_height: int):
        self.first_height = first_height
        self.second_height = second_height
        super().__init__(
            f"The heights of the two positions aren't the same "
            f"({first_height} != {second_height})."
        )


class DuplicatePieceError(PasstallyError):
    def __init__(self, tile_id: int):
        self.tile_id = tile_id
        super().__init__(
            f"You cannot place a piece directly on top of another piece (tile {tile_id})."
        )


class NoPlayerMarkerError(PasstallyError):
    def __init__(self, slot: int):
        self.slot = slot
        super().__init__(f"There is no player marker at slot {slot}.")


class PlayerMarkerPresentError(PasstallyError):
    def __init__(self, slot: int):
        self.slot = slot
        super().__init__(f"There is already a player marker at slot {slot}.")


class MoveTooFarError(PasstallyError):
    """どちら回りでも空きマスが2つ以上ある"""

    def __init__(self, from_slot: int, to_slot: int):
        self.from_slot = from_slot
        self.to_slot = to_slot
        super().__init__(
            f"There is more than one empty marker slot between {from_slot} and {to_slot}."
        )


class InvalidMarkerSlotError(PasstallyError):
    def __init__(self, slot: int):
        self.slot = slot
        super().__init__(f"Marker slot {slot} is not in 0..23.")


class TraversalError(PasstallyError):
    """信号の経路が盤外に出た、または終わらなかった"""


class EmptyDeckError(PasstallyError):
    def __init__(self, deck_index: int):
        self.deck_index = deck_index
        super().__init__(f"Deck {deck_index} is empty.")
