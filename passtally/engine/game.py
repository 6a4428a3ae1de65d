"""
パスタリーの1ゲーム全体の状態と手番の処理
"""

import logging
import random
from typing import Dict, List, Optional, Tuple

from ..config import GameOptions, PasstallySettings
from .action import Action, ActionType, Turn
from .board import Board
from .deck import DECK_COUNT, deal_decks
from .errors import (
    EmptyDeckError,
    MoveTooFarError,
    NoPlayerMarkerError,
    PlayerMarkerPresentError,
)
from .piece import Piece
from .position import BoardPosition
from .rules import MARKER_SLOT_COUNT, Rules

logger = logging.getLogger(__name__)


class Game:
    """パスタリーのゲームの状態を管理するクラス"""

    def __init__(
        self,
        player_count: Optional[int] = None,
        seed: Optional[int] = None,
        settings: Optional[PasstallySettings] = None
    ):
        options = GameOptions.resolve(player_count, seed, settings)
        self.board = Board()
        self.player_count = options.player_count
        # 外周のマーカー（プレイヤー番号、空きは None）
        self.markers: List[Optional[int]] = [None] * MARKER_SLOT_COUNT
        # 成功した手番の数
        self.round = 0
        self._decks: List[List[Piece]] = deal_decks(random.Random(options.seed))

    @property
    def player_markers(self) -> Tuple[Optional[int], ...]:
        return tuple(self.markers)

    @property
    def decks(self) -> Tuple[List[Piece], ...]:
        return tuple(list(deck) for deck in self._decks)

    def next_player(self) -> int:
        """次に手番を行うプレイヤー"""
        return self.round % self.player_count

    def play_turn(self, turn: Turn) -> None:
        """
        2つの行動をまとめて適用する
        どちらかが失敗したら盤面とマーカーを手番の前に戻し、その例外を送出する
        """
        backup = (self.board.copy(), list(self.markers))

        try:
            for action in turn.actions:
                self._apply_action(action)
        except Exception as e:
            self.board, self.markers = backup
            logger.debug("round %d: turn rolled back (%s)", self.round, e)
            raise

        logger.debug("round %d: turn committed by player %d", self.round, self.next_player())
        self.round += 1

    def _apply_action(self, action: Action) -> None:
        if action.action_type == ActionType.PLACE_PIECE:
            self.board.place_piece(action.piece)
        elif action.action_type == ActionType.MOVE_PLAYER_MARKER:
            self.move_player_marker(action.from_slot, action.to_slot)
        else:
            raise ValueError(f"Unknown action type: {action.action_type}")

    def move_player_marker(self, from_slot: int, to_slot: int) -> None:
        """
        マーカーを動かす
        どちらか回りに空きマスを1つまでしか飛び越せない
        """
        Rules.check_slot(from_slot)
        Rules.check_slot(to_slot)

        if self.markers[from_slot] is None:
            raise NoPlayerMarkerError(from_slot)

        if self.markers[to_slot] is not None:
            raise PlayerMarkerPresentError(to_slot)

        if not Rules.is_marker_move_in_range(self.markers, from_slot, to_slot):
            raise MoveTooFarError(from_slot, to_slot)

        self.markers[to_slot] = self.markers[from_slot]
        self.markers[from_slot] = None

    def put_player_marker(self, slot: int, player: int) -> None:
        """ゲーム開始時にマーカーを空きマスに置く（手番には数えない）"""
        Rules.check_slot(slot)
        if not 0 <= player < self.player_count:
            raise ValueError(f"Invalid player: {player}")
        if self.markers[slot] is not None:
            raise PlayerMarkerPresentError(slot)
        self.markers[slot] = player

    def marker_positions(self) -> Dict[int, Tuple[int, BoardPosition]]:
        """マーカーがあるマスごとに (プレイヤー, 盤外の座標) を返す（描画用）"""
        return {
            slot: (player, Rules.marker_position(slot))
            for slot, player in enumerate(self.markers)
            if player is not None
        }

    def draw_piece(self, deck_index: int) -> Piece:
        """山札の一番上の駒を引く"""
        if not 0 <= deck_index < DECK_COUNT:
            raise ValueError(f"Invalid deck: {deck_index}")
        deck = self._decks[deck_index]
        if not deck:
            raise EmptyDeckError(deck_index)
        return deck.pop()

    def to_dict(self) -> dict:
        """ゲーム状態を辞書形式に変換（描画用）"""
        return {
            "board": self.board.to_dict(),
            "markers": list(self.markers),
            "player_count": self.player_count,
            "round": self.round,
            "next_player": self.next_player(),
            "deck_sizes": [len(deck) for deck in self._decks],
        }
