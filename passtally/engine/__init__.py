"""
パスタリーのゲームエンジン - パッケージ初期化
"""

from .errors import (
    PasstallyError,
    InvalidPositionError,
    HeightMismatchError,
    DuplicatePieceError,
    NoPlayerMarkerError,
    PlayerMarkerPresentError,
    MoveTooFarError,
    InvalidMarkerSlotError,
    TraversalError,
    EmptyDeckError,
)
from .position import BoardPosition, BOARD_SIZE
from .piece import Side, PartialPiece, RotatedPartialPiece, Piece, PositionedPiece
from .board import Board
from .action import Action, ActionType, Turn
from .rules import Rules, MARKER_SLOT_COUNT
from .deck import build_piece_pool, deal_decks
from .game import Game

__all__ = [
    'PasstallyError',
    'InvalidPositionError',
    'HeightMismatchError',
    'DuplicatePieceError',
    'NoPlayerMarkerError',
    'PlayerMarkerPresentError',
    'MoveTooFarError',
    'InvalidMarkerSlotError',
    'TraversalError',
    'EmptyDeckError',
    'BoardPosition',
    'BOARD_SIZE',
    'Side',
    'PartialPiece',
    'RotatedPartialPiece',
    'Piece',
    'PositionedPiece',
    'Board',
    'Action',
    'ActionType',
    'Turn',
    'Rules',
    'MARKER_SLOT_COUNT',
    'build_piece_pool',
    'deal_decks',
    'Game',
]
