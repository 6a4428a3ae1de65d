"""
山札の作成と配布
"""

import random
from typing import List, Optional

from .piece import Piece

# 各色の枚数
COPIES_PER_COLOR = 7
# 山札の数
DECK_COUNT = 3
# 1つの山札の枚数（42 / 3）
DECK_SIZE = len(Piece) * COPIES_PER_COLOR // DECK_COUNT


def build_piece_pool() -> List[Piece]:
    """全42枚の駒を返す（各色7枚）"""
    return list(Piece) * COPIES_PER_COLOR


def deal_decks(rng: Optional[random.Random] = None) -> List[List[Piece]]:
    """
    全ての駒を一度だけシャッフルし、14枚ずつ3つの山札に分ける
    """
    rng = rng or random.Random()
    pool = build_piece_pool()
    rng.shuffle(pool)
    return [
        pool[i * DECK_SIZE:(i + 1) * DECK_SIZE]
        for i in range(DECK_COUNT)
    ]
