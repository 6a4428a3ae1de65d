"""
pytest共通設定とフィクスチャ
"""

import pytest
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def empty_board():
    """空の盤面を提供するフィクスチャ"""
    from passtally.engine import Board
    return Board()


@pytest.fixture
def game():
    """2人用・シード固定のゲームを提供するフィクスチャ"""
    from passtally.engine import Game
    return Game(player_count=2, seed=42)


@pytest.fixture
def crowded_game():
    """
    指定したマス以外すべてにマーカーを置いたゲームを作るフィクスチャ
    マーカーの持ち主はマス番号の偶奇で交互にする
    """
    from passtally.engine import Game, MARKER_SLOT_COUNT

    def _make(empty_slots):
        game = Game(player_count=2, seed=0)
        for slot in range(MARKER_SLOT_COUNT):
            if slot not in empty_slots:
                game.put_player_marker(slot, slot % 2)
        return game

    return _make
