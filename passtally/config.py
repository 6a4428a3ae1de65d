"""
パスタリーの設定
環境変数 PASSTALLY_PLAYER_COUNT / PASSTALLY_SEED で既定値を変更できる
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_PLAYERS = 2
MAX_PLAYERS = 4


class PasstallySettings(BaseSettings):
    """新しいゲームの既定値"""

    player_count: int = Field(default=2, ge=MIN_PLAYERS, le=MAX_PLAYERS)
    seed: Optional[int] = None

    model_config = SettingsConfigDict(env_prefix="PASSTALLY_")


class GameOptions(BaseModel):
    """Game(...) に渡された引数の検証用"""

    player_count: int = Field(ge=MIN_PLAYERS, le=MAX_PLAYERS)
    seed: Optional[int] = None

    @classmethod
    def resolve(
        cls,
        player_count: Optional[int] = None,
        seed: Optional[int] = None,
        defaults: Optional[PasstallySettings] = None
    ) -> 'GameOptions':
        """指定がない値は設定の既定値で埋める"""
        defaults = defaults or settings
        return cls(
            player_count=defaults.player_count if player_count is None else player_count,
            seed=defaults.seed if seed is None else seed,
        )


settings = PasstallySettings()
