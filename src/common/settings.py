"""
どこで: `common.settings`
何を: `DOTS_*` 環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

YAML 設定（`util.utils.load_config`）より優先される上書き値のみを扱う。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # フォント
    FONT_PATH: str | None = None
    DEBUG_FONT: bool = False

    # 乱数（None で OS エントロピー）
    SEED: int | None = None

    # ロギング
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。"""
    _settings.FONT_PATH = env_str("DOTS_FONT_PATH", None)
    _settings.DEBUG_FONT = env_bool("DOTS_DEBUG_FONT", False)
    _settings.SEED = env_int("DOTS_SEED", None, min_value=0)
    _settings.LOG_LEVEL = (env_str("DOTS_LOG_LEVEL", "INFO") or "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
