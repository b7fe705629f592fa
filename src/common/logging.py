"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- ランナー/CLI から `setup_default_logging()` を 1 度だけ呼び、最小構成を適用する。
- レベル未指定時は `DOTS_LOG_LEVEL`（`common.settings`）を参照する。
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        from .settings import get as _get_settings

        level = _get_settings().LOG_LEVEL
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあればレベルのみ反映して終了する
    - 上位のランナー/CLI から呼び出す想定
    """
    lvl = _resolve_level(level)

    root = logging.getLogger()
    if root.handlers:
        # アプリ側で設定済み
        root.setLevel(lvl)
        return
    logging.basicConfig(level=lvl, format=_FORMAT)


__all__ = ["setup_default_logging"]
