"""
どこで: `api` 入口（高レベル公開 API）。
何を: ファサード `Dots`・ランナー `run_dots`・時計スケッチ `ClockText`・装飾子 `effect` などを再輸出。
なぜ: 利用者が単一名前空間からテキスト配置→エフェクト適用→実行まで完結できるようにするため。

Usage:
    from api import Dots, run

    run("hello", effect=9, speed=3)

    dots = Dots(seed=1)
    dots.add_text("hi")
    dots.apply_random_effect()
"""

from effects.registry import effect as effect  # 公開唯一経路（api.effect）
from engine.core.dots import DotSet
from engine.core.style import MorphMode

from .clock import ClockText
from .config import DotsConfig, resolve_config
from .dots import Dots
from .runner import run_dots as run
from .runner import run_dots as run_dots

__all__ = [
    # メインAPI
    "Dots",
    "run_dots",
    "run",
    "ClockText",
    "effect",
    # 設定
    "DotsConfig",
    "resolve_config",
    # クラス（高度な使用）
    "DotSet",
    "MorphMode",
]

__version__ = "2026.10"
