"""
どこで: `common` の型定義。
何を: 座標/色/フックなど、パッケージ横断で使う軽量エイリアス。
なぜ: 依存の少ない場所に置き、循環 import と分散定義を避けるため。
"""

from typing import Callable

Vec2 = tuple[float, float]
RGB = tuple[int, int, int]

# 描画前後に呼ばれる引数なしコールバック
DrawHook = Callable[[], None]


__all__ = ["Vec2", "RGB", "DrawHook"]
