"""
どこで: `engine.core.style`。
何を: 背景色/前景色/速度/現在エフェクト/モーフ方向などの描画スタイル状態。
なぜ: プロセス全体のグローバル変数ではなく、明示的なコンテキストの一部として保持するため。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from common.types import RGB
from util.color import normalize_rgb


class MorphMode(str, Enum):
    """ライブ点が向かう先。

    - SCATTER: テキスト → エフェクト配置へ移動する。
    - GATHER: エフェクト配置へ一旦置き、テキストへ集まる。
    """

    SCATTER = "scatter"
    GATHER = "gather"

    @classmethod
    def parse(cls, value: "str | MorphMode") -> "MorphMode":
        if isinstance(value, MorphMode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"invalid morph mode: {value!r}; allowed={allowed}") from None


DEFAULT_SPEED = 5


@dataclass
class RenderStyle:
    background: RGB = (0, 0, 0)
    color: RGB = (255, 255, 255)
    speed: int = DEFAULT_SPEED
    effect: int = 0
    mode: MorphMode = MorphMode.SCATTER

    # ---- setters ----
    def set_background(self, r: int, g: int, b: int) -> None:
        self.background = normalize_rgb((int(r), int(g), int(b)))

    def set_color(self, r: int, g: int, b: int) -> None:
        self.color = normalize_rgb((int(r), int(g), int(b)))

    def set_speed(self, speed: int) -> None:
        """速度（1 フレームあたりの最大移動距離）を設定する。負値は 0 に丸める。"""
        self.speed = max(0, int(speed))

    def increase_speed(self) -> None:
        self.speed += 1

    def decrease_speed(self) -> None:
        if self.speed > 0:
            self.speed -= 1


__all__ = ["MorphMode", "RenderStyle", "DEFAULT_SPEED"]
