"""
どこで: `engine.render.surface`。
何を: 描画面の最小インターフェース `Surface` と、numpy ラスタ実装 `ArraySurface`。
なぜ: 描画段をホスト（pyglet/ModernGL）から切り離し、ヘッドレスでも同じ描画手順を検証するため。

座標系:
- 原点は左上、x は右、y は下向き（論理ピクセル）。
- `translate` は以降の `fill_rect` / `fill_unit_squares` に加算される。
- 変換と塗り色は `save()` / `restore()` で退避/復帰する（`scoped()` を推奨）。
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Protocol

import numpy as np

from common.types import RGB


class Surface(Protocol):
    """描画面。フレームを跨いで変換/塗り色を漏らさないこと。"""

    @property
    def size(self) -> tuple[int, int]:
        """論理サイズ `(width, height)`。"""

    def resize(self) -> None:
        """デバイスのピクセル密度/要素サイズへ合わせ直す（毎フレーム呼んでよい）。"""

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def set_fill(self, rgb: RGB) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def fill_unit_squares(self, coords: np.ndarray) -> None:
        """`(N,2)` の各点を左上とする 1x1 の正方形を現在の塗り色で描く。"""


@contextmanager
def scoped(surface: Surface) -> Iterator[Surface]:
    """`save()` / `restore()` で囲むコンテキスト。"""
    surface.save()
    try:
        yield surface
    finally:
        surface.restore()


class ArraySurface:
    """numpy の RGB バッファへ描くヘッドレス描画面。

    - バッファは論理サイズ x `pixel_ratio`（デバイスピクセル）で確保する。
    - 論理座標は `pixel_ratio` 倍してから画素へ落とす（`floor`）。
    - 単位正方形は `round(pixel_ratio)` 画素四方（最低 1 画素）を塗る。
    - 範囲外の点は黙って捨てる。
    """

    def __init__(self, width: int, height: int, *, pixel_ratio: float = 1.0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {(width, height)}")
        if not pixel_ratio > 0:
            raise ValueError(f"pixel_ratio must be positive, got {pixel_ratio!r}")
        self._width = int(width)
        self._height = int(height)
        self._ratio = float(pixel_ratio)
        dw, dh = self.device_size
        self.pixels = np.zeros((dh, dw, 3), dtype=np.uint8)
        self._fill: RGB = (0, 0, 0)
        self._offset = (0.0, 0.0)
        self._stack: list[tuple[RGB, tuple[float, float]]] = []

    # ---- Surface ----
    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    @property
    def device_size(self) -> tuple[int, int]:
        """バッファの実画素サイズ `(width, height)`。"""
        return (
            max(1, int(round(self._width * self._ratio))),
            max(1, int(round(self._height * self._ratio))),
        )

    def set_size(self, width: int, height: int) -> None:
        """次の `resize()` で反映される論理サイズを変更する。"""
        self._width = max(1, int(width))
        self._height = max(1, int(height))

    def set_pixel_ratio(self, ratio: float) -> None:
        """次の `resize()` で反映されるピクセル密度を変更する。"""
        if not ratio > 0:
            raise ValueError(f"pixel_ratio must be positive, got {ratio!r}")
        self._ratio = float(ratio)

    def resize(self) -> None:
        h, w = self.pixels.shape[:2]
        dw, dh = self.device_size
        if (w, h) != (dw, dh):
            self.pixels = np.zeros((dh, dw, 3), dtype=np.uint8)
        self._offset = (0.0, 0.0)
        self._stack.clear()

    def save(self) -> None:
        self._stack.append((self._fill, self._offset))

    def restore(self) -> None:
        if self._stack:
            self._fill, self._offset = self._stack.pop()

    def set_fill(self, rgb: RGB) -> None:
        self._fill = (int(rgb[0]), int(rgb[1]), int(rgb[2]))

    def translate(self, dx: float, dy: float) -> None:
        ox, oy = self._offset
        self._offset = (ox + float(dx), oy + float(dy))

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        ox, oy = self._offset
        r = self._ratio
        dw, dh = self.pixels.shape[1], self.pixels.shape[0]
        x0 = max(0, int(np.floor((x + ox) * r)))
        y0 = max(0, int(np.floor((y + oy) * r)))
        x1 = min(dw, int(np.ceil((x + ox + width) * r)))
        y1 = min(dh, int(np.ceil((y + oy + height) * r)))
        if x1 <= x0 or y1 <= y0:
            return
        self.pixels[y0:y1, x0:x1] = self._fill

    def fill_unit_squares(self, coords: np.ndarray) -> None:
        pts = np.asarray(coords, dtype=np.float64)
        if pts.size == 0:
            return
        ox, oy = self._offset
        r = self._ratio
        dw, dh = self.pixels.shape[1], self.pixels.shape[0]
        with np.errstate(invalid="ignore"):
            finite = np.isfinite(pts).all(axis=1)
            px0 = np.floor((pts[finite, 0] + ox) * r)
            py0 = np.floor((pts[finite, 1] + oy) * r)
        span = max(1, int(round(r)))
        for dy in range(span):
            for dx in range(span):
                px = px0 + dx
                py = py0 + dy
                inside = (px >= 0) & (px < dw) & (py >= 0) & (py < dh)
                self.pixels[py[inside].astype(np.intp), px[inside].astype(np.intp)] = self._fill

    # ---- helpers ----
    @property
    def pixel_ratio(self) -> float:
        return self._ratio

    @property
    def translation(self) -> tuple[float, float]:
        return self._offset

    def count_color(self, rgb: RGB) -> int:
        """指定色のピクセル数（デバイス画素単位、テスト/診断用）。"""
        return int(np.all(self.pixels == np.asarray(rgb, dtype=np.uint8), axis=2).sum())


__all__ = ["Surface", "ArraySurface", "scoped"]
