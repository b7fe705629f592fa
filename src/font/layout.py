"""
どこで: `font.layout`。
何を: 文字列をビットマップフォントで点群（`DotSet`）へ展開する。
なぜ: 各インク画素を小さな正方形のサンプル点へ広げ、粒子の「素の」位置を作るため。

配置規約:
- 文字送り `letter = (size + offset) * (width + 1)`。先頭文字の中心は
  `x - letter * (count - 1) / 2`（全幅 `letter * count` を x 中心に揃える）。
- 画素 `(col, row)` の中心:
  `X = cx + (col - width // 2) * (size + offset)`、
  `Y = y + (row - height // 2) * (size + offset) + size / 2`。
- 正方形は左上 `(X - size/2, Y - size/2)` から `1, 1+step, ... <= size` の位置でサンプル
  （y 外側・x 内側）。`step > size` は 1 点に縮退する（補正しない）。
"""

from __future__ import annotations

import logging
import math

import numpy as np

from engine.core.dots import DotSet

from .bitmap_font import BitmapFont

logger = logging.getLogger(__name__)


def square_samples(size: float, step: float) -> np.ndarray:
    """正方形 1 辺上のサンプル位置 `1, 1+step, ... <= size`。"""
    if step <= 0:
        raise ValueError(f"step must be > 0, got {step}")
    if size < 1:
        return np.empty(0, dtype=np.float64)
    count = int(math.floor((size - 1) / step)) + 1
    return 1.0 + step * np.arange(count, dtype=np.float64)


def samples_per_square(size: float, step: float) -> int:
    return int(square_samples(size, step).shape[0]) ** 2


def _expand_squares(centers: np.ndarray, size: float, step: float) -> np.ndarray:
    """中心 `(P,2)` の各正方形をサンプル点 `(P*k*k, 2)` へ展開する。"""
    offs = square_samples(size, step)
    k = offs.shape[0]
    if centers.shape[0] == 0 or k == 0:
        return np.empty((0, 2), dtype=np.float64)
    half = size / 2
    px = centers[:, 0, None, None] - half + offs[None, None, :]
    py = centers[:, 1, None, None] - half + offs[None, :, None]
    px, py = np.broadcast_arrays(px, py)
    return np.stack([px, py], axis=-1).reshape(-1, 2)


def glyph_centers(
    font: BitmapFont, letter: str, x: float, y: float, size: float, offset: float
) -> np.ndarray:
    """1 文字ぶんのインク画素の中心座標 `(P, 2)`。"""
    pixels = font.glyph(letter)
    if not pixels:
        return np.empty((0, 2), dtype=np.float64)
    cells = np.asarray(pixels, dtype=np.float64)
    size_offset = size + offset
    half_w = font.width // 2
    half_h = font.height // 2
    cx = x + (cells[:, 0] - half_w) * size_offset
    cy = y + (cells[:, 1] - half_h) * size_offset + size / 2
    return np.column_stack([cx, cy])


def text_to_dots(
    text: str,
    font: BitmapFont,
    *,
    x: float = 0.0,
    y: float = 0.0,
    size: float = 15,
    offset: float = 0,
    step: float = 1,
) -> DotSet:
    """文字列を点群へ展開する（純関数）。

    Parameters
    ----------
    text : str
        描く文字列。コードポイント単位で 1 文字とみなす。
    font : BitmapFont
        グリフ表。
    x, y : float
        配置の基準点（文字列の水平中心）。
    size : float, default 15
        1 画素を展開する正方形の辺。
    offset : float, default 0
        画素間の追加間隔。
    step : float, default 1
        正方形内のサンプル間隔（> 0）。
    """
    letters = list(text)
    count = len(letters)
    if count == 0:
        return DotSet()

    spacing = (size + offset) * font.width_plus
    start_x = x - spacing * ((count - 1) / 2)

    unknown = {ch for ch in letters if not font.has_letter(ch)}
    if unknown:
        logger.debug("characters outside the alphabet render blank: %r", "".join(sorted(unknown)))

    chunks = [
        glyph_centers(font, letter, start_x + i * spacing, y, size, offset)
        for i, letter in enumerate(letters)
    ]
    centers = np.concatenate(chunks, axis=0)
    return DotSet(_expand_squares(centers, size, step))


__all__ = ["text_to_dots", "square_samples", "samples_per_square", "glyph_centers"]
