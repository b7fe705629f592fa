"""
乱数を使う散布系エフェクト

乱数はすべて引数の `rng` から引く（モジュール状態を持たない）。
"""

from __future__ import annotations

import numpy as np

from engine.core.dots import DotSet
from util.numeric import coin_flips, random_int, random_ints, round_half_up

from .registry import Viewport, effect


@effect()
def random_scatter(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """ビューポート内の整数座標へ一様に散らす。"""
    n = len(src)
    w, h = view.half_width, view.half_height
    return DotSet.from_xy(random_ints(rng, -w, w, n), random_ints(rng, -h, h, n))


@effect()
def edge_midpoints(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """左右上下の辺の中点 4 つへ無作為に集める。"""
    n = len(src)
    w, h = view.half_width, view.half_height
    a = coin_flips(rng, n)
    b = coin_flips(rng, n)
    xs = np.where(a, np.where(b, w, -w), 0.0)
    ys = np.where(a, 0.0, np.where(b, -h, h))
    return DotSet.from_xy(xs, ys)


@effect()
def corner(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """全点を右下隅の 1 点へ集める。"""
    n = len(src)
    return DotSet.from_xy(np.full(n, view.half_width), np.full(n, view.half_height))


@effect()
def transpose_quadrants(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """転置した上で、4 象限のいずれかへ無作為にずらす。"""
    n = len(src)
    size = max(view.half_width, view.half_height)
    a = coin_flips(rng, n)
    b = coin_flips(rng, n)
    dx = np.where(b, -size, size)
    dy = np.where(a, np.where(b, -size, size), np.where(b, size, -size))
    return DotSet.from_xy(src.ys + dx, src.xs + dy)


@effect()
def puzzle(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """連続する点を 3〜10 個のピースに分け、ピースごとに無作為にずらす。

    ピースの大きさは `round(点数 / ピース数)`（0.5 は切り上げ）。ピース数 x 大きさ
    が点数より小さい場合は余った末尾の点を出力しない（出力は短くなり得る）。
    """
    n = len(src)
    count = random_int(rng, 3, 10)
    piece = round_half_up(n / count)
    w, h = view.half_width, view.half_height
    offsets = np.array(
        [(random_int(rng, -w, w) / 1.2, random_int(rng, -h, h) / 1.2) for _ in range(count)],
        dtype=np.float64,
    )
    total = min(n, count * piece)
    if total == 0:
        return DotSet.empty()
    owner = np.arange(total) // piece
    return DotSet(src.coords[:total] + offsets[owner])


puzzle.__truncating__ = True
