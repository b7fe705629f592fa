"""
直線/列系エフェクト（index を座標として並べる）。
"""

from __future__ import annotations

import numpy as np

from engine.core.dots import DotSet

from .registry import Viewport, effect


@effect()
def diagonal(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """中央寄せした index を (x, x) とする対角線。"""
    n = len(src)
    x = np.arange(n, dtype=np.float64) - n / 2
    return DotSet.from_xy(x, x.copy())


@effect()
def diagonal_compact(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    n = len(src)
    x = (np.arange(n, dtype=np.float64) - n / 2) / 20
    return DotSet.from_xy(x, x.copy())


@effect()
def column_stack(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """x は保持し、y を index/50 に並べる。"""
    i = np.arange(len(src), dtype=np.float64)
    return DotSet.from_xy(src.xs, i / 50)


@effect()
def diagonal_line(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    i = np.arange(len(src), dtype=np.float64) / 50
    return DotSet.from_xy(i, i.copy())


@effect()
def alternating_rows(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """偶数 index を下端、奇数 index を上端の水平線へ。"""
    h = view.half_height
    ys = np.where(np.arange(len(src)) % 2 == 0, h, -h).astype(np.float64)
    return DotSet.from_xy(src.xs, ys)
