"""
ソースの外接範囲をビューポートへ正規化するエフェクト。

空集合では min/max を 0 とみなす。範囲が潰れている場合は中央（0）へ写す。
"""

from __future__ import annotations

import numpy as np

from engine.core.dots import DotSet
from util.numeric import map_range

from .registry import Viewport, effect


def _bounds(values: np.ndarray) -> tuple[float, float]:
    if values.size == 0:
        return 0.0, 0.0
    return float(values.min()), float(values.max())


@effect()
def stretch_x(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """x のみを [-半幅, 半幅] へ引き伸ばす。"""
    lo, hi = _bounds(src.xs)
    xs = map_range(src.xs, lo, hi, -view.half_width, view.half_width)
    return DotSet.from_xy(xs, src.ys.copy())


@effect()
def fit_viewport(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """x/y をそれぞれ独立にビューポート全体へ引き伸ばす。"""
    lo_x, hi_x = _bounds(src.xs)
    lo_y, hi_y = _bounds(src.ys)
    xs = map_range(src.xs, lo_x, hi_x, -view.half_width, view.half_width)
    ys = map_range(src.ys, lo_y, hi_y, -view.half_height, view.half_height)
    return DotSet.from_xy(xs, ys)
