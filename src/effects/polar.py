"""
極座標の再パラメータ化エフェクト

半径（原点からの距離など）と角度（`sin` で揺らした値 [deg]）を計算し直して配置する。
"""

from __future__ import annotations

import numpy as np

from engine.core.dots import DotSet

from .registry import Viewport, effect


@effect()
def polar_bloom(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """半径 = 原点距離 x 2、角度 = sin(index) x 点数 [deg]。"""
    n = len(src)
    i = np.arange(n, dtype=np.float64)
    r = np.hypot(src.xs, src.ys) * 2
    f = np.deg2rad(np.sin(i) * n)
    return DotSet.from_xy(r * np.cos(f), r * np.sin(f))


@effect()
def polar_petals(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """半径 = 点 (f, f) からの距離 / 50。"""
    n = len(src)
    i = np.arange(n, dtype=np.float64)
    f = np.sin(i) * n
    r = np.hypot(f - src.xs, f - src.ys) / 50
    t = np.deg2rad(f)
    return DotSet.from_xy(r * np.cos(t), r * np.sin(t))


@effect()
def polar_sway(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    n = len(src)
    t = np.deg2rad(np.sin(src.xs + src.ys) * n)
    return DotSet.from_xy(src.xs * np.cos(t), src.ys * np.sin(t))


@effect()
def polar_shear(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """polar_sway に互いの座標を足してせん断する。"""
    n = len(src)
    t = np.deg2rad(np.sin(src.xs + src.ys) * n)
    return DotSet.from_xy(src.xs * np.cos(t) + src.ys, src.ys * np.sin(t) + src.xs)
