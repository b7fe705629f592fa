"""
円/楕円/螺旋系エフェクト

- index を角度（ラジアン or 度）として使い、中心の周りへ並べる。
- ソース座標は使わないもの（ring 等）と、ソースに円運動を足すもの（orbit_offset 等）がある。
"""

from __future__ import annotations

import numpy as np

from engine.core.dots import DotSet
from util.numeric import coin_flips, map_range, random_int, value_to_max_range

from .registry import Viewport, effect


def _index(src: DotSet) -> np.ndarray:
    return np.arange(len(src), dtype=np.float64)


@effect()
def ring(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """半径 min(半幅, 半高) の円周（角度 = index [rad]）。"""
    i = _index(src)
    r = min(view.half_width, view.half_height)
    return DotSet.from_xy(np.cos(i) * r, np.sin(i) * r)


@effect()
def spiral(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """半径 = 角度 = index の螺旋。"""
    i = _index(src)
    return DotSet.from_xy(np.cos(i) * i, np.sin(i) * i)


@effect()
def ellipse(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """半幅 x 半高の楕円（角度 = index [deg]）。"""
    t = np.deg2rad(_index(src))
    return DotSet.from_xy(np.sin(t) * view.half_width, np.cos(t) * view.half_height)


@effect()
def offset_ellipse(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """右下隅を中心とする半径 = 半高の円。"""
    t = np.deg2rad(_index(src))
    w, h = view.half_width, view.half_height
    return DotSet.from_xy(w + np.sin(t) * h, h + np.cos(t) * h)


@effect()
def wide_ellipse(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """右下隅を中心とする全幅 x 全高の楕円（大半が画面外）。"""
    t = np.deg2rad(_index(src))
    width, height = view.width, view.height
    return DotSet.from_xy(width / 2 + np.sin(t) * width, height / 2 + np.cos(t) * height)


@effect()
def concentric_rings(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """半径 s, s/2, s/4, s/8 の 4 つの円へ無作為に振り分ける。"""
    i = _index(src)
    size1 = max(view.half_width, view.half_height)
    size2 = size1 / 2
    size3 = size2 / 2
    size4 = size3 / 2
    a = coin_flips(rng, len(src))
    b = coin_flips(rng, len(src))
    r = np.where(a, np.where(b, size1, size2), np.where(b, size3, size4))
    return DotSet.from_xy(np.cos(i) * r, np.sin(i) * r)


@effect()
def slow_spiral(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """角度 index [deg]、半径 index/20 の緩い螺旋。"""
    i = _index(src)
    t = np.deg2rad(i)
    return DotSet.from_xy(np.cos(t) * i / 20, np.sin(t) * i / 20)


@effect()
def wrapped_spiral(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """半径を min(半幅, 半高) で巻き戻した螺旋（巻き戻し上限超過は半径 1）。"""
    i = _index(src)
    size = min(view.half_width, view.half_height)
    d = value_to_max_range(i, size, len(src) * 2, 1.0)
    return DotSet.from_xy(np.cos(i) * d, np.sin(i) * d)


@effect()
def twin_rings(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """前半を右下、後半を左上の半径 100 の円へ。"""
    i = _index(src)
    size = min(view.half_width, view.half_height)
    r = 100.0
    mid = len(src) // 2
    center = np.where(i < mid, size, -size)
    return DotSet.from_xy(center + np.cos(i) * r, center + np.sin(i) * r)


@effect()
def heart(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """ハート型の閉曲線（角度 = index [deg]）。"""
    r = min(view.half_width, view.half_height) / 1.2
    t = np.deg2rad(_index(src))
    return DotSet.from_xy(np.cos(t) * r, (np.sin(t) + np.abs(np.cos(t)) * -0.5) * r)


@effect()
def circle_sweep(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """index を 0..360 度へ均等に割り付けた円（開始角は 0 / -180 を無作為に選ぶ）。"""
    n = len(src)
    size = min(view.half_width, view.half_height)
    offset = 180.0 if random_int(rng, 0, 1) == 0 else 0.0
    angle = np.deg2rad(map_range(_index(src), 1, n, 0 - offset, 360 - offset))
    return DotSet.from_xy(np.cos(angle) * size, np.sin(angle) * size)


@effect()
def orbit_offset(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """各点を半径 150 の円周上へずらす。"""
    i = _index(src)
    size = 150.0
    return DotSet.from_xy(src.xs + np.cos(i) * size, src.ys + np.sin(i) * size)


@effect()
def diagonal_orbit(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """対角線上を進む中心の周りに円を描く。"""
    n = len(src)
    w, h = view.half_width, view.half_height
    r = min(w, h)
    i = _index(src)
    x = map_range(i, 1, n, -w, w)
    y = map_range(i, 1, n, -h, h)
    return DotSet.from_xy(x + np.cos(i) * r, y + np.sin(i) * r)
