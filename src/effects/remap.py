"""
ソース座標の単純な写像（拡大・転置・平行移動・鏡映・並べ替え）。
"""

from __future__ import annotations

import numpy as np

from engine.core.dots import DotSet

from .registry import Viewport, effect


@effect()
def zoom(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """各座標を 100 倍に拡大する。"""
    return DotSet.from_xy(src.xs * 100, src.ys * 100)


@effect()
def cosine_scramble(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    i = np.arange(len(src), dtype=np.float64)
    return DotSet.from_xy(np.cos(src.xs) * i, np.sin(src.ys) * i)


@effect()
def transpose(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """x と y を入れ替える。"""
    return DotSet.from_xy(src.ys, src.xs)


@effect()
def transpose_double(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    return DotSet.from_xy(src.ys * 2, src.xs * 2)


@effect()
def shift_corner(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """左上方向へ min(半幅, 半高) だけ平行移動。"""
    offset = min(view.half_width, view.half_height)
    return DotSet.from_xy(src.xs - offset, src.ys - offset)


@effect()
def floor_mirror(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """x を反転し、全点を上端の水平線へ潰す。"""
    return DotSet.from_xy(-src.xs, np.full(len(src), -view.half_height))


@effect()
def flip_vertical(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    return DotSet.from_xy(src.xs, -src.ys)


@effect()
def reverse(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """index 順を反転する（形は同じで、各点が反対側の位置へ移動する）。"""
    return DotSet(src.coords[::-1].copy())


@effect()
def aspect_stretch(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """縦横比を入れ替えて 4 倍する。"""
    width, height = view.width, view.height
    return DotSet.from_xy((src.xs * height) / width * 4, (src.ys * width) / height * 4)


@effect()
def aspect_funnel(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    width, height = view.width, view.height
    d = np.hypot(src.xs, src.ys)
    return DotSet.from_xy(
        (src.xs * height) / width * d / 20,
        (src.ys * width) / height * d / 20 - 500,
    )


@effect()
def split_columns(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """前半を左端、後半を右端の縦線へ（y にはソースの x を使う）。"""
    n = len(src)
    mid = n // 2
    xs = np.where(np.arange(n) < mid, -view.half_width, view.half_width)
    return DotSet.from_xy(xs.astype(np.float64), src.xs)
