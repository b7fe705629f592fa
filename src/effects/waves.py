"""
正弦/余弦/正接に基づく曲線系エフェクト

`z = index - 点数` の負の位相を使うもの（tangent_field 以降）は、点数が変わると
曲線上の位置もずれる。
"""

from __future__ import annotations

import numpy as np

from engine.core.dots import DotSet

from .registry import Viewport, effect


def _centered(src: DotSet, scale: float) -> np.ndarray:
    n = len(src)
    return (np.arange(n, dtype=np.float64) - n / 2) / scale


def _phase(src: DotSet) -> np.ndarray:
    n = len(src)
    return np.arange(n, dtype=np.float64) - n


@effect()
def sine_wave(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """中央寄せした index/50 を x とする正弦波（振幅 = 半高）。"""
    x = _centered(src, 50)
    return DotSet.from_xy(x, np.sin(np.deg2rad(x)) * view.half_height)


@effect()
def sine_lift(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    ys = src.ys - np.abs(np.sin(np.deg2rad(src.ys)) * view.half_height)
    return DotSet.from_xy(src.xs, ys)


@effect()
def sine_drop(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """|sin(index)| x 半高 だけ上へ持ち上げる（index はラジアン）。"""
    i = np.arange(len(src), dtype=np.float64)
    return DotSet.from_xy(src.xs, src.ys + np.abs(np.sin(i)) * -view.half_height)


@effect()
def sine_lift_degrees(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """sine_drop の度数版。"""
    i = np.arange(len(src), dtype=np.float64)
    return DotSet.from_xy(src.xs, src.ys + np.abs(np.sin(np.deg2rad(i))) * -view.half_height)


@effect()
def twisted_line(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    x = _centered(src, 50)
    return DotSet.from_xy(x, np.cos(x) * x - np.sin(x) * src.xs)


@effect()
def tangent_field(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """tan/cos の組（x は ±全幅、y は ±全高でクリップ）。"""
    z = _phase(src)
    size = view.half_height
    x = np.clip(np.tan(z) * size, -view.width, view.width)
    y = np.clip(np.cos(z) * size, -view.height, view.height)
    return DotSet.from_xy(x, y)


@effect()
def sine_curve(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    size = max(view.half_width, view.half_height)
    x = np.sin(np.deg2rad(_phase(src))) * size
    return DotSet.from_xy(x, x * np.cos(np.deg2rad(x)))


@effect()
def lissajous(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    z = _phase(src)
    x = np.sin(z) * view.half_width
    return DotSet.from_xy(x, x * np.cos(z))


@effect()
def sqrt_curve(src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """x = sin(z [deg]) x 半幅、y = sqrt(|x|)。"""
    x = np.sin(np.deg2rad(_phase(src))) * view.half_width
    return DotSet.from_xy(x, np.sqrt(np.abs(x)))
