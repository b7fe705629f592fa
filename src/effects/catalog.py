"""
どこで: `effects.catalog`。
何を: 登録済みエフェクトへ固定の整数 index を割り当てる順序表と、index ベースの解決 API。
なぜ: 「次/前/ランダム」の選択が index 演算で行われ、その順序を登録順（import 順）に
      依存させないため。

負の index は末尾から数える（`-1` は最後のエントリ）。範囲外は `IndexError`。
"""

from __future__ import annotations

import logging

import numpy as np

from engine.core.dots import DotSet

from .registry import EffectFn, Viewport, get_effect, is_truncating

logger = logging.getLogger(__name__)

EFFECT_ORDER: tuple[str, ...] = (
    "ring",
    "spiral",
    "zoom",
    "cosine_scramble",
    "random_scatter",
    "edge_midpoints",
    "corner",
    "transpose",
    "transpose_double",
    "ellipse",
    "diagonal",
    "sine_wave",
    "diagonal_compact",
    "shift_corner",
    "sine_lift",
    "floor_mirror",
    "offset_ellipse",
    "wide_ellipse",
    "transpose_quadrants",
    "concentric_rings",
    "slow_spiral",
    "polar_bloom",
    "polar_petals",
    "polar_sway",
    "polar_shear",
    "aspect_stretch",
    "aspect_funnel",
    "flip_vertical",
    "sine_drop",
    "column_stack",
    "diagonal_line",
    "wrapped_spiral",
    "twisted_line",
    "reverse",
    "twin_rings",
    "heart",
    "tangent_field",
    "sine_curve",
    "lissajous",
    "sqrt_curve",
    "orbit_offset",
    "stretch_x",
    "fit_viewport",
    "split_columns",
    "diagonal_orbit",
    "puzzle",
    "sine_lift_degrees",
    "circle_sweep",
    "alternating_rows",
)


def effect_count() -> int:
    return len(EFFECT_ORDER)


def normalize_index(index: int) -> int | None:
    """負の index を解決し、範囲外なら None を返す。"""
    count = len(EFFECT_ORDER)
    if index < 0:
        index += count
    if 0 <= index < count:
        return index
    return None


def effect_name(index: int) -> str:
    resolved = normalize_index(index)
    if resolved is None:
        raise IndexError(f"effect index out of range: {index} (count={len(EFFECT_ORDER)})")
    return EFFECT_ORDER[resolved]


def get_effect_at(index: int) -> EffectFn:
    """index に対応するエフェクト関数を返す。"""
    return get_effect(effect_name(index))


def index_of(name: str) -> int:
    """名前から index を引く（未登録名は `KeyError`）。"""
    try:
        return EFFECT_ORDER.index(name)
    except ValueError:
        raise KeyError(f"unknown effect: {name!r}") from None


def run_effect(index: int, src: DotSet, view: Viewport, rng: np.random.Generator) -> DotSet:
    """index のエフェクトを 1 回適用し、出力長の契約を検査して返す。"""
    name = effect_name(index)
    fn = get_effect(name)
    out = fn(src, view, rng)
    if len(out) != len(src) and not (is_truncating(fn) and len(out) < len(src)):
        raise RuntimeError(f"effect {name!r} returned {len(out)} dots for {len(src)} inputs")
    logger.debug("effect %d (%s): %d dots", index, name, len(out))
    return out


__all__ = [
    "EFFECT_ORDER",
    "effect_count",
    "normalize_index",
    "effect_name",
    "get_effect_at",
    "index_of",
    "run_effect",
]
