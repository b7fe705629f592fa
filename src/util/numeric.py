"""
どこで: `util.numeric`。
何を: エフェクトが共有する数値ヘルパ（範囲写像・巻き戻し・整数乱数・丸め）。
なぜ: 各エフェクトで同じ境界規約（ゼロ除算・空集合）を使い回すため。
"""

from __future__ import annotations

import math

import numpy as np


def map_range(
    value: np.ndarray | float, low1: float, high1: float, low2: float, high2: float
) -> np.ndarray | float:
    """`[low1, high1]` を `[low2, high2]` へ線形写像する。

    入力範囲が潰れている（`low1 == high1`）場合は出力範囲の中央を返す。
    """
    if high1 == low1:
        mid = low2 + (high2 - low2) / 2.0
        if isinstance(value, np.ndarray):
            return np.full(value.shape, mid, dtype=np.float64)
        return mid
    return low2 + ((high2 - low2) * (value - low1)) / (high1 - low1)


def value_to_max_range(
    values: np.ndarray, span: float, max_iter: int, default: float = 0.0
) -> np.ndarray:
    """`span` を引き続けて `span` 以下へ巻き戻す（反復上限に達したら `default`）。

    逐次減算と同じ結果を閉形式で求める。必要な減算回数 k が `max_iter` 以上なら
    `default` を返す。`span <= 0` では収束しないため、`span` を超える値は `default`。
    """
    v = np.asarray(values, dtype=np.float64)
    out = v.copy()
    over = v > span
    if not np.any(over):
        return out
    if span <= 0 or max_iter <= 0:
        out[over] = default
        return out
    k = np.ceil(v[over] / span) - 1.0
    wrapped = v[over] - k * span
    out[over] = np.where(k >= max_iter, default, wrapped)
    return out


def random_int(rng: np.random.Generator, low: float, high: float) -> int:
    """両端を含む整数乱数（下限は切り上げ、上限は切り捨て）。"""
    lo = math.ceil(low)
    hi = math.floor(high)
    return lo + math.floor(rng.random() * (hi - lo + 1))


def random_ints(rng: np.random.Generator, low: float, high: float, size: int) -> np.ndarray:
    """`random_int` のベクトル版（float64 で返す）。"""
    lo = math.ceil(low)
    hi = math.floor(high)
    return lo + np.floor(rng.random(size) * (hi - lo + 1))


def coin_flips(rng: np.random.Generator, size: int) -> np.ndarray:
    """`random_int(rng, 0, 1) == 1` のベクトル版（bool 配列）。"""
    return random_ints(rng, 0, 1, size) == 1


def round_half_up(x: float) -> int:
    """0.5 を常に切り上げる丸め（偶数丸めではない）。"""
    return int(math.floor(x + 0.5))


__all__ = [
    "map_range",
    "value_to_max_range",
    "random_int",
    "random_ints",
    "coin_flips",
    "round_half_up",
]
