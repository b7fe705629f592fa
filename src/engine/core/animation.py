"""
どこで: `engine.core.animation`。
何を: 1 フレーム分の等速イージング（ライブ点を目標点へ `speed` だけ直線移動）。
なぜ: 全粒子が距離/速度に比例した有限フレームで到達し、決して行き過ぎないようにするため。

規約:
- ライブ集合と目標集合の長さが異なる/どちらかが空/`speed <= 0` のときは何もしない。
- 距離 `d` が `speed` 以下なら目標へスナップ、そうでなければ単位ベクトル方向へ `speed` 進む。
- 浮動小数誤差で残る微小距離を避けるため、スナップ判定に相対許容 `SNAP_RTOL` を持つ。
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from .dots import DotSet

SNAP_RTOL = 1e-9


@njit(cache=True)
def _advance_kernel(live: np.ndarray, goal: np.ndarray, speed: float, rtol: float) -> None:
    """`live` を就地更新する（形状 (N,2) 同士）。"""
    limit = speed * (1.0 + rtol)
    for i in range(live.shape[0]):
        dx = goal[i, 0] - live[i, 0]
        dy = goal[i, 1] - live[i, 1]
        c = math.hypot(dx, dy)
        if c <= limit:
            live[i, 0] = goal[i, 0]
            live[i, 1] = goal[i, 1]
        else:
            live[i, 0] += dx / c * speed
            live[i, 1] += dy / c * speed


def can_advance(live: DotSet, goal: DotSet, speed: float) -> bool:
    """移動可能な状態か（長さ一致・非空・正の速度）。"""
    n = len(live)
    return n != 0 and len(goal) == n and speed > 0


def advance(live: DotSet, goal: DotSet, speed: float) -> bool:
    """ライブ集合を 1 フレーム分だけ目標へ近づける。

    Parameters
    ----------
    live : DotSet
        現在位置（就地更新される）。
    goal : DotSet
        目標位置（読み取りのみ）。
    speed : float
        1 フレームあたりの最大移動距離。

    Returns
    -------
    bool
        実際に更新処理を行った場合 True（no-op ガードに掛かった場合 False）。
    """
    if not can_advance(live, goal, speed):
        return False
    _advance_kernel(live.coords, goal.coords, float(speed), SNAP_RTOL)
    return True


def distances(live: DotSet, goal: DotSet) -> np.ndarray:
    """各点の目標までの距離（長さ不一致なら空配列）。"""
    if len(live) != len(goal):
        return np.empty(0, dtype=np.float64)
    return np.hypot(goal.xs - live.xs, goal.ys - live.ys)


def is_settled(live: DotSet, goal: DotSet) -> bool:
    """全点が目標に到達済みか。"""
    d = distances(live, goal)
    return len(live) == len(goal) and bool(np.all(d == 0.0))


__all__ = ["advance", "can_advance", "distances", "is_settled", "SNAP_RTOL"]
