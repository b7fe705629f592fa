"""
ドット集合 `DotSet`（プロジェクト中核の座標表現）

本モジュールは、テキスト配置/エフェクト/アニメーション/描画の全段で共有する唯一の
座標表現 `DotSet` を提供する。

データモデル（不変条件）:
- `coords: float64 ndarray (N, 2)`: 全ドットを 1 本の連続メモリで保持（行は XY）。
- i 番目のドットは `coords[i]`。x/y 列は `xs` / `ys` ビューで参照する。
- x と y の長さは構造上常に一致する（独立に伸縮する 2 本の配列は持たない）。
- ドットは匿名で、同一性は行 index のみ。

構築ユーティリティ:
- `DotSet.from_xy(xs, ys)` は長さの異なる列を `ValueError` で拒否する。
- `DotSet.from_points(points)` は `(x, y)` の列から生成する。

直感図:

    coords (N=3)
      idx  x     y
      0   [-2.0, 0.0]
      1   [ 2.0, 1.0]
      2   [ 2.0, 2.0]

補足:
- 空集合は `coords.shape == (0, 2)`。
- `concat` は行を後ろへ連結した新インスタンスを返す（元は変更しない）。
- ライブ集合はアニメーション段が `coords` を就地更新する（唯一の可変経路）。
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from common.types import Vec2


def _normalize_coords(coords: np.ndarray) -> np.ndarray:
    arr = np.asarray(coords, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"coords は形状 (N, 2) の配列である必要があります: got {arr.shape}")
    if not arr.flags.c_contiguous:
        arr = np.ascontiguousarray(arr)
    return arr


class DotSet:
    """座標ペア列（struct-of-pairs）。

    フィールド:
    - `coords (N,2) float64`: すべてのドットの XY。
    """

    __slots__ = ("coords",)

    coords: np.ndarray

    def __init__(self, coords: np.ndarray | None = None) -> None:
        if coords is None:
            self.coords = np.empty((0, 2), dtype=np.float64)
        else:
            self.coords = _normalize_coords(coords)

    # ── ファクトリ ───────────────────
    @classmethod
    def empty(cls) -> "DotSet":
        return cls()

    @classmethod
    def from_xy(cls, xs: Sequence[float] | np.ndarray, ys: Sequence[float] | np.ndarray) -> "DotSet":
        """x 列と y 列から生成する。

        Raises
        ------
        ValueError
            長さが一致しない場合。
        """
        ax = np.asarray(xs, dtype=np.float64).reshape(-1)
        ay = np.asarray(ys, dtype=np.float64).reshape(-1)
        if ax.shape[0] != ay.shape[0]:
            raise ValueError(f"x/y の長さが一致しません: {ax.shape[0]} != {ay.shape[0]}")
        return cls(np.column_stack([ax, ay]))

    @classmethod
    def from_points(cls, points: Iterable[Vec2]) -> "DotSet":
        pts = list(points)
        if not pts:
            return cls()
        return cls(np.asarray(pts, dtype=np.float64))

    # ── 参照 ─────────────────────────
    @property
    def xs(self) -> np.ndarray:
        """x 列のビュー。"""
        return self.coords[:, 0]

    @property
    def ys(self) -> np.ndarray:
        """y 列のビュー。"""
        return self.coords[:, 1]

    def __len__(self) -> int:
        return int(self.coords.shape[0])

    def is_empty(self) -> bool:
        return self.coords.shape[0] == 0

    def __iter__(self):
        for x, y in self.coords:
            yield (float(x), float(y))

    def __repr__(self) -> str:
        return f"DotSet(n={len(self)})"

    # ── 純粋操作 ─────────────────────
    def copy(self) -> "DotSet":
        return DotSet(self.coords.copy())

    def concat(self, other: "DotSet") -> "DotSet":
        """`other` を後ろに連結した新しい集合を返す。"""
        if other.is_empty():
            return self.copy()
        if self.is_empty():
            return other.copy()
        return DotSet(np.concatenate([self.coords, other.coords], axis=0))

    def append(self, x: float, y: float) -> "DotSet":
        """1 点を後ろに足した新しい集合を返す。"""
        return self.concat(DotSet(np.array([[x, y]], dtype=np.float64)))

    def allclose(self, other: "DotSet", *, atol: float = 1e-9) -> bool:
        return self.coords.shape == other.coords.shape and bool(
            np.allclose(self.coords, other.coords, atol=atol, equal_nan=True)
        )


__all__ = ["DotSet"]
