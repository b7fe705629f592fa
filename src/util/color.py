"""
どこで: `util.color`。
何を: 色指定の正規化（Hex, RGB 0–255, RGB 0–1）を RGB 0–255 の int タプルへ一元化。
なぜ: 設定ファイル/CLI/API で同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

from typing import Sequence

from common.types import RGB


def _clamp255(x: float) -> int:
    v = int(round(float(x)))
    return 0 if v < 0 else 255 if v > 255 else v


def parse_hex_color_str(s: str) -> RGB:
    """Hex 文字列から RGB(0–255) を返す。

    受理形式: "#RRGGBB", "0xRRGGBB", "RRGGBB"（アルファ付き 8 桁はアルファを捨てる）。
    大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        return (int(t[0:2], 16), int(t[2:4], 16), int(t[4:6], 16))
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e


def normalize_rgb(value: object) -> RGB:
    """色を RGB(0–255) の int タプルへ正規化する。

    - 受理: Hex 文字列, (r,g,b) / (r,g,b,a)
    - 全要素が float かつ 0..1 の範囲なら 0–1 指定とみなす。それ以外は 0–255 として丸める。
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    seq: Sequence[float | int] = value
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        fseq = [float(c) for c in seq[:3]]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if all(isinstance(c, float) for c in seq[:3]) and all(0.0 <= c <= 1.0 for c in fseq):
        return (_clamp255(fseq[0] * 255), _clamp255(fseq[1] * 255), _clamp255(fseq[2] * 255))
    return (_clamp255(fseq[0]), _clamp255(fseq[1]), _clamp255(fseq[2]))


def to_unit_rgb(rgb: RGB) -> tuple[float, float, float]:
    """RGB(0–255) を GL 用の 0–1 float へ変換する。"""
    r, g, b = rgb
    return (r / 255.0, g / 255.0, b / 255.0)
