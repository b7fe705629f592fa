"""
決定的エフェクトの式を 1 点ずつのスカラ実装（`math`）と突き合わせる。

- 乱数を使うエントリ（random_scatter / edge_midpoints / transpose_quadrants /
  concentric_rings / circle_sweep / puzzle）と index を反転する reverse は対象外。
- 2 種類のビューポートで比較し、半幅/半高の取り違えや度/ラジアンの混同を検出する。
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from effects.catalog import EFFECT_ORDER
from effects.registry import Viewport, get_effect
from engine.core.dots import DotSet

VIEWS = [Viewport(800, 600), Viewport(150, 90)]


def _rad(d: float) -> float:
    return d * (math.pi / 180)


def _map(v: float, lo1: float, hi1: float, lo2: float, hi2: float) -> float:
    return lo2 + ((hi2 - lo2) * (v - lo1)) / (hi1 - lo1)


def _wrap(number: float, span: float, max_iter: int, default: float) -> float:
    count = 0
    while number > span:
        number -= span
        count += 1
        if count == max_iter:
            return default
    return number


def _pointwise(fn):  # noqa: ANN001, ANN202
    def ref(xs: list[float], ys: list[float], v: Viewport) -> list[tuple[float, float]]:
        n = len(xs)
        return [fn(xs[i], ys[i], i, n, v) for i in range(n)]

    return ref


def _stretch_x(xs, ys, v):  # noqa: ANN001, ANN202
    lo, hi = min(xs), max(xs)
    return [(_map(x, lo, hi, -v.half_width, v.half_width), y) for x, y in zip(xs, ys)]


def _fit_viewport(xs, ys, v):  # noqa: ANN001, ANN202
    lx, hx, ly, hy = min(xs), max(xs), min(ys), max(ys)
    return [
        (
            _map(x, lx, hx, -v.half_width, v.half_width),
            _map(y, ly, hy, -v.half_height, v.half_height),
        )
        for x, y in zip(xs, ys)
    ]


def _split_columns(xs, ys, v):  # noqa: ANN001, ANN202
    mid = len(xs) // 2
    return [(-v.half_width if i < mid else v.half_width, xs[i]) for i in range(len(xs))]


def _twin_rings(xs, ys, v):  # noqa: ANN001, ANN202
    size = min(v.half_width, v.half_height)
    mid = len(xs) // 2
    out = []
    for i in range(len(xs)):
        c = size if i < mid else -size
        out.append((c + math.cos(i) * 100, c + math.sin(i) * 100))
    return out


def _tangent_field(xs, ys, v):  # noqa: ANN001, ANN202
    n = len(xs)
    out = []
    for i in range(n):
        z = i - n
        x = min(max(math.tan(z) * v.half_height, -v.width), v.width)
        y = min(max(math.cos(z) * v.half_height, -v.height), v.height)
        out.append((x, y))
    return out


def _wrapped_spiral(xs, ys, v):  # noqa: ANN001, ANN202
    n = len(xs)
    size = min(v.half_width, v.half_height)
    out = []
    for i in range(n):
        d = _wrap(i, size, n * 2, 1)
        out.append((math.cos(i) * d, math.sin(i) * d))
    return out


def _sine_curve(xs, ys, v):  # noqa: ANN001, ANN202
    n = len(xs)
    size = max(v.half_width, v.half_height)
    out = []
    for i in range(n):
        x = math.sin(_rad(i - n)) * size
        out.append((x, x * math.cos(_rad(x))))
    return out


def _lissajous(xs, ys, v):  # noqa: ANN001, ANN202
    n = len(xs)
    out = []
    for i in range(n):
        z = i - n
        x = math.sin(z) * v.half_width
        out.append((x, x * math.cos(z)))
    return out


def _sqrt_curve(xs, ys, v):  # noqa: ANN001, ANN202
    n = len(xs)
    out = []
    for i in range(n):
        x = math.sin(_rad(i - n)) * v.half_width
        out.append((x, math.sqrt(abs(x))))
    return out


def _polar_bloom(x, y, i, n, v):  # noqa: ANN001, ANN202
    r = math.hypot(x, y) * 2
    f = math.sin(i) * n
    return (r * math.cos(_rad(f)), r * math.sin(_rad(f)))


def _polar_petals(x, y, i, n, v):  # noqa: ANN001, ANN202
    f = math.sin(i) * n
    r = math.hypot(f - x, f - y) / 50
    return (r * math.cos(_rad(f)), r * math.sin(_rad(f)))


def _polar_sway(x, y, i, n, v):  # noqa: ANN001, ANN202
    f = math.sin(x + y) * n
    return (x * math.cos(_rad(f)), y * math.sin(_rad(f)))


def _polar_shear(x, y, i, n, v):  # noqa: ANN001, ANN202
    f = math.sin(x + y) * n
    return (x * math.cos(_rad(f)) + y, y * math.sin(_rad(f)) + x)


def _aspect_funnel(x, y, i, n, v):  # noqa: ANN001, ANN202
    d = math.hypot(x, y)
    return (
        (((x * v.height) / v.width) * d) / 20,
        (((y * v.width) / v.height) * d) / 20 - 500,
    )


def _diagonal_orbit(x, y, i, n, v):  # noqa: ANN001, ANN202
    r = min(v.half_width, v.half_height)
    cx = _map(i, 1, n, -v.half_width, v.half_width)
    cy = _map(i, 1, n, -v.half_height, v.half_height)
    return (cx + math.cos(i) * r, cy + math.sin(i) * r)


REFERENCE = {
    "ring": _pointwise(
        lambda x, y, i, n, v: (
            math.cos(i) * min(v.half_width, v.half_height),
            math.sin(i) * min(v.half_width, v.half_height),
        )
    ),
    "spiral": _pointwise(lambda x, y, i, n, v: (math.cos(i) * i, math.sin(i) * i)),
    "zoom": _pointwise(lambda x, y, i, n, v: (x * 100, y * 100)),
    "cosine_scramble": _pointwise(lambda x, y, i, n, v: (math.cos(x) * i, math.sin(y) * i)),
    "corner": _pointwise(lambda x, y, i, n, v: (v.half_width, v.half_height)),
    "transpose": _pointwise(lambda x, y, i, n, v: (y, x)),
    "transpose_double": _pointwise(lambda x, y, i, n, v: (y * 2, x * 2)),
    "ellipse": _pointwise(
        lambda x, y, i, n, v: (math.sin(_rad(i)) * v.half_width, math.cos(_rad(i)) * v.half_height)
    ),
    "diagonal": _pointwise(lambda x, y, i, n, v: (i - n / 2, i - n / 2)),
    "sine_wave": _pointwise(
        lambda x, y, i, n, v: ((i - n / 2) / 50, math.sin(_rad((i - n / 2) / 50)) * v.half_height)
    ),
    "diagonal_compact": _pointwise(lambda x, y, i, n, v: ((i - n / 2) / 20, (i - n / 2) / 20)),
    "shift_corner": _pointwise(
        lambda x, y, i, n, v: (
            x - min(v.half_width, v.half_height),
            y - min(v.half_width, v.half_height),
        )
    ),
    "sine_lift": _pointwise(
        lambda x, y, i, n, v: (x, y - abs(math.sin(_rad(y)) * v.half_height))
    ),
    "floor_mirror": _pointwise(lambda x, y, i, n, v: (-x, -v.half_height)),
    "offset_ellipse": _pointwise(
        lambda x, y, i, n, v: (
            v.half_width + math.sin(_rad(i)) * v.half_height,
            v.half_height + math.cos(_rad(i)) * v.half_height,
        )
    ),
    "wide_ellipse": _pointwise(
        lambda x, y, i, n, v: (
            v.width / 2 + math.sin(_rad(i)) * v.width,
            v.height / 2 + math.cos(_rad(i)) * v.height,
        )
    ),
    "slow_spiral": _pointwise(
        lambda x, y, i, n, v: ((math.cos(_rad(i)) * i) / 20, (math.sin(_rad(i)) * i) / 20)
    ),
    "polar_bloom": _pointwise(_polar_bloom),
    "polar_petals": _pointwise(_polar_petals),
    "polar_sway": _pointwise(_polar_sway),
    "polar_shear": _pointwise(_polar_shear),
    "aspect_stretch": _pointwise(
        lambda x, y, i, n, v: (((x * v.height) / v.width) * 4, ((y * v.width) / v.height) * 4)
    ),
    "aspect_funnel": _pointwise(_aspect_funnel),
    "flip_vertical": _pointwise(lambda x, y, i, n, v: (x, -y)),
    "sine_drop": _pointwise(lambda x, y, i, n, v: (x, y + abs(math.sin(i)) * -v.half_height)),
    "column_stack": _pointwise(lambda x, y, i, n, v: (x, i / 50)),
    "diagonal_line": _pointwise(lambda x, y, i, n, v: (i / 50, i / 50)),
    "wrapped_spiral": _wrapped_spiral,
    "twisted_line": _pointwise(
        lambda x, y, i, n, v: (
            (i - n / 2) / 50,
            math.cos((i - n / 2) / 50) * ((i - n / 2) / 50) - math.sin((i - n / 2) / 50) * x,
        )
    ),
    "twin_rings": _twin_rings,
    "heart": _pointwise(
        lambda x, y, i, n, v: (
            math.cos(_rad(i)) * (min(v.half_width, v.half_height) / 1.2),
            (math.sin(_rad(i)) + abs(math.cos(_rad(i))) * -0.5)
            * (min(v.half_width, v.half_height) / 1.2),
        )
    ),
    "tangent_field": _tangent_field,
    "sine_curve": _sine_curve,
    "lissajous": _lissajous,
    "sqrt_curve": _sqrt_curve,
    "orbit_offset": _pointwise(
        lambda x, y, i, n, v: (x + math.cos(i) * 150, y + math.sin(i) * 150)
    ),
    "stretch_x": _stretch_x,
    "fit_viewport": _fit_viewport,
    "split_columns": _split_columns,
    "diagonal_orbit": _pointwise(_diagonal_orbit),
    "sine_lift_degrees": _pointwise(
        lambda x, y, i, n, v: (x, y + abs(math.sin(_rad(i))) * -v.half_height)
    ),
    "alternating_rows": _pointwise(
        lambda x, y, i, n, v: (x, v.half_height if i % 2 == 0 else -v.half_height)
    ),
}

RANDOM_OR_REORDERING = {
    "random_scatter",
    "edge_midpoints",
    "transpose_quadrants",
    "concentric_rings",
    "circle_sweep",
    "puzzle",
    "reverse",
}


def _source(n: int = 240) -> DotSet:
    gen = np.random.default_rng(2024)
    return DotSet(gen.uniform(-200.0, 200.0, size=(n, 2)))


def test_reference_table_covers_every_deterministic_entry() -> None:
    assert set(REFERENCE) | RANDOM_OR_REORDERING == set(EFFECT_ORDER)
    assert not set(REFERENCE) & RANDOM_OR_REORDERING
    assert len(REFERENCE) == 42


@pytest.mark.parametrize("view", VIEWS, ids=lambda v: f"{v.width}x{v.height}")
@pytest.mark.parametrize("name", sorted(REFERENCE))
def test_effect_matches_scalar_formula(name: str, view: Viewport) -> None:
    src = _source()
    out = get_effect(name)(src, view, np.random.default_rng(0))
    expected = np.asarray(
        REFERENCE[name](src.xs.tolist(), src.ys.tolist(), view), dtype=np.float64
    )
    assert out.coords.shape == expected.shape
    assert np.allclose(out.coords, expected, rtol=1e-9, atol=1e-9)


def test_wrapped_spiral_wraps_on_small_viewport() -> None:
    # 半径上限 45 を超える index は巻き戻される
    view = Viewport(150, 90)
    out = get_effect("wrapped_spiral")(_source(), view, np.random.default_rng(0))
    r = np.hypot(out.xs, out.ys)
    assert np.all(r <= 45 + 1e-9)
    assert r.max() > 40
