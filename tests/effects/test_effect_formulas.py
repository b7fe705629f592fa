from __future__ import annotations

import numpy as np

from effects.registry import Viewport, get_effect
from engine.core.dots import DotSet

VIEW = Viewport(800, 600)


def _run(name: str, src: DotSet, rng=None) -> DotSet:  # noqa: ANN001
    return get_effect(name)(src, VIEW, rng if rng is not None else np.random.default_rng(0))


def _src(n: int = 6) -> DotSet:
    i = np.arange(n, dtype=np.float64)
    return DotSet.from_xy(i * 10 - 20, i * 3 + 1)


def test_ring_uses_min_half_extent() -> None:
    out = _run("ring", _src())
    assert np.allclose(np.hypot(out.xs, out.ys), 300.0)
    assert np.allclose(out.coords[0], [300.0, 0.0])


def test_zoom_transpose_flip() -> None:
    src = _src()
    assert np.allclose(_run("zoom", src).coords, src.coords * 100)
    assert np.allclose(_run("transpose", src).coords, src.coords[:, ::-1])
    assert np.allclose(_run("transpose_double", src).coords, src.coords[:, ::-1] * 2)
    assert np.allclose(_run("flip_vertical", src).coords, src.coords * [1, -1])


def test_corner_and_shift_corner() -> None:
    src = _src()
    assert np.allclose(_run("corner", src).coords, [[400.0, 300.0]] * len(src))
    assert np.allclose(_run("shift_corner", src).coords, src.coords - 300.0)


def test_floor_mirror_collapses_to_top_edge() -> None:
    src = _src()
    out = _run("floor_mirror", src)
    assert np.allclose(out.xs, -src.xs)
    assert np.allclose(out.ys, -300.0)


def test_reverse_mirrors_index_order() -> None:
    src = _src(5)
    out = _run("reverse", src)
    assert np.allclose(out.coords, src.coords[::-1])
    assert len(_run("reverse", DotSet.from_points([(1, 2)]))) == 1


def test_random_scatter_stays_in_viewport_integers() -> None:
    out = _run("random_scatter", _src(500))
    assert np.all(np.abs(out.xs) <= 400) and np.all(np.abs(out.ys) <= 300)
    assert np.allclose(out.coords, np.round(out.coords))


def test_edge_midpoints_only_four_points() -> None:
    out = _run("edge_midpoints", _src(400))
    allowed = {(400.0, 0.0), (-400.0, 0.0), (0.0, -300.0), (0.0, 300.0)}
    assert set(map(tuple, out.coords.tolist())) <= allowed


def test_concentric_rings_radii() -> None:
    out = _run("concentric_rings", _src(400))
    r = np.round(np.hypot(out.xs, out.ys), 6)
    assert set(r.tolist()) <= {400.0, 200.0, 100.0, 50.0}


def test_transpose_quadrants_offsets() -> None:
    src = _src(300)
    out = _run("transpose_quadrants", src)
    delta = np.abs(out.coords - src.coords[:, ::-1])
    assert np.allclose(delta, 400.0)


def test_diagonal_and_lines() -> None:
    src = _src(4)
    assert np.allclose(_run("diagonal", src).coords, [[-2, -2], [-1, -1], [0, 0], [1, 1]])
    assert np.allclose(_run("diagonal_compact", src).xs, [-0.1, -0.05, 0.0, 0.05])
    assert np.allclose(_run("diagonal_line", src).coords[:, 0], [0, 0.02, 0.04, 0.06])
    col = _run("column_stack", src)
    assert np.allclose(col.xs, src.xs) and np.allclose(col.ys, [0, 0.02, 0.04, 0.06])


def test_alternating_rows_and_split_columns() -> None:
    src = _src(5)
    rows = _run("alternating_rows", src)
    assert rows.ys.tolist() == [300.0, -300.0, 300.0, -300.0, 300.0]
    cols = _run("split_columns", src)
    assert cols.xs.tolist() == [-400.0, -400.0, 400.0, 400.0, 400.0]
    assert np.allclose(cols.ys, src.xs)


def test_twin_rings_split_at_half() -> None:
    out = _run("twin_rings", _src(6))
    left = np.hypot(out.xs[:3] - 300, out.ys[:3] - 300)
    right = np.hypot(out.xs[3:] + 300, out.ys[3:] + 300)
    assert np.allclose(left, 100.0) and np.allclose(right, 100.0)


def test_stretch_and_fit_viewport() -> None:
    src = _src()
    out = _run("fit_viewport", src)
    assert np.isclose(out.xs.min(), -400) and np.isclose(out.xs.max(), 400)
    assert np.isclose(out.ys.min(), -300) and np.isclose(out.ys.max(), 300)
    sx = _run("stretch_x", src)
    assert np.isclose(sx.xs.min(), -400) and np.allclose(sx.ys, src.ys)


def test_fit_viewport_degenerate_range_maps_to_center() -> None:
    src = DotSet.from_points([(5.0, 5.0), (5.0, 5.0)])
    assert np.allclose(_run("fit_viewport", src).coords, 0.0)


def test_tangent_field_is_clipped() -> None:
    out = _run("tangent_field", _src(2000))
    assert np.all(np.abs(out.xs) <= 800) and np.all(np.abs(out.ys) <= 600)


def test_wrapped_spiral_radius_stays_in_range() -> None:
    out = _run("wrapped_spiral", _src(2000))
    r = np.hypot(out.xs, out.ys)
    assert np.all(r <= 300 + 1e-9)


def test_circle_sweep_on_circle() -> None:
    out = _run("circle_sweep", _src(50))
    assert np.allclose(np.hypot(out.xs, out.ys), 300.0)


def test_puzzle_pieces_share_offsets() -> None:
    src = _src(40)
    out = _run("puzzle", src, np.random.default_rng(5))
    assert 0 < len(out) <= len(src)
    delta = out.coords - src.coords[: len(out)]
    # 連続する点はピース単位で同じずれを持つ
    uniq = np.unique(np.round(delta, 9), axis=0)
    assert 1 <= len(uniq) <= 10


def test_puzzle_tiny_source_may_be_empty() -> None:
    # 1 点 / 3〜10 ピース → ピースの大きさ 0 で出力なし
    out = _run("puzzle", DotSet.from_points([(1.0, 1.0)]))
    assert len(out) == 0


def test_heart_is_bounded() -> None:
    out = _run("heart", _src(360))
    assert np.all(np.abs(out.coords) <= 300 / 1.2 * 1.5 + 1e-9)
