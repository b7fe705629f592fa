from __future__ import annotations

import numpy as np
import pytest

from api import Dots, MorphMode
from api.config import DotsConfig
from effects.catalog import effect_count
from engine.render import ArraySurface


@pytest.fixture()
def dots(ab_font, config: DotsConfig) -> Dots:
    d = Dots(config=config, font=ab_font)
    d.add_text("ab", size=1)
    return d


def test_add_text_appends(dots: Dots) -> None:
    assert len(dots.source) == len(dots.live) == 2
    dots.add_text("a", size=1)
    dots.add_dot(7, 8)
    assert len(dots.source) == 4
    assert dots.source.coords[-1].tolist() == [7.0, 8.0]


def test_clear_dots_is_idempotent(dots: Dots) -> None:
    dots.clear_dots()
    dots.clear_dots()
    assert len(dots.source) == len(dots.live) == 0


def test_previous_next_saturate(dots: Dots) -> None:
    dots.set_effect(0)
    dots.apply_previous_effect()
    assert dots.effect == 0
    dots.set_effect(effect_count() - 1)
    dots.apply_next_effect()
    assert dots.effect == effect_count() - 1
    dots.set_effect(-2)
    assert dots.effect == effect_count() - 2


def test_random_effect_within_range(dots: Dots) -> None:
    for _ in range(200):
        assert dots.apply_random_effect()
        assert 0 <= dots.effect < effect_count()


def test_apply_effect_index_does_not_move_cursor(dots: Dots) -> None:
    dots.set_effect(3)
    assert dots.apply_effect(6)
    assert dots.effect == 3
    assert np.allclose(dots.target.coords, [[400.0, 300.0], [400.0, 300.0]])


def test_out_of_range_apply_clears_target_only(dots: Dots) -> None:
    dots.apply_effect(6)
    assert len(dots.target) == 2
    assert not dots.apply_effect(effect_count())
    assert len(dots.target) == 0
    with pytest.raises(IndexError):
        dots.set_effect(effect_count())


def test_negative_index_counts_from_end(dots: Dots) -> None:
    assert dots.apply_effect(-1)  # alternating_rows
    assert dots.target.ys.tolist() == [300.0, -300.0]


def test_speed_controls(dots: Dots) -> None:
    dots.set_speed(1)
    dots.decrease_speed()
    dots.decrease_speed()
    assert dots.speed == 0
    dots.increase_speed()
    assert dots.speed == 1


def test_advance_morphs_live_into_target(dots: Dots) -> None:
    dots.set_speed(50)
    dots.apply_effect(6)  # corner
    surface = ArraySurface(800, 600)
    for _ in range(20):
        dots.advance(surface)
    assert np.allclose(dots.live.coords, dots.target.coords)
    assert dots.frame_count == 20
    # 右下隅 (400, 300) は画面外なので背景のみ
    assert surface.count_color(dots.color) == 0


def test_advance_follows_surface_size(dots: Dots) -> None:
    surface = ArraySurface(200, 100)
    dots.advance(surface)
    assert (dots.viewport.width, dots.viewport.height) == (200, 100)
    dots.apply_effect(6)
    assert np.allclose(dots.target.coords[0], [100.0, 50.0])


def test_speed_zero_keeps_live_still(dots: Dots) -> None:
    dots.set_speed(0)
    dots.apply_effect(0)
    before = dots.live.coords.copy()
    surface = ArraySurface(50, 50)
    for _ in range(5):
        dots.advance(surface)
    assert np.array_equal(dots.live.coords, before)


def test_gather_mode_converges_back_to_text(ab_font) -> None:
    d = Dots(config=DotsConfig(seed=1, mode=MorphMode.GATHER, speed=1000), font=ab_font)
    d.add_text("ab", size=1)
    d.apply_effect(6)
    assert np.allclose(d.live.coords, d.target.coords)
    d.advance(ArraySurface(800, 600))
    assert np.allclose(d.live.coords, d.source.coords)


def test_hooks_called_each_frame(dots: Dots) -> None:
    calls: list[str] = []
    dots.on_pre_draw(lambda: calls.append("pre"))
    dots.on_post_draw(lambda: calls.append("post"))
    surface = ArraySurface(10, 10)
    dots.advance(surface)
    dots.advance(surface)
    assert calls == ["pre", "post", "pre", "post"]


def test_seeded_random_is_reproducible(ab_font) -> None:
    picks = []
    for _ in range(2):
        d = Dots(config=DotsConfig(), font=ab_font, seed=11)
        d.add_text("ab", size=1)
        seq = []
        for _ in range(10):
            d.apply_random_effect()
            seq.append(d.effect)
        picks.append(seq)
    assert picks[0] == picks[1]


def test_default_font_is_loaded_lazily(config: DotsConfig) -> None:
    d = Dots(config=config)
    d.add_text("hi")
    assert len(d.source) > 0
    assert d.font.alphabet.startswith("abc")
