from __future__ import annotations

import pytest

from api.config import DotsConfig, TextOptions
from api.runner import apply_command, run_dots, scroll_command


def test_run_dots_init_only_skips_window() -> None:
    dots = run_dots("hi", effect=-1, speed=2, size=(320, 200), config=DotsConfig(seed=1), init_only=True)
    assert dots is not None
    assert dots.effect == 48
    assert dots.speed == 2
    assert (dots.viewport.width, dots.viewport.height) == (320, 200)
    assert len(dots.target) == len(dots.source) > 0


def test_run_dots_clock_mode_shows_time() -> None:
    dots = run_dots(clock=True, config=DotsConfig(seed=2), init_only=True)
    assert dots is not None
    assert len(dots.source) > 0


def test_commands(ab_font) -> None:
    from api import Dots

    d = Dots(config=DotsConfig(seed=3, text=TextOptions(size=1)), font=ab_font)
    d.add_text("ab")
    assert len(d.source) == 2
    assert apply_command(d, "apply")
    assert apply_command(d, "next") and d.effect == 1
    assert apply_command(d, "previous") and d.effect == 0
    assert apply_command(d, "faster") and d.speed == 6
    d.set_speed(0)
    assert not apply_command(d, "slower")
    assert not apply_command(d, "paste", clipboard="")
    assert apply_command(d, "paste", clipboard="bab")
    # 貼り付けは既存の点を置き換える（追記しない）
    assert len(d.source) == 3
    assert apply_command(d, "random")
    with pytest.raises(ValueError):
        apply_command(d, "explode")


def test_scroll_direction() -> None:
    assert scroll_command(1.0) == "next"
    assert scroll_command(-2.0) == "previous"
    assert scroll_command(0.0) is None
