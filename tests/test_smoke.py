from __future__ import annotations

import numpy as np
import pytest

from api import Dots
from api.config import DotsConfig
from effects.catalog import EFFECT_ORDER
from engine.core.animation import is_settled
from engine.render import ArraySurface


@pytest.mark.smoke
def test_every_effect_morphs_text_and_settles() -> None:
    dots = Dots(config=DotsConfig(seed=1, speed=400, width=320, height=240))
    dots.add_text("dots 42!", size=3)
    surface = ArraySurface(320, 240)
    for index, name in enumerate(EFFECT_ORDER):
        dots.apply_effect(index)
        if len(dots.target) != len(dots.live):
            continue  # 短くなったピース分割は止まったまま
        for _ in range(400):
            dots.advance(surface)
            if is_settled(dots.live, dots.target):
                break
        assert is_settled(dots.live, dots.target), name
        assert np.all(np.isfinite(dots.live.coords))
