"""共通フィクスチャ。

- 乱数シード固定
- 小さなフォント/ビューポート試料
"""

from __future__ import annotations

import numpy as np
import pytest

from api.config import DotsConfig
from effects import Viewport
from font.bitmap_font import BitmapFont, load_default_font, load_font
from tests._utils.fonts import make_font_image


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture()
def ab_font() -> BitmapFont:
    # 'a' は (0,0)、'b' は (1,1) がインクの 2x2 セル（区切り列込みで幅 5）
    img = make_font_image(5, 2, [(0, 0), (4, 1)])
    return load_font(img, "ab", 2, 2)


@pytest.fixture(scope="session")
def default_font() -> BitmapFont:
    return load_default_font()


@pytest.fixture()
def view() -> Viewport:
    return Viewport(800, 600)


@pytest.fixture()
def config() -> DotsConfig:
    return DotsConfig(seed=7)
