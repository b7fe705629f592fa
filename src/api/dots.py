"""
どこで: `api.dots`（高レベル公開ファサード）。
何を: テキスト配置・エフェクト選択/適用・速度/色設定・描画フックを 1 つのオブジェクト `Dots` にまとめる。
なぜ: 状態（`DotsState`）・フォント・乱数源・ビューポートを明示的に所有し、スクリプト/ランナー/
      テストが同じ操作語彙（add_text → apply_effect → advance）で扱えるようにするため。

使用例:
    from api import Dots
    from engine.render import ArraySurface

    dots = Dots(seed=1)
    dots.add_text("hello")
    dots.apply_effect(0)          # ring
    surface = ArraySurface(800, 600)
    for _ in range(60):
        dots.advance(surface)

エフェクト選択の規約:
- `apply_effect(index)` はカーソル（`effect`）を変えずに指定 index を適用する。
  省略時は現在のカーソル。負の index は末尾から数え、範囲外は何もしない。
- `apply_previous_effect` / `apply_next_effect` は両端で飽和する。
- `apply_random_effect` は一様に選んだ index をカーソルへ設定してから適用する。
- いずれも適用前にターゲット集合を空にし、ちょうど 1 つのエフェクトを呼ぶ。
"""

from __future__ import annotations

import logging

import numpy as np

from common.types import RGB, DrawHook
from effects import Viewport, effect_count, run_effect
from effects.catalog import effect_name, normalize_index
from engine.core.dots import DotSet
from engine.core.state import DotsState
from engine.core.style import MorphMode
from engine.render.renderer import DotRenderer
from engine.render.surface import Surface
from font.bitmap_font import BitmapFont, load_default_font
from font.layout import text_to_dots
from util.numeric import random_int

from .config import DotsConfig, resolve_config

logger = logging.getLogger(__name__)


class Dots:
    """ドット集合のモーフィングを操作するファサード。

    Parameters
    ----------
    config : DotsConfig | None
        実行設定。None で `resolve_config()`（YAML + 環境変数）を使う。
    font : BitmapFont | None
        配置に使うフォント。None で設定に従い初回の `add_text` 時に読み込む。
    seed : int | None
        乱数シード。None で設定値（それも無ければ OS エントロピー）。
    rng : numpy.random.Generator | None
        乱数源を直接注入する場合（`seed` より優先）。
    """

    def __init__(
        self,
        *,
        config: DotsConfig | None = None,
        font: BitmapFont | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else resolve_config()
        self._font = font
        if rng is None:
            rng = np.random.default_rng(seed if seed is not None else self.config.seed)
        self.rng = rng
        self.viewport = Viewport(self.config.width, self.config.height)

        self.state = DotsState()
        style = self.state.style
        style.set_background(*self.config.background)
        style.set_color(*self.config.color)
        style.set_speed(self.config.speed)
        style.mode = self.config.mode
        style.effect = normalize_index(self.config.effect) or 0
        self.renderer = DotRenderer(self.state)

    # ---- フォント/配置 ----
    @property
    def font(self) -> BitmapFont:
        if self._font is None:
            opts = self.config.font
            self._font = load_default_font(
                opts.path, alphabet=opts.alphabet, width=opts.width, height=opts.height
            )
        return self._font

    def add_text(
        self,
        text: str,
        *,
        x: float = 0,
        y: float = 0,
        size: float | None = None,
        offset: float | None = None,
        step: float | None = None,
        font: BitmapFont | None = None,
    ) -> DotSet:
        """文字列を配置してソース/ライブ集合へ追記し、追加した点を返す。"""
        opts = self.config.text
        dots = text_to_dots(
            text,
            font if font is not None else self.font,
            x=x,
            y=y,
            size=opts.size if size is None else size,
            offset=opts.offset if offset is None else offset,
            step=opts.step if step is None else step,
        )
        self.state.add_dots(dots)
        logger.debug("add_text %r -> %d dots (total %d)", text, len(dots), len(self.state.source))
        return dots

    def add_dot(self, x: float, y: float) -> None:
        self.state.add_dots(DotSet.from_points([(x, y)]))

    def clear_dots(self) -> None:
        """ソース/ライブ集合を空にする（何度呼んでも同じ）。"""
        self.state.clear_dots()

    def clear_effect_dots(self) -> None:
        self.state.clear_target()

    @property
    def source(self) -> DotSet:
        return self.state.source

    @property
    def target(self) -> DotSet:
        return self.state.target

    @property
    def live(self) -> DotSet:
        return self.state.live

    # ---- エフェクト選択 ----
    @property
    def effect(self) -> int:
        return self.state.style.effect

    @property
    def effect_name(self) -> str:
        return effect_name(self.effect)

    def set_effect(self, index: int) -> None:
        """カーソルを設定する（負値は末尾から、範囲外は `IndexError`）。"""
        resolved = normalize_index(int(index))
        if resolved is None:
            raise IndexError(f"effect index out of range: {index} (count={effect_count()})")
        self.state.style.effect = resolved

    def previous_effect(self) -> None:
        if self.state.style.effect > 0:
            self.state.style.effect -= 1

    def next_effect(self) -> None:
        if self.state.style.effect < effect_count() - 1:
            self.state.style.effect += 1

    def _apply(self, index: int) -> bool:
        self.state.clear_target()
        resolved = normalize_index(index)
        if resolved is None:
            logger.debug("effect index %d out of range; nothing applied", index)
            return False
        out = run_effect(resolved, self.state.source, self.viewport, self.rng)
        self.state.set_target(out)
        return True

    def apply_effect(self, index: int | None = None) -> bool:
        """指定（省略時は現在）の index のエフェクトを適用する。適用したら True。"""
        return self._apply(self.effect if index is None else int(index))

    def apply_random_effect(self) -> bool:
        self.state.style.effect = random_int(self.rng, 0, effect_count() - 1)
        return self._apply(self.effect)

    def apply_previous_effect(self) -> bool:
        self.previous_effect()
        return self._apply(self.effect)

    def apply_next_effect(self) -> bool:
        self.next_effect()
        return self._apply(self.effect)

    # ---- スタイル ----
    @property
    def speed(self) -> int:
        return self.state.style.speed

    def set_speed(self, speed: int) -> None:
        self.state.style.set_speed(speed)

    def increase_speed(self) -> None:
        self.state.style.increase_speed()

    def decrease_speed(self) -> None:
        self.state.style.decrease_speed()

    @property
    def background(self) -> RGB:
        return self.state.style.background

    def set_background(self, r: int, g: int, b: int) -> None:
        self.state.style.set_background(r, g, b)

    @property
    def color(self) -> RGB:
        return self.state.style.color

    def set_color(self, r: int, g: int, b: int) -> None:
        self.state.style.set_color(r, g, b)

    @property
    def mode(self) -> MorphMode:
        return self.state.style.mode

    def set_mode(self, mode: str | MorphMode) -> None:
        """モーフ方向を切り替える（次のエフェクト適用から反映、移動中の点の行き先は変えない）。"""
        self.state.style.mode = MorphMode.parse(mode)

    # ---- フック ----
    def on_pre_draw(self, callback: DrawHook | None = None) -> None:
        self.state.on_pre_draw(callback)

    def on_post_draw(self, callback: DrawHook | None = None) -> None:
        self.state.on_post_draw(callback)

    def clear_callbacks(self) -> None:
        self.state.clear_callbacks()

    # ---- フレーム ----
    def set_viewport(self, width: float, height: float) -> None:
        self.viewport = Viewport(width, height)

    def advance(self, surface: Surface) -> None:
        """1 フレーム進めて描画する（ホストのループから毎フレーム呼ぶ入口）。"""
        surface.resize()
        w, h = surface.size
        if (w, h) != (self.viewport.width, self.viewport.height):
            self.viewport = Viewport(w, h)
        self.renderer.render(surface)

    @property
    def frame_count(self) -> int:
        return self.renderer.frame_count


__all__ = ["Dots"]
