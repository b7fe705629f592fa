"""
どこで: `engine.render.renderer`。
何を: 1 フレームの描画手順（背景→前フック→アニメーション→ドット描画→後フック）。
なぜ: 状態（`DotsState`）と描画面（`Surface`）を受け取る単一の入口に集約し、
      ホストのループからは `render(surface)` を呼ぶだけにするため。
"""

from __future__ import annotations

import logging

from engine.core.state import DotsState

from .surface import Surface, scoped

logger = logging.getLogger(__name__)


class DotRenderer:
    """`DotsState` を描画面へ描く。"""

    def __init__(self, state: DotsState) -> None:
        self.state = state
        self._frames = 0

    @property
    def frame_count(self) -> int:
        return self._frames

    def fill_background(self, surface: Surface) -> None:
        w, h = surface.size
        with scoped(surface):
            surface.set_fill(self.state.style.background)
            surface.fill_rect(0, 0, w, h)

    def draw_dots(self, surface: Surface) -> bool:
        """ライブ点を原点=画面中央で描く。空集合なら何もしない。"""
        live = self.state.live
        if live.is_empty():
            return False
        w, h = surface.size
        with scoped(surface):
            surface.set_fill(self.state.style.color)
            surface.translate(w / 2, h / 2)
            surface.fill_unit_squares(live.coords)
        return True

    def render(self, surface: Surface) -> None:
        """1 フレーム分を描画する。"""
        surface.resize()
        self.fill_background(surface)

        if self.state.pre_draw is not None:
            self.state.pre_draw()

        self.state.step()
        self.draw_dots(surface)

        if self.state.post_draw is not None:
            self.state.post_draw()

        self._frames += 1


__all__ = ["DotRenderer"]
