"""
どこで: `engine.core.state`。
何を: ソース/ターゲット/ライブの 3 集合・描画スタイル・描画フックを束ねる `DotsState`。
なぜ: 元来プロセス全体で共有されていた可変状態を明示的なコンテキストに集約し、
      描画/アニメーション段へ参照渡しすることで複数インスタンスを独立にテスト可能にするため。

集合の役割:
- `source`: テキスト配置で作られる「素の」位置。エフェクトの唯一の入力。
- `target`: 直近 1 回のエフェクト出力。新しいエフェクト適用前に必ず空にする。
- `live`: 現在位置。毎フレーム `goal` へ向けて就地更新される。

`goal` はエフェクト適用時点のモーフ方向で決まる（SCATTER: target / GATHER: source）。
適用後に `style.mode` を変えても、移動中の点の行き先は次の `set_target` まで変わらない。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from common.types import DrawHook

from .animation import advance
from .dots import DotSet
from .style import MorphMode, RenderStyle

logger = logging.getLogger(__name__)


@dataclass
class DotsState:
    source: DotSet = field(default_factory=DotSet)
    target: DotSet = field(default_factory=DotSet)
    live: DotSet = field(default_factory=DotSet)
    style: RenderStyle = field(default_factory=RenderStyle)
    pre_draw: DrawHook | None = None
    post_draw: DrawHook | None = None
    applied_mode: MorphMode = MorphMode.SCATTER

    # ---- ドット集合 ----
    def add_dots(self, dots: DotSet) -> None:
        """ソースとライブの両方に追記する（置換ではない）。"""
        if dots.is_empty():
            return
        self.source = self.source.concat(dots)
        self.live = self.live.concat(dots)

    def clear_dots(self) -> None:
        self.source = DotSet()
        self.live = DotSet()

    def clear_target(self) -> None:
        self.target = DotSet()

    def set_target(self, dots: DotSet) -> None:
        """エフェクト出力を反映する。

        GATHER ではライブ点をエフェクト配置へ置き直し、ソースへ集まらせる。
        """
        self.target = dots
        self.applied_mode = self.style.mode
        if self.applied_mode is MorphMode.GATHER:
            self.live = dots.copy()

    @property
    def goal(self) -> DotSet:
        if self.applied_mode is MorphMode.GATHER:
            return self.source
        return self.target

    # ---- フレーム ----
    def step(self) -> bool:
        """アニメーションを 1 フレーム進める（no-op ガード付き）。"""
        return advance(self.live, self.goal, self.style.speed)

    # ---- フック ----
    def on_pre_draw(self, callback: DrawHook | None = None) -> None:
        self.pre_draw = callback

    def on_post_draw(self, callback: DrawHook | None = None) -> None:
        self.post_draw = callback

    def clear_callbacks(self) -> None:
        self.pre_draw = None
        self.post_draw = None


__all__ = ["DotsState"]
