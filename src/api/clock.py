"""
どこで: `api.clock`。
何を: 現在時刻 `HH:MM` をドットで表示し、分が変わるたびにランダムエフェクトで組み替える Tickable。
なぜ: ファサードの操作だけで書けるスケッチの例として、ランナーの `--clock` から使うため。
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from .dots import Dots

logger = logging.getLogger(__name__)


def format_clock(now: datetime) -> str:
    return now.strftime("%H:%M")


class ClockText:
    """`FrameClock` から毎フレーム呼ばれ、表示中の時刻が古ければ描き直す。"""

    def __init__(self, dots: Dots, *, now: Callable[[], datetime] = datetime.now) -> None:
        self.dots = dots
        self._now = now
        self.text: str | None = None

    def tick(self, dt: float) -> None:
        current = format_clock(self._now())
        if current == self.text:
            return
        self.text = current
        self.dots.clear_dots()
        self.dots.add_text(current)
        self.dots.apply_random_effect()
        logger.debug("clock %s -> effect %s", current, self.dots.effect_name)


__all__ = ["ClockText", "format_clock"]
