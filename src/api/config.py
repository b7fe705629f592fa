"""
どこで: `api.config`（純粋関数/小ヘルパ）。
何を: YAML 設定（`util.utils.load_config`）と `DOTS_*` 環境変数から実行設定 `DotsConfig` を解決する。
なぜ: ランナー/CLI/ファサードが同じ既定値と優先順位（引数 > 環境変数 > YAML > 組込み既定）を共有するため。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from common.settings import get as _get_settings
from common.types import RGB
from engine.core.style import DEFAULT_SPEED, MorphMode
from font.bitmap_font import DEFAULT_ALPHABET, DEFAULT_CELL_HEIGHT, DEFAULT_CELL_WIDTH
from util.color import normalize_rgb
from util.utils import config_section, load_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FontOptions:
    path: str | None = None
    alphabet: str = DEFAULT_ALPHABET
    width: int = DEFAULT_CELL_WIDTH
    height: int = DEFAULT_CELL_HEIGHT


@dataclass(frozen=True)
class TextOptions:
    default: str = "checking"
    size: float = 15
    offset: float = 0
    step: float = 1


@dataclass(frozen=True)
class DotsConfig:
    width: int = 800
    height: int = 600
    fps: int = 60
    background: RGB = (0, 0, 0)
    color: RGB = (255, 255, 255)
    speed: int = DEFAULT_SPEED
    mode: MorphMode = MorphMode.SCATTER
    effect: int = 0
    text: TextOptions = field(default_factory=TextOptions)
    font: FontOptions = field(default_factory=FontOptions)
    seed: int | None = None

    def with_overrides(self, **overrides: Any) -> "DotsConfig":
        """None 以外の値だけで上書きした新インスタンスを返す。"""
        values = {k: v for k, v in overrides.items() if v is not None}
        if "mode" in values:
            values["mode"] = MorphMode.parse(values["mode"])
        return replace(self, **values)


def _positive_int(value: Any, default: int, *, minimum: int = 1) -> int:
    try:
        return max(minimum, int(value))
    except (TypeError, ValueError):
        logger.warning("invalid integer in config: %r (using %d)", value, default)
        return default


def _number(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("invalid number in config: %r (using %s)", value, default)
        return default


def _color(value: Any, default: RGB) -> RGB:
    if value is None:
        return default
    try:
        return normalize_rgb(value)
    except ValueError as e:
        logger.warning("invalid color in config: %s", e)
        return default


def resolve_config(cfg: Mapping[str, Any] | None = None) -> DotsConfig:
    """設定辞書（省略時は `load_config()`）と環境変数から `DotsConfig` を作る。

    不正な値は警告を出して既定値へフォールバックする（起動は止めない）。
    """
    if cfg is None:
        cfg = load_config()
    base = DotsConfig()
    canvas = config_section(dict(cfg), "canvas")
    dots = config_section(dict(cfg), "dots")
    text = config_section(dict(cfg), "text")
    font = config_section(dict(cfg), "font")
    rnd = config_section(dict(cfg), "random")

    try:
        mode = MorphMode.parse(dots.get("mode", base.mode))
    except ValueError as e:
        logger.warning("%s", e)
        mode = base.mode

    settings = _get_settings()
    seed = settings.SEED
    if seed is None and rnd.get("seed") is not None:
        seed = _positive_int(rnd.get("seed"), 0, minimum=0)

    return DotsConfig(
        width=_positive_int(canvas.get("width", base.width), base.width),
        height=_positive_int(canvas.get("height", base.height), base.height),
        fps=_positive_int(canvas.get("fps", base.fps), base.fps),
        background=_color(canvas.get("background"), base.background),
        color=_color(canvas.get("color"), base.color),
        speed=_positive_int(dots.get("speed", base.speed), base.speed, minimum=0),
        mode=mode,
        effect=_positive_int(dots.get("effect", base.effect), base.effect, minimum=0),
        text=TextOptions(
            default=str(text.get("default", base.text.default)),
            size=_number(text.get("size", base.text.size), base.text.size),
            offset=_number(text.get("offset", base.text.offset), base.text.offset),
            step=_number(text.get("step", base.text.step), base.text.step),
        ),
        font=FontOptions(
            path=settings.FONT_PATH or font.get("path"),
            alphabet=str(font.get("alphabet") or base.font.alphabet),
            width=_positive_int(font.get("width", base.font.width), base.font.width),
            height=_positive_int(font.get("height", base.font.height), base.font.height),
        ),
        seed=seed,
    )


__all__ = ["DotsConfig", "FontOptions", "TextOptions", "resolve_config"]
