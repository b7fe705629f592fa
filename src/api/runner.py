"""
どこで: `api.runner`（実行ランナー）。
何を: `Dots` を pyglet ウィンドウ + ModernGL 描画面で毎フレーム駆動し、キー/ホイール操作を配線する。
なぜ: ホストのイベントループが「1 フレーム進める」入口を 1 つだけ呼ぶ構成にし、
      ドット状態/エフェクト/描画の各層を GUI から独立に保つため。

実行フロー（概要）:
1) 設定解決: `api.config.resolve_config()` に引数の上書きを適用。
2) 初期内容: `clock=True` なら `ClockText`、それ以外はテキストを配置して現在のエフェクトを適用。
   フォント設定エラー（`FontConfigError`）はログを出して再送出（起動中止）。
3) `init_only=True` ならここで `Dots` を返す（ウィンドウ/GL を作らない）。
4) ウィンドウ/GL: `RenderWindow` と `GLSurface` を生成し、描画コールバックで `dots.advance`。
5) フレーム駆動: `FrameClock` を `pyglet.clock.schedule_interval` で駆動。

操作:
- Space: 現在のエフェクトを適用 / R: ランダム
- Up・ホイール上: 次 / Down・ホイール下: 前（両端で飽和）
- Right / Left: 速度 +1 / -1（0 で止まる）
- Ctrl+V: クリップボードのテキストで置き換え（空なら無視）
- Esc: 終了
"""

from __future__ import annotations

import logging
from typing import Any

from common.logging import setup_default_logging
from engine.core.tickable import Tickable
from font.bitmap_font import FontConfigError

from .clock import ClockText
from .config import DotsConfig, resolve_config
from .dots import Dots

logger = logging.getLogger(__name__)

COMMANDS = ("apply", "random", "next", "previous", "faster", "slower", "paste")


def apply_command(dots: Dots, command: str, *, clipboard: str | None = None) -> bool:
    """操作名を `Dots` の呼び出しへ変換する。何か変化させたら True。

    `paste` は `clipboard` が空/None なら何もしない。
    """
    if command == "apply":
        return dots.apply_effect()
    if command == "random":
        return dots.apply_random_effect()
    if command == "next":
        return dots.apply_next_effect()
    if command == "previous":
        return dots.apply_previous_effect()
    if command == "faster":
        dots.increase_speed()
        return True
    if command == "slower":
        before = dots.speed
        dots.decrease_speed()
        return dots.speed != before
    if command == "paste":
        if not clipboard:
            return False
        dots.clear_dots()
        dots.add_text(clipboard)
        return dots.apply_effect()
    raise ValueError(f"unknown command: {command!r}; allowed={', '.join(COMMANDS)}")


def scroll_command(scroll_y: float) -> str | None:
    """ホイール量から操作名を返す（上=次、下=前、0 は None）。"""
    if scroll_y > 0:
        return "next"
    if scroll_y < 0:
        return "previous"
    return None


def _key_commands(key: Any) -> dict[int, str]:
    return {
        key.SPACE: "apply",
        key.R: "random",
        key.UP: "next",
        key.DOWN: "previous",
        key.RIGHT: "faster",
        key.LEFT: "slower",
    }


def run_dots(
    text: str | None = None,
    *,
    clock: bool = False,
    effect: int | None = None,
    speed: int | None = None,
    mode: str | None = None,
    fps: int | None = None,
    size: tuple[int, int] | None = None,
    config: DotsConfig | None = None,
    init_only: bool = False,
    log_level: str | None = None,
) -> Dots | None:
    """ドットモーフィングをウィンドウで実行する。

    Parameters
    ----------
    text : str | None
        表示する文字列。None で設定 `text.default`。
    clock : bool, default False
        True で現在時刻を表示し、分ごとにランダムエフェクトで組み替える（`text` は無視）。
    effect, speed, mode, fps : 任意
        設定値の上書き（None で設定に従う）。
    size : tuple[int, int] | None
        ウィンドウの `(width, height)` [px]。
    init_only : bool, default False
        True でウィンドウ/GL を作らず、初期化済みの `Dots` を返す（検証用）。
    log_level : str | None
        ロギングレベル。None で `DOTS_LOG_LEVEL`。
    """
    setup_default_logging(log_level)
    cfg = config if config is not None else resolve_config()
    width, height = size if size is not None else (None, None)
    cfg = cfg.with_overrides(
        effect=effect, speed=speed, mode=mode, fps=fps, width=width, height=height
    )
    if cfg.width <= 0 or cfg.height <= 0:
        raise ValueError(f"window size must be positive, got {(cfg.width, cfg.height)}")

    dots = Dots(config=cfg)
    tickables: list[Tickable] = []
    try:
        if clock:
            clock_text = ClockText(dots)
            clock_text.tick(0.0)
            tickables.append(clock_text)
        else:
            dots.add_text(text if text is not None else cfg.text.default)
            dots.apply_effect()
    except FontConfigError:
        logger.exception("font configuration error")
        raise
    logger.info(
        "dots=%d effect=%d (%s) speed=%d mode=%s",
        len(dots.source),
        dots.effect,
        dots.effect_name,
        dots.speed,
        dots.mode.value,
    )

    if init_only:
        return dots

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import moderngl
    import pyglet
    from pyglet.window import key

    from engine.core.frame_clock import FrameClock
    from engine.core.render_window import RenderWindow
    from engine.render.gl_surface import GLSurface

    window = RenderWindow(cfg.width, cfg.height)
    surface = GLSurface(window, moderngl.create_context())
    window.add_draw_callback(lambda: dots.advance(surface))

    frame_clock = FrameClock(tickables)
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / cfg.fps)

    key_commands = _key_commands(key)

    def _run(command: str, clipboard: str | None = None) -> None:
        if apply_command(dots, command, clipboard=clipboard):
            logger.debug(
                "%s -> effect %d (%s) speed %d",
                command,
                dots.effect,
                dots.effect_name,
                dots.speed,
            )

    @window.event
    def on_key_press(sym, mods):  # noqa: ANN001
        if sym == key.ESCAPE:
            window.close()
            return pyglet.event.EVENT_HANDLED
        if sym == key.V and mods & (key.MOD_CTRL | key.MOD_COMMAND):
            _run("paste", window.get_clipboard_text())
            return pyglet.event.EVENT_HANDLED
        command = key_commands.get(sym)
        if command is not None:
            _run(command)
            return pyglet.event.EVENT_HANDLED
        return None

    @window.event
    def on_mouse_scroll(x, y, scroll_x, scroll_y):  # noqa: ANN001
        command = scroll_command(scroll_y)
        if command is not None:
            _run(command)

    @window.event
    def on_close():  # noqa: ANN001
        # 冪等なクリーンアップ
        if getattr(on_close, "_closed", False):
            return
        pyglet.clock.unschedule(frame_clock.tick)
        surface.release()
        setattr(on_close, "_closed", True)
        pyglet.app.exit()

    pyglet.app.run()
    return None


__all__ = ["run_dots", "apply_command", "scroll_command", "COMMANDS"]
