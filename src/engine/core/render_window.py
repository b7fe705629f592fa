"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（背景クリア/HiDPI）と描画コールバック登録を提供。
なぜ: レンダラ/ドット状態層から GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    win = RenderWindow(800, 600, caption="dotmorph")

    def draw_scene():
        dots.advance(surface)

    win.add_draw_callback(draw_scene)
    pyglet.app.run()
"""

from typing import Callable

import pyglet
from pyglet.gl import Config


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        caption: str = "dotmorph",
        resizable: bool = True,
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（論理ピクセル）。
            height: ウィンドウ高さ（論理ピクセル）。
            caption: タイトルバーの文字列。
            resizable: サイズ変更を許すか（描画面は毎フレーム追従する）。
        """
        # 1px のドットをぼかさないため MSAA は使わない
        config = Config(double_buffer=True, vsync=True)
        super().__init__(
            width=width, height=height, caption=caption, resizable=resizable, config=config
        )
        self._draw_callbacks: list[Callable[[], None]] = []

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        """ウィンドウ描画イベントハンドラ。登録された描画コールバックを呼び出す。"""
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_resize(self, width, height):  # noqa: ANN001
        # 既定のビューポート/投影設定は描画面側（resize()）で行う
        return pyglet.event.EVENT_HANDLED
