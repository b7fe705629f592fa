"""
どこで: `engine.render.gl_surface`。
何を: pyglet ウィンドウ上の ModernGL 描画面（単位正方形を三角形 2 枚ずつで一括描画）。
なぜ: `Surface` の契約を GPU 側で満たし、描画段（DotRenderer）を GUI 依存から切り離すため。

座標:
- 論理ピクセル（左上原点、y 下向き）で受け取り、シェーダで NDC へ変換する。
- 実フレームバッファは HiDPI で論理サイズより大きい場合がある（`resize()` で追従）。
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from common.types import RGB
from util.color import to_unit_rgb

logger = logging.getLogger(__name__)

_VERTEX_SHADER = """
#version 330
uniform vec2 viewport;
uniform vec2 offset;
in vec2 in_vert;
void main() {
    vec2 p = in_vert + offset;
    gl_Position = vec4(p.x / viewport.x * 2.0 - 1.0, 1.0 - p.y / viewport.y * 2.0, 0.0, 1.0);
}
"""

_FRAGMENT_SHADER = """
#version 330
uniform vec3 color;
out vec4 frag_color;
void main() {
    frag_color = vec4(color, 1.0);
}
"""

# 単位正方形 = 三角形 2 枚
_QUAD = np.array(
    [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0], [1.0, 1.0], [0.0, 1.0]],
    dtype=np.float32,
)


class GLSurface:
    """ModernGL による `Surface` 実装。"""

    def __init__(
        self,
        window: Any,
        mgl_context: Any | None = None,
        # 初期 GPU メモリ確保量（既定: 1MB）。必要に応じて自動拡張。
        initial_reserve: int = 1024 * 1024,
    ) -> None:
        import moderngl

        self.window = window
        self.ctx = mgl_context if mgl_context is not None else moderngl.create_context()
        self._mode_triangles = moderngl.TRIANGLES
        self.initial_reserve = int(initial_reserve)

        self.program = self.ctx.program(
            vertex_shader=_VERTEX_SHADER, fragment_shader=_FRAGMENT_SHADER
        )
        self.vbo = self.ctx.buffer(reserve=self.initial_reserve, dynamic=True)
        self.vao = self.ctx.simple_vertex_array(self.program, self.vbo, "in_vert")

        self._size = (int(window.width), int(window.height))
        self._ratio = 1.0
        self._fill: RGB = (0, 0, 0)
        self._offset = (0.0, 0.0)
        self._stack: list[tuple[RGB, tuple[float, float]]] = []

    # ---- Surface ----
    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def resize(self) -> None:
        width = max(1, int(self.window.width))
        height = max(1, int(self.window.height))
        fb_w, fb_h = self.window.get_framebuffer_size()
        self._size = (width, height)
        self._ratio = float(fb_w) / float(width)
        self.ctx.viewport = (0, 0, int(fb_w), int(fb_h))
        self._offset = (0.0, 0.0)
        self._stack.clear()

    def save(self) -> None:
        self._stack.append((self._fill, self._offset))

    def restore(self) -> None:
        if self._stack:
            self._fill, self._offset = self._stack.pop()

    def set_fill(self, rgb: RGB) -> None:
        self._fill = (int(rgb[0]), int(rgb[1]), int(rgb[2]))

    def translate(self, dx: float, dy: float) -> None:
        ox, oy = self._offset
        self._offset = (ox + float(dx), oy + float(dy))

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        """矩形をクリア色で塗る（scissor 付き clear）。"""
        ox, oy = self._offset
        r = self._ratio
        fb_h = self._size[1] * r
        vx = int(round((x + ox) * r))
        vw = int(round(width * r))
        vh = int(round(height * r))
        vy = int(round(fb_h - (y + oy + height) * r))
        red, green, blue = to_unit_rgb(self._fill)
        self.ctx.clear(red, green, blue, 1.0, viewport=(vx, vy, vw, vh))

    def fill_unit_squares(self, coords: np.ndarray) -> None:
        pts = np.asarray(coords, dtype=np.float32)
        if pts.size == 0:
            return
        vertices = (pts[:, None, :] + _QUAD[None, :, :]).reshape(-1, 2)
        vertices = np.ascontiguousarray(vertices, dtype=np.float32)
        self._upload(vertices)
        self.program["viewport"].value = (float(self._size[0]), float(self._size[1]))
        self.program["offset"].value = self._offset
        self.program["color"].value = to_unit_rgb(self._fill)
        self.vao.render(self._mode_triangles, vertices=int(vertices.shape[0]))

    # ---- バッファ操作 ----
    def _upload(self, vertices: np.ndarray) -> None:
        """データが大きくなったら VBO を再確保して VAO を張り直す。"""
        if vertices.nbytes > self.vbo.size:
            self.vbo.release()
            self.vao.release()
            self.vbo = self.ctx.buffer(
                reserve=max(vertices.nbytes, self.initial_reserve), dynamic=True
            )
            self.vao = self.ctx.simple_vertex_array(self.program, self.vbo, "in_vert")
            logger.debug("vbo grown to %d bytes", self.vbo.size)
        self.vbo.orphan()
        self.vbo.write(vertices.tobytes())

    def release(self) -> None:
        """GPU のメモリを解放する（終了時に使う）。"""
        self.vbo.release()
        self.vao.release()
        self.program.release()


__all__ = ["GLSurface"]
