"""
どこで: `engine.render` サブパッケージ。
何を: 描画面（Surface/ArraySurface/GLSurface）と 1 フレームの描画手順（DotRenderer）。
なぜ: 計算（core/effects）と描画の責務を分離し、GPU 依存を `gl_surface` に局所化するため。
"""

from .renderer import DotRenderer
from .surface import ArraySurface, Surface, scoped

__all__ = ["DotRenderer", "ArraySurface", "Surface", "scoped"]
