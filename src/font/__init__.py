"""
どこで: `font` パッケージ。
何を: 固定セルのビットマップフォント読込（BitmapFont）と文字列→点群配置（text_to_dots）。
なぜ: 粒子の「素の」位置を作る段を、エフェクト/描画から独立させるため。
"""

from .bitmap_font import BitmapFont, FontConfigError, load_default_font, load_font
from .layout import text_to_dots

__all__ = ["BitmapFont", "FontConfigError", "load_font", "load_default_font", "text_to_dots"]
