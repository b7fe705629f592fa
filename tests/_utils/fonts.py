"""テスト用の小さなフォント画像ヘルパ。"""

from __future__ import annotations

from PIL import Image


def make_font_image(width: int, height: int, ink: list[tuple[int, int]]) -> Image.Image:
    """白地に指定画素だけ黒い RGB 画像を作る。"""
    img = Image.new("RGB", (width, height), (255, 255, 255))
    for x, y in ink:
        img.putpixel((x, y), (0, 0, 0))
    return img
