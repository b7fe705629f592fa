"""
どこで: `font.bitmap_font`。
何を: 単色ビットマップ画像（1 行に固定幅セルを並べたもの）からグリフ表を構築する。
なぜ: 任意のフォント形式ではなく固定セルのアルファベットだけを扱い、起動時に 1 度だけ
      決定的なインク座標表を作っておくため。

画像の約束:
- セル i は列 `i * (width + 1)` から `width` 列ぶん。直後の 1 列は区切りで、決してインクにならない。
- 画素がインクであるのは R/G/B がすべて 0 のときのみ（アルファは見ない）。
- アルファベット外の文字は index `len(alphabet)`（空白セル）へ解決され、インクを持たない。

失敗:
- 画像が読めない/必要な幅・高さに満たない/セル寸法やアルファベットが不正な場合は
  `FontConfigError` を送出する（起動時の設定エラー）。
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from common.settings import get as _settings

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = (
    "abcdefghijklmnopqrstuvwxyzабвгдеёжзийклмнопрстуфхцчшщъыьэюя 123456789!?()0:."
)
DEFAULT_CELL_WIDTH = 5
DEFAULT_CELL_HEIGHT = 8
DEFAULT_FONT_PATH = Path(__file__).parent / "assets" / "font.pbm"

Pixel = tuple[int, int]
Glyph = tuple[Pixel, ...]
FontSource = Union[str, Path, Image.Image]


class FontConfigError(ValueError):
    """フォント画像/寸法/アルファベットの設定エラー。"""


class BitmapFont:
    """固定セルのビットマップフォント（構築後は不変）。

    属性:
    - `alphabet`: 宣言順の文字列。
    - `letters`: コードポイント単位に分解したアルファベット。
    - `width` / `height`: セル寸法（区切り列を含まない）。
    - `ink`: 画像全体のインク判定 `(H, W) bool`（読み取り専用）。
    """

    __slots__ = ("alphabet", "letters", "width", "height", "ink", "_glyphs", "_index")

    def __init__(self, ink: np.ndarray, alphabet: str, width: int, height: int) -> None:
        self.alphabet = alphabet
        self.letters: tuple[str, ...] = tuple(alphabet)
        self.width = int(width)
        self.height = int(height)
        ink = np.array(ink, dtype=bool)
        ink.setflags(write=False)
        self.ink = ink

        index: dict[str, int] = {}
        glyphs: dict[str, Glyph] = {}
        for i, ch in enumerate(self.letters):
            if ch in index:
                # 先勝ち（重複文字は最初のセルを使う）
                continue
            index[ch] = i
            glyphs[ch] = self._scan_cell(i)
        self._index = MappingProxyType(index)
        self._glyphs = MappingProxyType(glyphs)

    # ---- 構築 ----
    def _scan_cell(self, index: int) -> Glyph:
        x0 = index * self.width_plus
        cell = self.ink[: self.height, x0 : x0 + self.width]
        rows, cols = np.nonzero(cell)
        return tuple((int(c), int(r)) for r, c in zip(rows, cols))

    # ---- 参照 ----
    @property
    def width_plus(self) -> int:
        """区切り列を含むセル幅。"""
        return self.width + 1

    @property
    def blank_index(self) -> int:
        """未知文字が解決される空白セルの index。"""
        return len(self.letters)

    @property
    def glyphs(self) -> Mapping[str, Glyph]:
        """文字 → インク画素 `(col, row)` 列（行優先）。"""
        return self._glyphs

    def letter_index(self, letter: str) -> int:
        return self._index.get(letter, self.blank_index)

    def has_letter(self, letter: str) -> bool:
        return letter in self._index

    def glyph(self, letter: str) -> Glyph:
        """文字のインク画素列。未知文字は空タプル。"""
        return self._glyphs.get(letter, ())

    def is_ink(self, x: int, y: int, index: int) -> bool:
        """セル `index` 内の画素 `(x, y)` がインクか（セル外/画像外は False）。"""
        if not (0 <= x < self.width and 0 <= y < self.height) or index < 0:
            return False
        px = index * self.width_plus + x
        h, w = self.ink.shape
        if px >= w or y >= h:
            return False
        return bool(self.ink[y, px])

    def __repr__(self) -> str:
        return f"BitmapFont(letters={len(self.letters)}, cell={self.width}x{self.height})"


def _decode(source: FontSource) -> np.ndarray:
    """画像を RGBA `(H, W, 4)` uint8 へデコードする。"""
    if isinstance(source, Image.Image):
        image = source
    else:
        path = Path(source)
        try:
            image = Image.open(path)
            image.load()
        except (OSError, UnidentifiedImageError) as e:
            raise FontConfigError(f"フォント画像を読み込めません: {path}: {e}") from e
    return np.asarray(image.convert("RGBA"), dtype=np.uint8)


def load_font(source: FontSource, alphabet: str, width: int, height: int) -> BitmapFont:
    """フォント画像からグリフ表を構築する。

    Parameters
    ----------
    source : str | Path | PIL.Image.Image
        画像パス、またはデコード済み画像。
    alphabet : str
        セル並び順の文字列（コードポイント単位）。
    width, height : int
        セル寸法（区切り列を含まない）。

    Raises
    ------
    FontConfigError
        画像が読めない、寸法が不足している、または引数が不正な場合。
    """
    if not alphabet:
        raise FontConfigError("alphabet は空であってはなりません")
    if int(width) <= 0 or int(height) <= 0:
        raise FontConfigError(f"セル寸法は正である必要があります: {(width, height)}")

    rgba = _decode(source)
    img_h, img_w = rgba.shape[:2]
    need_w = len(alphabet) * (int(width) + 1) - 1
    if img_w < need_w or img_h < int(height):
        raise FontConfigError(
            f"フォント画像が小さすぎます: {img_w}x{img_h} < {need_w}x{int(height)} "
            f"({len(alphabet)} 文字, セル {width}x{height})"
        )

    ink = np.all(rgba[:, :, :3] == 0, axis=2)
    font = BitmapFont(ink, alphabet, int(width), int(height))
    logger.debug("loaded %r from %s", font, getattr(source, "filename", source))
    if _settings().DEBUG_FONT:
        _report_empty_glyphs(font)
    return font


def _report_empty_glyphs(font: BitmapFont) -> None:
    """インクを持たないグリフを列挙する（空白以外はセル位置ずれの疑い）。"""
    empty = [ch for ch in font.letters if not ch.isspace() and not font.glyph(ch)]
    if empty:
        logger.warning("glyphs without ink: %s", " ".join(repr(ch) for ch in empty))
    else:
        logger.info("all %d glyphs have ink", len(font.letters))


def load_default_font(
    path: str | Path | None = None,
    *,
    alphabet: str | None = None,
    width: int | None = None,
    height: int | None = None,
) -> BitmapFont:
    """同梱フォント（または指定パス）を既定のアルファベット/セル寸法で読み込む。

    パス未指定時は `DOTS_FONT_PATH`、それも無ければ同梱アセットを使う。
    """
    resolved = path or _settings().FONT_PATH or DEFAULT_FONT_PATH
    return load_font(
        Path(resolved),
        alphabet if alphabet is not None else DEFAULT_ALPHABET,
        width if width is not None else DEFAULT_CELL_WIDTH,
        height if height is not None else DEFAULT_CELL_HEIGHT,
    )


__all__ = [
    "BitmapFont",
    "FontConfigError",
    "load_font",
    "load_default_font",
    "DEFAULT_ALPHABET",
    "DEFAULT_CELL_WIDTH",
    "DEFAULT_CELL_HEIGHT",
    "DEFAULT_FONT_PATH",
]
