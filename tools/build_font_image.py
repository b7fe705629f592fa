#!/usr/bin/env python3
"""
Glyph source -> font bitmap builder

Reads tools/glyphs.txt (ASCII-art 5x8 cells) and writes the single-row font
bitmap consumed by `font.load_font` (cells at multiples of width + 1, separator
column left blank).

Usage:
  python tools/build_font_image.py [--out src/font/assets/font.pbm] [--png out.png]

Notes:
  - The glyph order must equal `font.bitmap_font.DEFAULT_ALPHABET`.
  - The default output is a plain-text PBM (P1); --png additionally writes a PNG via Pillow.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_SOURCE = ROOT / "tools" / "glyphs.txt"
DEFAULT_OUT = ROOT / "src" / "font" / "assets" / "font.pbm"

logger = logging.getLogger("build_font_image")


def parse_glyphs(path: Path, width: int, height: int) -> list[tuple[str, np.ndarray]]:
    """`[c]` 見出し + `height` 行のブロックを順に読み、(文字, (H,W) bool) を返す。"""
    glyphs: list[tuple[str, np.ndarray]] = []
    current: str | None = None
    rows: list[str] = []
    for lineno, raw in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        line = raw.rstrip("\n")
        if line.startswith("#") or not line.strip():
            continue
        if line.startswith("[") and line.endswith("]") and len(line) >= 3:
            current = line[1:-1]
            rows = []
            continue
        if current is None:
            raise ValueError(f"{path}:{lineno}: row before any glyph header")
        if len(line) != width or set(line) - {"#", "."}:
            raise ValueError(f"{path}:{lineno}: glyph {current!r} row must be {width} of '#'/'.'")
        rows.append(line)
        if len(rows) == height:
            cell = np.array([[c == "#" for c in r] for r in rows], dtype=bool)
            glyphs.append((current, cell))
            current = None
    if current is not None:
        raise ValueError(f"{path}: glyph {current!r} has {len(rows)} rows, expected {height}")
    return glyphs


def compose(glyphs: list[tuple[str, np.ndarray]], width: int, height: int) -> np.ndarray:
    """セルを区切り列付きで横に並べた (H, N*(W+1)) の bool 配列。"""
    sheet = np.zeros((height, len(glyphs) * (width + 1)), dtype=bool)
    for i, (_, cell) in enumerate(glyphs):
        x0 = i * (width + 1)
        sheet[:, x0 : x0 + width] = cell
    return sheet


def write_plain_pbm(sheet: np.ndarray, out: Path) -> None:
    h, w = sheet.shape
    lines = ["P1", f"# dotmorph bitmap font, {w}x{h}", f"{w} {h}"]
    lines += ["".join("1" if v else "0" for v in row) for row in sheet]
    out.write_text("\n".join(lines) + "\n", encoding="ascii")


def write_png(sheet: np.ndarray, out: Path) -> None:
    from PIL import Image

    rgb = np.where(sheet[:, :, None], 0, 255).astype(np.uint8).repeat(3, axis=2)
    Image.fromarray(rgb, mode="RGB").save(out)


def main(argv: list[str] | None = None) -> int:
    import sys

    sys.path.insert(0, str(ROOT / "src"))
    from font.bitmap_font import DEFAULT_ALPHABET, DEFAULT_CELL_HEIGHT, DEFAULT_CELL_WIDTH

    p = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("--source", type=Path, default=DEFAULT_SOURCE)
    p.add_argument("--out", type=Path, default=DEFAULT_OUT)
    p.add_argument("--png", type=Path, default=None, help="also write a PNG copy")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    glyphs = parse_glyphs(args.source, DEFAULT_CELL_WIDTH, DEFAULT_CELL_HEIGHT)
    order = "".join(ch for ch, _ in glyphs)
    if order != DEFAULT_ALPHABET:
        logger.error("glyph order %r does not match DEFAULT_ALPHABET %r", order, DEFAULT_ALPHABET)
        return 1

    sheet = compose(glyphs, DEFAULT_CELL_WIDTH, DEFAULT_CELL_HEIGHT)
    write_plain_pbm(sheet, args.out)
    logger.info("wrote %s (%dx%d, %d glyphs)", args.out, sheet.shape[1], sheet.shape[0], len(glyphs))
    if args.png is not None:
        write_png(sheet, args.png)
        logger.info("wrote %s", args.png)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
