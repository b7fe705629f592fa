"""
どこで: `api.cli`（コンソールスクリプト `dotmorph`）。
何を: コマンドライン引数を `run_dots` の引数へ変換して実行する。`--list-effects` は一覧表示のみ。
なぜ: スケッチを書かずに文字列/時計をすぐ表示できる入口を用意するため。
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from engine.core.style import MorphMode


def _size(value: str) -> tuple[int, int]:
    try:
        w, h = value.lower().split("x", 1)
        size = (int(w), int(h))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}") from None
    if size[0] <= 0 or size[1] <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {value!r}")
    return size


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dotmorph", description="Morph text made of dots.")
    p.add_argument("--text", help="text to show (default: config text.default)")
    p.add_argument("--clock", action="store_true", help="show the current time (HH:MM)")
    p.add_argument("--effect", type=int, help="initial effect index (negative counts from the end)")
    p.add_argument("--speed", type=int, help="distance per frame")
    p.add_argument("--mode", choices=[m.value for m in MorphMode], help="morph direction")
    p.add_argument("--fps", type=int)
    p.add_argument("--size", type=_size, help="window size, e.g. 800x600")
    p.add_argument("--list-effects", action="store_true", help="print effect indexes and exit")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return p


def list_effects_text() -> str:
    from effects import EFFECT_ORDER

    return "\n".join(f"{i:2d} {name}" for i, name in enumerate(EFFECT_ORDER))


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.list_effects:
        print(list_effects_text())
        return 0

    from .runner import run_dots

    run_dots(
        args.text,
        clock=args.clock,
        effect=args.effect,
        speed=args.speed,
        mode=args.mode,
        fps=args.fps,
        size=args.size,
        log_level=args.log_level,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
