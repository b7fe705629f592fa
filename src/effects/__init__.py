"""
どこで: `effects` パッケージ（関数ベース）。
何を: DotSet→DotSet の純関数エフェクトを登録し、`effects.catalog` の index 表から利用可能にする。
なぜ: 配置/変換/描画の責務分離に従い、変換ステージの拡張点を一箇所に集約するため。
"""

# 関数エフェクトを登録
from . import lines  # noqa: F401
from . import normalize  # noqa: F401
from . import polar  # noqa: F401
from . import radial  # noqa: F401
from . import remap  # noqa: F401
from . import scatter  # noqa: F401
from . import waves  # noqa: F401
from .catalog import EFFECT_ORDER, effect_count, effect_name, get_effect_at, run_effect
from .registry import Viewport, effect, get_effect, list_effects

__all__ = [
    "EFFECT_ORDER",
    "Viewport",
    "effect",
    "effect_count",
    "effect_name",
    "get_effect",
    "get_effect_at",
    "list_effects",
    "run_effect",
]
