"""
共通レジストリ基底クラス
effects/ で使用する名前付き・登録順保持のレジストリ
"""

import re
from typing import Any, Callable


class BaseRegistry:
    """レジストリの基底クラス。

    - 文字列キーは正規化されます（大文字小文字・キャメル→スネーク・ハイフン→アンダースコア）。
    - デコレータは名前省略可。省略時は関数名から自動推論します。
    - 登録順を保持し、`names()` / `index_of()` で位置を参照できます。
    """

    def __init__(self) -> None:
        # dict は挿入順を保持する（登録順 = 既定の並び）
        self._registry: dict[str, Any] = {}

    # === 内部ユーティリティ ===
    @staticmethod
    def _camel_to_snake(name: str) -> str:
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
        return s2.lower()

    @classmethod
    def _normalize_key(cls, name: str) -> str:
        """レジストリキーの正規化（例: "FitViewport" -> "fit_viewport"）。"""
        if not isinstance(name, str):
            raise TypeError("レジストリキーは str である必要があります")
        if not name:
            raise ValueError("レジストリキーは空であってはなりません")
        name = name.replace("-", "_")
        return cls._camel_to_snake(name) if any(c.isupper() for c in name) else name.lower()

    def register(self, name: str | None = None) -> Callable:
        """関数をレジストリに登録するデコレータ。"""

        def decorator(obj: Any) -> Any:
            key = self._normalize_key(name) if name else self._normalize_key(obj.__name__)
            if key in self._registry and self._registry[key] is not obj:
                raise ValueError(f"'{key}' は既に登録されています")
            self._registry[key] = obj
            return obj

        return decorator

    def get(self, name: str) -> Any:
        """登録された関数を取得。"""
        key = self._normalize_key(name)
        if key not in self._registry:
            raise KeyError(f"'{name}' は登録されていません")
        return self._registry[key]

    def names(self) -> list[str]:
        """登録順の名前一覧。"""
        return list(self._registry.keys())

    def index_of(self, name: str) -> int:
        """登録順での位置を返す（未登録は KeyError）。"""
        key = self._normalize_key(name)
        try:
            return self.names().index(key)
        except ValueError:
            raise KeyError(f"'{name}' は登録されていません") from None

    def is_registered(self, name: str) -> bool:
        """指定された名前が登録されているかチェック"""
        return self._normalize_key(name) in self._registry

    def unregister(self, name: str) -> None:
        """レジストリから削除（名前が存在しない場合は無視）。"""
        self._registry.pop(self._normalize_key(name), None)

    def clear(self) -> None:
        """レジストリをクリア"""
        self._registry.clear()

    def __len__(self) -> int:
        return len(self._registry)

    @property
    def registry(self) -> dict[str, Any]:
        """レジストリの読み取り専用アクセス（コピー）"""
        return self._registry.copy()
