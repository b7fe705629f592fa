"""
どこで: `engine.core` サブパッケージ。
何を: ドット集合（DotSet）・描画スタイル・アニメーション・状態コンテキスト・フレーム駆動（Tickable/FrameClock）を提供。
なぜ: 計算と描画の基盤を構成し、上位層（render/api）から再利用可能にするため。
"""
