"""
共通の型定義を提供するモジュール。
プロジェクト全体で使用される汎用的な型エイリアスなどを定義します。
"""
from typing import Dict

# @intent:data_structure シンボル名とアドレスをマッピングする辞書の型エイリアス。
# CPUがSnapshotのシンボル情報（"label: MNEMONIC"）を生成するために使用します。
SymbolMap = Dict[str, int]
