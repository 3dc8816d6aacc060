# chip8_core/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、CPUの基本的な状態（レジスタ群）を保持するデータ構造を定義します。
"""
from dataclasses import dataclass, replace

# @intent:responsibility CPUのレジスタ状態を保持します。アーキテクチャ固有のレジスタはこれを拡張します。
@dataclass
class CpuState:
    """
    CPUのレジスタ状態を保持するデータクラス。
    これは抽象的な基底状態であり、特定のCPUアーキテクチャに応じて拡張されます。
    """
    pc: int = 0x0000  # Program Counter

    # @intent:responsibility Snapshotに格納するための独立したコピーを返します。
    # @intent:rationale リストなどの可変フィールドを持つサブクラスは、このメソッドをオーバーライドして深いコピーを行います。
    def copy(self) -> "CpuState":
        return replace(self)
