# src/chip8_core/arch/chip8/state.py
"""
CHIP-8 CPU固有の状態定義。
"""
from dataclasses import dataclass, field, replace
from typing import List
from chip8_core.core.state import CpuState

# @intent:constant CHIP-8のマシン構成を定義します。
REGISTER_COUNT = 16      # V0..VF
MEMORY_SIZE = 0x1000     # 4KB
ADDRESS_MASK = 0x0FFF    # 命令のnnnフィールド（12bit）
STACK_DEPTH = 16         # 一般的な実装のコールスタック段数
DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32

# @intent:responsibility CHIP-8 CPUの全てのレジスタ（V0-VF, I, PC）、コールスタック、フレームバッファ、タイマーの状態を保持します。
@dataclass
class Chip8CpuState(CpuState):
    """
    CHIP-8 CPUの状態を保持するデータクラス。

    delay_timer/sound_timerは外部の60Hzドライバが減算することを想定しており、
    コア自身は読み書きしません。
    """
    v: List[int] = field(default_factory=lambda: [0x00] * REGISTER_COUNT)
    i: int = 0x0000         # Index Register
    stack: List[int] = field(default_factory=list)
    display: bytearray = field(default_factory=lambda: bytearray(DISPLAY_WIDTH * DISPLAY_HEIGHT))
    delay_timer: int = 0x00
    sound_timer: int = 0x00
    # @intent:rationale 0はコールスタックの段数制限なしを意味します。
    stack_depth: int = STACK_DEPTH

    # @intent:accessor コールスタックの現在の深さをスタックポインタとして公開します。
    @property
    def sp(self) -> int:
        return len(self.stack)

    # @intent:responsibility リスト・バイト列フィールドも含めた独立したコピーを返します。
    def copy(self) -> "Chip8CpuState":
        return replace(
            self,
            v=list(self.v),
            stack=list(self.stack),
            display=bytearray(self.display)
        )
