"""
表示命令の実装。
"""
from chip8_core.core.snapshot import Operation
from chip8_core.transport.bus import Bus
from chip8_core.arch.chip8.state import Chip8CpuState

# --- CLS ---
# @intent:responsibility CLS (00E0: Clear Display) 命令をデコードします。
def decode_cls(opcode: int, bus: Bus, pc: int) -> Operation:
    return Operation(f"{opcode:04X}", "CLS", [])

# @intent:responsibility CLS命令を実行し、フレームバッファの全ピクセルを消灯します。
def execute_cls(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    for index in range(len(state.display)):
        state.display[index] = 0x00
