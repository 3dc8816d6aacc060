"""
ロード命令の実装。
"""
from chip8_core.core.snapshot import Operation
from chip8_core.transport.bus import Bus
from chip8_core.arch.chip8.state import Chip8CpuState, ADDRESS_MASK
from .base import nnn_of

# --- LD I, addr ---
# @intent:responsibility LD I, addr (Annn) 命令をデコードします。
def decode_ld_i(opcode: int, bus: Bus, pc: int) -> Operation:
    return Operation(f"{opcode:04X}", "LD", ["I", f"${opcode & ADDRESS_MASK:03X}"])

# @intent:responsibility LD I命令を実行し、インデックスレジスタにnnnを設定します。
def execute_ld_i(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.i = nnn_of(op)
