"""
CHIP-8命令実装用の共通ユーティリティ。
"""
from chip8_core.core.snapshot import Operation
from chip8_core.arch.chip8.state import Chip8CpuState, ADDRESS_MASK

# @intent:utility_function Operationから元の16bit命令ワードを復元します。
def word_of(op: Operation) -> int:
    return int(op.opcode_hex, 16)

# @intent:utility_function 命令ワードの下位12bit（nnn）をアドレスとして取り出します。
def nnn_of(op: Operation) -> int:
    return word_of(op) & ADDRESS_MASK

# @intent:utility_function 実行中の命令のアドレスを返します。
# @intent:pre-condition CPU.stepによりPCは既に命令長分進められている必要があります。
def instruction_address(state: Chip8CpuState, op: Operation) -> int:
    return (state.pc - op.length) & 0xFFFF
