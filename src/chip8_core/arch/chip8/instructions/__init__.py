# src/chip8_core/arch/chip8/instructions/__init__.py
"""
CHIP-8命令セット実装パッケージ。
"""
from chip8_core.transport.bus import Bus
from chip8_core.core.snapshot import Operation
from chip8_core.core.errors import UnimplementedOpcode
from chip8_core.arch.chip8.state import Chip8CpuState
from .base import word_of, instruction_address
from .maps import (
    DECODE_WORD_MAP, DECODE_FAMILY_MAP, EXECUTE_WORD_MAP, EXECUTE_FAMILY_MAP, lookup
)

UNKNOWN_MNEMONIC = "UNKNOWN"

# @intent:responsibility CHIP-8の命令ワードをデコードします。
def decode_opcode(opcode: int, bus: Bus, pc: int) -> Operation:
    """
    CHIP-8の16bit命令ワードをデコードし、Operationオブジェクトを返します。
    対応する命令がない場合はニーモニック"UNKNOWN"のOperationを返します。
    """
    decoder = lookup(opcode, DECODE_WORD_MAP, DECODE_FAMILY_MAP)
    if decoder:
        return decoder(opcode, bus, pc)
    return Operation(opcode_hex=f"{opcode:04X}", mnemonic=UNKNOWN_MNEMONIC, operands=[f"${opcode:04X}"])

# @intent:responsibility デコードされたCHIP-8命令を実行します。
# @intent:post-condition 実装されていない命令の場合はUnimplementedOpcodeを送出します。
def execute_instruction(operation: Operation, state: Chip8CpuState, bus: Bus) -> None:
    """
    デコードされたCHIP-8命令を実行し、CPUの状態を変更します。
    """
    word = word_of(operation)
    executor = None
    if operation.mnemonic != UNKNOWN_MNEMONIC:
        executor = lookup(word, EXECUTE_WORD_MAP, EXECUTE_FAMILY_MAP)
    if executor is None:
        raise UnimplementedOpcode(word, instruction_address(state, operation))
    executor(state, bus, operation)
