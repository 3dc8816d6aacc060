"""
制御命令（ジャンプ、サブルーチン、マシン語呼び出し）の実装。
"""
from chip8_core.core.snapshot import Operation
from chip8_core.core.errors import StackOverflow, StackUnderflow
from chip8_core.transport.bus import Bus
from chip8_core.arch.chip8.state import Chip8CpuState, ADDRESS_MASK
from .base import nnn_of, instruction_address

# --- RET ---
# @intent:responsibility RET (00EE: Return from Subroutine) 命令をデコードします。
def decode_ret(opcode: int, bus: Bus, pc: int) -> Operation:
    return Operation(f"{opcode:04X}", "RET", [])

# @intent:responsibility RET命令を実行し、コールスタックから戻りアドレスをポップしてPCに設定します。
# @intent:post-condition スタックが空の場合はStackUnderflowを送出し、状態は変更しません。
def execute_ret(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    if not state.stack:
        raise StackUnderflow(instruction_address(state, op))
    state.pc = state.stack.pop()

# --- SYS ---
# @intent:responsibility SYS addr (0nnn) 命令をデコードします。
def decode_sys(opcode: int, bus: Bus, pc: int) -> Operation:
    return Operation(f"{opcode:04X}", "SYS", [f"${opcode & ADDRESS_MASK:03X}"])

# @intent:responsibility SYS命令を実行します（何もしません）。
# @intent:rationale 実機のマシン語サブルーチン呼び出しであり、仮想マシン上に対応物がないため無視します。
def execute_sys(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    # 意図的に何もしない（レガシーなマシン語呼び出し）
    pass

# --- JP ---
# @intent:responsibility JP addr (1nnn) 命令をデコードします。
def decode_jp(opcode: int, bus: Bus, pc: int) -> Operation:
    return Operation(f"{opcode:04X}", "JP", [f"${opcode & ADDRESS_MASK:03X}"])

# @intent:responsibility JP命令を実行し、PCを絶対アドレスnnnに設定します。
def execute_jp(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.pc = nnn_of(op)

# --- CALL ---
# @intent:responsibility CALL addr (2nnn) 命令をデコードします。
def decode_call(opcode: int, bus: Bus, pc: int) -> Operation:
    return Operation(f"{opcode:04X}", "CALL", [f"${opcode & ADDRESS_MASK:03X}"])

# @intent:responsibility CALL命令を実行し、戻りアドレスをスタックにプッシュしてからジャンプします。
# @intent:post-condition スタックが満杯の場合はStackOverflowを送出し、状態は変更しません。
def execute_call(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    if state.stack_depth and len(state.stack) >= state.stack_depth:
        raise StackOverflow(instruction_address(state, op), state.stack_depth)
    # CPU.stepでPCは既に次の命令を指しているため、そのまま戻りアドレスとしてプッシュする
    state.stack.append(state.pc)
    state.pc = nnn_of(op)
