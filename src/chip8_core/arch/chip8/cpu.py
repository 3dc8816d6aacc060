# src/chip8_core/arch/chip8/cpu.py
"""
CHIP-8 CPUエミュレーションの中心モジュール。

プログラム（バイト列）をメモリのロード開始アドレスへ配置し、
プログラム領域の外にPCが出るか、フォルトが発生するまで命令サイクルを繰り返します。
"""
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from chip8_core.core.cpu import AbstractCpu
from chip8_core.core.errors import ExecutionFault, TruncatedInstruction
from chip8_core.core.snapshot import ExecutionResult, HaltReason, Operation, Snapshot
from chip8_core.transport.bus import Bus
from chip8_core.config.models import MachineConfig
from chip8_core.arch.chip8.state import Chip8CpuState
from chip8_core.arch.chip8.instructions import decode_opcode, execute_instruction
from chip8_core.arch.chip8 import disassembler

logger = logging.getLogger(__name__)

# @intent:responsibility CHIP-8 CPUの具体的なエミュレーションロジック（フェッチ、デコード、実行）を提供します。
class Chip8Cpu(AbstractCpu):
    """
    CHIP-8 CPUをエミュレートするクラス。

    メモリはBusに接続されたRAMデバイスであり、命令は常にメモリからフェッチされます。
    """
    # @intent:pre-condition `bus`には0x000からconfig.memory_size-1までRAMが登録されている必要があります。
    def __init__(self, bus: Bus, config: Optional[MachineConfig] = None):
        self._config = config or MachineConfig()
        super().__init__(bus)
        # 現在ロードされているプログラム領域 [start, end)
        self._program_start = self._config.load_address
        self._program_end = self._config.load_address

    def _create_initial_state(self) -> Chip8CpuState:
        return Chip8CpuState(stack_depth=self._config.stack_depth)

    def get_config(self) -> MachineConfig:
        return self._config

    def get_program_range(self) -> Tuple[int, int]:
        return self._program_start, self._program_end

    # @intent:responsibility プログラムをメモリのロード開始アドレスへ配置し、PCをその先頭に設定します。
    # @intent:pre-condition programは空でなく、ロード開始アドレスからメモリ末尾までに収まる必要があります。
    # @intent:rationale レジスタ、スタック、フレームバッファは保持します。完全な初期化はreset()で行います。
    def load_program(self, program: Sequence[int]) -> None:
        program = bytes(program)
        if not program:
            raise ValueError("Program must not be empty.")
        origin = self._config.load_address
        if origin + len(program) > self._config.memory_size:
            raise ValueError(
                f"Program of {len(program)} bytes does not fit in memory at {origin:#05x} "
                f"(memory size {self._config.memory_size:#x})."
            )

        for address in range(self._config.memory_size):
            self._bus.load(address, 0x00)
        for offset, byte in enumerate(program):
            self._bus.load(origin + offset, byte)

        self._program_start = origin
        self._program_end = origin + len(program)
        self._state.pc = origin
        logger.debug("Loaded %d bytes at %#05x", len(program), origin)

    # @intent:responsibility PCがロード済みプログラム領域内を指しているかを返します。
    def in_program(self) -> bool:
        return self._program_start <= self._state.pc < self._program_end

    # @intent:responsibility プログラムをロードし、停止条件に達するまで命令サイクルを繰り返します。
    # @intent:post-condition ExecutionFaultは送出せず、停止理由と共にExecutionResultとして返します。
    def execute(self, program: Sequence[int], trace: bool = False) -> ExecutionResult:
        """
        プログラムを実行し、ExecutionResultを返します。

        停止条件:
            - PCがプログラム領域の外に出た (END_OF_PROGRAM)
            - 命令がフォルトを起こした (UNIMPLEMENTED_OPCODE, STACK_UNDERFLOW など)
            - config.max_cycles に達した (CYCLE_LIMIT)
        """
        self.load_program(program)

        snapshots: List[Snapshot] = []
        reason = HaltReason.END_OF_PROGRAM
        fault: Optional[ExecutionFault] = None
        cycles = 0
        limit = self._config.max_cycles

        while self.in_program():
            if limit is not None and cycles >= limit:
                reason = HaltReason.CYCLE_LIMIT
                break
            try:
                snapshot = self.step()
            except ExecutionFault as e:
                fault = e
                reason = e.reason
                logger.warning("Execution halted: %s", e)
                break
            cycles += 1
            if trace:
                snapshots.append(snapshot)

        logger.debug("Halted with %s after %d cycles at PC=%#05x", reason.value, cycles, self._state.pc)
        return ExecutionResult(
            reason=reason,
            state=self._state.copy(),
            cycles=cycles,
            fault=fault,
            trace=snapshots
        )

    # @intent:responsibility メモリから次の16bit命令ワードをビッグエンディアンでフェッチします。
    # @intent:post-condition 2バイト目がプログラム領域の外にある場合はTruncatedInstructionを送出します。
    def _fetch(self) -> int:
        pc = self._state.pc
        if pc + 1 >= self._program_end:
            raise TruncatedInstruction(pc)
        return (self._bus.read(pc) << 8) | self._bus.read(pc + 1)

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode, self._bus, self._state.pc)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._bus)

    # @intent:responsibility 外部コラボレータ向けに、メモリ全体の内容をバイト列として返します。
    def get_memory(self) -> bytes:
        return bytes(self._bus.peek(address) for address in range(self._config.memory_size))

    # @intent:responsibility 外部コラボレータ向けに、現在のレジスタ値を辞書形式で提供します。
    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        registers = {f"V{index:X}": value for index, value in enumerate(s.v)}
        registers.update({
            "I": s.i, "PC": s.pc, "SP": s.sp, "DT": s.delay_timer, "ST": s.sound_timer
        })
        return registers

    # @intent:responsibility 指定範囲のメモリを逆アセンブルします。
    def disassemble(self, start_addr: int, length: int) -> List[Tuple[int, str, str]]:
        return disassembler.disassemble(self._bus, start_addr, length)
