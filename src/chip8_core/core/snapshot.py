# chip8_core/core/snapshot.py
"""
実行状態の不変スナップショット

このモジュールは、1命令サイクルごとのCPUとバスの状態、および
execute()全体の実行結果を記録する不変のデータ構造を定義します。
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TYPE_CHECKING

from chip8_core.core.state import CpuState
from chip8_core.transport.bus import BusAccess

if TYPE_CHECKING:
    from chip8_core.core.errors import ExecutionFault


# @intent:responsibility デコードされた命令の詳細を記録します。
@dataclass(frozen=True)
class Operation:
    """
    デコードされた命令の詳細（HEX、ニーモニック、オペランド）を記録するデータクラス。
    """
    opcode_hex: str # 例: "A234"
    mnemonic: str # 例: "LD"
    operands: List[str] = field(default_factory=list) # 例: ["I", "$234"]
    operand_bytes: List[int] = field(default_factory=list)
    cycle_count: int = 1
    length: int = 2 # CHIP-8の命令は常に2バイト

# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True)
class Metadata:
    """
    実行に関するメタデータ（累計サイクル数、シンボル情報など）を記録するデータクラス。
    """
    cycle_count: int
    symbol_info: Optional[str] = None # 例: "main: CALL $206"

# @intent:responsibility ある一時点におけるCPUとバスの完全な状態を不変に記録します。
@dataclass(frozen=True)
class Snapshot:
    """
    1命令サイクル実行直後の、CPUとバスの状態を記録した不変のデータ構造。
    stateはCPUが保持する状態のコピーであり、以降の実行で変化しません。
    """
    state: CpuState
    operation: Operation
    metadata: Metadata
    bus_activity: List[BusAccess] = field(default_factory=list)

# @intent:responsibility execute()が停止した理由を区別します。
# @intent:rationale 「プログラムの終端に到達した」と「未実装命令で停止した」を呼び出し側が判別できるようにします。
class HaltReason(Enum):
    END_OF_PROGRAM = "END_OF_PROGRAM"
    UNIMPLEMENTED_OPCODE = "UNIMPLEMENTED_OPCODE"
    TRUNCATED_INSTRUCTION = "TRUNCATED_INSTRUCTION"
    STACK_UNDERFLOW = "STACK_UNDERFLOW"
    STACK_OVERFLOW = "STACK_OVERFLOW"
    CYCLE_LIMIT = "CYCLE_LIMIT"

# @intent:responsibility execute()一回分の実行結果を記録します。
@dataclass(frozen=True)
class ExecutionResult:
    """
    execute()の戻り値。停止理由、停止時の状態、発生した例外（あれば）を保持します。
    traceはexecute(trace=True)の場合のみ、各命令サイクルのSnapshotを保持します。
    """
    reason: HaltReason
    state: CpuState
    cycles: int
    fault: Optional["ExecutionFault"] = None
    trace: List[Snapshot] = field(default_factory=list)

    @property
    def finished(self) -> bool:
        """プログラム領域の終端に到達して正常に停止した場合にTrueを返します。"""
        return self.reason == HaltReason.END_OF_PROGRAM
