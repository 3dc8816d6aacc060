# tests/core/test_snapshot.py
"""
chip8_core.core.snapshotモジュールの単体テスト。
"""
import pytest
from chip8_core.core.state import CpuState
from chip8_core.core.snapshot import (
    Operation,
    Metadata,
    Snapshot,
    HaltReason,
    ExecutionResult,
)
from chip8_core.transport.bus import BusAccess, BusAccessType

# @intent:test_suite 命令サイクルと実行結果を記録する不変データ構造の検証。

class TestOperation:
    def test_operation_defaults(self):
        op = Operation(opcode_hex="00E0", mnemonic="CLS")
        assert op.operands == []
        assert op.operand_bytes == []
        assert op.cycle_count == 1
        assert op.length == 2

    # @intent:test_case_immutability Operationが不変であることを検証します。
    def test_operation_immutability(self):
        op = Operation(opcode_hex="1234", mnemonic="JP", operands=["$234"])
        with pytest.raises(AttributeError):
            op.mnemonic = "CALL"


class TestSnapshot:
    def test_snapshot_init(self):
        state = CpuState(pc=0x0002)
        access = BusAccess(address=0x0000, data=0xA2, access_type=BusAccessType.READ)
        snapshot = Snapshot(
            state=state,
            operation=Operation("A234", "LD", ["I", "$234"]),
            metadata=Metadata(cycle_count=1, symbol_info="LD I, $234"),
            bus_activity=[access]
        )
        assert snapshot.state.pc == 0x0002
        assert snapshot.metadata.symbol_info == "LD I, $234"
        assert snapshot.bus_activity == [access]
        with pytest.raises(AttributeError):
            snapshot.state = CpuState()


class TestExecutionResult:
    # @intent:test_case_finished 正常終了と未実装命令による停止を区別できることを検証します。
    def test_finished_only_for_end_of_program(self):
        done = ExecutionResult(reason=HaltReason.END_OF_PROGRAM, state=CpuState(), cycles=3)
        assert done.finished
        assert done.fault is None
        assert done.trace == []

        stopped = ExecutionResult(reason=HaltReason.UNIMPLEMENTED_OPCODE, state=CpuState(), cycles=1)
        assert not stopped.finished


class TestCpuState:
    def test_copy_is_independent(self):
        state = CpuState(pc=0x0200)
        copied = state.copy()
        copied.pc = 0x0300
        assert state.pc == 0x0200
