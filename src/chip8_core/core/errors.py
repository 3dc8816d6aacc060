# chip8_core/core/errors.py
"""
実行時フォルトの定義。

命令サイクル中に発生した回復不能な状態は、ホストプロセスを停止させるのではなく
ExecutionFaultのサブクラスとして送出されます。CPU.execute()はこれを捕捉し、
ExecutionResultとして呼び出し元に返します。
"""
from chip8_core.core.snapshot import HaltReason


# @intent:responsibility 命令実行中のフォルトの基底クラスです。フォルトを起こした命令のアドレスを保持します。
class ExecutionFault(Exception):
    """
    命令実行中に発生したフォルトの基底クラス。
    サブクラスはクラス属性reasonで対応するHaltReasonを示します。
    """

    reason: HaltReason

    def __init__(self, message: str, address: int):
        super().__init__(message)
        self.address = address


# @intent:responsibility PCの位置に2バイトの命令が残っていない状態を表します。
class TruncatedInstruction(ExecutionFault):
    """プログラム領域の末尾に1バイトだけ残っている場合に送出されます。"""

    reason = HaltReason.TRUNCATED_INSTRUCTION

    def __init__(self, address: int):
        super().__init__(f"Truncated instruction at {address:#05x}", address)


# @intent:responsibility コールスタックが空の状態でのRETを表します。
class StackUnderflow(ExecutionFault):
    reason = HaltReason.STACK_UNDERFLOW

    def __init__(self, address: int):
        super().__init__(f"RET with empty call stack at {address:#05x}", address)


# @intent:responsibility コールスタックが満杯の状態でのCALLを表します。
class StackOverflow(ExecutionFault):
    """
    stack_depthに達したスタックへCALLしようとした場合に送出されます。
    depthには制限値を保持します。
    """

    reason = HaltReason.STACK_OVERFLOW

    def __init__(self, address: int, depth: int):
        super().__init__(f"CALL exceeds stack depth {depth} at {address:#05x}", address)
        self.depth = depth


# @intent:responsibility ハンドラが存在しない命令を表します。
# @intent:rationale 「プログラム終了」と区別できるよう、生の命令ワードを保持します。
class UnimplementedOpcode(ExecutionFault):
    """デコードされた命令に実行関数が登録されていない場合に送出されます。"""

    reason = HaltReason.UNIMPLEMENTED_OPCODE

    def __init__(self, word: int, address: int):
        super().__init__(f"Unimplemented opcode {word:04X} at {address:#05x}", address)
        self.word = word
