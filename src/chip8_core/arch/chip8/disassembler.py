"""
CHIP-8 Disassembler

メモリ上のバイナリデータを解析し、CHIP-8のアセンブリ言語（ニーモニック）に変換します。
Instruction Layerのデコードロジックを再利用しますが、バスアクセスログを汚さないように
PeekBusラッパーを使用します。
"""
from typing import List, Tuple
from chip8_core.transport.bus import Bus
from chip8_core.arch.chip8.instructions import decode_opcode

# @intent:utility_class バスへのアクセスをPeek（ログなし読み込み）に変換するラッパーです。
class PeekBus:
    """
    Busのラッパー。readメソッドをpeek（ログなし読み込み）にリダイレクトします。
    """
    def __init__(self, bus: Bus):
        self._bus = bus

    def read(self, address: int) -> int:
        return self._bus.peek(address)

    # @intent:rationale デコーダはBusと同じインターフェースを期待するため保持します。
    #                  メモリ書き込み命令が追加されても、逆アセンブル中の書き込みは破棄されます。
    def write(self, address: int, data: int) -> None:
        pass

# @intent:responsibility 指定されたメモリ範囲を逆アセンブルし、表示用データを生成します。
def disassemble(bus: Bus, start_addr: int, length: int) -> List[Tuple[int, str, str]]:
    """
    指定された範囲のメモリを2バイト単位で逆アセンブルします。
    範囲の末尾に1バイトだけ残る場合、またはマップされていないアドレスに達した場合はそこで終了します。

    Returns:
        List of (address, hex_bytes, mnemonic) tuples.
    """
    result = []
    current_addr = start_addr
    end_addr = start_addr + length
    peek_bus = PeekBus(bus)

    while current_addr + 1 < end_addr:
        if not (bus.is_mapped(current_addr) and bus.is_mapped(current_addr + 1)):
            break

        high = peek_bus.read(current_addr)
        low = peek_bus.read(current_addr + 1)
        opcode = (high << 8) | low

        operation = decode_opcode(opcode, peek_bus, current_addr)

        hex_bytes = f"{high:02X} {low:02X}"

        mnemonic_str = operation.mnemonic
        if operation.operands:
            mnemonic_str += " " + ", ".join(operation.operands)

        result.append((current_addr, hex_bytes, mnemonic_str))
        current_addr += operation.length

    return result
