# tests/arch/chip8/test_disassembler.py
"""
chip8_core.arch.chip8.disassemblerモジュールの単体テスト。
"""
from chip8_core.transport.bus import Bus, RAM
from chip8_core.arch.chip8.disassembler import disassemble, PeekBus

# @intent:test_suite 逆アセンブル結果の形式と、バスアクセスログを汚さないことを検証します。

def make_bus(program, origin=0x200):
    bus = Bus()
    bus.register_device(0x000, 0xFFF, RAM(0x1000))
    for offset, byte in enumerate(program):
        bus.load(origin + offset, byte)
    return bus

def test_disassemble_program():
    bus = make_bus([0x00, 0xE0, 0x22, 0x08, 0x12, 0x00, 0xFF, 0xFF, 0xA1, 0x23, 0x00, 0xEE])
    listing = disassemble(bus, 0x200, 12)
    assert listing == [
        (0x200, "00 E0", "CLS"),
        (0x202, "22 08", "CALL $208"),
        (0x204, "12 00", "JP $200"),
        (0x206, "FF FF", "UNKNOWN $FFFF"),
        (0x208, "A1 23", "LD I, $123"),
        (0x20A, "00 EE", "RET"),
    ]

def test_disassemble_does_not_log_bus_activity():
    bus = make_bus([0xA2, 0x34])
    disassemble(bus, 0x200, 2)
    assert bus.get_and_clear_activity_log() == []

def test_trailing_odd_byte_is_skipped():
    bus = make_bus([0x00, 0xE0, 0x12])
    assert disassemble(bus, 0x200, 3) == [(0x200, "00 E0", "CLS")]

def test_stops_at_end_of_memory():
    bus = make_bus([0x00, 0xEE], origin=0xFFE)
    listing = disassemble(bus, 0xFFE, 8)
    assert listing == [(0xFFE, "00 EE", "RET")]

def test_peek_bus_discards_writes():
    bus = make_bus([0xA2, 0x34])
    PeekBus(bus).write(0x200, 0x00)
    assert bus.peek(0x200) == 0xA2
    assert bus.get_and_clear_activity_log() == []
