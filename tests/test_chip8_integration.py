from chip8_core.config.loader import ConfigLoader
from chip8_core.config.builder import SystemBuilder
from chip8_core.core.snapshot import HaltReason

MACHINE_YAML = """
load_address: 0x200
stack_depth: 16
max_cycles: 1000
initial_state:
  registers:
    VF: 1
"""

def test_chip8_execution():
    config = ConfigLoader().load_from_string(MACHINE_YAML)
    cpu, bus = SystemBuilder().build_system(config)

    # Pre-light the display so CLS has something to clear
    display = cpu.get_state().display
    for index in range(0, len(display), 3):
        display[index] = 0x01

    # Program:
    # 0200: 00 E0 (CLS)
    # 0202: 22 0A (CALL $20A)
    # 0204: 01 23 (SYS $123) -> ignored
    # 0206: 12 10 (JP $210)  -> leaves the program
    # 0208: FF FF            -> never reached
    # Subroutine at $020A
    # 020A: A3 00 (LD I, $300)
    # 020C: 22 0E (CALL $20E)
    # 020E: 00 EE (RET)      -> first from nested call, then from $20A's call
    program = [
        0x00, 0xE0,
        0x22, 0x0A,
        0x01, 0x23,
        0x12, 0x10,
        0xFF, 0xFF,
        0xA3, 0x00,
        0x22, 0x0E,
        0x00, 0xEE,
    ]

    result = cpu.execute(program, trace=True)

    assert result.reason == HaltReason.END_OF_PROGRAM
    assert result.fault is None

    state = cpu.get_state()
    assert state.pc == 0x210
    assert state.i == 0x300
    assert state.stack == []
    assert state.v[0xF] == 1
    assert not any(state.display)

    mnemonics = [s.operation.mnemonic for s in result.trace]
    assert mnemonics == ["CLS", "CALL", "LD", "CALL", "RET", "RET", "SYS", "JP"]
    assert [s.state.sp for s in result.trace] == [0, 1, 1, 2, 1, 0, 0, 0]

    listing = cpu.disassemble(0x200, len(program))
    assert listing[1] == (0x202, "22 0A", "CALL $20A")
    assert listing[4] == (0x208, "FF FF", "UNKNOWN $FFFF")
