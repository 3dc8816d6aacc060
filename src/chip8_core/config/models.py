from dataclasses import dataclass, field
from typing import Dict, Optional

from chip8_core.arch.chip8.state import MEMORY_SIZE, STACK_DEPTH

@dataclass
class CpuInitialState:
    i: int = 0x0000
    delay_timer: int = 0x00
    sound_timer: int = 0x00
    registers: Dict[str, int] = field(default_factory=dict)  # {"V0": 0x12, ...}

@dataclass
class MachineConfig:
    load_address: int = 0x000  # 0x200 for the conventional layout
    memory_size: int = MEMORY_SIZE
    stack_depth: int = STACK_DEPTH  # 0 = unbounded
    max_cycles: Optional[int] = None  # None = run until halt
    initial_state: CpuInitialState = field(default_factory=CpuInitialState)
