import warnings
from typing import Optional, Tuple
from chip8_core.transport.bus import Bus, RAM
from chip8_core.arch.chip8.cpu import Chip8Cpu
from chip8_core.arch.chip8.state import REGISTER_COUNT
from .models import MachineConfig, CpuInitialState

# @intent:responsibility マシン構成（Config）に基づいて、Bus、RAM、CPUを生成・接続し、初期状態を適用します。
class SystemBuilder:
    def build_system(self, config: Optional[MachineConfig] = None) -> Tuple[Chip8Cpu, Bus]:
        config = config or MachineConfig()
        bus = Bus()
        bus.register_device(0x000, config.memory_size - 1, RAM(config.memory_size))

        cpu = Chip8Cpu(bus, config)

        # 初期状態の適用
        self.apply_initial_state(cpu, config.initial_state)

        return cpu, bus

    # @intent:responsibility Configで定義された初期状態をCPUに適用します。
    def apply_initial_state(self, cpu: Chip8Cpu, config_state: CpuInitialState):
        """
        CPUをリセットし、Configから指定された初期値を適用します。
        V0..VF以外のレジスタ名は警告を出して無視します。
        """
        cpu.reset()
        state = cpu.get_state()

        state.i = config_state.i & 0xFFFF
        state.delay_timer = config_state.delay_timer & 0xFF
        state.sound_timer = config_state.sound_timer & 0xFF

        for reg_name, value in config_state.registers.items():
            index = self._register_index(reg_name)
            if index is None:
                warnings.warn(f"Unknown register '{reg_name}' in initial_state, ignored")
                continue
            state.v[index] = value & 0xFF

    def _register_index(self, reg_name: str):
        name = reg_name.upper()
        if len(name) != 2 or name[0] != "V":
            return None
        try:
            index = int(name[1], 16)
        except ValueError:
            return None
        return index if index < REGISTER_COUNT else None
