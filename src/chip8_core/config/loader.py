import yaml
from typing import Dict, Any, Optional
from chip8_core.arch.chip8.state import MEMORY_SIZE, STACK_DEPTH
from .models import MachineConfig, CpuInitialState

class ConfigLoader:
    def load_from_file(self, path: str) -> MachineConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def load_from_string(self, text: str) -> MachineConfig:
        return self._parse_config(yaml.safe_load(text) or {})

    def _parse_config(self, data: Dict[str, Any]) -> MachineConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Machine config must be a mapping, got {type(data).__name__}")

        memory_size = self._parse_int(data.get("memory_size", MEMORY_SIZE))
        if not 0 < memory_size <= MEMORY_SIZE:
            raise ValueError(f"memory_size must be in 1..{MEMORY_SIZE:#x}: {memory_size:#x}")

        load_address = self._parse_int(data.get("load_address", 0))
        if not 0 <= load_address < memory_size:
            raise ValueError(f"load_address {load_address:#x} outside memory of size {memory_size:#x}")

        stack_depth = self._parse_int(data.get("stack_depth", STACK_DEPTH))
        if stack_depth < 0:
            raise ValueError(f"stack_depth must be >= 0: {stack_depth}")

        max_cycles = self._parse_optional_int(data.get("max_cycles"))
        if max_cycles is not None and max_cycles < 0:
            raise ValueError(f"max_cycles must be >= 0: {max_cycles}")

        # Parse Initial State
        initial_state_data = data.get("initial_state") or {}
        if not isinstance(initial_state_data, dict):
            raise ValueError(f"initial_state must be a mapping, got {type(initial_state_data).__name__}")
        registers_data = initial_state_data.get("registers") or {}
        if not isinstance(registers_data, dict):
            raise ValueError(f"initial_state.registers must be a mapping, got {type(registers_data).__name__}")
        registers = {
            str(name).upper(): self._parse_int(value)
            for name, value in registers_data.items()
        }
        initial_state = CpuInitialState(
            i=self._parse_int(initial_state_data.get("i", 0)),
            delay_timer=self._parse_int(initial_state_data.get("delay_timer", 0)),
            sound_timer=self._parse_int(initial_state_data.get("sound_timer", 0)),
            registers=registers
        )

        return MachineConfig(
            load_address=load_address,
            memory_size=memory_size,
            stack_depth=stack_depth,
            max_cycles=max_cycles,
            initial_state=initial_state
        )

    def _parse_optional_int(self, value: Any) -> Optional[int]:
        if value is None:
            return None
        return self._parse_int(value)

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
