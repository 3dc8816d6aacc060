# tests/config/test_config.py
"""
chip8_core.configパッケージ（ConfigLoader, SystemBuilder）の単体テスト。
"""
import pytest

from chip8_core.config.loader import ConfigLoader
from chip8_core.config.builder import SystemBuilder
from chip8_core.config.models import MachineConfig, CpuInitialState

# @intent:test_suite YAML設定の解析と、設定に基づくシステム構築を検証します。

class TestConfigLoader:
    def test_defaults_for_empty_document(self):
        config = ConfigLoader().load_from_string("")
        assert config == MachineConfig()
        assert config.load_address == 0x000
        assert config.memory_size == 0x1000
        assert config.stack_depth == 16
        assert config.max_cycles is None

    def test_load_from_file(self, tmp_path):
        yaml_content = """
load_address: 0x200
stack_depth: 12
max_cycles: "1000"
initial_state:
  i: "0x300"
  delay_timer: 60
  registers:
    v0: 0x12
    VF: 1
"""
        path = tmp_path / "machine.yaml"
        path.write_text(yaml_content)

        config = ConfigLoader().load_from_file(str(path))

        assert config.load_address == 0x200
        assert config.stack_depth == 12
        assert config.max_cycles == 1000
        assert config.initial_state.i == 0x300
        assert config.initial_state.delay_timer == 60
        assert config.initial_state.registers == {"V0": 0x12, "VF": 1}

    @pytest.mark.parametrize("text, message", [
        ("memory_size: 0x2000", "memory_size"),
        ("load_address: 0x1000", "load_address"),
        ("stack_depth: -1", "stack_depth"),
        ("max_cycles: -5", "max_cycles"),
        ("load_address: [1, 2]", "Invalid integer format"),
        ("- just\n- a list", "must be a mapping"),
        ("initial_state: [1, 2]", "initial_state must be a mapping, got list"),
        ("initial_state: 5", "initial_state must be a mapping, got int"),
        ("initial_state:\n  registers: 5", "initial_state.registers must be a mapping, got int"),
        ("initial_state:\n  registers: [V0, V1]", "initial_state.registers must be a mapping, got list"),
    ])
    def test_invalid_values(self, text, message):
        with pytest.raises(ValueError, match=message):
            ConfigLoader().load_from_string(text)


class TestSystemBuilder:
    def test_build_default_system(self):
        cpu, bus = SystemBuilder().build_system()
        assert bus.is_mapped(0xFFF)
        assert not bus.is_mapped(0x1000)
        assert cpu.get_state().stack_depth == 16
        assert cpu.get_config() == MachineConfig()

    def test_initial_state_is_applied(self):
        config = MachineConfig(
            stack_depth=4,
            initial_state=CpuInitialState(i=0x300, sound_timer=5, registers={"V3": 0x1FF, "VF": 1})
        )
        cpu, _ = SystemBuilder().build_system(config)

        state = cpu.get_state()
        assert state.i == 0x300
        assert state.sound_timer == 5
        assert state.v[3] == 0xFF
        assert state.v[0xF] == 1
        assert state.stack_depth == 4

    def test_unknown_register_warns(self):
        config = MachineConfig(initial_state=CpuInitialState(registers={"A": 1, "V10": 2}))
        with pytest.warns(UserWarning, match="Unknown register"):
            cpu, _ = SystemBuilder().build_system(config)
        assert cpu.get_state().v == [0] * 16

    def test_small_memory(self):
        cpu, bus = SystemBuilder().build_system(MachineConfig(memory_size=0x100))
        assert len(cpu.get_memory()) == 0x100
        with pytest.raises(ValueError, match="does not fit"):
            cpu.execute(bytes(0x102))
