# tests/config/test_config.py
"""
hp45_core.configパッケージ（YAML設定の読み込みとマシン構築）の単体テスト。
"""
import logging

import pytest

from hp45_core.config.builder import MachineBuilder
from hp45_core.config.loader import ConfigLoader
from hp45_core.config.models import InitialState, MachineConfig, RomConfig

# @intent:test_suite 設定ファイルからCPUを構築し、初期状態が反映されることを検証します。

YAML_CONTENT = """
rom:
  path: hp45.rom
  format: text
initial_state:
  pc: 0x1A0
  p: "13"
  key_code: "0x24"
  display_on: true
  registers:
    C: "01234567890123"
    m: 12345678901234
"""


class TestConfigLoader:
    def test_parse_from_string(self):
        config = ConfigLoader().load_from_string(YAML_CONTENT)
        assert config.rom == RomConfig(path="hp45.rom", format="text")
        assert config.initial_state.pc == 0x1A0
        assert config.initial_state.p == 13
        assert config.initial_state.key_code == 0x24
        assert config.initial_state.display_on is True
        assert config.initial_state.registers == {
            "c": "01234567890123",
            "m": "12345678901234",
        }

    def test_empty_document_uses_defaults(self):
        config = ConfigLoader().load_from_string("")
        assert config == MachineConfig()

    def test_rom_path_relative_to_config_file(self, tmp_path):
        config_file = tmp_path / "machine.yaml"
        config_file.write_text(YAML_CONTENT)
        config = ConfigLoader().load_from_file(str(config_file))
        assert config.rom.path == str(tmp_path / "hp45.rom")

    def test_rom_without_path_rejected(self):
        with pytest.raises(ValueError, match="path"):
            ConfigLoader().load_from_string("rom:\n  format: binary\n")

    def test_non_mapping_rejected(self):
        with pytest.raises(ValueError, match="mapping"):
            ConfigLoader().load_from_string("- 1\n- 2\n")

    @pytest.mark.parametrize("document", [
        "initial_state:\n",
        "initial_state:\n  registers:\n",
        "rom:\ninitial_state:\n  pc: 0\n",
    ])
    def test_empty_sections_use_defaults(self, document):
        config = ConfigLoader().load_from_string(document)
        assert config == MachineConfig()

    @pytest.mark.parametrize("document", [
        "rom: rompath.txt\n",
        "rom: [hp45.rom]\n",
        "initial_state: 5\n",
        "initial_state:\n  registers: [c]\n",
        "initial_state:\n  registers: abc\n",
    ])
    def test_malformed_sections_rejected(self, document):
        with pytest.raises(ValueError, match="mapping"):
            ConfigLoader().load_from_string(document)

    @pytest.mark.parametrize("value", ["true", "[1, 2]", "abc"])
    def test_invalid_integer_rejected(self, value):
        with pytest.raises(ValueError):
            ConfigLoader().load_from_string(f"initial_state:\n  pc: {value}\n")


class TestMachineBuilder:
    def test_build_with_blank_rom(self):
        cpu = MachineBuilder().build(MachineConfig())
        assert cpu.rom.read(0) == 0
        assert cpu.get_state().pc == 0

    def test_build_from_config_file(self, tmp_path, caplog):
        (tmp_path / "hp45.rom").write_text("0x000\n" * 0x1A0 + "0x34c, 0x1d8\n")
        config_file = tmp_path / "machine.yaml"
        config_file.write_text(YAML_CONTENT)

        with caplog.at_level(logging.INFO, logger="hp45_core.config.builder"):
            cpu = MachineBuilder().build(ConfigLoader().load_from_file(str(config_file)))
        assert "Loaded text ROM image" in caplog.text

        state = cpu.get_state()
        assert state.pc == 0x1A0
        assert state.p == 13
        assert state.key_code == 0x24
        assert state.display_on is True
        assert state.c.to_digits() == "01234567890123"
        assert state.m.to_digits() == "12345678901234"

        # set pointer 13, load constant 7
        cpu.step()
        cpu.step()
        assert state.c[13] == 7
        assert state.p == 12

    def test_build_with_binary_rom(self, tmp_path):
        (tmp_path / "hp45.bin").write_bytes(bytes([0x02, 0xAB]))
        config = MachineConfig(rom=RomConfig(path=str(tmp_path / "hp45.bin"), format="binary"))
        cpu = MachineBuilder().build(config)
        assert cpu.rom.read(0) == 0x2AB

    def test_unsupported_rom_format(self):
        config = MachineConfig(rom=RomConfig(path="hp45.hex", format="ihex"))
        with pytest.raises(ValueError, match="Unsupported"):
            MachineBuilder().build(config)

    @pytest.mark.parametrize("initial_state", [
        InitialState(pc=0x800),
        InitialState(p=16),
        InitialState(key_code=0x100),
        InitialState(registers={"x": "00000000000000"}),
        InitialState(registers={"a": "123"}),
    ])
    def test_invalid_initial_state(self, initial_state):
        with pytest.raises(ValueError):
            MachineBuilder().build(MachineConfig(initial_state=initial_state))

    def test_apply_initial_state_resets_cpu(self):
        builder = MachineBuilder()
        cpu = builder.build(MachineConfig())
        cpu.get_state().status = 0xFFF
        builder.apply_initial_state(cpu, InitialState(pc=0x010))
        assert cpu.get_state().status == 0
        assert cpu.get_state().pc == 0x010
