import os
import yaml
from typing import Dict, Any
from .models import MachineConfig, RomConfig, InitialState

class ConfigLoader:
    def load_from_file(self, path: str) -> MachineConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        config = self._parse_config(data or {})
        # ROMのパスは設定ファイルからの相対パスとして解決する
        if config.rom and not os.path.isabs(config.rom.path):
            config.rom.path = os.path.join(os.path.dirname(os.path.abspath(path)), config.rom.path)
        return config

    def load_from_string(self, text: str) -> MachineConfig:
        return self._parse_config(yaml.safe_load(text) or {})

    def _parse_config(self, data: Dict[str, Any]) -> MachineConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Machine configuration must be a mapping, got {type(data).__name__}")

        rom = None
        rom_data = data.get("rom")
        if rom_data is not None:
            if not isinstance(rom_data, dict):
                raise ValueError(f"ROM configuration must be a mapping, got {type(rom_data).__name__}")
            if "path" not in rom_data:
                raise ValueError("ROM configuration requires a 'path'")
            rom = RomConfig(
                path=str(rom_data["path"]),
                format=rom_data.get("format", "text")
            )

        # Parse Initial State
        # 空のキー（"initial_state:" のみ）はNoneとして読まれるため既定値として扱う
        initial_state_data = data.get("initial_state") or {}
        if not isinstance(initial_state_data, dict):
            raise ValueError(f"initial_state must be a mapping, got {type(initial_state_data).__name__}")
        registers_data = initial_state_data.get("registers") or {}
        if not isinstance(registers_data, dict):
            raise ValueError(f"registers must be a mapping, got {type(registers_data).__name__}")
        registers = {}
        for name, value in registers_data.items():
            # 整数で書かれた値は14桁にゼロ埋めする。先頭0を含む値は文字列で書く必要がある
            if isinstance(value, int) and not isinstance(value, bool):
                value = f"{value:014d}"
            registers[str(name).lower()] = str(value)
        initial_state = InitialState(
            pc=self._parse_int(initial_state_data.get("pc", 0)),
            p=self._parse_int(initial_state_data.get("p", 0)),
            key_code=self._parse_int(initial_state_data.get("key_code", 0)),
            display_on=bool(initial_state_data.get("display_on", False)),
            registers=registers
        )

        return MachineConfig(rom=rom, initial_state=initial_state)

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
