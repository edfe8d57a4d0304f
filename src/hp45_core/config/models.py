from dataclasses import dataclass, field
from typing import Dict, Optional

@dataclass
class RomConfig:
    path: str
    format: str = "text"  # "text", "binary"

@dataclass
class InitialState:
    pc: int = 0x000
    p: int = 0
    key_code: int = 0x00
    display_on: bool = False
    registers: Dict[str, str] = field(default_factory=dict)  # name -> 14 digits, MSD first

@dataclass
class MachineConfig:
    rom: Optional[RomConfig] = None  # None: blank instruction memory
    initial_state: InitialState = field(default_factory=InitialState)
