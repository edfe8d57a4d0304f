# src/hp45_core/__init__.py
"""
HP-45 Processor Core Package
"""
from .cpu import Hp45Cpu
from .core.state import DigitRegister, Hp45CpuState
from .transport.rom import InstructionMemory
