import logging

from hp45_core.core.state import PC_MASK, POINTER_MASK, DigitRegister, Hp45CpuState
from hp45_core.cpu import Hp45Cpu
from hp45_core.loader.loader import ROM_FORMATS, RomImageLoader
from hp45_core.transport.rom import InstructionMemory
from .models import MachineConfig, InitialState

logger = logging.getLogger(__name__)

# 初期状態で値を設定できるレジスタ名
REGISTER_NAMES = ("a", "b", "c", "d", "e", "f", "m")

# @intent:responsibility マシン構成（Config）に基づいて、命令メモリとCPUを生成し、初期状態を適用します。
class MachineBuilder:
    def build(self, config: MachineConfig) -> Hp45Cpu:
        if config.rom is None:
            rom = InstructionMemory.blank()
        else:
            if config.rom.format not in ROM_FORMATS:
                raise ValueError(f"Unsupported ROM image format: {config.rom.format}")
            rom = RomImageLoader().load(config.rom.path, config.rom.format)
            logger.info("Loaded %s ROM image from %s", config.rom.format, config.rom.path)

        cpu = Hp45Cpu(rom)
        self.apply_initial_state(cpu, config.initial_state)
        return cpu

    # @intent:responsibility Configで定義された初期状態をCPUに適用します。
    # @intent:rationale 各値はハードウェアのビット幅に収まるかを検証し、不正な設定は例外で通知します。
    def apply_initial_state(self, cpu: Hp45Cpu, config_state: InitialState) -> None:
        """
        CPUをリセットし、Configから指定された初期値を適用します。
        """
        cpu.reset()
        state: Hp45CpuState = cpu.get_state()

        if not 0 <= config_state.pc <= PC_MASK:
            raise ValueError(f"Initial PC {config_state.pc:#x} does not fit in 11 bits")
        if not 0 <= config_state.p <= POINTER_MASK:
            raise ValueError(f"Initial pointer {config_state.p} does not fit in 4 bits")
        if not 0 <= config_state.key_code <= 0xFF:
            raise ValueError(f"Initial key code {config_state.key_code} is not an 8-bit value")

        state.pc = config_state.pc
        state.p = config_state.p
        state.key_code = config_state.key_code
        state.display_on = config_state.display_on

        for reg_name, digits in config_state.registers.items():
            if reg_name not in REGISTER_NAMES:
                raise ValueError(f"Unknown register in initial state: {reg_name}")
            getattr(state, reg_name).copy_from(DigitRegister.from_digits(digits))
