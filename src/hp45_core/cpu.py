# hp45_core/cpu.py
"""
HP-45プロセッサエミュレーションの中心モジュール。

命令メモリからのフェッチ、PC更新、キー状態の反映、命令タイプの判別と
各デコーダへの振り分けを担当します。1回の step() でちょうど1命令を実行します。
実行ペース（実機では1命令あたり約286us）の管理は呼び出し側の責務です。
"""
import logging
from typing import Dict

from hp45_core.core.snapshot import StateSnapshot
from hp45_core.core.state import STATUS_BITS, Hp45CpuState
from hp45_core.instructions import decode_arithmetic, execute_class_a, fragment_of
from hp45_core.instructions.base import STATUS_OK
from hp45_core.transport.rom import InstructionMemory

logger = logging.getLogger(__name__)

# @intent:constant 命令ワード下位2ビットによる命令タイプ。
TYPE_CLASS_A = 0      # ROM select/misc, status, data entry, pointer
TYPE_JSB = 1          # Jump subroutine
TYPE_ARITHMETIC = 2   # Arithmetic/register
TYPE_BRANCH = 3       # Conditional branch

# @intent:responsibility HP-45プロセッサの状態と命令サイクルの駆動を提供します。
class Hp45Cpu:
    """
    HP-45プロセッサをエミュレートするクラス。
    命令メモリは構成データとしてコンストラクタで注入されます。
    """
    # @intent:responsibility 命令メモリへの参照を保持し、状態をゼロ初期化します。
    # @intent:pre-condition `rom`は有効なInstructionMemoryである必要があります。
    def __init__(self, rom: InstructionMemory):
        self._rom = rom
        self._state: Hp45CpuState = self._create_initial_state()
        # @intent:rationale Stateオブジェクトの直接操作を避けるため、protectedな命名規則を採用。
        #                  外部からのアクセスは`get_state()`メソッドを介して行う。

    # @intent:responsibility 電源投入時の状態（全てゼロ）を生成します。
    def _create_initial_state(self) -> Hp45CpuState:
        return Hp45CpuState()

    # @intent:responsibility プロセッサをリセットし、電源投入時の状態に戻します。
    def reset(self) -> None:
        self._state = self._create_initial_state()

    def get_state(self) -> Hp45CpuState:
        return self._state

    @property
    def rom(self) -> InstructionMemory:
        return self._rom

    # --- Input Interface ---

    # @intent:responsibility キーが押されたことを通知します。キーコードをラッチします。
    # @intent:pre-condition `keycode`はHP-45固有の8ビットキーコードである必要があります。
    def key_down(self, keycode: int) -> None:
        if not 0 <= keycode <= 0xFF:
            raise ValueError(f"Key code {keycode} is not an 8-bit value.")
        self._state.key_code = keycode
        self._state.key_down = True

    # @intent:responsibility キーが離されたことを通知します。ラッチ済みのキーコードは保持されます。
    def key_up(self) -> None:
        self._state.key_down = False

    # --- Execution Engine ---

    # @intent:responsibility 現在のPCから命令ワードをフェッチします。
    def _fetch(self) -> int:
        return self._rom.read(self._state.pc)

    # @intent:responsibility 1命令を実行し、ステータスコード（成功0、未定義命令は負値）を返します。
    # @intent:flow フェッチ -> PCオフセット更新 -> キー状態反映 -> タイプ判別 -> 実行 の順序で処理を行います。
    def step(self) -> int:
        """
        1ワードサイクル分を実行します。
        PCの更新とキャリーのクリアは命令の効果より先に確定し、
        未定義命令の場合もロールバックされません。
        """
        state = self._state
        address = state.pc
        opcode = self._fetch()

        # オフセットのみ8ビットで折り返す。ページは変化しない
        state.offset = state.offset + 1
        state.set_flag(0, state.key_down)

        op_type = opcode & 0x03
        if op_type == TYPE_BRANCH:
            # 分岐のみ、判定後にキャリーをクリアする
            if not state.carry:
                state.offset = fragment_of(opcode)
            state.carry = False
            return STATUS_OK

        state.carry = False
        if op_type == TYPE_JSB:
            state.return_address = state.offset
            state.offset = fragment_of(opcode)
            return STATUS_OK

        if op_type == TYPE_ARITHMETIC:
            result = decode_arithmetic(state, fragment_of(opcode))
        else:
            result = execute_class_a(state, opcode)

        if result != STATUS_OK:
            logger.debug("Undefined instruction %#05o at %#05x (status %d)", opcode, address, result)
        return result

    # --- Snapshot ---

    # @intent:responsibility 現在の状態の不変コピーを返します。
    def snapshot(self) -> StateSnapshot:
        return StateSnapshot.capture(self._state)

    # @intent:responsibility スナップショットから状態を復元します。命令メモリは変更しません。
    def restore(self, snapshot: StateSnapshot) -> None:
        self._state = snapshot.to_state()

    # --- Observation ---

    # @intent:responsibility 現在のレジスタ値を14桁の文字列として辞書形式で提供します。
    def get_register_map(self) -> Dict[str, str]:
        s = self._state
        return {
            "A": s.a.to_digits(), "B": s.b.to_digits(), "C": s.c.to_digits(),
            "D": s.d.to_digits(), "E": s.e.to_digits(), "F": s.f.to_digits(),
            "M": s.m.to_digits(),
        }

    # @intent:responsibility キャリー、表示、キー状態とステータスビットを辞書形式で提供します。
    def get_flag_state(self) -> Dict[str, bool]:
        s = self._state
        flags = {"CY": s.carry, "DISP": s.display_on, "KEY": s.key_down}
        for n in range(STATUS_BITS):
            flags[f"S{n}"] = s.get_flag(n)
        return flags
