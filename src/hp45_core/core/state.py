# hp45_core/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、HP-45プロセッサのアーキテクチャ状態（レジスタファイル、
カウンタ、フラグ）を保持するデータ構造を定義します。振る舞いは持ちません。
"""
from dataclasses import dataclass, field
from typing import List

# @intent:constant レジスタ1本あたりの桁（ニブル）数。
DIGITS = 14
# @intent:constant 補助データ記憶回路のレジスタ本数。
RAM_SIZE = 10
# @intent:constant プログラマブルなステータスフラグの本数。
STATUS_BITS = 12

PC_MASK = 0x7FF      # 11-bit program counter
PAGE_MASK = 0x700    # bits 8-10
OFFSET_MASK = 0x0FF  # bits 0-7
POINTER_MASK = 0x0F  # 4-bit pointer


# @intent:responsibility 14桁のBCDレジスタ（指数2桁、指数符号、仮数10桁、仮数符号）を表現します。
@dataclass
class DigitRegister:
    """
    14個の桁セルを持つBCDレジスタ。
    インデックス0が最下位（指数）、13が最上位（仮数の符号）です。
    """
    nibbles: List[int] = field(default_factory=lambda: [0] * DIGITS)

    # @intent:responsibility 最上位桁から書かれた14文字の数字列からレジスタを生成します。
    # @intent:pre-condition `digits`は0-9のみからなる14文字の文字列である必要があります。
    @classmethod
    def from_digits(cls, digits: str) -> "DigitRegister":
        """
        "00000000000000" 形式（最上位桁が先頭）の文字列からレジスタを生成します。
        """
        if len(digits) != DIGITS or not all(ch in "0123456789" for ch in digits):
            raise ValueError(f"Register value must be {DIGITS} decimal digits: {digits!r}")
        return cls([int(ch) for ch in reversed(digits)])

    # @intent:responsibility レジスタの内容を最上位桁が先頭の文字列として返します。
    def to_digits(self) -> str:
        return "".join(str(d) for d in reversed(self.nibbles))

    def clear(self) -> None:
        for i in range(DIGITS):
            self.nibbles[i] = 0

    # @intent:responsibility 他のレジスタの全桁をコピーします（フィールド指定なしの全体転送）。
    def copy_from(self, other: "DigitRegister") -> None:
        self.nibbles[:] = other.nibbles

    def __getitem__(self, index: int) -> int:
        return self.nibbles[index]

    def __setitem__(self, index: int, value: int) -> None:
        self.nibbles[index] = value

    def __str__(self) -> str:
        return self.to_digits()


# @intent:responsibility HP-45プロセッサの全てのレジスタ、カウンタ、フラグの状態を保持します。
# @intent:rationale 初期値は全てゼロとする。これが実機の電源投入（リセット）状態です。
@dataclass
class Hp45CpuState:
    """
    HP-45プロセッサのアーキテクチャ状態を保持するデータクラス。
    """
    a: DigitRegister = field(default_factory=DigitRegister)  # General purpose
    b: DigitRegister = field(default_factory=DigitRegister)  # General purpose / display mask
    c: DigitRegister = field(default_factory=DigitRegister)  # X register, path to RAM and M
    d: DigitRegister = field(default_factory=DigitRegister)  # Stack Y
    e: DigitRegister = field(default_factory=DigitRegister)  # Stack Z
    f: DigitRegister = field(default_factory=DigitRegister)  # Stack T
    m: DigitRegister = field(default_factory=DigitRegister)  # Scratchpad, C only
    ram: List[DigitRegister] = field(default_factory=lambda: [DigitRegister() for _ in range(RAM_SIZE)])

    pc: int = 0x000            # 11-bit program counter (page:offset)
    status: int = 0x000        # 12 status bits, bit 0 mirrors key-down
    return_address: int = 0x00 # Offset only; the page is not saved
    p: int = 0x0               # 4-bit pointer
    key_code: int = 0x00
    data_address: int = 0      # Auxiliary storage bank select
    word_select: int = 0       # Field of the current arithmetic instruction
    carry: bool = False
    key_down: bool = False
    display_on: bool = False

    # @intent:accessor PCのページ部（ビット8-10）とオフセット部（ビット0-7）にアクセスするプロパティ。
    # @intent:rationale ROMセレクトや分岐はどちらか一方だけを書き換えるため、ビット操作を隠蔽します。

    @property
    def page(self) -> int:
        return (self.pc & PAGE_MASK) >> 8

    @page.setter
    def page(self, value: int) -> None:
        self.pc = ((value << 8) & PAGE_MASK) | (self.pc & OFFSET_MASK)

    @property
    def offset(self) -> int:
        return self.pc & OFFSET_MASK

    @offset.setter
    def offset(self, value: int) -> None:
        self.pc = (self.pc & PAGE_MASK) | (value & OFFSET_MASK)

    # @intent:accessor ステータスワードの各ビットにアクセスします。
    # @intent:pre-condition `n`は0からSTATUS_BITS-1の範囲である必要があります。
    def get_flag(self, n: int) -> bool:
        if not 0 <= n < STATUS_BITS:
            raise IndexError(f"Status flag {n} out of range.")
        return (self.status & (1 << n)) != 0

    def set_flag(self, n: int, value: bool) -> None:
        if not 0 <= n < STATUS_BITS:
            raise IndexError(f"Status flag {n} out of range.")
        if value:
            self.status |= 1 << n
        else:
            self.status &= ~(1 << n)

    # @intent:responsibility ユーザースタックとスクラッチレジスタ（A-F, M）を列挙順で返します。
    def working_registers(self) -> List[DigitRegister]:
        return [self.a, self.b, self.c, self.d, self.e, self.f, self.m]
