# hp45_core/transport/rom.py
"""
Transport Layer (命令メモリ)

このモジュールは、2048ワード x 16ビットの読み込み専用命令メモリを定義します。
アドレスは (page << 8) | offset で、8ページ x 256ワードに分かれています。
"""
from typing import Iterable, Tuple

# @intent:constant 命令メモリのワード数（8ページ x 256ワード）。
ROM_WORDS = 2048
PAGE_WORDS = 256
WORD_MASK = 0xFFFF

# @intent:responsibility 読み込み専用の命令メモリを提供します。
# @intent:rationale 命令メモリはグローバル状態ではなく構成データとしてCPUに注入されます。
#                  内容はタプルで保持し、複数のCPUインスタンスで安全に共有できるようにします。
class InstructionMemory:
    """
    2048ワードの不変な命令メモリ。
    """
    # @intent:responsibility ワード列から命令メモリを初期化します。
    # @intent:pre-condition `words`はちょうど2048個の16ビット値である必要があります。
    def __init__(self, words: Iterable[int]):
        data: Tuple[int, ...] = tuple(words)
        if len(data) != ROM_WORDS:
            raise ValueError(f"Instruction memory must hold {ROM_WORDS} words, got {len(data)}.")
        for address, word in enumerate(data):
            if not isinstance(word, int) or not 0 <= word <= WORD_MASK:
                raise ValueError(f"Word {word!r} at address {address:#05x} is not a 16-bit value.")
        self._words = data

    # @intent:responsibility 全ワードが0の命令メモリを生成します（テストや初期化用）。
    @classmethod
    def blank(cls) -> "InstructionMemory":
        return cls([0] * ROM_WORDS)

    # @intent:responsibility 指定アドレスのワードのみを差し替えた新しい命令メモリを返します。
    # @intent:rationale 命令メモリ自体は不変なので、書き換えは常に新しいインスタンスを生成します。
    def patched(self, patches: dict) -> "InstructionMemory":
        words = list(self._words)
        for address, word in patches.items():
            if not 0 <= address < ROM_WORDS:
                raise IndexError(f"Address {address:#05x} out of bounds for instruction memory.")
            words[address] = word
        return InstructionMemory(words)

    # @intent:responsibility 指定されたアドレスのワードを読み出します。
    # @intent:pre-condition アドレスは0からROM_WORDS-1の範囲である必要があります。
    def read(self, address: int) -> int:
        if not 0 <= address < ROM_WORDS:
            raise IndexError(f"Address {address:#05x} out of bounds for instruction memory.")
        return self._words[address]

    def __len__(self) -> int:
        return ROM_WORDS

    def __getitem__(self, address: int) -> int:
        return self.read(address)
