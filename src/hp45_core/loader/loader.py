# hp45_core/loader/loader.py
"""
ROMイメージローダーモジュール。
テキスト形式（整数リテラルの列）およびバイナリ形式（ビッグエンディアン16ビット）の
命令メモリイメージを読み込み、InstructionMemoryを生成します。
"""
import re
from typing import List

from hp45_core.transport.rom import ROM_WORDS, WORD_MASK, InstructionMemory

ROM_FORMATS = ("text", "binary")

class RomImageLoader:
    """
    ROMイメージファイルを解析し、InstructionMemoryを生成するローダー。
    2048ワードに満たないイメージは残りを0で埋めます。
    """
    def load(self, file_path: str, rom_format: str = "text") -> InstructionMemory:
        if rom_format == "text":
            return self.load_text(file_path)
        if rom_format == "binary":
            return self.load_binary(file_path)
        raise ValueError(f"Unsupported ROM image format: {rom_format}")

    def load_text(self, file_path: str) -> InstructionMemory:
        with open(file_path, 'r', encoding="utf-8") as f:
            return self.parse_text(f.read())

    # @intent:responsibility テキスト形式のROMイメージを解析します。
    # @intent:rationale C配列の初期化子（"0x0ab, 01360, ..."）をそのまま読めるよう、
    #                  カンマ/空白区切りと // # ; のコメント、先頭0の8進数を許容します。
    def parse_text(self, text: str) -> InstructionMemory:
        words: List[int] = []
        for line_num, line in enumerate(text.splitlines(), 1):
            line = re.split(r'//|#|;', line, maxsplit=1)[0]
            for token in re.split(r'[,\s]+', line.strip()):
                if not token:
                    continue
                try:
                    word = self._parse_word(token)
                except ValueError:
                    raise ValueError(f"Invalid ROM word on line {line_num}: {token}")
                if not 0 <= word <= WORD_MASK:
                    raise ValueError(f"ROM word on line {line_num} is not a 16-bit value: {token}")
                words.append(word)
                if len(words) > ROM_WORDS:
                    raise ValueError(f"ROM image exceeds {ROM_WORDS} words on line {line_num}")
        return self._build(words)

    # @intent:utility_function 1トークンを整数に変換します。"01360" のようなC形式の8進数も受け付けます。
    def _parse_word(self, token: str) -> int:
        if re.fullmatch(r'0[0-7]+', token):
            return int(token, 8)
        return int(token, 0)

    def load_binary(self, file_path: str) -> InstructionMemory:
        with open(file_path, 'rb') as f:
            return self.parse_binary(f.read())

    # @intent:responsibility ビッグエンディアン16ビットワード列のバイナリイメージを解析します。
    def parse_binary(self, data: bytes) -> InstructionMemory:
        if len(data) % 2:
            raise ValueError(f"Binary ROM image has an odd length ({len(data)} bytes)")
        if len(data) // 2 > ROM_WORDS:
            raise ValueError(f"Binary ROM image exceeds {ROM_WORDS} words ({len(data) // 2} words)")
        words = [(data[i] << 8) | data[i + 1] for i in range(0, len(data), 2)]
        return self._build(words)

    def _build(self, words: List[int]) -> InstructionMemory:
        return InstructionMemory(words + [0] * (ROM_WORDS - len(words)))
