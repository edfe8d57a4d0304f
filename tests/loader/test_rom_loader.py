# tests/loader/test_rom_loader.py
"""
hp45_core.loader.loaderモジュールの単体テスト。
テキスト形式とバイナリ形式のROMイメージの読み込みを検証します。
"""
import pytest

from hp45_core.loader.loader import RomImageLoader
from hp45_core.transport.rom import ROM_WORDS

# @intent:test_suite ROMイメージローダー機能の検証。

@pytest.fixture
def loader():
    return RomImageLoader()


class TestTextImage:
    def test_parse_c_array_style(self, loader):
        text = """
        // page 0
        0x0ab, 0x1f0, 0x3ff,   # comment
        0x000 ; trailing
        """
        rom = loader.parse_text(text)
        assert [rom.read(i) for i in range(4)] == [0x0AB, 0x1F0, 0x3FF, 0]

    def test_invalid_token_reports_line(self, loader):
        # 8進数として不正な数字を含む
        with pytest.raises(ValueError, match="line 3"):
            loader.parse_text("0x001\n0x002\n089")

    def test_parse_c_octal_listing(self, loader):
        rom = loader.parse_text("01360, 00000, 0\n0o17, 0123\n")
        assert [rom.read(i) for i in range(5)] == [0o1360, 0, 0, 0o17, 0o123]

    def test_parse_mixed_literals(self, loader):
        rom = loader.parse_text("0x0ab, 0x1f0\n0o17 42\n0b101")
        assert [rom.read(i) for i in range(5)] == [0x0AB, 0x1F0, 0o17, 42, 0b101]

    def test_short_image_is_zero_padded(self, loader):
        rom = loader.parse_text("0x3ff")
        assert len(rom) == ROM_WORDS
        assert rom.read(0) == 0x3FF
        assert rom.read(1) == 0
        assert rom.read(ROM_WORDS - 1) == 0

    def test_word_out_of_range(self, loader):
        with pytest.raises(ValueError, match="16-bit"):
            loader.parse_text("0x10000")

    def test_too_many_words(self, loader):
        with pytest.raises(ValueError, match="exceeds"):
            loader.parse_text(" ".join(["1"] * (ROM_WORDS + 1)))

    def test_load_text_file(self, loader, tmp_path):
        image = tmp_path / "hp45.rom"
        image.write_text("0x001, 0x002\n0x003\n")
        rom = loader.load(str(image))
        assert [rom.read(i) for i in range(4)] == [1, 2, 3, 0]


class TestBinaryImage:
    def test_parse_big_endian(self, loader):
        rom = loader.parse_binary(bytes([0x01, 0x23, 0x00, 0xFF]))
        assert rom.read(0) == 0x0123
        assert rom.read(1) == 0x00FF
        assert rom.read(2) == 0

    def test_odd_length_rejected(self, loader):
        with pytest.raises(ValueError, match="odd"):
            loader.parse_binary(b"\x01\x02\x03")

    def test_too_long_rejected(self, loader):
        with pytest.raises(ValueError, match="exceeds"):
            loader.parse_binary(bytes(ROM_WORDS * 2 + 2))

    def test_load_binary_file(self, loader, tmp_path):
        image = tmp_path / "hp45.bin"
        image.write_bytes(bytes([0x02, 0xAB]))
        rom = loader.load(str(image), "binary")
        assert rom.read(0) == 0x2AB


def test_unknown_format(loader, tmp_path):
    with pytest.raises(ValueError, match="Unsupported"):
        loader.load(str(tmp_path / "x"), "ihex")
