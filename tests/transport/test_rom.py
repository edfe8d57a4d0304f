import unittest

from hp45_core.transport.rom import ROM_WORDS, InstructionMemory


class TestInstructionMemory(unittest.TestCase):
    def test_blank_is_zero_filled(self):
        rom = InstructionMemory.blank()
        self.assertEqual(len(rom), ROM_WORDS)
        self.assertEqual(rom.read(0), 0)
        self.assertEqual(rom.read(ROM_WORDS - 1), 0)

    def test_patched_returns_new_memory(self):
        rom = InstructionMemory.blank()
        patched = rom.patched({0x123: 0x2AB})
        self.assertEqual(patched.read(0x123), 0x2AB)
        self.assertEqual(patched[0x123], 0x2AB)
        # Original is unchanged
        self.assertEqual(rom.read(0x123), 0)

    def test_wrong_word_count_rejected(self):
        with self.assertRaises(ValueError):
            InstructionMemory([0] * 100)

    def test_non_16bit_word_rejected(self):
        words = [0] * ROM_WORDS
        words[5] = 0x10000
        with self.assertRaises(ValueError):
            InstructionMemory(words)

    def test_read_out_of_bounds(self):
        rom = InstructionMemory.blank()
        with self.assertRaises(IndexError):
            rom.read(ROM_WORDS)
        with self.assertRaises(IndexError):
            rom.read(-1)

    def test_patch_out_of_bounds(self):
        with self.assertRaises(IndexError):
            InstructionMemory.blank().patched({0x800: 1})


if __name__ == '__main__':
    unittest.main()
