"""
Unit tests for memory and ROM loading
"""

import os
import tempfile
import unittest

from chip8 import config
from chip8.cpu import Chip8
from chip8.errors import RomTooLarge
from chip8.memory import Memory, load_rom_file


class TestMemory(unittest.TestCase):

    def setUp(self):
        self.memory = Memory()

    def test_zero_filled(self):
        self.assertEqual(len(self.memory), 4096)
        self.assertEqual(sum(self.memory.data), 0)

    def test_addresses_wrap(self):
        self.memory[0x1000] = 0x12
        self.assertEqual(self.memory[0], 0x12)
        self.assertEqual(self.memory[0x1000], 0x12)

    def test_values_truncated_to_byte(self):
        self.memory[5] = 0x1FF
        self.assertEqual(self.memory[5], 0xFF)

    def test_read_word_big_endian(self):
        self.memory[0x200] = 0xAB
        self.memory[0x201] = 0xCD
        self.assertEqual(self.memory.read_word(0x200), 0xABCD)

    def test_load_font(self):
        self.memory.load_font()
        self.assertEqual(list(self.memory.data[0x50:0xA0]), config.fontset)

    def test_load_rom(self):
        self.memory.load_rom(b"\x00\xE0\x12\x00")
        self.assertEqual(bytes(self.memory.data[0x200:0x204]), b"\x00\xE0\x12\x00")


class TestRomSize(unittest.TestCase):

    def test_largest_rom_fits(self):
        cpu = Chip8(b"\x11" * config.MAX_ROM_SIZE)
        self.assertEqual(cpu.memory[0xFFE], 0x11)
        self.assertEqual(cpu.memory[0xFFF], 0)

    def test_rom_filling_memory_rejected(self):
        with self.assertRaises(RomTooLarge) as ctx:
            Chip8(b"\x11" * (4096 - 0x200))
        self.assertEqual(ctx.exception.size, 3584)
        self.assertEqual(ctx.exception.limit, 3583)

    def test_rejected_load_leaves_memory_untouched(self):
        memory = Memory()
        with self.assertRaises(RomTooLarge):
            memory.load_rom(b"\x11" * 5000)
        self.assertEqual(sum(memory.data), 0)

    def test_load_rom_file(self):
        fd, path = tempfile.mkstemp()
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(b"\x60\x01")
            self.assertEqual(load_rom_file(path), b"\x60\x01")
        finally:
            os.remove(path)

    def test_load_rom_file_too_large(self):
        fd, path = tempfile.mkstemp()
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(b"\x00" * 4000)
            with self.assertRaises(RomTooLarge):
                load_rom_file(path)
        finally:
            os.remove(path)


if __name__ == "__main__":
    unittest.main()
