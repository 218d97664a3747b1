"""
Unit tests for the disassembler and error messages
"""

import unittest

from chip8.disassembler import disassemble
from chip8.errors import StackUnderflow, UnknownOpcode


class TestDisassembler(unittest.TestCase):

    def test_mnemonics(self):
        cases = {
            0x00E0: "CLS",
            0x00EE: "RET",
            0x0123: "SYS  123",
            0x1ABC: "JP   ABC",
            0x2ABC: "CALL ABC",
            0x3A12: "SE   VA, 12",
            0x5120: "SE   V1, V2",
            0x8124: "ADD  V1, V2",
            0x8127: "SUBN V1, V2",
            0x812E: "SHL  V1, V2",
            0xB200: "JP   V0, 200",
            0xD125: "DRW  V1, V2, 5",
            0xE39E: "SKP  V3",
            0xE3A1: "SKNP V3",
            0xF30A: "LD   V3, K",
            0xF355: "LD   [I], V3",
        }
        for opcode, text in cases.items():
            self.assertEqual(disassemble(opcode), text)

    def test_unknown(self):
        for opcode in (0x5121, 0x8128, 0xE300, 0xF3FF):
            self.assertEqual(disassemble(opcode), "???")

    def test_error_messages_name_opcode_and_pc(self):
        err = UnknownOpcode(0xF3FF, 0x2A4)
        self.assertEqual(str(err), "Unknown opcode: F3FF (???) at PC=2A4")
        err = StackUnderflow(0x00EE, 0x200)
        self.assertIn("RET", str(err))


if __name__ == "__main__":
    unittest.main()
