from chip8.cpu import Chip8
from chip8.display import Display
from chip8.errors import (Chip8Error, ExecutionError, RomTooLarge, StackOverflow,
                          StackUnderflow, UnknownOpcode)
from chip8.keypad import Keypad
from chip8.memory import Memory

__all__ = [
    "Chip8", "Display", "Keypad", "Memory",
    "Chip8Error", "ExecutionError", "RomTooLarge",
    "StackOverflow", "StackUnderflow", "UnknownOpcode",
]
