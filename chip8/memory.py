from chip8 import config
from chip8.config import log
from chip8.errors import RomTooLarge


class Memory:
    """
    4K of RAM:
        0x000 - 0x1FF --- Reserved for the interpreter
        0x050 - 0x09F --- Built in 4x5 font set (0 - F)
        0x200 - 0xFFF --- Program ROM and work RAM

    Every address is wrapped modulo the memory size, so I+k never runs
    off the end of the array.
    """

    def __init__(self, size=config.MEMORY_SIZE):
        self.size = size
        self.data = bytearray(size)

    def __len__(self):
        return self.size

    def __getitem__(self, address):
        return self.data[address % self.size]

    def __setitem__(self, address, value):
        self.data[address % self.size] = value & 0xFF

    def read_word(self, address):
        # big-endian: high byte first
        return (self[address] << 8) | self[address + 1]

    def load_font(self, fontset=config.fontset):
        for i, b in enumerate(fontset):
            self.data[config.FONT_START + i] = b

    def load_rom(self, data):
        check_rom_size(data)
        for i, b in enumerate(data):
            self.data[config.PROGRAM_START + i] = b
        log(f"Loaded {len(data)} bytes at {config.PROGRAM_START:03X}")


def check_rom_size(data):
    if len(data) > config.MAX_ROM_SIZE:
        raise RomTooLarge(len(data), config.MAX_ROM_SIZE)


def load_rom_file(path):
    log("Loading ROM:", path)
    with open(path, "rb") as f:
        data = f.read()
    check_rom_size(data)
    return data
