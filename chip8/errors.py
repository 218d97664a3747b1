from chip8.disassembler import disassemble


class Chip8Error(Exception):
    """Base class for everything the emulator raises on purpose."""


class RomTooLarge(Chip8Error):
    """ROM does not fit between 0x200 and the end of memory."""

    def __init__(self, size, limit):
        super().__init__(f"ROM is {size} bytes, it has to be at most {limit} bytes")
        self.size = size
        self.limit = limit


class ExecutionError(Chip8Error):
    """Fatal error raised while executing the instruction at `pc`."""

    reason = "Execution error"

    def __init__(self, opcode, pc):
        super().__init__(
            f"{self.reason}: {opcode:04X} ({disassemble(opcode)}) at PC={pc:03X}"
        )
        self.opcode = opcode
        self.pc = pc


class UnknownOpcode(ExecutionError):
    reason = "Unknown opcode"


class StackOverflow(ExecutionError):
    reason = "Stack overflow on CALL"


class StackUnderflow(ExecutionError):
    reason = "Stack underflow on RET"
