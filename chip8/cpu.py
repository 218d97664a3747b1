# CHIP8 CPU - Cowgod's CHIP8 Technical reference http://devernay.free.fr/hacks/chip8/C8TECH10.HTM#0.0
#----------------------------------------------------------------------------------------------
# One call to run_cycle() is one tick: decrement the timers, fetch the 16-bit opcode at PC,
# decode it into nibbles and dispatch it through the opcode function maps.
# A handler that returns nothing gets the default PC += 2, a handler that returns an
# address has already decided where PC goes (jumps, calls, returns, skips, key wait).

import random

from chip8 import config
from chip8.config import log
from chip8.disassembler import disassemble
from chip8.display import Display
from chip8.errors import StackOverflow, StackUnderflow, UnknownOpcode
from chip8.keypad import Keypad
from chip8.memory import Memory, check_rom_size


class Chip8:
    """
    CHIP-8 interpreter

        memory      - 4K memory, font at 0x050, program at 0x200
        V           - 16 registers V0..VF, VF doubles as the flags register
        index       - I register (memory pointer)
        pc          - program counter
        stack       - 16 return addresses, sp is the number of frames pushed
        delay_timer - counts down to 0, one step per tick
        sound_timer - counts down to 0, one step per tick (no audio)
        display     - 64x32 framebuffer
        keypad      - 16 keys and the Fx0A latch
    """

    def __init__(self, rom=b"", rng=None, timers_in_cycle=True):
        # nothing is built if the ROM can't fit
        check_rom_size(rom)

        # ---- CPU state ----
        self.memory = Memory()
        self.V = [0] * config.REGISTER_COUNT
        self.index = 0
        self.pc = config.PROGRAM_START
        self.stack = [0] * config.STACK_SIZE
        self.sp = 0
        self.delay_timer = 0
        self.sound_timer = 0
        self.display = Display()
        self.keypad = Keypad()
        self.rng = rng if rng is not None else random.Random()
        self.timers_in_cycle = timers_in_cycle

        # decoded fields of the current opcode
        self.opcode = 0
        self.x = 0
        self.y = 0
        self.n = 0
        self.kk = 0
        self.nnn = 0

        self.memory.load_font()
        self.memory.load_rom(rom)

        self.setup_funcmap()

    # ---- Opcode function maps ----
    def setup_funcmap(self):
        self.funcmap = {
            0x0000: self._0xxx,  # 00E0 / 00EE / 0nnn - clear screen, return, SYS (ignored)
            0x1000: self._1nnn,  # 1nnn - Jump to address nnn
            0x2000: self._2nnn,  # 2nnn - Call subroutine at nnn
            0x3000: self._3xkk,  # 3xkk - Skip next instruction if Vx == kk
            0x4000: self._4xkk,  # 4xkk - Skip next instruction if Vx != kk
            0x5000: self._5xy0,  # 5xy0 - Skip next instruction if Vx == Vy
            0x6000: self._6xkk,  # 6xkk - Vx = kk
            0x7000: self._7xkk,  # 7xkk - Vx += kk, no carry
            0x8000: self._8xxx,  # 8xy0..8xyE - register to register math and logic
            0x9000: self._9xy0,  # 9xy0 - Skip next instruction if Vx != Vy
            0xA000: self._Annn,  # Annn - I = nnn
            0xB000: self._Bnnn,  # Bnnn - Jump to nnn + V0
            0xC000: self._Cxkk,  # Cxkk - Vx = random byte AND kk
            0xD000: self._Dxyn,  # Dxyn - Draw n-byte sprite from I at (Vx, Vy), VF = collision
            0xE000: self._Exxx,  # Ex9E / ExA1 - Skip on key pressed / not pressed
            0xF000: self._Fxxx,  # Fx07..Fx65 - timers, I, BCD, register dumps, key wait
        }

        self.funcmap8 = {
            0x0: self._8xy0,
            0x1: self._8xy1,
            0x2: self._8xy2,
            0x3: self._8xy3,
            0x4: self._8xy4,
            0x5: self._8xy5,
            0x6: self._8xy6,
            0x7: self._8xy7,
            0xE: self._8xyE,
        }

        self.funcmapE = {
            0x9E: self._Ex9E,
            0xA1: self._ExA1,
        }

        self.funcmapF = {
            0x07: self._Fx07,
            0x0A: self._Fx0A,
            0x15: self._Fx15,
            0x18: self._Fx18,
            0x1E: self._Fx1E,
            0x29: self._Fx29,
            0x33: self._Fx33,
            0x55: self._Fx55,
            0x65: self._Fx65,
        }

    # ---- timers ----
    def tick_timers(self):
        if self.delay_timer > 0:
            self.delay_timer -= 1
        if self.sound_timer > 0:
            self.sound_timer -= 1
            if self.sound_timer == 0:
                log("Sound timer expired")

    # ---- Cycle ----
    def run_cycle(self):
        if self.timers_in_cycle:
            self.tick_timers()

        # Fetch
        self.opcode = self.memory.read_word(self.pc)

        # Decode
        self.x = (self.opcode & 0x0F00) >> 8
        self.y = (self.opcode & 0x00F0) >> 4
        self.n = self.opcode & 0x000F
        self.kk = self.opcode & 0x00FF
        self.nnn = self.opcode & 0x0FFF

        log(f"[{self.pc:03X}] {self.opcode:04X} | {disassemble(self.opcode)}")

        # Execute
        new_pc = self.funcmap[self.opcode & 0xF000]()
        if new_pc is None:
            new_pc = self.pc + 2
        self.pc = new_pc & 0xFFF
        return self.opcode

    def is_halted(self):
        # two zero bytes at PC mark the end of the program (a convention, not an opcode)
        return self.memory[self.pc] == 0 and self.memory[self.pc + 1] == 0

    def unknown_opcode(self):
        raise UnknownOpcode(self.opcode, self.pc)

    def skip_if(self, condition):
        if condition:
            return self.pc + 4
        return None

    def dump_state(self):
        regs = " ".join(f"V{i:X}={v:02X}" for i, v in enumerate(self.V))
        frames = ", ".join(f"{a:03X}" for a in self.stack[:self.sp])
        keys = "".join(str(k) for k in self.keypad.keys)
        return "\n".join([
            regs,
            f"I={self.index:03X} SP={self.sp} PC={self.pc:03X} DT={self.delay_timer} ST={self.sound_timer}",
            f"Stack=[{frames}]",
            f"Keypad={keys}",
        ])

    # ---- Opcode Handlers ----

    # 00E0 / 00EE / 0nnn
    def _0xxx(self):
        if self.opcode == 0x00E0:
            return self._00E0()
        if self.opcode == 0x00EE:
            return self._00EE()
        return self._0nnn()

    def _0nnn(self):
        # 0nnn is ignored on modern interpreters
        log("SYS call ignored (0nnn)")

    def _00E0(self):
        # CLS, the renderer still has to repaint the blank screen
        self.display.clear()
        self.display.dirty = True

    def _00EE(self):
        # RET
        if self.sp == 0:
            raise StackUnderflow(self.opcode, self.pc)
        self.sp -= 1
        return self.stack[self.sp]

    # 1nnn - Jump to address nnn
    def _1nnn(self):
        return self.nnn

    # 2nnn - Call subroutine at nnn
    def _2nnn(self):
        if self.sp >= config.STACK_SIZE:
            raise StackOverflow(self.opcode, self.pc)
        self.stack[self.sp] = self.pc + 2
        self.sp += 1
        return self.nnn

    # 3xkk - Skip next instruction if Vx == kk
    def _3xkk(self):
        return self.skip_if(self.V[self.x] == self.kk)

    # 4xkk - Skip next instruction if Vx != kk
    def _4xkk(self):
        return self.skip_if(self.V[self.x] != self.kk)

    # 5xy0 - Skip next instruction if Vx == Vy
    def _5xy0(self):
        if self.n != 0:
            return self.unknown_opcode()
        return self.skip_if(self.V[self.x] == self.V[self.y])

    # 6xkk - Set Vx = kk
    def _6xkk(self):
        self.V[self.x] = self.kk

    # 7xkk - Add immediate, VF untouched
    def _7xkk(self):
        self.V[self.x] = (self.V[self.x] + self.kk) & 0xFF

    # 8xy0..8xyE
    def _8xxx(self):
        handler = self.funcmap8.get(self.n)
        if handler is None:
            return self.unknown_opcode()
        return handler()

    def _8xy0(self):
        self.V[self.x] = self.V[self.y]

    def _8xy1(self):
        self.V[self.x] |= self.V[self.y]

    def _8xy2(self):
        self.V[self.x] &= self.V[self.y]

    def _8xy3(self):
        self.V[self.x] ^= self.V[self.y]

    # Flag results below are computed from the operands before anything is written,
    # then Vx is written, then VF. With x == F the flag is what remains in VF.

    def _8xy4(self):
        s = self.V[self.x] + self.V[self.y]
        carry = 1 if s > 0xFF else 0
        self.V[self.x] = s & 0xFF
        self.V[0xF] = carry

    def _8xy5(self):
        vx, vy = self.V[self.x], self.V[self.y]
        not_borrow = 1 if vx > vy else 0
        self.V[self.x] = (vx - vy) & 0xFF
        self.V[0xF] = not_borrow

    def _8xy6(self):
        vx = self.V[self.x]
        self.V[self.x] = vx >> 1
        self.V[0xF] = vx & 1

    def _8xy7(self):
        vx, vy = self.V[self.x], self.V[self.y]
        not_borrow = 1 if vy > vx else 0
        self.V[self.x] = (vy - vx) & 0xFF
        self.V[0xF] = not_borrow

    def _8xyE(self):
        vx = self.V[self.x]
        self.V[self.x] = (vx << 1) & 0xFF
        self.V[0xF] = (vx >> 7) & 1

    # 9xy0 - Skip next instruction if Vx != Vy
    def _9xy0(self):
        if self.n != 0:
            return self.unknown_opcode()
        return self.skip_if(self.V[self.x] != self.V[self.y])

    # Annn - Set I = nnn
    def _Annn(self):
        self.index = self.nnn

    # Bnnn - Jump to address nnn + V0
    def _Bnnn(self):
        return self.nnn + self.V[0]

    # Cxkk - RND Vx, byte
    def _Cxkk(self):
        self.V[self.x] = self.rng.getrandbits(8) & self.kk

    # Dxyn - DRW Vx, Vy, nibble
    def _Dxyn(self):
        px = self.V[self.x]
        py = self.V[self.y]
        display = self.display
        collision = False

        for row in range(self.n):
            y = py + row
            if y >= display.height:
                break  # clipped, never wrapped
            sprite = self.memory[self.index + row]
            for bit in range(8):
                x = px + bit
                if x >= display.width:
                    break
                if sprite & (0x80 >> bit):
                    if display.toggle(x, y):
                        collision = True

        self.V[0xF] = 1 if collision else 0
        log(f"Drew sprite, collision={self.V[0xF]}")

    # Ex9E / ExA1 - SKP / SKNP
    def _Exxx(self):
        handler = self.funcmapE.get(self.kk)
        if handler is None:
            return self.unknown_opcode()
        return handler()

    def _Ex9E(self):
        return self.skip_if(self.keypad.is_down(self.V[self.x] & 0xF))

    def _ExA1(self):
        return self.skip_if(not self.keypad.is_down(self.V[self.x] & 0xF))

    # Fx07..Fx65
    def _Fxxx(self):
        handler = self.funcmapF.get(self.kk)
        if handler is None:
            return self.unknown_opcode()
        return handler()

    def _Fx07(self):
        self.V[self.x] = self.delay_timer

    def _Fx0A(self):
        # LD Vx, K: stall on this instruction until a key goes down and back up
        keypad = self.keypad
        key = keypad.take_released()
        if key is not None:
            self.V[self.x] = key
            log(f"Key {key:X} released, stored in V{self.x:X}")
            return None

        if keypad.awaiting_release is None:
            pressed = keypad.first_down()
            if pressed is not None:
                keypad.latch(pressed)
                log(f"Key {pressed:X} down, waiting for release")
        return self.pc

    def _Fx15(self):
        self.delay_timer = self.V[self.x]

    def _Fx18(self):
        self.sound_timer = self.V[self.x]

    def _Fx1E(self):
        self.index = (self.index + self.V[self.x]) % config.MEMORY_SIZE

    def _Fx29(self):
        self.index = config.FONT_START + (self.V[self.x] & 0xF) * config.FONT_GLYPH_SIZE

    def _Fx33(self):
        val = self.V[self.x]
        self.memory[self.index] = val // 100
        self.memory[self.index + 1] = (val // 10) % 10
        self.memory[self.index + 2] = val % 10

    def _Fx55(self):
        for i in range(self.x + 1):
            self.memory[self.index + i] = self.V[i]

    def _Fx65(self):
        for i in range(self.x + 1):
            self.V[i] = self.memory[self.index + i]
