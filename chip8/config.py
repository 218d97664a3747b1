# CHIP8 Virtual Machine layout:
# Memory - 4096 bytes: 0x000-0x1FF reserved for the interpreter (fonts live at 0x050),
#          0x200-0xFFF program ROM and work RAM.
# Display - 64x32 pixels, each either on or off (0 || 1).
# Keypad - 16 keys, 0x0 - 0xF.
#----------------------------------------------------------------------------------------------

# ---- Memory map ----
MEMORY_SIZE = 4096
PROGRAM_START = 0x200
FONT_START = 0x50
FONT_GLYPH_SIZE = 5
MAX_ROM_SIZE = MEMORY_SIZE - PROGRAM_START - 1  # 3583 bytes

# ---- CPU ----
REGISTER_COUNT = 16
STACK_SIZE = 16
KEY_COUNT = 16

# ---- Screen ----
width, height = 64, 32

# ---- Front-end ----
scale = 10
cpu_hz = 60
timer_HZ = 60

#make it true if you want the logs
logsOn = False

def log(*args):
    if logsOn:
        print(*args)

def set_logs(enabled):
    global logsOn
    logsOn = bool(enabled)

# Standard CHIP-8 fontset (80 bytes)
fontset = [
    0xF0,0x90,0x90,0x90,0xF0,  # 0
    0x20,0x60,0x20,0x20,0x70,  # 1
    0xF0,0x10,0xF0,0x80,0xF0,  # 2
    0xF0,0x10,0xF0,0x10,0xF0,  # 3
    0x90,0x90,0xF0,0x10,0x10,  # 4
    0xF0,0x80,0xF0,0x10,0xF0,  # 5
    0xF0,0x80,0xF0,0x90,0xF0,  # 6
    0xF0,0x10,0x20,0x40,0x40,  # 7
    0xF0,0x90,0xF0,0x90,0xF0,  # 8
    0xF0,0x90,0xF0,0x10,0xF0,  # 9
    0xF0,0x90,0xF0,0x90,0x90,  # A
    0xE0,0x90,0xE0,0x90,0xE0,  # B
    0xF0,0x80,0x80,0x80,0xF0,  # C
    0xE0,0x90,0x90,0x90,0xE0,  # D
    0xF0,0x80,0xF0,0x80,0xF0,  # E
    0xF0,0x80,0xF0,0x80,0x80   # F
] #notice 80 bytes
