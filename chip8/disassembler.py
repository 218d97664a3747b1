# Turns a 16-bit opcode into Cowgod-style assembly text, e.g. 0xD125 -> "DRW  V1, V2, 5".
# Only used for the trace log and error messages, it never affects execution.


def disassemble(opcode):
    op = (opcode >> 12) & 0xF
    x = (opcode >> 8) & 0xF
    y = (opcode >> 4) & 0xF
    n = opcode & 0xF
    kk = opcode & 0xFF
    nnn = opcode & 0xFFF

    if opcode == 0x00E0:
        return "CLS"
    if opcode == 0x00EE:
        return "RET"
    if op == 0x0:
        return f"SYS  {nnn:03X}"
    if op == 0x1:
        return f"JP   {nnn:03X}"
    if op == 0x2:
        return f"CALL {nnn:03X}"
    if op == 0x3:
        return f"SE   V{x:X}, {kk:02X}"
    if op == 0x4:
        return f"SNE  V{x:X}, {kk:02X}"
    if op == 0x5 and n == 0x0:
        return f"SE   V{x:X}, V{y:X}"
    if op == 0x6:
        return f"LD   V{x:X}, {kk:02X}"
    if op == 0x7:
        return f"ADD  V{x:X}, {kk:02X}"
    if op == 0x8 and n in ALU_MNEMONICS:
        return f"{ALU_MNEMONICS[n]:<4} V{x:X}, V{y:X}"
    if op == 0x9 and n == 0x0:
        return f"SNE  V{x:X}, V{y:X}"
    if op == 0xA:
        return f"LD   I, {nnn:03X}"
    if op == 0xB:
        return f"JP   V0, {nnn:03X}"
    if op == 0xC:
        return f"RND  V{x:X}, {kk:02X}"
    if op == 0xD:
        return f"DRW  V{x:X}, V{y:X}, {n:X}"
    if op == 0xE and kk == 0x9E:
        return f"SKP  V{x:X}"
    if op == 0xE and kk == 0xA1:
        return f"SKNP V{x:X}"
    if op == 0xF and kk in F_FORMATS:
        return F_FORMATS[kk].format(x=x)
    return "???"


ALU_MNEMONICS = {
    0x0: "LD",
    0x1: "OR",
    0x2: "AND",
    0x3: "XOR",
    0x4: "ADD",
    0x5: "SUB",
    0x6: "SHR",
    0x7: "SUBN",
    0xE: "SHL",
}

F_FORMATS = {
    0x07: "LD   V{x:X}, DT",
    0x0A: "LD   V{x:X}, K",
    0x15: "LD   DT, V{x:X}",
    0x18: "LD   ST, V{x:X}",
    0x1E: "ADD  I, V{x:X}",
    0x29: "LD   F, V{x:X}",
    0x33: "LD   B, V{x:X}",
    0x55: "LD   [I], V{x:X}",
    0x65: "LD   V{x:X}, [I]",
}
