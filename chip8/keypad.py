from chip8 import config


class Keypad:
    """
    Hex keypad, keys 0x0 - 0xF:

        1 2 3 C
        4 5 6 D
        7 8 9 E
        A 0 B F

    The latch (`awaiting_release` / `released`) belongs to the Fx0A
    instruction: the CPU latches a held key, and `set_pressed_keys`
    notices when that key goes up.
    """

    def __init__(self):
        self.keys = [0] * config.KEY_COUNT
        self.awaiting_release = None
        self.released = None

    def set_pressed_keys(self, pressed):
        self.keys = [0] * config.KEY_COUNT
        for key in pressed:
            self.keys[key] = 1

        if self.awaiting_release is not None and not self.keys[self.awaiting_release]:
            self.released = self.awaiting_release
            self.awaiting_release = None

    def is_down(self, key):
        return self.keys[key] == 1

    def first_down(self):
        for i, s in enumerate(self.keys):
            if s:
                return i
        return None

    def latch(self, key):
        self.awaiting_release = key

    def take_released(self):
        key = self.released
        self.released = None
        return key
