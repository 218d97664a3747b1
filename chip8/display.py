from chip8 import config


class Display:
    """
    Monochrome framebuffer, one int (0 or 1) per pixel, row-major.

    `dirty` is raised by every toggle and lowered by whoever repaints
    the screen. Coordinates are not clipped here, that is the job of
    the sprite drawing instruction.
    """

    def __init__(self, width=config.width, height=config.height):
        self.width = width
        self.height = height
        self.buffer = [0] * (width * height)
        self.dirty = False

    def clear(self):
        self.buffer = [0] * (self.width * self.height)
        self.dirty = False

    def _index(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the {self.width}x{self.height} screen")
        return x + self.width * y

    def get_pixel(self, x, y):
        return self.buffer[self._index(x, y)]

    def toggle(self, x, y):
        """Flip pixel (x, y); returns True when a lit pixel was turned off."""
        idx = self._index(x, y)
        collision = self.buffer[idx] == 1
        self.buffer[idx] ^= 1
        self.dirty = True
        return collision

    def snapshot(self):
        return list(self.buffer)

    def take_frame(self):
        """Lit pixels for the renderer, or None when nothing changed since the last call."""
        if not self.dirty:
            return None
        self.dirty = False
        return list(self.lit_pixels())

    def lit_pixels(self):
        for i, pixel in enumerate(self.buffer):
            if pixel:
                yield i % self.width, i // self.width
