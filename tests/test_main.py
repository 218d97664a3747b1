"""
Unit tests for the command line entry point
"""

import contextlib
import io
import os
import sys
import tempfile
import unittest

from chip8.main import main


class TestLoadErrors(unittest.TestCase):
    """ROM problems are reported before any window is opened"""

    def setUp(self):
        self.pyglet_loaded = "pyglet" in sys.modules

    def run_main(self, argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_missing_rom(self):
        missing = os.path.join(tempfile.gettempdir(), "no-such-chip8-rom.ch8")
        code, out = self.run_main([missing])
        self.assertEqual(code, 1)
        self.assertIn("Error:", out)
        self.assertEqual("pyglet" in sys.modules, self.pyglet_loaded)

    def test_rom_too_large(self):
        fd, path = tempfile.mkstemp()
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(b"\x00" * (4096 - 0x200))
            code, out = self.run_main([path])
        finally:
            os.remove(path)
        self.assertEqual(code, 1)
        self.assertIn("3583", out)
        self.assertEqual("pyglet" in sys.modules, self.pyglet_loaded)


if __name__ == "__main__":
    unittest.main()
