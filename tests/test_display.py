"""
Unit tests for the framebuffer
"""

import unittest

from chip8.display import Display


class TestDisplay(unittest.TestCase):

    def setUp(self):
        self.display = Display()

    def test_starts_blank_and_clean(self):
        self.assertEqual(self.display.snapshot(), [0] * (64 * 32))
        self.assertFalse(self.display.dirty)

    def test_toggle_on_then_off(self):
        self.assertFalse(self.display.toggle(3, 4))
        self.assertEqual(self.display.get_pixel(3, 4), 1)
        self.assertTrue(self.display.dirty)
        self.assertTrue(self.display.toggle(3, 4))
        self.assertEqual(self.display.get_pixel(3, 4), 0)

    def test_row_major_layout(self):
        self.display.toggle(63, 31)
        self.assertEqual(self.display.buffer[63 + 64 * 31], 1)
        self.assertEqual(list(self.display.lit_pixels()), [(63, 31)])

    def test_out_of_range_is_rejected(self):
        with self.assertRaises(IndexError):
            self.display.toggle(64, 0)
        with self.assertRaises(IndexError):
            self.display.get_pixel(0, 32)

    def test_clear(self):
        self.display.toggle(1, 1)
        self.display.clear()
        self.assertEqual(self.display.get_pixel(1, 1), 0)
        self.assertFalse(self.display.dirty)

    def test_take_frame_only_when_dirty(self):
        self.assertIsNone(self.display.take_frame())
        self.display.toggle(2, 5)
        self.display.toggle(10, 0)
        self.assertEqual(self.display.take_frame(), [(10, 0), (2, 5)])
        self.assertFalse(self.display.dirty)
        self.assertIsNone(self.display.take_frame())
        self.display.toggle(2, 5)
        self.assertEqual(self.display.take_frame(), [(10, 0)])

    def test_snapshot_is_a_copy(self):
        snap = self.display.snapshot()
        self.display.toggle(0, 0)
        self.assertEqual(snap[0], 0)


if __name__ == "__main__":
    unittest.main()
