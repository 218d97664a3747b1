# We're subclassing pyglet (it handles graphics and keyboard handling)
# and overriding whatever def we need from there. The window is the driver loop:
# every CPU tick it pushes the held keys into the keypad, runs one cycle and
# repaints the framebuffer when the display says it is dirty.

import pyglet
from pyglet.window import key

from chip8 import config
from chip8.config import log
from chip8.errors import Chip8Error

# Key mapping - maps physical keyboard keys to the CHIP-8 keypad
KEYMAP = {
    key._1: 0x1, key._2: 0x2, key._3: 0x3, key._4: 0xC,
    key.Q: 0x4, key.W: 0x5, key.E: 0x6, key.R: 0xD,
    key.A: 0x7, key.S: 0x8, key.D: 0x9, key.F: 0xE,
    key.Z: 0xA, key.X: 0x0, key.C: 0xB, key.V: 0xF,
}


class Chip8Window(pyglet.window.Window):

    def __init__(self, chip8, scale=config.scale, cpu_hz=config.cpu_hz, timer_hz=config.timer_HZ):
        self.scale = scale
        super().__init__(config.width * scale, config.height * scale,
                         caption="CHIP-8 Emulator", resizable=False)

        self.chip8 = chip8
        self.held_keys = set()
        self.has_exit = False

        # ---- Performance Counters ----
        self.fps = 0.0
        self.cycle_count = 0
        self.cycles_per_second = 0
        self.fps_label = pyglet.text.Label(
            "FPS: 0.000",
            font_size=12,
            x=5,
            y=self.height - 15,
            anchor_x='left',
            anchor_y='center',
            color=(255, 255, 255, 255)
        )
        self.cps_label = pyglet.text.Label(
            "Cycles/s: 0",
            font_size=12,
            x=5,
            y=self.height - 30,
            anchor_x='left',
            anchor_y='center',
            color=(255, 255, 255, 255)
        )

        # Pre-create a pixel sprite for drawing
        self.pixel = pyglet.image.SolidColorImagePattern((255, 255, 255, 255)).create_image(scale, scale)
        self.lit = []

        pyglet.clock.schedule_interval(self._update_cps, 1.0)
        pyglet.clock.schedule_interval(self._update_fps, 1.0)

        # Schedule CPU ticks, and timer ticks when the CPU doesn't decay them itself
        pyglet.clock.schedule_interval(self._cpu_tick, 1.0/cpu_hz)
        if not chip8.timers_in_cycle:
            pyglet.clock.schedule_interval(self._timer_tick, 1.0/timer_hz)

    def _update_fps(self, dt):
        self.fps = 1.0 / dt
        self.fps_label.text = f"FPS: {self.fps:.3f}"

    def _update_cps(self, dt):
        self.cycles_per_second = self.cycle_count
        self.cycle_count = 0
        self.cps_label.text = f"Cycles/s: {self.cycles_per_second}"

    # ---- Input ----
    def on_key_press(self, symbol, modifiers):
        #@Override
        if symbol == key.ESCAPE:
            self.close()
        if symbol in KEYMAP:
            self.held_keys.add(KEYMAP[symbol])
        if symbol == key.F1:
            config.set_logs(not config.logsOn)
            log("logsOn:", config.logsOn)
        if symbol == key.F2:
            print(self.chip8.dump_state())

    def on_key_release(self, symbol, modifiers):
        #@Override
        if symbol in KEYMAP:
            self.held_keys.discard(KEYMAP[symbol])

    # ---- Drawing ----
    def on_draw(self):
        display = self.chip8.display
        self.clear()

        # only re-read the framebuffer after the CPU changed it
        frame = display.take_frame()
        if frame is not None:
            # pyglet's origin is bottom-left, CHIP-8's is top-left
            self.lit = [(x * self.scale, (display.height - 1 - y) * self.scale)
                        for x, y in frame]

        for x, y in self.lit:
            self.pixel.blit(x, y)

        self.fps_label.draw()
        self.cps_label.draw()

    # ---- CPU cycle ----
    def _cpu_tick(self, dt):
        if self.has_exit:
            return
        self.chip8.keypad.set_pressed_keys(self.held_keys)
        if self.chip8.is_halted():
            return
        try:
            self.chip8.run_cycle()
        except Chip8Error as e:
            print("Emulation error:", e)
            print(self.chip8.dump_state())
            self.stop()
            return
        self.cycle_count += 1

    # ---- timers ----
    def _timer_tick(self, dt):
        self.chip8.tick_timers()

    def stop(self):
        self.has_exit = True
        pyglet.clock.unschedule(self._cpu_tick)
        pyglet.clock.unschedule(self._timer_tick)
        self.close()

    def on_close(self):
        #@Override
        self.has_exit = True
        pyglet.clock.unschedule(self._cpu_tick)
        pyglet.clock.unschedule(self._timer_tick)
        super().on_close()
