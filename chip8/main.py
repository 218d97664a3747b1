import argparse
import sys

from chip8 import config
from chip8.cpu import Chip8
from chip8.errors import RomTooLarge
from chip8.memory import load_rom_file


def parse_args(args):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="CHIP-8 Emulator")
    parser.add_argument("rom", help="CHIP-8 ROM to run")
    parser.add_argument("--hz", type=int, default=config.cpu_hz,
                        help="instructions per second (default: %(default)s)")
    parser.add_argument("--timer-hz", type=int, default=config.timer_HZ,
                        help="timer rate when timers are decoupled (default: %(default)s)")
    parser.add_argument("--scale", type=int, default=config.scale,
                        help="screen pixels per CHIP-8 pixel (default: %(default)s)")
    parser.add_argument("--decouple-timers", action="store_true",
                        help="decay timers at --timer-hz instead of once per instruction")
    parser.add_argument("-d", "--debug", action="store_true",
                        help="trace every instruction")
    return parser.parse_args(args)


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    config.set_logs(args.debug)

    try:
        rom = load_rom_file(args.rom)
    except (OSError, RomTooLarge) as e:
        print("Error:", e)
        return 1

    chip8 = Chip8(rom, timers_in_cycle=not args.decouple_timers)

    # pyglet opens a display connection on import, keep it out of the load path
    import pyglet
    from chip8.window import Chip8Window

    Chip8Window(chip8, scale=args.scale, cpu_hz=args.hz, timer_hz=args.timer_hz)
    pyglet.app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
