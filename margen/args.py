"""Command-line option parsing for the marble generator."""

from __future__ import annotations

import time
from collections.abc import Sequence

from .params import BANNER, PACKAGE, Parameters
from .rand import Random

_DIGITS = frozenset("0123456789")
_LLONG_MAX = (1 << 63) - 1
_DEFAULT_WIDTH = 1920
_DEFAULT_HEIGHT = 1080
_DEFAULT_VAR_RANGE = 30


class UsageError(ValueError):
    """Raised when an option or its value is not acceptable."""


class HelpRequested(Exception):
    """Raised when the user asks for the help text."""


class VersionRequested(Exception):
    """Raised when the user asks for the program version."""


def help_text() -> str:
    """Return the usage and option summary."""
    return (
        f"{BANNER}\n\n"
        f"usage: {PACKAGE} "
        "[--help] "
        "[-v] "
        "[-q] "
        "[-w=WIDTH] "
        "[-h=HEIGHT] "
        "[-o=PATH] "
        "[--seed=SEED]"
        "[-p=PIXEL_SIZE] "
        "[-s=SLOPE] "
        "[-c=R,G,B] "
        "[-va=R,G,B] "
        "[-vr=VAR_RANGE] "
        "[-r=ROTATION] "
        "[-m]"
        "\n\n"
        "generate a marble-like pattern bitmap image, blazing fast.\n\n"
        "options:\n"
        "  --help             show this help message and exit\n"
        "  -q, --quiet        do not print to console\n"
        "  -w, --width        image width (default: 1920)\n"
        "  -h, --height       image height (default: 1080)\n"
        "  -o, --output       output file (default: output.bmp)\n"
        "  -seed              random seed (default: time based)\n"
        "  -p, --pixel        pixel size (default: random)\n"
        "  -s, --slope        slope [0-255] (default: random)\n"
        "  -c, --color        base color [0-255,0-255,0-255] (default: random)\n"
        "  -va, --variation   fixed variation [0-255,0-255,0-255] (default: "
        "random)\n"
        "  -vr, --var-range   random variation range [0-255] (default: 30)\n"
        "  -r, --rotation    start corner rotation [0-3] (default: random)\n"
        "  -m, --monochrome   grayscale generation\n"
    )


def _invalid_value(arg: str, value: str | None) -> UsageError:
    shown = "(null)" if value is None else value
    return UsageError(f"invalid value for argument '{arg}': '{shown}'")


def _split(token: str) -> tuple[str, str | None]:
    """Split ``name=value``; empty pieces between '=' signs are skipped."""
    name, _, rest = token.partition("=")
    pieces = [piece for piece in rest.split("=") if piece]
    return name, (pieces[0] if pieces else None)


def _number(arg: str, value: str | None, limit: int | None = None) -> int:
    if value is None or not set(value) <= _DIGITS:
        raise _invalid_value(arg, value)
    number = min(int(value), _LLONG_MAX) if value else 0
    if limit is not None and number >= limit:
        raise _invalid_value(arg, value)
    return number


def _byte(arg: str, value: str | None) -> int:
    return _number(arg, value, 256)


def _ushort(arg: str, value: str | None) -> int:
    return _number(arg, value, 65536)


def _seed(arg: str, value: str | None) -> int:
    # Seeds given on the command line are kept to 16 bits.
    return _number(arg, value) & 0xFFFF


def _color(arg: str, value: str | None) -> tuple[int, int, int]:
    if value is None:
        raise _invalid_value(arg, value)
    parts = [part for part in value.split(",") if part]
    parts += [None] * (3 - len(parts))
    red, green, blue = (_byte(arg, part) for part in parts[:3])
    return red, green, blue


def parse_args(argv: Sequence[str], now: int | None = None) -> Parameters:
    """Build generation parameters from command-line options.

    ``argv`` holds the options without the program name; ``now`` is the seed
    used when none is given (the current time by default). Unset values are
    drawn from the seeded generator.
    """
    seed = int(time.time()) if now is None else now
    quiet = False
    monochrome = False
    width = 0
    height = 0
    file_path = "output.bmp"
    var_range = _DEFAULT_VAR_RANGE
    size: int | None = None
    slope: int | None = None
    start: tuple[int, int, int] | None = None
    var: tuple[int, int, int] | None = None
    rotation: int | None = None

    for token in argv:
        arg, value = _split(token)
        match arg:
            case "--help":
                raise HelpRequested()
            case "-q" | "--quiet":
                quiet = True
            case "-v" | "--version":
                raise VersionRequested()
            case "-w" | "--width":
                width = _ushort(arg, value)
                if width == 0:
                    raise _invalid_value(arg, value)
                if height == 0:
                    height = width
            case "-h" | "--height":
                height = _ushort(arg, value)
                if height == 0:
                    raise _invalid_value(arg, value)
                if width == 0:
                    width = height
            case "--seed":
                seed = _seed(arg, value)
            case "-o" | "--output":
                if value is None:
                    raise _invalid_value(arg, value)
                file_path = value
            case "-p" | "--pixel":
                size = _ushort(arg, value)
                if size == 0:
                    raise _invalid_value(arg, value)
            case "-s" | "--slope":
                slope = _byte(arg, value)
            case "-c" | "--color":
                start = _color(arg, value)
            case "-va" | "--variation":
                var = _color(arg, value)
            case "-vr" | "--var-range":
                var_range = _byte(arg, value)
            case "-r" | "--rotation":
                rotation = _byte(arg, value) % 4
            case "-m" | "--monochrome":
                monochrome = True
            case _:
                raise UsageError(f"invalid argument: '{token if not arg else arg}'")

    if width == 0 and height == 0:
        width, height = _DEFAULT_WIDTH, _DEFAULT_HEIGHT

    rng = Random(seed)
    if size is None:
        size = rng.ushort(6) + 6
    if slope is None:
        slope = rng.uchar(50) + 100
    if start is None:
        start = (rng.uchar(256), rng.uchar(256), rng.uchar(256))
    if var is None:
        var = (
            rng.uchar(var_range + 1),
            rng.uchar(var_range + 1),
            rng.uchar(var_range + 1),
        )
    if rotation is None:
        rotation = rng.uchar(4)

    return Parameters(
        seed=seed,
        width=width,
        height=height,
        size=size,
        slope=slope,
        start=start,
        var=var,
        rotation=rotation,
        file_path=file_path,
        quiet=quiet,
        monochrome=monochrome,
    )