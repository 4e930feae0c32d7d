# margen

Generate a marble-like pattern bitmap image.

`margen` draws a random, smoothly varying pattern row by row and writes it as
an uncompressed 24-bit BMP file. The same options and the same seed always
give the same image.

## Installation

```
pip install .
```

## Usage

```
margen [--help] [-v] [-q] [-w=WIDTH] [-h=HEIGHT] [-o=PATH] [--seed=SEED]
       [-p=PIXEL_SIZE] [-s=SLOPE] [-c=R,G,B] [-va=R,G,B] [-vr=VAR_RANGE]
       [-r=ROTATION] [-m]
```

Each option's value follows an `=` sign. Numbers are plain decimal digits.

| Option | Meaning | Default |
| --- | --- | --- |
| `--help` | show the help message and exit | |
| `-v`, `--version` | print the version and exit | |
| `-q`, `--quiet` | do not print to the console | |
| `-w`, `--width` | image width, 1 to 65535 | 1920 |
| `-h`, `--height` | image height, 1 to 65535 | 1080 |
| `-o`, `--output` | output file | `output.bmp` |
| `--seed` | random seed | current time |
| `-p`, `--pixel` | pixel size, 1 to 65535 | random, 6 to 11 |
| `-s`, `--slope` | slope, 0 to 255 | random, 100 to 149 |
| `-c`, `--color` | base color `R,G,B`, each 0 to 255 | random |
| `-va`, `--variation` | fixed variation `R,G,B`, each 0 to 255 | random |
| `-vr`, `--var-range` | range for a random variation, 0 to 255 | 30 |
| `-r`, `--rotation` | start corner, 0 to 3 (larger values are taken modulo 4) | random |
| `-m`, `--monochrome` | grayscale image | |

If only one of width and height is given, the image is square. A seed given
with `--seed` is reduced to its low 16 bits (the value modulo 65536).

An unknown option or a bad value prints an error and the help text and exits
with status 1. If the output file cannot be written, `margen` says so and
exits with status 1.

### Examples

A 1920×720 image with a fixed seed:

```
margen -w=1920 -h=720 --seed=42 -o=marble.bmp
```

A gray image with large pixels, printing nothing:

```
margen -m -p=20 -q -o=gray.bmp
```

Unless `-q` is given, `margen` prints its name and version, the parameters it
used, and the processor time the generation took.

## Use from Python

```python
from margen.args import parse_args
from margen.generator import generate

params = parse_args(["-w=640", "-h=480", "--seed=7", "-o=marble.bmp", "-q"])
generate(params)
```

- `margen.args.parse_args(argv, now=None)` turns options into a
  `margen.params.Parameters`; `now` is the seed used when `--seed` is not given.
  It raises `UsageError`, `HelpRequested` or `VersionRequested`.
- `margen.generator.Generator(params)` gives the image rows one at a time
  through `bmp_line(y)` or `lines()`; `generate(params, out=None)` writes the
  file and prints the report to `out` (standard output by default).
- `margen.bmp.write_bmp(path, width, height, color_depth, descending, lines)`
  writes any sequence of rows to a BMP file; `bmp_header`, `line_length` and
  `pad_line` build its parts.
- `margen.rand.Random(seed)` is the small seedable generator behind the pattern.

## Limits

`margen` only writes uncompressed BMP files; it does not produce other image
formats or animations.