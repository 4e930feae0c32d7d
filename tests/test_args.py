import dataclasses

import pytest

from margen.args import (
    HelpRequested,
    UsageError,
    VersionRequested,
    help_text,
    parse_args,
)
from margen.params import BANNER


def test_defaults():
    params = parse_args([], now=5)
    assert params.seed == 5
    assert (params.width, params.height) == (1920, 1080)
    assert params.file_path == "output.bmp"
    assert params.quiet is False
    assert params.monochrome is False
    assert 6 <= params.size < 12
    assert 100 <= params.slope < 150
    assert all(0 <= v <= 30 for v in params.var)
    assert all(0 <= c < 256 for c in params.start)
    assert 0 <= params.rotation < 4


def test_same_seed_same_parameters():
    first = parse_args([], now=77)
    second = parse_args([], now=77)
    assert first.seed == 77
    assert (first.size, first.slope, first.start, first.var, first.rotation) == (
        second.size,
        second.slope,
        second.start,
        second.var,
        second.rotation,
    )
    assert 6 <= first.size < 12
    assert 100 <= first.slope < 150


def test_explicit_seed_overrides_time():
    assert parse_args(["--seed=42"], now=1) == parse_args([], now=42)


def test_seed_is_kept_to_sixteen_bits():
    assert parse_args(["--seed=65578"], now=1).seed == 42


def test_width_sets_height():
    params = parse_args(["-w=100"], now=1)
    assert (params.width, params.height) == (100, 100)


def test_height_sets_width():
    params = parse_args(["--height=40"], now=1)
    assert (params.width, params.height) == (40, 40)


@pytest.mark.parametrize("argv", [["-w=100", "-h=50"], ["-h=50", "-w=100"]])
def test_width_and_height(argv):
    params = parse_args(argv, now=1)
    assert (params.width, params.height) == (100, 50)


@pytest.mark.parametrize(
    "token",
    ["-w=0", "-w=65536", "-w=abc", "-w", "-w=-5", "-h=0", "-p=0", "-s=256",
     "-c=1,2", "-c=1,2,256", "-c", "-va=a,b,c", "-o", "--seed=x", "-r=999"],
)
def test_invalid_values(token):
    with pytest.raises(UsageError):
        parse_args([token], now=1)


def test_invalid_value_message():
    with pytest.raises(UsageError, match=r"invalid value for argument '-w': '0'"):
        parse_args(["-w=0"], now=1)


def test_unknown_argument():
    with pytest.raises(UsageError) as info:
        parse_args(["--bogus"], now=1)
    assert str(info.value) == "invalid argument: '--bogus'"


def test_help_and_version():
    with pytest.raises(HelpRequested):
        parse_args(["--help"], now=1)
    with pytest.raises(VersionRequested):
        parse_args(["-v"], now=1)
    with pytest.raises(VersionRequested):
        parse_args(["--version"], now=1)


def test_explicit_values():
    params = parse_args(
        ["-p=3", "-s=255", "-c=1,2,3", "-va=4,5,6", "-r=6", "-o=out.bmp", "-m", "-q"],
        now=1,
    )
    assert params.size == 3
    assert params.slope == 255
    assert params.start == (1, 2, 3)
    assert params.var == (4, 5, 6)
    assert params.rotation == 6 % 4
    assert params.file_path == "out.bmp"
    assert params.monochrome is True
    assert params.quiet is True


def test_zero_variation_range():
    assert parse_args(["-vr=0"], now=3).var == (0, 0, 0)


def test_repeated_equals_are_skipped():
    assert parse_args(["-w==64"], now=1).width == 64
    assert parse_args(["-o=a=b"], now=1).file_path == "a"


def test_rotation_does_not_change_other_draws():
    fixed = parse_args(["-r=1"], now=9)
    drawn = parse_args([], now=9)
    assert fixed.rotation == 1
    assert dataclasses.replace(fixed, rotation=drawn.rotation) == drawn


def test_help_text():
    text = help_text()
    assert text.startswith(BANNER + "\n\n")
    assert "usage: margen [--help]" in text
    assert "-m, --monochrome   grayscale generation" in text