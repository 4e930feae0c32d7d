import dataclasses

import pytest

from margen.params import BANNER, Parameters


def _params(**overrides):
    base = dict(
        seed=77,
        width=640,
        height=480,
        size=8,
        slope=120,
        start=(1, 2, 3),
        var=(4, 5, 6),
        rotation=2,
    )
    base.update(overrides)
    return Parameters(**base)


def test_banner_names_package():
    assert BANNER.startswith("margen ")


def test_defaults():
    p = _params()
    assert p.file_path == "output.bmp"
    assert p.quiet is False
    assert p.monochrome is False


def test_describe_color():
    text = _params().describe()
    lines = text.splitlines()
    assert lines == [
        "  output  output.bmp",
        "  seed    77",
        "  width   640",
        "  height  480",
        "  pixel   8",
        "  slope   120",
        "  color   1,2,3",
        "  var.    4,5,6",
        "  rot.    2",
    ]
    assert text.endswith("\n")


def test_describe_monochrome_shows_first_channel_only():
    lines = _params(monochrome=True).describe().splitlines()
    assert "  color   1" in lines
    assert "  var.    4" in lines


def test_sequences_become_tuples():
    p = _params(start=[9, 8, 7], var=[0, 0, 1])
    assert p.start == (9, 8, 7)
    assert p.var == (0, 0, 1)


def test_frozen():
    p = _params()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.width = 10
    assert p.width == 640