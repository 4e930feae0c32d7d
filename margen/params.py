"""Generation parameters and program identity."""

from __future__ import annotations

from dataclasses import dataclass

PACKAGE = "margen"
VERSION = "(dev)"
BANNER = f"{PACKAGE} {VERSION}"


@dataclass(frozen=True)
class Parameters:
    """All settings that drive the generation of one image."""

    seed: int
    width: int
    height: int
    size: int
    slope: int
    start: tuple[int, int, int]
    var: tuple[int, int, int]
    rotation: int
    file_path: str = "output.bmp"
    quiet: bool = False
    monochrome: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", tuple(self.start))
        object.__setattr__(self, "var", tuple(self.var))

    def describe(self) -> str:
        """Return the human-readable summary printed before generation."""
        if self.monochrome:
            color = f"{self.start[0]}"
            variation = f"{self.var[0]}"
        else:
            color = ",".join(str(c) for c in self.start)
            variation = ",".join(str(c) for c in self.var)
        lines = [
            f"  output  {self.file_path}",
            f"  seed    {self.seed}",
            f"  width   {self.width}",
            f"  height  {self.height}",
            f"  pixel   {self.size}",
            f"  slope   {self.slope}",
            f"  color   {color}",
            f"  var.    {variation}",
            f"  rot.    {self.rotation}",
        ]
        return "".join(line + "\n" for line in lines)