"""Generate marble-like pattern bitmap images as uncompressed BMP files."""

__version__ = "1.2.1"
__all__ = ["__version__"]