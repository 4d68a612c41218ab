"""Readers for Daggerfall configuration, palette, IMG and CIF image files."""

__version__ = "0.1.0"
__all__ = ["errors", "config", "common", "palette", "image", "cif"]