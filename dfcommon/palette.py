"""Game palettes: the built-in default plus PAL and COL palette files."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union

from .common import DEFAULT_PALETTE

MAX_ENTRIES = 256
PAL_FILESIZE = 768
COL_FILESIZE = 776
COL_HEADERSIZE = 8

_COL_HEADER = struct.Struct("<ii")

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class PaletteEntry:
    """One palette colour."""

    r: int
    g: int
    b: int

    @property
    def red(self) -> int:
        return self.r

    @property
    def green(self) -> int:
        return self.g

    @property
    def blue(self) -> int:
        return self.b


def _c_divide(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class Palette:
    """A palette of up to 256 colours with 6-bit VGA components."""

    def __init__(self) -> None:
        self.data = bytearray(DEFAULT_PALETTE)
        self.num_entries = MAX_ENTRIES
        self.col_file = False
        self.col_header: tuple[int, int] = (0, 0)

    def __len__(self) -> int:
        return self.num_entries

    def __iter__(self) -> Iterator[PaletteEntry]:
        return (self.entry(index) for index in range(self.num_entries))

    @property
    def is_col_file(self) -> bool:
        return self.col_file

    @property
    def is_pal_file(self) -> bool:
        return not self.col_file

    def entry(self, index: int) -> PaletteEntry:
        """Return the colour at index; raise IndexError when out of range."""
        if not 0 <= index < self.num_entries:
            raise IndexError(f"Invalid palette index {index}!")
        r, g, b = self.data[index * 3 : index * 3 + 3]
        return PaletteEntry(r, g, b)

    def scaled_entry(self, index: int) -> PaletteEntry:
        """Return the colour at index scaled from 6-bit to 8-bit components."""
        raw = self.entry(index)
        return PaletteEntry(
            (raw.r * 4) & 0xFF, (raw.g * 4) & 0xFF, (raw.b * 4) & 0xFF
        )

    def load(self, path: PathLike) -> None:
        """Load a PAL or COL file, chosen by extension and then by size."""
        suffix = Path(path).suffix.lower()
        if suffix == ".col":
            self.load_col(path)
            return
        if suffix == ".pal":
            self.load_pal(path)
            return

        size = os.path.getsize(path)
        if size == PAL_FILESIZE:
            self.load_pal(path)
        else:
            self.load_col(path)

    def load_col(self, path: PathLike) -> None:
        """Load a COL file: an 8 byte header followed by RGB triplets."""
        with open(path, "rb") as handle:
            header = handle.read(COL_HEADERSIZE)
            if len(header) != COL_HEADERSIZE:
                raise ValueError(
                    f"Error reading COL header ({len(header)} of "
                    f"{COL_HEADERSIZE} bytes)!"
                )
            self.col_header = _COL_HEADER.unpack(header)
            self.col_file = True

            count = _c_divide(self.col_header[0] - 8, 3)
            if count < 0 or count >= MAX_ENTRIES:
                self.num_entries = 0
                raise ValueError(
                    f"Invalid number of palette colors received ({count})!"
                )
            self.num_entries = count

            payload = handle.read(count * 3)
            if len(payload) != count * 3:
                self.num_entries = 0
                raise ValueError(
                    f"Failed to read the palette data ({len(payload) // 3} of "
                    f"{count} colors)!"
                )
            self.data[: count * 3] = payload

    def load_pal(self, path: PathLike) -> None:
        """Load a PAL file: 256 raw RGB triplets."""
        with open(path, "rb") as handle:
            payload = handle.read(PAL_FILESIZE)
        if len(payload) != PAL_FILESIZE:
            raise ValueError(
                f"Failed to read the palette data ({len(payload)} of "
                f"{PAL_FILESIZE} bytes)!"
            )
        self.data[:] = payload
        self.col_file = False
        self.num_entries = MAX_ENTRIES

    def make_rgb16_array(self, rmask: int, gmask: int, bmask: int) -> list[int]:
        """Return one 16-bit pixel value per colour for the given channel masks."""
        if self.num_entries == 0:
            raise ValueError("No entries in palette!")

        masks = (rmask, gmask, bmask)
        shifts = tuple(8 - mask.bit_length() for mask in masks)

        def pack(colour: PaletteEntry) -> int:
            value = 0
            for component, mask, shift in zip(
                (colour.r, colour.g, colour.b), masks, shifts
            ):
                moved = component << -shift if shift < 0 else component >> shift
                value |= moved & mask
            return value & 0xFFFF

        return [pack(self.scaled_entry(i)) for i in range(self.num_entries)]