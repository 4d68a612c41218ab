"""Reading of the game's IMG images and of the image records inside CIF files."""

from __future__ import annotations

import io
import os
import struct
from dataclasses import dataclass, fields
from typing import BinaryIO, Union

# Bytes of the sub-image offset list that follows a weapon CIF group header.
CIF_OFFSETLIST_SIZE = 64

_HEADER = struct.Struct("<5hH")

PathLike = Union[str, os.PathLike]

# Headerless IMG files, recognised by size: (width, height, image size).
_SPECIAL_SIZES: dict[int, tuple[int, int, int]] = {
    720: (9, 80, 720),
    990: (45, 22, 990),
    1720: (43, 40, 1720),
    2140: (107, 20, 2140),
    2916: (81, 36, 2916),
    3200: (40, 80, 3200),
    3938: (179, 22, 3938),
    4280: (107, 40, 4280),
    20480: (320, 64, 20480),
    26496: (207, 128, 26496),
    64000: (320, 200, 64000),
    64768: (320, 200, 64000),
    68800: (320, 215, 68800),
    112128: (512, 219, 112128),
}


def decode_rle(stream: BinaryIO, size: int) -> bytes:
    """Decode run-length encoded pixels from stream until size bytes are produced.

    A control byte above 0x7F repeats the next byte (control - 0x7F) times;
    otherwise the next (control + 1) bytes are copied literally.
    """
    output = bytearray()
    while len(output) < size:
        control = stream.read(1)
        if not control:
            raise ValueError("Error reading image data!")
        value = control[0]
        if value > 0x7F:
            fill = stream.read(1)
            if not fill:
                raise ValueError("Error reading image data!")
            output += fill * (value - 0x7F)
        else:
            count = value + 1
            chunk = stream.read(count)
            if len(chunk) != count:
                raise ValueError("Error reading image data!")
            output += chunk
    return bytes(output[:size])


@dataclass
class ImgImage:
    """An 8-bit paletted image with its header values."""

    width: int = 0
    height: int = 0
    x_offset: int = 0
    y_offset: int = 0
    unknown: int = 0
    image_size: int = 0
    data: bytes | None = None
    has_offset_list: bool = False
    has_no_header: bool = False
    has_cif_weapon_header: bool = False
    cif_group_index: int = 0
    destroy_on_read: bool = False

    def _reset(self) -> None:
        keep = self.destroy_on_read
        for field in fields(self):
            setattr(self, field.name, field.default)
        self.destroy_on_read = keep

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def is_compressed(self) -> bool:
        """True when the pixel data is run-length encoded."""
        return self.unknown == 0x0002 or self.image_size != self.pixel_count

    def _read_header(self, stream: BinaryIO) -> None:
        if self.has_no_header:
            if self.width == 0 or self.height == 0:
                raise ValueError("Invalid image width/height with no header!")
            return

        raw = stream.read(_HEADER.size)
        if len(raw) != _HEADER.size:
            raise ValueError("Failed to read header information!")
        values = _HEADER.unpack(raw)
        if self.has_cif_weapon_header:
            (self.width, self.height, self.x_offset, self.y_offset,
             self.unknown, self.image_size) = values
        else:
            (self.x_offset, self.y_offset, self.width, self.height,
             self.unknown, self.image_size) = values

    def _read_data(self, stream: BinaryIO) -> bytes:
        size = self.pixel_count
        if size < 0:
            raise ValueError(f"Invalid image size {self.width}x{self.height}!")
        raw = stream.read(size)
        if len(raw) != size:
            raise ValueError(
                f"Error reading image data ({len(raw)} of {size} bytes)!"
            )
        return raw

    def read(self, stream: BinaryIO) -> None:
        """Read the header (unless headerless) and pixels from the stream."""
        if stream is None:
            raise ValueError("Invalid NULL file handle received!")
        if self.destroy_on_read:
            self._reset()

        self._read_header(stream)
        if self.has_offset_list:
            stream.seek(CIF_OFFSETLIST_SIZE, io.SEEK_CUR)

        if self.is_compressed():
            self.data = decode_rle(stream, max(self.pixel_count, 0))
        else:
            self.data = self._read_data(stream)

    def load(self, path: PathLike) -> None:
        """Load an IMG file, recognising the headerless files by their size."""
        with open(path, "rb") as handle:
            self._reset()
            size = os.fstat(handle.fileno()).st_size
            special = _SPECIAL_SIZES.get(size)
            if special is not None:
                self.has_no_header = True
                self.width, self.height, self.image_size = special
            self.read(handle)


def load_img(path: PathLike) -> ImgImage:
    """Load and return the IMG file at path."""
    image = ImgImage()
    image.load(path)
    return image