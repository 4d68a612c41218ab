"""Reading of CIF files: sequences of IMG style images, including weapon CIFs."""

from __future__ import annotations

import io
import os
import struct
from pathlib import Path
from typing import BinaryIO, Iterator, Union

from .image import ImgImage

# Number of images allowed per CIF file.
MAX_IMAGES = 64

# Minimum number of bytes left for the data to count as another image record.
MIN_BYTES_LEFT = 12

# Number of sub-image offsets in a weapon CIF group.
NUM_OFFSETS = 32

# Size of the headerless FACES.CIF file, holding 64x64 images.
FACES_FILESIZE = 249856

# Offset of the sub-image offset list within a weapon CIF group.
_OFFSET_LIST_START = 12

# Byte at offset 8 with this value means there is no leading regular image.
_NO_FIRST_IMAGE_MARKER = 0x15

_OFFSETS = struct.Struct(f"<{NUM_OFFSETS}H")

PathLike = Union[str, os.PathLike]


def is_weapon_cif_filename(path: PathLike) -> bool:
    """True when the file name starts with 'weap', ignoring case."""
    return Path(path).name[:4].lower() == "weap"


def _stream_size(stream: BinaryIO) -> int:
    position = stream.tell()
    size = stream.seek(0, io.SEEK_END)
    stream.seek(position, io.SEEK_SET)
    return size


class CifFile:
    """The images held in one CIF file."""

    def __init__(self) -> None:
        self.images: list[ImgImage] = []

    def __len__(self) -> int:
        return len(self.images)

    def __iter__(self) -> Iterator[ImgImage]:
        return iter(self.images)

    def image(self, index: int) -> ImgImage:
        """Return the image at index; raise IndexError when out of range."""
        if not 0 <= index < len(self.images):
            raise IndexError(f"Invalid CIF image index {index}!")
        return self.images[index]

    def _new_image(self, **settings: object) -> ImgImage:
        if len(self.images) >= MAX_IMAGES:
            raise ValueError(f"Maximum number of images exceeded ({MAX_IMAGES})!")
        image = ImgImage(**settings)
        self.images.append(image)
        return image

    def load(self, path: PathLike) -> None:
        """Load a CIF file, using the weapon layout for 'weap*' file names."""
        with open(path, "rb") as handle:
            if is_weapon_cif_filename(path):
                self.read_weapon_cif(handle)
            else:
                self.read_cif(handle)

    def read_cif(self, stream: BinaryIO) -> None:
        """Read a regular CIF: images one after another until the data runs out."""
        size = _stream_size(stream)
        self.images = []

        while size - stream.tell() >= MIN_BYTES_LEFT:
            if size == FACES_FILESIZE:
                image = self._new_image(
                    has_no_header=True, width=64, height=64, image_size=64 * 64
                )
            else:
                image = self._new_image()
            image.read(stream)

    def read_weapon_cif(self, stream: BinaryIO) -> None:
        """Read a weapon CIF: an optional regular image then groups of sub-images."""
        size = _stream_size(stream)
        self.images = []
        group_index = 0

        stream.seek(8, io.SEEK_SET)
        marker = stream.read(1)
        has_first_image = not (marker and marker[0] == _NO_FIRST_IMAGE_MARKER)
        stream.seek(0, io.SEEK_SET)

        if has_first_image:
            self._new_image(cif_group_index=group_index).read(stream)
            group_index += 1

        while size - stream.tell() >= MIN_BYTES_LEFT:
            group_offset = stream.tell()

            first = self._new_image(
                has_offset_list=True,
                has_cif_weapon_header=True,
                cif_group_index=group_index,
            )
            first.read(stream)

            stream.seek(group_offset + _OFFSET_LIST_START, io.SEEK_SET)
            raw = stream.read(_OFFSETS.size)
            if len(raw) != _OFFSETS.size:
                raise ValueError(
                    f"Error reading offset list ({len(raw) // 2} of "
                    f"{NUM_OFFSETS} offsets)!"
                )
            offsets = _OFFSETS.unpack(raw)

            used = next(
                (i for i, offset in enumerate(offsets) if offset == 0), NUM_OFFSETS
            )

            previous = first
            for offset in offsets[1:used]:
                sub_image = self._new_image(
                    has_no_header=True,
                    cif_group_index=group_index,
                    width=previous.width,
                    height=previous.height,
                )
                stream.seek(group_offset + offset, io.SEEK_SET)
                sub_image.read(stream)
                previous = sub_image

            stream.seek(group_offset + offsets[-1], io.SEEK_SET)
            group_index += 1