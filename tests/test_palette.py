import struct

import pytest

from dfcommon.common import DEFAULT_PALETTE
from dfcommon.palette import Palette, PaletteEntry


def _pal_bytes():
    return bytes(i % 64 for i in range(768))


def _col_bytes(entries):
    payload = bytes(c for rgb in entries for c in rgb)
    return struct.pack("<ii", 8 + len(payload), 0) + payload


def test_default_palette_has_256_entries():
    palette = Palette()
    assert len(palette) == 256
    assert palette.is_pal_file


def test_default_entries_come_from_builtin_table():
    palette = Palette()
    assert palette.entry(0) == PaletteEntry(0, 0, 0)
    assert palette.entry(1) == PaletteEntry(0x3F, 0x39, 0x20)
    assert palette.entry(255) == PaletteEntry(*DEFAULT_PALETTE[765:768])


def test_entry_out_of_range_raises():
    palette = Palette()
    with pytest.raises(IndexError):
        palette.entry(256)
    with pytest.raises(IndexError):
        palette.entry(-1)


def test_scaled_entry_is_four_times_raw():
    palette = Palette()
    for index in range(len(palette)):
        raw = palette.entry(index)
        scaled = palette.scaled_entry(index)
        assert (scaled.r, scaled.g, scaled.b) == (raw.r * 4, raw.g * 4, raw.b * 4)


def test_load_pal_round_trip(tmp_path):
    path = tmp_path / "test.pal"
    data = _pal_bytes()
    path.write_bytes(data)
    palette = Palette()
    palette.load_pal(path)
    assert len(palette) == 256
    assert palette.is_pal_file
    assert [c for e in palette for c in (e.r, e.g, e.b)] == list(data)


def test_load_pal_short_file_raises(tmp_path):
    path = tmp_path / "short.pal"
    path.write_bytes(bytes(100))
    with pytest.raises(ValueError):
        Palette().load_pal(path)


def test_load_col_round_trip(tmp_path):
    entries = [(1, 2, 3), (10, 20, 30), (63, 0, 5)]
    path = tmp_path / "test.col"
    path.write_bytes(_col_bytes(entries))
    palette = Palette()
    palette.load_col(path)
    assert len(palette) == len(entries)
    assert palette.is_col_file
    assert [(e.r, e.g, e.b) for e in palette] == entries


def test_load_col_full_size_is_rejected(tmp_path):
    path = tmp_path / "full.col"
    path.write_bytes(_col_bytes([(0, 0, 0)] * 256))
    palette = Palette()
    with pytest.raises(ValueError):
        palette.load_col(path)
    assert len(palette) == 0


def test_load_col_truncated_data_raises(tmp_path):
    path = tmp_path / "trunc.col"
    path.write_bytes(struct.pack("<ii", 8 + 30, 0) + bytes(6))
    palette = Palette()
    with pytest.raises(ValueError):
        palette.load_col(path)
    assert len(palette) == 0


def test_load_col_short_header_raises(tmp_path):
    path = tmp_path / "hdr.col"
    path.write_bytes(bytes(4))
    with pytest.raises(ValueError):
        Palette().load_col(path)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        Palette().load(tmp_path / "missing.pal")


def test_load_dispatches_on_extension(tmp_path):
    col = tmp_path / "a.COL"
    col.write_bytes(_col_bytes([(4, 5, 6)]))
    palette = Palette()
    palette.load(col)
    assert palette.is_col_file
    assert len(palette) == 1

    pal = tmp_path / "b.pal"
    pal.write_bytes(_pal_bytes())
    palette.load(pal)
    assert palette.is_pal_file
    assert len(palette) == 256


def test_load_dispatches_on_size(tmp_path):
    pal = tmp_path / "c.dat"
    pal.write_bytes(_pal_bytes())
    palette = Palette()
    palette.load(pal)
    assert palette.is_pal_file
    assert palette.entry(1) == PaletteEntry(3, 4, 5)


def test_load_unknown_size_falls_back_to_col(tmp_path):
    path = tmp_path / "d.bin"
    entries = [(7, 8, 9), (1, 1, 1)]
    path.write_bytes(_col_bytes(entries))
    palette = Palette()
    palette.load(path)
    assert palette.is_col_file
    assert [(e.r, e.g, e.b) for e in palette] == entries


def test_make_rgb16_array_black_and_white(tmp_path):
    path = tmp_path / "bw.col"
    path.write_bytes(_col_bytes([(0, 0, 0), (63, 63, 63)]))
    palette = Palette()
    palette.load_col(path)
    values = palette.make_rgb16_array(0xF800, 0x07E0, 0x001F)
    assert values == [0x0000, 0xFFFF]


def test_make_rgb16_array_one_value_per_entry_within_masks():
    palette = Palette()
    values = palette.make_rgb16_array(0xF800, 0x07E0, 0x001F)
    assert len(values) == len(palette)
    assert all(0 <= v <= 0xFFFF for v in values)


def test_make_rgb16_array_channels_stay_in_their_masks():
    palette = Palette()
    red_only = palette.make_rgb16_array(0xF800, 0, 0)
    assert all(v & ~0xF800 == 0 for v in red_only)


def test_make_rgb16_array_empty_palette_raises(tmp_path):
    path = tmp_path / "empty.col"
    path.write_bytes(struct.pack("<ii", 8, 0))
    palette = Palette()
    palette.load_col(path)
    assert len(palette) == 0
    with pytest.raises(ValueError):
        palette.make_rgb16_array(0xF800, 0x07E0, 0x001F)