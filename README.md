# dfcommon

Readers for the data files of the game Daggerfall: the `Z.CFG` style
configuration file, VGA palettes (`.PAL` and `.COL`), and the `IMG` and `CIF`
image formats. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Usage

### Configuration

```python
from dfcommon.config import Config, ConfigId
from dfcommon.common import get_df_path, get_arena2_path, get_arena2_cd_path

config = Config()
config.load("Z.CFG")
print(config.get_string(ConfigId.PATH))
print(config.get_number("FADECOLOR"))
print(get_df_path(config), get_arena2_path(config), get_arena2_cd_path(config))
```

Each line holds a parameter name and a value separated by a space. Parameters
are looked up by `ConfigId` or by case-insensitive name. Known integer
parameters are parsed as numbers; unknown parameters are kept as strings. A
missing number gives `-1` and a missing string gives `None`. A configuration
holds at most 30 records; more raise `ValueError`.

`get_df_path` returns the `RootPath` record if there is one; otherwise it
takes the Arena2 path, drops everything from its last backslash onwards,
stores the result as `RootPath` and returns it.

`dfcommon.common` also provides `DEFAULT_PALETTE`, `REGION_NAMES`,
`RMB_FILENAMES` and `get_rmb_filename(index)` for indexes 0 to 44.

### Palettes

```python
from dfcommon.palette import Palette

palette = Palette()          # starts with the standard game palette
palette.load("ART_PAL.COL")  # type chosen by extension, then by file size
print(len(palette), palette.entry(0), palette.scaled_entry(1))
rgb565 = palette.make_rgb16_array(0xF800, 0x07E0, 0x001F)
```

A file without a `.pal` or `.col` extension is read as PAL when it is 768
bytes long and as COL otherwise. `scaled_entry` turns the 6-bit components
into 8-bit ones.

### Images

```python
from dfcommon.image import load_img
from dfcommon.cif import CifFile

image = load_img("TITLE.IMG")
print(image.width, image.height, len(image.data))

cif = CifFile()
cif.load("WEAPON04.CIF")
for index in range(len(cif)):
    frame = cif.image(index)
    print(frame.width, frame.height)
```

Headerless IMG files are recognised by their size. Run-length encoded image
data is decoded with `dfcommon.image.decode_rle`. Files whose names start
with `weap` are read as weapon CIF files, made up of groups of frames; a CIF
file holds at most 64 images.

### Errors

Malformed or truncated data raises `ValueError`, an out-of-range index raises
`IndexError`, and a missing file raises the usual `OSError`.
`dfcommon.errors` defines the game-specific `ErrorCode` values, the
`DaggerfallError` exception that carries one, and `error_message`, which
gives the standard text of a code.

## What this package does not do

It only reads files into Python objects. It does not display or convert
images, render scenes, or read texture, map, block or archive files.

## Tests

```
pip install .[test]
pytest
```