"""Shared Daggerfall tables and path lookups from the game configuration."""

from __future__ import annotations

from .config import Config, ConfigId

# Raw 6-bit VGA palette used by the game's images (256 RGB triplets),
# written 32 bytes per line.
DEFAULT_PALETTE: bytes = bytes.fromhex(
    "0000003f39203f331a3f33183d331c3f 33163d331a3b331c39331e3f31183f31"
    "1539311e3731203d2f13342e21392c14 2e2b242c29253327122c281e2927272e"
    "251328241f29231729201023201d221e 17211d1a211c14221c101d1a171c1712"
    "3d3229382d2433261d3021192d1c1429 191126170f23150d20130c1e120a1c11"
    "0a191009161009130f0a100d0a0d0c0a 3a2f3237292f33242a2f1f272b1b2426"
    "182023151d1f131a1b1119191018150e 13120d11100c0f0f0b0e0e0b0d0b0b0b"
    "3d352b393025352b2031261a2d23162b 1f13281d12251b112119101e170f1b15"
    "0d18130c14110b110f0a0f0d090c0b08 3333382f2f3129292b2424272121251e"
    "1e221c1c1f19191d17171b1515181212 151111140f0f100d0d0e0c0c0c0b0b0b"
    "2c333f242e3d1e29391a263615223311 1f30111c2c0f1a290d18260c16230b14"
    "1e0c13190d11150c0f120b0e0f0b0c0c 3737373131312e2e2e2b2b2b28282824"
    "24242121211d1d1d1b1b1b1818181515 151313131010100e0e0e0c0c0c0b0b0b"
    "2d3638273232212e2e1b2a2a15262613 23231121210f1f1f0d1c1c0b19190916"
    "160a14140b12120b0f0f0c0d0d0b0c0c 3f3d193c3b0b383700353200312e002d"
    "2a002a2500262100221c001f1a011d18 011a1502171303141104110f050e0c06"
    "3237312b322a252c231e271d1a241b17 2017141d15131b131118100f160d0d13"
    "0b0b1109090f09070d07080c080a0b0a 2c1a142b17122b151028130e26120c24"
    "110b26160b22140a1f12091c1008180f 07150d06120b050e09040b0703080502"
    "3638282e331f272d192028131b241019 220f171f0d151d0c131b0a1018090d15"
    "080c12080b10090a0e09090c0a0a0b0b 2c1c132b1b122a1a1129191027180f26"
    "170e25160d23150c0a0a0a0909090808 08070707060606050505040404030303"
    "3f3f313f3d2e3f3a2a3f38273f35233f 331f3f301c3f2e183f2b143c290d3a26"
    "0c38230b36200a351d09331a08311707 2f15062d12052c0f042a0c0328090326"
    "06022403012005001b08001908001708 00140802120906100a080e0a09000003"
)

_REGION_TABLE = """\
Alik'r Desert
Dragontail Mountains
Glenpoint Foothills*
Daggerfall Bluffs*
Yeorth Burrowland*
Dwynnen
Ravennian Forest*
Devilrock*
Malekna Forest*
Isle of Balfiera
Bantha*
Dak'fron
Islands in the Western Iliac Bay
Tamarilyn Point*
Lainlyn Cliffs*
Bjoulsae River*
Wrothgarian Mountains
Daggerfall
Glenpoint
Betony
Sentinel
Anticlere
Lainlyn
Wayrest
Gen Tem High Rock village*
Gen Rai Hammerfell village*
Orsinium Area
Skeffington Wood*
Hammerfell bay coast*
Hammerfell sea coast*
High Rock bay coast*
High Rock sea coast
Northmoor
Menevia
Alcaire
Koegria
Bhoriane
Kambria
Phrygias
Urvaius
Ykalon
Daenia
Shalgora
Abibon-Gora
Kairou
Pothago
Myrkwasa
Ayasofya
Tigonus
Kozanset
Satakalaam
Totambu
Mournoth
Ephesus
Santaki
Antiphyllos
Bergama
Gavaudon
Tulune
Glenumbra Moors
Ilessan Hills
Cybiades
"""

REGION_NAMES: tuple[str, ...] = tuple(_REGION_TABLE.splitlines())

RMB_FILENAMES: tuple[str, ...] = tuple(
    """
    TVRN GENR RESI WEAP ARMR ALCH BANK BOOK CLOT FURN GEMS LIBR
    PAWN TEMP TEMP PALA FARM DUNG CAST MANR SHRI RUIN SHCK GRVE
    FILL KRAV KDRA KOWL KMOO KCAN KFLA KHOR KROS KWHE KSCA KHAW
    MAGE THIE DARK FIGH CUST WALL MARK SHIP WITC
    """.split()
)


def get_rmb_filename(index: int) -> str:
    """Return the RMB block filename prefix for an index in 0..44."""
    if not 0 <= index < len(RMB_FILENAMES):
        raise IndexError(f"Invalid RMB filename index {index}!")
    return RMB_FILENAMES[index]


def get_df_path(config: Config) -> str | None:
    """Return the game's root directory, deriving it from the Arena2 path.

    The derived value is stored in the configuration as ``RootPath`` so that
    later calls return it directly. Returns None when no path is configured.
    """
    root = config.get_string(ConfigId.ROOTPATH)
    if root is not None:
        return root

    arena2 = config.get_string(ConfigId.PATH)
    if arena2 is None:
        return None

    # Drop everything from the last backslash onwards.
    cut = arena2.rfind("\\")
    derived = arena2[:cut] if cut >= 0 else arena2

    config.add_string("RootPath", derived, ConfigId.ROOTPATH)
    return config.get_string(ConfigId.ROOTPATH)


def get_arena2_path(config: Config) -> str | None:
    """Return the configured Arena2 directory, or None."""
    return config.get_string(ConfigId.PATH)


def get_arena2_cd_path(config: Config) -> str | None:
    """Return the configured Arena2 directory on the CD, or None."""
    return config.get_string(ConfigId.PATHCD)