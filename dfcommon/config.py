"""Reading of the game's plain text configuration file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator, Union

MAX_PARAMETERS = 30
MAX_LINE_LENGTH = 256


class ConfigId(IntEnum):
    """Identifiers of known configuration parameters."""

    NONE = -1
    TYPE = 0
    PATH = 1
    PATHCD = 2
    FADECOLOR = 3
    MAPFILE = 4
    RENDERGAME = 5
    USER = 6
    STARTMAP = 7
    REGION = 8
    HELMET = 9
    MAXSPEED = 10
    CONTROLS = 11
    OBJMEMSIZE = 12
    MAPS = 13
    CHEATMODE = 14
    MAGICREPAIR = 15
    ROOTPATH = 16


class ValueType(Enum):
    """Kind of value held by a configuration record."""

    INTEGER = 0
    STRING = 1


@dataclass(frozen=True)
class LookupEntry:
    """A known parameter name with its identifier and value type."""

    name: str
    config_id: ConfigId
    type: ValueType


_INTEGER_PARAMS = {
    ConfigId.FADECOLOR,
    ConfigId.RENDERGAME,
    ConfigId.USER,
    ConfigId.STARTMAP,
    ConfigId.REGION,
    ConfigId.HELMET,
    ConfigId.MAXSPEED,
    ConfigId.OBJMEMSIZE,
    ConfigId.CHEATMODE,
    ConfigId.MAGICREPAIR,
}

LOOKUP_TABLE: tuple[LookupEntry, ...] = tuple(
    LookupEntry(
        cid.name,
        cid,
        ValueType.INTEGER if cid in _INTEGER_PARAMS else ValueType.STRING,
    )
    for cid in ConfigId
    if cid is not ConfigId.NONE
)


def lookup_config(name: str) -> LookupEntry | None:
    """Find a parameter name (case-insensitive) in the lookup table."""
    folded = name.casefold()
    return next((e for e in LOOKUP_TABLE if e.name.casefold() == folded), None)


def _atoi(text: str) -> int:
    """Parse a leading integer the way C's atoi does; 0 when there is none."""
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ("0" <= ch <= "9"):
            break
        digits += ch
    return sign * int(digits) if digits else 0


@dataclass
class ConfigRecord:
    """One parameter/value pair from a configuration file."""

    name: str
    value: Union[int, str]
    config_id: int = ConfigId.NONE

    @property
    def type(self) -> ValueType:
        return ValueType.STRING if isinstance(self.value, str) else ValueType.INTEGER

    @property
    def string(self) -> str | None:
        """The string value, or None for an integer record."""
        return self.value if isinstance(self.value, str) else None

    @property
    def number(self) -> int:
        """The integer value, or -1 for a string record."""
        return -1 if isinstance(self.value, str) else self.value


def parse_config_line(line: str) -> ConfigRecord | None:
    """Parse one line into a record; return None for a blank line."""
    line = line.rstrip("\r\n")[:MAX_LINE_LENGTH].strip()
    if not line:
        return None
    name, _, raw_value = line.partition(" ")
    raw_value = raw_value.strip()
    entry = lookup_config(name)
    if entry is None:
        return ConfigRecord(name, raw_value, ConfigId.NONE)
    if entry.type is ValueType.INTEGER:
        return ConfigRecord(name, _atoi(raw_value), entry.config_id)
    return ConfigRecord(name, raw_value, entry.config_id)


class Config:
    """A set of configuration records, at most MAX_PARAMETERS of them."""

    def __init__(self) -> None:
        self.records: list[ConfigRecord] = []

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ConfigRecord]:
        return iter(self.records)

    def _ensure_room(self) -> None:
        if len(self.records) >= MAX_PARAMETERS:
            raise ValueError(
                f"Maximum number of config parameters exceeded ({MAX_PARAMETERS})!"
            )

    def add_string(self, name: str, value: str, config_id: int) -> None:
        """Append a string valued record."""
        if name is None or value is None:
            raise ValueError("Invalid input received!")
        self._ensure_room()
        self.records.append(ConfigRecord(name, value, config_id))

    def _find(self, key: Union[int, str]) -> ConfigRecord | None:
        if isinstance(key, str):
            folded = key.casefold()
            return next(
                (r for r in self.records if r.name.casefold() == folded), None
            )
        return next((r for r in self.records if r.config_id == key), None)

    def get_number(self, key: Union[int, str]) -> int:
        """Integer value for an id or name; -1 if missing or not an integer."""
        record = self._find(key)
        return -1 if record is None else record.number

    def get_string(self, key: Union[int, str]) -> str | None:
        """String value for an id or name; None if missing or not a string."""
        record = self._find(key)
        return None if record is None else record.string

    def loads(self, text: str) -> None:
        """Replace the current records with those parsed from text."""
        self.records = []
        for line in text.splitlines():
            self._ensure_room()
            record = parse_config_line(line)
            if record is not None:
                self.records.append(record)

    def load(self, path: Union[str, os.PathLike]) -> None:
        """Replace the current records with those in the given file."""
        with open(path, encoding="latin-1") as handle:
            self.loads(handle.read())