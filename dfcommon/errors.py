"""Daggerfall specific error codes and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for Daggerfall file handling."""

    NODATA = 101
    TOOMUCH = 102
    SIZE_64K = 103
    NOTAMD = 104
    MIDITRACK = 105
    MIDISONG = 106
    ARTMIN = 107
    ARTMAX = 108
    BADREC = 109
    NOTEXT = 110
    NOART = 111
    MAXSPELL = 112
    BSA_DIRTYPE = 113
    BSA_NOTFOUND = 114


_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NODATA: "No data to save, NULL pointers found",
    ErrorCode.TOOMUCH: "Too much unknown data in file",
    ErrorCode.SIZE_64K: "Input exceeded the maximum of 64kb",
    ErrorCode.NOTAMD: "File is not an AMD type",
    ErrorCode.MIDITRACK: "Did not find MIDI track text entry",
    ErrorCode.MIDISONG: "Did not find MIDI song text entry",
    ErrorCode.ARTMIN: "Artifact Index cannot be less than 23",
    ErrorCode.ARTMAX: "Artifact Index cannot be greated than 255",
    ErrorCode.BADREC: "Critical: Bad record found",
    ErrorCode.NOTEXT: "Warning: Artifact has no matching text entry",
    ErrorCode.NOART: "Warning: Text has no matching artifact entry",
    ErrorCode.MAXSPELL: "Error: Spell data file contains too many spells to load!",
    ErrorCode.BSA_DIRTYPE: "Invalid BSA directory type!",
    ErrorCode.BSA_NOTFOUND: "Could not find the specified BSA directory entry!",
}


def error_message(code: int) -> str:
    """Return the message for an error code; raise ValueError if unknown."""
    return _MESSAGES[ErrorCode(code)]


class DaggerfallError(Exception):
    """An error raised while handling Daggerfall data."""

    def __init__(self, code: int, detail: str = "") -> None:
        self.code = ErrorCode(code)
        self.detail = detail
        message = error_message(self.code)
        super().__init__(f"{message}: {detail}" if detail else message)