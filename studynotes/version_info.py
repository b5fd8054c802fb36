"""Project version banner and the version values kept in an ini file."""

from __future__ import annotations

from typing import NamedTuple

from studynotes.inifile import get_ini_float, get_ini_int, get_ini_string

PROJECT_NAME = "myproject"
COMPILE_TIME = "1210_1043"
VERSION_MAJOR = 0
VERSION_MINOR = 0
VERSION_LEVEL3 = 1
USE_RELEASE_MODE = True

DEFAULT_VERSION_FILE = "version.ini"


class VersionInfo(NamedTuple):
    """Version values read from the ``[version]`` section."""

    text: str
    number: int
    value: float


def _as_c_int(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def banner(release: bool = USE_RELEASE_MODE) -> str:
    """Return the start-up banner; release builds show the numeric version."""
    rule = "-" * 41
    if release:
        version = (
            f"------------VERSION: {VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_LEVEL3}"
            "---------------"
        )
    else:
        version = f"------------VERSION:{PROJECT_NAME} {COMPILE_TIME}------------"
    return f"{rule}\n------------System Start!----------------\n{version}\n{rule}\n\n"


def read_version(path: str = DEFAULT_VERSION_FILE) -> VersionInfo:
    """Read p_v, p_i and p_f from the ``[version]`` section of ``path``."""
    return VersionInfo(
        text=get_ini_string("version", "p_v", path),
        number=get_ini_int("version", "p_i", path),
        value=get_ini_float("version", "p_f", path),
    )


def describe_version(var: int, path: str = DEFAULT_VERSION_FILE) -> str:
    """Return the version report together with the given parameter."""
    info = read_version(path)
    return (
        f"MyProject string:{info.text} int:{_as_c_int(info.number)} float:{info.value:f}\r\n"
        f"para var:{_as_c_int(var)}\r\n"
    )