"""Reading and rewriting simple sectioned key=value configuration files."""

from __future__ import annotations

import os
import re
import tempfile
from dataclasses import dataclass
from typing import Callable, Iterator, TypeVar

BUFFSIZE = 8192

_T = TypeVar("_T")

_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_RE = re.compile(r"[+-]?\d+")
_DIGITS = {16: re.compile(r"[0-9a-fA-F]+"), 8: re.compile(r"[0-7]+"), 10: re.compile(r"[0-9]+")}
_WHITESPACE = " \t\n\r\f\v"
_LLONG_MAX = 2**63 - 1
_LLONG_MIN = -(2**63)


class IniError(LookupError):
    """A file could not be read or a section or key was not found."""


@dataclass
class FreqCorInfo:
    """One entry of a scan frequency table."""

    isuse: int
    freq: int
    gain: int
    band_width: float
    samp_freq: float
    kind: int  # 0 for a wifi channel, 1 for a normal one


@dataclass
class FreqInfo:
    """One scan frequency with its position in the table."""

    freq: int
    gain: int
    isuse: int
    num: int


def _atof(text: str) -> float:
    match = _FLOAT_RE.match(text.lstrip(_WHITESPACE))
    return float(match.group()) if match else 0.0


def _atoi(text: str) -> int:
    match = _INT_RE.match(text.lstrip(_WHITESPACE))
    return int(match.group()) if match else 0


def _strtoll(text: str) -> int:
    """Parse an integer with automatic base detection (0x.. hex, 0.. octal)."""
    s = text.lstrip(_WHITESPACE)
    sign = 1
    if s and s[0] in "+-":
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s[:2].lower() == "0x" and len(s) > 2 and s[2] in "0123456789abcdefABCDEF":
        base, s = 16, s[2:]
    elif s.startswith("0"):
        base = 8
    else:
        base = 10
    match = _DIGITS[base].match(s)
    value = sign * int(match.group(), base) if match else 0
    return max(_LLONG_MIN, min(_LLONG_MAX, value))


def _read_lines(filename: str) -> list[str]:
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            return handle.readlines()
    except OSError as exc:
        raise IniError(f"cannot open {filename}: {exc.strerror}") from exc


def _is_comment(line: str) -> bool:
    return line.startswith("//") or line.startswith("#")


def _chomp(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n") or line.endswith("\r"):
        return line[:-1]
    return line


def get_ini_string(title: str, key: str, filename: str) -> str:
    """Return the text after '=' of the first line starting with ``key`` after ``[title]``."""
    section = f"[{title}]"
    in_section = False
    for line in _read_lines(filename):
        if _is_comment(line):
            continue
        eq = line.find("=")
        if eq >= 0 and in_section:
            if line.startswith(key):
                return _chomp(line)[eq + 1:]
        elif line.startswith(section):
            in_section = True
    raise IniError(f"key {key!r} not found in section {title!r} of {filename}")


def _tokens(text: str) -> Iterator[str]:
    return iter([token for token in text.split(",") if token])


def _read_array(
    title: str, key: str, size: int, filename: str, convert: Callable[[str], _T]
) -> list[_T]:
    section = f"[{title}]"
    in_section = False
    lines = iter(_read_lines(filename))
    for line in lines:
        if _is_comment(line):
            continue
        if in_section and line.startswith(key):
            tokens = _tokens(line[len(key) + 1:])
            values: list[_T] = []
            while len(values) < size:
                token = next(tokens, None)
                if token is not None and token[0] not in "\r\n":
                    values.append(convert(token))
                    continue
                following = next(lines, None)
                if following is None:
                    raise IniError(
                        f"{key!r} in section {title!r} has fewer than {size} values"
                    )
                tokens = _tokens(following)
            return values
        if line.startswith(section):
            in_section = True
    raise IniError(f"key {key!r} not found in section {title!r} of {filename}")


def get_ini_float_array(title: str, key: str, size: int, filename: str) -> list[float]:
    """Read ``size`` comma separated floats, continuing onto following lines."""
    return _read_array(title, key, size, filename, _atof)


def get_ini_int_array(title: str, key: str, size: int, filename: str) -> list[int]:
    """Read ``size`` comma separated integers, continuing onto following lines."""
    return _read_array(title, key, size, filename, _atoi)


def get_ini_int(title: str, key: str, filename: str) -> int:
    """Read an integer value; hex and octal prefixes are honoured."""
    return _strtoll(get_ini_string(title, key, filename))


def get_ini_float(title: str, key: str, filename: str) -> float:
    """Read a floating point value."""
    return _atof(get_ini_string(title, key, filename))


def _int_or_minus_one(title: str, key: str, filename: str) -> int:
    try:
        return get_ini_int(title, key, filename)
    except IniError:
        return -1


def _float_or_minus_one(title: str, key: str, filename: str) -> float:
    try:
        return get_ini_float(title, key, filename)
    except IniError:
        return -1.0


def update_param_key(filename: str, key: str, data: str) -> None:
    """Set ``key=data``, dropping value lines that continued the old value."""
    lines = _read_lines(filename)
    output: list[str] = []
    skipping = False
    for line in lines:
        if skipping:
            is_value = (
                "=" not in line
                and "#" not in line
                and "//" not in line
                and not line.startswith("\n")
            )
            if is_value:
                continue
            skipping = False
        read_key = line.split("=", 1)[0] if "=" in line else line
        if read_key == key:
            output.append(f"{key}={data}\n")
            skipping = True
        else:
            output.append(line)

    directory = os.path.dirname(os.path.abspath(filename))
    fd, temp_path = tempfile.mkstemp(prefix="temp", suffix=".ini", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.writelines(output)
        os.replace(temp_path, filename)
    except BaseException:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise


def file_refresh_time(path: str) -> int:
    """Return the file's modification time in whole seconds since the epoch."""
    return int(os.stat(path).st_mtime)


def put_ini_int(title: str, key: str, val: int, filename: str) -> bool:
    """Replace the value of ``key`` in ``[title]`` with ``val``; True if a line changed."""
    lines = _read_lines(filename)
    section = f"[{title}]"
    state = 0  # 0: looking for section, 1: in section, 2: done
    output: list[str] = []
    for line in lines:
        if state != 2:
            eq = line.find("=")
            if eq >= 0 and state == 1:
                if key.startswith(line[:eq]):
                    state = 2
                    line = f"{line[:eq + 1]}{val}\n"
            elif section.startswith(line[: len(line) - 1]):
                state = 1
        output.append(line)

    temp_path = f"{filename}.tmp"
    try:
        with open(temp_path, "w", encoding="utf-8", newline="") as handle:
            handle.writelines(output)
    except OSError as exc:
        raise IniError(f"cannot write {temp_path}: {exc.strerror}") from exc
    os.replace(temp_path, filename)
    return state == 2


def _freq_count(path: str) -> int:
    return _int_or_minus_one("pscan_info", "freq_num", path)


def get_freq_table(path: str) -> list[FreqCorInfo]:
    """Read the scan table; entries without a frequency are skipped."""
    entries: list[FreqCorInfo] = []
    for number in range(1, _freq_count(path) + 1):
        title = f"freq{number}"
        if _int_or_minus_one(title, "freq", path) == -1:
            continue
        entries.append(
            FreqCorInfo(
                isuse=_int_or_minus_one(title, "isuse", path),
                freq=_int_or_minus_one(title, "freq", path),
                gain=_int_or_minus_one(title, "gain", path),
                band_width=_float_or_minus_one(title, "band_width", path),
                samp_freq=_float_or_minus_one(title, "samp_freq", path),
                kind=_int_or_minus_one(title, "type", path),
            )
        )
    return entries


def get_freq_list(path: str, with_notuse: bool = True) -> list[FreqInfo]:
    """Read the scan list, optionally leaving out entries whose isuse is 0."""
    entries: list[FreqInfo] = []
    for number in range(1, _freq_count(path) + 1):
        title = f"freq{number}"
        isuse = _int_or_minus_one(title, "isuse", path)
        if not with_notuse and isuse == 0:
            continue
        freq = _int_or_minus_one(title, "freq", path)
        if freq == -1:
            continue
        gain = _int_or_minus_one(title, "gain", path)
        if gain == -1:
            gain = 0
        entries.append(FreqInfo(freq=freq, gain=gain, isuse=isuse, num=number))
    return entries


def split(s: str, delimiter: str) -> list[str]:
    """Split like repeated line reads: a trailing empty field is not returned."""
    parts = s.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts