import os

import pytest

from studynotes.inifile import (
    FreqCorInfo,
    FreqInfo,
    IniError,
    file_refresh_time,
    get_freq_list,
    get_freq_table,
    get_ini_float,
    get_ini_float_array,
    get_ini_int,
    get_ini_int_array,
    get_ini_string,
    put_ini_int,
    split,
    update_param_key,
)


def _write(tmp_path, text, name="conf.ini"):
    path = tmp_path / name
    path.write_bytes(text.encode("utf-8"))
    return str(path)


def test_string_value_in_section(tmp_path):
    path = _write(tmp_path, "# top\n[other]\nname=no\n[version]\n// note\nname=yes\n")
    assert get_ini_string("version", "name", path) == "yes"


def test_string_value_with_crlf(tmp_path):
    path = _write(tmp_path, "[version]\r\np_v=1.2\r\n")
    assert get_ini_string("version", "p_v", path) == "1.2"


def test_string_value_last_line_without_newline(tmp_path):
    path = _write(tmp_path, "[s]\nk=abc")
    assert get_ini_string("s", "k", path) == "abc"


def test_missing_key_raises(tmp_path):
    path = _write(tmp_path, "[s]\nk=1\n")
    with pytest.raises(IniError):
        get_ini_string("s", "missing", path)


def test_missing_section_raises(tmp_path):
    path = _write(tmp_path, "[s]\nk=1\n")
    with pytest.raises(IniError):
        get_ini_string("t", "k", path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(IniError):
        get_ini_string("s", "k", str(tmp_path / "absent.ini"))


def test_int_values(tmp_path):
    path = _write(tmp_path, "[n]\ndec=42\nhex=0x10\noct=010\nneg=-7\n")
    assert get_ini_int("n", "dec", path) == 42
    assert get_ini_int("n", "hex", path) == 16
    assert get_ini_int("n", "oct", path) == 8
    assert get_ini_int("n", "neg", path) == -7


def test_float_value(tmp_path):
    path = _write(tmp_path, "[f]\nv=2.5\n")
    assert get_ini_float("f", "v", path) == 2.5


def test_int_missing_raises(tmp_path):
    path = _write(tmp_path, "[n]\n")
    with pytest.raises(IniError):
        get_ini_int("n", "x", path)


def test_int_array_single_line(tmp_path):
    path = _write(tmp_path, "[a]\nvals=1,2,3\n")
    assert get_ini_int_array("a", "vals", 3, path) == [1, 2, 3]


def test_float_array_continues_on_next_line(tmp_path):
    path = _write(tmp_path, "[a]\nvals=1.5,2.5,\n3.5,4.5\n")
    assert get_ini_float_array("a", "vals", 4, path) == [1.5, 2.5, 3.5, 4.5]


def test_array_too_short_raises(tmp_path):
    path = _write(tmp_path, "[a]\nvals=1,2\n")
    with pytest.raises(IniError):
        get_ini_int_array("a", "vals", 5, path)


def test_array_reads_only_requested_count(tmp_path):
    path = _write(tmp_path, "[a]\nvals=4,5,6,7\n")
    assert get_ini_int_array("a", "vals", 2, path) == [4, 5]


def test_update_param_key_replaces_and_drops_old_values(tmp_path):
    path = _write(tmp_path, "a=1\nb=2\n  more\n# c\nc=3\n")
    update_param_key(path, "b", "9")
    with open(path, encoding="utf-8") as handle:
        assert handle.read() == "a=1\nb=9\n# c\nc=3\n"


def test_update_param_key_last_line(tmp_path):
    path = _write(tmp_path, "a=1\nb=2\n")
    update_param_key(path, "b", "x")
    assert get_ini_string_free(path) == "a=1\nb=x\n"


def get_ini_string_free(path):
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def test_update_param_key_missing_file(tmp_path):
    with pytest.raises(IniError):
        update_param_key(str(tmp_path / "none.ini"), "a", "1")


def test_put_ini_int_changes_only_target_section(tmp_path):
    path = _write(tmp_path, "[a]\nx=1\n[b]\nx=2\n")
    assert put_ini_int("b", "x", 5, path) is True
    assert get_ini_string_free(path) == "[a]\nx=1\n[b]\nx=5\n"
    assert get_ini_int("b", "x", path) == 5


def test_put_ini_int_without_match_leaves_file(tmp_path):
    text = "[a]\nx=1\n"
    path = _write(tmp_path, text)
    assert put_ini_int("zz", "x", 5, path) is False
    assert get_ini_string_free(path) == text


def test_file_refresh_time(tmp_path):
    path = _write(tmp_path, "x")
    os.utime(path, (1_000_000, 1_000_000))
    assert file_refresh_time(path) == 1_000_000


FREQ_TABLE = (
    "[pscan_info]\n"
    "freq_num=3\n"
    "[freq1]\n"
    "isuse=1\n"
    "freq=2400\n"
    "gain=20\n"
    "band_width=20.5\n"
    "samp_freq=61.44\n"
    "type=0\n"
    "[freq2]\n"
    "isuse=0\n"
    "freq=5800\n"
    "[freq3]\n"
    "isuse=1\n"
)


def test_freq_table(tmp_path):
    path = _write(tmp_path, FREQ_TABLE)
    table = get_freq_table(path)
    assert len(table) == 2
    assert table[0] == FreqCorInfo(
        isuse=1, freq=2400, gain=20, band_width=20.5, samp_freq=61.44, kind=0
    )
    assert table[1].freq == 5800
    assert table[1].gain == -1
    assert table[1].band_width == -1.0


def test_freq_table_without_count(tmp_path):
    path = _write(tmp_path, "[freq1]\nfreq=1\n")
    assert get_freq_table(path) == []


def test_freq_list_with_and_without_unused(tmp_path):
    path = _write(tmp_path, FREQ_TABLE)
    everything = get_freq_list(path, True)
    assert everything == [
        FreqInfo(freq=2400, gain=20, isuse=1, num=1),
        FreqInfo(freq=5800, gain=0, isuse=0, num=2),
    ]
    used = get_freq_list(path, False)
    assert used == [everything[0]]


def test_freq_list_missing_file(tmp_path):
    assert get_freq_list(str(tmp_path / "none.ini")) == []


def test_split_path():
    assert split("/home/user/file.txt", "/") == ["", "home", "user", "file.txt"]


def test_split_drops_trailing_empty_field():
    assert split("a/b/", "/") == ["a", "b"]
    assert split("", "/") == []


def test_split_keeps_inner_empty_fields():
    assert split("a..b", ".") == ["a", "", "b"]