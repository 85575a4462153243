import pytest

from prism.analyzers.names import (
    CHARSETS,
    DOS_FILENAME_CHARSET,
    INVALID_NAME,
    SYMBOL_CHARSET,
    display_name,
    is_valid_name,
    is_valid_short_filename,
    is_valid_symbol_name,
)
from prism.core.models import NameKind


@pytest.mark.parametrize(
    "token",
    [
        b"CreateFileA",
        b"_malloc",
        b"?Foo@@YAXXZ",
        b"$LN42",
        b"operator(int)",
        b"GetProcAddress2",
        "Привет".encode(),
        "١٢٣".encode(),  # Arabic-Indic digits
    ],
)
def test_valid_symbol_names(token):
    assert is_valid_symbol_name(token) is True


@pytest.mark.parametrize(
    "token",
    [
        b"",
        b"foo bar",
        b"foo.bar",
        b"foo-bar",
        b"name\x00",
        b"\x01\x02",
        b"\xff\xfe",
        b"evil;rm",
    ],
)
def test_invalid_symbol_names(token):
    assert is_valid_symbol_name(token) is False


@pytest.mark.parametrize(
    "token",
    [
        b"KERNEL32.DLL",
        b"msvcrt.dll",
        b"api-ms-win-core-synch-l1-2-0.dll",
        b"VERY_LONG_NAME_BEYOND_EIGHT_DOT_THREE.DLL",
        b"a!$%&'()`-@^_{}~+,.;=[]",
        b"dir/file.dll",
    ],
)
def test_valid_short_filenames(token):
    assert is_valid_short_filename(token) is True


@pytest.mark.parametrize(
    "token",
    [
        b"",
        b"KERNEL\x0032.DLL",
        b"user32\t.dll",
        b"file\r\n",
        b"my file.dll",
        b"name#1.dll",
        b"back\\slash.dll",
        b"star*.dll",
        b"\x80\x81.dll",
    ],
)
def test_invalid_short_filenames(token):
    assert is_valid_short_filename(token) is False


def test_kinds_differ_on_dots():
    assert is_valid_name(b"USER32.dll", NameKind.DOS_FILENAME)
    assert not is_valid_name(b"USER32.dll", NameKind.SYMBOL)


def test_kind_can_be_given_by_value():
    assert is_valid_name(b"KERNEL32.DLL", "dos")
    assert is_valid_name(b"CreateFileA", "symbol")


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        is_valid_name(b"x", "elf")


def test_token_is_not_modified():
    token = bytearray(b"bad name")
    is_valid_symbol_name(token)
    assert token == bytearray(b"bad name")


def test_accepts_buffer_views():
    assert is_valid_symbol_name(memoryview(b"CreateFileW"))
    assert is_valid_short_filename(bytearray(b"NTDLL.DLL"))


def test_strided_memoryview_is_decoded_like_its_bytes():
    assert is_valid_short_filename(memoryview(b"A.B.C")[::2])
    assert not is_valid_symbol_name(memoryview(b"a  b")[::2])
    assert display_name(memoryview(b"K_E_R_N")[::2], NameKind.SYMBOL) == "KERN"


def test_charset_tables_are_explicit():
    assert SYMBOL_CHARSET.punctuation == frozenset("_?@$()")
    assert DOS_FILENAME_CHARSET.punctuation == frozenset("!/$%&'()`-@^_{}~+,.;=[]")
    assert CHARSETS[NameKind.SYMBOL] is SYMBOL_CHARSET
    assert CHARSETS[NameKind.DOS_FILENAME] is DOS_FILENAME_CHARSET


def test_charset_tables_are_read_only():
    with pytest.raises(TypeError):
        CHARSETS[NameKind.SYMBOL] = DOS_FILENAME_CHARSET  # type: ignore[index]


def test_display_name():
    assert display_name(b"CreateFileA", NameKind.SYMBOL) == "CreateFileA"
    assert display_name(b"\xde\xad\xbe\xef", NameKind.SYMBOL) == INVALID_NAME
    assert display_name(b"", "dos") == INVALID_NAME
