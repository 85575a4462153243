"""
Name Validator
===============

Lexical gate for names pulled out of executable metadata.  Import and
export tables are a common corruption and obfuscation vector, so every
extracted token is checked against an allow-list before it is trusted
for display or lookup.

Two validator kinds exist, each owning an explicit character table:

* **symbol** -- mangled function names: Unicode letters and numbers plus
  ``_ ? @ $ ( )``.
* **dos** -- FAT 8.3 short filenames (DLL names): Unicode letters and
  numbers plus ``! / $ % & ' ( ) ` - @ ^ _ { } ~ + , . ; = [ ]``.

A token is accepted iff it is non-empty and every code point belongs to
the kind's table.  Length is deliberately not checked; DLL names in
modern images routinely exceed the 8.3 bound.

This is a cheap heuristic with known false positives and negatives and
must never be used as a security boundary.

References:
    - Microsoft. (2024). PE Format -- The .idata Section. Microsoft Learn.
    - Wikipedia. 8.3 filename. https://en.wikipedia.org/wiki/8.3_filename
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from shared.math_utils import BytesLike, byte_view

from prism.core.models import NameKind


# Replacement shown for a name that fails validation.
INVALID_NAME: str = "*invalid*"


# ---------------------------------------------------------------------------
# Character tables
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NameCharset:
    """Allow-list for one validator kind.

    Attributes:
        kind: Validator kind this table belongs to.
        categories: Accepted Unicode major categories (``"L"``, ``"N"``).
        punctuation: Individually accepted characters.
    """

    kind: NameKind
    categories: frozenset[str]
    punctuation: frozenset[str]

    def allows(self, char: str) -> bool:
        """Return ``True`` if the single code point *char* is accepted."""
        if char in self.punctuation:
            return True
        return unicodedata.category(char)[0] in self.categories


_LETTERS_AND_NUMBERS = frozenset({"L", "N"})

SYMBOL_CHARSET = NameCharset(
    kind=NameKind.SYMBOL,
    categories=_LETTERS_AND_NUMBERS,
    punctuation=frozenset("_?@$()"),
)

DOS_FILENAME_CHARSET = NameCharset(
    kind=NameKind.DOS_FILENAME,
    categories=_LETTERS_AND_NUMBERS,
    punctuation=frozenset("!/$%&'()`-@^_{}~+,.;=[]"),
)

CHARSETS: Mapping[NameKind, NameCharset] = MappingProxyType(
    {
        NameKind.SYMBOL: SYMBOL_CHARSET,
        NameKind.DOS_FILENAME: DOS_FILENAME_CHARSET,
    }
)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def decode_token(token: BytesLike) -> str:
    """Decode a raw token as UTF-8, mapping invalid bytes to U+FFFD.

    U+FFFD is a symbol (category ``So``), so it is in no allow-list and an
    undecodable token can never validate.
    """
    return str(byte_view(token), "utf-8", "replace")


def is_valid_name(token: BytesLike, kind: NameKind | str) -> bool:
    """Classify *token* against the allow-list of *kind*.

    Args:
        token: Raw name bytes; never modified.
        kind: :class:`NameKind` member or its value (``"symbol"``, ``"dos"``).

    Returns:
        ``True`` when the token is non-empty and fully allow-listed.
    """
    charset = CHARSETS[NameKind(kind)]
    text = decode_token(token)
    if not text:
        return False
    return all(charset.allows(char) for char in text)


def is_valid_symbol_name(token: BytesLike) -> bool:
    """Check an imported/exported function name."""
    return is_valid_name(token, NameKind.SYMBOL)


def is_valid_short_filename(token: BytesLike) -> bool:
    """Check a DOS 8.3-style (DLL) filename."""
    return is_valid_name(token, NameKind.DOS_FILENAME)


def display_name(token: BytesLike, kind: NameKind | str) -> str:
    """Return *token* as text if it validates, else :data:`INVALID_NAME`."""
    if is_valid_name(token, kind):
        return decode_token(token)
    return INVALID_NAME
