"""
Explicit collation tables for sorting facility names.

The process locale is never consulted: each language is described by its
alphabet and its case mapping, and :meth:`Collator.sort_key` turns a string
into a three-level key (letters, then accents, then case), with the raw
string as the last tie-break.
"""
from __future__ import annotations

import unicodedata

TURKISH_ALPHABET = "abcçdefgğhıijklmnoöpqrsştuüvwxyz"
TURKISH_CASE_MAP = {"I": "ı", "İ": "i"}

# Primary groups: separators sort before digits, digits before letters,
# letters of the table before anything else.
_SEPARATOR = 0
_DIGIT = 1
_LETTER = 2
_OTHER = 3


class Collator:
    def __init__(self, locale: str, alphabet: str, case_map: dict[str, str] | None = None) -> None:
        self.locale = locale
        self._weights = {ch: i for i, ch in enumerate(alphabet)}
        self._case_map = dict(case_map or {})

    def _lower(self, ch: str) -> str:
        if ch in self._case_map:
            return self._case_map[ch]
        lowered = ch.lower()
        return lowered if len(lowered) == 1 else ch

    def _char_weights(self, ch: str) -> tuple[tuple[int, int], int, int]:
        lower = self._lower(ch)
        tertiary = 0 if lower == ch else 1

        if lower in self._weights:
            return (_LETTER, self._weights[lower]), 0, tertiary

        decomposed = unicodedata.normalize("NFD", lower)
        base = decomposed[0]
        if base in self._weights:
            accent = sum(ord(mark) for mark in decomposed[1:])
            return (_LETTER, self._weights[base]), accent, tertiary

        if ch.isdigit():
            return (_DIGIT, unicodedata.digit(ch, 0)), 0, 0
        if ch.isspace() or unicodedata.category(ch).startswith(("P", "S")):
            return (_SEPARATOR, 0 if ch.isspace() else ord(ch)), 0, 0
        return (_OTHER, ord(lower)), 0, tertiary

    def sort_key(self, text: str) -> tuple:
        primary: list[tuple[int, int]] = []
        secondary: list[int] = []
        tertiary: list[int] = []
        for ch in unicodedata.normalize("NFC", text):
            p, s, t = self._char_weights(ch)
            primary.append(p)
            secondary.append(s)
            tertiary.append(t)
        return tuple(primary), tuple(secondary), tuple(tertiary), text

    def sorted(self, values):
        return sorted(values, key=self.sort_key)


TURKISH = Collator("tr", TURKISH_ALPHABET, TURKISH_CASE_MAP)

_COLLATORS: dict[str, Collator] = {"tr": TURKISH}


def get_collator(locale: str) -> Collator:
    """Collator for ``locale`` (e.g. ``"tr"`` or ``"tr-TR"``)."""
    key = locale.split("-")[0].split("_")[0].lower()
    try:
        return _COLLATORS[key]
    except KeyError:
        raise LookupError(f"No collation table for locale {locale!r}") from None
