from __future__ import annotations

"""Conjoining jamo codecs (domain layer).

Each phoneme class is a closed `IntEnum` whose values are the fixed ordinals
used by the Unicode Hangul Syllables algorithm:

  - Choseong  0..18 -> U+1100 + ordinal
  - Jungseong 0..20 -> U+1161 + ordinal
  - Jongseong 1..27 -> U+11A8 + ordinal - 1  (0 is reserved for "no final")

The trailing position has no "blank" member: a syllable without a final
consonant carries `None` instead.
"""

from enum import IntEnum
from typing import Final, Optional, Union

from hangeul.domain.codeblock import (
    CHOSEONG_BLOCK,
    JONGSEONG_BLOCK,
    JUNGSEONG_BLOCK,
    Codeblock,
    char_from_scalar,
    scalar_of,
)


def _member_from_ordinal(enum_cls, ordinal: int):
    try:
        return enum_cls(ordinal)
    except ValueError:
        return None


# -----------------------------------------------------------------------------
# Leading consonants
# -----------------------------------------------------------------------------

class Choseong(IntEnum):
    GIYEOK = 0
    SSANG_GIYEOK = 1
    NIEUN = 2
    DIGEUT = 3
    SSANG_DIGEUT = 4
    RIEUL = 5
    MIEUM = 6
    BIEUP = 7
    SSANG_BIEUP = 8
    SIOT = 9
    SSANG_SIOT = 10
    IEUNG = 11
    JIEUT = 12
    SSANG_JIEUT = 13
    CHIEUT = 14
    KIEUK = 15
    TIEUT = 16
    PIEUP = 17
    HIEUT = 18

    @classmethod
    def codeblock(cls) -> Codeblock:
        return CHOSEONG_BLOCK

    @classmethod
    def from_scalar(cls, v: int) -> Optional[Choseong]:
        return _member_from_ordinal(cls, v - CHOSEONG_BLOCK.start_point)

    @classmethod
    def from_char(cls, c: str) -> Optional[Choseong]:
        v = scalar_of(c)
        return None if v is None else cls.from_scalar(v)

    def to_char(self) -> Optional[str]:
        return char_from_scalar(CHOSEONG_BLOCK.start_point + int(self))


# -----------------------------------------------------------------------------
# Vowels
# -----------------------------------------------------------------------------

class Jungseong(IntEnum):
    A = 0
    AE = 1
    YA = 2
    YAE = 3
    EO = 4
    E = 5
    YEO = 6
    YE = 7
    O = 8
    WA = 9
    WAE = 10
    OE = 11
    YO = 12
    U = 13
    WEO = 14
    WE = 15
    WI = 16
    YU = 17
    EU = 18
    UI = 19
    I = 20

    @classmethod
    def codeblock(cls) -> Codeblock:
        return JUNGSEONG_BLOCK

    @classmethod
    def from_scalar(cls, v: int) -> Optional[Jungseong]:
        return _member_from_ordinal(cls, v - JUNGSEONG_BLOCK.start_point)

    @classmethod
    def from_char(cls, c: str) -> Optional[Jungseong]:
        v = scalar_of(c)
        return None if v is None else cls.from_scalar(v)

    def to_char(self) -> Optional[str]:
        return char_from_scalar(JUNGSEONG_BLOCK.start_point + int(self))


# -----------------------------------------------------------------------------
# Trailing consonants
# -----------------------------------------------------------------------------

class Jongseong(IntEnum):
    GIYEOK = 1
    SSANG_GIYEOK = 2
    GIYEOK_SIOT = 3
    NIEUN = 4
    NIEUN_JIEUT = 5
    NIEUN_HIEUT = 6
    DIGEUT = 7
    RIEUL = 8
    RIEUL_GIYEOK = 9
    RIEUL_MIEUM = 10
    RIEUL_BIEUP = 11
    RIEUL_SIOT = 12
    RIEUL_TIEUT = 13
    RIEUL_PIEUP = 14
    RIEUL_HIEUT = 15
    MIEUM = 16
    BIEUP = 17
    BIEUP_SIOT = 18
    SIOT = 19
    SSANG_SIOT = 20
    IEUNG = 21
    JIEUT = 22
    CHIEUT = 23
    KIEUK = 24
    TIEUT = 25
    PIEUP = 26
    HIEUT = 27

    @classmethod
    def codeblock(cls) -> Codeblock:
        return JONGSEONG_BLOCK

    @classmethod
    def from_scalar(cls, v: int) -> Optional[Jongseong]:
        # Ordinal 0 would be U+11A7, which is not a modern final
        ordinal = v - (JONGSEONG_BLOCK.start_point - 1)
        if ordinal == 0:
            return None
        return _member_from_ordinal(cls, ordinal)

    @classmethod
    def from_char(cls, c: str) -> Optional[Jongseong]:
        v = scalar_of(c)
        return None if v is None else cls.from_scalar(v)

    def to_char(self) -> Optional[str]:
        return char_from_scalar(JONGSEONG_BLOCK.start_point + int(self) - 1)


# -----------------------------------------------------------------------------
# Any phoneme
# -----------------------------------------------------------------------------

Phoneme = Union[Choseong, Jungseong, Jongseong]

PHONEME_TYPES: Final[tuple[type, ...]] = (Choseong, Jungseong, Jongseong)


def phoneme_from_char(c: str) -> Optional[Phoneme]:
    """Return the conjoining jamo phoneme for `c`, or None if `c` is not one.

    The three blocks do not overlap, so at most one codec accepts `c`.
    """
    for phoneme_type in PHONEME_TYPES:
        found = phoneme_type.from_char(c)
        if found is not None:
            return found
    return None


def phoneme_from_name(phoneme_type: type, name: str) -> Optional[Phoneme]:
    """Look up a member by name (case-insensitive, `-` or `_` separated)."""
    key = (name or "").strip().upper().replace("-", "_")
    if not key:
        return None
    return phoneme_type.__members__.get(key)


def check_slot(name: str, phoneme_type: type, value: object, *, optional: bool = False) -> None:
    """Raise TypeError unless `value` is a `phoneme_type` member (or None when `optional`).

    IntEnum members of different phoneme types compare equal by ordinal, so
    slots are checked by type rather than by value.
    """
    if value is None and optional:
        return
    if not isinstance(value, phoneme_type):
        expected = phoneme_type.__name__ + (" or None" if optional else "")
        raise TypeError("%s must be a %s, got %r" % (name, expected, value))
