from __future__ import annotations

"""Unicode code block metadata and the character conversion contract (domain layer).

This module centralises:
  - Block boundary constants for modern syllables and conjoining jamo
  - `Codeblock`, the (start, end, count) descriptor every codec type exposes
  - `Character` / `Syllable`, the structural contracts shared by the codecs

Notes:
  - Compatibility jamo (U+3131..) are display-only and live in
    `hangeul/domain/classification.py`; the codecs never produce them.
"""

from dataclasses import dataclass
from typing import Final, Optional, Protocol, runtime_checkable


# -----------------------------------------------------------------------------
# Block boundaries
# -----------------------------------------------------------------------------

SYLLABLE_START: Final[int] = 0xAC00  # 가
SYLLABLE_END: Final[int] = 0xD7A3  # 힣

CHOSEONG_START: Final[int] = 0x1100
CHOSEONG_END: Final[int] = 0x1112

JUNGSEONG_START: Final[int] = 0x1161
JUNGSEONG_END: Final[int] = 0x1175

JONGSEONG_START: Final[int] = 0x11A8
JONGSEONG_END: Final[int] = 0x11C2

# Fillers stand in for a missing choseong / jungseong in decomposed output
CHOSEONG_FILLER: Final[str] = "\u115f"
JUNGSEONG_FILLER: Final[str] = "\u1160"

CHOSEONG_COUNT: Final[int] = CHOSEONG_END - CHOSEONG_START + 1
JUNGSEONG_COUNT: Final[int] = JUNGSEONG_END - JUNGSEONG_START + 1
JONGSEONG_COUNT: Final[int] = JONGSEONG_END - JONGSEONG_START + 1
# Ordinal 0 of the trailing position means "no jongseong"
JONGSEONG_COUNT_WITH_EMPTY: Final[int] = JONGSEONG_COUNT + 1

_MAX_SCALAR: Final[int] = 0x10FFFF
_SURROGATE_START: Final[int] = 0xD800
_SURROGATE_END: Final[int] = 0xDFFF


# -----------------------------------------------------------------------------
# Descriptor
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Codeblock:
    """A contiguous, inclusive range of Unicode scalar values."""

    start_point: int
    end_point: int

    def __post_init__(self) -> None:
        if self.start_point > self.end_point:
            raise ValueError(
                "Invalid codeblock: start_point=%#x > end_point=%#x" % (self.start_point, self.end_point)
            )

    @property
    def count(self) -> int:
        return self.end_point - self.start_point + 1

    def contains(self, v: int) -> bool:
        return self.start_point <= v <= self.end_point


SYLLABLE_BLOCK: Final[Codeblock] = Codeblock(SYLLABLE_START, SYLLABLE_END)
CHOSEONG_BLOCK: Final[Codeblock] = Codeblock(CHOSEONG_START, CHOSEONG_END)
JUNGSEONG_BLOCK: Final[Codeblock] = Codeblock(JUNGSEONG_START, JUNGSEONG_END)
JONGSEONG_BLOCK: Final[Codeblock] = Codeblock(JONGSEONG_START, JONGSEONG_END)


# -----------------------------------------------------------------------------
# Scalar helpers
# -----------------------------------------------------------------------------

def scalar_of(c: object) -> Optional[int]:
    """Return the scalar value of a one-character string, else None."""
    if not isinstance(c, str) or len(c) != 1:
        return None
    return ord(c)


def char_from_scalar(v: int) -> Optional[str]:
    """Return `chr(v)` if `v` is a Unicode scalar value (no surrogates), else None."""
    if v < 0 or v > _MAX_SCALAR:
        return None
    if _SURROGATE_START <= v <= _SURROGATE_END:
        return None
    return chr(v)


# -----------------------------------------------------------------------------
# Contracts
# -----------------------------------------------------------------------------

@runtime_checkable
class Character(Protocol):
    """Conversion between a raw scalar/character and a codec value.

    `from_scalar` / `from_char` are classmethods on implementers and return
    None for out-of-domain input. `to_char` returns None only when the
    computed scalar is not a valid character.
    """

    @classmethod
    def codeblock(cls) -> Codeblock: ...

    @classmethod
    def from_scalar(cls, v: int) -> Optional["Character"]: ...

    @classmethod
    def from_char(cls, c: str) -> Optional["Character"]: ...

    def to_char(self) -> Optional[str]: ...


@runtime_checkable
class Syllable(Character, Protocol):
    """A syllable-like value exposing its three phoneme slots."""

    @property
    def choseong(self): ...

    @property
    def jungseong(self): ...

    @property
    def jongseong(self): ...
