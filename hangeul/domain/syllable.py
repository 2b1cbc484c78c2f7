from __future__ import annotations

"""Modern Hangul syllable codecs (domain layer).

A precomposed syllable packs three ordinals into one scalar using mixed radix
(19, 21, 28), choseong most significant:

    scalar = SBase + (LIndex * VCount + VIndex) * TCount + TIndex

where TIndex 0 means "no jongseong".

Two front-ends share that arithmetic:
  - `ModernSyllable` decodes eagerly and stores the phonemes.
  - `LazySyllable` stores only the scalar and decodes on every query.
"""

from dataclasses import dataclass
from typing import Optional

from hangeul.domain.codeblock import (
    CHOSEONG_COUNT,
    JONGSEONG_COUNT_WITH_EMPTY,
    JUNGSEONG_COUNT,
    SYLLABLE_BLOCK,
    Codeblock,
    char_from_scalar,
    scalar_of,
)
from hangeul.domain.jamo import Choseong, Jongseong, Jungseong, check_slot


# -----------------------------------------------------------------------------
# Shared arithmetic
# -----------------------------------------------------------------------------

def _choseong_index(base: int) -> int:
    return base // (JUNGSEONG_COUNT * JONGSEONG_COUNT_WITH_EMPTY) % CHOSEONG_COUNT


def _jungseong_index(base: int) -> int:
    return base // JONGSEONG_COUNT_WITH_EMPTY % JUNGSEONG_COUNT


def _jongseong_index(base: int) -> int:
    return base % JONGSEONG_COUNT_WITH_EMPTY


def _jongseong_from_index(index: int) -> Optional[Jongseong]:
    return Jongseong(index) if index else None


def pack(choseong: Choseong, jungseong: Jungseong, jongseong: Optional[Jongseong] = None) -> int:
    """Return the syllable scalar for a complete phoneme triple."""
    jongseong_value = int(jongseong) if jongseong is not None else 0
    return SYLLABLE_BLOCK.start_point + jongseong_value + JONGSEONG_COUNT_WITH_EMPTY * (
        int(jungseong) + JUNGSEONG_COUNT * int(choseong)
    )


# -----------------------------------------------------------------------------
# Eager codec
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ModernSyllable:
    """A decoded modern syllable: choseong + jungseong + optional jongseong."""

    choseong: Choseong
    jungseong: Jungseong
    jongseong: Optional[Jongseong] = None

    def __post_init__(self) -> None:
        """Reject phonemes of the wrong type (TypeError)."""
        check_slot("choseong", Choseong, self.choseong)
        check_slot("jungseong", Jungseong, self.jungseong)
        check_slot("jongseong", Jongseong, self.jongseong, optional=True)

    @classmethod
    def codeblock(cls) -> Codeblock:
        return SYLLABLE_BLOCK

    @classmethod
    def from_scalar(cls, code: int) -> Optional[ModernSyllable]:
        if not SYLLABLE_BLOCK.contains(code):
            return None

        base = code - SYLLABLE_BLOCK.start_point
        jongseong = _jongseong_from_index(base % JONGSEONG_COUNT_WITH_EMPTY)
        base //= JONGSEONG_COUNT_WITH_EMPTY
        jungseong = Jungseong(base % JUNGSEONG_COUNT)
        base //= JUNGSEONG_COUNT
        choseong = Choseong(base % CHOSEONG_COUNT)

        return cls(choseong=choseong, jungseong=jungseong, jongseong=jongseong)

    @classmethod
    def from_char(cls, c: str) -> Optional[ModernSyllable]:
        v = scalar_of(c)
        return None if v is None else cls.from_scalar(v)

    @classmethod
    def from_parts(
        cls,
        choseong: Choseong,
        jungseong: Jungseong,
        jongseong: Optional[Jongseong] = None,
    ) -> ModernSyllable:
        return cls(choseong=choseong, jungseong=jungseong, jongseong=jongseong)

    def scalar(self) -> int:
        return pack(self.choseong, self.jungseong, self.jongseong)

    def to_char(self) -> Optional[str]:
        return char_from_scalar(self.scalar())

    def decomposed(self) -> str:
        """Return the conjoining jamo sequence (2 or 3 characters)."""
        parts = [self.choseong.to_char(), self.jungseong.to_char()]
        if self.jongseong is not None:
            parts.append(self.jongseong.to_char())
        return "".join(p for p in parts if p)

    def __str__(self) -> str:
        return self.to_char() or ""


# -----------------------------------------------------------------------------
# Lazy view
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LazySyllable:
    """A syllable scalar whose phonemes are recomputed on each access."""

    data: int

    def __post_init__(self) -> None:
        if not SYLLABLE_BLOCK.contains(self.data):
            raise ValueError("Not a modern Hangul syllable scalar: %#x" % (self.data,))

    @classmethod
    def codeblock(cls) -> Codeblock:
        return SYLLABLE_BLOCK

    @classmethod
    def from_scalar(cls, code: int) -> Optional[LazySyllable]:
        if not SYLLABLE_BLOCK.contains(code):
            return None
        return cls(data=code)

    @classmethod
    def from_char(cls, c: str) -> Optional[LazySyllable]:
        v = scalar_of(c)
        return None if v is None else cls.from_scalar(v)

    @property
    def _base(self) -> int:
        return self.data - SYLLABLE_BLOCK.start_point

    @property
    def choseong(self) -> Choseong:
        return Choseong(_choseong_index(self._base))

    @property
    def jungseong(self) -> Jungseong:
        return Jungseong(_jungseong_index(self._base))

    @property
    def jongseong(self) -> Optional[Jongseong]:
        return _jongseong_from_index(_jongseong_index(self._base))

    def to_char(self) -> Optional[str]:
        return char_from_scalar(self.data)

    def to_modern(self) -> ModernSyllable:
        return ModernSyllable(choseong=self.choseong, jungseong=self.jungseong, jongseong=self.jongseong)

    def __str__(self) -> str:
        return self.to_char() or ""
