from __future__ import annotations

"""Character classification for Hangul data.

Splits characters into precomposed syllables, conjoining jamo and
compatibility jamo, and tells modern letters from archaic ones. Only the
modern conjoining ranges are understood by the codecs; everything else here
is informational.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

from hangeul.domain.codeblock import (
    CHOSEONG_BLOCK,
    JONGSEONG_BLOCK,
    JUNGSEONG_BLOCK,
    SYLLABLE_BLOCK,
    Codeblock,
    scalar_of,
)


class Modernity(Enum):
    MODERN = "modern"
    ANCIENT = "ancient"


class DataClass(Enum):
    NON_HANGEUL = "non_hangeul"
    SYLLABLE = "syllable"
    JAMO = "jamo"
    COMPATIBILITY_JAMO = "compatibility_jamo"


@dataclass(frozen=True)
class Classification:
    data_class: DataClass
    modernity: Optional[Modernity] = None

    @property
    def is_hangeul(self) -> bool:
        return self.data_class is not DataClass.NON_HANGEUL


# Whole conjoining jamo block, archaic letters and fillers included
JAMO_BLOCK: Final[Codeblock] = Codeblock(0x1100, 0x11FF)

# U+3164 (compatibility filler) sits between the two ranges and is not classified
COMPAT_MODERN_BLOCK: Final[Codeblock] = Codeblock(0x3131, 0x3163)
COMPAT_ANCIENT_BLOCK: Final[Codeblock] = Codeblock(0x3165, 0x318E)

_MODERN_JAMO_BLOCKS: Final[tuple[Codeblock, ...]] = (CHOSEONG_BLOCK, JUNGSEONG_BLOCK, JONGSEONG_BLOCK)

_NON_HANGEUL: Final[Classification] = Classification(DataClass.NON_HANGEUL)


def classify_scalar(v: int) -> Classification:
    if SYLLABLE_BLOCK.contains(v):
        return Classification(DataClass.SYLLABLE, Modernity.MODERN)
    if JAMO_BLOCK.contains(v):
        if any(block.contains(v) for block in _MODERN_JAMO_BLOCKS):
            return Classification(DataClass.JAMO, Modernity.MODERN)
        return Classification(DataClass.JAMO, Modernity.ANCIENT)
    if COMPAT_MODERN_BLOCK.contains(v):
        return Classification(DataClass.COMPATIBILITY_JAMO, Modernity.MODERN)
    if COMPAT_ANCIENT_BLOCK.contains(v):
        return Classification(DataClass.COMPATIBILITY_JAMO, Modernity.ANCIENT)
    return _NON_HANGEUL


def classify(c: str) -> Classification:
    """Classify a single character. Anything that is not one character is NON_HANGEUL."""
    v = scalar_of(c)
    if v is None:
        return _NON_HANGEUL
    return classify_scalar(v)


def is_syllable(c: str) -> bool:
    return classify(c).data_class is DataClass.SYLLABLE


def is_jamo(c: str) -> bool:
    return classify(c).data_class is DataClass.JAMO


def is_modern(c: str) -> bool:
    return classify(c).modernity is Modernity.MODERN
