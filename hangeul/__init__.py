"""
hangeul: composed Hangul syllable <-> conjoining jamo codec.

Re-exports the domain layer so callers can `from hangeul import ModernSyllable`.
"""

from .domain.builder import SyllableBuilder  # noqa: F401
from .domain.classification import (  # noqa: F401
    Classification,
    DataClass,
    Modernity,
    classify,
    is_jamo,
    is_modern,
    is_syllable,
)
from .domain.codeblock import (  # noqa: F401
    CHOSEONG_COUNT,
    CHOSEONG_END,
    CHOSEONG_FILLER,
    CHOSEONG_START,
    JONGSEONG_COUNT,
    JONGSEONG_COUNT_WITH_EMPTY,
    JONGSEONG_END,
    JONGSEONG_START,
    JUNGSEONG_COUNT,
    JUNGSEONG_END,
    JUNGSEONG_FILLER,
    JUNGSEONG_START,
    SYLLABLE_END,
    SYLLABLE_START,
    Character,
    Codeblock,
    Syllable,
)
from .domain.jamo import Choseong, Jongseong, Jungseong, Phoneme, phoneme_from_char  # noqa: F401
from .domain.syllable import LazySyllable, ModernSyllable  # noqa: F401
from .domain.text import compose_text, decompose_text  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "CHOSEONG_COUNT",
    "CHOSEONG_END",
    "CHOSEONG_FILLER",
    "CHOSEONG_START",
    "JONGSEONG_COUNT",
    "JONGSEONG_COUNT_WITH_EMPTY",
    "JONGSEONG_END",
    "JONGSEONG_START",
    "JUNGSEONG_COUNT",
    "JUNGSEONG_END",
    "JUNGSEONG_FILLER",
    "JUNGSEONG_START",
    "SYLLABLE_END",
    "SYLLABLE_START",
    "Character",
    "Choseong",
    "Classification",
    "Codeblock",
    "DataClass",
    "Jongseong",
    "Jungseong",
    "LazySyllable",
    "ModernSyllable",
    "Modernity",
    "Phoneme",
    "Syllable",
    "SyllableBuilder",
    "classify",
    "compose_text",
    "decompose_text",
    "is_jamo",
    "is_modern",
    "is_syllable",
    "phoneme_from_char",
]
