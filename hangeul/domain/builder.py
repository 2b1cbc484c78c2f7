from __future__ import annotations

"""Incremental syllable composition (domain layer).

`SyllableBuilder` is the only mutable syllable type. Its three slots can be
filled or cleared in any order; it only turns into a precomposed character
once both choseong and jungseong are present.
"""

from dataclasses import dataclass
from typing import Optional

from hangeul.domain.codeblock import CHOSEONG_FILLER, JUNGSEONG_FILLER, SYLLABLE_BLOCK, Codeblock, scalar_of
from hangeul.domain.jamo import Choseong, Jongseong, Jungseong, Phoneme, check_slot
from hangeul.domain.syllable import ModernSyllable

_SLOT_TYPES = {
    "choseong": Choseong,
    "jungseong": Jungseong,
    "jongseong": Jongseong,
}


@dataclass
class SyllableBuilder:
    choseong: Optional[Choseong] = None
    jungseong: Optional[Jungseong] = None
    jongseong: Optional[Jongseong] = None

    def __setattr__(self, name: str, value: object) -> None:
        # Covers __init__ too: every slot is None or its own phoneme type
        slot_type = _SLOT_TYPES.get(name)
        if slot_type is not None:
            check_slot(name, slot_type, value, optional=True)
        super().__setattr__(name, value)

    # ---------------------------
    # Constructors
    # ---------------------------

    @classmethod
    def new(cls) -> SyllableBuilder:
        return cls()

    @classmethod
    def from_parts(
        cls,
        choseong: Optional[Choseong],
        jungseong: Optional[Jungseong],
        jongseong: Optional[Jongseong] = None,
    ) -> SyllableBuilder:
        return cls(choseong=choseong, jungseong=jungseong, jongseong=jongseong)

    @classmethod
    def codeblock(cls) -> Codeblock:
        return SYLLABLE_BLOCK

    @classmethod
    def from_scalar(cls, code: int) -> Optional[SyllableBuilder]:
        syllable = ModernSyllable.from_scalar(code)
        if syllable is None:
            return None
        return cls(choseong=syllable.choseong, jungseong=syllable.jungseong, jongseong=syllable.jongseong)

    @classmethod
    def from_char(cls, c: str) -> Optional[SyllableBuilder]:
        v = scalar_of(c)
        return None if v is None else cls.from_scalar(v)

    # ---------------------------
    # Slot editing
    # ---------------------------

    def set(self, phoneme: Phoneme) -> SyllableBuilder:
        """Put `phoneme` into the slot matching its type. Returns self.

        Raises:
            TypeError: if `phoneme` is not a Choseong, Jungseong or Jongseong.
        """
        if isinstance(phoneme, Choseong):
            self.choseong = phoneme
        elif isinstance(phoneme, Jungseong):
            self.jungseong = phoneme
        elif isinstance(phoneme, Jongseong):
            self.jongseong = phoneme
        else:
            raise TypeError("Not a phoneme: %r" % (phoneme,))
        return self

    def clear(self, phoneme_type: type) -> SyllableBuilder:
        if phoneme_type is Choseong:
            self.choseong = None
        elif phoneme_type is Jungseong:
            self.jungseong = None
        elif phoneme_type is Jongseong:
            self.jongseong = None
        else:
            raise TypeError("Not a phoneme type: %r" % (phoneme_type,))
        return self

    def reset(self) -> SyllableBuilder:
        self.choseong = None
        self.jungseong = None
        self.jongseong = None
        return self

    @property
    def is_empty(self) -> bool:
        return self.choseong is None and self.jungseong is None and self.jongseong is None

    @property
    def is_complete(self) -> bool:
        return self.choseong is not None and self.jungseong is not None

    # ---------------------------
    # Output
    # ---------------------------

    def build(self) -> Optional[ModernSyllable]:
        if self.choseong is None or self.jungseong is None:
            return None
        return ModernSyllable(choseong=self.choseong, jungseong=self.jungseong, jongseong=self.jongseong)

    def to_char(self) -> Optional[str]:
        syllable = self.build()
        return None if syllable is None else syllable.to_char()

    def decomposed(self) -> str:
        """Return the canonical decomposed form, filling missing leading slots.

        A missing choseong or jungseong is rendered with its filler character,
        so a partial builder still has a display form. The jongseong is
        emitted only when present.
        """
        parts = [
            self.choseong.to_char() if self.choseong is not None else CHOSEONG_FILLER,
            self.jungseong.to_char() if self.jungseong is not None else JUNGSEONG_FILLER,
        ]
        if self.jongseong is not None:
            parts.append(self.jongseong.to_char())
        return "".join(p for p in parts if p)
