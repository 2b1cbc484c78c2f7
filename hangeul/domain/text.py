from __future__ import annotations

"""Hangul-only text helpers built on the syllable codecs.

  - decompose_text(): precomposed syllables -> conjoining jamo
  - compose_text():   conjoining jamo runs -> precomposed syllables

Only modern Hangul is touched; every other character passes through as-is.
"""

from typing import List

from hangeul.domain.builder import SyllableBuilder
from hangeul.domain.jamo import Choseong, Jongseong, Jungseong
from hangeul.domain.syllable import ModernSyllable


def decompose_text(text: str) -> str:
    out: List[str] = []
    for ch in text or "":
        syllable = ModernSyllable.from_char(ch)
        out.append(syllable.decomposed() if syllable is not None else ch)
    return "".join(out)


class _Composer:
    """Feeds jamo into a SyllableBuilder one character at a time."""

    def __init__(self) -> None:
        self.out: List[str] = []
        self._builder = SyllableBuilder.new()
        self._pending: List[str] = []

    def flush(self) -> None:
        if self._pending:
            composed = self._builder.to_char()
            self.out.append(composed if composed is not None else "".join(self._pending))
        self._builder.reset()
        self._pending = []

    def _attach_final_to_previous(self, jongseong: Jongseong) -> bool:
        # An already composed LV syllable still accepts a trailing consonant
        if self._pending or not self.out:
            return False
        previous = ModernSyllable.from_char(self.out[-1])
        if previous is None or previous.jongseong is not None:
            return False
        self.out[-1] = ModernSyllable(previous.choseong, previous.jungseong, jongseong).to_char() or self.out[-1]
        return True

    def feed(self, ch: str) -> None:
        choseong = Choseong.from_char(ch)
        if choseong is not None:
            self.flush()
            self._builder.set(choseong)
            self._pending.append(ch)
            return

        jungseong = Jungseong.from_char(ch)
        if jungseong is not None:
            if self._builder.choseong is not None and self._builder.jungseong is None:
                self._builder.set(jungseong)
                self._pending.append(ch)
                return
            self.flush()
            self.out.append(ch)
            return

        jongseong = Jongseong.from_char(ch)
        if jongseong is not None:
            if self._builder.is_complete and self._builder.jongseong is None:
                self._builder.set(jongseong)
                self._pending.append(ch)
                self.flush()
                return
            self.flush()
            if not self._attach_final_to_previous(jongseong):
                self.out.append(ch)
            return

        self.flush()
        self.out.append(ch)


def compose_text(text: str) -> str:
    composer = _Composer()
    for ch in text or "":
        composer.feed(ch)
    composer.flush()
    return "".join(composer.out)
