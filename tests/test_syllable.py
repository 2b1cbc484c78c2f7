import unicodedata

import pytest

from hangeul.domain.jamo import Choseong, Jongseong, Jungseong
from hangeul.domain.syllable import LazySyllable, ModernSyllable, pack


def test_syllable_round_trip_all(all_syllable_scalars):
    for v in all_syllable_scalars:
        expected = chr(v)
        modern = ModernSyllable.from_scalar(v)
        lazy = LazySyllable.from_scalar(v)
        assert modern is not None and lazy is not None
        assert modern.to_char() == expected
        assert lazy.to_char() == expected


def test_modern_and_lazy_agree(all_syllable_scalars):
    for v in all_syllable_scalars:
        modern = ModernSyllable.from_scalar(v)
        lazy = LazySyllable.from_scalar(v)
        assert modern.choseong is lazy.choseong
        assert modern.jungseong is lazy.jungseong
        assert modern.jongseong is lazy.jongseong
        assert lazy.to_modern() == modern


def test_ordinals_stay_in_range(all_syllable_scalars):
    for v in all_syllable_scalars:
        syl = ModernSyllable.from_scalar(v)
        assert 0 <= int(syl.choseong) <= 18
        assert 0 <= int(syl.jungseong) <= 20
        jong = 0 if syl.jongseong is None else int(syl.jongseong)
        assert 0 <= jong <= 27


@pytest.mark.parametrize("v", [0xABFF, 0xD7A4, 0, 0x1100, 0x3131])
def test_rejects_out_of_block(v):
    assert ModernSyllable.from_scalar(v) is None
    assert LazySyllable.from_scalar(v) is None


def test_rejects_non_single_characters():
    assert ModernSyllable.from_char("") is None
    assert ModernSyllable.from_char("아희") is None
    assert LazySyllable.from_char("a") is None


def test_a():
    syl = ModernSyllable.from_char("아")
    assert syl.choseong is Choseong.IEUNG
    assert int(syl.choseong) == 11
    assert syl.jungseong is Jungseong.A
    assert int(syl.jungseong) == 0
    assert syl.jongseong is None
    assert syl.scalar() == 0xC544
    assert syl.to_char() == "아"


def test_hui():
    syl = ModernSyllable.from_char("희")
    assert syl.choseong is Choseong.HIEUT
    assert int(syl.choseong) == 18
    assert syl.jungseong is Jungseong.I
    assert int(syl.jungseong) == 20
    assert syl.jongseong is None
    assert syl.to_char() == "희"


def test_with_jongseong():
    syl = ModernSyllable.from_char("방")
    assert (syl.choseong, syl.jungseong, syl.jongseong) == (Choseong.BIEUP, Jungseong.A, Jongseong.IEUNG)

    syl = ModernSyllable.from_char("맣")
    assert (syl.choseong, syl.jungseong, syl.jongseong) == (Choseong.MIEUM, Jungseong.A, Jongseong.HIEUT)


def test_block_edges():
    first = ModernSyllable.from_scalar(0xAC00)
    assert (first.choseong, first.jungseong, first.jongseong) == (Choseong.GIYEOK, Jungseong.A, None)
    last = ModernSyllable.from_scalar(0xD7A3)
    assert (last.choseong, last.jungseong, last.jongseong) == (Choseong.HIEUT, Jungseong.I, Jongseong.HIEUT)


def test_sample_word_round_trips():
    text = "아희방맣희"
    for ch in text:
        modern = ModernSyllable.from_char(ch)
        lazy = LazySyllable.from_char(ch)
        assert modern.to_char() == ch
        assert lazy.to_char() == ch
        assert modern.to_char() == lazy.to_char()
        assert (modern.choseong, modern.jungseong, modern.jongseong) == (
            lazy.choseong, lazy.jungseong, lazy.jongseong
        )


def test_from_parts_and_pack():
    syl = ModernSyllable.from_parts(Choseong.GIYEOK, Jungseong.A, Jongseong.NIEUN)
    assert syl.to_char() == "간"
    assert pack(Choseong.GIYEOK, Jungseong.A) == 0xAC00
    assert pack(Choseong.HIEUT, Jungseong.I, Jongseong.HIEUT) == 0xD7A3


def test_from_parts_rejects_wrong_slot_types():
    with pytest.raises(TypeError):
        ModernSyllable.from_parts(Jungseong.A, Jungseong.A)
    with pytest.raises(TypeError):
        ModernSyllable.from_parts(Choseong.GIYEOK, Jungseong.A, Choseong.GIYEOK)


def test_decomposed_matches_nfd(all_syllable_scalars):
    for v in all_syllable_scalars:
        ch = chr(v)
        assert ModernSyllable.from_scalar(v).decomposed() == unicodedata.normalize("NFD", ch)


def test_lazy_constructor_validates():
    with pytest.raises(ValueError):
        LazySyllable(0xD7A4)


def test_values_are_immutable():
    syl = ModernSyllable.from_char("가")
    with pytest.raises(AttributeError):
        syl.choseong = Choseong.NIEUN  # type: ignore[misc]
    lazy = LazySyllable.from_char("가")
    with pytest.raises(AttributeError):
        lazy.data = 0xAC01  # type: ignore[misc]


def test_str():
    assert str(ModernSyllable.from_char("한")) == "한"
    assert str(LazySyllable.from_char("글")) == "글"


@pytest.mark.parametrize("parts", [
    (Jongseong.GIYEOK, Jungseong.A, None),
    (Choseong.HIEUT, Choseong.NIEUN, None),
    (Choseong.HIEUT, Jungseong.A, Choseong.NIEUN),
    (0, Jungseong.A, None),
    (Choseong.HIEUT, Jungseong.A, 4),
])
def test_constructor_rejects_wrong_slot_types(parts):
    with pytest.raises(TypeError):
        ModernSyllable(*parts)
