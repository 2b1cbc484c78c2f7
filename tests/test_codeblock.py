import pytest

from hangeul.domain import codeblock as cb
from hangeul.domain.builder import SyllableBuilder
from hangeul.domain.codeblock import Character, Codeblock, Syllable, char_from_scalar, scalar_of
from hangeul.domain.jamo import Choseong, Jongseong, Jungseong
from hangeul.domain.syllable import LazySyllable, ModernSyllable


def test_block_constants():
    assert ModernSyllable.codeblock().start_point == 0xAC00
    assert ModernSyllable.codeblock().end_point == 0xD7A3
    assert ModernSyllable.codeblock().count == 11172

    assert Choseong.codeblock().start_point == 0x1100
    assert Choseong.codeblock().end_point == 0x1112
    assert Jungseong.codeblock().start_point == 0x1161
    assert Jungseong.codeblock().end_point == 0x1175
    assert Jongseong.codeblock().start_point == 0x11A8
    assert Jongseong.codeblock().end_point == 0x11C2

    assert Choseong.codeblock().count == 19
    assert Jungseong.codeblock().count == 21
    assert Jongseong.codeblock().count == 27
    assert cb.JONGSEONG_COUNT_WITH_EMPTY == 28


def test_counts_match_enum_sizes():
    assert len(Choseong) == cb.CHOSEONG_COUNT
    assert len(Jungseong) == cb.JUNGSEONG_COUNT
    assert len(Jongseong) == cb.JONGSEONG_COUNT


def test_syllable_count_is_product_of_radices():
    assert cb.CHOSEONG_COUNT * cb.JUNGSEONG_COUNT * cb.JONGSEONG_COUNT_WITH_EMPTY == ModernSyllable.codeblock().count


def test_fillers():
    assert ord(cb.CHOSEONG_FILLER) == 0x115F
    assert ord(cb.JUNGSEONG_FILLER) == 0x1160


def test_codeblock_rejects_inverted_range():
    with pytest.raises(ValueError):
        Codeblock(0x20, 0x10)


def test_codeblock_contains_is_inclusive():
    block = Codeblock(0x10, 0x12)
    assert block.count == 3
    assert block.contains(0x10)
    assert block.contains(0x12)
    assert not block.contains(0x0F)
    assert not block.contains(0x13)


def test_scalar_helpers():
    assert scalar_of("가") == 0xAC00
    assert scalar_of("") is None
    assert scalar_of("가나") is None
    assert scalar_of(0xAC00) is None

    assert char_from_scalar(0xAC00) == "가"
    assert char_from_scalar(0xD800) is None
    assert char_from_scalar(0x110000) is None
    assert char_from_scalar(-1) is None


@pytest.mark.parametrize("value", [
    Choseong.GIYEOK,
    Jungseong.A,
    Jongseong.HIEUT,
    ModernSyllable(Choseong.GIYEOK, Jungseong.A),
    LazySyllable(0xAC00),
    SyllableBuilder(),
])
def test_codec_types_satisfy_character_contract(value):
    assert isinstance(value, Character)


def test_syllable_types_satisfy_syllable_contract():
    assert isinstance(ModernSyllable(Choseong.GIYEOK, Jungseong.A), Syllable)
    assert isinstance(LazySyllable(0xAC00), Syllable)
    assert isinstance(SyllableBuilder(), Syllable)
