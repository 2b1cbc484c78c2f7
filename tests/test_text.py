import unicodedata

import pytest

from hangeul.domain.text import compose_text, decompose_text


SAMPLES = [
    "아희방맣희",  # 아희방맣희
    "한글 is Hangul.",  # 한글
    "대한민국 만세!",  # 대한민국 만세
    "",
    "abc",
]


@pytest.mark.parametrize("text", SAMPLES)
def test_decompose_matches_nfd(text):
    assert decompose_text(text) == unicodedata.normalize("NFD", text)


@pytest.mark.parametrize("text", SAMPLES)
def test_compose_inverts_decompose(text):
    assert compose_text(decompose_text(text)) == text


def test_decompose_leaves_jamo_alone():
    assert decompose_text("가") == "가"
    assert decompose_text("ㄱㅏ") == "ㄱㅏ"


@pytest.mark.parametrize("text", [
    "가",  # L V
    "각",  # L V T
    "ᄀ",  # lone L
    "ᅡᆨ",  # V T without L
    "ᄀ가",  # L L V
    "가ᅡ",  # L V V
    "각",  # LV syllable + T
    "각ᆨ",  # LVT syllable + T
    "ᅟᅡ",  # filler + V
    "xᆨ",
    "한글",  # 한글
])
def test_compose_matches_nfc(text):
    assert compose_text(text) == unicodedata.normalize("NFC", text)


def test_compose_examples():
    assert compose_text("가") == "가"
    assert compose_text("각") == "각"
    assert compose_text("각") == "각"
    assert compose_text("ᄀ") == "ᄀ"


def test_compose_passes_compatibility_jamo_through():
    assert compose_text("ㄱㅏ") == "ㄱㅏ"
