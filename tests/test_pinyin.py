import string

import pytest

from together.pinyin import get_alphabet


def test_first_ideograph_maps_to_first_table_letter():
    assert get_alphabet("\u4e00") == "Y"


def test_empty_string():
    assert get_alphabet("") == ""


@pytest.mark.parametrize("text", ["abc", "Hello", "zZyY", "MiXeD"])
def test_ascii_letters_are_uppercased(text):
    assert get_alphabet(text) == text.upper()


def test_digits_are_kept():
    assert get_alphabet("0123456789") == "0123456789"


@pytest.mark.parametrize("text", [" ", "-_!?", "é", "\uff01", "\U0001f600"])
def test_other_characters_pass_through(text):
    assert get_alphabet(text) == text


def test_length_is_preserved():
    text = "ab 12 \u4e00\u4e01\u4e02 é"
    assert len(get_alphabet(text)) == len(text)


def test_ideographs_map_to_uppercase_ascii():
    text = "".join(chr(code) for code in range(0x4E00, 0x4E00 + 2000))
    result = get_alphabet(text)
    assert len(result) == len(text)
    assert set(result) <= set(string.ascii_uppercase)


def test_mixed_text_is_mapped_per_character():
    left = get_alphabet("\u4e00")
    right = get_alphabet("\u4e01")
    assert get_alphabet("a\u4e001\u4e01") == "A" + left + "1" + right


def test_idempotent_on_result():
    result = get_alphabet("contact \u4e00\u4e01\u4e03 42")
    assert get_alphabet(result) == result


def test_character_below_cjk_range_is_kept():
    assert get_alphabet("\u4dff") == "\u4dff"