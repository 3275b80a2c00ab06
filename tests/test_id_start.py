import pytest

from glyn.id_start import ID_START_RANGES, UNICODE_VERSION, is_unicode_id_start


@pytest.mark.parametrize(
    "ch",
    [
        "A",
        "Z",
        "a",
        "z",
        "\u00aa",
        "\u00b5",
        "\u00ba",
        "\u1000",
        "\u102a",
        "\uffdc",
        "\U00010000",
        "\U00020000",
        "\U0002a6df",
        "\U0003134a",
        "\u4e00",
        "\uac00",
    ],
)
def test_id_start_members(ch):
    assert is_unicode_id_start(ch) is True


@pytest.mark.parametrize(
    "ch",
    [
        "@",
        "[",
        "`",
        "{",
        "0",
        "9",
        "_",
        "$",
        " ",
        "\u00ab",
        "\uffdd",
        "\U0002a6e0",
        "\U0003134b",
    ],
)
def test_id_start_non_members(ch):
    assert is_unicode_id_start(ch) is False


def test_version_pinned_and_15_1_characters_present():
    assert UNICODE_VERSION == "15.1.0"
    assert is_unicode_id_start("\U0002ebf0") is True
    assert is_unicode_id_start("\U0002ee5d") is True
    assert is_unicode_id_start("\U0002ee5e") is False


def test_ranges_sorted_and_disjoint():
    for (start, end), (next_start, _) in zip(ID_START_RANGES, ID_START_RANGES[1:]):
        assert start <= end
        assert end < next_start
        assert is_unicode_id_start(chr(start)) is True


def test_range_endpoints_are_members():
    for start, end in ID_START_RANGES:
        assert is_unicode_id_start(chr(start))
        assert is_unicode_id_start(chr(end))


def test_gaps_before_ranges_are_not_members():
    previous_end = -1
    for start, end in ID_START_RANGES:
        if start - 1 > previous_end:
            assert not is_unicode_id_start(chr(start - 1))
        previous_end = end


def test_ascii_letters_match_alpha():
    for cp in range(128):
        ch = chr(cp)
        assert is_unicode_id_start(ch) == (ch.isascii() and ch.isalpha())


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_unicode_id_start("ab")


def test_empty_string_rejected():
    with pytest.raises(ValueError):
        is_unicode_id_start("")


def test_non_string_rejected():
    with pytest.raises(TypeError):
        is_unicode_id_start(65)