from itertools import combinations
from math import isqrt

import pytest

from algodrills.strings import (
    acm_team,
    designer_pdf_viewer,
    encryption,
    happy_ladybugs,
    repeated_string,
    time_in_words,
)


def test_acm_team_all_known_topics():
    topics = ["111", "111", "111"]
    pairs = len(list(combinations(topics, 2)))
    assert acm_team(topics) == (len(topics[0]), pairs)


def test_acm_team_complementary_pair_covers_everything():
    topics = ["1100", "0011", "0000"]
    best, teams = acm_team(topics)
    assert best == len(topics[0])
    assert teams == 1


def test_acm_team_no_topics_known():
    topics = ["000", "000", "000"]
    assert acm_team(topics) == (0, len(list(combinations(topics, 2))))


def test_acm_team_order_does_not_matter():
    topics = ["10101", "11100", "11010", "00101"]
    assert acm_team(topics) == acm_team(list(reversed(topics)))


def test_acm_team_single_person_has_no_team():
    assert acm_team(["101"]) == (0, 0)


def test_acm_team_rejects_uneven_lengths():
    with pytest.raises(ValueError):
        acm_team(["101", "11"])


def test_designer_pdf_viewer_uniform_heights():
    heights = [1] * 26
    word = "abc"
    assert designer_pdf_viewer(heights, word) == len(word)


def test_designer_pdf_viewer_tallest_letter_sets_height():
    heights = list(range(1, 27))
    assert designer_pdf_viewer(heights, "az") == heights[25] * 2
    assert designer_pdf_viewer(heights, "a") == heights[0]


def test_designer_pdf_viewer_rejects_bad_input():
    with pytest.raises(ValueError):
        designer_pdf_viewer([1] * 26, "")
    with pytest.raises(ValueError):
        designer_pdf_viewer([1] * 26, "Abc")
    with pytest.raises(ValueError):
        designer_pdf_viewer([1] * 25, "abc")


def test_encryption_examples():
    assert encryption("haveaniceday") == "hae and via ecy"
    assert encryption("chillout") == "clu hlt io"


@pytest.mark.parametrize("text", ["a", "abcd", "feedthedog", "ifmanwasmeanttostayonthegroundgodwouldhavegivenusroots"])
def test_encryption_keeps_letters_and_column_count(text):
    columns = encryption(text).split(" ")
    width = isqrt(len(text))
    if width * width != len(text):
        width += 1
    assert len(columns) == width
    assert sorted("".join(columns)) == sorted(text)
    assert "".join(column[0] for column in columns) == text[:width]


def test_encryption_empty():
    assert encryption("") == ""


def test_happy_ladybugs_cases():
    assert happy_ladybugs("RBY_YBR")
    assert happy_ladybugs("__")
    assert happy_ladybugs("")
    assert happy_ladybugs("B_RRBR")
    assert happy_ladybugs("AABB")
    assert not happy_ladybugs("X_Y__X")
    assert not happy_ladybugs("AABBC")
    assert not happy_ladybugs("AABCBC")


def test_happy_ladybugs_rejects_unknown_cells():
    with pytest.raises(ValueError):
        happy_ladybugs("a_a")


@pytest.mark.parametrize("s", ["aba", "a", "b", "abcac", "aaaa"])
def test_repeated_string_whole_repeats(s):
    assert repeated_string(s, len(s)) == s.count("a")
    assert repeated_string(s, 4 * len(s)) == 4 * s.count("a")
    assert repeated_string(s, 0) == 0


def test_repeated_string_only_as():
    assert repeated_string("a", 1000000000000) == 1000000000000


def test_repeated_string_partial_repeat_counts_prefix():
    assert repeated_string("ab", 3) == repeated_string("ab", 2) + 1
    assert repeated_string("ba", 3) == repeated_string("ba", 2)


def test_repeated_string_rejects_empty():
    with pytest.raises(ValueError):
        repeated_string("", 5)


def test_time_in_words_example():
    assert time_in_words(5, 47) == "thirteen minutes to six"


@pytest.mark.parametrize("hour", range(1, 13))
def test_time_in_words_special_minutes(hour):
    assert time_in_words(hour, 0).endswith(" o' clock")
    assert time_in_words(hour, 15).startswith("quarter past ")
    assert time_in_words(hour, 30).startswith("half past ")
    assert time_in_words(hour, 45).startswith("quarter to ")
    assert time_in_words(hour, 1).startswith("one minute past ")


def test_time_in_words_past_and_to():
    for minute in range(2, 30):
        if minute != 15:
            assert " minutes past " in time_in_words(3, minute)
    for minute in range(31, 60):
        if minute != 45:
            assert " minutes to " in time_in_words(3, minute)


def test_time_in_words_hour_rolls_over():
    assert time_in_words(12, 45).endswith(time_in_words(1, 0).split(" ")[0])
    assert time_in_words(4, 45).endswith(time_in_words(5, 0).split(" ")[0])


def test_time_in_words_rejects_out_of_range():
    with pytest.raises(ValueError):
        time_in_words(0, 10)
    with pytest.raises(ValueError):
        time_in_words(13, 10)
    with pytest.raises(ValueError):
        time_in_words(5, 60)