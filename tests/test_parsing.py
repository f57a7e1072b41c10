import pytest

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    InputError,
    parse_arguments,
    parse_number,
    split_words,
)


def test_split_words_on_spaces_tabs_and_newlines():
    assert split_words("1 2\t3\n4") == ["1", "2", "3", "4"]


def test_split_words_ignores_runs_of_separators():
    assert split_words("  7   -8 \t\n 9  ") == ["7", "-8", "9"]


def test_split_words_keeps_other_whitespace_inside_words():
    assert split_words("1\v2 3") == ["1\v2", "3"]


def test_split_words_of_blank_text_is_empty():
    assert split_words(" \t\n ") == []
    assert split_words("") == []


def test_parse_number_plain_and_signed():
    assert parse_number("42") == 42
    assert parse_number("-42") == -42
    assert parse_number("+42") == 42


def test_parse_number_allows_leading_whitespace():
    assert parse_number(" \t\v\f\r\n17") == 17


def test_parse_number_limits():
    assert parse_number("2147483647") == INT_MAX
    assert parse_number("-2147483648") == INT_MIN


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999999999"])
def test_parse_number_out_of_range(text):
    with pytest.raises(InputError):
        parse_number(text)


@pytest.mark.parametrize("text", ["12a", "1 2", "--1", "+-3", "4 ", "x"])
def test_parse_number_rejects_trailing_garbage(text):
    with pytest.raises(InputError):
        parse_number(text)


@pytest.mark.parametrize("text", ["", "-", "+"])
def test_parse_number_without_digits_reads_as_zero(text):
    assert parse_number(text) == 0


def test_input_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_number("abc")


def test_parse_arguments_single_string_is_split():
    assert parse_arguments(["3 -1 2"]) == [3, -1, 2]


def test_parse_arguments_many_arguments():
    assert parse_arguments(["3", "-1", "2"]) == [3, -1, 2]


def test_parse_arguments_both_forms_agree():
    assert parse_arguments(["5 9 0 -4"]) == parse_arguments(["5", "9", "0", "-4"])


def test_parse_arguments_rejects_duplicates():
    with pytest.raises(InputError):
        parse_arguments(["1", "2", "1"])
    with pytest.raises(InputError):
        parse_arguments(["4 4"])


def test_parse_arguments_duplicates_by_value():
    with pytest.raises(InputError):
        parse_arguments(["+5", "5"])


def test_parse_arguments_word_with_space_among_many_is_error():
    with pytest.raises(InputError):
        parse_arguments(["1 2", "3"])


def test_parse_arguments_blank_single_argument_gives_nothing():
    assert parse_arguments(["   "]) == []
    assert parse_arguments([""]) == []


def test_parse_arguments_no_arguments_gives_nothing():
    assert parse_arguments([]) == []


def test_parse_arguments_out_of_range_is_error():
    with pytest.raises(InputError):
        parse_arguments(["1", "2147483648"])


def test_parse_arguments_keeps_order():
    values = [10, -3, 7, 0, 2]
    assert parse_arguments([str(v) for v in values]) == values