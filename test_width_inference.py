import pytest

from width_inference import accumulate, infer_widths, split_lines, tokenize_line


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("a\n", ["a"]),
        ("a\nb", ["a", "b"]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\n\nb\n", ["a", "", "b"]),
    ],
)
def test_split_lines(text, expected):
    assert split_lines(text) == expected


def test_tokenize_line_folds_empty_tokens_into_previous_width():
    tokens = list(tokenize_line("a\tbb\t\tccc", 8))
    assert tokens == [(0, "a", 1), (1, "bb", 2), (3, "ccc", 1)]


def test_tokenize_line_leading_tabs_form_an_empty_token():
    tokens = list(tokenize_line("\t\tx", 8))
    assert tokens == [(0, "", 2), (2, "x", 1)]


def test_tokenize_line_long_token_takes_several_stops():
    # 8 columns fill a whole stop, the terminating tab needs another one
    tokens = list(tokenize_line("12345678\tx", 8))
    assert tokens == [(0, "12345678", 2), (2, "x", 1)]


def test_tokenize_line_uses_display_width():
    # four wide characters take 8 terminal columns
    tokens = list(tokenize_line("日本語字\tx", 8))
    assert tokens[0] == (0, "日本語字", 2)


def test_worked_example():
    assert infer_widths(["a\tbb\t\tccc"], 8) == [1, 2, 1]


def test_first_line_seeds_widths():
    assert infer_widths(["a\t\t\tb\tc"], 8) == [3, 1, 1]


def test_equal_and_shorter_tokens_keep_recorded_widths():
    lines = ["aaaaaaaaa\tb", "c\t\td"]
    assert infer_widths(lines, 8) == [2, 1]


def test_shorter_token_followed_by_more_splits_column():
    lines = ["aaaaaaaaa\tx", "a\tb\tc"]
    assert infer_widths(lines, 8) == [1, 1, 1]


def test_shorter_last_token_does_not_split():
    lines = ["aaaaaaaaa\tx", "a"]
    assert infer_widths(lines, 8) == [2, 1]


def test_longer_token_on_last_column_grows_it():
    lines = ["a\tb", "a\tbbbbbbbbbbbbbbbbb"]
    assert infer_widths(lines, 8) == [1, 3]


def test_longer_token_carries_excess_into_next_columns():
    lines = ["a\tb\tc\td", "aaaaaaaaa\t\tz"]
    # the long token spans columns 0..2, so z lines up with d
    assert infer_widths(lines, 8) == [1, 1, 1, 1]


def test_long_token_ending_inside_column_splits_it():
    lines = ["a\t\t\tb", "aaaaaaaaa\tc\td"]
    # "aaaaaaaaa" ends at stop 2, inside the 3-stop first column
    assert infer_widths(lines, 8) == [2, 1, 1]


def test_carried_excess_can_split_following_column():
    lines = ["a\tb\t\t\tc", "aaaaaaaaa\tx\ty"]
    assert infer_widths(lines, 8) == [1, 1, 1, 1, 1]


def test_every_token_start_is_a_column_boundary():
    lines = ["a\t\t\tb\tc", "aaaaaaaaa\tx\ty", "\t\t\t\tz"]
    widths = infer_widths(lines, 8)
    accum = accumulate(widths)
    for line in lines:
        for start, _, _ in tokenize_line(line, 8):
            assert start in accum


def test_ragged_lines_are_fine():
    lines = ["a\tb\tc", "a", "", "a\tb"]
    assert infer_widths(lines, 8) == [1, 1, 1]


def test_smaller_tab_size():
    assert infer_widths(["abcd\tx"], 4) == [2, 1]


def test_accumulate():
    assert accumulate([]) == [0]
    assert accumulate([1, 2, 1]) == [0, 1, 3, 4]
