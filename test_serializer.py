import os
import tempfile

import pytest

import serializer
from sheet import Sheet


def test_worked_example_reproduces_tabs():
    text = "a\tbb\t\tccc\n"
    assert serializer.serialize(Sheet.from_text(text)) == text


def test_gap_columns_become_pending_tabs():
    sheet = Sheet.from_text("a\tb\tc\n\t\tz\n")
    assert serializer.serialize(sheet) == "a\tb\tc\n\t\tz\n"


def test_missing_middle_cell_accumulates_padding():
    sheet = Sheet.from_text("a\tb\tc\nd\t\tf\n")
    assert serializer.serialize(sheet).splitlines()[1] == "d\t\tf"


def test_trailing_tabs_are_not_written():
    assert serializer.serialize(Sheet.from_text("a\t\t\n")) == "a\n"


def test_fresh_sheet_is_one_empty_line():
    assert serializer.serialize(Sheet()) == "\n"


def test_edited_wide_cell_pads_following_columns():
    sheet = Sheet.from_text("a\tb\nc\td\n")
    sheet.edit((0, 0), "0123456789")
    assert serializer.serialize(sheet) == "0123456789\tb\nc\t\td\n"


def test_cell_spanning_columns_keeps_alignment():
    text = "aaaaaaaaa\tx\na\tb\tc\n"
    assert serializer.serialize(Sheet.from_text(text)) == text


def test_spanning_cell_can_shift_next_cell_after_column_removal():
    sheet = Sheet.from_text("x\ty\tz\naaaaaaaaa\tw\n")
    sheet.edit((1, 0), "")
    assert sheet.widths == [1, 1]
    assert sheet.content_at((1, 1)) == "w"

    text = serializer.serialize(sheet)
    assert text == "x\tz\naaaaaaaaa\tw\n"

    # "w" now starts after the spanning cell ends, one column further right
    reloaded = Sheet.from_text(text)
    assert reloaded.content_at((1, 1)) is None
    assert reloaded.content_at((2, 1)) == "w"
    assert sorted(t for _, t in reloaded.cells()) == sorted(
        t for _, t in sheet.cells()
    )


@pytest.mark.parametrize(
    "text",
    [
        "a\tbb\t\tccc\n",
        "name\tqty\tprice\napple\t3\t1.20\nwatermelon\t1\t4.00\n",
        "a\tb\tc\n\nx\n\t\t\ty\n",
        "日本語\tx\nabc\t\t\tz\n",
        "aaaaaaaaa\tx\ty\na\tb\tc\td\n",
    ],
)
def test_round_trip_keeps_every_cell(text):
    original = Sheet.from_text(text)
    reloaded = Sheet.from_text(serializer.serialize(original))
    for pos, content in original.cells():
        assert reloaded.content_at(pos) == content


def test_save_writes_file():
    sheet = Sheet.from_text("a\tbb\t\tccc\n")
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "out.txt")
        serializer.save(sheet, path)
        with open(path, "r", encoding="utf-8") as f:
            assert f.read() == "a\tbb\t\tccc\n"


def test_save_truncates_existing_file():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "out.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("x" * 100)
        serializer.save(Sheet.from_text("a\n"), path)
        with open(path, "r", encoding="utf-8") as f:
            assert f.read() == "a\n"


def test_save_error_propagates():
    with tempfile.TemporaryDirectory() as tmp:
        with pytest.raises(OSError):
            serializer.save(Sheet(), os.path.join(tmp, "missing", "out.txt"))
