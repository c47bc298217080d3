import pytest

from resourcebook.csvparser import (
    FIELD_LIMIT,
    CsvWriteError,
    format_row,
    parse_csv_file,
    parse_line,
    write_csv_file,
)


def test_parse_line_with_trailing_delimiter():
    assert parse_line("a;b;c;\n") == ["a", "b", "c"]


def test_parse_line_collapses_empty_fields():
    assert parse_line("a;;b;\n") == ["a", "b"]


def test_parse_line_without_newline():
    assert parse_line("a;b") == ["a", "b"]


def test_parse_line_keeps_newline_in_last_field_without_delimiter():
    assert parse_line("a;b\n") == ["a", "b\n"]


def test_parse_blank_line_is_empty():
    assert parse_line("\n") == []


def test_format_row_appends_delimiters():
    assert format_row(["a", "b"]) == "a;b;"


def test_format_row_skips_none():
    assert format_row(["a", None, "c"]) == "a;c;"


def test_format_row_truncates_long_field():
    assert len(format_row(["x" * 500])) == FIELD_LIMIT


def test_format_row_round_trips_through_parse_line():
    fields = ["name", "http://example.com/x", "book"]
    assert parse_line(format_row(fields) + "\n") == fields


def test_write_then_parse_round_trip(tmp_path):
    path = tmp_path / "data.csv"
    rows = [["one", "link1", "video"], ["two", "link2", "book"]]
    write_csv_file(path, rows)
    assert parse_csv_file(path) == rows


def test_parse_keeps_blank_lines_as_empty_rows(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a;b;\n\nc;\n", encoding="utf-8")
    assert parse_csv_file(path) == [["a", "b"], [], ["c"]]


def test_write_empty_raises(tmp_path):
    with pytest.raises(CsvWriteError):
        write_csv_file(tmp_path / "data.csv", [])


def test_write_to_directory_raises(tmp_path):
    with pytest.raises(CsvWriteError):
        write_csv_file(tmp_path, [["a"]])


def test_parse_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_csv_file(tmp_path / "missing.csv")