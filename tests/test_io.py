import io
import sys

import pytest

from paretoind.io import (
    InputError,
    format_vector,
    parse_bitvector,
    parse_minmax,
    read_data,
    read_reference_set,
    write_sets,
    write_sets_filtered,
)

SAMPLE = """# a comment
1 2
3 4

5 6\t
# another
7 8


9 10
"""


def test_read_data_sets_and_comments():
    sets = read_data(io.StringIO(SAMPLE))
    assert sets == [
        [(1.0, 2.0), (3.0, 4.0)],
        [(5.0, 6.0), (7.0, 8.0)],
        [(9.0, 10.0)],
    ]


def test_read_data_from_path(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1.5 2.5\n\n3 4\n")
    assert read_data(path) == [[(1.5, 2.5)], [(3.0, 4.0)]]


def test_read_data_from_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 2\n"))
    assert read_data(None) == [[(1.0, 2.0)]]
    monkeypatch.setattr(sys, "stdin", io.StringIO("3 4\n"))
    assert read_data("-") == [[(3.0, 4.0)]]


def test_read_data_empty():
    assert read_data(io.StringIO("# only comment\n\n")) == []


def test_read_data_column_mismatch():
    with pytest.raises(InputError):
        read_data(io.StringIO("1 2\n3 4 5\n"))


def test_read_data_conversion_error():
    with pytest.raises(InputError):
        read_data(io.StringIO("1 x\n"))


def test_read_data_missing_file(tmp_path):
    with pytest.raises(InputError):
        read_data(tmp_path / "missing.txt")


def test_read_reference_set_flattens():
    points = read_reference_set(io.StringIO(SAMPLE))
    assert len(points) == 5
    assert points[0] == (1.0, 2.0)
    assert points[-1] == (9.0, 10.0)


def test_read_reference_set_empty():
    with pytest.raises(InputError):
        read_reference_set(io.StringIO(""))


def test_write_read_round_trip():
    sets = [[(1.0, 2.25), (-3.5, 4e10)], [(0.1, 1e-7)]]
    out = io.StringIO()
    write_sets(out, sets)
    out.seek(0)
    assert read_data(out) == sets


def test_write_sets_filtered():
    sets = [[(1.0, 2.0), (3.0, 4.0)], [(5.0, 6.0)]]
    out = io.StringIO()
    write_sets_filtered(out, sets, [False, True, True])
    out.seek(0)
    assert read_data(out) == [[(3.0, 4.0)], [(5.0, 6.0)]]


def test_write_sets_filtered_keeps_set_separators():
    out = io.StringIO()
    write_sets_filtered(out, [[(1.0, 2.0)], [(3.0, 4.0)]], [False, False])
    assert out.getvalue() == "\n\n"


def test_format_vector_width_and_precision():
    text = format_vector([1.0, 2.5])
    fields = text.split("\t")
    assert [field.strip() for field in fields] == ["1", "2.5"]
    assert all(len(field) == 17 for field in fields)


def test_format_vector_round_trips_precision():
    value = 0.1 + 0.2
    assert float(format_vector([value])) == pytest.approx(value, rel=1e-15)


def test_parse_minmax_default():
    assert parse_minmax(None, 3) == (-1, -1, -1)


def test_parse_minmax_chars():
    assert parse_minmax("+-0i", 2) == (1, -1, 0, 0)


def test_parse_minmax_invalid():
    with pytest.raises(ValueError):
        parse_minmax("+x", 2)


def test_parse_minmax_all_ignored():
    with pytest.raises(ValueError):
        parse_minmax("0i", 2)


def test_parse_minmax_default_needs_objectives():
    with pytest.raises(ValueError):
        parse_minmax(None, 0)


def test_parse_bitvector():
    assert parse_bitvector("101", 0) == (True, False, True)
    assert parse_bitvector(None, 2) == (False, False)


def test_parse_bitvector_invalid():
    with pytest.raises(ValueError):
        parse_bitvector("12", 2)