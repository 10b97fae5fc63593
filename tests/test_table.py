# tests/test_table.py
"""ColorTable tests: CSV read-back, name/hex lookups, nearest color, ColorEntry.hex."""

from __future__ import annotations

import importlib

import pytest

tb = importlib.import_module("colormap_builder.table")
types_ = importlib.import_module("colormap_builder.types")
errors = importlib.import_module("colormap_builder.errors")


@pytest.fixture
def palette():
    return {
        "Black": (0, 0, 0),
        "Light Gray": (211, 211, 211),
        "Red": (255, 0, 0),
        "Crimson": (255, 0, 0),
        "Navy Blue": (0, 0, 128),
    }


# ──────────────────────────────────────────────────────────────────────────────
# read_csv
# ──────────────────────────────────────────────────────────────────────────────
def test_read_csv_trims_and_keeps_commas_in_name(tmp_path):
    p = tmp_path / "colormap.csv"
    p.write_text("255, 0, 0,  Red \n139,0,0, Red, dark\n", encoding="utf-8")
    assert tb.read_csv(p, trace=lambda _m: None) == {"Red": (255, 0, 0), "Red, dark": (139, 0, 0)}


def test_read_csv_skips_incomplete_rows(tmp_path):
    p = tmp_path / "colormap.csv"
    p.write_text("1, 2, 3\n\n4, 5, 6, Ok\n", encoding="utf-8")
    seen: list[str] = []
    assert tb.read_csv(p, trace=seen.append) == {"Ok": (4, 5, 6)}
    assert len(seen) == 2


def test_read_csv_bad_component(tmp_path):
    p = tmp_path / "colormap.csv"
    p.write_text("1, two, 3, Oops\n", encoding="utf-8")
    with pytest.raises(errors.MalformedNumberError) as ei:
        tb.read_csv(p)
    assert ei.value.value == "two" and ei.value.line_no == 1


def test_read_csv_missing_file(tmp_path):
    with pytest.raises(errors.FileAccessError):
        tb.read_csv(tmp_path / "nope.csv")


def test_from_csv_reads_writer_output(tmp_path, palette):
    wr = importlib.import_module("colormap_builder.writer")
    p = tmp_path / "colormap.csv"
    wr.write_csv(p, palette)
    table = tb.ColorTable.from_csv(p)
    assert len(table) == len(palette)
    assert dict((e.name, e.rgb) for e in table) == palette


# ──────────────────────────────────────────────────────────────────────────────
# Lookups
# ──────────────────────────────────────────────────────────────────────────────
def test_get_exact_and_folded(palette):
    table = tb.ColorTable(palette)
    assert table.get("Light Gray") == (211, 211, 211)
    assert table.get("lightgray") == (211, 211, 211)
    assert table.get("NAVY  blue") == (0, 0, 128)
    assert table.get("purple") is None
    assert "Red" in table and "red" not in table


def test_iteration_is_name_ordered(palette):
    names = [e.name for e in tb.ColorTable(palette)]
    assert names == sorted(palette)


def test_from_hex_first_match_by_name(palette):
    table = tb.ColorTable(palette)
    assert table.from_hex("#ff0000") == types_.ColorEntry("Crimson", (255, 0, 0))
    assert table.from_hex("#000") == types_.ColorEntry("Black", (0, 0, 0))
    assert table.from_hex("#123456") is None


def test_nearest(palette):
    table = tb.ColorTable(palette)
    assert table.nearest((10, 5, 0)).name == "Black"
    assert table.nearest((240, 10, 10)).name == "Crimson"
    assert table.nearest((200, 200, 220)).name == "Light Gray"
    assert tb.ColorTable({}).nearest((1, 2, 3)) is None


def test_color_entry_hex():
    assert types_.ColorEntry("Navy Blue", (0, 0, 128)).hex == "#000080"


@pytest.mark.parametrize("value", ["2_55", "٢٥٥"])
def test_read_csv_rejects_non_decimal_component(tmp_path, value):
    p = tmp_path / "colormap.csv"
    p.write_text(f"{value}, 0, 0, Red\n", encoding="utf-8")
    with pytest.raises(errors.MalformedNumberError) as ei:
        tb.read_csv(p, trace=lambda _m: None)
    assert ei.value.value == value
