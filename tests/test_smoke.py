from pathlib import Path

import pytest

from colormap_builder import ColorTable, MalformedNumberError, build_colormap


def test_smoke(tmp_path):
    src = tmp_path / "rawColorFile.txt"
    src.write_text(
        "1\tRed\tX\t255\t0\t0\n"
        "2\tGray\tX\t128\t128\t128\n"
        "header only\n"
        "3\tGray\tX\t190\t190\t190\n"
        "4\tBlue\tX\t0\t0\n",
        encoding="utf-8",
    )
    out = tmp_path / "colormap.csv"

    cmap = build_colormap(src, out, trace=lambda _m: None)
    assert cmap == {"Red": (255, 0, 0), "Gray": (190, 190, 190)}

    lines = Path(out).read_text(encoding="utf-8").splitlines(keepends=True)
    assert lines == ["190, 190, 190, Gray\n", "255, 0, 0, Red\n"]

    table = ColorTable.from_csv(out)
    assert table.get("gray") == (190, 190, 190)


def test_smoke_empty_input(tmp_path):
    src = tmp_path / "rawColorFile.txt"
    src.write_text("", encoding="utf-8")
    out = tmp_path / "colormap.csv"
    assert build_colormap(src, out) == {}
    assert out.read_bytes() == b""


def test_failed_load_leaves_output_untouched(tmp_path):
    out = tmp_path / "colormap.csv"
    out.write_text("keep me\n", encoding="utf-8")
    src = tmp_path / "rawColorFile.txt"
    src.write_text("1\tRed\tX\tnope\t0\t0\n", encoding="utf-8")
    with pytest.raises(MalformedNumberError):
        build_colormap(src, out, trace=lambda _m: None)
    assert out.read_text(encoding="utf-8") == "keep me\n"
