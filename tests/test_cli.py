from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from tsv_table import parse
from tsv_table.cli import _render, app


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "table.tsv"
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_cell_prints_value(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write(tmp_path, "a\tb\tc\n1\t2\t3\n")

    result = runner.invoke(app, ["cell", str(path), "--row", "1", "--column", "1"])

    assert result.exit_code == 0, result.output
    assert result.output.strip().splitlines()[-1] == "2"


def test_cli_cell_out_of_range_exits_nonzero(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write(tmp_path, "a\tb\n")

    result = runner.invoke(app, ["cell", str(path), "--row", "3", "--column", "0"])

    assert result.exit_code == 1


def test_cli_find_reports_index(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write(tmp_path, "\n\nname\tvalue\n\nx\ty\n")

    found = runner.invoke(app, ["find", str(path), "value"])
    missing = runner.invoke(app, ["find", str(path), "missing"])

    assert found.exit_code == 0, found.output
    assert found.output.strip().splitlines()[-1] == "1"
    assert missing.exit_code == 1


def test_cli_show_raw_dump(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write(tmp_path, "a\t\tb\nc\n")

    result = runner.invoke(app, ["show", str(path), "--raw"])

    assert result.exit_code == 0, result.output
    assert "| a |  | b |\n| c |\n" in result.output


def test_cli_show_table(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write(tmp_path, "id\tcity\n1\tOslo\n2\n")

    result = runner.invoke(app, ["show", str(path)])

    assert result.exit_code == 0, result.output
    assert "city" in result.output
    assert "Oslo" in result.output


def test_cli_empty_file_exits_nonzero(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write(tmp_path, "")

    result = runner.invoke(app, ["show", str(path)])

    assert result.exit_code == 1


def test_cli_stats_reports_ragged_rows(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write(tmp_path, "a\tb\tc\nd\n")

    result = runner.invoke(app, ["stats", str(path)])

    assert result.exit_code == 0, result.output
    assert "Rows" in result.output
    assert "yes" in result.output


def test_cli_show_keeps_bracketed_cell_text(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write(tmp_path, "id\t[b]note\n1\t[/x] closing\n2\t[bold]x\n")

    result = runner.invoke(app, ["show", str(path)])

    assert result.exit_code == 0, result.output
    assert "[b]note" in result.output
    assert "[/x] closing" in result.output
    assert "[bold]x" in result.output


def test_cli_find_bracketed_name(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write(tmp_path, "id\t[/x]\n")

    found = runner.invoke(app, ["find", str(path), "[/x]"])
    missing = runner.invoke(app, ["find", str(path), "[/y]"])

    assert found.exit_code == 0, found.output
    assert found.output.strip().splitlines()[-1] == "1"
    assert missing.exit_code == 1
    assert isinstance(missing.exception, SystemExit)


def test_cli_find_with_strip_bom(tmp_path: Path) -> None:
    runner = CliRunner()
    path = tmp_path / "bom.tsv"
    path.write_bytes(b"\xef\xbb\xbfid\tname\n")

    kept = runner.invoke(app, ["find", str(path), "id"])
    stripped = runner.invoke(app, ["find", str(path), "id", "--strip-bom"])

    assert kept.exit_code == 1
    assert stripped.exit_code == 0, stripped.output
    assert stripped.output.strip().splitlines()[-1] == "0"


def test_cli_errors_option_controls_decoding(tmp_path: Path) -> None:
    runner = CliRunner()
    path = tmp_path / "bad.tsv"
    path.write_bytes(b"a\tb\xff\n")

    strict = runner.invoke(app, ["cell", str(path), "--row", "0", "--column", "0"])
    replaced = runner.invoke(
        app, ["cell", str(path), "--row", "0", "--column", "0", "--errors", "replace"]
    )

    assert strict.exit_code == 1
    assert isinstance(strict.exception, SystemExit)
    assert replaced.exit_code == 0, replaced.output
    assert replaced.output.strip().splitlines()[-1] == "a"


def test_render_pads_ragged_rows_to_widest() -> None:
    table = parse("id\tcity\n1\tOslo\tNorway\n2\n")

    rendered = _render(table, header=True)

    assert len(rendered.columns) == 3
    assert [column.header.plain for column in rendered.columns] == ["id", "city", ""]
    assert rendered.row_count == 2
    assert [text.plain for text in rendered.columns[2].cells] == ["Norway", ""]
    assert [text.plain for text in rendered.columns[1].cells] == ["Oslo", ""]


def test_render_without_header_keeps_first_row() -> None:
    table = parse("id\tcity\n1\n")

    rendered = _render(table, header=False)

    assert rendered.show_header is False
    assert [column.header for column in rendered.columns] == ["0", "1"]
    assert rendered.row_count == 2
    assert [text.plain for text in rendered.columns[0].cells] == ["id", "1"]
    assert [text.plain for text in rendered.columns[1].cells] == ["city", ""]
