"""Tests for the declaration check CLI."""

from __future__ import annotations

import json

from requisite.cli import run_check_cli


def _write_declaration(tmp_path) -> str:
    """Write the compiler declaration and return its path."""

    path = tmp_path / "declaration.json"
    path.write_text(
        json.dumps(
            {
                "requirements": {
                    "input_file": {"subtype": "filename"},
                    "output_file": {"subtype": "filename"},
                    "verbose": {"domain": [True, False]},
                }
            }
        ),
        encoding="utf-8",
    )
    return str(path)


def _write_values(tmp_path, values: dict) -> str:
    """Write a values file and return its path."""

    path = tmp_path / "values.json"
    path.write_text(json.dumps(values), encoding="utf-8")
    return str(path)


def test_cli_reports_complete_values(tmp_path, capsys) -> None:
    """Complete values should exit 0 and print a status table."""

    declaration = _write_declaration(tmp_path)
    values = _write_values(
        tmp_path,
        {"input_file": "test.c", "output_file": "test.out", "verbose": False},
    )

    exit_code = run_check_cli(["--declaration", declaration, "--values", values])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "input_file   ok       'test.c'" in out
    assert "Fulfilled: 3/3" in out


def test_cli_reports_missing_values_as_json(tmp_path, capsys) -> None:
    """Incomplete values should exit 1 and list missing keys."""

    declaration = _write_declaration(tmp_path)
    values = _write_values(tmp_path, {"verbose": True})

    exit_code = run_check_cli(["--declaration", declaration, "--values", values, "--json"])

    summary = json.loads(capsys.readouterr().out)
    assert exit_code == 1
    assert summary["is_complete"] is False
    assert summary["missing"] == ["input_file", "output_file"]
    assert summary["requirements"]["verbose"] == {
        "kind": "boolean",
        "subtype": None,
        "fulfilled": True,
        "value": True,
    }


def test_cli_without_values_lists_all_missing(tmp_path, capsys) -> None:
    """Omitting --values should report every entry missing."""

    exit_code = run_check_cli(["--declaration", _write_declaration(tmp_path)])

    assert exit_code == 1
    assert "Fulfilled: 0/3" in capsys.readouterr().out


def test_cli_invalid_values_exit_2(tmp_path, capsys) -> None:
    """Type errors in values should exit 2 with a message on stderr."""

    declaration = _write_declaration(tmp_path)
    values = _write_values(tmp_path, {"verbose": 1})

    exit_code = run_check_cli(["--declaration", declaration, "--values", values])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert "error: requirement 'verbose' expects a boolean value" in captured.err


def test_cli_missing_declaration_file_exit_2(tmp_path, capsys) -> None:
    """Unreadable declaration files should exit 2."""

    exit_code = run_check_cli(["--declaration", str(tmp_path / "missing.json")])

    assert exit_code == 2
    assert "error:" in capsys.readouterr().err


def test_cli_non_utf8_values_exit_2(tmp_path, capsys) -> None:
    """Values files that are not UTF-8 should exit 2 instead of crashing."""

    declaration = _write_declaration(tmp_path)
    values = tmp_path / "values.json"
    values.write_bytes(b'{"a": "\xff"}')

    exit_code = run_check_cli(["--declaration", declaration, "--values", str(values)])

    assert exit_code == 2
    assert "not valid UTF-8" in capsys.readouterr().err
