# tests/test_cli.py
import io
import json

import pytest

from wiegand_converter.cli import ExitCode, main


def test_badge_raw(capsys):
    assert main(["badge", "FC160", "20340", "--raw"]) == ExitCode.SUCCESS
    assert capsys.readouterr().out == "03409ee9\n"

def test_badge_raw_upper(capsys):
    assert main(["badge", "160", "20340", "--raw", "--upper"]) == 0
    assert capsys.readouterr().out == "03409EE9\n"

def test_hex_report(capsys):
    assert main(["hex", "03409E1C"]) == 0
    out = capsys.readouterr().out
    assert "Hex: 03409e1c" in out
    assert "Facility: 160" in out
    assert "Card: 20238" in out
    assert "Parity: OK" in out
    assert "Binary" not in out

def test_bare_hex_is_hex_subcommand(capsys):
    assert main(["03409E1C", "--raw"]) == 0
    assert capsys.readouterr().out == "03409e1c\n"

def test_hex_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("03409ee9\n"))
    assert main(["hex", "--raw"]) == 0
    assert capsys.readouterr().out == "03409ee9\n"

def test_decimal_binary(capsys):
    assert main(["decimal", "0", "--binary"]) == 0
    out = capsys.readouterr().out
    assert f"Binary: {'0' * 26}" in out
    assert "Parity: MISMATCH" in out

def test_json_output(capsys):
    assert main(["decimal", "54566633", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["hex"] == "03409ee9"
    assert data["facility"] == 160
    assert data["card"] == 20340
    assert data["parity_ok"] is True
    assert data["source"] == "decimal"

@pytest.mark.parametrize(
    "argv",
    [
        ["decimal", "67108864"],
        ["hex", "4000000"],
        ["hex", "nothex"],
        ["badge", "256", "1"],
        ["badge", "FC", "1"],
        ["badge", "160", "65536"],
    ],
)
def test_input_errors(capsys, argv):
    assert main(argv) == ExitCode.INPUT_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")

def test_verbose_error_shows_context(capsys):
    assert main(["-v", "decimal", "67108864"]) == ExitCode.INPUT_ERROR
    err = capsys.readouterr().err
    assert "Context:" in err
    assert "maximum: 67108863" in err

def test_strict_parity(capsys):
    assert main(["hex", "03409EE8", "--strict"]) == ExitCode.PARITY_ERROR
    assert "Parity check failed" in capsys.readouterr().err
    assert main(["hex", "03409EE8"]) == ExitCode.SUCCESS
    assert "Parity: MISMATCH" in capsys.readouterr().out

def test_raw_and_json_are_exclusive():
    with pytest.raises(SystemExit) as exc:
        main(["hex", "0", "--raw", "--json"])
    assert exc.value.code == ExitCode.USAGE_ERROR

def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage:" in capsys.readouterr().out

def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert "wiegand-converter" in capsys.readouterr().out

@pytest.mark.parametrize(
    "argv,expected",
    [
        (["--upper", "03409E1C", "--raw"], "03409E1C\n"),
        (["--raw", "--upper", "03409e1c"], "03409E1C\n"),
        (["-v", "--upper", "--raw", "03409e1c"], "03409E1C\n"),
    ],
)
def test_bare_hex_with_leading_output_flags(capsys, argv, expected):
    assert main(argv) == 0
    assert capsys.readouterr().out == expected
