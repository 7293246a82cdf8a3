import logging

import pytest

import serial

from rgcode.cli.parse import EXIT_FATAL, EXIT_OK, EXIT_PARSE_ERRORS, build_parser, main, resolve_log_level
from rgcode import config as cfg
from rgcode.config import TRACE
from rgcode.source import read_document
from rgcode.utils.errors import DocumentSourceError

pytestmark = pytest.mark.unit


def test_read_document(program_file, sample_program):
    assert read_document(program_file) == sample_program


def test_read_document_missing(tmp_path):
    with pytest.raises(DocumentSourceError) as excinfo:
        read_document(tmp_path / "missing.rgcf")
    assert str(excinfo.value).startswith("Document Source Error:")


def test_read_document_other_suffix_warns(tmp_path, caplog):
    path = tmp_path / "program.txt"
    path.write_text("NO\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="rgcode.source"):
        assert read_document(path) == "NO\n"
    assert ".rgcf" in caplog.text


def test_cli_prints_results(program_file, capsys):
    assert main([str(program_file)]) == EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "line 1: HM 0 0 0"
    assert out[2] == "line 4: MN B 1.5 2.5"
    assert out[-1] == "5 command(s), 0 error(s)"


def test_cli_reports_errors(tmp_path, broken_program, capsys):
    path = tmp_path / "broken.rgcf"
    path.write_text(broken_program, encoding="utf-8")
    assert main([str(path)]) == EXIT_PARSE_ERRORS
    out = capsys.readouterr().out
    assert "line 5: error: argument 4 of CL is not a number: 'x'" in out
    assert out.splitlines()[-1] == "2 command(s), 4 error(s)"


def test_cli_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.rgcf")]) == EXIT_FATAL


def test_cli_send_with_invalid_baudrate(program_file, monkeypatch):
    def reject(*args, **kwargs):
        raise ValueError("Not a valid baudrate: -5")

    monkeypatch.setenv("RGCODE_FAKE_SERIAL", "0")
    monkeypatch.setattr(serial, "Serial", reject)
    argv = [str(program_file), "--send", "--port", "/dev/ttyUSB0", "--baudrate", "-5"]
    assert main(argv) == EXIT_FATAL


def test_cli_send_with_fake_serial(program_file, capsys):
    assert main([str(program_file), "--send", "--fake-serial"]) == EXIT_OK
    assert capsys.readouterr().out.splitlines()[-1] == "Sent 5 command(s)"


def test_cli_refuses_to_send_broken_program(tmp_path, broken_program):
    path = tmp_path / "broken.rgcf"
    path.write_text(broken_program, encoding="utf-8")
    assert main([str(path), "--send", "--fake-serial"]) == EXIT_PARSE_ERRORS


@pytest.mark.parametrize(
    "argv,level",
    [
        ([], logging.INFO),
        (["-q"], logging.WARNING),
        (["-vv"], logging.DEBUG),
        (["-vvv"], TRACE),
        (["--log-level", "ERROR"], logging.ERROR),
        (["--log-level", "TRACE"], TRACE),
    ],
)
def test_log_level(argv, level, monkeypatch):
    monkeypatch.setattr(cfg, "TRACE_ENABLED", False)
    args = build_parser().parse_args(["p.rgcf", *argv])
    assert resolve_log_level(args) == level
