import logging

import pytest

from rgcode.gcode.parser import iter_parse, parse_document
from rgcode.protocol.types import CL, HM, MN, NO, RH, TG, B, DiagnosticReason
from rgcode.utils.errors import ProgramParseError

pytestmark = [pytest.mark.unit, pytest.mark.gcode]


def test_sample_program_parses(sample_program):
    report = parse_document(sample_program)
    assert report.ok
    assert report.commands == [
        HM(0.0, 0.0, 0.0),
        TG(10.5, -20.0, 30.0),
        MN(B(1.5, 2.5)),
        CL(1.0, 2.0, 3.0, 4.0, 5.0),
        RH(),
    ]
    assert [line.line_number for line in report] == [1, 2, 4, 5, 6]


def test_blank_line_between_noops():
    report = parse_document("NO\n\nNO")
    assert len(report) == 2
    assert report.commands == [NO(), NO()]
    assert report.diagnostics == []


def test_order_and_line_numbers_preserved():
    report = parse_document("NO\n\nZZ\n\nRH")
    assert [line.line_number for line in report] == [1, 3, 5]
    assert report.lines[0].command == NO()
    assert report.lines[1].diagnostic.reason is DiagnosticReason.UNKNOWN_MNEMONIC
    assert report.lines[1].diagnostic.line_number == 3
    assert report.lines[2].command == RH()


def test_does_not_stop_at_first_failure(broken_program):
    report = parse_document(broken_program)
    assert not report.ok
    assert [line.ok for line in report] == [True, False, False, False, False, True]
    assert [d.reason for d in report.diagnostics] == [
        DiagnosticReason.ARITY_MISMATCH,
        DiagnosticReason.UNKNOWN_MNEMONIC,
        DiagnosticReason.INVALID_NUMBER,
        DiagnosticReason.UNKNOWN_AXIS,
    ]
    assert [d.line_number for d in report.diagnostics] == [2, 4, 5, 6]
    assert report.diagnostics[2].raw_line == "CL 1 2 3 4 x"


@pytest.mark.parametrize(
    "document",
    ["", "\n", "NO", "NO\n", "  \nHM 1 2 3\n\t\nbogus line here\n\nFS\n", "a\nb\nc"],
)
def test_result_count_equals_non_blank_lines(document):
    expected = sum(1 for line in document.split("\n") if line.strip())
    assert len(parse_document(document)) == expected


def test_raise_for_errors(broken_program, sample_program):
    with pytest.raises(ProgramParseError) as excinfo:
        parse_document(broken_program).raise_for_errors()
    assert len(excinfo.value.diagnostics) == 4
    assert "2, 4, 5, 6" in str(excinfo.value)

    assert parse_document(sample_program).raise_for_errors()[0] == HM(0.0, 0.0, 0.0)


def test_iter_parse_matches_parse_document(broken_program):
    assert list(iter_parse(broken_program)) == parse_document(broken_program).lines


def test_diagnostics_logged(broken_program, caplog):
    with caplog.at_level(logging.WARNING, logger="rgcode.gcode.parser"):
        parse_document(broken_program)
    assert sum(1 for r in caplog.records if r.levelno == logging.WARNING) == 4
