import pytest

from rgcode.gcode import extract, parse_document
from rgcode.protocol import wire
from rgcode.protocol.types import CL, FS, HM, MN, NO, TG, B, X

pytestmark = pytest.mark.unit


def test_encode_zero_arity():
    assert wire.encode_command(NO()) == "NO"
    assert wire.encode_command(FS()) == "FS"


def test_encode_homing_trims_zeros():
    assert wire.encode_command(HM(1.0, 2.0, 3.5)) == "HM 1 2 3.5"


def test_encode_negative_and_float32_values():
    value = extract("TG", ["0.1", "-20", "30.25"])
    assert wire.encode_command(value) == "TG 0.1 -20 30.25"


def test_encode_manual():
    assert wire.encode_command(MN(B(1.5, 2.5))) == "MN B 1.5 2.5"
    assert wire.encode_command(MN(X(-4.0))) == "MN X -4"


def test_encode_program():
    data = wire.encode_program([HM(0, 0, 0), CL(1, 2, 3, 4, 5), NO()])
    assert data == b"HM 0 0 0\nCL 1 2 3 4 5\nNO\n"


def test_encode_program_empty():
    assert wire.encode_program([]) == b""


def test_encoded_program_parses_back(sample_program):
    commands = parse_document(sample_program).commands
    text = wire.encode_program(commands).decode("ascii")
    assert parse_document(text).commands == commands
