"""
Pytest configuration and shared fixtures for the rgcode test suite.

Provides the --run-hardware option, custom markers and sample programs used
across the unit tests.
"""

import logging
from pathlib import Path

import pytest

logger = logging.getLogger(__name__)


SAMPLE_PROGRAM = """\
HM 0 0 0
TG 10.5 -20 30

MN B 1.5 2.5
CL 1 2 3 4 5
RH
"""

BROKEN_PROGRAM = """\
HM 0 0 0
TG 1 2

ZZ
CL 1 2 3 4 x
MN Q 1.0
NO
"""


# ============================================================================
# PYTEST COMMAND LINE OPTIONS
# ============================================================================

def pytest_addoption(parser):
    """Add custom command line options for the test suite."""
    parser.addoption(
        "--run-hardware",
        action="store_true",
        default=False,
        help="Enable hardware tests that require an arm controller on a serial port"
    )
    parser.addoption(
        "--serial-port",
        action="store",
        default=None,
        help="Serial port of the arm controller for hardware tests"
    )


# ============================================================================
# SAMPLE PROGRAMS
# ============================================================================

@pytest.fixture
def sample_program() -> str:
    """A program in which every line parses."""
    return SAMPLE_PROGRAM


@pytest.fixture
def broken_program() -> str:
    """A program mixing valid lines with one of each failure kind."""
    return BROKEN_PROGRAM


@pytest.fixture
def program_file(tmp_path: Path, sample_program: str) -> Path:
    """The sample program written to a .rgcf file."""
    path = tmp_path / "sample.rgcf"
    path.write_text(sample_program, encoding="utf-8")
    return path


@pytest.fixture
def serial_port(request) -> str:
    port = request.config.getoption("--serial-port")
    if not port:
        pytest.skip("Hardware tests need --serial-port")
    return port


# ============================================================================
# PYTEST CONFIGURATION HOOKS
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components in isolation"
    )
    config.addinivalue_line(
        "markers", "hardware: Hardware tests that require an arm controller on a serial port"
    )
    config.addinivalue_line(
        "markers", "gcode: Tests specifically for G-code tokenizing and command extraction"
    )


def pytest_collection_modifyitems(config, items):
    """Skip hardware tests unless --run-hardware is specified."""
    if not config.getoption("--run-hardware"):
        skip_hardware = pytest.mark.skip(reason="Hardware tests disabled (use --run-hardware to enable)")
        for item in items:
            if item.get_closest_marker("hardware"):
                item.add_marker(skip_hardware)
