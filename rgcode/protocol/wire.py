"""
Wire helpers for the robot-arm G-code text protocol.

This module centralizes rendering of typed commands back to their canonical
line form and packing a program into the byte stream sent to the controller.
"""

import logging
from collections.abc import Iterable

import numpy as np

from .types import CL, HM, MN, TG, A, AxisType, B, C, CommandType, X, Y, Z

logger = logging.getLogger(__name__)

LINE_END = b"\n"

__all__ = [
    "format_value",
    "encode_axis",
    "encode_command",
    "encode_program",
]


def format_value(value: float) -> str:
    """Shortest positional text that round-trips a binary32 value."""
    return np.format_float_positional(np.float32(value), trim="-")


def _values(cmd: CommandType | AxisType) -> tuple[float, ...]:
    if isinstance(cmd, (HM, TG)):
        return (cmd.x, cmd.y, cmd.z)
    if isinstance(cmd, CL):
        return (cmd.p1, cmd.p2, cmd.p3, cmd.p4, cmd.p5)
    if isinstance(cmd, B):
        return (cmd.first, cmd.second)
    if isinstance(cmd, (X, Y, Z, A, C)):
        return (cmd.value,)
    return ()


def encode_axis(axis: AxisType) -> str:
    """Render an axis as '<letter> <value>[ <value>]'."""
    return " ".join([axis.letter, *(format_value(v) for v in _values(axis))])


def encode_command(cmd: CommandType) -> str:
    """
    Render a command as its canonical source line.

    Example:
        HM(1.0, 2.0, 3.5) -> "HM 1 2 3.5"
        MN(B(1.5, 2.5))  -> "MN B 1.5 2.5"
    """
    if isinstance(cmd, MN):
        return f"MN {encode_axis(cmd.axis)}"
    return " ".join([cmd.mnemonic, *(format_value(v) for v in _values(cmd))])


def encode_program(commands: Iterable[CommandType]) -> bytes:
    """Pack commands into newline-terminated ASCII lines."""
    lines = [encode_command(cmd).encode("ascii") + LINE_END for cmd in commands]
    logger.debug("Encoded program: %d line(s)", len(lines))
    return b"".join(lines)
