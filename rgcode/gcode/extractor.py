"""
Command extraction for robot-arm G-code.

Validates a mnemonic and its argument tokens against a closed command table
and builds one typed command, or a ParseDiagnostic explaining the failure.
Malformed input never raises.
"""

import logging
import re
from fractions import Fraction
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from types import MappingProxyType

import numpy as np

from rgcode.config import TRACE
from rgcode.protocol.types import (
    CL,
    FS,
    HM,
    MN,
    NO,
    RH,
    RS,
    TG,
    A,
    AxisType,
    B,
    C,
    CommandType,
    DiagnosticReason,
    ParseDiagnostic,
    X,
    Y,
    Z,
)

logger = logging.getLogger(__name__)

# Signed decimal with optional fraction and exponent: 1, -2.5, .5, 3., +1e-3
NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class CommandSpec:
    """Command table entry. arity is None for MN, whose arity depends on the axis."""

    mnemonic: str
    arity: int | None
    factory: Callable[..., CommandType]
    description: str = ""


@dataclass(frozen=True)
class AxisSpec:
    """Axis table entry for manual jog."""

    letter: str
    arity: int
    factory: Callable[..., AxisType]


COMMAND_TABLE: MappingProxyType[str, CommandSpec] = MappingProxyType(
    {
        "NO": CommandSpec("NO", 0, NO, "No-op"),
        "HM": CommandSpec("HM", 3, HM, "Homing"),
        "TG": CommandSpec("TG", 3, TG, "Move to target"),
        "CL": CommandSpec("CL", 5, CL, "Claw"),
        "MN": CommandSpec("MN", None, MN, "Manual jog"),
        "RH": CommandSpec("RH", 0, RH, "Return home"),
        "RS": CommandSpec("RS", 0, RS, "Reset"),
        "FS": CommandSpec("FS", 0, FS, "Force stop"),
    }
)

AXIS_TABLE: MappingProxyType[str, AxisSpec] = MappingProxyType(
    {
        "X": AxisSpec("X", 1, X),
        "Y": AxisSpec("Y", 1, Y),
        "Z": AxisSpec("Z", 1, Z),
        "A": AxisSpec("A", 1, A),
        "B": AxisSpec("B", 2, B),
        "C": AxisSpec("C", 1, C),
    }
)


def parse_float32(token: str) -> float | None:
    """
    Convert a decimal literal to a binary32-rounded float.

    Returns:
        The value, or None if the token is not a finite decimal literal
        representable as a 32-bit float.
    """
    if not NUMBER_PATTERN.fullmatch(token):
        return None
    wide = float(token)
    with np.errstate(over="ignore"):
        value = np.float32(wide)
    if not np.isfinite(value):
        return None
    if wide != 0.0:
        value = _nearest_float32(Fraction(token), value)
    return float(value)


def _nearest_float32(exact: Fraction, approx: np.float32) -> np.float32:
    """
    Correct the double rounding of str -> float64 -> float32.

    The float64 step can land exactly on a float32 midpoint, so the true
    nearest value is approx or one of its neighbours; ties go to even.
    """
    candidates = [
        np.nextafter(approx, np.float32(-np.inf)),
        approx,
        np.nextafter(approx, np.float32(np.inf)),
    ]
    best = approx
    best_err = abs(Fraction(float(approx)) - exact)
    for candidate in candidates:
        if not np.isfinite(candidate):
            continue
        err = abs(Fraction(float(candidate)) - exact)
        if err < best_err or (err == best_err and int(candidate.view(np.uint32)) & 1 == 0):
            best, best_err = candidate, err
    return best


def _convert_all(
    tokens: Sequence[str], offset: int, mnemonic: str
) -> list[float] | ParseDiagnostic:
    """Convert every token, or report the first one that is not numeric."""
    values: list[float] = []
    for i, token in enumerate(tokens):
        value = parse_float32(token)
        if value is None:
            return ParseDiagnostic(
                DiagnosticReason.INVALID_NUMBER,
                mnemonic=mnemonic,
                position=offset + i,
                text=token,
            )
        values.append(value)
    return values


def _arity_mismatch(
    mnemonic: str, expected: int, actual: int, axis: str | None = None
) -> ParseDiagnostic:
    return ParseDiagnostic(
        DiagnosticReason.ARITY_MISMATCH,
        mnemonic=mnemonic,
        expected=expected,
        actual=actual,
        text=axis,
    )


def _extract_manual(args: Sequence[str]) -> CommandType | ParseDiagnostic:
    if not args:
        return _arity_mismatch("MN", 1, 0)

    letter, numeric = args[0], args[1:]
    axis = AXIS_TABLE.get(letter)
    if axis is None:
        return ParseDiagnostic(DiagnosticReason.UNKNOWN_AXIS, mnemonic="MN", text=letter)

    if len(numeric) != axis.arity:
        return _arity_mismatch("MN", axis.arity, len(numeric), axis=letter)

    values = _convert_all(numeric, 1, "MN")
    if isinstance(values, ParseDiagnostic):
        return values
    return MN(axis.factory(*values))


def extract(
    mnemonic: str,
    args: Sequence[str],
    *,
    line_number: int = 0,
    raw_line: str = "",
) -> CommandType | ParseDiagnostic:
    """
    Build one command from a mnemonic and its argument tokens.

    Args:
        mnemonic: Command code, case-sensitive (e.g. "HM")
        args: Argument tokens, in source order
        line_number: Source line, attached to any diagnostic
        raw_line: Source text, attached to any diagnostic

    Returns:
        The typed command, or a ParseDiagnostic describing the failure
    """
    result = _extract(mnemonic, args)
    if isinstance(result, ParseDiagnostic):
        if line_number or raw_line:
            result = replace(result, line_number=line_number, raw_line=raw_line)
        return result

    logger.debug("Parsed %s -> %r", mnemonic, result)
    return result


def _extract(mnemonic: str, args: Sequence[str]) -> CommandType | ParseDiagnostic:
    logger.log(TRACE, "Extracting %s %s", mnemonic, list(args))

    if not mnemonic:
        return ParseDiagnostic(DiagnosticReason.EMPTY_LINE)

    spec = COMMAND_TABLE.get(mnemonic)
    if spec is None:
        return ParseDiagnostic(DiagnosticReason.UNKNOWN_MNEMONIC, mnemonic=mnemonic)

    if spec.arity is None:
        return _extract_manual(args)

    if len(args) != spec.arity:
        return _arity_mismatch(mnemonic, spec.arity, len(args))

    values = _convert_all(args, 0, mnemonic)
    if isinstance(values, ParseDiagnostic):
        return values
    return spec.factory(*values)

