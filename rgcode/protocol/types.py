"""
Type definitions for the robot-arm G-code protocol.

Defines the typed instruction set produced by the parser: one frozen
dataclass per Axis / Command variant, plus the diagnostic types used to
report lines that failed to parse.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


# ----- Manual jog axes -----


@dataclass(frozen=True)
class X:
    value: float

    letter: ClassVar[str] = "X"


@dataclass(frozen=True)
class Y:
    value: float

    letter: ClassVar[str] = "Y"


@dataclass(frozen=True)
class Z:
    value: float

    letter: ClassVar[str] = "Z"


@dataclass(frozen=True)
class A:
    value: float

    letter: ClassVar[str] = "A"


@dataclass(frozen=True)
class B:
    """Paired/differential axis driven by two values."""

    first: float
    second: float

    letter: ClassVar[str] = "B"


@dataclass(frozen=True)
class C:
    value: float

    letter: ClassVar[str] = "C"


AxisType = X | Y | Z | A | B | C


# ----- Commands -----


@dataclass(frozen=True)
class NO:
    """No-op."""

    mnemonic: ClassVar[str] = "NO"


@dataclass(frozen=True)
class HM:
    """Homing target coordinates."""

    x: float
    y: float
    z: float

    mnemonic: ClassVar[str] = "HM"


@dataclass(frozen=True)
class TG:
    """Move to target coordinates."""

    x: float
    y: float
    z: float

    mnemonic: ClassVar[str] = "TG"


@dataclass(frozen=True)
class CL:
    """Claw actuator positions."""

    p1: float
    p2: float
    p3: float
    p4: float
    p5: float

    mnemonic: ClassVar[str] = "CL"


@dataclass(frozen=True)
class MN:
    """Manual jog on a single axis."""

    axis: AxisType

    mnemonic: ClassVar[str] = "MN"


@dataclass(frozen=True)
class RH:
    """Return home."""

    mnemonic: ClassVar[str] = "RH"


@dataclass(frozen=True)
class RS:
    """Reset."""

    mnemonic: ClassVar[str] = "RS"


@dataclass(frozen=True)
class FS:
    """Force stop."""

    mnemonic: ClassVar[str] = "FS"


CommandType = NO | HM | TG | CL | MN | RH | RS | FS


# ----- Diagnostics -----


class DiagnosticReason(Enum):
    """Why a line failed to parse."""

    EMPTY_LINE = "EMPTY_LINE"
    UNKNOWN_MNEMONIC = "UNKNOWN_MNEMONIC"
    UNKNOWN_AXIS = "UNKNOWN_AXIS"
    ARITY_MISMATCH = "ARITY_MISMATCH"
    INVALID_NUMBER = "INVALID_NUMBER"


@dataclass(frozen=True)
class ParseDiagnostic:
    """
    One line that failed to parse.

    Only the fields relevant to the reason are set:
      - ARITY_MISMATCH: expected, actual
      - INVALID_NUMBER: position, text
      - UNKNOWN_AXIS: text (the axis token)
      - ARITY_MISMATCH on MN: text is the axis letter, None when missing
    """

    reason: DiagnosticReason
    mnemonic: str = ""
    line_number: int = 0  # 1-based; 0 when not produced from a document
    raw_line: str = ""
    expected: int | None = None
    actual: int | None = None
    position: int | None = None
    text: str | None = None


@dataclass(frozen=True)
class ParsedLine:
    """Outcome of one non-blank document line: a command or a diagnostic."""

    line_number: int
    raw_line: str
    result: CommandType | ParseDiagnostic

    @property
    def ok(self) -> bool:
        return not isinstance(self.result, ParseDiagnostic)

    @property
    def command(self) -> CommandType | None:
        return None if isinstance(self.result, ParseDiagnostic) else self.result

    @property
    def diagnostic(self) -> ParseDiagnostic | None:
        return self.result if isinstance(self.result, ParseDiagnostic) else None
