"""
Operator-facing formatting of parse results.
"""

from rgcode.protocol.types import DiagnosticReason, ParseDiagnostic, ParsedLine
from rgcode.protocol.wire import encode_command

from .extractor import AXIS_TABLE, COMMAND_TABLE


def describe(diagnostic: ParseDiagnostic) -> str:
    """Explain a diagnostic in one sentence, without location."""
    reason = diagnostic.reason
    if reason is DiagnosticReason.EMPTY_LINE:
        return "empty line"
    if reason is DiagnosticReason.UNKNOWN_MNEMONIC:
        known = ", ".join(COMMAND_TABLE)
        return f"unknown command '{diagnostic.mnemonic}' (expected one of {known})"
    if reason is DiagnosticReason.UNKNOWN_AXIS:
        known = ", ".join(AXIS_TABLE)
        return f"unknown axis '{diagnostic.text}' for MN (expected one of {known})"
    if reason is DiagnosticReason.ARITY_MISMATCH:
        if diagnostic.mnemonic == "MN" and diagnostic.text is None:
            return "MN requires an axis letter"
        name = diagnostic.mnemonic
        if diagnostic.text:
            name += f" {diagnostic.text}"
        return f"{name} requires {diagnostic.expected} argument(s), got {diagnostic.actual}"
    if reason is DiagnosticReason.INVALID_NUMBER:
        return f"argument {diagnostic.position} of {diagnostic.mnemonic} is not a number: '{diagnostic.text}'"
    return reason.value


def format_diagnostic(diagnostic: ParseDiagnostic) -> str:
    """
    Format a diagnostic with its location.

    Example:
        "line 3: error: TG requires 3 argument(s), got 2 | TG 1 2"
    """
    text = f"line {diagnostic.line_number}: error: {describe(diagnostic)}"
    if diagnostic.raw_line:
        text += f" | {diagnostic.raw_line}"
    return text


def format_line(line: ParsedLine) -> str:
    """One line of operator output: the parsed command or the diagnostic."""
    if isinstance(line.result, ParseDiagnostic):
        return format_diagnostic(line.result)
    return f"line {line.line_number}: {encode_command(line.result)}"
