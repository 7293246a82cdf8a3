"""
CLI entry point for the rgcode command.

Parses a robot-arm G-code program, prints every line's result and optionally
streams the program to the arm controller.
"""

import argparse
import logging
import sys

from rgcode import config as cfg
from rgcode.config import TRACE
from rgcode.gcode import format_line, parse_document
from rgcode.source import read_document
from rgcode.transports import create_transport
from rgcode.utils.errors import DocumentSourceError, ProgramParseError, TransportError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERRORS = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rgcode", description="Robot arm G-code parser")
    parser.add_argument("program", help="Program file (.rgcf)")
    parser.add_argument("--send", action="store_true",
                        help="Send the program to the controller if it parses cleanly")
    parser.add_argument("--port", help="Serial port (e.g., /dev/ttyUSB0 or COM3)")
    parser.add_argument("--baudrate", type=int, default=cfg.SERIAL_BAUD, help="Serial baudrate")
    parser.add_argument("--fake-serial", action="store_true",
                        help="Use the in-memory mock transport")

    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Enable quiet logging (WARNING level)")
    parser.add_argument("--log-level", choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Set specific log level")
    return parser


def resolve_log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        if args.log_level == "TRACE":
            return TRACE
        return getattr(logging, args.log_level)
    if args.verbose >= 3 or cfg.TRACE_ENABLED:
        return TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.WARNING
    return getattr(logging, cfg.LOG_LEVEL_DEFAULT)


def send(args: argparse.Namespace, report) -> int:
    try:
        commands = report.raise_for_errors()
    except ProgramParseError as e:
        logger.error(f"Not sending: {e}")
        return EXIT_PARSE_ERRORS

    transport = create_transport("mock" if args.fake_serial else None, port=args.port,
                                 baudrate=args.baudrate)
    if not transport.connect():
        logger.error("Failed to open serial port or timed out.")
        return EXIT_FATAL

    with transport:
        failures = transport.handshake()
        if failures:
            print("Failed checks:")
            for check in failures:
                print(f"{check.error} | [{check.stage}] {check.message}")
            return EXIT_FATAL
        try:
            transport.send_program(commands)
        except TransportError as e:
            logger.error(str(e))
            return EXIT_FATAL

    print(f"Sent {len(commands)} command(s)")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=resolve_log_level(args),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        document = read_document(args.program)
    except DocumentSourceError as e:
        logger.error(str(e))
        return EXIT_FATAL

    report = parse_document(document)
    for line in report:
        print(format_line(line))
    print(f"{len(report.commands)} command(s), {len(report.diagnostics)} error(s)")

    if args.send:
        return send(args, report)
    return EXIT_OK if report.ok else EXIT_PARSE_ERRORS


def main_entry():
    """Entry point for the rgcode command."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
