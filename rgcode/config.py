"""
Central configuration for rgcode tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("RGCODE_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)

LOG_LEVEL_DEFAULT: str = "INFO"

# Program files
PROGRAM_SUFFIX: str = ".rgcf"
PROGRAM_ENCODING: str = "utf-8"

# Serial link to the arm controller
SERIAL_BAUD: int = int(os.getenv("RGCODE_BAUDRATE", "115200"))
SERIAL_TIMEOUT_S: float = float(os.getenv("RGCODE_TIMEOUT_S", "5.0"))
# Controller resets when the port opens; wait before the handshake
SERIAL_SETTLE_S: float = float(os.getenv("RGCODE_SETTLE_S", "1.0"))

HANDSHAKE_COMMAND: str = "IN 0"
HANDSHAKE_READ_SIZE: int = 100


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


FAKE_SERIAL: bool = _env_bool("RGCODE_FAKE_SERIAL")


def is_fake_serial() -> bool:
    """Re-read RGCODE_FAKE_SERIAL so tests can toggle it at runtime."""
    return _env_bool("RGCODE_FAKE_SERIAL", FAKE_SERIAL)


def get_serial_port(port: str | None = None) -> str:
    """
    Resolve the serial port.

    Priority:
      1) Explicit argument (usually from the CLI)
      2) Environment variable RGCODE_SERIAL_PORT

    Returns:
      Port string if available, otherwise an empty string "".
    """
    if port and port.strip():
        return port.strip()

    env_port = os.getenv("RGCODE_SERIAL_PORT")
    if env_port and env_port.strip():
        port = env_port.strip()
        logger.info(f"Using serial port from environment: {port}")
        return port

    return ""
