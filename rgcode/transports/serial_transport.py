"""
Serial transport to the robot-arm controller.

This module opens the serial link, runs the connection checks and streams a
parsed program to the controller as newline-delimited command lines.
"""

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass

import serial

from rgcode.config import (
    HANDSHAKE_COMMAND,
    HANDSHAKE_READ_SIZE,
    SERIAL_BAUD,
    SERIAL_SETTLE_S,
    SERIAL_TIMEOUT_S,
    get_serial_port,
)
from rgcode.protocol.types import CommandType
from rgcode.protocol.wire import encode_program
from rgcode.utils.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandshakeCheck:
    """A failed connection check."""

    stage: str  # "init/write" or "init/read"
    message: str
    error: str


class SerialTransport:
    """
    Manages the serial link to the arm controller.

    This class handles:
    - Opening and closing the port
    - The check-string handshake
    - Program transmission
    """

    def __init__(
        self,
        port: str | None = None,
        baudrate: int = SERIAL_BAUD,
        timeout: float = SERIAL_TIMEOUT_S,
        settle_s: float = SERIAL_SETTLE_S,
    ):
        """
        Initialize the serial transport.

        Args:
            port: Serial port name (e.g., '/dev/cu.usbserial-210', 'COM3')
            baudrate: Baud rate for serial communication
            timeout: Read/write timeout in seconds
            settle_s: Delay after opening before the handshake
        """
        self.port = get_serial_port(port)
        self.baudrate = baudrate
        self.timeout = timeout
        self.settle_s = settle_s
        self.serial: serial.Serial | None = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.disconnect()

    def connect(self, port: str | None = None) -> bool:
        """
        Open the serial port.

        Args:
            port: Optional port override. If not provided, uses stored port.

        Returns:
            True if connection successful, False otherwise
        """
        if port:
            self.port = port

        if not self.port:
            logger.warning("No serial port specified")
            return False

        try:
            if self.serial and self.serial.is_open:
                self.serial.close()

            self.serial = serial.Serial(
                port=self.port,
                baudrate=self.baudrate,
                timeout=self.timeout,
                write_timeout=self.timeout,
            )
        except serial.SerialException as e:
            logger.error(f"Failed to open serial port {self.port}: {e}")
            self.serial = None
            return False
        except Exception as e:
            logger.error(f"Unexpected error opening serial port {self.port}: {e}")
            self.serial = None
            return False

        logger.info(f"Serial port opened on '{self.port}', initializing...")
        if self.settle_s > 0:
            time.sleep(self.settle_s)
        return True

    def disconnect(self) -> None:
        """Close the serial port."""
        if self.serial:
            try:
                if self.serial.is_open:
                    self.serial.close()
                logger.info(f"Disconnected from serial port: {self.port}")
            except serial.SerialException as e:
                logger.error(f"Error closing serial port: {e}")
            finally:
                self.serial = None

    def is_connected(self) -> bool:
        return self.serial is not None and self.serial.is_open

    def write(self, data: bytes) -> int:
        """
        Write raw bytes.

        Raises:
            TransportError: if the port is closed or the write fails
        """
        if not self.is_connected():
            raise TransportError("Serial port is not open")
        try:
            written = self.serial.write(data)  # type: ignore[union-attr]
            self.serial.flush()  # type: ignore[union-attr]
        except serial.SerialException as e:
            raise TransportError(f"Write failed: {e}") from e
        return int(written or 0)

    def read(self, size: int) -> bytes:
        """
        Read up to `size` bytes, waiting at most the configured timeout.

        Raises:
            TransportError: if the port is closed or the read fails
        """
        if not self.is_connected():
            raise TransportError("Serial port is not open")
        try:
            return bytes(self.serial.read(size))  # type: ignore[union-attr]
        except serial.SerialException as e:
            raise TransportError(f"Read failed: {e}") from e

    def handshake(self) -> list[HandshakeCheck]:
        """
        Send the check string and wait for the controller to answer.

        Returns:
            Failed checks; an empty list means all checks cleared.
        """
        failures: list[HandshakeCheck] = []

        logger.info("[init/write] Sending check string...")
        try:
            self.write(HANDSHAKE_COMMAND.encode("ascii"))
            logger.info("[init/write] Sent check string successfully")
        except TransportError as e:
            logger.error(f"[init/write] Error sending check string: {e.original_message}")
            failures.append(
                HandshakeCheck("init/write", "Error sending check string.", e.original_message)
            )

        logger.info("[init/read] Waiting for check string read response...")
        try:
            response = self.read(HANDSHAKE_READ_SIZE)
        except TransportError as e:
            response = b""
            error = e.original_message
        else:
            error = "timed out"

        if response:
            logger.info(
                f"[init/read] Check string read successfully: {response.decode('ascii', 'replace').strip()}"
            )
        else:
            logger.error(f"[init/read] No response from the device [{error}]")
            failures.append(
                HandshakeCheck(
                    "init/read",
                    "An error occurred trying to read from the device, or the connection timed out.",
                    error,
                )
            )

        if not failures:
            logger.info("[init/verify] Cleared all checks.")
        return failures

    def send_program(self, commands: Iterable[CommandType]) -> int:
        """
        Transmit parsed commands, one line each.

        Returns:
            Number of bytes written
        """
        payload = encode_program(commands)
        written = self.write(payload)
        logger.info(f"Sent program: {written} bytes")
        return written
