"""
Mock serial transport for simulation and testing.

Behaves like SerialTransport without a device: the controller side echoes
the check string and records every byte written to it.
"""

import logging

from rgcode.config import HANDSHAKE_COMMAND, SERIAL_BAUD
from rgcode.utils.errors import TransportError

from .serial_transport import SerialTransport

logger = logging.getLogger(__name__)


class MockSerialTransport(SerialTransport):
    """
    In-memory stand-in for the controller link.

    Args:
        port: Label only; no device is opened
        respond: When False the simulated controller never answers, so the
            handshake read times out
    """

    def __init__(self, port: str | None = "MOCK", baudrate: int = SERIAL_BAUD, respond: bool = True, **kwargs):
        super().__init__(port=port, baudrate=baudrate, settle_s=0.0, **kwargs)
        self.respond = respond
        self.written = bytearray()
        self._rx = bytearray()
        self._open = False

    def connect(self, port: str | None = None) -> bool:
        if port:
            self.port = port
        self._open = True
        logger.info(f"Mock serial port opened on '{self.port}'")
        return True

    def disconnect(self) -> None:
        if self._open:
            logger.info(f"Disconnected from mock serial port: {self.port}")
        self._open = False

    def is_connected(self) -> bool:
        return self._open

    def write(self, data: bytes) -> int:
        if not self._open:
            raise TransportError("Serial port is not open")
        self.written.extend(data)
        if self.respond and data == HANDSHAKE_COMMAND.encode("ascii"):
            self._rx.extend(data)
        return len(data)

    def read(self, size: int) -> bytes:
        if not self._open:
            raise TransportError("Serial port is not open")
        chunk = bytes(self._rx[:size])
        del self._rx[:size]
        return chunk

    def sent_lines(self) -> list[str]:
        """Lines written after the handshake, decoded."""
        data = bytes(self.written)
        check = HANDSHAKE_COMMAND.encode("ascii")
        if data.startswith(check):
            data = data[len(check) :]
        return data.decode("ascii").splitlines()
