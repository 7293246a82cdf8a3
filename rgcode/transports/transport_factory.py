"""
Transport factory for creating the appropriate transport instance.

Selects between the real serial transport and the mock based on
configuration and environment.
"""

import logging

from rgcode.config import SERIAL_BAUD, is_fake_serial

from .mock_serial_transport import MockSerialTransport
from .serial_transport import SerialTransport

logger = logging.getLogger(__name__)


def create_transport(
    transport_type: str | None = None,
    port: str | None = None,
    baudrate: int = SERIAL_BAUD,
    **kwargs,
) -> SerialTransport:
    """
    Create a transport instance.

    Args:
        transport_type: 'serial', 'mock', or None to auto-detect from
            RGCODE_FAKE_SERIAL
        port: Serial port name (for real serial)
        baudrate: Baud rate for serial communication
        **kwargs: Additional transport-specific parameters

    Returns:
        SerialTransport or MockSerialTransport

    Raises:
        ValueError: for an unknown transport type
    """
    if transport_type is None:
        transport_type = "mock" if is_fake_serial() else "serial"

    if transport_type == "mock":
        logger.info("Creating MockSerialTransport (simulation mode)")
        return MockSerialTransport(port=port or "MOCK", baudrate=baudrate, **kwargs)
    if transport_type == "serial":
        logger.info(f"Creating SerialTransport for port {port or '<env>'}")
        return SerialTransport(port=port, baudrate=baudrate, **kwargs)

    raise ValueError(f"Unknown transport type: {transport_type}")
