"""
Transport modules for rgcode.

Downstream links that receive a parsed command stream.
"""

from .mock_serial_transport import MockSerialTransport
from .serial_transport import HandshakeCheck, SerialTransport
from .transport_factory import create_transport

__all__ = [
    "SerialTransport",
    "MockSerialTransport",
    "HandshakeCheck",
    "create_transport",
]
