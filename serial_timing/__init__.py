"""
serial_timing

Serial command and telemetry exchange with laboratory timing instruments:
GPS disciplined oscillators, GNSS receivers, and chip scale atomic clocks.
"""

from serial_timing.communicator import SerialSession, Transport, TransportError
from serial_timing.communicator.protocol_factory import get_profile
from serial_timing.models import CommandResult, SyncSource, UbxPacket

__all__ = [
    'CommandResult',
    'SerialSession',
    'SyncSource',
    'Transport',
    'TransportError',
    'UbxPacket',
    'get_profile'
]

__version__ = "0.1.0"
