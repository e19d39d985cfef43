"""
Transport layer: one Transport per opened channel, and the session owning them.
"""
from serial_timing.communicator.session import SerialSession
from serial_timing.communicator.transport import Transport, TransportError

__all__ = [
    'SerialSession',
    'Transport',
    'TransportError'
]
