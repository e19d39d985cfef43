"""
base_capability.py

This module defines the base class for device capabilities. A capability is one
message dialect (SCPI-style queries, NMEA sentences, UBX packets) layered over a
shared Transport. Device profiles compose the capabilities their instrument
speaks instead of inheriting from them.

Usage Example:
    nmea = NmeaCapability(transport)
    reply = nmea.absorb(transport.query("SYNC?"))
    broadcasts = nmea.drain_sentences()
"""

import logging
from typing import Optional

from serial_timing.communicator.transport import Transport


class DeviceCapability:
    """
    Holds a non-owning reference to the transport shared by a device profile.
    """

    def __init__(self, transport: Transport, logger: Optional[logging.Logger] = None):
        """
        Initializes the capability.

        Args:
            transport: The transport shared with the rest of the profile.
            logger: Optional logger instance.
        """
        self.transport = transport
        self.logger = logger or logging.getLogger(self.__class__.__name__)
