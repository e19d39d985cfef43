"""
gnss_profile.py

Profile for u-blox style GNSS receivers. The receiver streams NMEA sentences
and answers UBX binary polls on the same port.
"""

import logging
from typing import List, Optional

from serial_timing.communicator.transport import Transport
from serial_timing.devices.capabilities.nmea_capability import NmeaCapability
from serial_timing.devices.capabilities.ubx_capability import UbxCapability
from serial_timing.devices.profiles.device_profile import DeviceProfile
from serial_timing.models import UbxPacket


class GnssProfile(DeviceProfile):
    """
    Text-sentence + binary-packet profile for a GNSS receiver.
    """

    DEVICE_TYPE = "GNSS"

    def __init__(self, transport: Transport, logger: Optional[logging.Logger] = None):
        super().__init__(transport, logger)
        self.nmea = NmeaCapability(transport, self.logger)
        self.ubx = UbxCapability(transport, self.logger)

    def firmware_version(self) -> str:
        """
        UBX-MON-VER reply as escaped text.
        """
        return self.ubx.mon_ver()

    def hardware_status(self) -> str:
        """
        UBX-MON-HW reply as escaped text.
        """
        return self.ubx.mon_hw()

    def poll(self, msg_class: int, msg_id: int, payload: bytes = b"") -> str:
        return self.ubx.poll(msg_class, msg_id, payload)

    def decode(self, reply: str) -> List[UbxPacket]:
        return self.ubx.decode(reply)

    def send_sentence(self, sentence: str) -> str:
        return self.nmea.send_sentence(sentence)

    def read_sentences(self) -> str:
        """
        Reads pending line traffic, buffering it while it starts with ``$``.

        Returns:
            The first text that is not a sentence, empty once the line is idle.
        """
        return self.nmea.absorb(self.transport.read())

    def sentences(self) -> str:
        return self.nmea.drain_sentences()
