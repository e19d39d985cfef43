"""
ubx_capability.py

Binary-packet capability for u-blox receivers. Requests are built with
class/id/payload, checksummed, escaped to ``\\xNN`` text and sent through the
transport's raw path. Replies come back as escaped text and are returned
verbatim; decode() turns them into packets when the caller wants structure.
"""

from typing import List

from serial_timing import framing
from serial_timing.devices.capabilities.base_capability import DeviceCapability
from serial_timing.devices.commands.ubx_commands import UBXMessage
from serial_timing.models import UbxPacket


class UbxCapability(DeviceCapability):
    """
    Builds, checksums, and escapes UBX packets.
    """

    def build(self, msg_class: int, msg_id: int, payload: bytes = b"") -> str:
        """
        Returns the escaped wire text for a packet.
        """
        return framing.escape(framing.build_ubx_packet(msg_class, msg_id, payload))

    def poll(self, msg_class: int, msg_id: int, payload: bytes = b"") -> str:
        """
        Sends a request packet and reads the reply.

        Args:
            msg_class: Message class byte.
            msg_id: Message id byte.
            payload: Request payload, empty for plain polls.

        Returns:
            The escaped reply text.
        """
        self.logger.debug(f"UBX poll class=0x{msg_class:02X} id=0x{msg_id:02X}")
        return self.transport.query_raw(self.build(msg_class, msg_id, payload))

    def send(self, msg_class: int, msg_id: int, payload: bytes = b"") -> None:
        """
        Sends a packet without reading a reply.
        """
        self.transport.write_raw(self.build(msg_class, msg_id, payload))

    def mon_ver(self) -> str:
        """
        UBX-MON-VER: running firmware version, hardware version, and extensions.
        """
        return self.poll(*UBXMessage.MON_VER)

    def mon_hw(self) -> str:
        """
        UBX-MON-HW: hardware status (antenna, jamming, pin states).
        """
        return self.poll(*UBXMessage.MON_HW)

    @staticmethod
    def decode(reply: str) -> List[UbxPacket]:
        return framing.parse_ubx_packets(framing.unescape(reply))
