"""
models.py

Defines the data models shared by the transport, capability, and profile layers.
Utilizes dataclasses to enforce structure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SyncSource(Enum):
    """
    1 PPS source used by a GPSDO for synchronization.
    """
    GPS = "GPS"      # Internal GPS receiver
    EXT = "EXT"      # External 1 PPS input
    AUTO = "AUTO"    # Internal receiver when available, fall back to EXT


@dataclass
class CommandResult:
    """
    Outcome of a command whose parameter is validated before transmission.
    """
    command: str                         # Command text sent, or that would have been sent
    sent: bool                           # False when the command was dropped
    response: str = ""                   # Reply text, empty when nothing was read
    error_message: Optional[str] = None  # Reason the command was dropped

    def __bool__(self) -> bool:
        return self.sent


@dataclass
class UbxPacket:
    """
    A decoded UBX packet. The checksum is reported, never enforced.
    """
    msg_class: int
    msg_id: int
    payload: bytes
    checksum_valid: bool = True

    def __repr__(self) -> str:
        return (
            f"UbxPacket(class=0x{self.msg_class:02X}, id=0x{self.msg_id:02X}, "
            f"payload={self.payload.hex(' ') if self.payload else '(empty)'}, "
            f"checksum_valid={self.checksum_valid})"
        )
