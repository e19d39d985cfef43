"""
framing.py

Checksum and framing helpers for the text and binary protocols spoken by the
timing instruments.

NMEA sentence layout::

    $<body>*<HH>

- HH: XOR of every character of <body>, two uppercase hex digits

UBX packet layout::

    +-------+-------+-------+-------+-------+-------+-----------+-------+-------+
    | 0xB5  | 0x62  | class |  id   | lenLo | lenHi |  payload  |  ckA  |  ckB  |
    +-------+-------+-------+-------+-------+-------+-----------+-------+-------+

- Length: little-endian byte count of the payload only
- ckA/ckB: 8-bit Fletcher accumulators over class..payload (sync bytes excluded)

On the serial wire handed to the transport, binary data travels as text made of
``\\xNN`` escapes, one per byte.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from serial_timing.models import UbxPacket

NMEA_START = "$"
NMEA_CHECKSUM_DELIMITER = "*"

UBX_SYNC_1 = 0xB5  # μ
UBX_SYNC_2 = 0x62  # b
UBX_SYNC = bytes([UBX_SYNC_1, UBX_SYNC_2])
UBX_HEADER_SIZE = 6  # sync(2) + class(1) + id(1) + length(2)

_ESCAPED_TEXT = re.compile(r"(?:\\x[0-9a-fA-F]{2})*")


def nmea_checksum(body: str) -> str:
    """
    Computes the NMEA checksum of a sentence body.

    Args:
        body: The characters between ``$`` and ``*``.

    Returns:
        Two uppercase hex digits.
    """
    checksum = 0
    for byte in body.encode("ascii"):
        checksum ^= byte
    return f"{checksum:02X}"


def add_nmea_checksum(sentence: str) -> str:
    """
    Appends the checksum to a ``$...*`` sentence.

    A missing trailing ``*`` is added. Anything already following the first
    ``*`` is replaced.

    Args:
        sentence: The sentence, starting with ``$``.

    Returns:
        The sentence terminated by ``*HH``.

    Raises:
        ValueError: If the sentence does not start with ``$``.
    """
    if not sentence.startswith(NMEA_START):
        raise ValueError(f"NMEA sentence must start with '$': {sentence!r}")
    body = sentence[1:].split(NMEA_CHECKSUM_DELIMITER, 1)[0]
    return f"{NMEA_START}{body}{NMEA_CHECKSUM_DELIMITER}{nmea_checksum(body)}"


def ubx_checksum(packet: bytes) -> Tuple[int, int]:
    """
    Computes the two UBX checksum bytes of a packet without its checksum.

    Args:
        packet: Bytes starting with the two sync characters.

    Returns:
        (ck_a, ck_b)
    """
    ck_a = 0
    ck_b = 0
    # Start at 2 to skip sync characters
    for byte in packet[2:]:
        ck_a = (ck_a + byte) & 0xFF
        ck_b = (ck_b + ck_a) & 0xFF
    return ck_a, ck_b


def add_ubx_checksum(packet: bytes) -> bytes:
    """
    Returns the packet with ckA and ckB appended.

    Raises:
        ValueError: If the packet is shorter than the sync and header bytes.
    """
    if len(packet) < UBX_HEADER_SIZE:
        raise ValueError(f"UBX packet shorter than its header: {bytes(packet).hex(' ')}")
    ck_a, ck_b = ubx_checksum(packet)
    return bytes(packet) + bytes([ck_a, ck_b])


def build_ubx_packet(msg_class: int, msg_id: int, payload: bytes = b"") -> bytes:
    """
    Builds a complete UBX packet.

    Args:
        msg_class: Message class byte.
        msg_id: Message id byte.
        payload: Message payload.

    Returns:
        Sync, header, payload and checksum bytes.
    """
    header = UBX_SYNC + bytes([msg_class, msg_id]) + len(payload).to_bytes(2, "little")
    return add_ubx_checksum(header + payload)


def escape(data: bytes) -> str:
    """
    Renders each byte as a ``\\xNN`` escape, with no separator.
    """
    return "".join(f"\\x{byte:02x}" for byte in data)


def unescape(text: str) -> bytes:
    """
    Reverses :func:`escape`.

    Raises:
        ValueError: If the text is not a sequence of ``\\xNN`` escapes.
    """
    if not _ESCAPED_TEXT.fullmatch(text):
        raise ValueError(f"Not a \\xNN escaped byte string: {text!r}")
    return bytes.fromhex(text.replace("\\x", ""))


def parse_ubx_packets(data: bytes) -> List[UbxPacket]:
    """
    Splits a byte stream into UBX packets.

    Bytes before a sync pair are skipped. A packet truncated by the end of the
    stream ends the scan. Checksums are recomputed and reported on each packet,
    not enforced.

    Args:
        data: Raw bytes read from the receiver.

    Returns:
        The packets in stream order.
    """
    packets: List[UbxPacket] = []
    offset = data.find(UBX_SYNC)
    while offset != -1 and offset + UBX_HEADER_SIZE <= len(data):
        length = int.from_bytes(data[offset + 4:offset + 6], "little")
        end = offset + UBX_HEADER_SIZE + length + 2
        if end > len(data):
            break
        body = data[offset:end - 2]
        packets.append(UbxPacket(
            msg_class=data[offset + 2],
            msg_id=data[offset + 3],
            payload=bytes(data[offset + UBX_HEADER_SIZE:end - 2]),
            checksum_valid=ubx_checksum(body) == (data[end - 2], data[end - 1]),
        ))
        offset = data.find(UBX_SYNC, end)
    return packets
