#!/usr/bin/env python3
"""
device_simulator.py

This module implements the DeviceSimulator class which emulates a timing
instrument behind a serial port, for testing without physical hardware. It
implements the part of the pyserial ``serial.Serial`` interface the Transport
uses, so it can be handed to a Transport in place of an opened port.

Features for GPSDOs:
  - Echoes every command line and follows it with the reply and an "scpi>"
    prompt, like a Jackson Labs unit with echo and prompt enabled.
  - SYST:COMM:SER:ECHO / SYST:COMM:SER:PRO turn echo and prompt on and off.
  - broadcast() queues NMEA sentences ahead of the next reply.

Features for CSACs:
  - Answers the "!" command set without echo.

Features for GNSS receivers:
  - Answers UBX polls with canned packets on the byte-oriented read path.

Reads follow pyserial timeout semantics: when nothing is queued, readline() and
read() return b"" as a timed-out port would. An empty entry queued between
lines behaves the same way, splitting traffic into separate drain reads.

Usage Example:
    simulator = DeviceSimulator(device_type="GPSDO")
    gpsdo = GpsdoProfile(Transport(simulator))
    print(gpsdo.identify())
"""

import logging
from collections import deque
from typing import Any, Dict, List, Optional

from serial_timing import framing
from serial_timing.config import DEVICE_PARAMETERS
from serial_timing.devices.commands.ubx_commands import UBXMessage

DEFAULT_GPSDO_RESPONSES = {
    "*IDN?": "Jackson Labs, FireFly-IA, 12345, 0.913",
    "SYNC?": "SYNC:SOUR:STATE GPS\nSYNC:LOCK ON\nSYNC:HEALTH 0x0",
    "SYNC:LOCK?": "ON",
    "SYNC:HEALTH?": "0x0",
    "GPS:SAT:TRA:COUN?": "9",
    "GPS:SAT:VIS:COUN?": "11",
    "PTIM:DATE?": "2026,10,19",
    "PTIM:TIME?": "12:00:00",
    "SERV:1PPS?": "0",
}

DEFAULT_CSAC_RESPONSES = {
    "!6": "Status,Alarm,SN,Mode,Contrast,LaserI,TCXO,HeatP,Sig,Temp,Steer,ATune,Phase,DiscOK,TOD,LTime,Ver",
    "!^": "0,0x0000,1234CS56789,0x0010,4978,1.11,1.232,15.42,0.915,40.12,0,---,0,1,1000,12345,1.08",
}

# MON-VER reply: swVersion(30) hwVersion(10)
_MON_VER_PAYLOAD = b"ROM CORE 3.01 (107888)".ljust(30, b"\x00") + b"00080000".ljust(10, b"\x00")

DEFAULT_UBX_RESPONSES = {
    UBXMessage.MON_VER: framing.build_ubx_packet(*UBXMessage.MON_VER, _MON_VER_PAYLOAD),
    UBXMessage.MON_HW: framing.build_ubx_packet(*UBXMessage.MON_HW, bytes(60)),
}

PROMPT = "scpi>"


class DeviceSimulator:
    """
    Simulates a GPSDO, CSAC, or GNSS receiver on a serial line.

    This class implements the channel interface the Transport relies on:
      write(), flush(), readline(), read(), in_waiting, reset_input_buffer(),
      close(), is_open, port, baudrate, and timeout.
    """

    def __init__(self, device_type: str = "GPSDO", config: Optional[Dict[str, Any]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initializes the simulator.

        Args:
            device_type: "GPSDO", "CSAC", or "GNSS".
            config: Optional overrides: "responses" (command -> reply text),
                "ubx_responses" ((class, id) -> packet bytes), "echo" and
                "prompt" (GPSDO only), "port".
            logger: Optional logger instance.

        Raises:
            ValueError: If the device type is not simulated.
        """
        self.device_type = device_type.upper()
        if self.device_type not in ("GPSDO", "CSAC", "GNSS"):
            raise ValueError("Unsupported device type. Use 'GPSDO', 'CSAC' or 'GNSS'.")
        self.config = config or {}
        self.logger = logger or logging.getLogger("DeviceSimulator")

        if self.device_type == "GPSDO":
            self.responses = dict(DEFAULT_GPSDO_RESPONSES)
        elif self.device_type == "CSAC":
            self.responses = dict(DEFAULT_CSAC_RESPONSES)
        else:
            self.responses = {}
        self.responses.update(self.config.get("responses", {}))
        self.ubx_responses = dict(DEFAULT_UBX_RESPONSES)
        self.ubx_responses.update(self.config.get("ubx_responses", {}))

        self.state = {
            "echo": self.config.get("echo", self.device_type == "GPSDO"),
            "prompt": self.config.get("prompt", self.device_type == "GPSDO"),
            "steer": 0,
            "steer_locked": False,
        }
        self.port = self.config.get("port", f"sim://{self.device_type.lower()}")
        self.baudrate = DEVICE_PARAMETERS[self.device_type]["baudrate"]
        self.timeout = None
        self.is_open = True
        self.written: List[bytes] = []
        self._lines = deque()
        self._raw = bytearray()

    @property
    def commands(self) -> List[str]:
        """
        Every line-oriented write received, without terminators.
        """
        return [data.decode("ascii", errors="replace").rstrip("\r\n")
                for data in self.written if not data.startswith(framing.UBX_SYNC)]

    @property
    def in_waiting(self) -> int:
        return len(self._raw)

    def broadcast(self, sentence: str) -> None:
        """
        Queues an unsolicited sentence, followed by a read gap, ahead of
        whatever the device sends next.
        """
        self._lines.append(sentence.encode("ascii") + b"\r\n")
        self._lines.append(b"")

    def write(self, data: bytes) -> int:
        self._check_open()
        data = bytes(data)
        self.written.append(data)
        if data.startswith(framing.UBX_SYNC):
            self._handle_ubx(data)
        else:
            self._handle_line(data.decode("ascii", errors="replace").rstrip("\r\n"))
        return len(data)

    def flush(self) -> None:
        self._check_open()

    def readline(self) -> bytes:
        self._check_open()
        if self._lines:
            return self._lines.popleft()
        return b""

    def read(self, size: int = 1) -> bytes:
        self._check_open()
        chunk = bytes(self._raw[:size])
        del self._raw[:size]
        return chunk

    def reset_input_buffer(self) -> None:
        self._lines.clear()
        self._raw.clear()

    def close(self) -> None:
        self.is_open = False
        self.logger.info("Simulated device disconnected.")

    def _check_open(self) -> None:
        if not self.is_open:
            raise OSError("Simulated port is closed")

    def _queue(self, text: str) -> None:
        for line in text.split("\n"):
            self._lines.append(line.encode("ascii") + b"\r\n")

    def _handle_line(self, command: str) -> None:
        self.logger.debug(f"Simulated command received: {command}")
        if self.device_type == "GPSDO":
            reply = self._gpsdo_reply(command)
            if self.state["echo"]:
                self._queue(command)
            if reply:
                self._queue(reply)
            if self.state["prompt"]:
                self._queue(PROMPT)
        elif self.device_type == "CSAC":
            reply = self._csac_reply(command)
            if reply:
                self._queue(reply)

    def _gpsdo_reply(self, command: str) -> str:
        mnemonic, _, argument = command.partition(" ")
        if mnemonic == "SYST:COMM:SER:ECHO" and argument:
            self.state["echo"] = argument == "ON"
            return ""
        if mnemonic == "SYST:COMM:SER:PRO" and argument:
            self.state["prompt"] = argument == "ON"
            return ""
        if mnemonic == "SYST:COMM:SER:ECHO?":
            return "ON" if self.state["echo"] else "OFF"
        if mnemonic == "SYST:COMM:SER:PRO?":
            return "ON" if self.state["prompt"] else "OFF"
        if argument:
            # Setters answer with the echo and prompt only
            self.responses[mnemonic + "?"] = argument
            return ""
        return self.responses.get(command, "")

    def _csac_reply(self, command: str) -> str:
        if command.startswith("!FD"):
            self.state["steer"] = int(command[3:])
            return f"Steer {self.state['steer']}"
        if command == "!FL":
            self.state["steer_locked"] = True
            return "Steer value locked"
        return self.responses.get(command, "")

    def _handle_ubx(self, data: bytes) -> None:
        packets = framing.parse_ubx_packets(data)
        for packet in packets:
            reply = self.ubx_responses.get((packet.msg_class, packet.msg_id))
            self.logger.debug(f"Simulated UBX poll: {packet!r}")
            if reply is not None:
                self._raw.extend(reply)
