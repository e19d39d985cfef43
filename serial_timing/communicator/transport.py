"""
transport.py

Implements the Transport class, the single point of contact with one opened
serial channel. Handles baud/timeout configuration, line and raw writes, the
drain-loop reads, queries, and echo discarding.

The channel is any pyserial ``serial.Serial`` compatible object. The transport
never opens or closes it; that belongs to the session that created it.
"""

import logging
from typing import Optional, Union

import serial

from serial_timing import framing
from serial_timing.config import BAUD_RATES, DEFAULT_EAT_LINES, DEFAULT_TIMEOUT_MS, LINE_TERMINATOR


class TransportError(IOError):
    """
    Raised when the underlying channel cannot be written to or read from.
    """


class Transport:
    """
    Blocking, single-threaded access to one serial channel.

    A transport has no internal lock. Callers sharing one transport must not
    interleave a write from one caller between another caller's write and read.
    """

    def __init__(self, channel, index: int = 0, logger: Optional[logging.Logger] = None,
                 encoding: str = "ascii", terminator: str = LINE_TERMINATOR):
        """
        Initializes the transport and applies the default timeout.

        Args:
            channel: An opened pyserial compatible channel.
            index: Position of the channel in its session.
            logger: Optional logger instance.
            encoding: Text encoding used for line reads and writes.
            terminator: Appended to every line-oriented write.
        """
        self.channel = channel
        self.index = index
        self.location = str(getattr(channel, "port", "") or "")
        self.logger = logger or logging.getLogger(__name__)
        self.encoding = encoding
        self.terminator = terminator
        self._baud_rate = 0
        self._timeout = 0
        self.configure_timeout(DEFAULT_TIMEOUT_MS)

    def __repr__(self) -> str:
        return (f"Transport(index={self.index}, location={self.location!r}, "
                f"baud_rate={self._baud_rate}, timeout={self._timeout})")

    @property
    def baud_rate(self) -> int:
        return self._baud_rate

    @property
    def timeout(self) -> int:
        """
        Current timeout in milliseconds, 0 if none has been applied.
        """
        return self._timeout

    @property
    def is_open(self) -> bool:
        return bool(self.channel is not None and getattr(self.channel, "is_open", False))

    def configure_baud(self, proposed: int) -> int:
        """
        Applies a baud rate if it belongs to the accepted table.

        A rate outside the table is ignored and the current rate is kept.
        A proposed 0 is recorded as unset/custom without touching the channel.

        Args:
            proposed: The proposed new baud rate.

        Returns:
            The baud rate after attempting the change.
        """
        if proposed != self._baud_rate and proposed in BAUD_RATES:
            if proposed:
                self._guard("configure baud rate")
                try:
                    self.channel.baudrate = proposed
                except (serial.SerialException, OSError, ValueError) as e:
                    raise TransportError(f"Failed to set baud rate on {self.location}: {e}") from e
            self._baud_rate = proposed
            self.logger.debug(f"{self.location}: baud rate set to {proposed}")
        elif proposed not in BAUD_RATES:
            self.logger.debug(f"{self.location}: ignoring unsupported baud rate {proposed}")
        return self._baud_rate

    def configure_timeout(self, timeout_ms: int) -> None:
        """
        Applies a communication timeout whenever it differs from the current one.

        Args:
            timeout_ms: New timeout in milliseconds.
        """
        if timeout_ms == self._timeout:
            return
        try:
            self.channel.timeout = timeout_ms / 1000.0
        except (serial.SerialException, OSError, ValueError) as e:
            raise TransportError(f"Failed to set timeout on {self.location}: {e}") from e
        self._timeout = timeout_ms
        self.logger.debug(f"{self.location}: timeout set to {timeout_ms} ms")

    def write(self, command: str) -> None:
        """
        Sends a command line to the device.

        Args:
            command: Command text, without line terminator.
        """
        self.logger.debug(f"{self.location} <- {command!r}")
        self._send((command + self.terminator).encode(self.encoding))

    def write_raw(self, data: Union[str, bytes]) -> None:
        """
        Sends binary data to the device, unterminated.

        Args:
            data: ``\\xNN`` escaped text or raw bytes.
        """
        if isinstance(data, str):
            data = framing.unescape(data)
        self.logger.debug(f"{self.location} <- {data.hex(' ')}")
        self._send(bytes(data))

    def read(self) -> str:
        """
        Reads lines until one comes back empty.

        Non-empty lines are right-stripped and joined with newlines.

        Returns:
            The joined text, or an empty string if the first read was empty.
        """
        chunk = self._read_line()
        if not chunk:
            return ""
        lines = [chunk]
        while True:
            chunk = self._read_line()
            if not chunk:
                break
            lines.append(chunk)
        response = "\n".join(lines)
        self.logger.debug(f"{self.location} -> {response!r}")
        return response

    def read_raw(self) -> str:
        """
        Reads byte chunks until one comes back empty.

        Returns:
            Every byte read, as concatenated ``\\xNN`` escapes.
        """
        chunks = []
        while True:
            chunk = self._read_bytes()
            if not chunk:
                break
            chunks.append(framing.escape(chunk))
        response = "".join(chunks)
        if response:
            self.logger.debug(f"{self.location} -> {response}")
        return response

    def query(self, command: str) -> str:
        """
        Convenience function to write a command and read the result.
        """
        self.write(command)
        return self.read()

    def query_raw(self, data: Union[str, bytes]) -> str:
        """
        Convenience function to write binary data and read the escaped result.
        """
        self.write_raw(data)
        return self.read_raw()

    def eat(self, lines: int = DEFAULT_EAT_LINES) -> None:
        """
        Discards a fixed number of line reads.

        Used after commands which are echoed but produce no response.

        Args:
            lines: The number of reads to discard.
        """
        for _ in range(lines):
            self._read_line()

    def flush_input(self) -> None:
        """
        Discards anything waiting in the input buffer.
        """
        self._guard("flush input")
        try:
            self.channel.reset_input_buffer()
        except (serial.SerialException, OSError) as e:
            raise TransportError(f"Failed to flush {self.location}: {e}") from e

    def _guard(self, action: str) -> None:
        if not self.is_open:
            raise TransportError(f"Cannot {action}: {self.location or 'channel'} is not open")

    def _send(self, payload: bytes) -> None:
        self._guard("write")
        try:
            self.channel.write(payload)
            self.channel.flush()
        except (serial.SerialException, OSError) as e:
            self.logger.error(f"Write to {self.location} failed: {e}")
            raise TransportError(f"Write to {self.location} failed: {e}") from e

    def _read_line(self) -> str:
        self._guard("read")
        try:
            raw = self.channel.readline()
        except (serial.SerialException, OSError) as e:
            self.logger.error(f"Read from {self.location} failed: {e}")
            raise TransportError(f"Read from {self.location} failed: {e}") from e
        return raw.decode(self.encoding, errors="replace").rstrip()

    def _read_bytes(self) -> bytes:
        self._guard("read")
        try:
            return bytes(self.channel.read(self.channel.in_waiting or 1))
        except (serial.SerialException, OSError) as e:
            self.logger.error(f"Read from {self.location} failed: {e}")
            raise TransportError(f"Read from {self.location} failed: {e}") from e
