"""
session.py

Implements SerialSession, which opens a fixed set of serial channels, hands out
one Transport per channel, and closes every channel exactly once.

Port discovery is not done here: the caller names the ports (device paths such
as "/dev/ttyUSB0" or pyserial URLs such as "loop://").
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence

import serial

from serial_timing.communicator.transport import Transport, TransportError
from serial_timing.config import DEFAULT_SERIAL_SETTINGS


class SerialSession:
    """
    Owns the channels behind a set of transports.

    Usage::

        with SerialSession(["/dev/ttyUSB0"]) as session:
            gpsdo = GpsdoProfile(session.transport(0))
            print(gpsdo.identify())
    """

    def __init__(self, ports: Sequence[str], settings: Optional[Dict[str, Any]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initializes the session without opening anything.

        Args:
            ports: Port names or pyserial URLs, in transport index order.
            settings: Serial parameters overriding DEFAULT_SERIAL_SETTINGS.
            logger: Optional logger instance.
        """
        self.ports = list(ports)
        self.settings = dict(DEFAULT_SERIAL_SETTINGS)
        if settings:
            self.settings.update(settings)
        self.logger = logger or logging.getLogger(__name__)
        self._transports: List[Transport] = []
        self._opened = False
        self._closed = False

    def open(self) -> "SerialSession":
        """
        Opens every port and wraps each one in a Transport.

        Returns:
            The session itself.

        Raises:
            TransportError: If no port was given, the session was already
                closed, or a port cannot be opened.
        """
        if self._closed:
            raise TransportError("Session already closed")
        if self._opened:
            return self
        if not self.ports:
            raise TransportError("No serial ports given")

        channels = []
        for port in self.ports:
            try:
                channel = serial.serial_for_url(port, **self.settings)
            except (serial.SerialException, OSError, ValueError) as e:
                self.logger.error(f"Failed to open {port}: {e}")
                for opened in channels:
                    self._close_channel(opened)
                raise TransportError(f"Failed to open {port}: {e}") from e
            channels.append(channel)
            self.logger.info(f"Opened {port}")

        self._transports = [
            Transport(channel, index=i, logger=self.logger)
            for i, channel in enumerate(channels)
        ]
        self._opened = True
        return self

    def close(self) -> None:
        """
        Closes every channel. Further calls do nothing.
        """
        if self._closed:
            return
        self._closed = True
        for transport in self._transports:
            self._close_channel(transport.channel)
        self._transports = []
        self.logger.info("Serial session closed")

    @property
    def num_devices(self) -> int:
        return len(self._transports)

    def transport(self, index: int) -> Transport:
        """
        Returns the transport for the port at the given position.

        Raises:
            TransportError: If the session is not open.
            IndexError: If no port has that position.
        """
        if not self._opened or self._closed:
            raise TransportError("Session is not open")
        return self._transports[index]

    def __iter__(self) -> Iterator[Transport]:
        return iter(list(self._transports))

    def __len__(self) -> int:
        return self.num_devices

    def __enter__(self) -> "SerialSession":
        return self.open()

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _close_channel(self, channel) -> None:
        port = getattr(channel, "port", "channel")
        try:
            channel.close()
            self.logger.info(f"Closed {port}")
        except (serial.SerialException, OSError) as e:
            self.logger.error(f"Error closing {port}: {e}")
