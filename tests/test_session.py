import unittest
from unittest import mock

import serial

from serial_timing.communicator.session import SerialSession
from serial_timing.communicator.transport import TransportError


def make_channel(port: str, **settings) -> mock.Mock:
    channel = mock.Mock()
    channel.port = port
    channel.is_open = True
    channel.baudrate = settings.get("baudrate")
    return channel


class SerialSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch("serial.serial_for_url")
        self.serial_for_url = patcher.start()
        self.addCleanup(patcher.stop)
        self.serial_for_url.side_effect = make_channel

    def test_open_creates_one_transport_per_port(self) -> None:
        session = SerialSession(["/dev/ttyUSB0", "/dev/ttyUSB1"]).open()
        self.assertEqual(session.num_devices, 2)
        self.assertEqual(len(session), 2)
        self.assertEqual(session.transport(1).location, "/dev/ttyUSB1")
        self.assertEqual([t.index for t in session], [0, 1])
        session.close()

    def test_settings_override_defaults(self) -> None:
        session = SerialSession(["loop://"], settings={"baudrate": 57600}).open()
        self.assertEqual(session.transport(0).channel.baudrate, 57600)
        _, kwargs = self.serial_for_url.call_args
        self.assertEqual(kwargs["baudrate"], 57600)
        self.assertEqual(kwargs["parity"], serial.PARITY_NONE)
        self.assertEqual(kwargs["bytesize"], serial.EIGHTBITS)

    def test_no_ports_raises(self) -> None:
        with self.assertRaises(TransportError):
            SerialSession([]).open()

    def test_open_failure_closes_opened_channels(self) -> None:
        first = make_channel("/dev/ttyUSB0")
        self.serial_for_url.side_effect = [first, serial.SerialException("busy")]
        session = SerialSession(["/dev/ttyUSB0", "/dev/ttyUSB1"])
        with self.assertRaises(TransportError):
            session.open()
        first.close.assert_called_once()
        with self.assertRaises(TransportError):
            session.transport(0)

    def test_close_closes_each_channel_once(self) -> None:
        session = SerialSession(["/dev/ttyUSB0"]).open()
        channel = session.transport(0).channel
        session.close()
        session.close()
        channel.close.assert_called_once()
        self.assertEqual(session.num_devices, 0)

    def test_context_manager(self) -> None:
        with SerialSession(["/dev/ttyUSB0"]) as session:
            channel = session.transport(0).channel
            self.assertEqual(channel.timeout, 0.2)
        channel.close.assert_called_once()
        with self.assertRaises(TransportError):
            session.transport(0)

    def test_reopen_after_close_raises(self) -> None:
        session = SerialSession(["/dev/ttyUSB0"]).open()
        session.close()
        with self.assertRaises(TransportError):
            session.open()

    def test_close_error_is_logged(self) -> None:
        session = SerialSession(["/dev/ttyUSB0"]).open()
        session.transport(0).channel.close.side_effect = OSError("gone")
        with self.assertLogs(session.logger, level="ERROR"):
            session.close()

    def test_transport_index_out_of_range(self) -> None:
        session = SerialSession(["/dev/ttyUSB0"]).open()
        with self.assertRaises(IndexError):
            session.transport(1)
        session.close()


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
