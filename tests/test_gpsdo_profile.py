import unittest
from unittest import mock

from serial_timing.communicator.transport import Transport
from serial_timing.device_simulator import DeviceSimulator
from serial_timing.devices.profiles.gpsdo_profile import GpsdoProfile
from serial_timing.models import SyncSource


class GpsdoProfileCommandTests(unittest.TestCase):
    def setUp(self) -> None:
        self.transport = mock.Mock()
        self.gpsdo = GpsdoProfile(self.transport)

    def test_applies_default_line_settings(self) -> None:
        self.transport.configure_timeout.assert_called_once_with(100)
        self.transport.configure_baud.assert_called_once_with(115200)

    def test_efc_scale_upper_bound_is_transmitted(self) -> None:
        result = self.gpsdo.set_efc_scale(500.0)
        self.assertTrue(result.sent)
        self.transport.write.assert_called_once_with("SERV:EFCS 500.0")
        self.transport.eat.assert_called_once_with(2)

    def test_efc_scale_out_of_range_is_dropped(self) -> None:
        with self.assertLogs(self.gpsdo.logger, level="WARNING"):
            result = self.gpsdo.set_efc_scale(500.1)
        self.assertFalse(result)
        self.assertIsNotNone(result.error_message)
        self.assertEqual(self.transport.write.call_count, 0)
        self.transport.eat.assert_not_called()

    def test_efc_scale_nan_is_dropped(self) -> None:
        result = self.gpsdo.set_efc_scale(float("nan"))
        self.assertFalse(result.sent)
        self.transport.write.assert_not_called()
        self.transport.eat.assert_not_called()

    def test_pps_offset_outside_int32_is_dropped(self) -> None:
        self.assertFalse(self.gpsdo.set_pps_offset(2**40).sent)
        self.assertTrue(self.gpsdo.set_pps_offset(-2**31).sent)
        self.transport.write.assert_called_once_with("SERV:1PPS -2147483648")

    def test_float_coefficient_ranges(self) -> None:
        cases = [
            (self.gpsdo.set_efc_damping, 0.0, 4000.0, -0.1, 4000.5),
            (self.gpsdo.set_temperature_compensation, -4000.0, 4000.0, -4000.1, 4000.1),
            (self.gpsdo.set_aging_compensation, -10.0, 10.0, -10.5, 10.5),
            (self.gpsdo.set_phase_compensation, -100.0, 100.0, -100.1, 100.1),
        ]
        for setter, low, high, below, above in cases:
            with self.subTest(setter=setter.__name__):
                self.transport.write.reset_mock()
                self.assertTrue(setter(low).sent)
                self.assertTrue(setter(high).sent)
                self.assertFalse(setter(below).sent)
                self.assertFalse(setter(above).sent)
                self.assertEqual(self.transport.write.call_count, 2)

    def test_nmea_rate_commands(self) -> None:
        self.gpsdo.set_gpgga_rate(255)
        self.gpsdo.set_ggast_rate(0)
        self.gpsdo.set_gprmc_rate(10)
        self.gpsdo.set_xyzsp_rate(1)
        self.assertEqual(
            [c.args[0] for c in self.transport.write.call_args_list],
            ["GPS:GPGGA 255", "GPS:GGAST 0", "GPS:GPRMC 10", "GPS:XYZSP 1"],
        )
        self.assertFalse(self.gpsdo.set_gpgga_rate(256).sent)
        self.assertFalse(self.gpsdo.set_gprmc_rate(-1).sent)
        self.assertEqual(self.transport.write.call_count, 4)

    def test_coarse_dac_rejects_non_integer(self) -> None:
        self.assertFalse(self.gpsdo.set_coarse_dac(12.5).sent)
        self.assertTrue(self.gpsdo.set_coarse_dac(255).sent)
        self.transport.write.assert_called_once_with("SERV:COARSD 255")

    def test_sync_source(self) -> None:
        result = self.gpsdo.set_sync_source(SyncSource.AUTO)
        self.assertEqual(result.command, "SYNC:SOUR:MODE AUTO")
        self.transport.write.assert_called_once_with("SYNC:SOUR:MODE AUTO")
        self.assertFalse(self.gpsdo.set_sync_source("GPS").sent)

    def test_serial_baud_requires_gpsdo_rate(self) -> None:
        self.assertTrue(self.gpsdo.set_serial_baud(19200).sent)
        self.assertFalse(self.gpsdo.set_serial_baud(4800).sent)
        self.transport.write.assert_called_once_with("SYST:COMM:SER:BAUD 19200")

    def test_echo_and_prompt_switches(self) -> None:
        self.gpsdo.set_serial_echo(False)
        self.gpsdo.set_serial_prompt(True)
        self.assertEqual(
            [c.args[0] for c in self.transport.write.call_args_list],
            ["SYST:COMM:SER:ECHO OFF", "SYST:COMM:SER:PRO ON"],
        )

    def test_parameterless_commands(self) -> None:
        self.gpsdo.enter_holdover()
        self.gpsdo.recover_from_holdover()
        self.gpsdo.sync_immediately()
        self.assertEqual(
            [c.args[0] for c in self.transport.write.call_args_list],
            ["SYNC:HOLD:INIT", "SYNC:HOLD:REC:INIT", "SYNC:IMME"],
        )
        self.assertEqual(self.transport.eat.call_count, 3)

    def test_pps_offset_and_trace(self) -> None:
        self.gpsdo.set_pps_offset(-12)
        self.gpsdo.set_trace_rate(1)
        self.assertFalse(self.gpsdo.set_trace_rate(-1).sent)
        self.assertEqual(
            [c.args[0] for c in self.transport.write.call_args_list],
            ["SERV:1PPS -12", "SERV:TRAC 1"],
        )

    def test_queries_use_question_form(self) -> None:
        self.transport.query.return_value = "ON"
        self.assertEqual(self.gpsdo.lock_status(), "ON")
        self.gpsdo.serial_echo()
        self.gpsdo.pps_offset()
        self.assertEqual(
            [c.args[0] for c in self.transport.query.call_args_list],
            ["SYNC:LOCK?", "SYST:COMM:SER:ECHO?", "SERV:1PPS?"],
        )

    def test_query_absorbs_interleaved_sentences(self) -> None:
        self.transport.query.return_value = "$GPGGA,1*00"
        self.transport.read.side_effect = ["$GPRMC,2*00", "0x0"]
        self.assertEqual(self.gpsdo.health(), "0x0")
        self.assertEqual(self.gpsdo.sentences(), "$GPGGA,1*00$GPRMC,2*00")
        self.assertEqual(self.gpsdo.sentences(), "")


class GpsdoSimulatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.simulator = DeviceSimulator(device_type="GPSDO")
        self.transport = Transport(self.simulator)
        self.gpsdo = GpsdoProfile(self.transport)

    def test_identify_includes_echo_and_prompt(self) -> None:
        self.assertEqual(
            self.gpsdo.identify(),
            "*IDN?\nJackson Labs, FireFly-IA, 12345, 0.913\nscpi>",
        )
        self.assertEqual(self.transport.baud_rate, 115200)
        self.assertEqual(self.simulator.timeout, 0.1)

    def test_command_echo_is_eaten(self) -> None:
        self.gpsdo.sync_immediately()
        self.assertEqual(self.transport.read(), "")
        self.assertEqual(self.simulator.commands, ["SYNC:IMME"])

    def test_broadcast_sentences_are_buffered(self) -> None:
        self.simulator.broadcast("$GPGGA,120000.00,,,,,0,00,,,M,,M,,*66")
        reply = self.gpsdo.lock_status()
        self.assertEqual(reply, "SYNC:LOCK?\nON\nscpi>")
        self.assertEqual(self.gpsdo.sentences(), "$GPGGA,120000.00,,,,,0,00,,,M,,M,,*66")

    def test_without_echo_and_prompt_reply_is_bare(self) -> None:
        self.gpsdo.set_serial_echo(False)
        self.gpsdo.set_serial_prompt(False)
        self.assertEqual(self.gpsdo.satellites_tracked(), "9")
        self.assertEqual(self.gpsdo.serial_echo(), "OFF")

    def test_out_of_range_writes_nothing(self) -> None:
        self.gpsdo.set_efc_scale(-1.0)
        self.assertEqual(self.simulator.written, [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
