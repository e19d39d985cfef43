import unittest

from serial_timing.devices.commands.gpsdo_commands import GPSDOCommand
from serial_timing.models import SyncSource
from serial_timing.param_types import CommandDefinition, ParamType


class CommandDefinitionTests(unittest.TestCase):
    def test_bounds_are_inclusive(self) -> None:
        definition = GPSDOCommand.EFC_SCALE
        self.assertTrue(definition.accepts(0.0))
        self.assertTrue(definition.accepts(500))
        self.assertFalse(definition.accepts(-0.001))
        self.assertFalse(definition.accepts(500.001))

    def test_non_finite_floats_are_rejected(self) -> None:
        for value in (float("nan"), float("inf"), float("-inf")):
            with self.subTest(value=value):
                self.assertFalse(GPSDOCommand.EFC_SCALE.accepts(value))
                self.assertFalse(GPSDOCommand.TEMPERATURE_COMPENSATION.accepts(value))

    def test_int32_bounds(self) -> None:
        definition = GPSDOCommand.PPS_OFFSET
        self.assertTrue(definition.accepts(-2**31))
        self.assertTrue(definition.accepts(2**31 - 1))
        self.assertFalse(definition.accepts(2**31))
        self.assertFalse(definition.accepts(-2**31 - 1))

    def test_integer_types_reject_floats_and_bools(self) -> None:
        definition = GPSDOCommand.GPGGA
        self.assertTrue(definition.accepts(0))
        self.assertFalse(definition.accepts(1.0))
        self.assertFalse(definition.accepts(True))
        self.assertFalse(definition.accepts("5"))

    def test_unbounded_side(self) -> None:
        definition = GPSDOCommand.TRACE
        self.assertTrue(definition.accepts(10 ** 6))
        self.assertFalse(definition.accepts(-1))
        self.assertEqual(definition.describe_range(), "[0, inf]")

    def test_choices(self) -> None:
        definition = GPSDOCommand.SYNC_SOURCE_MODE
        self.assertTrue(definition.accepts(SyncSource.EXT))
        self.assertFalse(definition.accepts("EXT"))
        self.assertEqual(definition.render(SyncSource.EXT), "SYNC:SOUR:MODE EXT")

    def test_bool(self) -> None:
        definition = GPSDOCommand.SERIAL_ECHO
        self.assertTrue(definition.accepts(False))
        self.assertFalse(definition.accepts(0))
        self.assertEqual(definition.render(True), "SYST:COMM:SER:ECHO ON")

    def test_parameterless_accepts_only_none(self) -> None:
        definition = GPSDOCommand.SYNC_IMMEDIATE
        self.assertTrue(definition.accepts(None))
        self.assertFalse(definition.accepts(1))
        self.assertEqual(definition.render(), "SYNC:IMME")

    def test_float_rendering(self) -> None:
        self.assertEqual(GPSDOCommand.EFC_SCALE.render(6), "SERV:EFCS 6.0")
        self.assertEqual(GPSDOCommand.AGING_COMPENSATION.render(-0.25), "SERV:AGING -0.25")

    def test_separator(self) -> None:
        definition = CommandDefinition(
            mnemonic="!FD", name="steer", description="", write=True,
            param_type=ParamType.INT32, separator="")
        self.assertEqual(definition.render(-5), "!FD-5")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
