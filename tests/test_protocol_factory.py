import unittest
from unittest import mock

from serial_timing import get_profile
from serial_timing.devices import DEVICE_PROFILE_MAP, get_profile_class
from serial_timing.devices.profiles import CsacProfile, FpgaProfile, GnssProfile, GpsdoProfile


class ProtocolFactoryTests(unittest.TestCase):
    def test_every_device_type_maps_to_its_profile(self) -> None:
        expected = {
            "GPSDO": GpsdoProfile,
            "CSAC": CsacProfile,
            "GNSS": GnssProfile,
            "FPGA": FpgaProfile,
        }
        for device_type, profile_class in expected.items():
            with self.subTest(device_type=device_type):
                profile = get_profile(device_type, mock.Mock())
                self.assertIsInstance(profile, profile_class)

    def test_device_type_is_case_insensitive(self) -> None:
        self.assertIsInstance(get_profile("gpsdo", mock.Mock()), GpsdoProfile)

    def test_profiles_share_the_given_transport(self) -> None:
        transport = mock.Mock()
        profile = get_profile("GNSS", transport)
        self.assertIs(profile.transport, transport)
        self.assertIs(profile.nmea.transport, transport)
        self.assertIs(profile.ubx.transport, transport)

    def test_unsupported_device_type(self) -> None:
        with self.assertRaises(ValueError):
            get_profile("PPG", mock.Mock())

    def test_get_profile_class(self) -> None:
        self.assertIs(get_profile_class("CSAC"), CsacProfile)
        self.assertEqual(set(DEVICE_PROFILE_MAP), {"GPSDO", "CSAC", "GNSS", "FPGA"})
        with self.assertRaises(ValueError):
            get_profile_class("UNKNOWN")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
