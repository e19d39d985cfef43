"""
Device profiles, one per supported instrument family.
"""
from serial_timing.devices.profiles.csac_profile import CsacProfile
from serial_timing.devices.profiles.device_profile import DeviceProfile
from serial_timing.devices.profiles.fpga_profile import FpgaProfile
from serial_timing.devices.profiles.gnss_profile import GnssProfile
from serial_timing.devices.profiles.gpsdo_profile import GpsdoProfile

__all__ = [
    'CsacProfile',
    'DeviceProfile',
    'FpgaProfile',
    'GnssProfile',
    'GpsdoProfile'
]
