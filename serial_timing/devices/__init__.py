"""
__init__.py

Initializes the devices package by importing all device profiles and creating a
mapping from device types to their profile classes.
"""

from serial_timing.devices.profiles.csac_profile import CsacProfile
from serial_timing.devices.profiles.fpga_profile import FpgaProfile
from serial_timing.devices.profiles.gnss_profile import GnssProfile
from serial_timing.devices.profiles.gpsdo_profile import GpsdoProfile

__all__ = [
    'CsacProfile',
    'FpgaProfile',
    'GnssProfile',
    'GpsdoProfile'
]

DEVICE_PROFILE_MAP = {
    'CSAC': CsacProfile,
    'FPGA': FpgaProfile,
    'GNSS': GnssProfile,
    'GPSDO': GpsdoProfile,
}


def get_profile_class(device_type: str):
    """
    Retrieves the profile class for a specific device type.

    Args:
        device_type: The type of device (e.g., "GPSDO").

    Returns:
        The corresponding profile class.

    Raises:
        ValueError: If the device type is unknown.
    """
    if device_type not in DEVICE_PROFILE_MAP:
        raise ValueError(f"Unknown device type: {device_type}")
    return DEVICE_PROFILE_MAP[device_type]
