"""
Message-dialect capabilities that device profiles compose.
"""
from serial_timing.devices.capabilities.base_capability import DeviceCapability
from serial_timing.devices.capabilities.nmea_capability import NmeaCapability
from serial_timing.devices.capabilities.scpi_capability import ScpiCapability
from serial_timing.devices.capabilities.ubx_capability import UbxCapability

__all__ = [
    'DeviceCapability',
    'NmeaCapability',
    'ScpiCapability',
    'UbxCapability'
]
