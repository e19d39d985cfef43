"""
Command catalogs for every supported device, importable from one place.
"""
from serial_timing.devices.commands.csac_commands import CSACCommand
from serial_timing.devices.commands.gpsdo_commands import GPSDOCommand
from serial_timing.devices.commands.ubx_commands import UBXMessage

__all__ = [
    'CSACCommand',
    'GPSDOCommand',
    'UBXMessage'
]
