"""
protocol_factory.py

Provides a factory function to wrap a transport in the appropriate device
profile for a given device type. This abstraction decouples device-specific
logic from the code that opens the ports.
"""

import logging
from typing import Optional

from serial_timing.communicator.transport import Transport
from serial_timing.devices import DEVICE_PROFILE_MAP


def get_profile(device_type: str, transport: Transport, logger: Optional[logging.Logger] = None):
    """
    Returns an instance of the appropriate profile class for the given device type.

    Args:
        device_type: A string naming the device family (e.g., "GPSDO").
        transport: The transport the profile talks through.
        logger: Optional logger passed to the profile.

    Returns:
        An instance of a subclass of DeviceProfile.

    Raises:
        ValueError: If the device type is unsupported.
    """
    profile_class = DEVICE_PROFILE_MAP.get(device_type.upper())
    if profile_class is None:
        raise ValueError(f"Unsupported device type: {device_type}")
    return profile_class(transport, logger=logger)
