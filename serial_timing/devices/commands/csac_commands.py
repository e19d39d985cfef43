# serial_timing/devices/commands/csac_commands.py
"""
Defines command definitions for the Microsemi/Symmetricom SA.45 chip scale
atomic clock.
"""
from serial_timing.param_types import CommandDefinition, ParamType

# Steering range in parts per 10^15
STEER_LIMIT = 20000000


class CSACCommand:
    """
    Holds command definitions for the SA.45 CSAC.
    """
    TELEMETRY_HEADER = CommandDefinition(
        mnemonic="!6",
        name="telemetry_header",
        description="Telemetry column headers",
        read=True
    )

    TELEMETRY_DATA = CommandDefinition(
        mnemonic="!^",
        name="telemetry_data",
        description="Telemetry data in CSV format",
        read=True
    )

    STEER_ABSOLUTE = CommandDefinition(
        mnemonic="!FD",
        name="steer_frequency_absolute",
        description="Adjust the absolute operating frequency",
        read=True,
        write=True,
        param_type=ParamType.INT32,
        min_value=-STEER_LIMIT,
        max_value=STEER_LIMIT,
        separator="",
        units="pp10^15"
    )

    STEER_RELATIVE = CommandDefinition(
        mnemonic="!FD",
        name="steer_frequency_relative",
        description="Adjust the relative operating frequency",
        read=True,
        write=True,
        param_type=ParamType.INT32,
        min_value=-STEER_LIMIT,
        max_value=STEER_LIMIT,
        separator="",
        units="pp10^15"
    )

    # The hardware supports a finite number of lock writes
    STEER_LOCK = CommandDefinition(
        mnemonic="!FL",
        name="lock_steering_value",
        description="Store the current steering value in non-volatile memory",
        write=True
    )
