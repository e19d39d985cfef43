# serial_timing/devices/commands/gpsdo_commands.py
"""
Defines command definitions for Jackson Labs style GPS disciplined oscillators
(FireFly IA OCXO, GPSTCXO).
"""
from serial_timing.config import GPSDO_BAUD_RATES
from serial_timing.models import SyncSource
from serial_timing.param_types import CommandDefinition, ParamType


class GPSDOCommand:
    """
    Holds command definitions for GPSDO units.
    """
    # GPS receiver
    GPS = CommandDefinition(
        mnemonic="GPS?",
        name="gps",
        description="Configuration, position, speed, height of the GPS receiver",
        read=True
    )

    SAT_TRACKED = CommandDefinition(
        mnemonic="GPS:SAT:TRA:COUN?",
        name="satellites_tracked",
        description="Number of tracked satellites",
        read=True
    )

    SAT_VISIBLE = CommandDefinition(
        mnemonic="GPS:SAT:VIS:COUN?",
        name="satellites_visible",
        description="Number of SVs visible per the almanac",
        read=True
    )

    # Disabled during the first 4 minutes of operation
    GPGGA = CommandDefinition(
        mnemonic="GPS:GPGGA",
        name="gpgga_rate",
        description="GPGGA sentence output period (0: off)",
        write=True,
        param_type=ParamType.UINT8,
        min_value=0,
        max_value=255,
        units="s"
    )

    # Disabled during the first 7 minutes of operation
    GGAST = CommandDefinition(
        mnemonic="GPS:GGAST",
        name="ggast_rate",
        description="Modified GPGGA (lock state and health) output period (0: off)",
        write=True,
        param_type=ParamType.UINT8,
        min_value=0,
        max_value=255,
        units="s"
    )

    GPRMC = CommandDefinition(
        mnemonic="GPS:GPRMC",
        name="gprmc_rate",
        description="GPRMC sentence output period (0: off)",
        write=True,
        param_type=ParamType.UINT8,
        min_value=0,
        max_value=255,
        units="s"
    )

    # Firmware 0.909+
    XYZSP = CommandDefinition(
        mnemonic="GPS:XYZSP",
        name="xyzsp_rate",
        description="X, Y, Z speed with accuracy estimate output period (0: off)",
        write=True,
        param_type=ParamType.UINT8,
        min_value=0,
        max_value=255,
        units="s"
    )

    # Time
    PTIME = CommandDefinition(
        mnemonic="PTIME?",
        name="ptime",
        description="Date, UTC time, timezone and GPSDO/GPS time shift",
        read=True
    )

    PTIME_DATE = CommandDefinition(
        mnemonic="PTIM:DATE?",
        name="date",
        description="Calendar date (UTC)",
        read=True
    )

    PTIME_TIME = CommandDefinition(
        mnemonic="PTIM:TIME?",
        name="time",
        description="Current UTC time",
        read=True
    )

    PTIME_TIME_STR = CommandDefinition(
        mnemonic="PTIM:TIME:STR?",
        name="time_string",
        description="Current UTC time with colon delimiters",
        read=True
    )

    PTIME_TINT = CommandDefinition(
        mnemonic="PTIM:TINT?",
        name="time_interval",
        description="GPSDO time shift from GPS time (1E-10 s)",
        read=True
    )

    # Synchronization
    SYNC = CommandDefinition(
        mnemonic="SYNC?",
        name="sync_status",
        description="Synchronization source, state, lock, health, holdover, FEE, TINT",
        read=True
    )

    SYNC_SOURCE_MODE = CommandDefinition(
        mnemonic="SYNC:SOUR:MODE",
        name="sync_source",
        description="1 PPS source used for synchronization",
        write=True,
        param_type=ParamType.CHOICE,
        choices=tuple(SyncSource)
    )

    SYNC_SOURCE_STATE = CommandDefinition(
        mnemonic="SYNC:SOUR:STATE?",
        name="sync_source_state",
        description="Synchronization source in use",
        read=True
    )

    HOLDOVER_DURATION = CommandDefinition(
        mnemonic="SYNC:HOLD:DUR?",
        name="holdover_duration",
        description="Length of the most recent holdover",
        read=True
    )

    HOLDOVER_INIT = CommandDefinition(
        mnemonic="SYNC:HOLD:INIT",
        name="enter_holdover",
        description="Enter holdover immediately",
        write=True
    )

    HOLDOVER_RECOVER = CommandDefinition(
        mnemonic="SYNC:HOLD:REC:INIT",
        name="recover_from_holdover",
        description="Terminate a manual holdover",
        write=True
    )

    SYNC_TINT = CommandDefinition(
        mnemonic="SYNC:TINT?",
        name="sync_time_interval",
        description="GPSDO time shift from GPS time (1E-10 s)",
        read=True
    )

    # Ignored while in holdover
    SYNC_IMMEDIATE = CommandDefinition(
        mnemonic="SYNC:IMME",
        name="sync_immediately",
        description="Synchronize to the reference 1 PPS now",
        write=True
    )

    SYNC_FEE = CommandDefinition(
        mnemonic="SYNC:FEE?",
        name="frequency_error_estimate",
        description="Frequency error estimate over 1000 s",
        read=True
    )

    SYNC_LOCK = CommandDefinition(
        mnemonic="SYNC:LOCK?",
        name="lock_status",
        description="PLL lock status (0: OFF)",
        read=True
    )

    SYNC_HEALTH = CommandDefinition(
        mnemonic="SYNC:HEALTH?",
        name="health",
        description="Health status bit field (0x000: healthy and locked)",
        read=True
    )

    # Diagnostics
    EFC_RELATIVE = CommandDefinition(
        mnemonic="DIAG:ROSC:EFC:REL?",
        name="efc_relative",
        description="Electronic frequency control value",
        read=True,
        units="%"
    )

    EFC_ABSOLUTE = CommandDefinition(
        mnemonic="DIAG:ROSC:EFC:ABS?",
        name="efc_absolute",
        description="Electronic frequency control voltage (0 < v < 5)",
        read=True,
        units="V"
    )

    # System
    SYSTEM_STATUS = CommandDefinition(
        mnemonic="SYST:STAT?",
        name="system_status",
        description="Formatted system status",
        read=True
    )

    SERIAL_ECHO = CommandDefinition(
        mnemonic="SYST:COMM:SER:ECHO",
        name="serial_echo",
        description="Command echo on RS-232",
        read=True,
        write=True,
        param_type=ParamType.BOOL
    )

    SERIAL_PROMPT = CommandDefinition(
        mnemonic="SYST:COMM:SER:PRO",
        name="serial_prompt",
        description="Command prompt ('scpi>') on RS-232",
        read=True,
        write=True,
        param_type=ParamType.BOOL
    )

    SERIAL_BAUD = CommandDefinition(
        mnemonic="SYST:COMM:SER:BAUD",
        name="serial_baud",
        description="RS-232 baud rate of the device (default 115200)",
        read=True,
        write=True,
        param_type=ParamType.CHOICE,
        choices=GPSDO_BAUD_RATES
    )

    # Servo loop
    SERVO = CommandDefinition(
        mnemonic="SERV?",
        name="servo",
        description="Current servo loop parameters",
        read=True
    )

    COARSE_DAC = CommandDefinition(
        mnemonic="SERV:COARSD",
        name="coarse_dac",
        description="Coarse DAC controlling the EFC",
        write=True,
        param_type=ParamType.UINT8,
        min_value=0,
        max_value=255
    )

    # Typical: 0.7 double oven OCXO, 6.0 single oven OCXO
    EFC_SCALE = CommandDefinition(
        mnemonic="SERV:EFCS",
        name="efc_scale",
        description="Proportional coefficient of the PID loop",
        write=True,
        param_type=ParamType.FLOAT,
        min_value=0.0,
        max_value=500.0
    )

    # Typically within [2.0, 50.0]
    EFC_DAMPING = CommandDefinition(
        mnemonic="SERV:EFCD",
        name="efc_damping",
        description="Low pass filter effectiveness of the DAC",
        write=True,
        param_type=ParamType.FLOAT,
        min_value=0.0,
        max_value=4000.0
    )

    TEMPERATURE_COMPENSATION = CommandDefinition(
        mnemonic="SERV:TEMPCO",
        name="temperature_compensation",
        description="Temperature compensation coefficient",
        write=True,
        param_type=ParamType.FLOAT,
        min_value=-4000.0,
        max_value=4000.0
    )

    AGING_COMPENSATION = CommandDefinition(
        mnemonic="SERV:AGING",
        name="aging_compensation",
        description="OCXO aging coefficient",
        write=True,
        param_type=ParamType.FLOAT,
        min_value=-10.0,
        max_value=10.0
    )

    # Typically within [10.0, 30.0]
    PHASE_COMPENSATION = CommandDefinition(
        mnemonic="SERV:PHASECO",
        name="phase_compensation",
        description="Integral component of the PID loop",
        write=True,
        param_type=ParamType.FLOAT,
        min_value=-100.0,
        max_value=100.0
    )

    PPS_OFFSET = CommandDefinition(
        mnemonic="SERV:1PPS",
        name="pps_offset",
        description="Offset to UTC in 16.7 ns increments",
        read=True,
        write=True,
        param_type=ParamType.INT32,
        min_value=-2**31,
        max_value=2**31 - 1,
        units="ns"
    )

    # Firmware 0.913+
    TRACE = CommandDefinition(
        mnemonic="SERV:TRAC",
        name="trace_rate",
        description="Debug trace output period (0: off)",
        write=True,
        param_type=ParamType.UINT,
        min_value=0,
        units="s"
    )
