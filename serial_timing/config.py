"""
config.py

Holds serial defaults, the accepted baud-rate table, and per-device parameters
for the timing instruments supported by the package. Also provides the logging
setup used by host programs.
"""

import logging
from typing import Dict, Any

import serial

# Every rate the transport accepts, ascending. 0 means unset/custom.
BAUD_RATES = (
    50, 75, 110, 134, 150, 200, 300, 600, 1200, 1800, 2400, 4800, 9600,
    19200, 38400, 57600, 115200, 230400, 460800, 500000, 576000, 921600,
    1000000, 1152000, 1500000, 2000000, 2500000, 3000000, 3500000, 4000000,
    0
)

# Rates a GPSDO accepts for its own RS-232 port.
GPSDO_BAUD_RATES = (9600, 19200, 38400, 57600, 115200)

# Timeout applied to every new transport, in milliseconds.
DEFAULT_TIMEOUT_MS = 200

# Appended to every line-oriented write.
LINE_TERMINATOR = "\r\n"

# Number of lines discarded after a command whose echo carries no reply.
DEFAULT_EAT_LINES = 2

# Settings used when the session opens a port.
DEFAULT_SERIAL_SETTINGS: Dict[str, Any] = {
    'baudrate': 9600,
    'bytesize': serial.EIGHTBITS,
    'parity': serial.PARITY_NONE,
    'stopbits': serial.STOPBITS_ONE,
    'timeout': DEFAULT_TIMEOUT_MS / 1000.0,
    'write_timeout': 1.0
}

# Defaults each device profile applies to its transport.
DEVICE_PARAMETERS = {
    "GPSDO": {
        "baudrate": 115200,
        "timeout_ms": 100,
        "protocol": "scpi",
        "desc": "GPS disciplined oscillator (Jackson Labs FireFly IA / GPSTCXO)"
    },
    "CSAC": {
        "baudrate": 57600,
        "timeout_ms": 100,
        "protocol": "csac",
        "desc": "Chip scale atomic clock (Microsemi SA.45)"
    },
    "GNSS": {
        "baudrate": 9600,
        "timeout_ms": 100,
        "protocol": "ubx",
        "desc": "GNSS receiver (u-blox, NMEA + UBX)"
    },
    "FPGA": {
        "baudrate": 57600,
        "timeout_ms": 100,
        "protocol": "raw",
        "desc": "FPGA board on the timing serial bus"
    }
}


def setup_logging(name: str, level: int = logging.DEBUG) -> logging.Logger:
    """
    Configures logging for a host program.

    The returned logger is meant to be handed to SerialSession and get_profile
    through their logger argument, so every layer below them logs through it.

    Usage Example:
        logger = setup_logging("timing_lab", logging.INFO)
        with SerialSession(["/dev/ttyUSB0"], logger=logger) as session:
            gpsdo = get_profile("GPSDO", session.transport(0), logger=logger)

    Args:
        name: Logger name.
        level: Level applied to the logger and its console handler.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)

    # Removes old handlers if any
    if logger.hasHandlers():
        logger.handlers.clear()
    logger.addHandler(console_handler)

    return logger
