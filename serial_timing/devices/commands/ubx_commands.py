# serial_timing/devices/commands/ubx_commands.py
"""
Defines UBX message classes and (class, id) pairs used by GNSS receivers.
"""

CLASS_MON = 0x0A


class UBXMessage:
    """
    Holds (class, id) pairs for the UBX messages the GNSS profile polls.
    """
    MON_VER = (CLASS_MON, 0x04)   # Firmware/hardware version, extensions
    MON_HW = (CLASS_MON, 0x09)    # Hardware status
