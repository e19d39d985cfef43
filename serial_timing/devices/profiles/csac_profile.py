"""
csac_profile.py

Profile for the Microsemi/Symmetricom SA.45 chip scale atomic clock, driven by
short ``!``-prefixed ASCII commands.
"""

import logging
from typing import Optional

from serial_timing.communicator.transport import Transport
from serial_timing.devices.capabilities.scpi_capability import ScpiCapability
from serial_timing.devices.commands.csac_commands import CSACCommand
from serial_timing.devices.profiles.device_profile import DeviceProfile
from serial_timing.models import CommandResult


class CsacProfile(DeviceProfile):
    """
    Query-response profile for a CSAC.
    """

    DEVICE_TYPE = "CSAC"

    def __init__(self, transport: Transport, logger: Optional[logging.Logger] = None):
        super().__init__(transport, logger)
        self.scpi = ScpiCapability(transport, self.logger)

    def _query(self, command: str) -> str:
        return self.scpi.query(command)

    def _command(self, command: str, eat_lines: int) -> None:
        self.scpi.command(command, eat_lines)

    def telemetry_header(self) -> str:
        return self._query(CSACCommand.TELEMETRY_HEADER.mnemonic)

    def telemetry_data(self) -> str:
        """
        Returns one telemetry row in CSV format.
        """
        return self._query(CSACCommand.TELEMETRY_DATA.mnemonic)

    def steer_frequency_absolute(self, value: int) -> CommandResult:
        """
        Adjusts the absolute operating frequency.

        Args:
            value: Adjustment in parts per 10^15, [-20000000, 20000000].

        Returns:
            The unit's steer response in CommandResult.response.
        """
        return self._send_validated(CSACCommand.STEER_ABSOLUTE, value, query=True)

    def steer_frequency_relative(self, value: int) -> CommandResult:
        """
        Adjusts the operating frequency relative to the current steer.

        Args:
            value: Adjustment in parts per 10^15, [-20000000, 20000000].
        """
        return self._send_validated(CSACCommand.STEER_RELATIVE, value, query=True)

    def lock_steering_value(self, *, confirm: bool) -> CommandResult:
        """
        Irrevocably stores the current steering value.

        WARNING: the hardware supports a finite number of steering lock writes.
        Nothing is sent unless confirm=True is passed explicitly.
        """
        if confirm is not True:
            message = "Steering lock not confirmed; pass confirm=True to write it"
            self.logger.warning(message)
            return CommandResult(command=CSACCommand.STEER_LOCK.mnemonic, sent=False,
                                 error_message=message)
        self.logger.warning("Locking CSAC steering value")
        return self._send_validated(CSACCommand.STEER_LOCK)
