"""
device_profile.py

This module defines the base class for device profiles. A profile bundles the
capabilities one instrument speaks around a single shared Transport and layers
the instrument's named operations on top.

Validated-parameter commands go through _send_validated(): the parameter is
checked against its CommandDefinition, and a value outside the accepted range
is dropped without transmission. The drop is logged and reported in the
returned CommandResult; nothing is raised.
"""

import logging
from typing import Any, ClassVar, Optional

from serial_timing.communicator.transport import Transport
from serial_timing.config import DEVICE_PARAMETERS
from serial_timing.models import CommandResult
from serial_timing.param_types import CommandDefinition


class DeviceProfile:
    """
    Base class for instrument profiles.

    Subclasses set DEVICE_TYPE to pick their defaults in DEVICE_PARAMETERS and
    create their capability objects in __init__.
    """

    DEVICE_TYPE: ClassVar[str] = ""

    def __init__(self, transport: Transport, logger: Optional[logging.Logger] = None):
        """
        Initializes the profile and applies its default baud rate and timeout.

        Args:
            transport: The transport to talk through. The profile never closes it.
            logger: Optional logger instance.
        """
        self.transport = transport
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self.params = DEVICE_PARAMETERS.get(self.DEVICE_TYPE, {})
        if "timeout_ms" in self.params:
            self.transport.configure_timeout(self.params["timeout_ms"])
        if "baudrate" in self.params:
            self.transport.configure_baud(self.params["baudrate"])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.transport!r})"

    def _send_validated(self, definition: CommandDefinition, value: Any = None,
                        query: bool = False) -> CommandResult:
        """
        Range-checks a parameter, then writes the command.

        Args:
            definition: The command definition carrying the accepted range.
            value: The parameter, None for parameterless commands.
            query: True to read the reply, False to discard the echo.

        Returns:
            A CommandResult; sent is False when the value was rejected.
        """
        if definition.param_type is not None and not definition.accepts(value):
            message = (f"{definition.name}: {value!r} outside accepted values "
                       f"{definition.describe_range()}; command not sent")
            self.logger.warning(message)
            return CommandResult(
                command=f"{definition.mnemonic}{definition.separator}{value}",
                sent=False,
                error_message=message
            )

        command = definition.render(value)
        if query:
            return CommandResult(command=command, sent=True, response=self._query(command))

        self._command(command, definition.eat_lines)
        return CommandResult(command=command, sent=True)

    def _query(self, command: str) -> str:
        return self.transport.query(command)

    def _command(self, command: str, eat_lines: int) -> None:
        self.transport.write(command)
        if eat_lines:
            self.transport.eat(eat_lines)
