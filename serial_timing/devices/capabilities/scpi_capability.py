"""
scpi_capability.py

Query-response capability for instruments driven by plain ASCII command lines
(SCPI and SCPI-like dialects). Replies are returned exactly as the transport
assembled them.
"""

from serial_timing.config import DEFAULT_EAT_LINES
from serial_timing.devices.capabilities.base_capability import DeviceCapability


class ScpiCapability(DeviceCapability):
    """
    Round-trips one command line to one textual reply.
    """

    def query(self, command: str) -> str:
        return self.transport.query(command)

    def command(self, command: str, eat_lines: int = DEFAULT_EAT_LINES) -> None:
        """
        Sends a command whose echo and prompt carry no useful reply.

        Args:
            command: The command line.
            eat_lines: Number of reads to discard after writing.
        """
        self.transport.write(command)
        if eat_lines:
            self.transport.eat(eat_lines)

    def identify(self) -> str:
        """
        Retrieves identifying information about the device.

        Format:
            <manufacturer>, <model>, <serial number>, <firmware>
        """
        return self.query("*IDN?")
