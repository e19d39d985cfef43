"""
fpga_profile.py

Profile for FPGA boards sharing the timing serial bus. The board speaks a
proprietary protocol with no command catalog here; the profile only applies the
board's line settings and exposes the raw transport paths.
"""

from serial_timing.devices.profiles.device_profile import DeviceProfile


class FpgaProfile(DeviceProfile):
    """
    Base-capability-only profile: 57600 baud, 100 ms timeout.
    """

    DEVICE_TYPE = "FPGA"

    def send(self, data) -> None:
        self.transport.write_raw(data)

    def receive(self) -> str:
        return self.transport.read_raw()
