"""
gpsdo_profile.py

Profile for GPS disciplined oscillators modeled on the Jackson Labs FireFly IA
OCXO and GPSTCXO command sets.

GPSDO units broadcast NMEA sentences (GPGGA, GPRMC, ...) on the same serial line
they answer commands on, so every query reply passes through the text-sentence
capability: leading ``$`` sentences are buffered and the first other text is
returned as the reply. Buffered sentences are available from sentences().
"""

import logging
from typing import Optional

from serial_timing.communicator.transport import Transport
from serial_timing.devices.capabilities.nmea_capability import NmeaCapability
from serial_timing.devices.capabilities.scpi_capability import ScpiCapability
from serial_timing.devices.commands.gpsdo_commands import GPSDOCommand
from serial_timing.devices.profiles.device_profile import DeviceProfile
from serial_timing.models import CommandResult, SyncSource
from serial_timing.param_types import CommandDefinition


class GpsdoProfile(DeviceProfile):
    """
    Query-response + text-sentence profile for a GPSDO.
    """

    DEVICE_TYPE = "GPSDO"

    def __init__(self, transport: Transport, logger: Optional[logging.Logger] = None):
        super().__init__(transport, logger)
        self.scpi = ScpiCapability(transport, self.logger)
        self.nmea = NmeaCapability(transport, self.logger)

    def _query(self, command: str) -> str:
        return self.nmea.absorb(self.scpi.query(command))

    def _command(self, command: str, eat_lines: int) -> None:
        self.scpi.command(command, eat_lines)

    def _read(self, definition: CommandDefinition) -> str:
        command = definition.mnemonic
        if not command.endswith("?"):
            command += "?"
        return self._query(command)

    def identify(self) -> str:
        """
        Format:
            <manufacturer>, <model>, <serial number>, <firmware>
        """
        return self.nmea.absorb(self.scpi.identify())

    def sentences(self) -> str:
        """
        Returns and clears the NMEA sentences buffered while querying.
        """
        return self.nmea.drain_sentences()

    # GPS receiver

    def gps(self) -> str:
        return self._read(GPSDOCommand.GPS)

    def satellites_tracked(self) -> str:
        return self._read(GPSDOCommand.SAT_TRACKED)

    def satellites_visible(self) -> str:
        return self._read(GPSDOCommand.SAT_VISIBLE)

    def set_gpgga_rate(self, period: int) -> CommandResult:
        """
        Sets the GPGGA output period in seconds, [0, 255] (0: off).

        Disabled during the first 4 minutes of operation.
        """
        return self._send_validated(GPSDOCommand.GPGGA, period)

    def set_ggast_rate(self, period: int) -> CommandResult:
        """
        Sets the modified GPGGA output period in seconds, [0, 255] (0: off).

        The sentence adds the lock state and health of the oscillator.
        Disabled during the first 7 minutes of operation.
        """
        return self._send_validated(GPSDOCommand.GGAST, period)

    def set_gprmc_rate(self, period: int) -> CommandResult:
        return self._send_validated(GPSDOCommand.GPRMC, period)

    def set_xyzsp_rate(self, period: int) -> CommandResult:
        return self._send_validated(GPSDOCommand.XYZSP, period)

    # Time

    def ptime(self) -> str:
        return self._read(GPSDOCommand.PTIME)

    def date(self) -> str:
        return self._read(GPSDOCommand.PTIME_DATE)

    def time(self) -> str:
        return self._read(GPSDOCommand.PTIME_TIME)

    def time_string(self) -> str:
        return self._read(GPSDOCommand.PTIME_TIME_STR)

    def time_interval(self) -> str:
        """
        Shift of GPSDO time from GPS time, 1E-10 s precision.

        Equivalent to sync_time_interval().
        """
        return self._read(GPSDOCommand.PTIME_TINT)

    # Synchronization

    def sync_status(self) -> str:
        return self._read(GPSDOCommand.SYNC)

    def set_sync_source(self, source: SyncSource) -> CommandResult:
        """
        Sets the 1 PPS source used for synchronization.

            GPS  : internal GPS receiver
            EXT  : external 1 PPS source
            AUTO : internal receiver when available, fall back to EXT
        """
        return self._send_validated(GPSDOCommand.SYNC_SOURCE_MODE, source)

    def sync_source_state(self) -> str:
        return self._read(GPSDOCommand.SYNC_SOURCE_STATE)

    def holdover_duration(self) -> str:
        return self._read(GPSDOCommand.HOLDOVER_DURATION)

    def enter_holdover(self) -> CommandResult:
        return self._send_validated(GPSDOCommand.HOLDOVER_INIT)

    def recover_from_holdover(self) -> CommandResult:
        """
        Terminates a holdover started with enter_holdover().
        """
        return self._send_validated(GPSDOCommand.HOLDOVER_RECOVER)

    def sync_time_interval(self) -> str:
        return self._read(GPSDOCommand.SYNC_TINT)

    def sync_immediately(self) -> CommandResult:
        """
        Synchronizes to the reference 1 PPS. Ignored while in holdover.
        """
        return self._send_validated(GPSDOCommand.SYNC_IMMEDIATE)

    def frequency_error_estimate(self) -> str:
        return self._read(GPSDOCommand.SYNC_FEE)

    def lock_status(self) -> str:
        return self._read(GPSDOCommand.SYNC_LOCK)

    def health(self) -> str:
        """
        Health status bit field.

            0x000 : healthy and locked
            0x001 : OCXO coarse DAC maxed out at 255
            0x002 : OCXO coarse DAC min-ed out at 0
            0x004 : phase offset to UTC > 250ns
            0x008 : runtime < 300s
            0x010 : holdover > 60s
            0x020 : frequency error estimate out of bounds
            0x040 : OCXO voltage too high
            0x080 : OCXO voltage too low
            0x100 : short term (100s) drift > 100ns
            0x200 : runtime < 7min after phase-reset
        """
        return self._read(GPSDOCommand.SYNC_HEALTH)

    # Diagnostics

    def efc_relative(self) -> str:
        return self._read(GPSDOCommand.EFC_RELATIVE)

    def efc_absolute(self) -> str:
        return self._read(GPSDOCommand.EFC_ABSOLUTE)

    # System

    def system_status(self) -> str:
        return self._read(GPSDOCommand.SYSTEM_STATUS)

    def serial_echo(self) -> str:
        return self._read(GPSDOCommand.SERIAL_ECHO)

    def set_serial_echo(self, enabled: bool) -> CommandResult:
        """
        Enables or disables command echo on RS-232.

        eat() assumes the echo is on; turning it off leaves replies unconsumed.
        """
        return self._send_validated(GPSDOCommand.SERIAL_ECHO, enabled)

    def serial_prompt(self) -> str:
        return self._read(GPSDOCommand.SERIAL_PROMPT)

    def set_serial_prompt(self, enabled: bool) -> CommandResult:
        return self._send_validated(GPSDOCommand.SERIAL_PROMPT, enabled)

    def serial_baud(self) -> str:
        return self._read(GPSDOCommand.SERIAL_BAUD)

    def set_serial_baud(self, baud_rate: int) -> CommandResult:
        """
        Changes the device's own baud rate.

        The rate must be one of GPSDO_BAUD_RATES. The transport is left
        untouched; call transport.configure_baud() afterwards or communication
        will be lost.
        """
        return self._send_validated(GPSDOCommand.SERIAL_BAUD, baud_rate)

    # Servo loop

    def servo(self) -> str:
        return self._read(GPSDOCommand.SERVO)

    def set_coarse_dac(self, value: int) -> CommandResult:
        """
        Sets the coarse DAC which controls the EFC, [0, 255].

        You should not need to use this.
        """
        return self._send_validated(GPSDOCommand.COARSE_DAC, value)

    def set_efc_scale(self, value: float) -> CommandResult:
        """
        Sets the proportional coefficient of the PID loop, [0.0, 500.0].

        Larger values tighten loop control at the expense of noise while
        locked; too high causes instability. Typical values are 0.7 for a
        double oven OCXO and 6.0 for a single oven OCXO.
        """
        return self._send_validated(GPSDOCommand.EFC_SCALE, value)

    def set_efc_damping(self, value: float) -> CommandResult:
        return self._send_validated(GPSDOCommand.EFC_DAMPING, value)

    def set_temperature_compensation(self, value: float) -> CommandResult:
        return self._send_validated(GPSDOCommand.TEMPERATURE_COMPENSATION, value)

    def set_aging_compensation(self, value: float) -> CommandResult:
        return self._send_validated(GPSDOCommand.AGING_COMPENSATION, value)

    def set_phase_compensation(self, value: float) -> CommandResult:
        """
        Sets the integral component of the PID loop, [-100.0, 100.0].

        Typical values are within [10.0, 30.0].
        """
        return self._send_validated(GPSDOCommand.PHASE_COMPENSATION, value)

    def pps_offset(self) -> str:
        return self._read(GPSDOCommand.PPS_OFFSET)

    def set_pps_offset(self, offset: int) -> CommandResult:
        """
        Sets the offset to UTC in 16.7 ns increments.
        """
        return self._send_validated(GPSDOCommand.PPS_OFFSET, offset)

    def set_trace_rate(self, period: int) -> CommandResult:
        """
        Sets the debug trace period in seconds.

        Trace format:
            <date> <1PPS count> <fine DAC> <UTC offset (ns)> <freq error estimate>
            <visible SVs> <tracked SVs> <lock state> <health status>
        """
        return self._send_validated(GPSDOCommand.TRACE, period)
