"""
nmea_capability.py

Text-sentence capability. Instruments that broadcast NMEA sentences on the same
line as their command replies can push those sentences in front of the reply a
caller is waiting for. This capability sets them aside in a buffer so the
caller gets the real reply, and hands the buffered sentences out on request.
"""

from typing import List, Tuple

from serial_timing import framing
from serial_timing.devices.capabilities.base_capability import DeviceCapability


class NmeaCapability(DeviceCapability):
    """
    Buffers unsolicited ``$`` sentences and builds checksummed sentences.
    """

    def __init__(self, transport, logger=None):
        super().__init__(transport, logger)
        self._sentences: List[str] = []

    @property
    def pending(self) -> Tuple[str, ...]:
        """
        Sentences buffered so far, oldest first.
        """
        return tuple(self._sentences)

    def absorb(self, candidate: str) -> str:
        """
        Separates broadcast sentences from the expected reply.

        While the text starts with ``$`` it is buffered and the next reply is
        read from the transport. The first text that does not start with ``$``
        (an empty read included) is taken as the real reply.

        Args:
            candidate: Text just read from the transport.

        Returns:
            The real reply.
        """
        while candidate.startswith(framing.NMEA_START):
            self._sentences.append(candidate)
            self.logger.debug(f"Buffered sentence: {candidate!r}")
            candidate = self.transport.read()
        return candidate

    def drain_sentences(self) -> str:
        """
        Concatenates and clears the buffered sentences.

        Returns:
            The buffered sentences, or an empty string if none were buffered.
        """
        result = "".join(self._sentences)
        self._sentences.clear()
        return result

    @staticmethod
    def add_checksum(sentence: str) -> str:
        return framing.add_nmea_checksum(sentence)

    def send_sentence(self, sentence: str) -> str:
        """
        Checksums and transmits a sentence.

        Args:
            sentence: ``$<body>*`` or ``$<body>``.

        Returns:
            The sentence as written.
        """
        framed = self.add_checksum(sentence)
        self.transport.write(framed)
        return framed
