"""NMEAReader: serial-port client for NMEA 0183 receivers.

Opens the receiver's serial port with pyserial and pushes every chunk it
reads through a ``StreamFramer``. The framer and its registry do all of the
decoding; this module only owns the port, its timeouts and cancellation.

Reading strategy:
    Each ``read()`` takes whatever bytes are waiting on the port (at least
    one, at most ``_READ_SIZE``), blocking up to the port timeout. Chunks
    need not align with sentences; the framer carries partial sentences
    over to the next read. Iterating the reader yields a ``GNSSSnapshot``
    after every cycle that completed at least one sentence.
"""

import contextlib
import logging
from collections.abc import Iterable, Iterator
from types import TracebackType

import serial
from serial.tools import list_ports as serial_list_ports

from navstream.gnss.types import GNSSSnapshot
from navstream.nmea.fields import DEFAULT_TALKER_IDS
from navstream.nmea.framer import StreamFramer
from navstream.nmea.registry import SentenceRegistry
from navstream.nmea.types import DecodeResult, DecodeStatus

__all__ = ["STANDARD_BAUDRATES", "NMEAReader", "list_ports"]

logger = logging.getLogger(__name__)

# --- serial connection defaults -----------------------------------------------

_PORT = "/dev/ttyUSB0"
_BAUDRATE = 9600  # NMEA 0183 standard rate; many receivers also run at 4800
_TIMEOUT = 0.1  # read timeout; determines maximum cancel() latency
_READ_SIZE = 1000  # upper bound on bytes taken from the port per read

# Rates offered by common serial hardware, lowest first
STANDARD_BAUDRATES = (
    110, 300, 600, 1200, 2400, 4800, 9600,
    14400, 19200, 28800, 38400, 56000, 57600, 115200,
)


def list_ports() -> list[str]:
    """Return the device names of the serial ports present on this machine."""
    return sorted(port.device for port in serial_list_ports.comports())


class NMEAReader:
    """Context manager for decoding an NMEA stream from a serial port.

    The port is configured 8-N-1. Two consumption patterns are supported:

    Continuous iteration (recommended for server backends)::

        with NMEAReader("/dev/ttyUSB0", 9600) as gnss:
            for snapshot in gnss:
                process(snapshot)

    Single read (useful for polling from a timer)::

        with NMEAReader("/dev/ttyUSB0") as gnss:
            result = gnss.read()
            if result.ok:
                snapshot = gnss.snapshot()

    Args:
        port: Serial device (default: ``"/dev/ttyUSB0"``).
        baudrate: Line speed in baud (default: ``9600``).
        timeout: Read timeout in seconds (default: ``0.1``).
        talker_ids: Talker prefixes to decode (default: ``("GP",)``).
    """

    def __init__(
        self,
        port: str = _PORT,
        baudrate: int = _BAUDRATE,
        timeout: float = _TIMEOUT,
        talker_ids: Iterable[str] = DEFAULT_TALKER_IDS,
    ) -> None:
        """Store connection parameters; the port is opened in ``__enter__``."""
        self._port = port
        self._baudrate = baudrate
        self._timeout = timeout
        self._framer = StreamFramer(SentenceRegistry(talker_ids))
        self._serial: serial.Serial | None = None
        self._cancelled: bool = False

    @property
    def registry(self) -> SentenceRegistry:
        return self._framer.registry

    def __enter__(self) -> "NMEAReader":
        """Open the serial port and reset the framing buffer.

        Raises:
            EOFError: If the port cannot be opened.
        """
        try:
            self._serial = serial.Serial(
                port=self._port,
                baudrate=self._baudrate,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                timeout=self._timeout,
            )
        except serial.SerialException as e:
            logger.warning("Could not open %s at %d baud: %s", self._port, self._baudrate, e)
            raise EOFError(f"Could not open {self._port}.") from e
        self._framer.reset()
        self._cancelled = False
        logger.info("Opened %s at %d baud", self._port, self._baudrate)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the serial port."""
        if self._serial is not None:
            self._serial.close()
            self._serial = None
            logger.info("Closed %s", self._port)

    def cancel(self) -> None:
        """Cancel pending blocking reads gracefully.

        Sets the cancellation flag and interrupts any in-progress read so
        that ``read()`` raises ``EOFError`` without waiting for the next
        timeout, allowing background threads to exit.
        """
        self._cancelled = True
        if self._serial is not None:
            with contextlib.suppress(OSError):
                self._serial.cancel_read()

    def _recv_raw(self, port: serial.Serial) -> bytes:
        """Read the bytes waiting on the port; empty on timeout.

        Raises:
            EOFError: If the port failed or was closed.
        """
        try:
            size = min(max(port.in_waiting, 1), _READ_SIZE)
            return port.read(size)
        except (serial.SerialException, OSError) as e:
            raise EOFError(f"{self._port} connection closed.") from e

    def read(self) -> DecodeResult:
        """Read one chunk from the port and feed it to the framer.

        Returns:
            The framer's ``DecodeResult``; NO_DATA on a read timeout.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If cancelled, or the port failed or was closed.
        """
        if self._serial is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        if self._cancelled:
            raise EOFError("NMEA read cancelled.")
        raw = self._recv_raw(self._serial)
        if self._cancelled:
            raise EOFError("NMEA read cancelled.")
        if not raw:
            return DecodeResult(DecodeStatus.NO_DATA)
        return self._framer.feed(raw)

    def snapshot(self) -> GNSSSnapshot:
        """Return copies of every current record."""
        return GNSSSnapshot.from_registry(self._framer.registry)

    def __iter__(self) -> Iterator[GNSSSnapshot]:
        """Yield a snapshot after every cycle that completed a sentence.

        A cycle that only carried unsupported sentences (e.g. "$GPTXT") still
        yields, with an empty ``updated`` list, so that new headers reach the
        consumer. Cycles with malformed sentences are logged; the sentence
        types that did decode in such a cycle are still delivered. Iteration continues
        until the caller breaks the loop or an exception propagates out
        (e.g. ``EOFError`` on cancellation).

        Yields:
            ``GNSSSnapshot`` of the registry after the cycle.
        """
        while True:
            result = self.read()
            if result.status is DecodeStatus.DECODE_ERROR:
                logger.warning("Discarded malformed sentence: %s", result.reason)
            if result.status is not DecodeStatus.NO_DATA:
                yield self.snapshot()
