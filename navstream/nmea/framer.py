"""Streaming sentence framer.

A receiver delivers NMEA text in chunks that ignore sentence boundaries: a
read may end in the middle of a field, and one chunk may carry several
sentences. The framer accumulates chunks in a buffer and only hands a
sentence to the registry once the start marker ('$') of a *later* sentence
has arrived.

Framing strategy:
    1. Append the new chunk to the buffer.
    2. Locate the last '$' in the buffer.
    3. Everything before it is complete and becomes the decodable prefix;
       everything from it onwards stays buffered for the next cycle.
    4. The prefix is split on ',', '*' and line breaks into tokens, which the
       registry decodes positionally.

Example with two reads::

    feed("$GPRMC,123519,A,4807.0")       -> NO_DATA, buffer "$GPRMC,123519,A,4807.0"
    feed("38,N,...*6A\\r\\n$GPGGA,1235")  -> OK, RMC decoded, buffer "$GPGGA,1235"

Decoding always runs one sentence behind the newest bytes. In exchange a
truncated trailing sentence is never mistaken for a complete one, and no
byte is ever dropped or decoded twice.
"""

import re

from navstream.nmea.fields import SENTENCE_START
from navstream.nmea.registry import SentenceRegistry
from navstream.nmea.types import DecodeResult, DecodeStatus

__all__ = ["StreamFramer", "tokenize"]

# Field separator, checksum separator and line separator (CRLF or bare LF)
_SEPARATORS = re.compile(r"[,*]|\r?\n")

_ENCODING = "ascii"


def tokenize(text: str) -> list[str]:
    """Split decodable text into positional tokens.

    Consecutive separators yield empty tokens, which the field converters
    read as zero or space.

    Example:
        >>> tokenize("$GPVTG,054.7,T,,M*12\\r\\n")
        ['$GPVTG', '054.7', 'T', '', 'M', '12', '']
    """
    return _SEPARATORS.split(text)


class StreamFramer:
    """Frames a raw NMEA byte stream into sentences and decodes them.

    The framer owns the accumulation buffer and a ``SentenceRegistry``.
    Decoded records are read back through ``registry``:

        framer = StreamFramer()
        for chunk in chunks:
            result = framer.feed(chunk)
            if result.ok:
                print(framer.registry.rmc.latitude)

    Args:
        registry: Registry to dispatch tokens to; a GPS-talker registry is
            created when omitted.
    """

    def __init__(self, registry: SentenceRegistry | None = None) -> None:
        self._registry = registry if registry is not None else SentenceRegistry()
        self._buffer = ""

    @property
    def registry(self) -> SentenceRegistry:
        return self._registry

    @property
    def buffer(self) -> str:
        """Bytes received but not yet decoded."""
        return self._buffer

    def reset(self) -> None:
        """Drop buffered bytes, e.g. after the transport reconnects."""
        self._buffer = ""

    def feed(self, chunk: bytes | str) -> DecodeResult:
        """Append one chunk of the stream and decode every completed sentence.

        Args:
            chunk: Raw bytes from the transport, or already decoded text.
                Non-ASCII bytes are replaced rather than rejected.

        Returns:
            ``DecodeResult`` with status:
            - NO_DATA if no sentence is complete yet (the buffer holds no
              '$', or only the one that starts it)
            - OK if the completed sentences decoded cleanly
            - DECODE_ERROR if a sentence held a malformed number
        """
        if isinstance(chunk, bytes):
            chunk = chunk.decode(_ENCODING, errors="replace")
        self._buffer += chunk

        last_start = self._buffer.rfind(SENTENCE_START)
        if last_start <= 0:
            return DecodeResult(DecodeStatus.NO_DATA)

        decodable = self._buffer[:last_start]
        self._buffer = self._buffer[last_start:]

        return self._registry.decode_cycle(tokenize(decodable))
