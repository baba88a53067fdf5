"""GSV sentence decoder.

GSV (GNSS Satellites in View) lists every satellite the receiver can see,
with elevation, azimuth and signal strength. A sentence holds at most four
satellites, so receivers split the list over a group of sentences that share
the same "total messages" and "satellites in view" counts.

GSV Sentence Format:
    $GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00*74
           | | |  |            |            |            |
           | | |  +------------+------------+------------+-- 4 x (PRN, elevation, azimuth, SNR)
           | | +-- Satellites in view (whole group)
           | +-- Message number (1-based)
           +-- Total messages in the group

The last message of a group may carry fewer than four satellites, so the
checksum token follows the last satellite block actually present.

Reassembly:
    Satellite ``slot`` (0-3) of message ``n`` is stored at index
    ``(n - 1) * 4 + slot`` of ``GSVData.satellites``. The list is grown to
    ``n * 4`` entries when needed and never shrinks, so messages may arrive
    in separate decode cycles and still build one ordered list.

    A sentence whose counters are out of range (more than 9 messages, a
    message number outside 1..total, more than 99 satellites) is line noise
    and is skipped, so the list never grows past 36 entries.
"""

from navstream.nmea.fields import to_int
from navstream.nmea.types import (
    SATELLITES_PER_GSV_MESSAGE,
    GSVData,
    SatelliteInView,
)

# Total messages, message number and satellites in view
_HEADER_FIELD_COUNT = 3

_FIRST_BLOCK_OFFSET = 4
_BLOCK_SIZE = 4

# Both counters are single- and two-digit fields in NMEA 0183
_MAX_TOTAL_MESSAGES = 9
_MAX_SATELLITES_IN_VIEW = 99


def _grow_satellites(record: GSVData, size: int) -> None:
    """Extend the satellite list with empty entries up to ``size``."""
    missing = size - len(record.satellites)
    if missing > 0:
        record.satellites.extend(SatelliteInView() for _ in range(missing))


def _decode_satellite(tokens: list[str], start: int) -> SatelliteInView:
    return SatelliteInView(
        prn=to_int(tokens[start]),
        elevation=to_int(tokens[start + 1]),
        azimuth=to_int(tokens[start + 2]),
        snr=to_int(tokens[start + 3]),
    )


def _decode_satellites(
    tokens: list[str], index: int, record: GSVData, message_number: int
) -> int:
    """Write the satellite blocks of one message; return how many were written.

    Writing stops once the running index reaches the declared number of
    satellites in view, or when the token sequence ends mid-block.
    """
    _grow_satellites(record, message_number * SATELLITES_PER_GSV_MESSAGE)

    position = (message_number - 1) * SATELLITES_PER_GSV_MESSAGE
    written = 0
    for slot in range(SATELLITES_PER_GSV_MESSAGE):
        if position >= record.satellites_in_view:
            break
        start = index + _FIRST_BLOCK_OFFSET + slot * _BLOCK_SIZE
        if start + _BLOCK_SIZE > len(tokens):
            break
        record.satellites[position] = _decode_satellite(tokens, start)
        position += 1
        written += 1
    return written


def _is_valid_group_header(
    total_messages: int, message_number: int, satellites_in_view: int
) -> bool:
    """Reject counters no receiver sends, e.g. a message number of 1000000."""
    return (
        1 <= total_messages <= _MAX_TOTAL_MESSAGES
        and 1 <= message_number <= total_messages
        and 0 <= satellites_in_view <= _MAX_SATELLITES_IN_VIEW
    )


def _decode_occurrence(tokens: list[str], index: int, record: GSVData) -> bool:
    total_messages = to_int(tokens[index + 1])
    message_number = to_int(tokens[index + 2])
    satellites_in_view = to_int(tokens[index + 3])
    if not _is_valid_group_header(total_messages, message_number, satellites_in_view):
        return False

    record.type = tokens[index]
    record.total_messages = total_messages
    record.message_number = message_number
    record.satellites_in_view = satellites_in_view

    written = _decode_satellites(tokens, index, record, message_number)

    checksum_index = index + _FIRST_BLOCK_OFFSET + written * _BLOCK_SIZE
    checksum = tokens[checksum_index] if checksum_index < len(tokens) else ""
    record.checksum = "*" + checksum
    return True


def decode_gsv(tokens: list[str], record: GSVData, headers: frozenset[str]) -> bool:
    """Decode every GSV sentence of a token sequence into ``record``.

    Each occurrence updates the group counters and writes its satellites
    into their reassembly slots; later occurrences overwrite earlier ones.

    Args:
        tokens: Token sequence of one decode cycle
        record: Record to update in place, carrying earlier messages
        headers: Header literals accepted as GSV (e.g. {"$GPGSV"})

    Returns:
        True if at least one GSV sentence was decoded

    Raises:
        FormatError: If a numeric field holds malformed text
    """
    valid_data = False
    for index in range(len(tokens) - _HEADER_FIELD_COUNT):
        if tokens[index] in headers and _decode_occurrence(tokens, index, record):
            valid_data = True
    return valid_data
