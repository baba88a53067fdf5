"""RMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) carries the essentials of a fix:
time, date, position, speed and course over ground, and a validity status.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
           |      | |        | |         | |     |     |      |     |
           |      | |        | |         | |     |     |      +-----+-- Magnetic variation + E/W
           |      | |        | |         | |     |     +-- Date (DDMMYY)
           |      | |        | |         | |     +-- Course over ground (degrees true)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A = valid, V = warning)
           +-- UTC time (HHMMSS.ss)

NMEA 2.3 and later append an FAA mode indicator (A/D/E/N) before the
checksum, which moves the checksum one token to the right.

Offsets below are relative to the header token. The token sequence is split
on ',' and '*', so the checksum is a token of its own.
"""

from navstream.nmea.fields import (
    convert_to_decimal_degrees,
    is_checksum_token,
    to_char,
    to_double,
    to_int,
)
from navstream.nmea.types import RMCData

# Tokens that must follow the header for the sentence to be decoded:
# eleven data fields plus the checksum of a pre-2.3 sentence
_FIELD_COUNT = 12

_MODE_OFFSET = 12


def _decode_magnetic_variation(value: str, direction: str) -> float:
    """Return the magnetic variation in degrees, negative when West."""
    variation = to_double(value)
    if to_char(direction) == "W":
        return -variation
    return variation


def _decode_mode_and_checksum(tokens: list[str], index: int) -> tuple[str, str]:
    """Pick the pre-2.3 or 2.3+ tail layout and return (mode, checksum)."""
    tail = tokens[index + _MODE_OFFSET]
    if is_checksum_token(tail):
        return " ", "*" + tail

    checksum_index = index + _MODE_OFFSET + 1
    checksum = tokens[checksum_index] if checksum_index < len(tokens) else ""
    return to_char(tail), "*" + checksum


def _decode_occurrence(tokens: list[str], index: int, record: RMCData) -> None:
    """Decode the RMC sentence whose header sits at ``tokens[index]``.

    Maps token offsets to RMCData attributes:
        +1  -> time
        +2  -> status
        +3  -> latitude  (+4 N/S)
        +5  -> longitude (+6 E/W)
        +7  -> speed_knots
        +8  -> course
        +9  -> date
        +10 -> magnetic_variation (+11 E/W)
        +12 -> mode, or the checksum on pre-2.3 receivers
    """
    mode, checksum = _decode_mode_and_checksum(tokens, index)

    record.type = tokens[index]
    record.time = tokens[index + 1]
    record.status = to_char(tokens[index + 2])
    record.latitude = convert_to_decimal_degrees(
        tokens[index + 3], tokens[index + 4]
    )
    record.longitude = convert_to_decimal_degrees(
        tokens[index + 5], tokens[index + 6]
    )
    record.speed_knots = to_double(tokens[index + 7])
    record.course = to_double(tokens[index + 8])
    record.date = to_int(tokens[index + 9])
    record.magnetic_variation = _decode_magnetic_variation(
        tokens[index + 10], tokens[index + 11]
    )
    record.mode = mode
    record.checksum = checksum


def decode_rmc(tokens: list[str], record: RMCData, headers: frozenset[str]) -> bool:
    """Decode every RMC sentence of a token sequence into ``record``.

    The whole sequence is scanned; when the header occurs more than once the
    last occurrence wins. Occurrences followed by fewer than twelve tokens
    are skipped.

    Args:
        tokens: Token sequence of one decode cycle
        record: Record to overwrite in place
        headers: Header literals accepted as RMC (e.g. {"$GPRMC"})

    Returns:
        True if at least one RMC sentence was decoded

    Raises:
        FormatError: If a numeric field holds malformed text
    """
    valid_data = False
    for index in range(len(tokens) - _FIELD_COUNT):
        if tokens[index] in headers:
            _decode_occurrence(tokens, index, record)
            valid_data = True
    return valid_data
