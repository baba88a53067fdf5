"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) reports the fix mode, the satellites
used in the navigation solution and the dilution-of-precision figures.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                      |   |   |
           | | |                      |   |   +-- VDOP
           | | |                      |   +-- HDOP
           | | |                      +-- PDOP
           | | +-- IDs of satellites used (12 slots, empty when unused)
           | +-- Fix type (1 = none, 2 = 2D, 3 = 3D)
           +-- Selection mode (M = manual, A = automatic)
"""

from navstream.nmea.fields import to_char, to_double, to_int
from navstream.nmea.types import GSA_SATELLITE_SLOTS, GSAData

# Two mode fields, 12 satellite slots, three DOP values, then the checksum
_FIELD_COUNT = 18

_FIRST_SATELLITE_OFFSET = 3
_PDOP_OFFSET = _FIRST_SATELLITE_OFFSET + GSA_SATELLITE_SLOTS


def _decode_occurrence(tokens: list[str], index: int, record: GSAData) -> None:
    satellites_start = index + _FIRST_SATELLITE_OFFSET
    satellite_tokens = tokens[satellites_start : satellites_start + GSA_SATELLITE_SLOTS]

    record.type = tokens[index]
    record.selection_mode = to_char(tokens[index + 1])
    record.fix_type = to_int(tokens[index + 2])
    record.satellite_ids = [to_int(token) for token in satellite_tokens]
    record.position_dilution = to_double(tokens[index + _PDOP_OFFSET])
    record.horizontal_dilution = to_double(tokens[index + _PDOP_OFFSET + 1])
    record.vertical_dilution = to_double(tokens[index + _PDOP_OFFSET + 2])
    record.checksum = "*" + tokens[index + _PDOP_OFFSET + 3]


def decode_gsa(tokens: list[str], record: GSAData, headers: frozenset[str]) -> bool:
    """Decode every GSA sentence of a token sequence into ``record``.

    Last occurrence wins; occurrences followed by fewer than eighteen tokens
    are skipped.

    Raises:
        FormatError: If a numeric field holds malformed text
    """
    valid_data = False
    for index in range(len(tokens) - _FIELD_COUNT):
        if tokens[index] in headers:
            _decode_occurrence(tokens, index, record)
            valid_data = True
    return valid_data
