"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.
This is essential for navigation and sensor fusion applications that need
ground speed and heading data.

VTG Sentence Format:
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N, NMEA 2.3+)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Mode Indicators (FAA mode, NMEA 2.3+):
    A = Autonomous (standard GPS positioning)
    D = Differential (DGPS or RTK)
    E = Estimated (dead reckoning)
    N = Not valid (no fix)

Note: When stationary, the track angle may be empty (no heading when not moving)
and decodes to 0.0.
"""

from navstream.nmea.fields import is_checksum_token, to_char, to_double
from navstream.nmea.types import VTGData

# Eight data fields followed by the mode indicator or the checksum
_FIELD_COUNT = 9

_MODE_OFFSET = 9

# Conversion factor: km/h to m/s
# 1 km/h = 1000m / 3600s = 1/3.6 m/s
_KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND = 3.6


def _decode_mode_and_checksum(tokens: list[str], index: int) -> tuple[str, str]:
    tail = tokens[index + _MODE_OFFSET]
    if is_checksum_token(tail):
        return " ", "*" + tail

    checksum_index = index + _MODE_OFFSET + 1
    checksum = tokens[checksum_index] if checksum_index < len(tokens) else ""
    return to_char(tail), "*" + checksum


def _decode_occurrence(tokens: list[str], index: int, record: VTGData) -> None:
    """Decode the VTG sentence whose header sits at ``tokens[index]``.

    Maps token offsets to VTGData attributes:
        +1 -> track_true (heading relative to true north)
        +3 -> track_magnetic
        +5 -> speed_knots
        +7 -> speed_kilometers_per_hour
        (computed) -> speed_meters_per_second (derived from km/h)
        +9 -> mode, or the checksum on pre-2.3 receivers
    """
    mode, checksum = _decode_mode_and_checksum(tokens, index)
    speed_kilometers_per_hour = to_double(tokens[index + 7])

    record.type = tokens[index]
    record.track_true = to_double(tokens[index + 1])
    record.track_magnetic = to_double(tokens[index + 3])
    record.speed_knots = to_double(tokens[index + 5])
    record.speed_kilometers_per_hour = speed_kilometers_per_hour
    record.speed_meters_per_second = (
        speed_kilometers_per_hour / _KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND
    )
    record.mode = mode
    record.checksum = checksum


def decode_vtg(tokens: list[str], record: VTGData, headers: frozenset[str]) -> bool:
    """Decode every VTG sentence of a token sequence into ``record``.

    Last occurrence wins; occurrences followed by fewer than nine tokens are
    skipped.

    Raises:
        FormatError: If a numeric field holds malformed text
    """
    valid_data = False
    for index in range(len(tokens) - _FIELD_COUNT):
        if tokens[index] in headers:
            _decode_occurrence(tokens, index, record)
            valid_data = True
    return valid_data
