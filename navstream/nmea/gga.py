"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
           |      |        | |         | | |  |   |     | |     | |
           |      |        | |         | | |  |   |     | |     | +-- DGPS station ID
           |      |        | |         | | |  |   |     | |     +-- Age of DGPS data (s)
           |      |        | |         | | |  |   |     | +-----+-- Geoidal separation + unit
           |      |        | |         | | |  |   +-----+-- Altitude above MSL + unit
           |      |        | |         | | |  +-- HDOP (horizontal dilution)
           |      |        | |         | | +-- Number of satellites
           |      |        | |         | +-- Fix quality (0-6)
           |      |        | +---------+-- Longitude + E/W
           |      +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Dead reckoning mode
"""

from navstream.nmea.fields import (
    convert_to_decimal_degrees,
    to_char,
    to_double,
    to_int,
)
from navstream.nmea.types import GGAData

# GGA has 14 data fields followed by the checksum
_FIELD_COUNT = 15


def _decode_occurrence(tokens: list[str], index: int, record: GGAData) -> None:
    """Decode the GGA sentence whose header sits at ``tokens[index]``.

    Maps token offsets to GGAData attributes:
        +1  -> time
        +2  -> latitude  (+3 N/S)
        +4  -> longitude (+5 E/W)
        +6  -> quality
        +7  -> satellite_count
        +8  -> horizontal_dilution
        +9  -> altitude (+10 unit)
        +11 -> geoidal_separation (+12 unit)
        +13 -> age_of_differential
        +14 -> differential_station_id
        +15 -> checksum
    """
    record.type = tokens[index]
    record.time = tokens[index + 1]
    record.latitude = convert_to_decimal_degrees(
        tokens[index + 2], tokens[index + 3]
    )
    record.longitude = convert_to_decimal_degrees(
        tokens[index + 4], tokens[index + 5]
    )
    record.quality = to_int(tokens[index + 6])
    record.satellite_count = to_int(tokens[index + 7])
    record.horizontal_dilution = to_double(tokens[index + 8])
    record.altitude = to_double(tokens[index + 9])
    record.altitude_unit = to_char(tokens[index + 10])
    record.geoidal_separation = to_double(tokens[index + 11])
    record.geoidal_separation_unit = to_char(tokens[index + 12])
    record.age_of_differential = to_double(tokens[index + 13])
    record.differential_station_id = to_int(tokens[index + 14])
    record.checksum = "*" + tokens[index + 15]


def decode_gga(tokens: list[str], record: GGAData, headers: frozenset[str]) -> bool:
    """Decode every GGA sentence of a token sequence into ``record``.

    Last occurrence wins; occurrences followed by fewer than fifteen tokens
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
