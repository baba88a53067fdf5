"""NMEA record types for decoded sentences.

This module defines one dataclass per supported sentence type plus the
``SentenceType`` tag that the registry uses to look records and decoders up.

Design Decisions:
    1. Typed defaults, not Optional: empty NMEA fields decode to 0, 0.0 or a
       single space. Every attribute therefore always holds a value of its
       declared type, which keeps the records trivially serializable.

    2. Plain values: records carry no change notification. Consumers that
       need to observe changes subscribe to the server broadcaster, which
       publishes copies after every decode cycle.

    3. ``type`` and ``checksum``: every record keeps the header literal it was
       decoded from (e.g. "$GPRMC") and the checksum text prefixed with "*".
       The checksum is captured verbatim and is never verified.
"""

import enum
from dataclasses import dataclass, field


class SentenceType(enum.Enum):
    """Supported NMEA sentence types, valued by their three-letter code."""

    RMC = "RMC"
    GGA = "GGA"
    GSA = "GSA"
    GSV = "GSV"
    VTG = "VTG"


# A GSV sentence carries at most this many satellites
SATELLITES_PER_GSV_MESSAGE = 4

# GSA lists the IDs of up to 12 satellites used in the solution
GSA_SATELLITE_SLOTS = 12


@dataclass
class RMCData:
    """Decoded RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        type: Header literal the record was decoded from (e.g. "$GPRMC").
        time: UTC time in HHMMSS.ss format, kept as text.
        status: 'A' = data valid, 'V' = navigation receiver warning.
        latitude: Decimal degrees, positive = North.
        longitude: Decimal degrees, positive = East.
        speed_knots: Speed over ground in knots.
        course: Course over ground in degrees from true north.
        date: UTC date as the integer DDMMYY (e.g. 230394).
        magnetic_variation: Degrees, negative when the variation is West.
        mode: FAA mode indicator (NMEA 2.3+), ' ' for older receivers.
        checksum: "*" followed by the transmitted checksum.
    """

    type: str = ""
    time: str = ""
    status: str = " "
    latitude: float = 0.0
    longitude: float = 0.0
    speed_knots: float = 0.0
    course: float = 0.0
    date: int = 0
    magnetic_variation: float = 0.0
    mode: str = " "
    checksum: str = ""


@dataclass
class GGAData:
    """Decoded GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        type: Header literal the record was decoded from (e.g. "$GPGGA").
        time: UTC time of the position in HHMMSS.ss format.
        latitude: Decimal degrees, positive = North.
        longitude: Decimal degrees, positive = East.
        quality: Fix quality indicator:
            0 = Invalid (no fix)
            1 = GPS fix (SPS)
            2 = DGPS fix
            4 = RTK Fixed
            5 = RTK Float
            6 = Dead reckoning
        satellite_count: Number of satellites used in the fix.
        horizontal_dilution: HDOP, lower is better.
        altitude: Altitude above mean sea level.
        altitude_unit: Unit of ``altitude`` ('M' = meters).
        geoidal_separation: Height of the geoid above the WGS84 ellipsoid.
        geoidal_separation_unit: Unit of ``geoidal_separation``.
        age_of_differential: Seconds since the last DGPS update.
        differential_station_id: DGPS reference station ID.
        checksum: "*" followed by the transmitted checksum.
    """

    type: str = ""
    time: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    quality: int = 0
    satellite_count: int = 0
    horizontal_dilution: float = 0.0
    altitude: float = 0.0
    altitude_unit: str = " "
    geoidal_separation: float = 0.0
    geoidal_separation_unit: str = " "
    age_of_differential: float = 0.0
    differential_station_id: int = 0
    checksum: str = ""


def _empty_satellite_ids() -> list[int]:
    return [0] * GSA_SATELLITE_SLOTS


@dataclass
class GSAData:
    """Decoded GSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        type: Header literal the record was decoded from (e.g. "$GPGSA").
        selection_mode: 'M' = manual 2D/3D selection, 'A' = automatic.
        fix_type: 1 = no fix, 2 = 2D fix, 3 = 3D fix.
        satellite_ids: PRNs of the satellites used in the solution, always
            12 slots; unused slots are 0.
        position_dilution: PDOP.
        horizontal_dilution: HDOP.
        vertical_dilution: VDOP.
        checksum: "*" followed by the transmitted checksum.
    """

    type: str = ""
    selection_mode: str = " "
    fix_type: int = 0
    satellite_ids: list[int] = field(default_factory=_empty_satellite_ids)
    position_dilution: float = 0.0
    horizontal_dilution: float = 0.0
    vertical_dilution: float = 0.0
    checksum: str = ""


@dataclass
class SatelliteInView:
    """One satellite entry of a GSV group.

    Attributes:
        prn: Satellite PRN number.
        elevation: Elevation in degrees (0-90).
        azimuth: Azimuth in degrees from true north (0-359).
        snr: Signal-to-noise ratio in dB-Hz, 0 when not tracking.
    """

    prn: int = 0
    elevation: int = 0
    azimuth: int = 0
    snr: int = 0


@dataclass
class GSVData:
    """Decoded GSV (GNSS Satellites in View) sentence group.

    A receiver spreads its satellite list over ``total_messages`` physical
    sentences of up to four satellites each. Entries of message ``n`` land at
    indices ``(n - 1) * 4`` to ``(n - 1) * 4 + 3`` of ``satellites``, so a
    complete group reassembles into one ordered list. The list grows as
    higher message numbers arrive and never shrinks.

    Attributes:
        type: Header literal the record was decoded from (e.g. "$GPGSV").
        total_messages: Number of sentences in the group.
        message_number: Sequence number of the last decoded sentence.
        satellites_in_view: Total satellites declared by the group.
        satellites: Reassembled entries; slots not yet written hold
            ``SatelliteInView()`` defaults.
        checksum: "*" followed by the checksum of the last decoded sentence.
    """

    type: str = ""
    total_messages: int = 0
    message_number: int = 0
    satellites_in_view: int = 0
    satellites: list[SatelliteInView] = field(default_factory=list)
    checksum: str = ""

    @property
    def visible_satellites(self) -> list[SatelliteInView]:
        """Entries up to the declared satellite count."""
        return self.satellites[: self.satellites_in_view]


@dataclass
class VTGData:
    """Decoded VTG (Track Made Good and Ground Speed) sentence.

    Attributes:
        type: Header literal the record was decoded from (e.g. "$GPVTG").
        track_true: Track relative to true north in degrees.
        track_magnetic: Track relative to magnetic north in degrees.
        speed_knots: Ground speed in knots.
        speed_kilometers_per_hour: Ground speed in km/h.
        speed_meters_per_second: Ground speed in m/s, derived from km/h.
        mode: FAA mode indicator (NMEA 2.3+), ' ' for older receivers.
        checksum: "*" followed by the transmitted checksum.
    """

    type: str = ""
    track_true: float = 0.0
    track_magnetic: float = 0.0
    speed_knots: float = 0.0
    speed_kilometers_per_hour: float = 0.0
    speed_meters_per_second: float = 0.0
    mode: str = " "
    checksum: str = ""


SentenceRecord = RMCData | GGAData | GSAData | GSVData | VTGData


class DecodeStatus(enum.Enum):
    """Outcome of one decode cycle.

    OK:           tokens were dispatched and no decoder failed
    NO_DATA:      no complete sentence has been framed yet; feed more bytes
    DECODE_ERROR: at least one sentence held a malformed number
    """

    OK = "ok"
    NO_DATA = "no_data"
    DECODE_ERROR = "decode_error"


@dataclass(frozen=True)
class DecodeResult:
    """Status of one decode cycle, with the failure reason if any.

    Attributes:
        status: Outcome of the cycle.
        reason: Human-readable cause for ``DECODE_ERROR``, e.g.
            "GGA: could not convert '4x07.038' to float". None otherwise.
    """

    status: DecodeStatus
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is DecodeStatus.OK
