"""GNSS snapshot type combining every decoded record."""

from dataclasses import dataclass, field

from navstream.nmea.registry import SentenceRegistry
from navstream.nmea.types import GGAData, GSAData, GSVData, RMCData, VTGData


@dataclass
class GNSSSnapshot:
    """Copies of every current record, taken after one decode cycle.

    ``NMEAReader`` emits one ``GNSSSnapshot`` per completed cycle. Each
    record holds its last successfully decoded values, or the defaults if
    that sentence type has not been received yet (``record.type == ""``).

    Attributes:
        rmc: Position, time, date, speed and course.
        gga: Position, fix quality, altitude and satellite count.
        gsa: Fix type, active satellite IDs and DOP values.
        gsv: Reassembled satellites-in-view list.
        vtg: Track and ground speed.
        headers: Every distinct sentence header seen, including types that
            are not decoded (e.g. "$GPTXT").
        updated: Codes of the sentence types decoded in this cycle
            (e.g. ["RMC", "GGA"]).

    Example:
        >>> with NMEAReader("/dev/ttyUSB0") as gnss:
        ...     snapshot = next(iter(gnss))
        >>> snapshot.rmc.latitude
        48.11729999999999
        >>> snapshot.headers
        ['$GPRMC', '$GPGGA', '$GPGSA', '$GPGSV']
    """

    rmc: RMCData
    gga: GGAData
    gsa: GSAData
    gsv: GSVData
    vtg: VTGData
    headers: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)

    @classmethod
    def from_registry(cls, registry: SentenceRegistry) -> "GNSSSnapshot":
        """Take copies of the registry's current state."""
        return cls(
            rmc=registry.rmc,
            gga=registry.gga,
            gsa=registry.gsa,
            gsv=registry.gsv,
            vtg=registry.vtg,
            headers=registry.discovered_headers(),
            updated=[sentence_type.value for sentence_type in registry.updated_types],
        )
