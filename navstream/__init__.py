"""navstream: streaming NMEA 0183 decoder for GNSS receivers."""

from navstream.gnss import GNSSSnapshot, NMEAReader
from navstream.nmea import (
    DecodeResult,
    DecodeStatus,
    FormatError,
    GGAData,
    GSAData,
    GSVData,
    RMCData,
    SatelliteInView,
    SentenceRegistry,
    SentenceType,
    StreamFramer,
    VTGData,
)

__version__ = "0.1.0"

__all__ = [
    "DecodeResult",
    "DecodeStatus",
    "FormatError",
    "GGAData",
    "GNSSSnapshot",
    "GSAData",
    "GSVData",
    "NMEAReader",
    "RMCData",
    "SatelliteInView",
    "SentenceRegistry",
    "SentenceType",
    "StreamFramer",
    "VTGData",
    "__version__",
]
