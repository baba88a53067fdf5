"""NMEA 0183 stream framer and sentence decoders."""

from navstream.nmea.fields import FormatError, to_char, to_double, to_int
from navstream.nmea.framer import StreamFramer, tokenize
from navstream.nmea.registry import SentenceRegistry
from navstream.nmea.types import (
    DecodeResult,
    DecodeStatus,
    GGAData,
    GSAData,
    GSVData,
    RMCData,
    SatelliteInView,
    SentenceType,
    VTGData,
)

__all__ = [
    "DecodeResult",
    "DecodeStatus",
    "FormatError",
    "GGAData",
    "GSAData",
    "GSVData",
    "RMCData",
    "SatelliteInView",
    "SentenceRegistry",
    "SentenceType",
    "StreamFramer",
    "VTGData",
    "to_char",
    "to_double",
    "to_int",
    "tokenize",
]
